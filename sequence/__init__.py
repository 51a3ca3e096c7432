"""
sequence/
---------
Core data layer.  Public API:

    from sequence import SequenceStore
    from sequence import parse_values, validate_values, validate_count
"""

from sequence.validation import parse_values, validate_values, validate_count
from sequence.store      import SequenceStore

__all__ = [
    "SequenceStore",
    "parse_values",
    "validate_values",
    "validate_count",
]
