"""
errors.py — Error Taxonomy
===========================
Every exception the engine raises on purpose.

    VisualizerError
      ├── ValidationError   – bad input; rejected before a run begins
      ├── AlreadyRunning    – start requested while a run is active
      └── IndexOutOfRange   – an algorithm touched a slot that doesn't exist

Not-found search results, early-exit sorts and user cancellation are
normal outcomes and are never raised.
"""


class VisualizerError(Exception):
    """Base class for all engine errors."""


class ValidationError(VisualizerError, ValueError):
    """Malformed, empty or oversized input (or an unknown algorithm / speed)."""


class AlreadyRunning(VisualizerError, RuntimeError):
    """A run is already active on this controller."""


class IndexOutOfRange(VisualizerError, IndexError):
    """Internal invariant violation: an algorithm indexed past the sequence."""

    def __init__(self, index: int, length: int):
        super().__init__(f"Index {index} out of range for sequence of length {length}")
        self.index  = index
        self.length = length


__all__ = [
    "VisualizerError",
    "ValidationError",
    "AlreadyRunning",
    "IndexOutOfRange",
]
