"""
validation.py — Input checks
=============================
Everything a caller hands the engine goes through here before a run
can start.  Failures raise ValidationError and the run never begins.
"""

import logging
import math
import numbers
from typing import List, Sequence

import config
from errors import ValidationError

logger = logging.getLogger(__name__)


def parse_values(text: str) -> List[float]:
    """
    Parse a comma / whitespace separated list of numbers.

        "5, 3, 8"   → [5, 3, 8]
        "1.5 2 10"  → [1.5, 2, 10]
    """
    if not isinstance(text, str):
        raise ValidationError(f"Expected text, got {type(text).__name__}")
    tokens = [t for t in text.replace(",", " ").split() if t]
    values = []
    for tok in tokens:
        try:
            num = float(tok)
        except ValueError:
            raise ValidationError(f"Not a number: {tok!r}") from None
        if not math.isfinite(num):
            raise ValidationError(f"Not a finite number: {tok!r}")
        values.append(int(num) if num.is_integer() else num)
    return values


def validate_values(values: Sequence, max_length: int = config.MAX_SORT_ELEMENTS) -> None:
    if len(values) == 0:
        raise ValidationError("Enter at least one value")
    if len(values) > max_length:
        raise ValidationError(f"Maximum {max_length} elements allowed (got {len(values)})")
    for v in values:
        # bool is an int subclass; a checkbox leaking in is still bad input
        if isinstance(v, bool) or not isinstance(v, numbers.Real):
            raise ValidationError(f"Not a number: {v!r}")
        if not math.isfinite(v):
            raise ValidationError(f"Not a finite number: {v!r}")
        if v <= 0:
            raise ValidationError(f"Values must be positive (got {v})")
    logger.debug("validated %d values", len(values))


def validate_count(count, max_length: int = config.MAX_SORT_ELEMENTS) -> int:
    """Random-generation size: an int in [MIN_RANDOM_ELEMENTS, max_length]."""
    if isinstance(count, bool) or not isinstance(count, int):
        raise ValidationError(f"Count must be an integer (got {count!r})")
    if not config.MIN_RANDOM_ELEMENTS <= count <= max_length:
        raise ValidationError(
            f"Count must be between {config.MIN_RANDOM_ELEMENTS} and {max_length} (got {count})"
        )
    return count
