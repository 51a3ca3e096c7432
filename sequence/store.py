"""
store.py — Sequence Store & Generator
======================================
Single source of truth for the values being sorted or searched.
Algorithms mutate it in place (through the StepBuilder), observers
read it between steps.

Responsibilities:
  1. Indexed access                         (get / set / exchange)
  2. Queries                                (length, is_sorted, snapshot)
  3. Generation factory methods             (random, sorted, shuffled)
  4. Import from text                       ("5, 3, 8" → store)
  5. Serialisation round-trip               (to_dict / from_dict)

Design decisions:
  - Length is fixed at construction.  There is no append / remove;
    a run only ever moves values between existing slots.
  - `set` and `exchange` are the only mutators.  Algorithm code never
    calls them directly; StepBuilder does, so every mutation is
    paired with exactly one Step.
  - Bad indices raise IndexOutOfRange instead of wrapping around the
    way negative Python indices would.
"""

import random
from typing import Iterable, List, Optional, Union

import config
from errors import IndexOutOfRange
from sequence.validation import parse_values, validate_values

Number = Union[int, float]


class SequenceStore:
    """
    Attributes:
        _values : the backing list; never exposed, only copied out.
    """

    __slots__ = ("_values",)

    def __init__(self, values: Iterable[Number] = ()):
        self._values: List[Number] = list(values)

    # ==================================================================
    # INDEXED ACCESS
    # ==================================================================
    def get(self, i: int) -> Number:
        self._check(i)
        return self._values[i]

    def set(self, i: int, value: Number) -> None:
        self._check(i)
        self._values[i] = value

    def exchange(self, i: int, j: int) -> None:
        self._check(i)
        self._check(j)
        self._values[i], self._values[j] = self._values[j], self._values[i]

    def _check(self, i: int) -> None:
        if not 0 <= i < len(self._values):
            raise IndexOutOfRange(i, len(self._values))

    # ==================================================================
    # QUERIES
    # ==================================================================
    def length(self) -> int:
        return len(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def snapshot(self) -> List[Number]:
        """Copy of the current values, safe to keep after the run moves on."""
        return list(self._values)

    def is_sorted(self) -> bool:
        return all(self._values[k - 1] <= self._values[k] for k in range(1, len(self._values)))

    # ==================================================================
    # GENERATORS — Factory class-methods
    # ==================================================================
    @classmethod
    def generate_random(
        cls,
        count: int = config.DEFAULT_RANDOM_COUNT,
        low: int = config.RANDOM_VALUE_MIN,
        high: int = config.RANDOM_VALUE_MAX,
        seed: Optional[int] = None,
    ) -> "SequenceStore":
        """Uniform random bar heights in [low, high]."""
        rng = random.Random(seed)
        return cls(rng.randint(low, high) for _ in range(count))

    @classmethod
    def generate_sorted(cls, count: int = config.DEFAULT_RANDOM_COUNT, seed: Optional[int] = None) -> "SequenceStore":
        """
        Ascending values spaced roughly two apart: (i + 1) * 2 + jitter,
        jitter in 0..2.  Neighbours can tie, so the result is
        non-decreasing rather than strictly increasing.
        """
        rng = random.Random(seed)
        values = sorted((i + 1) * 2 + rng.randint(0, 2) for i in range(count))
        return cls(values)

    def shuffled(self, seed: Optional[int] = None) -> "SequenceStore":
        """Fisher–Yates shuffle into a new store; this one is untouched."""
        rng = random.Random(seed)
        values = self.snapshot()
        for i in range(len(values) - 1, 0, -1):
            j = rng.randint(0, i)
            values[i], values[j] = values[j], values[i]
        return SequenceStore(values)

    # ---------- Import from text ----------
    @classmethod
    def from_text(cls, text: str, max_length: int = config.MAX_SORT_ELEMENTS) -> "SequenceStore":
        values = parse_values(text)
        validate_values(values, max_length=max_length)
        return cls(values)

    # ==================================================================
    # SERIALISATION
    # ==================================================================
    def to_dict(self) -> dict:
        return {"values": self.snapshot()}

    @classmethod
    def from_dict(cls, data: dict) -> "SequenceStore":
        return cls(data.get("values", []))

    def __repr__(self) -> str:
        return f"SequenceStore({self._values!r})"
