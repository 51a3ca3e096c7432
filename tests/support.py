"""
Shared helpers for the test suite.

drain() drives an algorithm generator directly, with no controller,
the same way a recording observer would see it.
"""

from typing import Any, List, Sequence, Tuple

from sequence import SequenceStore
from algorithms import StepBuilder, StepKind
from algorithms.step import Step


def drain(fn, values: Sequence, *args) -> Tuple[SequenceStore, List[Step], Any]:
    store = SequenceStore(values)
    sb    = StepBuilder(store)
    gen   = fn(store, sb, *args)
    steps = []
    while True:
        try:
            steps.append(next(gen))
        except StopIteration as stop:
            return store, steps, stop.value


def count(steps: List[Step], kind: StepKind) -> int:
    return sum(1 for s in steps if s.kind is kind)


def brute_force_inversions(values: Sequence) -> int:
    n = len(values)
    return sum(1 for i in range(n) for j in range(i + 1, n) if values[i] > values[j])
