"""
selection_sort.py — Selection Sort
===================================
For each slot i, scan the unsorted tail for the minimum and move it
into i with at most one exchange.
"""

from typing import Generator, List

from sequence import SequenceStore
from algorithms.step import Step, StepBuilder


PSEUDOCODE: List[str] = [
    "for i in 0 .. n-2:",
    "    min ← i",
    "    for j in i+1 .. n-1:",
    "        if a[j] < a[min]: min ← j",
    "    if min ≠ i: swap(a[i], a[min])",
]


def selection_sort(store: SequenceStore, sb: StepBuilder) -> Generator[Step, None, None]:
    n = len(store)

    for i in range(n - 1):
        min_index = i
        yield sb.pivot(min_index, explanation=f"Finding minimum {i + 1}/{n}")

        for j in range(i + 1, n):
            yield sb.compare(i=j, j=min_index)
            if store.get(j) < store.get(min_index):
                min_index = j
                yield sb.pivot(min_index)

        if min_index != i:
            yield sb.exchange(i, min_index)
        yield sb.mark_checked(i)

    if n > 1:
        yield sb.mark_checked(n - 1)
    yield sb.done(explanation="Sorted")
