"""
bubble_sort.py — Bubble Sort
=============================
Repeated adjacent passes.  After pass i the largest remaining value
has bubbled to slot n-1-i and is settled for good.  A pass with no
exchange proves the prefix is sorted and ends the run early.
"""

from typing import Generator, List

from sequence import SequenceStore
from algorithms.step import Step, StepBuilder


PSEUDOCODE: List[str] = [
    "for i in 0 .. n-2:",
    "    swapped ← false",
    "    for j in 0 .. n-2-i:",
    "        if a[j] > a[j+1]:",
    "            swap(a[j], a[j+1]); swapped ← true",
    "    if not swapped: break",
]


def bubble_sort(store: SequenceStore, sb: StepBuilder) -> Generator[Step, None, None]:
    n = len(store)

    for i in range(n - 1):
        swapped = False
        yield sb.mark_range(0, n - 1 - i, explanation=f"Pass {i + 1}/{n - 1}")

        for j in range(n - 1 - i):
            yield sb.compare(i=j, j=j + 1)
            if store.get(j) > store.get(j + 1):
                yield sb.exchange(j, j + 1)
                swapped = True

        yield sb.mark_checked(n - 1 - i, explanation=f"Slot {n - 1 - i} settled")
        if not swapped:
            break

    yield sb.done(explanation="Sorted")
