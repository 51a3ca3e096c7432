"""
insertion_sort.py — Insertion Sort
===================================
Grows a sorted prefix.  Each newly admitted value is walked left by
adjacent exchanges until its left neighbour is no larger.
"""

from typing import Generator, List

from sequence import SequenceStore
from algorithms.step import Step, StepBuilder


PSEUDOCODE: List[str] = [
    "for i in 1 .. n-1:",
    "    j ← i",
    "    while j > 0 and a[j-1] > a[j]:",
    "        swap(a[j-1], a[j]); j ← j - 1",
]


def insertion_sort(store: SequenceStore, sb: StepBuilder) -> Generator[Step, None, None]:
    n = len(store)

    for i in range(1, n):
        j = i
        yield sb.pivot(j, explanation=f"Inserting element {i + 1}/{n}")

        while j > 0:
            yield sb.compare(i=j - 1, j=j)
            if store.get(j - 1) > store.get(j):
                yield sb.exchange(j - 1, j)
                j -= 1
            else:
                break

    yield sb.done(explanation="Sorted")
