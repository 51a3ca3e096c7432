"""
heap_sort.py — Heap Sort
=========================
Phase 1: build a max-heap by sifting down every parent, last to root.
Phase 2: swap the root (max) behind the heap, shrink, re-sift.

Each child-vs-largest comparison is one compare step.
"""

from typing import Generator, List

from sequence import SequenceStore
from algorithms.step import Step, StepBuilder


PSEUDOCODE: List[str] = [
    "for i in ⌊n/2⌋-1 down to 0: siftDown(a, n, i)",
    "for end in n-1 down to 1:",
    "    swap(a[0], a[end]); siftDown(a, end, 0)",
    "siftDown(a, size, i):",
    "    largest ← max of i, 2i+1, 2i+2 within size",
    "    if largest ≠ i: swap(a[i], a[largest]); siftDown(a, size, largest)",
]


def heap_sort(store: SequenceStore, sb: StepBuilder) -> Generator[Step, None, None]:
    n = len(store)

    if n > 1:
        yield sb.mark_range(0, n - 1, explanation="Building max heap")
    for i in range(n // 2 - 1, -1, -1):
        yield from _sift_down(store, sb, n, i)

    for end in range(n - 1, 0, -1):
        yield sb.exchange(0, end, explanation=f"Extracting maximum {n - end}/{n}")
        yield sb.mark_checked(end)
        yield from _sift_down(store, sb, end, 0)

    if n > 1:
        yield sb.mark_checked(0)
    yield sb.done(explanation="Sorted")


def _sift_down(store: SequenceStore, sb: StepBuilder, size: int, i: int) -> Generator[Step, None, None]:
    largest = i
    left    = 2 * i + 1
    right   = 2 * i + 2

    if left < size:
        yield sb.compare(i=left, j=largest)
        if store.get(left) > store.get(largest):
            largest = left

    if right < size:
        yield sb.compare(i=right, j=largest)
        if store.get(right) > store.get(largest):
            largest = right

    if largest != i:
        yield sb.exchange(i, largest)
        yield from _sift_down(store, sb, size, largest)
