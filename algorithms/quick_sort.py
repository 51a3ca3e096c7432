"""
quick_sort.py — Quick Sort (Lomuto partition)
==============================================
Pivot = last slot of the range.  One left-to-right scan keeps a
boundary: everything at or left of it is <= pivot.  A scanned value
that belongs below the boundary is exchanged into place; the pivot is
then dropped just past the boundary, where it is final.

Self-exchanges (boundary already equal to the scan index, or the
pivot already in its final slot) are skipped and emit no step.
"""

from typing import Generator, List

from sequence import SequenceStore
from algorithms.step import Step, StepBuilder


PSEUDOCODE: List[str] = [
    "quickSort(a, low, high):",
    "    if low < high:",
    "        p ← partition(a, low, high)",
    "        quickSort(a, low, p-1); quickSort(a, p+1, high)",
    "partition(a, low, high):",
    "    pivot ← a[high]; b ← low - 1",
    "    for j in low .. high-1:",
    "        if a[j] ≤ pivot: b ← b + 1; swap(a[b], a[j])",
    "    swap(a[b+1], a[high]); return b + 1",
]


def quick_sort(store: SequenceStore, sb: StepBuilder) -> Generator[Step, None, None]:
    if len(store) > 1:
        yield from _quick_sort(store, sb, 0, len(store) - 1)
    yield sb.done(explanation="Sorted")


def _quick_sort(store: SequenceStore, sb: StepBuilder, low: int, high: int) -> Generator[Step, None, None]:
    if low < high:
        p = yield from _partition(store, sb, low, high)
        yield from _quick_sort(store, sb, low, p - 1)
        yield from _quick_sort(store, sb, p + 1, high)
    elif low == high:
        # single-slot range is already in its final place
        yield sb.mark_checked(low)


def _partition(store: SequenceStore, sb: StepBuilder, low: int, high: int) -> Generator[Step, None, int]:
    yield sb.mark_range(low, high, explanation=f"Partitioning [{low}...{high}]")
    yield sb.pivot(high)

    pivot    = store.get(high)
    boundary = low - 1

    for j in range(low, high):
        yield sb.compare(i=j, j=high)
        if store.get(j) <= pivot:
            boundary += 1
            if boundary != j:
                yield sb.exchange(boundary, j)

    final = boundary + 1
    if final != high:
        yield sb.exchange(final, high)
    yield sb.mark_checked(final, explanation=f"Pivot {pivot} settled at {final}")
    return final
