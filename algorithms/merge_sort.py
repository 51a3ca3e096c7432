"""
merge_sort.py — Merge Sort
===========================
Top-down: halve [start, end], sort both halves, merge.

The merge copies both halves into private buffers and writes the
merged output back with `assign` steps (a value can travel more than
one slot, so it is not an exchange).

If the run is cancelled while a merge is in flight the generator is
closed at its current yield.  The `finally` block then writes the
still-buffered values into the unwritten tail of the range, so the
store is always a permutation of the input.
"""

from typing import Generator, List

from sequence import SequenceStore
from algorithms.step import Step, StepBuilder


PSEUDOCODE: List[str] = [
    "mergeSort(a, start, end):",
    "    if start ≥ end: return",
    "    mid ← ⌊(start + end) / 2⌋",
    "    mergeSort(a, start, mid); mergeSort(a, mid+1, end)",
    "    merge(a, start, mid, end)",
]


def merge_sort(store: SequenceStore, sb: StepBuilder) -> Generator[Step, None, None]:
    yield from _merge_sort(store, sb, 0, len(store) - 1)
    yield sb.done(explanation="Sorted")


def _merge_sort(store: SequenceStore, sb: StepBuilder, start: int, end: int) -> Generator[Step, None, None]:
    if start >= end:
        return
    mid = (start + end) // 2
    yield from _merge_sort(store, sb, start, mid)
    yield from _merge_sort(store, sb, mid + 1, end)
    yield from _merge(store, sb, start, mid, end)


def _merge(store: SequenceStore, sb: StepBuilder, start: int, mid: int, end: int) -> Generator[Step, None, None]:
    yield sb.mark_range(start, end, explanation=f"Merging [{start}...{mid}] and [{mid + 1}...{end}]")

    left  = [store.get(k) for k in range(start, mid + 1)]
    right = [store.get(k) for k in range(mid + 1, end + 1)]
    i = j = 0

    try:
        while i < len(left) and j < len(right):
            yield sb.compare(left=left[i], right=right[j], index=start + i + j)
            # <= keeps equal values in their original order
            if left[i] <= right[j]:
                value = left[i]
                i += 1
            else:
                value = right[j]
                j += 1
            yield sb.assign(start + i + j - 1, value)

        while i < len(left):
            i += 1
            yield sb.assign(start + i + j - 1, left[i - 1])

        while j < len(right):
            j += 1
            yield sb.assign(start + i + j - 1, right[j - 1])
    finally:
        # slots start .. start+i+j-1 hold merged output; refill the rest
        for k, value in enumerate(left[i:] + right[j:], start=start + i + j):
            store.set(k, value)
