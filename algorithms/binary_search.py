"""
binary_search.py — Binary Search
=================================
Halve [left, right] around mid = ⌊(left + right) / 2⌋.  One comparison
per iteration: equal → found, smaller → go right, larger → go left.
Requires ascending input.

`search_range` is also the second phase of exponential search.
"""

from typing import Generator, List

from sequence import SequenceStore
from algorithms.step import Step, StepBuilder
from algorithms.results import SearchResult, finish


PSEUDOCODE: List[str] = [
    "left ← 0; right ← n-1",
    "while left ≤ right:",
    "    mid ← ⌊(left + right) / 2⌋",
    "    if a[mid] = target: return mid",
    "    if a[mid] < target: left ← mid + 1",
    "    else: right ← mid - 1",
    "return NOT FOUND",
]


def binary_search(store: SequenceStore, sb: StepBuilder, target) -> Generator[Step, None, SearchResult]:
    result = yield from search_range(store, sb, target, 0, len(store) - 1)
    return (yield from finish(sb, result))


def search_range(
    store: SequenceStore,
    sb: StepBuilder,
    target,
    left: int,
    right: int,
) -> Generator[Step, None, SearchResult]:
    while left <= right:
        yield sb.mark_range(left, right, explanation=f"Searching [{left}...{right}]")
        mid = (left + right) // 2
        yield sb.compare(index=mid, target=target)

        value = store.get(mid)
        if value == target:
            return SearchResult(True, mid)

        if value < target:
            yield sb.mark_checked(*range(left, mid + 1))
            left = mid + 1
        else:
            yield sb.mark_checked(*range(mid, right + 1))
            right = mid - 1

    return SearchResult.not_found()
