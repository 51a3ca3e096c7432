"""
exponential_search.py — Exponential Search
===========================================
Check slot 0, then double i while a[i] <= target.  The target, if
present, lies in [⌊i/2⌋, min(i, n-1)], which binary search finishes.
Requires ascending input.
"""

from typing import Generator, List

from sequence import SequenceStore
from algorithms.step import Step, StepBuilder
from algorithms.results import SearchResult, finish
from algorithms.binary_search import search_range


PSEUDOCODE: List[str] = [
    "if a[0] = target: return 0",
    "i ← 1",
    "while i < n and a[i] ≤ target: i ← i × 2",
    "return binarySearch(a, ⌊i/2⌋, min(i, n-1))",
]


def exponential_search(store: SequenceStore, sb: StepBuilder, target) -> Generator[Step, None, SearchResult]:
    n = len(store)
    if n == 0:
        return (yield from finish(sb, SearchResult.not_found()))

    yield sb.compare(index=0, target=target)
    if store.get(0) == target:
        return (yield from finish(sb, SearchResult(True, 0)))

    i = 1
    while i < n:
        yield sb.compare(index=i, target=target, explanation=f"Doubling probe at index {i}")
        if store.get(i) > target:
            break
        yield sb.mark_checked(*range(i // 2, i))
        i *= 2

    left, right = i // 2, min(i, n - 1)
    yield sb.mark_range(left, right, explanation=f"Binary search in [{left}...{right}]")
    result = yield from search_range(store, sb, target, left, right)
    return (yield from finish(sb, result))
