"""
linear_search.py — Linear Search
=================================
Left to right, one comparison per visited slot.  Works on any order.
"""

from typing import Generator, List

from sequence import SequenceStore
from algorithms.step import Step, StepBuilder
from algorithms.results import SearchResult, finish


PSEUDOCODE: List[str] = [
    "for i in 0 .. n-1:",
    "    if a[i] = target: return i",
    "return NOT FOUND",
]


def linear_search(store: SequenceStore, sb: StepBuilder, target) -> Generator[Step, None, SearchResult]:
    for i in range(len(store)):
        yield sb.compare(index=i, target=target)
        if store.get(i) == target:
            return (yield from finish(sb, SearchResult(True, i)))
        yield sb.mark_checked(i)

    return (yield from finish(sb, SearchResult.not_found()))
