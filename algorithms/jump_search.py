"""
jump_search.py — Jump Search
=============================
Block size step = ⌊√n⌋.  Probe the last slot of each block; while it
is still below the target, rule the whole block out and jump.  The
first block whose last slot is >= target is then scanned linearly.

Every probe is a comparison, including the one that stops the jumping.
Requires ascending input.
"""

import math
from typing import Generator, List

from sequence import SequenceStore
from algorithms.step import Step, StepBuilder
from algorithms.results import SearchResult, finish


PSEUDOCODE: List[str] = [
    "step ← ⌊√n⌋; prev ← 0; end ← step",
    "while a[min(end, n)-1] < target:",
    "    prev ← end; end ← end + step",
    "    if prev ≥ n: return NOT FOUND",
    "for i in prev .. min(end, n)-1:",
    "    if a[i] = target: return i",
    "return NOT FOUND",
]


def jump_search(store: SequenceStore, sb: StepBuilder, target) -> Generator[Step, None, SearchResult]:
    n = len(store)
    if n == 0:
        return (yield from finish(sb, SearchResult.not_found()))

    step = math.isqrt(n)
    prev = 0
    end  = step

    while True:
        probe = min(end, n) - 1
        yield sb.compare(index=probe, target=target, explanation=f"Jump probe at index {probe}")
        if store.get(probe) >= target:
            break

        yield sb.mark_checked(*range(prev, min(end, n)))
        prev = end
        end += step
        if prev >= n:
            return (yield from finish(sb, SearchResult.not_found()))

    block_end = min(end, n)
    yield sb.mark_range(prev, block_end - 1, explanation=f"Linear scan of block [{prev}...{block_end - 1}]")

    for i in range(prev, block_end):
        yield sb.compare(index=i, target=target)
        if store.get(i) == target:
            return (yield from finish(sb, SearchResult(True, i)))
        yield sb.mark_checked(i)

    return (yield from finish(sb, SearchResult.not_found()))
