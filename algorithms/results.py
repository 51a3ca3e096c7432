"""
results.py — Search outcome
============================
Not-found is a normal result (index -1), never an exception.
"""

from dataclasses import dataclass
from typing import Generator

from algorithms.step import Step, StepBuilder


@dataclass(frozen=True)
class SearchResult:
    found: bool = False
    index: int  = -1

    @classmethod
    def not_found(cls) -> "SearchResult":
        return cls(False, -1)

    def to_dict(self) -> dict:
        return {"found": self.found, "index": self.index}


def finish(sb: StepBuilder, result: SearchResult) -> Generator[Step, None, SearchResult]:
    """Emit the closing `done` step and hand the result back to the caller."""
    if result.found:
        text = f"Found at index {result.index}"
    else:
        text = "Not found"
    yield sb.done(explanation=text, found=result.found, index=result.index)
    return result
