"""
statistics.py — Run Statistics
===============================
Counters the controller keeps while driving a run.

The recorder is the only writer and is driven exclusively by the
Steps that actually reach the observer: one compare step → one
comparison, one exchange step → one exchange.  Observers only ever
receive frozen `Statistics` snapshots.
"""

from dataclasses import dataclass
from typing import Optional

from algorithms.step import Step, StepKind


@dataclass(frozen=True)
class Statistics:
    comparisons: int           = 0
    exchanges:   int           = 0
    inversions:  Optional[int] = None     # sorting runs only

    def to_dict(self) -> dict:
        return {
            "comparisons": self.comparisons,
            "exchanges":   self.exchanges,
            "inversions":  self.inversions,
        }


class StatisticsRecorder:
    def __init__(self, inversions: Optional[int] = None):
        self.comparisons = 0
        self.exchanges   = 0
        self.inversions  = inversions

    def record(self, step: Step) -> bool:
        """Count `step`.  Returns True if a counter changed."""
        if step.kind is StepKind.COMPARE:
            self.comparisons += 1
            return True
        if step.kind is StepKind.EXCHANGE:
            self.exchanges += 1
            return True
        return False

    def snapshot(self) -> Statistics:
        return Statistics(self.comparisons, self.exchanges, self.inversions)
