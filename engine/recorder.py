"""
recorder.py — Run Recorder & Analytics
========================================
Records a complete headless run (every Step, zero delay) on a private
copy of the input, then computes the metrics the analytics panel and
Comparison Mode need.

Usage:
    rec = Recorder()
    rec.start(algo_key="quick_sort", values=[5, 3, 8, 1])
    metrics = rec.run_to_completion()
    rec.export()                     # plain dict, JSON-ready

Comparison Mode:
    Run two Recorders on the SAME values, then compare(rec1, rec2)
    → ComparisonResult.  best_algorithm() ranks a whole family.
"""

import time
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

from config import EngineConfig
from errors import ValidationError
from algorithms import Family, algorithms_by_family, get_algorithm
from algorithms.step import Step, StepKind
from engine.visualizer import RunResult, Visualizer


# ---------------------------------------------------------------------------
# RunMetrics — one flat record per recorded run
# ---------------------------------------------------------------------------
@dataclass
class RunMetrics:
    algo_key:     str           = ""
    algo_label:   str           = ""
    size:         int           = 0
    comparisons:  int           = 0
    exchanges:    int           = 0
    assignments:  int           = 0          # merge sort's value copies
    inversions:   Optional[int] = None
    total_steps:  int           = 0
    wall_time_ms: float         = 0.0
    found:        Optional[bool] = None      # searches only
    index:        Optional[int]  = None
    presorted:    bool          = False      # a search had to sort first


# ---------------------------------------------------------------------------
# ComparisonResult — two recorded runs side by side
# ---------------------------------------------------------------------------
@dataclass
class ComparisonResult:
    left:  RunMetrics = field(default_factory=RunMetrics)
    right: RunMetrics = field(default_factory=RunMetrics)
    # derived
    winner_comparisons: str = ""
    winner_exchanges:   str = ""
    winner_steps:       str = ""


# ---------------------------------------------------------------------------
# Recorder
# ---------------------------------------------------------------------------
class Recorder:
    """
    Attributes:
        steps   : Every Step of the run, in delivery order.
        result  : The RunResult (available after run_to_completion).
        metrics : Computed RunMetrics (available after run_to_completion).
    """

    def __init__(self):
        self.steps:   List[Step]           = []
        self.result:  Optional[RunResult]  = None
        self.metrics: Optional[RunMetrics] = None

        self._algo_key: str                  = ""
        self._target:   Any                  = None
        self._input:    List                 = []
        self._vis:      Optional[Visualizer] = None

    # ------------------------------------------------------------------
    # Setup & run
    # ------------------------------------------------------------------
    def start(self, algo_key: str, values: Sequence, target=None) -> None:
        if get_algorithm(algo_key) is None:
            raise ValidationError(f"Unknown algorithm: {algo_key}")

        self._algo_key = algo_key
        self._target   = target
        self._input    = list(values)
        self.steps     = []
        self.result    = None
        self.metrics   = None
        self._vis      = Visualizer(values, on_step=self.record_step, engine_config=EngineConfig.instant())

    def run_to_completion(self) -> RunMetrics:
        if self._vis is None:
            raise RuntimeError("Call start() first.")

        t0 = time.monotonic()
        self.result = self._vis.run(self._algo_key, self._target)
        wall_ms = (time.monotonic() - t0) * 1000

        self.metrics = self._compute_metrics(wall_ms)
        return self.metrics

    def get_metrics(self) -> Optional[RunMetrics]:
        return self.metrics

    def record_step(self, step: Step) -> None:
        self.steps.append(step)

    # ------------------------------------------------------------------
    # Export (serialisable snapshot)
    # ------------------------------------------------------------------
    def export(self) -> Dict[str, Any]:
        return {
            "algo_key": self._algo_key,
            "input":    list(self._input),
            "target":   self._target,
            "result":   self.result.to_dict() if self.result else {},
            "metrics":  self.metrics.__dict__ if self.metrics else {},
            "steps":    [s.to_dict() for s in self.steps],
        }

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _compute_metrics(self, wall_ms: float) -> RunMetrics:
        info   = get_algorithm(self._algo_key)
        result = self.result
        stats  = result.statistics
        search = result.search

        return RunMetrics(
            algo_key=info.key,
            algo_label=info.name,
            size=len(self._input),
            comparisons=stats.comparisons,
            exchanges=stats.exchanges,
            assignments=sum(1 for s in self.steps if s.kind is StepKind.ASSIGN),
            inversions=stats.inversions,
            total_steps=result.steps,
            wall_time_ms=round(wall_ms, 2),
            found=search.found if search else None,
            index=search.index if search else None,
            presorted=result.presort is not None,
        )


# ---------------------------------------------------------------------------
# Comparison helpers
# ---------------------------------------------------------------------------
def compare(left: Recorder, right: Recorder) -> ComparisonResult:
    """Given two completed Recorders, produce a ComparisonResult."""
    l = left.metrics  or RunMetrics()
    r = right.metrics or RunMetrics()

    def winner(l_val, r_val, l_key, r_key):
        if l_val == r_val:
            return "tie"
        return l_key if l_val < r_val else r_key

    return ComparisonResult(
        left=l,
        right=r,
        winner_comparisons=winner(l.comparisons, r.comparisons, l.algo_label, r.algo_label),
        winner_exchanges  =winner(l.exchanges,   r.exchanges,   l.algo_label, r.algo_label),
        winner_steps      =winner(l.total_steps, r.total_steps, l.algo_label, r.algo_label),
    )


def best_algorithm(values: Sequence, family: Family = Family.SORTING, target=None) -> RunMetrics:
    """Run every algorithm of `family` on `values`; fewest comparisons + exchanges wins."""
    ranked = []
    for info in algorithms_by_family(family):
        rec = Recorder()
        rec.start(info.key, values, target)
        ranked.append(rec.run_to_completion())
    return min(ranked, key=lambda m: (m.comparisons + m.exchanges, m.total_steps))
