"""
engine/
-------
Execution & recording layer.

    from engine import Visualizer, RunController, Recorder, compare
"""

from engine.statistics import Statistics, StatisticsRecorder
from engine.controller import RunController, RunState, RunStatus, RunOutcome
from engine.visualizer import Visualizer, RunResult
from engine.recorder   import Recorder, RunMetrics, ComparisonResult, compare, best_algorithm

__all__ = [
    "Statistics",
    "StatisticsRecorder",
    "RunController",
    "RunState",
    "RunStatus",
    "RunOutcome",
    "Visualizer",
    "RunResult",
    "Recorder",
    "RunMetrics",
    "ComparisonResult",
    "compare",
    "best_algorithm",
]
