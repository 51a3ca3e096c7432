"""
visualizer.py — Control Surface
================================
The object a UI (or the web layer, or a test) talks to.  It owns one
SequenceStore and one RunController, resolves algorithm names through
the registry, and reports back through three callbacks:

    on_step(step)                 every atomic operation, in order
    on_stats_changed(statistics)  after every counter increment
    on_complete(result)           once per run, finished or cancelled

Usage:
    vis = Visualizer([5, 3, 8, 1], on_step=print)
    result = vis.run("quick_sort")           # blocks
    vis.run_in_thread("binary_search", 8)    # returns the worker thread

Searches that need sorted input on an unsorted store first run a
visible bubble-sort pass with its own statistics; that pass is
reported as `result.presort`.
"""

import logging
import math
import threading
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

import config
from config import EngineConfig
from errors import AlreadyRunning, ValidationError
from sequence import SequenceStore, validate_count, validate_values
from algorithms import AlgorithmDescriptor, Family, SearchResult, StepBuilder, count_inversions, get_algorithm
from algorithms.step import Step
from engine.controller import RunController
from engine.statistics import Statistics

logger = logging.getLogger(__name__)

PRESORT_ALGORITHM = "bubble_sort"


@dataclass(frozen=True)
class RunResult:
    """
    Attributes:
        algorithm  : Registry key of the algorithm that ran.
        values     : Store snapshot when the run ended.
        statistics : Frozen counters of this run (not including the presort).
        cancelled  : True if the run was cancelled before finishing.
        search     : SearchResult for completed searches, else None.
        presort    : The sorting pass a search needed first, if any.
        steps      : Number of steps delivered to the observer.
    """

    algorithm:  str
    values:     List
    statistics: Statistics
    cancelled:  bool                   = False
    search:     Optional[SearchResult] = None
    presort:    Optional["RunResult"]  = None
    steps:      int                    = 0

    def to_dict(self) -> dict:
        return {
            "algorithm":  self.algorithm,
            "values":     list(self.values),
            "statistics": self.statistics.to_dict(),
            "cancelled":  self.cancelled,
            "search":     self.search.to_dict() if self.search else None,
            "presort":    self.presort.to_dict() if self.presort else None,
            "steps":      self.steps,
        }


class Visualizer:
    """
    Attributes:
        store       : The SequenceStore runs operate on.
        original    : Values as last loaded; reset() restores them.
        controller  : The RunController; one active run at a time.
        last_result : RunResult of the most recent run, or None.
    """

    def __init__(
        self,
        values: Sequence = (),
        on_step: Optional[Callable[[Step], None]] = None,
        on_stats_changed: Optional[Callable[[Statistics], None]] = None,
        on_complete: Optional[Callable[[RunResult], None]] = None,
        engine_config: Optional[EngineConfig] = None,
    ):
        self.config = engine_config or EngineConfig()
        self.controller = RunController(
            speed_levels=self.config.sort_speed_levels,
            speed_level=self.config.default_speed,
            poll_interval=self.config.poll_interval,
        )
        self.store:       SequenceStore       = SequenceStore(values)
        self.original:    List                = list(values)
        self.last_result: Optional[RunResult] = None

        self.on_step          = on_step
        self.on_stats_changed = on_stats_changed
        self.on_complete      = on_complete

        self._busy = threading.Lock()
        self._cancel = threading.Event()

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------
    def load(self, values: Sequence, max_length: Optional[int] = None) -> None:
        validate_values(values, max_length=max_length or self.config.max_sort_elements)
        self._ensure_idle()
        self.store    = SequenceStore(values)
        self.original = list(values)
        logger.info("loaded %d values", len(self.original))

    def generate(self, count: int = config.DEFAULT_RANDOM_COUNT, seed: Optional[int] = None, ascending: bool = False) -> None:
        """Random bars for sorting, or (ascending=True) a sorted array for searching."""
        limit = self.config.max_search_elements if ascending else self.config.max_sort_elements
        validate_count(count, max_length=limit)
        if ascending:
            store = SequenceStore.generate_sorted(count, seed=seed)
        else:
            store = SequenceStore.generate_random(count, seed=seed)
        self.load(store.snapshot(), max_length=limit)

    def shuffle(self, seed: Optional[int] = None) -> None:
        self._ensure_idle()
        self.store    = self.store.shuffled(seed)
        self.original = self.store.snapshot()

    def reset(self) -> None:
        """Put the last loaded values back, undoing any sort."""
        self._ensure_idle()
        self.store = SequenceStore(self.original)
        self.last_result = None

    # ------------------------------------------------------------------
    # Running
    # ------------------------------------------------------------------
    def run(self, algorithm: str, target=None) -> RunResult:
        """Run `algorithm` on the store and block until it ends."""
        info = self.prepare(algorithm, target)
        self._acquire()
        try:
            return self._run(info, target)
        finally:
            self._busy.release()

    def run_in_thread(self, algorithm: str, target=None) -> threading.Thread:
        """
        Same as run() on a daemon worker thread.  Validation and the
        AlreadyRunning check happen here, before the thread starts.
        """
        info = self.prepare(algorithm, target)
        self._acquire()

        def work():
            try:
                self._run(info, target)
            finally:
                self._busy.release()

        thread = threading.Thread(target=work, name=f"run-{info.key}", daemon=True)
        thread.start()
        return thread

    def prepare(self, algorithm: str, target=None) -> AlgorithmDescriptor:
        """Validate a run request without starting it.  Raises ValidationError."""
        info = get_algorithm(algorithm)
        if info is None:
            raise ValidationError(f"Unknown algorithm: {algorithm}")
        if info.family is Family.SEARCHING:
            numeric = isinstance(target, (int, float)) and not isinstance(target, bool)
            if not numeric or not math.isfinite(target):
                raise ValidationError(f"{info.name} needs a numeric target (got {target!r})")
            if len(self.store) > self.config.max_search_elements:
                raise ValidationError(
                    f"Maximum {self.config.max_search_elements} elements allowed for searching"
                )
        return info

    def _acquire(self) -> None:
        if not self._busy.acquire(blocking=False):
            raise AlreadyRunning("A run is already in progress")
        # one flag per run, shared by the presort and the main pass; it
        # exists before the worker starts, so an early cancel() is kept
        self._cancel = threading.Event()

    def _ensure_idle(self) -> None:
        if self._busy.locked():
            raise AlreadyRunning("Cannot change the sequence while a run is in progress")

    def _run(self, info: AlgorithmDescriptor, target) -> RunResult:
        presort = None

        if info.needs_sorted_input and not self.store.is_sorted():
            logger.info("%s needs sorted input; sorting first", info.name)
            presort = self._execute(get_algorithm(PRESORT_ALGORITHM), None)

        if presort is not None and (presort.cancelled or self._cancel.is_set()):
            result = RunResult(
                algorithm=info.key,
                values=self.store.snapshot(),
                statistics=Statistics(),
                cancelled=True,
                presort=presort,
            )
        else:
            result = self._execute(info, target, presort)

        self.last_result = result
        if self.on_complete:
            self.on_complete(result)
        return result

    def _execute(
        self,
        info: AlgorithmDescriptor,
        target,
        presort: Optional[RunResult] = None,
    ) -> RunResult:
        sb = StepBuilder(self.store)
        if info.family is Family.SORTING:
            generator  = info.fn(self.store, sb)
            inversions = count_inversions(self.store.snapshot())
            levels     = self.config.sort_speed_levels
        else:
            generator  = info.fn(self.store, sb, target)
            inversions = None
            levels     = self.config.search_speed_levels

        logger.info("running %s on %d values", info.name, len(self.store))
        outcome = self.controller.start(
            generator,
            on_step=self.on_step,
            on_stats_changed=self.on_stats_changed,
            inversions=inversions,
            speed_levels=levels,
            cancel=self._cancel,
        )
        return RunResult(
            algorithm=info.key,
            values=self.store.snapshot(),
            statistics=outcome.statistics,
            cancelled=outcome.cancelled,
            search=outcome.value if info.family is Family.SEARCHING and not outcome.cancelled else None,
            presort=presort,
            steps=outcome.steps,
        )

    # ------------------------------------------------------------------
    # Control
    # ------------------------------------------------------------------
    def pause(self) -> None:
        self.controller.pause()

    def resume(self) -> None:
        self.controller.resume()

    def cancel(self) -> None:
        if self.is_running:
            logger.info("cancel requested")
        self._cancel.set()

    def set_speed(self, level: int) -> None:
        self.controller.set_speed(level)

    @property
    def is_running(self) -> bool:
        return self._busy.locked()

    @property
    def is_paused(self) -> bool:
        return self.controller.is_paused
