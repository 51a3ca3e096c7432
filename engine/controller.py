"""
controller.py — Run Controller
===============================
Drives one algorithm generator from first Step to last, and is the
only place a run can be slowed down, paused or cancelled.

At every Step the algorithm yields, in this order:
    1. count it          (compare / exchange → Statistics, then on_stats_changed)
    2. forward it        (on_step)
    3. wait `delay`      (cancellable)
    4. while paused, re-check every `poll_interval`
    5. if cancelled, close the generator and stop

Closing the generator raises GeneratorExit at the algorithm's current
`yield`, which unwinds every nested `yield from` (recursive merge,
quick, heap sift-down) without the algorithm checking a flag itself.

State machine:
    IDLE     →  start()     →  RUNNING
    RUNNING  →  pause()     →  PAUSED
    PAUSED   →  resume()    →  RUNNING
    RUNNING / PAUSED  →  (generator exhausted)  →  FINISHED
    RUNNING / PAUSED  →  cancel()               →  CANCELLED
    RUNNING / PAUSED  →  (exception raised)     →  FAILED

Thread safety:
  start() blocks until the run ends, so control calls come from
  another thread (or from inside the on_step callback).  They are
  single-attribute writes plus a threading.Event; the only lock
  guards the "one run at a time" check.
"""

import logging
import threading
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Generator, Optional

import config
from errors import AlreadyRunning, ValidationError
from algorithms.step import Step
from engine.statistics import Statistics, StatisticsRecorder

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# States
# ---------------------------------------------------------------------------
class RunStatus(Enum):
    IDLE      = "idle"
    RUNNING   = "running"
    PAUSED    = "paused"
    FINISHED  = "finished"
    CANCELLED = "cancelled"
    FAILED    = "failed"


class RunState:
    """
    Per-run control flags.  Created by start(), dropped when the run ends.

    Attributes:
        running      : True until the generator finishes or is closed.
        paused       : Set by pause(), cleared by resume().
        delay        : Seconds to wait after each step; read at the start of each wait.
        speed_levels : Level → delay table this run looks speeds up in.
    """

    def __init__(self, delay: float, speed_levels: Dict[int, float], cancel: Optional[threading.Event] = None):
        self.running:      bool             = True
        self.paused:       bool             = False
        self.delay:        float            = delay
        self.speed_levels: Dict[int, float] = speed_levels
        self._cancel = cancel or threading.Event()

    @property
    def cancelled(self) -> bool:
        return self._cancel.is_set()

    def cancel(self) -> None:
        self._cancel.set()

    def sleep(self, seconds: float) -> None:
        """Wait up to `seconds`; returns early the moment the run is cancelled."""
        self._cancel.wait(seconds)


@dataclass(frozen=True)
class RunOutcome:
    value:      Any             # the generator's return value (SearchResult for searches)
    statistics: Statistics
    cancelled:  bool
    steps:      int


# ---------------------------------------------------------------------------
# Controller
# ---------------------------------------------------------------------------
class RunController:
    """
    Attributes:
        speed_levels  : Default level → delay table (a run may bring its own).
        speed_level   : Current level 1..5; survives between runs.
        poll_interval : Seconds between pause re-checks.
        status        : RunStatus of the current / last run.
    """

    def __init__(
        self,
        speed_levels: Optional[Dict[int, float]] = None,
        speed_level: int = config.DEFAULT_SPEED_LEVEL,
        poll_interval: float = config.POLL_INTERVAL,
    ):
        self.speed_levels:  Dict[int, float]   = dict(speed_levels or config.SORT_SPEED_LEVELS)
        self.speed_level:   int                = speed_level
        self.poll_interval: float              = poll_interval
        self.status:        RunStatus          = RunStatus.IDLE

        self._state: Optional[RunState] = None
        self._lock = threading.Lock()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def start(
        self,
        algorithm: Generator[Step, None, Any],
        on_step: Optional[Callable[[Step], None]] = None,
        on_stats_changed: Optional[Callable[[Statistics], None]] = None,
        inversions: Optional[int] = None,
        speed_levels: Optional[Dict[int, float]] = None,
        cancel: Optional[threading.Event] = None,
    ) -> RunOutcome:
        """
        Drive `algorithm` to completion or cancellation.  Blocks.

        `cancel` lets the caller own the cancel flag, so a cancel issued
        before the run state exists is still honoured.
        """
        levels = speed_levels or self.speed_levels
        with self._lock:
            if self._state is not None:
                algorithm.close()
                raise AlreadyRunning("A run is already in progress")
            state = RunState(delay=levels[self.speed_level], speed_levels=levels, cancel=cancel)
            self._state = state
            self.status = RunStatus.RUNNING

        stats  = StatisticsRecorder(inversions=inversions)
        value  = None
        count  = 0
        exhausted = False
        logger.info("run started (delay=%.3fs)", state.delay)

        try:
            while not state.cancelled:
                try:
                    step = next(algorithm)
                except StopIteration as stop:
                    value = stop.value
                    exhausted = True
                    break

                count += 1
                if stats.record(step) and on_stats_changed:
                    on_stats_changed(stats.snapshot())
                if on_step:
                    on_step(step)

                self._suspend(state)
        except Exception:
            self.status = RunStatus.FAILED
            logger.exception("run failed after %d steps", count)
            raise
        finally:
            # unwinds the algorithm at its current yield; also runs when
            # an observer or the algorithm raised
            algorithm.close()
            state.running = False
            with self._lock:
                self._state = None

        # a cancel that lands after the last step does not undo a finished run
        cancelled = state.cancelled and not exhausted
        self.status = RunStatus.CANCELLED if cancelled else RunStatus.FINISHED
        outcome = RunOutcome(value=value, statistics=stats.snapshot(), cancelled=cancelled, steps=count)
        logger.info(
            "run %s after %d steps (%d comparisons, %d exchanges)",
            self.status.value, count, outcome.statistics.comparisons, outcome.statistics.exchanges,
        )
        return outcome

    def _suspend(self, state: RunState) -> None:
        if state.delay > 0:
            state.sleep(state.delay)
        while state.paused and not state.cancelled:
            state.sleep(self.poll_interval)

    # ------------------------------------------------------------------
    # Control surface
    # ------------------------------------------------------------------
    def pause(self) -> None:
        state = self._state
        if state is None or not state.running:
            logger.debug("pause ignored: no active run")
            return
        state.paused = True
        self.status  = RunStatus.PAUSED

    def resume(self) -> None:
        state = self._state
        if state is None or not state.running:
            logger.debug("resume ignored: no active run")
            return
        state.paused = False
        self.status  = RunStatus.RUNNING

    def toggle_pause(self) -> None:
        if self.is_paused:
            self.resume()
        else:
            self.pause()

    def cancel(self) -> None:
        state = self._state
        if state is None:
            logger.debug("cancel ignored: no active run")
            return
        logger.info("cancel requested")
        state.cancel()

    # ------------------------------------------------------------------
    # Speed
    # ------------------------------------------------------------------
    def set_speed(self, level: int) -> None:
        """Takes effect at the next wait; a wait already in progress is not shortened."""
        if isinstance(level, bool) or level not in self.speed_levels:
            raise ValidationError(f"Speed level must be one of {sorted(self.speed_levels)} (got {level!r})")
        self.speed_level = level
        state = self._state
        if state is not None:
            state.delay = state.speed_levels[level]
        logger.debug("speed set to level %d", level)

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def is_running(self) -> bool:
        return self._state is not None

    @property
    def is_paused(self) -> bool:
        state = self._state
        return state is not None and state.paused

    @property
    def delay(self) -> float:
        state = self._state
        if state is not None:
            return state.delay
        return self.speed_levels[self.speed_level]
