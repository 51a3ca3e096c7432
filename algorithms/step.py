"""
step.py — Algorithm Step Record
================================
Every algorithm is a generator that yields Step objects.
A Step is one atomic, externally observable operation:

    • compare       – two slots (or a slot and the search target) were compared
    • exchange      – two slots swapped values
    • assign        – one slot received a copied value (merge sort)
    • markRange     – the algorithm is now working inside [left, right]
    • markChecked   – slots that are settled / ruled out
    • pivot         – a slot became the current pivot / minimum / key
    • done          – the algorithm finished normally

Design decisions:
  - Step is a frozen dataclass.  The algorithm generator is the only
    writer; the controller and observers are pure readers.
  - Mutating steps (exchange, assign) are built by StepBuilder, which
    performs the store mutation in the same call.  An algorithm
    therefore cannot move a value without emitting its Step.
  - Yielding is the suspension point: the controller decides, between
    two `next()` calls, whether to sleep, wait out a pause, or close
    the generator.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict

from sequence import SequenceStore


class StepKind(Enum):
    COMPARE      = "compare"
    EXCHANGE     = "exchange"
    ASSIGN       = "assign"
    MARK_RANGE   = "markRange"
    MARK_CHECKED = "markChecked"
    PIVOT        = "pivot"
    DONE         = "done"


@dataclass(frozen=True)
class Step:
    """
    Attributes:
        kind        : What happened.
        operands    : Role → index / value, e.g. {"i": 3, "j": 4} for an exchange.
        step_number : 0-based, strictly increasing within one run.
        explanation : Short status text for the UI ("Pass 2/9", …).
    """

    kind:         StepKind
    operands:     Dict[str, Any] = field(default_factory=dict)
    step_number:  int            = 0
    explanation:  str            = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind":        self.kind.value,
            "operands":    dict(self.operands),
            "step_number": self.step_number,
            "explanation": self.explanation,
        }


# ---------------------------------------------------------------------------
# Builder: numbers steps and performs the mutation a step describes
# ---------------------------------------------------------------------------
class StepBuilder:
    """
    One builder per run, bound to the run's store.

    Usage inside an algorithm generator:
        sb = StepBuilder(store)
        yield sb.compare(i=j, j=j + 1)
        if store.get(j) > store.get(j + 1):
            yield sb.exchange(j, j + 1)     # store already swapped
    """

    def __init__(self, store: SequenceStore):
        self.store = store
        self._next_number = 0

    @property
    def emitted(self) -> int:
        return self._next_number

    def _build(self, kind: StepKind, explanation: str = "", **operands) -> Step:
        step = Step(kind=kind, operands=operands, step_number=self._next_number, explanation=explanation)
        self._next_number += 1
        return step

    # -- read-only steps --
    def compare(self, explanation: str = "", **operands) -> Step:
        return self._build(StepKind.COMPARE, explanation, **operands)

    def mark_range(self, left: int, right: int, explanation: str = "") -> Step:
        return self._build(StepKind.MARK_RANGE, explanation, left=left, right=right)

    def mark_checked(self, *indices: int, explanation: str = "") -> Step:
        return self._build(StepKind.MARK_CHECKED, explanation, indices=tuple(indices))

    def pivot(self, index: int, explanation: str = "") -> Step:
        return self._build(StepKind.PIVOT, explanation, index=index, value=self.store.get(index))

    def done(self, explanation: str = "", **operands) -> Step:
        return self._build(StepKind.DONE, explanation, **operands)

    # -- mutating steps --
    def exchange(self, i: int, j: int, explanation: str = "") -> Step:
        self.store.exchange(i, j)
        return self._build(StepKind.EXCHANGE, explanation, i=i, j=j)

    def assign(self, index: int, value, explanation: str = "") -> Step:
        self.store.set(index, value)
        return self._build(StepKind.ASSIGN, explanation, index=index, value=value)
