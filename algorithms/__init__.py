"""
algorithms/__init__.py — Algorithm Registry
=============================================
Single source of truth for every algorithm the visualizer knows about.

    from algorithms import REGISTRY, get_algorithm

REGISTRY is a dict:
    {
        "bubble_sort": AlgorithmDescriptor(key, name, fn, family, …),
        …
    }

AlgorithmDescriptor is immutable.  The engine, the web layer and the
recorder all look algorithms up here, so adding one is: write the
generator, add one entry.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Dict, Optional

# ---------------------------------------------------------------------------
# Import all algorithm modules
# ---------------------------------------------------------------------------
from algorithms.bubble_sort        import bubble_sort        as _bubble,      PSEUDOCODE as _bubble_pc
from algorithms.selection_sort     import selection_sort     as _selection,   PSEUDOCODE as _selection_pc
from algorithms.insertion_sort     import insertion_sort     as _insertion,   PSEUDOCODE as _insertion_pc
from algorithms.merge_sort         import merge_sort         as _merge,       PSEUDOCODE as _merge_pc
from algorithms.quick_sort         import quick_sort         as _quick,       PSEUDOCODE as _quick_pc
from algorithms.heap_sort          import heap_sort          as _heap,        PSEUDOCODE as _heap_pc
from algorithms.linear_search      import linear_search      as _linear,      PSEUDOCODE as _linear_pc
from algorithms.binary_search      import binary_search      as _binary,      PSEUDOCODE as _binary_pc
from algorithms.jump_search        import jump_search        as _jump,        PSEUDOCODE as _jump_pc
from algorithms.exponential_search import exponential_search as _exponential, PSEUDOCODE as _exp_pc
from algorithms.inversions         import count_inversions
from algorithms.results            import SearchResult
from algorithms.step               import Step, StepKind, StepBuilder


class Family(Enum):
    SORTING   = "sorting"
    SEARCHING = "searching"


# ---------------------------------------------------------------------------
# AlgorithmDescriptor — static metadata card for each algorithm
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class AlgorithmDescriptor:
    key:                str                    # registry key, e.g. "bubble_sort"
    name:               str                    # human label, e.g. "Bubble Sort"
    fn:                 Callable               # the generator function
    family:             Family
    best_case:          str
    avg_case:           str
    worst_case:         str
    space_complexity:   str
    needs_sorted_input: bool      = False
    explanation:        str       = ""
    pseudocode:         List[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "key":                self.key,
            "name":               self.name,
            "family":             self.family.value,
            "best_case":          self.best_case,
            "avg_case":           self.avg_case,
            "worst_case":         self.worst_case,
            "space_complexity":   self.space_complexity,
            "needs_sorted_input": self.needs_sorted_input,
            "explanation":        self.explanation,
            "pseudocode":         list(self.pseudocode),
        }


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
REGISTRY: Dict[str, AlgorithmDescriptor] = {

    "bubble_sort": AlgorithmDescriptor(
        key="bubble_sort", name="Bubble Sort", fn=_bubble, family=Family.SORTING,
        best_case="O(n)", avg_case="O(n²)", worst_case="O(n²)", space_complexity="O(1)",
        explanation="Compares adjacent elements and swaps them if they're in the wrong order. "
                    "The largest element 'bubbles' to the end in each pass.",
        pseudocode=_bubble_pc,
    ),

    "selection_sort": AlgorithmDescriptor(
        key="selection_sort", name="Selection Sort", fn=_selection, family=Family.SORTING,
        best_case="O(n²)", avg_case="O(n²)", worst_case="O(n²)", space_complexity="O(1)",
        explanation="Finds the minimum element and places it at the beginning. "
                    "Repeats for the remaining unsorted portion.",
        pseudocode=_selection_pc,
    ),

    "insertion_sort": AlgorithmDescriptor(
        key="insertion_sort", name="Insertion Sort", fn=_insertion, family=Family.SORTING,
        best_case="O(n)", avg_case="O(n²)", worst_case="O(n²)", space_complexity="O(1)",
        explanation="Builds the sorted array one element at a time by inserting each element "
                    "into its correct position.",
        pseudocode=_insertion_pc,
    ),

    "merge_sort": AlgorithmDescriptor(
        key="merge_sort", name="Merge Sort", fn=_merge, family=Family.SORTING,
        best_case="O(n log n)", avg_case="O(n log n)", worst_case="O(n log n)", space_complexity="O(n)",
        explanation="Divides the array into halves, sorts them recursively, then merges the "
                    "sorted halves back together.",
        pseudocode=_merge_pc,
    ),

    "quick_sort": AlgorithmDescriptor(
        key="quick_sort", name="Quick Sort", fn=_quick, family=Family.SORTING,
        best_case="O(n log n)", avg_case="O(n log n)", worst_case="O(n²)", space_complexity="O(log n)",
        explanation="Selects a pivot element and partitions the array around it, then "
                    "recursively sorts the sub-arrays.",
        pseudocode=_quick_pc,
    ),

    "heap_sort": AlgorithmDescriptor(
        key="heap_sort", name="Heap Sort", fn=_heap, family=Family.SORTING,
        best_case="O(n log n)", avg_case="O(n log n)", worst_case="O(n log n)", space_complexity="O(1)",
        explanation="Builds a max heap from the array, then repeatedly extracts the maximum "
                    "element to build the sorted array.",
        pseudocode=_heap_pc,
    ),

    "linear_search": AlgorithmDescriptor(
        key="linear_search", name="Linear Search", fn=_linear, family=Family.SEARCHING,
        best_case="O(1)", avg_case="O(n)", worst_case="O(n)", space_complexity="O(1)",
        explanation="Checks each element one by one from the beginning until the target is "
                    "found or the end is reached. Works on both sorted and unsorted arrays.",
        pseudocode=_linear_pc,
    ),

    "binary_search": AlgorithmDescriptor(
        key="binary_search", name="Binary Search", fn=_binary, family=Family.SEARCHING,
        best_case="O(1)", avg_case="O(log n)", worst_case="O(log n)", space_complexity="O(1)",
        needs_sorted_input=True,
        explanation="Divides the sorted array in half repeatedly, comparing the target with "
                    "the middle element to eliminate half of the remaining elements.",
        pseudocode=_binary_pc,
    ),

    "jump_search": AlgorithmDescriptor(
        key="jump_search", name="Jump Search", fn=_jump, family=Family.SEARCHING,
        best_case="O(1)", avg_case="O(√n)", worst_case="O(√n)", space_complexity="O(1)",
        needs_sorted_input=True,
        explanation="Jumps ahead by fixed steps to find a range where the target might exist, "
                    "then performs linear search within that range.",
        pseudocode=_jump_pc,
    ),

    "exponential_search": AlgorithmDescriptor(
        key="exponential_search", name="Exponential Search", fn=_exponential, family=Family.SEARCHING,
        best_case="O(1)", avg_case="O(log n)", worst_case="O(log n)", space_complexity="O(1)",
        needs_sorted_input=True,
        explanation="Finds the range where the target exists by doubling the index, then "
                    "performs binary search within that range.",
        pseudocode=_exp_pc,
    ),
}


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def get_algorithm(key: str) -> Optional[AlgorithmDescriptor]:
    """Return the descriptor by key, or None."""
    return REGISTRY.get(key)


def list_algorithms() -> List[AlgorithmDescriptor]:
    """Return all registered algorithms in insertion order."""
    return list(REGISTRY.values())


def algorithms_by_family(family: Family) -> List[AlgorithmDescriptor]:
    return [a for a in REGISTRY.values() if a.family == family]


__all__ = [
    "AlgorithmDescriptor",
    "Family",
    "REGISTRY",
    "get_algorithm",
    "list_algorithms",
    "algorithms_by_family",
    "count_inversions",
    "SearchResult",
    "Step",
    "StepKind",
    "StepBuilder",
]
