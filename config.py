"""
config.py — Engine Configuration
=================================
Static tables the engine looks things up in, plus an EngineConfig
dataclass so independent engines (tests, the web app) never share
mutable speed state.

Environment overrides (all optional):
    VISUALIZER_POLL_INTERVAL   seconds between pause re-checks
    VISUALIZER_MAX_ELEMENTS    longest accepted sorting input
    VISUALIZER_DEFAULT_SPEED   speed level 1..5 used at start-up
"""

import os
from dataclasses import dataclass, field
from typing import Dict


# ---------------------------------------------------------------------------
# Speed levels (seconds per step), 1 = slowest, 5 = fastest
# ---------------------------------------------------------------------------
SORT_SPEED_LEVELS: Dict[int, float] = {
    1: 1.0,     # very slow
    2: 0.5,
    3: 0.2,     # medium
    4: 0.1,
    5: 0.05,    # very fast
}

SEARCH_SPEED_LEVELS: Dict[int, float] = {
    1: 2.0,
    2: 1.0,
    3: 0.5,
    4: 0.25,
    5: 0.1,
}

SPEED_LABELS: Dict[int, str] = {
    1: "Very Slow",
    2: "Slow",
    3: "Medium",
    4: "Fast",
    5: "Very Fast",
}

DEFAULT_SPEED_LEVEL = 3

# pause is a polling wait; resume latency is bounded by this
POLL_INTERVAL = 0.1


# ---------------------------------------------------------------------------
# Input limits
# ---------------------------------------------------------------------------
MIN_RANDOM_ELEMENTS  = 5
MAX_SORT_ELEMENTS    = 100
MAX_SEARCH_ELEMENTS  = 50
DEFAULT_RANDOM_COUNT = 20

RANDOM_VALUE_MIN = 50       # bar heights for the sorting page
RANDOM_VALUE_MAX = 349


@dataclass
class EngineConfig:
    sort_speed_levels:   Dict[int, float] = field(default_factory=lambda: dict(SORT_SPEED_LEVELS))
    search_speed_levels: Dict[int, float] = field(default_factory=lambda: dict(SEARCH_SPEED_LEVELS))
    default_speed:       int   = DEFAULT_SPEED_LEVEL
    poll_interval:       float = POLL_INTERVAL
    max_sort_elements:   int   = MAX_SORT_ELEMENTS
    max_search_elements: int   = MAX_SEARCH_ELEMENTS

    @classmethod
    def from_env(cls, prefix: str = "VISUALIZER_") -> "EngineConfig":
        cfg = cls()
        env = os.environ
        if prefix + "POLL_INTERVAL" in env:
            cfg.poll_interval = float(env[prefix + "POLL_INTERVAL"])
        if prefix + "MAX_ELEMENTS" in env:
            cfg.max_sort_elements = int(env[prefix + "MAX_ELEMENTS"])
        if prefix + "DEFAULT_SPEED" in env:
            cfg.default_speed = int(env[prefix + "DEFAULT_SPEED"])
        return cfg

    @classmethod
    def instant(cls) -> "EngineConfig":
        """Zero delay at every speed level: headless runs and tests."""
        return cls(
            sort_speed_levels={level: 0.0 for level in SORT_SPEED_LEVELS},
            search_speed_levels={level: 0.0 for level in SEARCH_SPEED_LEVELS},
            poll_interval=0.01,
        )
