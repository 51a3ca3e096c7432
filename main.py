"""
main.py — Array Algorithm Visualizer Flask App
================================================
JSON control surface for the engine.  A browser front-end polls
/api/state and animates whatever steps it finds there.

Routes:
  GET  /api/algorithms          – registry metadata (complexities, pseudocode)
  POST /api/sequence            – load values, from a list / text / random count
  POST /api/sequence/shuffle    – shuffle the loaded values
  POST /api/sequence/reset      – restore the last loaded values
  POST /api/run                 – start an algorithm run (background thread)
  POST /api/pause               – pause the active run
  POST /api/resume              – resume it
  POST /api/cancel              – cancel it
  POST /api/speed               – set speed level 1..5
  GET  /api/state               – current values, stats, recent steps, result
  POST /api/compare             – headless comparison of two algorithms

State management:
  A single process-wide LiveRun holds the Visualizer and a bounded
  buffer of recent steps.  The engine allows one run at a time, which
  is exactly what one shared visualizer page needs.
"""

import logging
import threading
from collections import deque
from typing import Any, Deque, Dict, Optional

from flask import Flask, jsonify, request

import config
from config import EngineConfig
from errors import AlreadyRunning, ValidationError
from sequence import parse_values, validate_values
from algorithms import Family, get_algorithm, list_algorithms
from algorithms.step import Step
from engine import Recorder, RunResult, Statistics, Visualizer, compare

logger = logging.getLogger(__name__)

RECENT_STEPS = 200


# ---------------------------------------------------------------------------
# Live run state
# ---------------------------------------------------------------------------
class LiveRun:
    """Observer side of the engine: everything /api/state reports."""

    def __init__(self, engine_config: Optional[EngineConfig] = None):
        self.visualizer = Visualizer(
            on_step=self.on_step,
            on_stats_changed=self.on_stats_changed,
            on_complete=self.on_complete,
            engine_config=engine_config or EngineConfig.from_env(),
        )
        self.algorithm:  Optional[str]       = None
        self.steps:      Deque[Dict]         = deque(maxlen=RECENT_STEPS)
        self.step_count: int                 = 0
        self.stats:      Statistics          = Statistics()
        self.result:     Optional[RunResult] = None
        self._lock = threading.Lock()

    def begin(self, algorithm: str) -> None:
        with self._lock:
            self.algorithm  = algorithm
            self.steps.clear()
            self.step_count = 0
            self.stats      = Statistics()
            self.result     = None

    # -- observer callbacks (called on the run thread) --
    def on_step(self, step: Step) -> None:
        with self._lock:
            self.steps.append(step.to_dict())
            self.step_count += 1

    def on_stats_changed(self, stats: Statistics) -> None:
        self.stats = stats

    def on_complete(self, result: RunResult) -> None:
        with self._lock:
            self.result = result
            self.stats  = result.statistics

    def to_dict(self, since: int = 0) -> Dict[str, Any]:
        vis = self.visualizer
        with self._lock:
            first = self.step_count - len(self.steps)
            recent = list(self.steps)[max(0, since - first):]
            return {
                "algorithm":  self.algorithm,
                "values":     vis.store.snapshot(),
                "running":    vis.is_running,
                "paused":     vis.is_paused,
                "speed":      vis.controller.speed_level,
                "speed_label": config.SPEED_LABELS[vis.controller.speed_level],
                "status":     vis.controller.status.value,
                "statistics": self.stats.to_dict(),
                "step_count": self.step_count,
                "steps":      recent,
                "result":     self.result.to_dict() if self.result else None,
            }


app = Flask(__name__)
app.config.from_mapping(RANDOM_SEED=None)
app.config.from_prefixed_env("VISUALIZER")

live = LiveRun()


# ---------------------------------------------------------------------------
# Error handlers
# ---------------------------------------------------------------------------
@app.errorhandler(ValidationError)
def handle_validation_error(e):
    logger.warning("rejected request: %s", e)
    return jsonify({"error": str(e)}), 400


@app.errorhandler(AlreadyRunning)
def handle_already_running(e):
    return jsonify({"error": str(e)}), 409


def _json() -> Dict[str, Any]:
    return request.get_json(silent=True) or {}


# ---------------------------------------------------------------------------
# API: Algorithms
# ---------------------------------------------------------------------------
@app.route("/api/algorithms")
def api_algorithms():
    family = request.args.get("family")
    algos = [a.to_dict() for a in list_algorithms() if family in (None, a.family.value)]
    return jsonify({"algorithms": algos})


# ---------------------------------------------------------------------------
# API: Sequence
# ---------------------------------------------------------------------------
@app.route("/api/sequence", methods=["POST"])
def api_sequence():
    data = _json()
    vis  = live.visualizer

    if "values" in data:
        vis.load(data["values"])
    elif "text" in data:
        vis.load(parse_values(data["text"]))
    else:
        vis.generate(
            count=data.get("count", 20),
            seed=data.get("seed", app.config["RANDOM_SEED"]),
            ascending=data.get("ascending", False),
        )
    return jsonify({"values": vis.store.snapshot(), "sorted": vis.store.is_sorted()})


@app.route("/api/sequence/shuffle", methods=["POST"])
def api_sequence_shuffle():
    vis = live.visualizer
    vis.shuffle(seed=_json().get("seed"))
    return jsonify({"values": vis.store.snapshot(), "sorted": vis.store.is_sorted()})


@app.route("/api/sequence/reset", methods=["POST"])
def api_sequence_reset():
    vis = live.visualizer
    vis.reset()
    return jsonify({"values": vis.store.snapshot(), "sorted": vis.store.is_sorted()})


# ---------------------------------------------------------------------------
# API: Run & Control
# ---------------------------------------------------------------------------
@app.route("/api/run", methods=["POST"])
def api_run():
    data = _json()
    key  = data.get("algorithm", "")
    if get_algorithm(key) is None:
        return jsonify({"error": f"Unknown algorithm: {key}"}), 404

    vis = live.visualizer
    if "speed" in data:
        vis.set_speed(data["speed"])

    if vis.is_running:
        raise AlreadyRunning("A run is already in progress")
    # a rejected request must leave the previous run on display
    vis.prepare(key, data.get("target"))
    live.begin(key)
    vis.run_in_thread(key, data.get("target"))
    return jsonify({"started": key}), 202


@app.route("/api/pause", methods=["POST"])
def api_pause():
    live.visualizer.pause()
    return jsonify({"paused": live.visualizer.is_paused})


@app.route("/api/resume", methods=["POST"])
def api_resume():
    live.visualizer.resume()
    return jsonify({"paused": live.visualizer.is_paused})


@app.route("/api/cancel", methods=["POST"])
def api_cancel():
    live.visualizer.cancel()
    return jsonify({"cancelling": live.visualizer.is_running})


@app.route("/api/speed", methods=["POST"])
def api_speed():
    level = _json().get("level")
    live.visualizer.set_speed(level)
    return jsonify({"speed": level, "label": config.SPEED_LABELS[level]})


@app.route("/api/state")
def api_state():
    since = request.args.get("since", 0, type=int)
    return jsonify(live.to_dict(since=since))


# ---------------------------------------------------------------------------
# API: Comparison Mode
# ---------------------------------------------------------------------------
@app.route("/api/compare", methods=["POST"])
def api_compare():
    data   = _json()
    keys   = data.get("algorithms", [])
    values = data.get("values") or live.visualizer.store.snapshot()
    target = data.get("target")

    validate_values(values)
    if len(keys) != 2:
        raise ValidationError("Pick exactly two algorithms to compare")
    infos = [get_algorithm(k) for k in keys]
    if None in infos:
        return jsonify({"error": "Unknown algorithm"}), 404
    if any(i.family is Family.SEARCHING for i in infos) and target is None:
        raise ValidationError("Searching algorithms need a target")

    recorders = []
    for key in keys:
        rec = Recorder()
        rec.start(key, values, target)
        rec.run_to_completion()
        recorders.append(rec)

    result = compare(*recorders)
    return jsonify({
        "left":               result.left.__dict__,
        "right":              result.right.__dict__,
        "winner_comparisons": result.winner_comparisons,
        "winner_exchanges":   result.winner_exchanges,
        "winner_steps":       result.winner_steps,
    })


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
    )
    logger.info("Array Algorithm Visualizer on http://localhost:5000")
    app.run(debug=False, host="0.0.0.0", port=5000, threaded=True)
