"""
Sokobot — Flask web server.

Provides an async job-based API for solving Sokoban puzzles.  A level is
validated synchronously, then solved in a background thread; clients poll
for the result.

Encapsulation: this module only calls parse_level(), Grid/State
construction and search(), and reads SearchResult attributes.
"""

import logging
import threading
import uuid

from flask import Flask, jsonify, request

from sokobot.grid import Grid
from sokobot.levels import parse_level
from sokobot.puzzles import PUZZLES, get_puzzle_names
from sokobot.search import search
from sokobot.state import State

logger = logging.getLogger(__name__)

app = Flask(__name__)

SOLVE_TIMEOUT = 60  # seconds
MAX_STATES = 2_000_000

# In-memory job store: job_id -> job dict
jobs: dict[str, dict] = {}


def _load_state(level_text: str) -> State:
    width, height, map_data, items_data = parse_level(level_text)
    return State.from_level(Grid.from_map(width, height, map_data), items_data)


# ---------------------------------------------------------------------------
# API endpoints
# ---------------------------------------------------------------------------

@app.route("/api/levels", methods=["GET"])
def get_levels():
    """Return the built-in puzzle catalog."""
    levels = []
    for name in get_puzzle_names():
        text = PUZZLES[name]
        state = _load_state(text)
        levels.append({
            "name": name,
            "text": text,
            "crates": len(state.crates),
        })
    return jsonify(levels)


@app.route("/api/solve", methods=["POST"])
def start_solve():
    """Validate a level synchronously, then solve in a background thread."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict) or not data:
        return jsonify(status="error",
                       message="Request body must be JSON."), 400

    level_text = data.get("level", "")
    if not isinstance(level_text, str) or not level_text.strip("\n"):
        return jsonify(status="error",
                       message="Missing 'level' field."), 400

    # Validate synchronously so bad levels fail the request itself
    try:
        initial = _load_state(level_text)
    except ValueError as e:
        return jsonify(status="error", message=str(e)), 400

    job_id = uuid.uuid4().hex
    job: dict = {
        "status": "searching",
        "states_explored": 0,
        "moves": None,
    }
    jobs[job_id] = job
    logger.info(f"Job {job_id}: solving {len(initial.crates)}-crate level")

    def run_solver():
        def on_progress(n):
            job["states_explored"] = n

        try:
            result = search(initial, max_states=MAX_STATES,
                            time_limit=SOLVE_TIMEOUT,
                            progress_callback=on_progress)
        except Exception as e:
            logger.exception(f"Job {job_id}: solver failed")
            job["status"] = "error"
            job["message"] = str(e)
            return

        job["states_explored"] = result.states_explored
        if result.solved:
            job["status"] = "solved"
            job["moves"] = result.path
        elif result.status == "limit":
            job["status"] = "error"
            job["message"] = "Search limit reached."
        else:
            job["status"] = "no_solution"
        logger.info(f"Job {job_id}: {job['status']}")

    threading.Thread(target=run_solver, daemon=True).start()

    return jsonify(status="ok", job_id=job_id)


@app.route("/api/solve/<job_id>", methods=["GET"])
def poll_solve(job_id):
    """Poll for the result of a solve job."""
    job = jobs.get(job_id)
    if job is None:
        return jsonify(status="error", message="Job not found."), 404
    return jsonify(job)


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    app.run(debug=True, use_reloader=False, port=5000)
