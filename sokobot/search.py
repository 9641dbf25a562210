"""
Sokobot — best-first Sokoban search.

Expands the frontier node with the lowest `path length + heuristic` cost,
one player move at a time, pruning visited states and corner deadlocks.
The heuristic is not admissible, so the first solution found is valid but
not necessarily the shortest.
"""

from __future__ import annotations

import heapq
import logging
import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Literal

from sokobot.deadlock import compute_deadlocks, is_deadlocked
from sokobot.grid import Grid
from sokobot.heuristic import HeuristicField, compute_heuristic_field, node_cost
from sokobot.moves import MOVES, try_apply
from sokobot.state import State

logger = logging.getLogger(__name__)

PROGRESS_INTERVAL = 5000  # pops between progress callbacks

Status = Literal["solved", "exhausted", "limit"]


# ---------------------------------------------------------------------------
# Search nodes & results
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Node:
    state: State
    path: str
    cost: int

    @classmethod
    def create(cls, state: State, path: str, field: HeuristicField) -> Node:
        return cls(state=state, path=path, cost=node_cost(state, path, field))


@dataclass
class SearchResult:
    path: str
    status: Status
    states_explored: int
    states_generated: int
    elapsed: float

    @property
    def solved(self) -> bool:
        return self.status == "solved"


# ---------------------------------------------------------------------------
# Search loop
# ---------------------------------------------------------------------------

def search(
    initial: State,
    *,
    max_states: int | None = None,
    time_limit: float | None = None,
    progress_callback: Callable[[int], None] | None = None,
) -> SearchResult:
    """Run best-first search from `initial`.

    `max_states` caps the number of frontier pops and `time_limit` the
    wall-clock seconds; both are checked before each pop.  Running out of
    either, or exhausting the frontier, returns an empty path.
    """
    t0 = time.perf_counter()

    def result(path: str, status: Status, explored: int,
               generated: int) -> SearchResult:
        return SearchResult(path=path, status=status, states_explored=explored,
                            states_generated=generated,
                            elapsed=time.perf_counter() - t0)

    if initial.is_goal_state():
        logger.info("Initial state is already solved")
        return result("", "solved", 0, 0)

    grid = initial.grid
    field = compute_heuristic_field(grid.goals, grid)
    deadlocks = compute_deadlocks(grid)
    logger.debug(f"Precomputed {len(field)} distance maps, "
                 f"{len(deadlocks)} deadlock cells")

    if is_deadlocked(initial, deadlocks):
        logger.info("Initial state has a crate in a deadlock corner")
        return result("", "exhausted", 0, 0)

    # Frontier entries: (cost, seq, node).  seq breaks cost ties in insertion
    # order, and successors are inserted in MOVES order.
    seq = 0
    start = Node.create(initial, "", field)
    frontier: list[tuple[int, int, Node]] = [(start.cost, seq, start)]
    visited: set[State] = {initial}
    explored = 0
    deadline = t0 + time_limit if time_limit is not None else None

    while frontier:
        if max_states is not None and explored >= max_states:
            logger.warning(f"Search stopped after {explored} states (max_states)")
            return result("", "limit", explored, len(visited))
        if deadline is not None and time.perf_counter() >= deadline:
            logger.warning(f"Search stopped after {explored} states (time_limit)")
            return result("", "limit", explored, len(visited))

        _, _, node = heapq.heappop(frontier)
        explored += 1

        if progress_callback and explored % PROGRESS_INTERVAL == 0:
            progress_callback(explored)

        if node.state.is_goal_state():
            logger.info(f"Solved in {len(node.path)} moves, "
                        f"{explored} states explored")
            return result(node.path, "solved", explored, len(visited))

        for move in MOVES:
            next_state = try_apply(move, node.state)
            if next_state is None or next_state in visited:
                continue
            if is_deadlocked(next_state, deadlocks):
                continue
            visited.add(next_state)
            child = Node.create(next_state, node.path + move.command, field)
            seq += 1
            heapq.heappush(frontier, (child.cost, seq, child))

    logger.info(f"No solution: frontier exhausted after {explored} states")
    return result("", "exhausted", explored, len(visited))


def solve_sokoban_puzzle(
    width: int,
    height: int,
    map_data: Sequence[Sequence[str]],
    items_data: Sequence[Sequence[str]],
) -> str:
    """Solve a puzzle and return its move string, or "" when unsolved.

    Raises ValueError for malformed input before any search starts.
    """
    grid = Grid.from_map(width, height, map_data)
    initial = State.from_level(grid, items_data)
    return search(initial).path


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------

if __name__ == "__main__":
    import sys

    from sokobot.levels import parse_level, render_state
    from sokobot.puzzles import get_puzzle

    logging.basicConfig(level=logging.INFO)

    if len(sys.argv) > 1:
        with open(sys.argv[1]) as f:
            level_text = f.read()
    else:
        level_text = get_puzzle("One Box Wide")

    width, height, map_data, items_data = parse_level(level_text)
    initial = State.from_level(Grid.from_map(width, height, map_data), items_data)
    print("Solving:")
    print(render_state(initial))
    print()

    outcome = search(initial)
    if outcome.solved:
        print(f"Solved in {len(outcome.path)} moves, "
              f"{outcome.states_explored} states explored "
              f"({outcome.elapsed:.2f}s).")
        print(f"Moves: {outcome.path}")
    else:
        print("No solution found.")
