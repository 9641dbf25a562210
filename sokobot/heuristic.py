"""
Heuristic field: walkable-grid distance from every cell to each goal.

Distances ignore crates, so the summed estimate can overshoot the true cost
when crates get in each other's way.  The search that uses it is therefore a
best-first search, not a certified-optimal A*.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable

from sokobot.grid import Grid, Pos
from sokobot.moves import MOVES
from sokobot.state import State


DistanceMap = dict[Pos, int]
HeuristicField = dict[Pos, DistanceMap]

# Added once per crate that cannot reach any goal.  Large but finite so the
# frontier stays totally ordered.
UNREACHABLE_PENALTY = 1_000_000


def compute_goal_distances(goal: Pos, grid: Grid) -> DistanceMap:
    """BFS outward from `goal` over non-wall cells.

    Cells walled off from the goal get no entry at all, which callers must
    not confuse with a distance of 0.
    """
    distances: DistanceMap = {goal: 0}
    queue: deque[Pos] = deque([goal])
    while queue:
        pos = queue.popleft()
        r, c = pos
        for move in MOVES:
            nb = (r + move.dr, c + move.dc)
            if nb in distances or grid.is_blocked(*nb):
                continue
            distances[nb] = distances[pos] + 1
            queue.append(nb)
    return distances


def compute_heuristic_field(goals: Iterable[Pos], grid: Grid) -> HeuristicField:
    return {goal: compute_goal_distances(goal, grid) for goal in goals}


def estimate(state: State, field: HeuristicField) -> int:
    """Sum over off-goal crates of the distance to the nearest goal."""
    goals = state.grid.goals
    total = 0
    for crate in state.crates:
        if crate in goals:
            continue
        best = min(
            (dist_map[crate] for dist_map in field.values() if crate in dist_map),
            default=None,
        )
        total += UNREACHABLE_PENALTY if best is None else best
    return total


def node_cost(state: State, path: str, field: HeuristicField) -> int:
    """Path length so far (uniform move cost) plus the remaining estimate."""
    return len(path) + estimate(state, field)
