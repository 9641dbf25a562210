"""
Simple corner deadlocks.

A crate on a non-goal cell pinned by two perpendicular walls can never move
again.  This catches only those cheap, certain cases; freeze and line
deadlocks are not detected.
"""

from __future__ import annotations

from sokobot.grid import Grid, Pos
from sokobot.state import State


# (vertical neighbour, horizontal neighbour) offsets forming a corner
CORNERS = (
    ((-1, 0), (0, -1)),  # above + left
    ((-1, 0), (0, 1)),   # above + right
    ((1, 0), (0, -1)),   # below + left
    ((1, 0), (0, 1)),    # below + right
)


def _is_corner(grid: Grid, r: int, c: int) -> bool:
    return any(
        grid.is_blocked(r + vr, c + vc) and grid.is_blocked(r + hr, c + hc)
        for (vr, vc), (hr, hc) in CORNERS
    )


def compute_deadlocks(grid: Grid) -> frozenset[Pos]:
    """Every non-wall, non-goal cell that sits in a corner."""
    return frozenset(
        (r, c) for r, c in grid.floor_cells()
        if (r, c) not in grid.goals and _is_corner(grid, r, c)
    )


def is_deadlocked(state: State, deadlocks: frozenset[Pos]) -> bool:
    return not deadlocks.isdisjoint(state.crates)
