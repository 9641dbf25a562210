"""
Static Sokoban map: walls, floor and goal cells.

The grid is built once per puzzle and only read afterwards.  Coordinates are
(row, col) tuples throughout the package.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass


Pos = tuple[int, int]

# Map symbols
WALL = "#"
GOAL = "."
FLOOR = " "
FLOOR_ALIASES = ("-", "_")

# Item symbols
PLAYER = "@"
CRATE = "$"
EMPTY = " "


@dataclass(frozen=True)
class Grid:
    """Immutable map of wall / floor / goal cells."""
    width: int
    height: int
    rows: tuple[str, ...]
    goals: frozenset[Pos]

    @classmethod
    def from_map(cls, width: int, height: int,
                 map_data: Sequence[Sequence[str]]) -> Grid:
        """Build a Grid from a character grid, rejecting bad dimensions or
        unknown symbols with ValueError."""
        if width <= 0 or height <= 0:
            raise ValueError(f"Map dimensions must be positive, got {width}x{height}")
        if len(map_data) != height:
            raise ValueError(
                f"Map has {len(map_data)} rows, expected height {height}"
            )

        rows: list[str] = []
        goals: set[Pos] = set()
        for r, line in enumerate(map_data):
            if len(line) != width:
                raise ValueError(
                    f"Map row {r} has {len(line)} cells, expected width {width}"
                )
            row = []
            for c, ch in enumerate(line):
                if ch in FLOOR_ALIASES:
                    ch = FLOOR
                if ch not in (WALL, GOAL, FLOOR):
                    raise ValueError(f"Unknown map symbol {ch!r} at ({r}, {c})")
                if ch == GOAL:
                    goals.add((r, c))
                row.append(ch)
            rows.append("".join(row))

        return cls(width=width, height=height, rows=tuple(rows),
                   goals=frozenset(goals))

    def is_within_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.height and 0 <= col < self.width

    def is_wall(self, row: int, col: int) -> bool:
        if not self.is_within_bounds(row, col):
            return False
        return self.rows[row][col] == WALL

    def is_goal(self, row: int, col: int) -> bool:
        return (row, col) in self.goals

    def is_blocked(self, row: int, col: int) -> bool:
        """True for walls and for anything off the board."""
        return not self.is_within_bounds(row, col) or self.rows[row][col] == WALL

    def floor_cells(self) -> Iterator[Pos]:
        """Every non-wall cell, goals included, in row-major order."""
        for r, line in enumerate(self.rows):
            for c, ch in enumerate(line):
                if ch != WALL:
                    yield (r, c)
