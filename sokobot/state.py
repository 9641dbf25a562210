"""
Board state: player position plus crate set for one search node.

States are immutable values.  Equality and hashing look at the player and the
crates only; the grid is shared by every state of a puzzle.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from sokobot.grid import CRATE, EMPTY, PLAYER, Grid, Pos


@dataclass(frozen=True)
class State:
    player: Pos
    crates: frozenset[Pos]
    grid: Grid = field(compare=False, repr=False)

    @classmethod
    def from_level(cls, grid: Grid,
                   items_data: Sequence[Sequence[str]]) -> State:
        """Build the initial state from an item grid of the same size as the map.

        Raises ValueError when the player is missing or duplicated, or when an
        item sits on a wall.
        """
        if len(items_data) != grid.height:
            raise ValueError(
                f"Item grid has {len(items_data)} rows, map has {grid.height}"
            )

        player: Pos | None = None
        crates: set[Pos] = set()
        for r, line in enumerate(items_data):
            if len(line) != grid.width:
                raise ValueError(
                    f"Item row {r} has {len(line)} cells, map width is {grid.width}"
                )
            for c, ch in enumerate(line):
                if ch == EMPTY:
                    continue
                if ch not in (PLAYER, CRATE):
                    raise ValueError(f"Unknown item symbol {ch!r} at ({r}, {c})")
                if grid.is_wall(r, c):
                    raise ValueError(f"Item {ch!r} placed on a wall at ({r}, {c})")
                if ch == PLAYER:
                    if player is not None:
                        raise ValueError(
                            f"Level has more than one player: {player} and {(r, c)}"
                        )
                    player = (r, c)
                else:
                    crates.add((r, c))

        if player is None:
            raise ValueError("Level has no player (@)")

        return cls(player=player, crates=frozenset(crates), grid=grid)

    def has_crate_at(self, row: int, col: int) -> bool:
        return (row, col) in self.crates

    def move_to(self, player: Pos, crates: frozenset[Pos]) -> State:
        """Return a new state on the same grid."""
        return State(player=player, crates=crates, grid=self.grid)

    def is_goal_state(self) -> bool:
        return self.crates <= self.grid.goals
