"""
Standard Sokoban text notation <-> map/item grids.

  # = wall, ' ' = floor, . = goal, $ = crate, @ = player,
  * = crate on goal, + = player on goal
"""

from __future__ import annotations

from sokobot.grid import CRATE, EMPTY, FLOOR, GOAL, PLAYER, WALL
from sokobot.state import State


def parse_level(text: str) -> tuple[int, int, list[str], list[str]]:
    """Split a level string into (width, height, map_data, items_data).

    Short rows are padded with floor.  Raises ValueError for unknown
    symbols or a level without a player.
    """
    lines = text.rstrip("\r\n").splitlines()
    if not lines:
        raise ValueError("Level is empty")
    height = len(lines)
    width = max(len(line) for line in lines)

    map_data: list[str] = []
    items_data: list[str] = []
    has_player = False

    for r, line in enumerate(lines):
        map_row = []
        item_row = []
        for c, ch in enumerate(line.ljust(width)):
            if ch in (WALL, FLOOR, GOAL):
                map_row.append(ch)
                item_row.append(EMPTY)
            elif ch in (PLAYER, "+"):
                map_row.append(GOAL if ch == "+" else FLOOR)
                item_row.append(PLAYER)
                has_player = True
            elif ch in (CRATE, "*"):
                map_row.append(GOAL if ch == "*" else FLOOR)
                item_row.append(CRATE)
            elif ch in ("-", "_"):
                map_row.append(FLOOR)
                item_row.append(EMPTY)
            else:
                raise ValueError(f"Unknown level symbol {ch!r} at ({r}, {c})")
        map_data.append("".join(map_row))
        items_data.append("".join(item_row))

    if not has_player:
        raise ValueError("Level has no player (@)")

    return width, height, map_data, items_data


def render_state(state: State) -> str:
    """Render a state back to level text."""
    grid = state.grid
    lines = []
    for r in range(grid.height):
        row = []
        for c in range(grid.width):
            pos = (r, c)
            on_goal = grid.is_goal(r, c)
            if grid.is_wall(r, c):
                row.append(WALL)
            elif pos in state.crates:
                row.append("*" if on_goal else CRATE)
            elif pos == state.player:
                row.append("+" if on_goal else PLAYER)
            elif on_goal:
                row.append(GOAL)
            else:
                row.append(FLOOR)
        lines.append("".join(row).rstrip())
    return "\n".join(lines)
