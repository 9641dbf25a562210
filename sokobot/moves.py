"""
Move rules: the four player moves and the push transition.
"""

from __future__ import annotations

from typing import NamedTuple

from sokobot.state import State


class Move(NamedTuple):
    dr: int
    dc: int
    command: str

UP    = Move(-1,  0, "u")
DOWN  = Move( 1,  0, "d")
LEFT  = Move( 0, -1, "l")
RIGHT = Move( 0,  1, "r")
MOVES = (UP, DOWN, LEFT, RIGHT)

MOVE_BY_COMMAND = {move.command: move for move in MOVES}


def try_apply(move: Move, state: State) -> State | None:
    """Apply `move` to `state`, returning the successor or None if illegal.

    Walks into an empty cell, or pushes a crate one cell further when the
    cell behind it is free.  The input state is never modified.
    """
    grid = state.grid
    r, c = state.player
    target = (r + move.dr, c + move.dc)

    if not grid.is_within_bounds(*target) or grid.is_wall(*target):
        return None

    if target not in state.crates:
        return state.move_to(target, state.crates)

    dest = (target[0] + move.dr, target[1] + move.dc)
    if (not grid.is_within_bounds(*dest)
            or grid.is_wall(*dest)
            or dest in state.crates):
        return None

    return state.move_to(target, (state.crates - {target}) | {dest})


def is_legal(move: Move, state: State) -> bool:
    return try_apply(move, state) is not None


def legal_moves(state: State) -> list[Move]:
    """All legal moves from `state`, in enumeration order."""
    return [move for move in MOVES if is_legal(move, state)]


def apply_path(state: State, path: str) -> State:
    """Replay a command string from `state` and return the final state.

    Raises ValueError on an unknown command or an illegal step.
    """
    for i, command in enumerate(path):
        move = MOVE_BY_COMMAND.get(command)
        if move is None:
            raise ValueError(f"Unknown move command {command!r} at step {i}")
        next_state = try_apply(move, state)
        if next_state is None:
            raise ValueError(
                f"Illegal move {command!r} at step {i} from player {state.player}"
            )
        state = next_state
    return state
