"""Tests for grid geometry, board state and move rules."""

import unittest

from sokobot.grid import Grid
from sokobot.levels import parse_level
from sokobot.moves import (
    DOWN,
    LEFT,
    MOVES,
    RIGHT,
    UP,
    apply_path,
    is_legal,
    legal_moves,
    try_apply,
)
from sokobot.state import State


def load(text: str) -> State:
    width, height, map_data, items_data = parse_level(text)
    return State.from_level(Grid.from_map(width, height, map_data), items_data)


class TestGrid(unittest.TestCase):

    def setUp(self):
        self.grid = Grid.from_map(4, 3, ["####", "#. #", "####"])

    def test_queries(self):
        self.assertTrue(self.grid.is_wall(0, 0))
        self.assertFalse(self.grid.is_wall(1, 2))
        self.assertTrue(self.grid.is_goal(1, 1))
        self.assertFalse(self.grid.is_goal(1, 2))
        self.assertEqual(self.grid.goals, frozenset({(1, 1)}))
        self.assertEqual(list(self.grid.floor_cells()), [(1, 1), (1, 2)])

    def test_out_of_range_is_rejected_gracefully(self):
        for r, c in [(-1, 0), (0, -1), (3, 0), (0, 4), (100, 100)]:
            with self.subTest(pos=(r, c)):
                self.assertFalse(self.grid.is_within_bounds(r, c))
                self.assertFalse(self.grid.is_wall(r, c))
                self.assertFalse(self.grid.is_goal(r, c))
                self.assertTrue(self.grid.is_blocked(r, c))

    def test_height_mismatch_raises(self):
        with self.assertRaises(ValueError):
            Grid.from_map(4, 2, ["####", "#. #", "####"])

    def test_width_mismatch_raises(self):
        with self.assertRaises(ValueError):
            Grid.from_map(4, 3, ["####", "#.#", "####"])

    def test_unknown_symbol_raises(self):
        with self.assertRaises(ValueError):
            Grid.from_map(4, 3, ["####", "#.x#", "####"])

    def test_floor_aliases(self):
        grid = Grid.from_map(4, 1, ["#-_#"])
        self.assertEqual(list(grid.floor_cells()), [(0, 1), (0, 2)])


class TestState(unittest.TestCase):

    def setUp(self):
        self.grid = Grid.from_map(5, 3, ["#####", "#.  #", "#####"])

    def test_from_level(self):
        state = State.from_level(self.grid, ["     ", " $@  ", "     "])
        self.assertEqual(state.player, (1, 2))
        self.assertEqual(state.crates, frozenset({(1, 1)}))
        self.assertTrue(state.is_goal_state())
        self.assertTrue(state.has_crate_at(1, 1))

    def test_no_player_raises(self):
        with self.assertRaises(ValueError):
            State.from_level(self.grid, ["     ", " $   ", "     "])

    def test_two_players_raises(self):
        with self.assertRaises(ValueError):
            State.from_level(self.grid, ["     ", " @@  ", "     "])

    def test_crate_on_wall_raises(self):
        with self.assertRaises(ValueError):
            State.from_level(self.grid, ["$    ", " @   ", "     "])

    def test_player_on_wall_raises(self):
        with self.assertRaises(ValueError):
            State.from_level(self.grid, ["     ", "    @", "     "])

    def test_dimension_mismatch_raises(self):
        with self.assertRaises(ValueError):
            State.from_level(self.grid, ["     ", " @   "])
        with self.assertRaises(ValueError):
            State.from_level(self.grid, ["     ", " @  ", "     "])

    def test_identity_ignores_grid(self):
        other_grid = Grid.from_map(5, 3, ["#####", "#  .#", "#####"])
        a = State((1, 2), frozenset({(1, 1)}), self.grid)
        b = State((1, 2), frozenset({(1, 1)}), other_grid)
        self.assertEqual(a, b)
        self.assertEqual(hash(a), hash(b))
        self.assertEqual(len({a, b}), 1)

    def test_differing_states_are_unequal(self):
        a = State((1, 2), frozenset({(1, 1)}), self.grid)
        self.assertNotEqual(a, State((1, 3), frozenset({(1, 1)}), self.grid))
        self.assertNotEqual(a, State((1, 2), frozenset({(1, 3)}), self.grid))

    def test_same_state_via_different_paths(self):
        state = load("""\
#####
#@  #
#   #
#####""")
        via_right_down = apply_path(state, "rd")
        via_down_right = apply_path(state, "dr")
        self.assertEqual(via_right_down, via_down_right)
        self.assertEqual(hash(via_right_down), hash(via_down_right))


class TestMoves(unittest.TestCase):

    def setUp(self):
        self.state = load("""\
#####
#@$ #
# $ #
#. .#
#####""")

    def test_move_table(self):
        self.assertEqual([(m.dr, m.dc, m.command) for m in MOVES], [
            (-1, 0, "u"), (1, 0, "d"), (0, -1, "l"), (0, 1, "r"),
        ])

    def test_walk(self):
        nxt = try_apply(DOWN, self.state)
        self.assertEqual(nxt.player, (2, 1))
        self.assertEqual(nxt.crates, self.state.crates)

    def test_push(self):
        nxt = try_apply(RIGHT, self.state)
        self.assertEqual(nxt.player, (1, 2))
        self.assertEqual(nxt.crates, frozenset({(1, 3), (2, 2)}))

    def test_wall_blocks(self):
        self.assertIsNone(try_apply(UP, self.state))
        self.assertIsNone(try_apply(LEFT, self.state))

    def test_crate_into_wall_blocked(self):
        state = load("""\
####
#@$#
####""")
        self.assertIsNone(try_apply(RIGHT, state))

    def test_crate_into_crate_blocked(self):
        state = load("""\
######
#@$$ #
######""")
        self.assertIsNone(try_apply(RIGHT, state))

    def test_off_board_blocked(self):
        state = load("@$")
        self.assertIsNone(try_apply(LEFT, state))
        self.assertIsNone(try_apply(RIGHT, state))
        self.assertIsNone(try_apply(UP, state))

    def test_input_never_mutated(self):
        player, crates = self.state.player, set(self.state.crates)
        for move in MOVES:
            try_apply(move, self.state)
        apply_path(self.state, "rd")
        self.assertEqual(self.state.player, player)
        self.assertEqual(set(self.state.crates), crates)

    def test_legality(self):
        self.assertTrue(is_legal(RIGHT, self.state))
        self.assertFalse(is_legal(UP, self.state))
        self.assertEqual(legal_moves(self.state), [DOWN, RIGHT])

    def test_legality_matches_rule_on_every_cell(self):
        """try_apply succeeds iff target is open and any pushed crate has room."""
        grid = self.state.grid
        crates = self.state.crates
        for r, c in grid.floor_cells():
            if (r, c) in crates:
                continue
            state = State((r, c), crates, grid)
            for move in MOVES:
                target = (r + move.dr, c + move.dc)
                dest = (target[0] + move.dr, target[1] + move.dc)
                expected = not grid.is_blocked(*target) and (
                    target not in crates
                    or (not grid.is_blocked(*dest) and dest not in crates)
                )
                with self.subTest(player=(r, c), move=move.command):
                    self.assertEqual(is_legal(move, state), expected)

    def test_apply_path(self):
        final = apply_path(self.state, "dr")
        self.assertEqual(final.player, (2, 2))
        self.assertEqual(final.crates, frozenset({(1, 2), (2, 3)}))

    def test_apply_path_illegal_raises(self):
        with self.assertRaises(ValueError):
            apply_path(self.state, "u")
        with self.assertRaises(ValueError):
            apply_path(self.state, "x")


if __name__ == "__main__":
    unittest.main(verbosity=2)
