"""Sokobot — best-first Sokoban solver."""

from sokobot.search import SearchResult, solve_sokoban_puzzle

__all__ = ["SearchResult", "solve_sokoban_puzzle"]
