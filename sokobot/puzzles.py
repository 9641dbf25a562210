"""
Built-in Sokoban puzzle collection.

Small puzzles ranging from trivial to moderate, every one solvable.
All puzzles are ≤8x8 with ≤4 crates.

Standard format:
  # = wall, ' ' = floor, . = goal, $ = crate, @ = player,
  * = crate on goal, + = player on goal
"""

PUZZLES: dict[str, str] = {}

# ------------------------------------------------------------------
# 1-crate puzzles  (trivial)
# ------------------------------------------------------------------

PUZZLES["Corridor"] = """\
######
#@$ .#
######"""

PUZZLES["One Crate"] = """\
####
#. #
#$ #
#@ #
####"""

PUZZLES["One Crate Wide"] = """\
######
#.   #
# $  #
#  @ #
######"""

PUZZLES["Pillar"] = """\
#######
#  .  #
#  #  #
# $   #
#  @  #
#######"""

# ------------------------------------------------------------------
# 2-crate puzzles
# ------------------------------------------------------------------

PUZZLES["Two Crate Line"] = """\
######
#    #
# @  #
# $$ #
# .. #
######"""

PUZZLES["Two Crate Across"] = """\
######
# .  #
#  $ #
# $  #
#  . #
# @  #
######"""

# ------------------------------------------------------------------
# 3-crate puzzles
# ------------------------------------------------------------------

PUZZLES["Three Down"] = """\
#######
#     #
# $$$ #
#     #
# ... #
#  @  #
#######"""

PUZZLES["Three Crate L"] = """\
######
#    #
# @$ #
# $  #
# $ .#
#  ..#
######"""

# ------------------------------------------------------------------
# 4-crate puzzles
# ------------------------------------------------------------------

PUZZLES["Four Down"] = """\
########
#      #
# $$$$ #
#      #
# .... #
#  @   #
########"""


def get_puzzle_names() -> list[str]:
    """Return all puzzle names in order."""
    return list(PUZZLES.keys())


def get_puzzle(name: str) -> str:
    """Return the level text for a named puzzle."""
    return PUZZLES[name]
