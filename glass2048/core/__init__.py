# -*- coding: utf-8 -*-
"""
Rules of the 2048 game on a fixed 4x4 board.

It provides the board value types, the direction mapping, and the functions that slide and merge tiles,
spawn new tiles and compute the next board.
"""

from .gameboard import (
    FOUR_ODDS,
    INITIAL_TILES,
    TILE_SPAWN_PROBS,
    MoveResult,
    free_positions,
    initial_board,
    new_tile,
    next_state,
    random_tile_value,
    slide_and_merge,
)
from .gamemove import parse_direction, position_mapper
from .tiles import ALL_POSITIONS, GRID_SIZE, Board, Direction, Position, Tile

__all__ = [
    "ALL_POSITIONS",
    "GRID_SIZE",
    "FOUR_ODDS",
    "INITIAL_TILES",
    "TILE_SPAWN_PROBS",
    "Board",
    "Direction",
    "MoveResult",
    "Position",
    "Tile",
    "free_positions",
    "initial_board",
    "new_tile",
    "next_state",
    "parse_direction",
    "position_mapper",
    "random_tile_value",
    "slide_and_merge",
]
