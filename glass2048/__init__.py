# -*- coding: utf-8 -*-
"""
Rule engine of the 2048 sliding-tile puzzle.
"""

from .core import Board, Direction, MoveResult, Position, Tile
from .envs import Game

__all__ = ["Board", "Direction", "Game", "MoveResult", "Position", "Tile"]
