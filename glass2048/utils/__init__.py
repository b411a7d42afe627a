# -*- coding: utf-8 -*-
"""
This module provides numpy helpers to view a board as a grid of values and to build boards from such grids.
"""

from .grid import board_from_array, board_to_array

__all__ = ["board_from_array", "board_to_array"]
