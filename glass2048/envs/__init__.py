# -*- coding: utf-8 -*-
"""
Python implementation of the 2048 game.

This module provides the `Game` class, which owns the game board and applies the rules of the 2048 game to it.
"""

from .game import Game

__all__ = ["Game"]
