from unittest import TestCase, main

import numpy as np

from glass2048.core.tiles import Board, Position, Tile
from glass2048.utils.grid import board_from_array, board_to_array


class TestGrid(TestCase):
    def test_board_to_array(self):
        """
        Test if tiles are laid out by row then column.
        """
        board = Board(
            tiles=[Tile(id=1, value=2, position=Position(3, 0)), Tile(id=2, value=16, position=Position(0, 2))]
        )
        expected = np.array([[0, 0, 0, 2], [0, 0, 0, 0], [16, 0, 0, 0], [0, 0, 0, 0]])
        np.testing.assert_array_equal(board_to_array(board), expected)

    def test_board_from_array(self):
        """
        Test if a grid becomes one tile per non-zero cell, numbered row by row.
        """
        board = board_from_array([[0, 4, 0, 0], [2, 0, 0, 8], [0, 0, 0, 0], [0, 0, 0, 0]], score=16, first_id=5)

        self.assertEqual(board.score, 16)
        self.assertEqual(
            board.tiles,
            [
                Tile(id=5, value=4, position=Position(1, 0)),
                Tile(id=6, value=2, position=Position(0, 1)),
                Tile(id=7, value=8, position=Position(3, 1)),
            ],
        )

    def test_invalid_grids(self):
        """
        Test if malformed grids are rejected.
        """
        with self.assertRaises(ValueError):
            board_from_array([[2, 0, 0], [0, 0, 0], [0, 0, 0]])
        with self.assertRaises(ValueError):
            board_from_array([[3, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])


if __name__ == '__main__':
    main()
