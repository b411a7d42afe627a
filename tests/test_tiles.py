"""
Tests for the board value types: positions, tiles and the board.
"""

from unittest import TestCase, main

from glass2048.core.tiles import ALL_POSITIONS, GRID_SIZE, Board, Position, Tile


class TestPosition(TestCase):
    """Test grid coordinates."""

    def test_equality_and_hash(self):
        """Positions compare and hash by both coordinates."""
        self.assertEqual(Position(1, 2), Position(column=1, row=2))
        self.assertNotEqual(Position(1, 2), Position(2, 1))
        self.assertEqual(len({Position(1, 2), Position(1, 2), Position(2, 1)}), 2)

    def test_out_of_grid(self):
        """Coordinates outside the grid are rejected."""
        for column, row in [(-1, 0), (0, -1), (GRID_SIZE, 0), (0, GRID_SIZE)]:
            with self.assertRaises(ValueError):
                Position(column, row)

    def test_all_positions(self):
        """Every cell is listed once, column by column."""
        self.assertEqual(len(ALL_POSITIONS), 16)
        self.assertEqual(len(set(ALL_POSITIONS)), 16)
        self.assertEqual(ALL_POSITIONS[:2], (Position(0, 0), Position(0, 1)))


class TestTile(TestCase):
    """Test tile snapshots."""

    def test_invalid_values(self):
        """Only powers of two from 2 upward are tile values."""
        for value in [-2, 0, 1, 3, 6, 12]:
            with self.assertRaises(ValueError):
                Tile(id=1, value=value, position=Position(0, 0))

    def test_moved_to_keeps_identity(self):
        """Moving a tile gives a new snapshot with the same identity."""
        tile = Tile(id=7, value=2, position=Position(3, 1))
        moved = tile.moved_to(Position(0, 1))
        doubled = tile.moved_to(Position(0, 1), value=4)

        self.assertEqual(moved, Tile(id=7, value=2, position=Position(0, 1)))
        self.assertEqual(doubled.value, 4)
        self.assertEqual(doubled.id, 7)

        # ##>: The original snapshot is untouched.
        self.assertEqual(tile.position, Position(3, 1))


class TestBoard(TestCase):
    """Test the board container."""

    def setUp(self):
        """Build a board with two tiles."""
        self.board = Board(
            score=12,
            tiles=[Tile(id=1, value=2, position=Position(0, 0)), Tile(id=2, value=8, position=Position(2, 3))],
        )

    def test_tile_at(self):
        """Lookup returns the tile on a cell, or None."""
        self.assertEqual(self.board.tile_at(Position(2, 3)).id, 2)
        self.assertIsNone(self.board.tile_at(Position(3, 2)))

    def test_append(self):
        """Appending adds a tile on a free cell only."""
        self.board.append(Tile(id=3, value=4, position=Position(1, 1)))
        self.assertEqual(len(self.board.tiles), 3)

        with self.assertRaises(ValueError):
            self.board.append(Tile(id=4, value=2, position=Position(0, 0)))
        self.assertEqual(len(self.board.tiles), 3)

    def test_copy_is_independent(self):
        """Changing a copy does not change the original."""
        clone = self.board.copy()
        clone.append(Tile(id=3, value=4, position=Position(1, 1)))
        clone.score += 4

        self.assertEqual(len(self.board.tiles), 2)
        self.assertEqual(self.board.score, 12)

    def test_occupied(self):
        """The board reports its occupied cells."""
        self.assertEqual(self.board.occupied(), {Position(0, 0), Position(2, 3)})
        self.assertEqual(Board().occupied(), set())


if __name__ == '__main__':
    main()
