"""
Value types for the 2048 board: directions, grid positions, tiles and the board itself.
"""

from dataclasses import dataclass, field, replace
from enum import Enum

# ##>: The board is always a 4x4 grid.
GRID_SIZE = 4


class Direction(str, Enum):
    """Direction in which every tile slides during a move."""

    UP = 'up'
    DOWN = 'down'
    LEFT = 'left'
    RIGHT = 'right'


@dataclass(frozen=True)
class Position:
    """
    Cell coordinate on the board.

    Attributes
    ----------
    column : int
        Horizontal index, 0 is the left edge.
    row : int
        Vertical index, 0 is the top edge.
    """

    column: int
    row: int

    def __post_init__(self):
        if not (0 <= self.column < GRID_SIZE and 0 <= self.row < GRID_SIZE):
            raise ValueError(f'Position out of the {GRID_SIZE}x{GRID_SIZE} grid: ({self.column}, {self.row})')


# ##>: Column-major enumeration of every cell, the fixed order used for random draws.
ALL_POSITIONS: tuple[Position, ...] = tuple(
    Position(column, row) for column in range(GRID_SIZE) for row in range(GRID_SIZE)
)


@dataclass(frozen=True)
class Tile:
    """
    Snapshot of a numbered tile.

    Attributes
    ----------
    id : int
        Identity token, stable across moves so that a renderer can follow the tile.
    value : int
        Power of two, at least 2.
    position : Position
        Cell occupied by the tile.
    """

    id: int
    value: int
    position: Position

    def __post_init__(self):
        if self.value < 2 or self.value & (self.value - 1):
            raise ValueError(f'Tile value must be a power of two >= 2, got {self.value}')

    def moved_to(self, position: Position, value: int | None = None) -> 'Tile':
        """Return a new snapshot of this tile at ``position``, keeping its identity."""
        return replace(self, position=position, value=self.value if value is None else value)


@dataclass
class Board:
    """
    Mutable game board: the tiles in play and the accumulated score.

    Notes
    -----
    - At most one tile occupies a given position.
    - The score only grows, and only by merged values.
    """

    score: int = 0
    tiles: list[Tile] = field(default_factory=list)

    def occupied(self) -> set[Position]:
        """Return the set of occupied positions."""
        return {tile.position for tile in self.tiles}

    def tile_at(self, position: Position) -> Tile | None:
        """
        Find the tile occupying a position.

        Parameters
        ----------
        position : Position
            Cell to look up.

        Returns
        -------
        Tile or None
            The tile at ``position``, or None if the cell is empty.
        """
        return next((tile for tile in self.tiles if tile.position == position), None)

    def append(self, tile: Tile) -> None:
        """
        Add a tile to the board.

        Raises
        ------
        ValueError
            If the tile's position is already occupied.
        """
        if self.tile_at(tile.position) is not None:
            raise ValueError(f'Position ({tile.position.column}, {tile.position.row}) is already occupied')
        self.tiles.append(tile)

    def copy(self) -> 'Board':
        """Return an independent copy; tiles are immutable so a shallow list copy is enough."""
        return Board(score=self.score, tiles=list(self.tiles))
