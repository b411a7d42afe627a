"""
Conversion between a board of tiles and a numpy grid of values, for display and for building test boards.
"""

from numpy import argwhere, asarray, int64, ndarray, zeros

from glass2048.core.tiles import GRID_SIZE, Board, Position, Tile


def board_to_array(board: Board) -> ndarray:
    """
    Lay out the tile values of a board on a grid.

    Parameters
    ----------
    board : Board
        The board to convert.

    Returns
    -------
    ndarray
        A ``(4, 4)`` int64 array indexed ``[row, column]``, 0 for empty cells.

    Example
    -------
    >>> board = Board(tiles=[Tile(id=1, value=2, position=Position(column=3, row=0))])
    >>> board_to_array(board)[0]
    array([0, 0, 0, 2])
    """
    grid = zeros((GRID_SIZE, GRID_SIZE), dtype=int64)
    for tile in board.tiles:
        grid[tile.position.row, tile.position.column] = tile.value
    return grid


def board_from_array(grid, score: int = 0, first_id: int = 1) -> Board:
    """
    Build a board from a grid of values.

    Parameters
    ----------
    grid : array_like
        A ``(4, 4)`` array of tile values indexed ``[row, column]``, 0 for empty cells.
    score : int, optional
        Score of the board (default is 0).
    first_id : int, optional
        Identity of the first tile; tiles are numbered in row-major order (default is 1).

    Returns
    -------
    Board
        The board holding one tile per non-zero cell.

    Raises
    ------
    ValueError
        If the grid is not 4x4 or holds a value that is not a tile value.
    """
    values = asarray(grid)
    if values.shape != (GRID_SIZE, GRID_SIZE):
        raise ValueError(f'Expected a {GRID_SIZE}x{GRID_SIZE} grid, got shape {values.shape}')

    board = Board(score=score)
    for tile_id, (row, column) in enumerate(argwhere(values != 0), start=first_id):
        position = Position(column=int(column), row=int(row))
        board.append(Tile(id=tile_id, value=int(values[row, column]), position=position))
    return board
