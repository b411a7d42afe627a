"""
Core rules of the 2048 game: sliding and merging tiles, spawning new ones, and computing the next board.
"""

import logging
from collections.abc import Iterator
from dataclasses import dataclass

from numpy.random import Generator

from glass2048.core.gamemove import parse_direction, position_mapper
from glass2048.core.tiles import ALL_POSITIONS, GRID_SIZE, Board, Direction, Position, Tile

logger = logging.getLogger(__name__)

# ##>: A new tile is a 4 once in FOUR_ODDS draws, a 2 otherwise.
FOUR_ODDS = 8
TILE_SPAWN_PROBS: dict[int, float] = {2: 1 - 1 / FOUR_ODDS, 4: 1 / FOUR_ODDS}

# ##>: Number of tiles placed on a fresh board.
INITIAL_TILES = 2


@dataclass(frozen=True)
class MoveResult:
    """
    Outcome of one complete turn.

    Attributes
    ----------
    moved : bool
        Whether any tile changed position or value.
    spawned : Tile or None
        Tile added after the move, None if the move was blocked or the board is full.
    gained : int
        Score earned by the merges of this move.
    """

    moved: bool
    spawned: Tile | None = None
    gained: int = 0

    def __bool__(self) -> bool:
        return self.moved


def free_positions(board: Board) -> list[Position]:
    """
    List the empty cells of a board.

    Parameters
    ----------
    board : Board
        Board to inspect.

    Returns
    -------
    list[Position]
        Empty positions in column-major order.
    """
    occupied = board.occupied()
    return [position for position in ALL_POSITIONS if position not in occupied]


def random_tile_value(rng: Generator) -> int:
    """Draw the value of a new tile, following ``TILE_SPAWN_PROBS``: 4 once in ``FOUR_ODDS`` draws, 2 otherwise."""
    return 4 if rng.integers(0, FOUR_ODDS) == 0 else 2


def new_tile(board: Board, rng: Generator, tile_ids: Iterator[int]) -> Tile | None:
    """
    Create a tile on a random empty cell.

    Parameters
    ----------
    board : Board
        Board the tile is meant for, used to find the empty cells. It is not modified.
    rng : Generator
        Source of randomness.
    tile_ids : Iterator[int]
        Source of identity tokens.

    Returns
    -------
    Tile or None
        The new tile (not yet added to the board), or None if there is no empty cell.
    """
    free = free_positions(board)
    if not free:
        logger.debug('No free cell left, nothing spawned')
        return None

    position = free[int(rng.integers(len(free)))]
    tile = Tile(id=next(tile_ids), value=random_tile_value(rng), position=position)
    logger.debug('Spawned tile %d (value %d) at (%d, %d)', tile.id, tile.value, position.column, position.row)
    return tile


def initial_board(rng: Generator, tile_ids: Iterator[int]) -> Board:
    """
    Build a fresh board with two random tiles on distinct cells and a zero score.

    Parameters
    ----------
    rng : Generator
        Source of randomness.
    tile_ids : Iterator[int]
        Source of identity tokens.

    Returns
    -------
    Board
        The new board.
    """
    board = Board()
    for _ in range(INITIAL_TILES):
        tile = new_tile(board, rng, tile_ids)
        if tile is None:
            break
        board.append(tile)
    return board


def slide_and_merge(board: Board, direction: Direction) -> tuple[int, list[Tile], bool]:
    """
    Slide every tile toward a wall and merge equal neighbours.

    Parameters
    ----------
    board : Board
        Board to move. It is not modified.
    direction : Direction
        Direction of the move.

    Returns
    -------
    score : int
        Sum of the values created by merges.
    tiles : list[Tile]
        New tile snapshots after the move.
    moved : bool
        Whether any tile changed position or value.

    Notes
    -----
    - Each line perpendicular to the motion is compacted independently, scanning from the wall the
      tiles slide toward.
    - The skyline is the last tile placed in the line. An incoming tile merges into it only if both
      values are equal and the skyline tile has not already merged during this move.
    - A merged tile keeps the identity of the skyline tile and takes its position.

    Examples
    --------
    A row ``[2, 2, 2, 2]`` moved left gives ``[4, 4, _, _]`` and a score of 8.
    """
    to_position = position_mapper(direction)
    cells = {tile.position: tile for tile in board.tiles}

    tiles: list[Tile] = []
    score = 0
    moved = False

    for cross in range(GRID_SIZE):
        # ##: Index in ``tiles``, slot along the axis, and whether the skyline tile can still merge.
        skyline: tuple[int, int, bool] | None = None

        for axis in range(GRID_SIZE):
            tile = cells.get(to_position(axis, cross))
            if tile is None:
                continue

            if skyline is not None and skyline[2] and tiles[skyline[0]].value == tile.value:
                # ##>: Merge into the skyline tile, which cannot merge again this move.
                target = tiles[skyline[0]]
                merged = target.moved_to(target.position, value=target.value * 2)
                tiles[skyline[0]] = merged
                skyline = (skyline[0], skyline[1], False)
                score += merged.value
                moved = True
            else:
                slot = 0 if skyline is None else skyline[1] + 1
                target_position = to_position(slot, cross)
                moved = moved or tile.position != target_position
                tiles.append(tile.moved_to(target_position))
                skyline = (len(tiles) - 1, slot, True)

    return score, tiles, moved


def next_state(
    board: Board, direction: Direction | str, rng: Generator, tile_ids: Iterator[int]
) -> tuple[Board, MoveResult]:
    """
    Play one complete turn: move the tiles then spawn a new one.

    Parameters
    ----------
    board : Board
        Current board. It is not modified.
    direction : Direction or str
        Direction of the move.
    rng : Generator
        Source of randomness for the spawn.
    tile_ids : Iterator[int]
        Source of identity tokens.

    Returns
    -------
    board : Board
        The board after the turn, ``board`` itself if the move changed nothing.
    result : MoveResult
        What happened during the turn.

    Notes
    -----
    - A blocked move leaves the board and the score untouched and spawns nothing.
    - A move that leaves no free cell is still committed, without a spawn.
    """
    direction = parse_direction(direction)
    score, tiles, moved = slide_and_merge(board, direction)
    if not moved:
        logger.debug('Move %s changed nothing', direction.value)
        return board, MoveResult(moved=False)

    updated = Board(score=board.score + score, tiles=tiles)
    spawned = new_tile(updated, rng, tile_ids)
    if spawned is not None:
        updated.append(spawned)
    return updated, MoveResult(moved=True, spawned=spawned, gained=score)
