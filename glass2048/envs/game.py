"""2048 game engine owning one board, for a presentation layer to drive."""

import logging
from itertools import count

from numpy import ndarray
from numpy.random import Generator, default_rng

from glass2048.core.gameboard import MoveResult, initial_board, new_tile, next_state, slide_and_merge
from glass2048.core.gamemove import parse_direction
from glass2048.core.tiles import Board, Direction, Position, Tile
from glass2048.utils.grid import board_to_array

logger = logging.getLogger(__name__)


class Game:
    """
    2048 game engine.

    This class holds the board and applies the rules to it: resetting the game, moving the tiles and
    spawning new ones.

    Notes
    -----
    Two ways to play a turn are offered:

    - ``step(direction)`` moves the tiles and adds the spawned tile at once.
    - ``move(direction)`` followed by ``append(tile)`` splits the turn so that the caller can animate the
      slide before showing the new tile. No other ``move`` may happen between the two calls.
    """

    def __init__(self, seed: int | None = None, rng: Generator | None = None):
        """
        Initialize the engine and start a game.

        Parameters
        ----------
        seed : int, optional
            Seed of a fresh random generator, ignored when ``rng`` is given.
        rng : Generator, optional
            Random generator to draw spawns from.
        """
        self._rng = rng if rng is not None else default_rng(seed)
        self._tile_ids = count(1)
        self._board = Board()

        self.reset()

    @property
    def board(self) -> Board:
        """Current board, owned by the engine."""
        return self._board

    @property
    def score(self) -> int:
        """Accumulated score of the current game."""
        return self._board.score

    @property
    def tiles(self) -> list[Tile]:
        """Tiles currently in play."""
        return list(self._board.tiles)

    @property
    def observation(self) -> ndarray:
        """
        Get the current board as a grid.

        Returns
        -------
        ndarray
            A ``(4, 4)`` array of tile values indexed ``[row, column]``, 0 for empty cells.
        """
        return board_to_array(self._board)

    def reset(self, seed: int | None = None) -> Board:
        """
        Start a new game: an empty board with two random tiles and a zero score.

        Parameters
        ----------
        seed : int, optional
            Reseed the random generator before placing the tiles.

        Returns
        -------
        Board
            The new board.
        """
        if seed is not None:
            self._rng = default_rng(seed)
        self._board = initial_board(self._rng, self._tile_ids)
        logger.debug('New game with %d tiles', len(self._board.tiles))
        return self._board

    def tile_at(self, position: Position) -> Tile | None:
        """Return the tile at ``position``, or None if the cell is empty."""
        return self._board.tile_at(position)

    def move(self, direction: Direction | str) -> Tile | None:
        """
        Slide the tiles and draw the next tile without adding it.

        Parameters
        ----------
        direction : Direction or str
            Direction of the move.

        Returns
        -------
        Tile or None
            The tile to pass to ``append`` once the slide is shown. None when the move changed nothing or
            when the board has no empty cell left.

        Notes
        -----
        - The board and score are updated before returning.
        - A blocked move leaves the board exactly as it was.
        """
        direction = parse_direction(direction)
        score, tiles, moved = slide_and_merge(self._board, direction)
        if not moved:
            logger.debug('Move %s changed nothing', direction.value)
            return None

        self._board.tiles = tiles
        self._board.score += score
        return new_tile(self._board, self._rng, self._tile_ids)

    def append(self, tile: Tile) -> None:
        """
        Add the tile returned by ``move`` to the board.

        Raises
        ------
        ValueError
            If the tile's cell is already occupied.
        """
        self._board.append(tile)

    def step(self, direction: Direction | str) -> MoveResult:
        """
        Play a complete turn: slide the tiles then add a new one.

        Parameters
        ----------
        direction : Direction or str
            Direction of the move.

        Returns
        -------
        MoveResult
            Whether the board moved, the spawned tile and the score gained.

        Notes
        -----
        The board held by the engine is updated in place, so references to it stay current.
        """
        updated, result = next_state(self._board, parse_direction(direction), self._rng, self._tile_ids)
        if result.moved:
            self._board.tiles = updated.tiles
            self._board.score = updated.score
        return result

    def render(self) -> None:
        """
        Render the game board. This method prints the score and the grid of values to the console.
        """
        print(f'score: {self._board.score}')
        for row in self.observation.tolist():
            print(' \t'.join(map(str, row)))
