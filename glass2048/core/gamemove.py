"""
Direction handling for the 2048 rule engine: parsing user input and mapping a direction onto grid coordinates.
"""

from collections.abc import Callable

from glass2048.core.tiles import GRID_SIZE, Direction, Position

PositionMapper = Callable[[int, int], Position]

_LAST = GRID_SIZE - 1

# ##>: (axis, cross_axis) -> Position. Axis 0 is the wall the direction pushes toward.
_MAPPERS: dict[Direction, PositionMapper] = {
    Direction.UP: lambda axis, cross: Position(column=cross, row=axis),
    Direction.DOWN: lambda axis, cross: Position(column=cross, row=_LAST - axis),
    Direction.LEFT: lambda axis, cross: Position(column=axis, row=cross),
    Direction.RIGHT: lambda axis, cross: Position(column=_LAST - axis, row=cross),
}


def parse_direction(value: Direction | str) -> Direction:
    """
    Convert user input into a direction.

    Parameters
    ----------
    value : Direction or str
        A direction, or its name in any case (``"left"``, ``"UP"``, ...).

    Returns
    -------
    Direction
        The matching direction.

    Raises
    ------
    ValueError
        If ``value`` names no direction.
    """
    if isinstance(value, Direction):
        return value
    try:
        return Direction(str(value).strip().lower())
    except ValueError:
        raise ValueError(f'Unknown direction: {value!r}') from None


def position_mapper(direction: Direction) -> PositionMapper:
    """
    Get the coordinate mapping used to scan the board for a direction.

    Parameters
    ----------
    direction : Direction
        Direction of the move.

    Returns
    -------
    Callable[[int, int], Position]
        Function of ``(axis, cross_axis)`` returning the cell. ``axis`` runs along the motion, starting
        at the wall tiles slide toward; ``cross_axis`` selects one of the lines perpendicular to it.
    """
    return _MAPPERS[parse_direction(direction)]
