"""Cardinal directions and key mapping."""

from __future__ import annotations

import enum

from reverse_snake.grid import Coord


class Direction(enum.Enum):
    """Cardinal movement directions with (row_delta, col_delta) values."""

    UP = (-1, 0)
    RIGHT = (0, 1)
    DOWN = (1, 0)
    LEFT = (0, -1)


_OPPOSITES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}

_DELTAS: dict[tuple[int, int], Direction] = {d.value: d for d in Direction}

KEY_MAP: dict[str, Direction] = {
    "ArrowUp": Direction.UP,
    "ArrowRight": Direction.RIGHT,
    "ArrowDown": Direction.DOWN,
    "ArrowLeft": Direction.LEFT,
}


def opposite(direction: Direction) -> Direction:
    """Return the direction pointing the other way."""
    return _OPPOSITES[direction]


def coord_in_direction(coord: tuple[int, int], direction: Direction) -> Coord:
    """Return the coordinate one step from *coord* towards *direction*."""
    dr, dc = direction.value
    return Coord(coord[0] + dr, coord[1] + dc)


def direction_between(
    start: tuple[int, int], end: tuple[int, int],
) -> Direction | None:
    """Return the direction leading from *start* to the adjacent *end*.

    Returns ``None`` when the two coordinates are not orthogonal neighbours.
    """
    return _DELTAS.get((end[0] - start[0], end[1] - start[1]))


def direction_from_key(key: str) -> Direction | None:
    """Map an arrow-key identifier to a direction, ``None`` for other keys."""
    return KEY_MAP.get(key)
