"""Square board with row-major cell ids for the snake game."""

from __future__ import annotations

from typing import NamedTuple

import numpy as np

MIN_BOARD_SIZE = 4


class Coord(NamedTuple):
    """A (row, col) position on the board."""

    row: int
    col: int


def create_grid(size: int) -> np.ndarray:
    """Return a ``size`` x ``size`` matrix of cell ids, row-major from 1."""
    if size < MIN_BOARD_SIZE:
        raise ValueError(f"Board size must be at least {MIN_BOARD_SIZE}.")
    return np.arange(1, size * size + 1, dtype=np.int64).reshape(size, size)


class Grid:
    """NumPy-backed board mapping coordinates to cell ids.

    Coordinates use (row, col) ordering consistent with NumPy indexing.
    The mapping is fixed for the lifetime of the grid.
    """

    def __init__(self, size: int = 15) -> None:
        self.cells = create_grid(size)
        self.size = size

    @property
    def max_cell(self) -> int:
        """Largest cell id on the board."""
        return self.size * self.size

    def is_out_of_bounds(self, coord: tuple[int, int]) -> bool:
        """Check whether a coordinate lies outside the board."""
        row, col = coord
        return row < 0 or col < 0 or row >= self.size or col >= self.size

    def cell_at(self, coord: tuple[int, int]) -> int:
        """Return the cell id at *coord*. Callers bounds-check first."""
        row, col = coord
        return int(self.cells[row, col])

    def to_list(self) -> list[list[int]]:
        """Return the cell-id matrix as nested lists."""
        return self.cells.tolist()
