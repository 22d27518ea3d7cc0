"""Food placement logic."""

from __future__ import annotations

import logging
from collections.abc import Collection
from dataclasses import dataclass

import numpy as np

logger = logging.getLogger(__name__)

DEFAULT_REVERSE_PROBABILITY = 0.3


@dataclass(frozen=True)
class Food:
    """A food cell and whether eating it reverses the snake."""

    cell: int
    reverses: bool = False


def pick_food_cell(
    occupied: Collection[int],
    exclude_cell: int | None,
    max_cell: int,
    rng: np.random.Generator,
) -> int:
    """Sample a cell in ``[1, max_cell]`` not occupied and not *exclude_cell*.

    Samples uniformly and rejects invalid candidates. Raises ``ValueError``
    when no valid cell exists, since sampling would never terminate.
    """
    free = max_cell - len(occupied)
    if exclude_cell is not None and exclude_cell not in occupied and 1 <= exclude_cell <= max_cell:
        free -= 1
    if free <= 0:
        raise ValueError("No free cell left for food placement.")

    while True:
        candidate = int(rng.integers(1, max_cell, endpoint=True))
        if candidate in occupied or candidate == exclude_cell:
            continue
        return candidate


def roll_reverse_flag(
    rng: np.random.Generator,
    probability: float = DEFAULT_REVERSE_PROBABILITY,
) -> bool:
    """Return ``True`` with the given *probability*."""
    return bool(rng.random() < probability)


class FoodSpawner:
    """Places food on the board after each consumption.

    Uses a seeded NumPy RNG for deterministic, reproducible placement.
    """

    def __init__(
        self,
        max_cell: int,
        reverse_probability: float = DEFAULT_REVERSE_PROBABILITY,
        rng: np.random.Generator | None = None,
    ) -> None:
        if not 0.0 <= reverse_probability <= 1.0:
            raise ValueError("reverse_probability must be between 0 and 1.")
        self.max_cell = max_cell
        self.reverse_probability = reverse_probability
        self.rng = rng if rng is not None else np.random.default_rng()

    def respawn(self, occupied: Collection[int], eaten: Food) -> Food:
        """Place new food away from the snake and the cell just eaten."""
        cell = pick_food_cell(occupied, eaten.cell, self.max_cell, self.rng)
        food = Food(cell, roll_reverse_flag(self.rng, self.reverse_probability))
        logger.debug("Food placed at cell %d (reverses=%s).", food.cell, food.reverses)
        return food
