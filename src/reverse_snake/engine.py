"""Tick-based game engine composing grid, snake, and food logic."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass

import numpy as np

from reverse_snake.config import GameConfig
from reverse_snake.direction import (
    Direction,
    coord_in_direction,
    direction_from_key,
    opposite,
)
from reverse_snake.food import Food, FoodSpawner, pick_food_cell
from reverse_snake.grid import Coord, Grid
from reverse_snake.snake import Snake

logger = logging.getLogger(__name__)


class GameStatus(str, enum.Enum):
    """Lifecycle states of the engine."""

    RUNNING = "running"
    GAME_OVER = "game_over"


@dataclass
class GameState:
    """Everything that changes while a game is played.

    ``direction`` is ``None`` once the game is over.
    """

    snake: Snake
    food: Food
    direction: Direction | None = Direction.RIGHT
    score: int = 0
    status: GameStatus = GameStatus.RUNNING
    tick: int = 0

    @property
    def game_over(self) -> bool:
        return self.status == GameStatus.GAME_OVER


def starting_coord(size: int) -> Coord:
    """Return the spawn point at the board's upper-third intersection."""
    # Half rounds up, not to even.
    third = int(size / 3 + 0.5)
    return Coord(third, third)


class GameEngine:
    """Single-snake, tick-based game engine.

    The engine owns the grid and the current :class:`GameState`. A scheduler
    calls :meth:`tick` at a fixed rate and an input source calls
    :meth:`on_direction_key`; both run on the same thread.
    """

    def __init__(self, config: GameConfig | None = None) -> None:
        self.config = config if config is not None else GameConfig()
        self.grid = Grid(self.config.board_size)
        self.rng = np.random.default_rng(self.config.seed)
        self.food_spawner = FoodSpawner(
            self.grid.max_cell,
            reverse_probability=self.config.reverse_probability,
            rng=self.rng,
        )
        self._pending_direction: Direction | None = None
        self.state = self._initial_state()

    def _initial_state(self) -> GameState:
        start = starting_coord(self.grid.size)
        start_cell = self.grid.cell_at(start)
        snake = Snake(start, start_cell)

        food_cell = (start_cell - 1 + self.config.initial_food_offset) % self.grid.max_cell + 1
        if food_cell == start_cell:
            food_cell = pick_food_cell(snake.cells, None, self.grid.max_cell, self.rng)
        return GameState(snake=snake, food=Food(food_cell))

    @property
    def snake(self) -> Snake:
        return self.state.snake

    @property
    def game_over(self) -> bool:
        return self.state.game_over

    def restart(self) -> None:
        """Replace the state with a fresh starting configuration."""
        self.state = self._initial_state()
        self._pending_direction = None
        logger.info("Game restarted.")

    def on_direction_key(self, key: str) -> None:
        """Handle a key press from the input source.

        Unrecognised keys are ignored. While the game is over any arrow key
        restarts it; otherwise the direction is applied on the next tick.
        """
        direction = direction_from_key(key)
        if direction is None:
            return
        if self.state.game_over:
            self.restart()
            return
        self._pending_direction = direction

    def tick(self) -> dict:
        """Advance the game by one tick.

        Returns the render snapshot after the update.
        """
        state = self.state
        if state.game_over:
            return self.get_state()

        if self._pending_direction is not None:
            state.direction = self._pending_direction
            self._pending_direction = None

        direction = state.direction
        snake = state.snake
        next_coord = coord_in_direction(snake.head.coord, direction)

        # --- boundary check ---
        if self.grid.is_out_of_bounds(next_coord):
            self._end_game("wall")
            return self.get_state()

        # --- self-collision check ---
        # The tail moves away this tick, so its cell does not count.
        next_cell = self.grid.cell_at(next_coord)
        if next_cell in snake.cells and next_cell != snake.tail.cell:
            self._end_game("self")
            return self.get_state()

        snake.advance(next_coord, next_cell)

        if next_cell == state.food.cell:
            self._consume(state)

        state.tick += 1
        return self.get_state()

    def _consume(self, state: GameState) -> None:
        """Apply growth, optional reversal, and food re-placement in order."""
        snake = state.snake
        eaten = state.food

        growth = snake.growth_coord(state.direction)
        if self.grid.is_out_of_bounds(growth):
            logger.debug("Growth at %s skipped: out of bounds.", growth)
        else:
            growth_cell = self.grid.cell_at(growth)
            if growth_cell in snake.cells:
                logger.debug("Growth at %s skipped: cell occupied.", growth)
            else:
                snake.grow_tail(growth, growth_cell)

        if eaten.reverses:
            state.direction = opposite(snake.tail_direction(state.direction))
            snake.reverse()
            logger.debug("Snake reversed, now heading %s.", state.direction.name)

        state.score += 1
        if len(snake.cells) >= self.grid.max_cell:
            self._end_game("board full")
            return
        state.food = self.food_spawner.respawn(snake.cells, eaten)

    def _end_game(self, cause: str) -> None:
        """Freeze the game until a restart key arrives."""
        state = self.state
        state.status = GameStatus.GAME_OVER
        state.direction = None
        self._pending_direction = None
        logger.info(
            "Game over (%s) at tick %d with score %d.",
            cause, state.tick, state.score,
        )

    def get_state(self) -> dict:
        """Return a read-only, serializable snapshot for renderers."""
        state = self.state
        return {
            "board": self.grid.to_list(),
            "snake_head_cell": state.snake.head.cell,
            "snake_cells": sorted(state.snake.cells),
            "snake": state.snake.to_dict(),
            "food_cell": state.food.cell,
            "food_reverses": state.food.reverses,
            "score": state.score,
            "tick": state.tick,
            "direction": state.direction.name if state.direction else None,
            "status": state.status.value,
            "game_over": state.game_over,
        }
