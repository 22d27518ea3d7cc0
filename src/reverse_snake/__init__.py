"""Reverse Snake — core game engine."""

from reverse_snake.config import GameConfig
from reverse_snake.direction import Direction
from reverse_snake.engine import GameEngine, GameState, GameStatus
from reverse_snake.food import Food, FoodSpawner
from reverse_snake.grid import Coord, Grid
from reverse_snake.snake import Segment, Snake

__all__ = [
    "Coord",
    "Direction",
    "Food",
    "FoodSpawner",
    "GameConfig",
    "GameEngine",
    "GameState",
    "GameStatus",
    "Grid",
    "Segment",
    "Snake",
]
