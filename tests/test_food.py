"""Tests for the food placement module."""

import numpy as np
import pytest

from reverse_snake.food import Food, FoodSpawner, pick_food_cell, roll_reverse_flag


class TestPickFoodCell:
    def test_avoids_occupied_and_excluded(self):
        rng = np.random.default_rng(0)
        occupied = set(range(1, 15))
        for _ in range(50):
            cell = pick_food_cell(occupied, 15, 16, rng)
            assert cell == 16

    def test_within_range(self):
        rng = np.random.default_rng(1)
        cells = {pick_food_cell(set(), None, 9, rng) for _ in range(200)}
        assert cells == set(range(1, 10))

    def test_deterministic(self):
        a = [pick_food_cell({1, 2}, 3, 25, np.random.default_rng(42)) for _ in range(3)]
        b = [pick_food_cell({1, 2}, 3, 25, np.random.default_rng(42)) for _ in range(3)]
        assert a == b

    def test_full_board_raises(self):
        rng = np.random.default_rng(0)
        with pytest.raises(ValueError, match="No free cell"):
            pick_food_cell(set(range(1, 17)), None, 16, rng)

    def test_only_excluded_cell_left_raises(self):
        rng = np.random.default_rng(0)
        with pytest.raises(ValueError, match="No free cell"):
            pick_food_cell(set(range(1, 16)), 16, 16, rng)

    def test_excluded_cell_inside_occupied_is_not_double_counted(self):
        rng = np.random.default_rng(0)
        assert pick_food_cell(set(range(1, 16)), 5, 16, rng) == 16


class TestRollReverseFlag:
    def test_extremes(self):
        rng = np.random.default_rng(0)
        assert not any(roll_reverse_flag(rng, 0.0) for _ in range(100))
        assert all(roll_reverse_flag(rng, 1.0) for _ in range(100))

    def test_default_rate_is_roughly_thirty_percent(self):
        rng = np.random.default_rng(123)
        hits = sum(roll_reverse_flag(rng) for _ in range(10_000))
        assert 2700 < hits < 3300

    def test_returns_python_bool(self):
        assert type(roll_reverse_flag(np.random.default_rng(0))) is bool


class TestFoodSpawner:
    def test_invalid_probability(self):
        with pytest.raises(ValueError, match="between 0 and 1"):
            FoodSpawner(25, reverse_probability=1.5)

    def test_respawn_avoids_snake_and_eaten_cell(self):
        spawner = FoodSpawner(16, rng=np.random.default_rng(7))
        occupied = {1, 2, 3, 4}
        for _ in range(50):
            food = spawner.respawn(occupied, Food(5))
            assert food.cell not in occupied
            assert food.cell != 5

    def test_respawn_rolls_flag(self):
        spawner = FoodSpawner(16, reverse_probability=1.0, rng=np.random.default_rng(0))
        assert spawner.respawn(set(), Food(1)).reverses
