"""Tests for the game configuration dataclass."""

import json

import pytest

from reverse_snake.config import GameConfig


class TestGameConfig:
    def test_defaults(self):
        cfg = GameConfig()
        assert cfg.board_size == 15
        assert cfg.tick_rate_ms == 150
        assert cfg.reverse_probability == 0.3
        assert cfg.initial_food_offset == 5
        assert cfg.seed is None

    def test_to_dict(self):
        d = GameConfig(seed=4).to_dict()
        assert d["board_size"] == 15
        assert d["seed"] == 4

    def test_save_and_load(self, tmp_path):
        cfg = GameConfig(board_size=20, reverse_probability=0.5, seed=9)
        path = tmp_path / "nested" / "config.json"
        cfg.save(path)
        assert json.loads(path.read_text())["board_size"] == 20
        assert GameConfig.load(path) == cfg

    @pytest.mark.parametrize(
        ("kwargs", "message"),
        [
            ({"board_size": 3}, "at least 4"),
            ({"tick_rate_ms": 0}, "positive"),
            ({"reverse_probability": -0.1}, "between 0 and 1"),
            ({"reverse_probability": 1.1}, "between 0 and 1"),
            ({"initial_food_offset": 0}, "at least 1"),
        ],
    )
    def test_validation(self, kwargs, message):
        with pytest.raises(ValueError, match=message):
            GameConfig(**kwargs)

    def test_frozen(self):
        cfg = GameConfig()
        with pytest.raises(AttributeError):
            cfg.board_size = 10

    def test_load_rejects_unknown_keys(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"board_size": 10, "wall_mode": "wrap"}))
        with pytest.raises(ValueError, match="Unknown config keys.*wall_mode"):
            GameConfig.load(path)
