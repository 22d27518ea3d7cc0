"""Game configuration."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, fields
from pathlib import Path

from reverse_snake.grid import MIN_BOARD_SIZE

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameConfig:
    """Tunable settings for a single game.

    Supports JSON serialization for reproducibility.
    """

    board_size: int = 15
    tick_rate_ms: int = 150
    reverse_probability: float = 0.3
    # Initial food sits this many cell ids after the starting head.
    initial_food_offset: int = 5
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.board_size < MIN_BOARD_SIZE:
            raise ValueError(f"board_size must be at least {MIN_BOARD_SIZE}.")
        if self.tick_rate_ms <= 0:
            raise ValueError("tick_rate_ms must be positive.")
        if not 0.0 <= self.reverse_probability <= 1.0:
            raise ValueError("reverse_probability must be between 0 and 1.")
        if self.initial_food_offset < 1:
            raise ValueError("initial_food_offset must be at least 1.")

    def to_dict(self) -> dict:
        """Serialize to a plain dict."""
        return asdict(self)

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> GameConfig:
        """Load config from a JSON file.

        Raises ``ValueError`` for keys that are not config fields.
        """
        raw = json.loads(Path(path).read_text())
        unknown = sorted(set(raw) - {f.name for f in fields(cls)})
        if unknown:
            raise ValueError(f"Unknown config keys in {path}: {', '.join(unknown)}.")
        return cls(**raw)
