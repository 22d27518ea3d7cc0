"""Plain-text rendering of engine snapshots."""

from __future__ import annotations

import enum


class Glyph(str, enum.Enum):
    """Characters used for each kind of cell."""

    EMPTY = "."
    BODY = "o"
    HEAD = "@"
    FOOD = "*"
    REVERSE_FOOD = "%"


def cell_glyph(cell: int, snapshot: dict, snake_cells: set[int]) -> Glyph:
    """Pick the glyph for *cell*; the head wins over body, body over food."""
    if cell == snapshot["snake_head_cell"]:
        return Glyph.HEAD
    if cell in snake_cells:
        return Glyph.BODY
    if cell == snapshot["food_cell"]:
        return Glyph.REVERSE_FOOD if snapshot["food_reverses"] else Glyph.FOOD
    return Glyph.EMPTY


def render_text(snapshot: dict) -> str:
    """Render a snapshot from :meth:`GameEngine.get_state` as text."""
    snake_cells = set(snapshot["snake_cells"])
    lines = [
        "".join(cell_glyph(cell, snapshot, snake_cells).value for cell in row)
        for row in snapshot["board"]
    ]
    status = "GAME OVER" if snapshot["game_over"] else "running"
    lines.append(f"Score: {snapshot['score']}  ({status})")
    return "\n".join(lines)
