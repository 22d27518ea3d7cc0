"""Pydantic models for API request/response schemas."""

from __future__ import annotations

from pydantic import BaseModel, Field

from reverse_snake.engine import GameStatus


class CreateGameRequest(BaseModel):
    """Request body for POST /games."""

    board_size: int = Field(default=15, ge=4, le=100)
    tick_rate_ms: int = Field(default=150, ge=50, le=2000)
    reverse_probability: float = Field(default=0.3, ge=0.0, le=1.0)
    seed: int | None = None


class KeyMessage(BaseModel):
    """Inbound WebSocket message carrying a key identifier."""

    key: str


class GameSummary(BaseModel):
    """Compact session info for list endpoints."""

    game_id: str
    status: GameStatus
    score: int
    board_size: int
    tick_rate_ms: int
    connections: int


class ErrorResponse(BaseModel):
    """Standard error envelope."""

    detail: str
