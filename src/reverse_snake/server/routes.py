"""REST API route handlers for game session management."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Request

from reverse_snake.config import GameConfig
from reverse_snake.server.models import CreateGameRequest, ErrorResponse, GameSummary

router = APIRouter(prefix="/games", tags=["games"])

_NOT_FOUND = {404: {"model": ErrorResponse, "description": "Game not found."}}


def _get_manager(request: Request):
    return request.app.state.game_manager


@router.post("", status_code=201)
async def create_game(body: CreateGameRequest, request: Request) -> GameSummary:
    """Create a game session and start ticking it."""
    manager = _get_manager(request)
    try:
        config = GameConfig(
            board_size=body.board_size,
            tick_rate_ms=body.tick_rate_ms,
            reverse_probability=body.reverse_probability,
            seed=body.seed,
        )
        session = manager.create_session(config)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return session.summary()


@router.get("")
async def list_games(request: Request) -> list[GameSummary]:
    """List all sessions."""
    return _get_manager(request).list_sessions()


@router.get("/{game_id}", responses=_NOT_FOUND)
async def get_game(game_id: str, request: Request) -> dict:
    """Get session metadata and the current snapshot."""
    session = _get_manager(request).get_session(game_id)
    if session is None:
        raise HTTPException(status_code=404, detail="Game not found.")
    result = session.summary().model_dump(mode="json")
    result["state"] = session.engine.get_state()
    return result


@router.delete("/{game_id}", status_code=204, responses=_NOT_FOUND)
async def delete_game(game_id: str, request: Request) -> None:
    """Stop and remove a session."""
    try:
        await _get_manager(request).remove_session(game_id)
    except KeyError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
