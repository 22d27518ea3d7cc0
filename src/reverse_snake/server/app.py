"""FastAPI application factory."""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI

from reverse_snake.server.game_manager import GameManager
from reverse_snake.server.routes import router
from reverse_snake.server.websocket import ws_router


@asynccontextmanager
async def _lifespan(app: FastAPI):
    # Tick loops are not tied to any request.
    yield
    await app.state.game_manager.cleanup()


def create_app(max_sessions: int = 100) -> FastAPI:
    """Build the application with an empty session registry.

    *max_sessions* caps how many games may tick at once; further
    ``POST /games`` calls are rejected with 422.
    """
    app = FastAPI(
        title="Reverse Snake API",
        version="0.1.0",
        description="Single-player snake sessions driven over WebSockets.",
        lifespan=_lifespan,
    )
    app.state.game_manager = GameManager(max_sessions=max_sessions)
    app.include_router(router)
    app.include_router(ws_router)
    return app
