"""WebSocket handler for real-time play."""

from __future__ import annotations

import json
import logging

from fastapi import APIRouter, WebSocket, WebSocketDisconnect
from pydantic import ValidationError

from reverse_snake.server.game_manager import GameManager
from reverse_snake.server.models import KeyMessage

logger = logging.getLogger(__name__)

ws_router = APIRouter()


def _get_manager(ws: WebSocket) -> GameManager:
    return ws.app.state.game_manager


@ws_router.websocket("/games/{game_id}/play")
async def play(websocket: WebSocket, game_id: str) -> None:
    """Send key presses, receive the game snapshot each tick."""
    manager = _get_manager(websocket)
    session = manager.get_session(game_id)
    if session is None:
        await websocket.close(code=4004, reason="Game not found.")
        return

    await websocket.accept()
    session.sockets.append(websocket)
    logger.info("Client connected to game %s.", game_id)

    # Send initial state snapshot so the client gets immediate feedback.
    await websocket.send_text(
        json.dumps(session.engine.get_state(), separators=(",", ":")),
    )

    try:
        while True:
            raw = await websocket.receive_text()
            try:
                msg = KeyMessage.model_validate_json(raw)
            except ValidationError:
                continue
            await manager.handle_key(session, msg.key)
    except WebSocketDisconnect:
        logger.info("Client disconnected from game %s.", game_id)
    finally:
        if websocket in session.sockets:
            session.sockets.remove(websocket)
