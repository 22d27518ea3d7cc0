"""In-memory session registry and async tick loops."""

from __future__ import annotations

import asyncio
import json
import logging
import uuid
from dataclasses import dataclass, field

from starlette.websockets import WebSocket, WebSocketState

from reverse_snake.config import GameConfig
from reverse_snake.engine import GameEngine
from reverse_snake.server.models import GameSummary

logger = logging.getLogger(__name__)

_MAX_SESSIONS = 100


@dataclass
class GameSession:
    """A hosted engine, its tick loop, and the sockets watching it."""

    game_id: str
    engine: GameEngine
    sockets: list[WebSocket] = field(default_factory=list)
    lock: asyncio.Lock = field(default_factory=asyncio.Lock)
    _task: asyncio.Task | None = field(default=None, repr=False)

    @property
    def tick_rate_ms(self) -> int:
        return self.engine.config.tick_rate_ms

    def summary(self) -> GameSummary:
        state = self.engine.state
        return GameSummary(
            game_id=self.game_id,
            status=state.status,
            score=state.score,
            board_size=self.engine.grid.size,
            tick_rate_ms=self.tick_rate_ms,
            connections=len(self.sockets),
        )


class GameManager:
    """Central registry managing all game sessions.

    Sessions start ticking as soon as they are created and keep ticking
    through game over, so a key press can restart them.
    """

    def __init__(self, max_sessions: int = _MAX_SESSIONS) -> None:
        if max_sessions < 1:
            raise ValueError("max_sessions must be at least 1.")
        self._sessions: dict[str, GameSession] = {}
        self._max_sessions = max_sessions

    def create_session(self, config: GameConfig) -> GameSession:
        """Create a session and start its tick loop.

        Must be called from within a running event loop.
        """
        if len(self._sessions) >= self._max_sessions:
            raise ValueError("Too many active games. Try again later.")

        game_id = uuid.uuid4().hex[:12]
        session = GameSession(game_id=game_id, engine=GameEngine(config))
        self._sessions[game_id] = session
        session._task = asyncio.create_task(self._tick_loop(session))
        logger.info(
            "Game %s created (board=%d, tick=%dms).",
            game_id, config.board_size, config.tick_rate_ms,
        )
        return session

    def get_session(self, game_id: str) -> GameSession | None:
        return self._sessions.get(game_id)

    def list_sessions(self) -> list[GameSummary]:
        """Return summaries of all sessions."""
        return [s.summary() for s in self._sessions.values()]

    async def handle_key(self, session: GameSession, key: str) -> None:
        """Forward a key press to the session's engine."""
        async with session.lock:
            session.engine.on_direction_key(key)

    async def remove_session(self, game_id: str) -> None:
        """Stop a session's tick loop and close its sockets."""
        session = self._sessions.pop(game_id, None)
        if session is None:
            raise KeyError(f"Game {game_id} not found.")
        await self._stop(session)
        logger.info("Game %s removed.", game_id)

    async def _tick_loop(self, session: GameSession) -> None:
        """Tick the engine at the session's rate, broadcasting each snapshot."""
        tick_interval = session.tick_rate_ms / 1000.0
        try:
            while True:
                await asyncio.sleep(tick_interval)
                async with session.lock:
                    state = session.engine.tick()
                await self._broadcast(session, state)
        except asyncio.CancelledError:
            logger.info("Tick loop cancelled for game %s.", session.game_id)
        except Exception:
            logger.exception("Tick loop error in game %s.", session.game_id)

    async def _stop(self, session: GameSession) -> None:
        task = session._task
        if task is not None and not task.done():
            task.cancel()
            await asyncio.gather(task, return_exceptions=True)
        for ws in list(session.sockets):
            try:
                if ws.client_state == WebSocketState.CONNECTED:
                    await ws.close(code=1000, reason="Game removed.")
            except Exception:
                logger.warning("Failed closing socket in game %s.", session.game_id)
        session.sockets.clear()

    async def _broadcast(self, session: GameSession, state: dict) -> None:
        """Send the snapshot to every connected socket."""
        payload = json.dumps(state, separators=(",", ":"))
        dead: list[WebSocket] = []

        # Iterate over a snapshot so disconnect handlers can mutate the list.
        for ws in list(session.sockets):
            try:
                if ws.client_state == WebSocketState.CONNECTED:
                    await ws.send_text(payload)
            except Exception:
                dead.append(ws)

        for ws in dead:
            if ws in session.sockets:
                session.sockets.remove(ws)

    async def cleanup(self) -> None:
        """Stop every session."""
        sessions = list(self._sessions.values())
        self._sessions.clear()
        for session in sessions:
            await self._stop(session)
        logger.info("GameManager cleanup complete.")
