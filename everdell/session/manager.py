"""
Session Manager - Creates and manages game sessions.

PERSISTENCE RULES:
- Sessions live in memory only
- Ending a session drops its world
- Nothing survives a process restart
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
import logging
import time
import uuid

from ..engine_core.events import DEFAULT_CAPACITY
from ..games.starter.setup import StartingLayout
from .game_loop import GameLoop
from .world import World

logger = logging.getLogger(__name__)


class SessionState(Enum):
    """State of a game session."""
    ACTIVE = "active"
    HALTED = "halted"  # Card ownership broken; no further ticks
    ENDED = "ended"


@dataclass
class Session:
    """
    A game session: one world driven by one loop.

    The session is destroyed when it ends.
    """
    session_id: str
    loop: GameLoop
    created_at: float
    state: SessionState = SessionState.ACTIVE

    @property
    def world(self) -> World:
        return self.loop.world

    def is_active(self) -> bool:
        return self.state == SessionState.ACTIVE


class SessionManager:
    """
    Manages game sessions.

    Responsibilities:
    - Create and initialize sessions
    - Track active sessions
    - Clean up ended sessions

    No persistence - sessions are in-memory only.
    """

    def __init__(self, event_capacity: int = DEFAULT_CAPACITY):
        self.event_capacity = event_capacity
        self._sessions: dict[str, Session] = {}

    def create_session(
        self,
        layout: StartingLayout | None = None,
    ) -> Session:
        """
        Create a new session with an initialized world.

        Args:
            layout: Optional opening layout (defaults to the starter layout)

        Returns:
            New Session ready to tick
        """
        session_id = str(uuid.uuid4())
        loop = GameLoop(World.with_capacity(self.event_capacity))
        loop.initialize(layout)

        session = Session(
            session_id=session_id,
            loop=loop,
            created_at=time.time(),
        )
        self._sessions[session_id] = session
        logger.info("Session %s created", session_id)
        return session

    def get_session(self, session_id: str) -> Session | None:
        """Get a session by ID."""
        return self._sessions.get(session_id)

    def end_session(self, session_id: str) -> bool:
        """
        End a session and drop its state.

        Returns False if the session does not exist.
        """
        session = self._sessions.pop(session_id, None)
        if session is None:
            return False
        session.state = SessionState.ENDED
        session.loop.world.game = None
        session.loop.world.visuals.clear()
        logger.info("Session %s ended", session_id)
        return True

    def list_active_sessions(self) -> list[str]:
        """List IDs of active sessions."""
        return [
            sid for sid, session in self._sessions.items()
            if session.is_active()
        ]
