"""
Session Module - Drives the world tick by tick.

A session represents one play-through:
- Created with an initialized world
- Ticked once per frame by the host
- Destroyed when the host ends it

Sessions are EPHEMERAL: nothing is persisted.
"""

from .world import World
from .game_loop import GameLoop, TickResult, initialize, tick
from .manager import SessionManager, Session, SessionState

__all__ = [
    "World",
    "GameLoop",
    "TickResult",
    "initialize",
    "tick",
    "SessionManager",
    "Session",
    "SessionState",
]
