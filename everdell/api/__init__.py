"""
API Module - Rendering host interface.

Exposes the engine via REST API. The host:
1. Creates a session (world initialized)
2. Posts pointer signals once per frame
3. Renders the stash text and hand visuals it gets back

All state is session-scoped and in memory.
"""

from .schemas import (
    # Requests
    TickRequest,
    # Responses
    SessionResponse,
    TickResponse,
    GameStateResponse,
    ErrorResponse,
    # Shared
    CardInfo,
    CardVisualInfo,
    StashInfo,
    PlayCardEventInfo,
    # Enums
    ErrorCode,
    InteractionSignal,
    SessionStatus,
)
from .service import APIService
from .app import create_app

__all__ = [
    "TickRequest",
    "SessionResponse",
    "TickResponse",
    "GameStateResponse",
    "ErrorResponse",
    "CardInfo",
    "CardVisualInfo",
    "StashInfo",
    "PlayCardEventInfo",
    "ErrorCode",
    "InteractionSignal",
    "SessionStatus",
    "APIService",
    "create_app",
]
