"""
Pydantic Schemas for API - Request/response models for OpenAPI.

These models define the contract between a rendering host and the engine.
The host only reports interaction signals and reads display data back.

Error Codes:
- SESSION_NOT_FOUND: Session does not exist or has ended
- VALIDATION_ERROR: Request body is malformed (HTTP 400)
- INVARIANT_VIOLATION: Card ownership broken; the session is halted
"""

from enum import Enum
from typing import Optional, Any
from pydantic import BaseModel, Field


# =============================================================================
# Enums
# =============================================================================

class SessionStatus(str, Enum):
    """Session status values."""
    ACTIVE = "active"
    HALTED = "halted"
    ENDED = "ended"


class InteractionSignal(str, Enum):
    """Pointer state reported by the host for one visual."""
    NONE = "none"
    HOVERED = "hovered"
    PRESSED = "pressed"


class ErrorCode(str, Enum):
    """Structured error codes."""
    SESSION_NOT_FOUND = "SESSION_NOT_FOUND"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVARIANT_VIOLATION = "INVARIANT_VIOLATION"


# =============================================================================
# Shared Models
# =============================================================================

class CardInfo(BaseModel):
    """Card information for display."""
    instance_id: str
    card_id: str
    name: str
    cost: int = 0
    value: int = 0
    card_type: str

    model_config = {"from_attributes": True}


class CardVisualInfo(BaseModel):
    """A card visual in the hand panel."""
    visual_id: str
    card_instance_id: str
    label: str
    interaction: InteractionSignal = InteractionSignal.NONE
    color: tuple[float, float, float]
    interactive: bool = True


class StashInfo(BaseModel):
    """Resource counters."""
    berries: int = Field(0, ge=0)
    resin: int = Field(0, ge=0)
    stones: int = Field(0, ge=0)
    tokens: int = Field(0, ge=0)
    wood: int = Field(0, ge=0)


class PlayCardEventInfo(BaseModel):
    """A PlayCardEvent delivered during a tick."""
    visual_id: str
    card_instance_id: str
    tick: int


# =============================================================================
# Request Models
# =============================================================================

class TickRequest(BaseModel):
    """Signals for one tick, keyed by visual_id."""
    signals: dict[str, InteractionSignal] = Field(default_factory=dict)


# =============================================================================
# Response Models
# =============================================================================

class SessionResponse(BaseModel):
    """Session status."""
    session_id: str
    status: SessionStatus
    tick: int = 0
    draw_pile_count: int = 0
    discard_pile_count: int = 0
    hand_count: int = 0
    created_at: Optional[float] = None


class TickResponse(BaseModel):
    """Display data after a tick."""
    session_id: str
    tick: int
    stash_text: str = ""
    hand: list[CardVisualInfo] = Field(default_factory=list)
    events: list[PlayCardEventInfo] = Field(default_factory=list)


class GameStateResponse(BaseModel):
    """Full read-only view of a session's game state."""
    session_id: str
    tick: int
    draw_pile: list[CardInfo] = Field(default_factory=list)
    discard_pile: list[CardInfo] = Field(default_factory=list)
    hand: list[CardInfo] = Field(default_factory=list)
    stash: StashInfo = Field(default_factory=StashInfo)


class SessionListResponse(BaseModel):
    sessions: list[str] = Field(default_factory=list)


class EndSessionResponse(BaseModel):
    success: bool
    session_id: str


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str
    active_sessions: int = 0


class ErrorResponse(BaseModel):
    """Standard error body."""
    error: str
    error_code: ErrorCode
    details: Optional[dict[str, Any]] = None
