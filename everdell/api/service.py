"""
API Service - Business logic layer between API and engine.

The service:
1. Manages sessions
2. Feeds host signals into ticks
3. Formats display data and state views

This layer is framework-agnostic (can be used with FastAPI, Flask, etc.)
Methods return either a response model or an ErrorResponse.
"""

from __future__ import annotations
from dataclasses import dataclass, field
import logging

from .. import __version__
from ..engine_core.errors import InvariantViolation
from ..engine_core.events import PlayCardEvent
from ..engine_core.interaction import CardVisual, Interaction
from ..engine_core.state import Card
from ..session import Session, SessionManager, SessionState
from .schemas import (
    CardInfo,
    CardVisualInfo,
    EndSessionResponse,
    ErrorCode,
    ErrorResponse,
    GameStateResponse,
    HealthResponse,
    InteractionSignal,
    PlayCardEventInfo,
    SessionListResponse,
    SessionResponse,
    SessionStatus,
    StashInfo,
    TickRequest,
    TickResponse,
)

logger = logging.getLogger(__name__)


@dataclass
class APIService:
    """
    Main API service for rendering hosts.

    Usage:
        service = APIService()
        session = service.create_session()
        frame = service.tick(session.session_id, TickRequest(signals={...}))
    """
    session_manager: SessionManager = field(default_factory=SessionManager)

    def health(self) -> HealthResponse:
        return HealthResponse(
            version=__version__,
            active_sessions=len(self.session_manager.list_active_sessions()),
        )

    def create_session(self) -> SessionResponse:
        session = self.session_manager.create_session()
        return self._session_response(session)

    def get_session(self, session_id: str) -> SessionResponse | ErrorResponse:
        session = self.session_manager.get_session(session_id)
        if session is None:
            return self._not_found(session_id)
        return self._session_response(session)

    def list_sessions(self) -> SessionListResponse:
        return SessionListResponse(sessions=self.session_manager.list_active_sessions())

    def end_session(self, session_id: str) -> EndSessionResponse:
        success = self.session_manager.end_session(session_id)
        return EndSessionResponse(success=success, session_id=session_id)

    def tick(self, session_id: str, request: TickRequest) -> TickResponse | ErrorResponse:
        """Run one tick with the host's signals."""
        session = self.session_manager.get_session(session_id)
        if session is None:
            return self._not_found(session_id)
        if session.state == SessionState.HALTED:
            return ErrorResponse(
                error=f"Session {session_id} is halted",
                error_code=ErrorCode.INVARIANT_VIOLATION,
            )

        signals = {
            visual_id: Interaction(signal.value)
            for visual_id, signal in request.signals.items()
        }
        try:
            result = session.loop.tick(signals)
        except InvariantViolation as e:
            session.state = SessionState.HALTED
            logger.error("Session %s halted: %s", session_id, e)
            return ErrorResponse(
                error=str(e),
                error_code=ErrorCode.INVARIANT_VIOLATION,
                details={"tick": session.world.tick_count},
            )

        return TickResponse(
            session_id=session_id,
            tick=result.tick,
            stash_text=result.stash_text,
            hand=[_visual_info(v) for v in result.hand],
            events=[_event_info(e) for e in result.events],
        )

    def get_state(self, session_id: str) -> GameStateResponse | ErrorResponse:
        """Read-only view of piles, hand and stash."""
        session = self.session_manager.get_session(session_id)
        if session is None:
            return self._not_found(session_id)

        world = session.world
        player = world.player
        if world.game is None or player is None:
            return GameStateResponse(session_id=session_id, tick=world.tick_count)

        return GameStateResponse(
            session_id=session_id,
            tick=world.tick_count,
            draw_pile=[_card_info(c) for c in world.game.draw_pile],
            discard_pile=[_card_info(c) for c in world.game.discard_pile],
            hand=[_card_info(c) for c in player.hand.cards],
            stash=StashInfo(**player.stash.as_dict()),
        )

    def _session_response(self, session: Session) -> SessionResponse:
        world = session.world
        player = world.player
        return SessionResponse(
            session_id=session.session_id,
            status=SessionStatus(session.state.value),
            tick=world.tick_count,
            draw_pile_count=world.game.draw_pile.count if world.game else 0,
            discard_pile_count=world.game.discard_pile.count if world.game else 0,
            hand_count=player.hand.count if player else 0,
            created_at=session.created_at,
        )

    def _not_found(self, session_id: str) -> ErrorResponse:
        return ErrorResponse(
            error=f"Session {session_id} not found",
            error_code=ErrorCode.SESSION_NOT_FOUND,
        )


def _card_info(card: Card) -> CardInfo:
    return CardInfo(
        instance_id=card.instance_id,
        card_id=card.card_id,
        name=card.name,
        cost=card.cost,
        value=card.value,
        card_type=card.card_type.value,
    )


def _visual_info(visual: CardVisual) -> CardVisualInfo:
    return CardVisualInfo(
        visual_id=visual.visual_id,
        card_instance_id=visual.card_instance_id,
        label=visual.label,
        interaction=InteractionSignal(visual.interaction.value),
        color=visual.color,
        interactive=visual.is_interactive,
    )


def _event_info(event: PlayCardEvent) -> PlayCardEventInfo:
    return PlayCardEventInfo(
        visual_id=event.visual_id,
        card_instance_id=event.card_instance_id,
        tick=event.tick,
    )
