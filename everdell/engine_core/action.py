"""
Action System - Actions, payloads, and results.

Actions represent every change to game state:
1. Card movement (draw, discard, play)
2. Stash changes (credit, debit)

All state changes flow through actions.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ActionType(Enum):
    """Types of actions in the system."""
    # Card movement
    DRAW = "draw"  # Draw pile -> hand
    DISCARD = "discard"  # Hand -> discard pile
    PLAY_CARD = "play_card"  # Hand -> discard pile, via the interaction pipeline

    # Stash
    CREDIT = "credit"
    DEBIT = "debit"


@dataclass
class ActionPayload:
    """
    Payload for an action - contains the action parameters.

    Different action types use different fields.
    Validation happens in the reducer.
    """
    player_id: str | None = None
    card_instance_id: str | None = None

    # For stash actions
    resource: str | None = None
    amount: int = 0


@dataclass
class Action:
    """
    A complete action to be applied to the game state.

    Actions are:
    - Logged for replay
    - Validated before application
    - Applied atomically by the reducer
    """
    action_type: ActionType
    payload: ActionPayload
    tick: int | None = None

    @classmethod
    def draw(cls, player_id: str) -> Action:
        """Factory for draw action."""
        return cls(
            action_type=ActionType.DRAW,
            payload=ActionPayload(player_id=player_id),
        )

    @classmethod
    def discard(cls, player_id: str, card_instance_id: str) -> Action:
        """Factory for discard action."""
        return cls(
            action_type=ActionType.DISCARD,
            payload=ActionPayload(player_id=player_id, card_instance_id=card_instance_id),
        )

    @classmethod
    def play_card(cls, player_id: str, card_instance_id: str, tick: int | None = None) -> Action:
        """Factory for playing a card out of hand."""
        return cls(
            action_type=ActionType.PLAY_CARD,
            payload=ActionPayload(player_id=player_id, card_instance_id=card_instance_id),
            tick=tick,
        )

    @classmethod
    def credit(cls, player_id: str, resource: str, amount: int) -> Action:
        return cls(
            action_type=ActionType.CREDIT,
            payload=ActionPayload(player_id=player_id, resource=resource, amount=amount),
        )

    @classmethod
    def debit(cls, player_id: str, resource: str, amount: int) -> Action:
        return cls(
            action_type=ActionType.DEBIT,
            payload=ActionPayload(player_id=player_id, resource=resource, amount=amount),
        )


@dataclass
class ActionResult:
    """
    Result of applying an action.

    Contains:
    - Whether action succeeded
    - Errors (if failed)
    - Human-readable changes (for logs and UI)
    """
    success: bool
    error: str | None = None
    error_code: str | None = None

    # For presentation
    state_changes: list[str] = field(default_factory=list)

    # The card moved by the action, if any
    card: Any | None = None

    @classmethod
    def failure(cls, error: str, error_code: str | None = None) -> ActionResult:
        """Create a failure result."""
        return cls(success=False, error=error, error_code=error_code)

    @classmethod
    def ok(cls, changes: list[str] | None = None, card: Any | None = None) -> ActionResult:
        """Create a success result."""
        return cls(success=True, state_changes=changes or [], card=card)
