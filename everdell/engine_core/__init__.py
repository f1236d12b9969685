"""
Engine Core - Card containers, stashes and the per-tick interaction pipeline.

The engine is the runtime that:
1. Owns GameState (draw pile, discard pile, players)
2. Applies actions via the reducer
3. Turns pointer signals into PlayCardEvents
4. Delivers events within the tick they were published
5. Produces display data for the host
"""

from .errors import (
    EverdellError,
    EmptyContainer,
    InsufficientResource,
    CardNotFound,
    AlreadyInitialized,
    InvariantViolation,
)
from .state import Card, CardType, Deck, Resource, PlayerStash, PlayerHand, Player, GameState
from .action import Action, ActionType, ActionPayload, ActionResult
from .reducer import Reducer, apply_action
from .events import EventBus, PlayCardEvent
from .interaction import CardVisual, Capability, Interaction, InteractionPipeline
from .resolution import PlayCardResolver
from .presentation import HandView, stash_ui_system, hand_ui_system

__all__ = [
    "EverdellError",
    "EmptyContainer",
    "InsufficientResource",
    "CardNotFound",
    "AlreadyInitialized",
    "InvariantViolation",
    "Card",
    "CardType",
    "Deck",
    "Resource",
    "PlayerStash",
    "PlayerHand",
    "Player",
    "GameState",
    "Action",
    "ActionType",
    "ActionPayload",
    "ActionResult",
    "Reducer",
    "apply_action",
    "EventBus",
    "PlayCardEvent",
    "CardVisual",
    "Capability",
    "Interaction",
    "InteractionPipeline",
    "PlayCardResolver",
    "HandView",
    "stash_ui_system",
    "hand_ui_system",
]
