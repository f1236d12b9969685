"""
Reducer - Applies actions to game state.

The reducer is the single point of state mutation.
All state changes must go through apply_action().

Design principles:
- Each action either fully applies or leaves state unchanged
- Card transfers remove from the source and push to the target in one call
- Recoverable errors come back as ActionResult failures
- InvariantViolation is never caught here; it halts the simulation
"""

from __future__ import annotations
from dataclasses import dataclass
import logging

from .state import GameState, Player
from .action import Action, ActionType, ActionResult
from .errors import EverdellError, InvariantViolation

logger = logging.getLogger(__name__)

CARD_MOVING_ACTIONS = {ActionType.DRAW, ActionType.DISCARD, ActionType.PLAY_CARD}


@dataclass
class Reducer:
    """
    Reducer applies actions to game state.

    Stateless - all state is in GameState.
    Set verify_ownership=False to skip the post-transfer census check.
    """
    verify_ownership: bool = True

    def apply(self, state: GameState, action: Action) -> ActionResult:
        """
        Apply an action to the game state.

        Returns ActionResult describing success or the error.
        """
        player = state.get_player(action.payload.player_id)
        if player is None:
            return ActionResult.failure(
                f"Player {action.payload.player_id} not found",
                error_code="PLAYER_NOT_FOUND",
            )

        handler = self._get_handler(action.action_type)
        if not handler:
            return ActionResult.failure(
                f"No handler for action type: {action.action_type}",
                error_code="NO_HANDLER",
            )

        try:
            result = handler(state, player, action)
        except InvariantViolation:
            raise
        except EverdellError as e:
            logger.debug("%s rejected: %s", action.action_type.value, e)
            return ActionResult.failure(str(e), error_code=e.error_code)

        if self.verify_ownership and action.action_type in CARD_MOVING_ACTIONS:
            try:
                state.check_ownership()
            except InvariantViolation:
                logger.error("Ownership check failed after %s", action.action_type.value)
                raise

        state.action_history.append(action)
        return result

    def _get_handler(self, action_type: ActionType):
        """Get the handler function for an action type."""
        handlers = {
            ActionType.DRAW: self._handle_draw,
            ActionType.DISCARD: self._handle_discard,
            ActionType.PLAY_CARD: self._handle_play_card,
            ActionType.CREDIT: self._handle_credit,
            ActionType.DEBIT: self._handle_debit,
        }
        return handlers.get(action_type)

    def _handle_draw(self, state: GameState, player: Player, action: Action) -> ActionResult:
        """Move the head of the draw pile into the player's hand."""
        card = state.draw_pile.draw()
        player.hand.deck.push(card)
        return ActionResult.ok(
            changes=[f"{player.name} drew {card.name}"],
            card=card,
        )

    def _handle_discard(self, state: GameState, player: Player, action: Action) -> ActionResult:
        """Move a card from the player's hand to the discard pile."""
        card = player.hand.deck.take(action.payload.card_instance_id)
        state.discard_pile.push(card)
        return ActionResult.ok(
            changes=[f"{player.name} discarded {card.name}"],
            card=card,
        )

    def _handle_play_card(self, state: GameState, player: Player, action: Action) -> ActionResult:
        """
        Play a card out of hand.

        The card lands on the discard pile. Its cost is not charged to the
        stash: no rule links cost to resources yet.
        """
        card = player.hand.deck.take(action.payload.card_instance_id)
        state.discard_pile.push(card)
        return ActionResult.ok(
            changes=[f"{player.name} played {card.name}"],
            card=card,
        )

    def _handle_credit(self, state: GameState, player: Player, action: Action) -> ActionResult:
        balance = player.stash.credit(action.payload.resource, action.payload.amount)
        return ActionResult.ok(
            changes=[f"{player.name} gained {action.payload.amount} {action.payload.resource} (now {balance})"],
        )

    def _handle_debit(self, state: GameState, player: Player, action: Action) -> ActionResult:
        balance = player.stash.debit(action.payload.resource, action.payload.amount)
        return ActionResult.ok(
            changes=[f"{player.name} spent {action.payload.amount} {action.payload.resource} (now {balance})"],
        )


def apply_action(state: GameState, action: Action) -> ActionResult:
    """
    Convenience function to apply an action.

    Creates a reducer and applies the action.
    """
    reducer = Reducer()
    return reducer.apply(state, action)
