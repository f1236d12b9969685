"""
Resolution - Event subscribers that commit played cards to game state.
"""

from __future__ import annotations
from typing import Callable
import logging

from .action import Action
from .events import PlayCardEvent
from .reducer import Reducer
from .state import GameState

logger = logging.getLogger(__name__)


class PlayCardResolver:
    """
    Moves a played card from the player's hand to the discard pile.

    State is looked up on every event, so the resolver tolerates a world
    whose game state or player does not exist yet.
    """

    def __init__(
        self,
        get_state: Callable[[], GameState | None],
        player_id: str,
        reducer: Reducer | None = None,
    ):
        self.get_state = get_state
        self.player_id = player_id
        self.reducer = reducer or Reducer()

    def __call__(self, event: PlayCardEvent) -> None:
        state = self.get_state()
        if state is None:
            logger.debug("No game state, skipping play of %s", event.card_instance_id)
            return

        result = self.reducer.apply(
            state,
            Action.play_card(self.player_id, event.card_instance_id, tick=event.tick),
        )
        if result.success:
            logger.info("Tick %d: %s", event.tick, "; ".join(result.state_changes))
        else:
            logger.warning(
                "Tick %d: could not play %s: %s",
                event.tick, event.card_instance_id, result.error,
            )
