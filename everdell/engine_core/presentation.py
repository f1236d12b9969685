"""
Presentation Sync - Read-only systems producing display data for the host.

Neither system mutates game state. The stash text is regenerated every
tick; the hand visuals are only rebuilt when the hand actually changed, so
hover and press state on surviving visuals is not thrown away.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING
import logging

from .interaction import CardVisual
from .state import PlayerHand, PlayerStash

if TYPE_CHECKING:
    from ..session.world import World

logger = logging.getLogger(__name__)

STASH_TEMPLATE = "Berries: {}\nResin: {}\nStones: {}\nWood: {}\nTokens: {}"


def format_stash(stash: PlayerStash) -> str:
    return STASH_TEMPLATE.format(
        stash.berries,
        stash.resin,
        stash.stones,
        stash.wood,
        stash.tokens,
    )


def stash_ui_system(world: World) -> str:
    """Current stash text, or "" if there is no player yet."""
    player = world.player
    if player is None:
        return ""
    return format_stash(player.stash)


@dataclass
class HandView:
    """Tracks which hand revision the visual registry was last built from."""
    built_revision: int | None = None
    next_visual: int = 0
    order: tuple[str, ...] = ()

    def _new_visual_id(self) -> str:
        self.next_visual += 1
        return f"card_ui_{self.next_visual}"

    def rebuild(self, hand: PlayerHand, visuals: dict[str, CardVisual]) -> bool:
        """
        Bring the visual registry in line with the hand.

        Visuals of cards still in hand are kept, visuals of departed cards
        are removed, and new cards get fresh visuals. Returns False if the
        hand has not changed since the last rebuild.
        """
        if self.built_revision == hand.deck.revision:
            return False

        by_card = {v.card_instance_id: v for v in visuals.values()}
        in_hand = {card.instance_id for card in hand.cards}

        for visual in list(visuals.values()):
            if visual.card_instance_id not in in_hand:
                del visuals[visual.visual_id]
                logger.debug("Removed %s (%s left hand)", visual.visual_id, visual.card_instance_id)

        order = []
        for card in hand.cards:
            visual = by_card.get(card.instance_id)
            if visual is None:
                visual = CardVisual(
                    visual_id=self._new_visual_id(),
                    card_instance_id=card.instance_id,
                    label=card.name,
                )
                visuals[visual.visual_id] = visual
            order.append(visual.visual_id)

        self.order = tuple(order)
        self.built_revision = hand.deck.revision
        return True


def hand_ui_system(world: World) -> list[CardVisual]:
    """Hand visuals in hand order, rebuilt only on hand change."""
    player = world.player
    if player is None:
        return []
    world.hand_view.rebuild(player.hand, world.visuals)
    return [world.visuals[vid] for vid in world.hand_view.order]
