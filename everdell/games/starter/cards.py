"""
Starter Cards - Card definitions for the prototype.

Only the production cards used by the starting layout are defined.
Costs are listed but not yet expressed in stash resources.
"""

from __future__ import annotations
from dataclasses import dataclass

from ...engine_core.state import Card, CardType


@dataclass(frozen=True)
class CardDefinition:
    """
    Catalogue entry for a card.

    Copies in play are created with to_card().
    """
    id: str
    name: str
    cost: int
    value: int
    card_type: CardType

    def to_card(self, instance_id: str) -> Card:
        return Card(
            card_id=self.id,
            instance_id=instance_id,
            name=self.name,
            cost=self.cost,
            value=self.value,
            card_type=self.card_type,
        )


FARM = CardDefinition(
    id="farm",
    name="Farm",
    cost=1,
    value=1,
    card_type=CardType.PRODUCTION,
)

RESIN_REFINERY = CardDefinition(
    id="resin_refinery",
    name="Resin Refinery",
    cost=1,
    value=1,
    card_type=CardType.PRODUCTION,
)

TWIG_BARGE = CardDefinition(
    id="twig_barge",
    name="Twig Barge",
    cost=1,
    value=1,
    card_type=CardType.PRODUCTION,
)


STARTER_CARDS: list[CardDefinition] = [
    FARM,
    RESIN_REFINERY,
    TWIG_BARGE,
]


def get_card_by_id(card_id: str) -> CardDefinition | None:
    """Look up a card by ID."""
    for card in STARTER_CARDS:
        if card.id == card_id:
            return card
    return None
