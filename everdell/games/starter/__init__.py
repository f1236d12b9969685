"""
Starter - The prototype card set and opening layout.

Three production cards (Farm, Resin Refinery, Twig Barge), a six-card
draw pile and a three-card opening hand for a single player.
"""

from .cards import STARTER_CARDS, CardDefinition, get_card_by_id
from .setup import StartingLayout, setup_starter_game

__all__ = [
    "STARTER_CARDS",
    "CardDefinition",
    "get_card_by_id",
    "StartingLayout",
    "setup_starter_game",
]
