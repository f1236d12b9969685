"""
Starter Game Setup - Creates the initial game state.

This module handles:
- Filling the draw pile from a literal card list
- Spawning the single player with a literal starting hand
- A zeroed stash

No shuffling: the draw pile keeps the listed order.
"""

from __future__ import annotations
from collections import Counter
from dataclasses import dataclass, field

from ...engine_core.state import Card, Deck, GameState, Player, PlayerHand, PlayerStash
from .cards import FARM, RESIN_REFINERY, TWIG_BARGE, get_card_by_id


@dataclass
class StartingLayout:
    """Card ids dealt at setup, in order."""
    draw_pile: list[str] = field(default_factory=lambda: [
        FARM.id,
        FARM.id,
        FARM.id,
        RESIN_REFINERY.id,
        RESIN_REFINERY.id,
        TWIG_BARGE.id,
    ])
    hand: list[str] = field(default_factory=lambda: [
        FARM.id,
        RESIN_REFINERY.id,
        TWIG_BARGE.id,
    ])
    player_id: str = "player_1"
    player_name: str = "Player"


def _make_cards(card_ids: list[str], counter: Counter) -> list[Card]:
    cards = []
    for card_id in card_ids:
        definition = get_card_by_id(card_id)
        if definition is None:
            raise ValueError(f"Unknown card: {card_id}")
        counter[card_id] += 1
        cards.append(definition.to_card(f"{card_id}_{counter[card_id]}"))
    return cards


def setup_starter_game(layout: StartingLayout | None = None) -> GameState:
    """
    Set up a new game.

    Args:
        layout: Cards to deal (defaults to the prototype layout)

    Returns:
        GameState with the draw pile filled, one player spawned and the
        card census sealed
    """
    layout = layout or StartingLayout()
    counter: Counter = Counter()

    state = GameState()
    for card in _make_cards(layout.draw_pile, counter):
        state.draw_pile.push(card)

    hand = Deck(name=f"hand:{layout.player_id}")
    for card in _make_cards(layout.hand, counter):
        hand.push(card)

    state.add_player(Player(
        player_id=layout.player_id,
        name=layout.player_name,
        hand=PlayerHand(deck=hand),
        stash=PlayerStash(),
    ))

    state.seal()
    return state
