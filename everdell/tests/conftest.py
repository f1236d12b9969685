"""
Pytest fixtures for Everdell tests.
"""

import pytest

from ..engine_core.state import Card, CardType, Deck, GameState, Player, PlayerHand
from ..games.starter.setup import setup_starter_game
from ..session import GameLoop, World


def make_card(instance_id: str, name: str = "Farm", cost: int = 1, value: int = 1) -> Card:
    card_id = instance_id.rsplit("_", 1)[0]
    return Card(
        card_id=card_id,
        instance_id=instance_id,
        name=name,
        cost=cost,
        value=value,
        card_type=CardType.PRODUCTION,
    )


@pytest.fixture
def starter_state() -> GameState:
    """The prototype opening: 6-card draw pile, 3-card hand, empty stash."""
    return setup_starter_game()


@pytest.fixture
def small_state() -> GameState:
    """Two players with small hands, sealed."""
    state = GameState()
    for iid in ["farm_1", "farm_2", "mine_1"]:
        state.draw_pile.push(make_card(iid))
    state.add_player(Player(
        player_id="p1",
        name="Player 1",
        hand=PlayerHand(deck=Deck(name="hand:p1", cards=[make_card("barge_1")])),
    ))
    state.add_player(Player(
        player_id="p2",
        name="Player 2",
        hand=PlayerHand(deck=Deck(name="hand:p2", cards=[make_card("barge_2")])),
    ))
    state.seal()
    return state


@pytest.fixture
def loop() -> GameLoop:
    """An initialized game loop."""
    game_loop = GameLoop()
    game_loop.initialize()
    return game_loop


@pytest.fixture
def world(loop: GameLoop) -> World:
    return loop.world
