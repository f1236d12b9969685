"""
Tests for the reducer (state transitions).

Tests:
- Card transfers between piles and hands
- Card-count conservation
- Stash actions
- Error handling
"""

import pytest

from ..engine_core.action import Action, ActionType
from ..engine_core.errors import InvariantViolation
from ..engine_core.reducer import Reducer, apply_action


class TestDrawAction:
    """Tests for draw action."""

    def test_draw_moves_head_into_hand(self, starter_state):
        """The first two draws return the first and second Farm."""
        state = starter_state

        first = apply_action(state, Action.draw("player_1"))
        assert first.success
        assert first.card.instance_id == "farm_1"
        assert state.draw_pile.count == 5

        second = apply_action(state, Action.draw("player_1"))
        assert second.success
        assert second.card.instance_id == "farm_2"
        assert state.draw_pile.count == 4

        hand = state.get_player("player_1").hand
        assert [c.instance_id for c in hand.cards][-2:] == ["farm_1", "farm_2"]

    def test_draw_from_empty_pile_fails(self, starter_state):
        state = starter_state
        for _ in range(6):
            assert apply_action(state, Action.draw("player_1")).success

        hand_before = state.get_player("player_1").hand.count
        result = apply_action(state, Action.draw("player_1"))

        assert not result.success
        assert result.error_code == "EMPTY_CONTAINER"
        assert state.draw_pile.count == 0
        assert state.get_player("player_1").hand.count == hand_before

    def test_draw_unknown_player_fails(self, starter_state):
        result = apply_action(starter_state, Action.draw("ghost"))
        assert not result.success
        assert result.error_code == "PLAYER_NOT_FOUND"
        assert starter_state.draw_pile.count == 6


class TestDiscardAndPlay:

    def test_discard_from_hand(self, starter_state):
        state = starter_state
        result = apply_action(state, Action.discard("player_1", "twig_barge_2"))

        assert result.success
        assert state.locate("twig_barge_2") == ["discard_pile"]
        assert state.get_player("player_1").hand.count == 2

    def test_play_card_does_not_charge_cost(self, starter_state):
        """Playing a card moves it but leaves the stash alone."""
        state = starter_state
        player = state.get_player("player_1")

        result = apply_action(state, Action.play_card("player_1", "farm_4"))

        assert result.success
        assert state.discard_pile.cards[-1].instance_id == "farm_4"
        assert player.stash.as_dict() == {
            "berries": 0, "resin": 0, "stones": 0, "tokens": 0, "wood": 0,
        }

    def test_card_not_in_hand(self, starter_state):
        result = apply_action(starter_state, Action.discard("player_1", "farm_1"))
        assert not result.success
        assert result.error_code == "CARD_NOT_FOUND"
        assert starter_state.locate("farm_1") == ["draw_pile"]

    def test_card_in_another_players_hand(self, small_state):
        result = apply_action(small_state, Action.play_card("p1", "barge_2"))
        assert not result.success
        assert small_state.locate("barge_2") == ["hand:p2"]


class TestConservation:

    def test_card_count_constant(self, small_state):
        """Any sequence of draws, discards and plays keeps the total."""
        state = small_state
        total = state.total_card_count()
        actions = [
            Action.draw("p1"),
            Action.draw("p2"),
            Action.discard("p1", "barge_1"),
            Action.draw("p1"),
            Action.play_card("p2", "farm_2"),
            Action.draw("p2"),  # Empty pile: fails
            Action.discard("p2", "barge_1"),  # Not in p2's hand: fails
            Action.play_card("p1", "farm_1"),
        ]

        for action in actions:
            apply_action(state, action)
            assert state.total_card_count() == total

        assert state.draw_pile.count + state.discard_pile.count + sum(
            p.hand.count for p in state.players
        ) == total

    def test_invariant_violation_propagates(self, small_state):
        """A broken census is not turned into a failure result."""
        small_state.discard_pile.cards.append(small_state.draw_pile.cards[-1])

        with pytest.raises(InvariantViolation):
            apply_action(small_state, Action.draw("p1"))


class TestStashActions:

    def test_credit_then_debit(self, starter_state):
        player = starter_state.get_player("player_1")

        assert apply_action(starter_state, Action.credit("player_1", "berries", 2)).success
        assert apply_action(starter_state, Action.debit("player_1", "berries", 1)).success
        assert player.stash.berries == 1

    def test_debit_from_empty_stash(self, starter_state):
        """Stash{berries:0} - debit(berries, 1) fails and changes nothing."""
        player = starter_state.get_player("player_1")

        result = apply_action(starter_state, Action.debit("player_1", "berries", 1))

        assert not result.success
        assert result.error_code == "INSUFFICIENT_RESOURCE"
        assert player.stash.berries == 0


class TestActionHistory:

    def test_successful_actions_logged(self, starter_state):
        action = Action.draw("player_1")
        apply_action(starter_state, action)

        assert starter_state.action_history[-1] is action
        assert starter_state.action_history[-1].action_type == ActionType.DRAW

    def test_failed_actions_not_logged(self, starter_state):
        apply_action(starter_state, Action.debit("player_1", "wood", 5))
        assert starter_state.action_history == []

    def test_ownership_check_can_be_disabled(self, small_state):
        small_state.discard_pile.cards.append(small_state.draw_pile.cards[-1])
        result = Reducer(verify_ownership=False).apply(small_state, Action.draw("p1"))
        assert result.success
