"""
Integration tests - initialize() and tick() end to end.

Tests the complete flow:
1. Initialize the world
2. Report signals tick by tick
3. Played cards leave the hand within the same tick
4. Display data follows
"""

import pytest

from ..engine_core.errors import AlreadyInitialized, InvariantViolation
from ..engine_core.interaction import PRESSED_CARD_COLOR, Interaction
from ..games.starter.setup import StartingLayout
from ..session import GameLoop, SessionManager, World, initialize, tick


class TestInitialize:

    def test_starting_layout(self, world):
        game = world.game
        assert [c.name for c in game.draw_pile] == [
            "Farm", "Farm", "Farm", "Resin Refinery", "Resin Refinery", "Twig Barge",
        ]
        assert [c.name for c in world.player.hand.cards] == ["Farm", "Resin Refinery", "Twig Barge"]
        assert world.player.stash.as_dict() == {
            "berries": 0, "resin": 0, "stones": 0, "tokens": 0, "wood": 0,
        }
        assert game.discard_pile.is_empty
        assert len(game.players) == 1

    def test_initialize_twice_fails(self, world):
        with pytest.raises(AlreadyInitialized):
            initialize(world)

    def test_custom_layout(self):
        world = initialize(World(), StartingLayout(draw_pile=["farm"], hand=[], player_id="solo"))
        assert world.game.draw_pile.count == 1
        assert world.player.player_id == "solo"
        assert world.player.hand.count == 0


class TestTick:

    def test_tick_before_initialize_is_skipped(self):
        world = World()
        result = tick(world, {"card_ui_1": "pressed"})

        assert result.tick == 1
        assert result.stash_text == ""
        assert result.hand == []
        assert result.events == []

    def test_idle_tick_returns_display(self, loop):
        result = loop.tick({})

        assert result.tick == 1
        assert result.stash_text.startswith("Berries: 0")
        assert [v.label for v in result.hand] == ["Farm", "Resin Refinery", "Twig Barge"]
        assert result.events == []

    def test_press_plays_card_in_same_tick(self, loop):
        world = loop.world
        visual = world.visuals[world.hand_view.order[0]]
        total = world.game.total_card_count()

        loop.tick({visual.visual_id: "hovered"})
        result = loop.tick({visual.visual_id: "pressed"})

        assert len(result.events) == 1
        assert result.events[0].visual_id == visual.visual_id
        assert visual.color == PRESSED_CARD_COLOR
        assert world.game.locate(visual.card_instance_id) == ["discard_pile"]
        assert [v.label for v in result.hand] == ["Resin Refinery", "Twig Barge"]
        assert visual.visual_id not in world.visuals
        assert world.game.total_card_count() == total

    def test_repeated_press_next_tick_emits_nothing(self, loop):
        visual_id = loop.world.hand_view.order[0]

        first = loop.tick({visual_id: "pressed"})
        second = loop.tick({visual_id: "pressed"})

        assert len(first.events) == 1
        assert second.events == []
        assert loop.world.game.discard_pile.count == 1

    def test_hover_state_survives_unrelated_ticks(self, loop):
        visual_id = loop.world.hand_view.order[1]

        loop.tick({visual_id: Interaction.HOVERED})
        result = loop.tick({})
        result = loop.tick({})

        assert result.hand[1].visual_id == visual_id
        assert result.hand[1].interaction == Interaction.HOVERED

    def test_no_events_carry_over(self, loop):
        visual_id = loop.world.hand_view.order[0]
        loop.tick({visual_id: "pressed"})

        assert len(loop.world.bus) == 0
        assert loop.tick({}).events == []

    def test_broken_ownership_halts(self, loop):
        game = loop.world.game
        game.discard_pile.cards.append(game.draw_pile.cards[0])

        with pytest.raises(InvariantViolation):
            loop.tick({})

    def test_halt_mid_drain_discards_queued_events(self, loop):
        world = loop.world
        game = world.game
        first, second = world.hand_view.order[0], world.hand_view.order[1]
        game.discard_pile.cards.append(game.draw_pile.cards[0])

        with pytest.raises(InvariantViolation):
            loop.tick({first: "pressed", second: "pressed"})

        assert len(world.bus) == 0
        assert world.halted

        # Repairing the piles does not resume a halted world
        game.discard_pile.cards.pop(0)
        with pytest.raises(InvariantViolation):
            loop.tick({})
        assert len(world.bus) == 0

    def test_subscriber_error_does_not_leak_events(self, loop):
        world = loop.world
        first, second = world.hand_view.order[0], world.hand_view.order[1]

        failures = [RuntimeError("subscriber failed")]

        def explode(event):
            if failures:
                raise failures.pop()

        world.bus.subscribe(explode)
        with pytest.raises(RuntimeError):
            loop.tick({first: "pressed", second: "pressed"})

        assert len(world.bus) == 0
        assert not world.halted

        assert loop.tick({}).events == []


class TestSessionManager:

    def test_session_lifecycle(self):
        manager = SessionManager()
        session = manager.create_session()

        assert session.session_id in manager.list_active_sessions()
        assert session.world.is_initialized

        assert manager.end_session(session.session_id)
        assert session.session_id not in manager.list_active_sessions()
        assert manager.get_session(session.session_id) is None

    def test_sessions_are_isolated(self):
        manager = SessionManager()
        a = manager.create_session()
        b = manager.create_session()

        a.loop.tick({a.world.hand_view.order[0]: "pressed"})

        assert a.world.game.discard_pile.count == 1
        assert b.world.game.discard_pile.count == 0

    def test_event_capacity_passed_to_world(self):
        manager = SessionManager(event_capacity=5)
        session = manager.create_session()
        assert session.world.bus.capacity == 5

    def test_end_unknown_session(self):
        assert not SessionManager().end_session("nope")


class TestGameLoopObject:

    def test_wraps_explicit_world(self):
        world = World()
        loop = GameLoop(world)
        loop.initialize()
        assert loop.world is world
        assert world.is_initialized
