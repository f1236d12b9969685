"""
Game Loop - initialize() once, then tick() once per frame.

Each tick runs the systems in a fixed order:
1. Input ingestion (signals from the host)
2. Interaction pipeline (feedback colors, PlayCardEvents)
3. Event delivery (resolution moves played cards out of hand)
4. Clear the bus so no event outlives its tick
5. Ownership check
6. Presentation sync (stash text, hand visuals)

The host only reports signals and reads the TickResult; it never touches
decks, hands or stashes.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Mapping
import logging

from ..engine_core.errors import AlreadyInitialized, InvariantViolation
from ..engine_core.events import PlayCardEvent
from ..engine_core.interaction import CardVisual, Interaction, InteractionPipeline
from ..engine_core.presentation import hand_ui_system, stash_ui_system
from ..engine_core.resolution import PlayCardResolver
from ..games.starter.setup import StartingLayout, setup_starter_game
from .world import World

logger = logging.getLogger(__name__)

Signals = Mapping[str, Interaction | str]


@dataclass
class TickResult:
    """
    What the host renders after a tick.

    hand is in hand order; events are those delivered this tick.
    """
    tick: int
    stash_text: str = ""
    hand: list[CardVisual] = field(default_factory=list)
    events: list[PlayCardEvent] = field(default_factory=list)


def initialize(world: World, layout: StartingLayout | None = None) -> World:
    """
    Set up the world. Must be called exactly once, before the first tick.
    """
    if world.is_initialized:
        raise AlreadyInitialized("World is already initialized")

    layout = layout or StartingLayout()
    world.game = setup_starter_game(layout)
    world.player_id = layout.player_id
    world.bus.subscribe(
        PlayCardResolver(lambda: world.game, layout.player_id, reducer=world.reducer)
    )
    hand_ui_system(world)

    logger.info(
        "World initialized: draw pile %d, hand %d",
        world.game.draw_pile.count,
        world.player.hand.count,
    )
    return world


def tick(world: World, signals: Signals | None = None) -> TickResult:
    """
    Advance the world by one tick.

    Before initialize() this is a no-op returning an empty result.
    InvariantViolation propagates to the caller and halts the world: every
    later tick raises it again.
    """
    if world.halted:
        raise InvariantViolation(f"World halted at tick {world.tick_count}")

    world.tick_count += 1
    current = world.tick_count

    if not world.is_initialized:
        logger.debug("Tick %d skipped: world not initialized", current)
        return TickResult(tick=current)

    InteractionPipeline().run(world.visuals, signals or {}, world.bus, current)
    try:
        delivered = world.bus.drain()
        world.game.check_ownership()
    except InvariantViolation:
        world.halted = True
        logger.error("Tick %d: card ownership broken, halting", current)
        raise
    finally:
        world.bus.clear()

    return TickResult(
        tick=current,
        stash_text=stash_ui_system(world),
        hand=hand_ui_system(world),
        events=delivered,
    )


class GameLoop:
    """
    Object wrapper over a World.

    Usage:
        loop = GameLoop()
        loop.initialize()
        result = loop.tick({"card_ui_1": "hovered"})
        render(result.stash_text, result.hand)
    """

    def __init__(self, world: World | None = None):
        self.world = world or World()

    def initialize(self, layout: StartingLayout | None = None) -> World:
        return initialize(self.world, layout)

    def tick(self, signals: Signals | None = None) -> TickResult:
        return tick(self.world, signals)
