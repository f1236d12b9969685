"""
World - The explicit context passed to initialize() and tick().

Holds everything the systems read or write. There is no global instance:
each session (and each test) builds its own.
"""

from __future__ import annotations
from dataclasses import dataclass, field

from ..engine_core.events import DEFAULT_CAPACITY, EventBus
from ..engine_core.interaction import CardVisual
from ..engine_core.presentation import HandView
from ..engine_core.reducer import Reducer
from ..engine_core.state import GameState, Player


@dataclass
class World:
    game: GameState | None = None
    player_id: str | None = None
    bus: EventBus = field(default_factory=lambda: EventBus(DEFAULT_CAPACITY))
    reducer: Reducer = field(default_factory=Reducer)
    visuals: dict[str, CardVisual] = field(default_factory=dict)
    hand_view: HandView = field(default_factory=HandView)
    tick_count: int = 0
    halted: bool = False  # Set on InvariantViolation; no further ticks

    @classmethod
    def with_capacity(cls, event_capacity: int) -> World:
        return cls(bus=EventBus(event_capacity))

    @property
    def is_initialized(self) -> bool:
        return self.game is not None

    @property
    def player(self) -> Player | None:
        if self.game is None or self.player_id is None:
            return None
        return self.game.get_player(self.player_id)
