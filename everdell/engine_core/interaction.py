"""
Interaction Pipeline - Turns pointer signals on card visuals into feedback and events.

Each tick the host reports an interaction state per visual. Only visuals
whose state changed since the previous tick are processed:

    -> HOVERED   hovered color
    -> PRESSED   pressed color, INTERACTIVE removed, one PlayCardEvent
    -> NONE      idle color

A visual without the INTERACTIVE capability still records its state but
gets no feedback and publishes nothing, so a card can only be played once.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping
import logging

from .events import EventBus, PlayCardEvent

logger = logging.getLogger(__name__)

Color = tuple[float, float, float]

CARD_BACKGROUND_COLOR: Color = (0.65, 0.65, 0.65)
NORMAL_CARD_COLOR: Color = (0.15, 0.15, 0.15)
HOVERED_CARD_COLOR: Color = (0.25, 0.25, 0.25)
PRESSED_CARD_COLOR: Color = (0.35, 0.75, 0.35)


class Interaction(Enum):
    """Pointer state of a visual for one tick."""
    NONE = "none"
    HOVERED = "hovered"
    PRESSED = "pressed"


class Capability(Enum):
    """Markers controlling which systems act on a visual."""
    INTERACTIVE = "interactive"


@dataclass
class CardVisual:
    """
    On-screen representation of a card in hand.

    Distinct from the Card itself: it carries only display state and a
    reference to the card it shows.
    """
    visual_id: str
    card_instance_id: str
    label: str
    interaction: Interaction = Interaction.NONE
    color: Color = CARD_BACKGROUND_COLOR
    capabilities: set[Capability] = field(default_factory=lambda: {Capability.INTERACTIVE})

    @property
    def is_interactive(self) -> bool:
        return Capability.INTERACTIVE in self.capabilities


def parse_signal(value: Interaction | str) -> Interaction:
    if isinstance(value, Interaction):
        return value
    return Interaction(value.lower())


class InteractionPipeline:
    """Per-tick interaction system over the card visual registry."""

    def run(
        self,
        visuals: Mapping[str, CardVisual],
        signals: Mapping[str, Interaction | str],
        bus: EventBus,
        tick: int,
    ) -> list[str]:
        """
        Apply this tick's signals.

        Returns the ids of the visuals whose state changed.
        """
        changed: list[str] = []

        for visual_id, raw in signals.items():
            visual = visuals.get(visual_id)
            if visual is None:
                logger.debug("Signal for unknown visual %s ignored", visual_id)
                continue

            interaction = parse_signal(raw)
            if interaction == visual.interaction:
                continue

            visual.interaction = interaction
            changed.append(visual_id)

            if not visual.is_interactive:
                continue

            if interaction == Interaction.PRESSED:
                visual.color = PRESSED_CARD_COLOR
                visual.capabilities.discard(Capability.INTERACTIVE)
                bus.publish(PlayCardEvent(
                    visual_id=visual_id,
                    card_instance_id=visual.card_instance_id,
                    tick=tick,
                ))
                logger.debug("Tick %d: %s pressed", tick, visual_id)
            elif interaction == Interaction.HOVERED:
                visual.color = HOVERED_CARD_COLOR
            else:
                visual.color = NORMAL_CARD_COLOR

        return changed
