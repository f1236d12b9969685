"""
Event Bus - Same-tick delivery of domain events.

Events published during a tick are delivered to every subscriber, in
publish order, when the bus is drained. Whatever is still queued when the
tick ends is cleared; nothing is carried into the next tick.
"""

from __future__ import annotations
from collections import deque
from dataclasses import dataclass
from typing import Callable
import logging

logger = logging.getLogger(__name__)

DEFAULT_CAPACITY = 64


@dataclass(frozen=True)
class PlayCardEvent:
    """A card visual was activated."""
    visual_id: str
    card_instance_id: str
    tick: int


EventHandler = Callable[[PlayCardEvent], None]


class EventBus:
    """
    Bounded FIFO of PlayCardEvents.

    Usage:
        bus = EventBus(capacity=64)
        bus.subscribe(handler)
        bus.publish(PlayCardEvent(...))
        delivered = bus.drain()
        bus.clear()
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY):
        if capacity < 1:
            raise ValueError("Event bus capacity must be at least 1")
        self.capacity = capacity
        self._queue: deque[PlayCardEvent] = deque()
        self._subscribers: list[EventHandler] = []
        self.dropped = 0

    def __len__(self) -> int:
        return len(self._queue)

    def subscribe(self, handler: EventHandler) -> None:
        self._subscribers.append(handler)

    def publish(self, event: PlayCardEvent) -> bool:
        """
        Queue an event for delivery this tick.

        Returns False (and drops the event) if the queue is full.
        """
        if len(self._queue) >= self.capacity:
            self.dropped += 1
            logger.warning(
                "Event bus full (capacity=%d), dropping event for %s",
                self.capacity, event.visual_id,
            )
            return False
        self._queue.append(event)
        return True

    def drain(self) -> list[PlayCardEvent]:
        """
        Deliver every queued event to all subscribers.

        Events published by a subscriber during delivery are delivered in
        the same drain, after those already queued. At most `capacity`
        events are delivered per drain; the rest are dropped.
        """
        delivered: list[PlayCardEvent] = []
        while self._queue:
            if len(delivered) >= self.capacity:
                overflow = len(self._queue)
                self.dropped += overflow
                logger.warning(
                    "Drain limit reached (capacity=%d), dropping %d event(s)",
                    self.capacity, overflow,
                )
                self._queue.clear()
                break
            event = self._queue.popleft()
            for handler in list(self._subscribers):
                handler(event)
            delivered.append(event)
        return delivered

    def clear(self) -> int:
        """Drop anything left in the queue. Returns how many were dropped."""
        leftover = len(self._queue)
        if leftover:
            logger.warning("Dropping %d undelivered event(s) at tick end", leftover)
        self._queue.clear()
        return leftover
