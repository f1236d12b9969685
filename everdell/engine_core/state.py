"""
Game State - Cards, decks, stashes, players and the shared piles.

Design principles:
- Mutable containers: decks and stashes change in place, one owner each
- Every card lives in exactly one container (draw pile, discard pile, a hand)
- Recoverable failures raise EverdellError subclasses and leave state untouched
- GameState is an explicit value, never a module global
"""

from __future__ import annotations
from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterator
import random

from .errors import CardNotFound, EmptyContainer, InsufficientResource, InvariantViolation


class CardType(Enum):
    """Card categories."""
    TRAVELER = "traveler"
    PRODUCTION = "production"
    DESTINATION = "destination"
    GOVERNANCE = "governance"
    PROSPERITY = "prosperity"


@dataclass
class Card:
    """
    A card instance in the game.

    Several copies of the same card can exist (three Farms in the starting
    draw pile), so identity is the instance_id, not the name.
    """
    card_id: str  # Catalogue key, shared by copies
    instance_id: str  # Unique per copy
    name: str
    cost: int = 0  # Advisory: never debited from a stash
    value: int = 0
    card_type: CardType = CardType.TRAVELER

    def __post_init__(self):
        if self.cost < 0:
            raise ValueError(f"Card cost must be non-negative, got {self.cost}")
        if self.value < 0:
            raise ValueError(f"Card value must be non-negative, got {self.value}")

    def __hash__(self):
        return hash(self.instance_id)

    def __eq__(self, other):
        if not isinstance(other, Card):
            return False
        return self.instance_id == other.instance_id


@dataclass(eq=False)
class Deck:
    """
    An ordered collection of cards.

    Cards are pushed at the tail and drawn from the head, so an untouched
    deck hands its cards back in insertion order.
    """
    name: str
    cards: list[Card] = field(default_factory=list)
    revision: int = 0  # Bumped on every mutation

    @property
    def count(self) -> int:
        return len(self.cards)

    @property
    def is_empty(self) -> bool:
        return len(self.cards) == 0

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def push(self, card: Card) -> None:
        """Append a card to the tail."""
        self.cards.append(card)
        self.revision += 1

    def draw(self) -> Card:
        """Remove and return the head card."""
        if not self.cards:
            raise EmptyContainer(self.name)
        card = self.cards.pop(0)
        self.revision += 1
        return card

    def take(self, instance_id: str) -> Card:
        """Remove and return a specific card."""
        for idx, card in enumerate(self.cards):
            if card.instance_id == instance_id:
                del self.cards[idx]
                self.revision += 1
                return card
        raise CardNotFound(instance_id, self.name)

    def contains(self, instance_id: str) -> bool:
        return any(c.instance_id == instance_id for c in self.cards)

    def shuffle(self, rng: random.Random) -> None:
        """
        Reorder the deck in place using the caller's random source.

        The order depends only on the state of `rng`: two decks with the
        same contents shuffled with identically seeded generators end up
        in the same order. Setup and the tick pipeline never shuffle.
        """
        rng.shuffle(self.cards)
        self.revision += 1


class Resource(Enum):
    """The five stash resources."""
    BERRIES = "berries"
    RESIN = "resin"
    STONES = "stones"
    TOKENS = "tokens"
    WOOD = "wood"

    @classmethod
    def parse(cls, name: Resource | str) -> Resource:
        """Resolve a resource by name. Unknown names raise ValueError."""
        if isinstance(name, Resource):
            return name
        return cls(name.lower())


@dataclass
class PlayerStash:
    """Per-player resource counters. Never negative."""
    berries: int = 0
    resin: int = 0
    stones: int = 0
    tokens: int = 0
    wood: int = 0

    def __post_init__(self):
        for resource in Resource:
            if getattr(self, resource.value) < 0:
                raise ValueError(f"Stash {resource.value} must be non-negative")

    def balance(self, resource: Resource | str) -> int:
        return getattr(self, Resource.parse(resource).value)

    def credit(self, resource: Resource | str, n: int) -> int:
        """Add n to a counter. Returns the new balance."""
        res = Resource.parse(resource)
        if n < 0:
            raise ValueError(f"Credit amount must be non-negative, got {n}")
        new_balance = getattr(self, res.value) + n
        setattr(self, res.value, new_balance)
        return new_balance

    def debit(self, resource: Resource | str, n: int) -> int:
        """
        Subtract n from a counter. Returns the new balance.

        Raises InsufficientResource without touching the stash if n
        exceeds the balance.
        """
        res = Resource.parse(resource)
        if n < 0:
            raise ValueError(f"Debit amount must be non-negative, got {n}")
        current = getattr(self, res.value)
        if n > current:
            raise InsufficientResource(res.value, n, current)
        setattr(self, res.value, current - n)
        return current - n

    def as_dict(self) -> dict[str, int]:
        return {resource.value: getattr(self, resource.value) for resource in Resource}


@dataclass
class PlayerHand:
    """The deck of cards a single player holds."""
    deck: Deck = field(default_factory=lambda: Deck(name="hand"))

    @property
    def cards(self) -> list[Card]:
        return self.deck.cards

    @property
    def count(self) -> int:
        return self.deck.count


@dataclass
class Player:
    """A player: identity plus one hand and one stash."""
    player_id: str
    name: str
    hand: PlayerHand = field(default_factory=PlayerHand)
    stash: PlayerStash = field(default_factory=PlayerStash)


@dataclass
class GameState:
    """
    Shared game state: the two piles and the players.

    This is the canonical state the engine operates on.
    All state changes go through the reducer.
    """
    draw_pile: Deck = field(default_factory=lambda: Deck(name="draw_pile"))
    discard_pile: Deck = field(default_factory=lambda: Deck(name="discard_pile"))
    players: list[Player] = field(default_factory=list)

    # Census recorded by seal(); None until setup completes
    sealed_census: Counter | None = None

    # History (for replay, logging)
    action_history: list[Any] = field(default_factory=list)

    def get_player(self, player_id: str) -> Player | None:
        """Get player by ID."""
        for p in self.players:
            if p.player_id == player_id:
                return p
        return None

    def add_player(self, player: Player) -> Player:
        if self.get_player(player.player_id) is not None:
            raise ValueError(f"Player {player.player_id} already exists")
        self.players.append(player)
        return player

    def containers(self) -> list[tuple[str, Deck]]:
        """All card containers, labelled."""
        result = [
            ("draw_pile", self.draw_pile),
            ("discard_pile", self.discard_pile),
        ]
        for p in self.players:
            result.append((f"hand:{p.player_id}", p.hand.deck))
        return result

    def total_card_count(self) -> int:
        return sum(deck.count for _, deck in self.containers())

    def locate(self, instance_id: str) -> list[str]:
        """Names of every container currently holding the card."""
        found = []
        for label, deck in self.containers():
            for card in deck.cards:
                if card.instance_id == instance_id:
                    found.append(label)
        return found

    def _census(self) -> Counter:
        census: Counter = Counter()
        for _, deck in self.containers():
            for card in deck.cards:
                census[card.instance_id] += 1
        return census

    def seal(self) -> None:
        """Record the card census. Later checks compare against it."""
        census = self._census()
        duplicated = sorted(cid for cid, n in census.items() if n > 1)
        if duplicated:
            raise InvariantViolation(f"Cards held by multiple containers: {duplicated}")
        self.sealed_census = census

    def check_ownership(self) -> None:
        """
        Verify every card sits in exactly one container.

        Raises InvariantViolation when a card appears twice, or, once
        sealed, when a card has vanished or appeared since setup.
        """
        census = self._census()
        duplicated = sorted(cid for cid, n in census.items() if n > 1)
        if duplicated:
            raise InvariantViolation(f"Cards held by multiple containers: {duplicated}")

        if self.sealed_census is None:
            return

        missing = sorted(set(self.sealed_census) - set(census))
        if missing:
            raise InvariantViolation(f"Cards held by no container: {missing}")
        extra = sorted(set(census) - set(self.sealed_census))
        if extra:
            raise InvariantViolation(f"Cards created after setup: {extra}")
