"""
Everdell - Prototype card game engine

Players hold a hand of cards and a five-resource stash and draw from
shared piles. The engine provides:
- Card containers with single-owner transfers
- Stash counters that never go negative
- A per-tick pipeline from pointer signals to PlayCardEvents
- Display data (stash text, hand visuals) for a rendering host
"""

__version__ = "0.1.0"
