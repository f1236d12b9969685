"""
Engine errors.

Container and stash operations raise the recoverable errors below; the
reducer turns them into ActionResult failures. InvariantViolation is the
exception: it means the data model is already corrupt and must halt the
simulation, so nothing in the engine converts it into a result.
"""

from __future__ import annotations


class EverdellError(Exception):
    """Base class for all engine errors."""
    error_code = "ENGINE_ERROR"


class EmptyContainer(EverdellError):
    """Draw attempted on a deck with no cards."""
    error_code = "EMPTY_CONTAINER"

    def __init__(self, container: str):
        super().__init__(f"Cannot draw from empty {container}")
        self.container = container


class InsufficientResource(EverdellError):
    """Debit larger than the current balance."""
    error_code = "INSUFFICIENT_RESOURCE"

    def __init__(self, resource: str, requested: int, available: int):
        super().__init__(
            f"Cannot debit {requested} {resource}: only {available} available"
        )
        self.resource = resource
        self.requested = requested
        self.available = available


class CardNotFound(EverdellError):
    """A specific card was asked for but the container does not hold it."""
    error_code = "CARD_NOT_FOUND"

    def __init__(self, instance_id: str, container: str):
        super().__init__(f"Card {instance_id} not in {container}")
        self.instance_id = instance_id
        self.container = container


class AlreadyInitialized(EverdellError):
    """initialize() called on a world that is already set up."""
    error_code = "ALREADY_INITIALIZED"


class InvariantViolation(EverdellError):
    """Card ownership or census broken. Fatal."""
    error_code = "INVARIANT_VIOLATION"
