"""
Configuration - Settings read from the environment.

    EVERDELL_ENV             development | production (default development)
    EVERDELL_LOG_LEVEL       logging level name (default INFO)
    EVERDELL_EVENT_CAPACITY  event bus capacity per tick (default 64)
    ALLOWED_ORIGINS          comma-separated CORS origins (default *)
"""

from __future__ import annotations
from dataclasses import dataclass, field
import logging
import os

from .engine_core.events import DEFAULT_CAPACITY

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass(frozen=True)
class Settings:
    env: str = "development"
    log_level: str = "INFO"
    event_capacity: int = DEFAULT_CAPACITY
    allowed_origins: list[str] = field(default_factory=lambda: ["*"])

    @classmethod
    def from_env(cls) -> Settings:
        capacity = os.getenv("EVERDELL_EVENT_CAPACITY")
        return cls(
            env=os.getenv("EVERDELL_ENV", "development"),
            log_level=os.getenv("EVERDELL_LOG_LEVEL", "INFO").upper(),
            event_capacity=int(capacity) if capacity else DEFAULT_CAPACITY,
            allowed_origins=os.getenv("ALLOWED_ORIGINS", "*").split(","),
        )


def configure_logging(level: str = "INFO") -> None:
    """Set up root logging once for the CLI or server."""
    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO), format=LOG_FORMAT)
