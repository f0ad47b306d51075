"""Contract for runtime telemetry plus stderr logging setup."""

from __future__ import annotations

import logging
from typing import Any, Protocol

from rich.console import Console
from rich.logging import RichHandler


class Telemetry(Protocol):
    """Reports per-turn events and outcomes."""

    def emit(self, event_name: str, payload: dict[str, Any]) -> None:
        """Publish telemetry event to the configured sink."""


class LoggingTelemetry:
    """Telemetry sink that forwards events to a standard logger."""

    def __init__(self, logger: logging.Logger | None = None, level: int = logging.INFO) -> None:
        self._logger = logger or logging.getLogger("rift_bot.telemetry")
        self._level = level

    def emit(self, event_name: str, payload: dict[str, Any]) -> None:
        self._logger.log(self._level, event_name, extra={"payload": payload})


def configure_logging(level: str | int = "INFO") -> None:
    """Route ``rift_bot`` logs to stderr; stdout carries the game protocol."""
    handler = RichHandler(console=Console(stderr=True), show_path=False, rich_tracebacks=True)
    logger = logging.getLogger("rift_bot")
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    logger.propagate = False
