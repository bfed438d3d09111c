"""Activity observers.

Services report what they did through an Observer. Recording is
fire-and-forget: an observer must never raise into the calling operation.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from sportsevents.domain.errors import DomainError
from sportsevents.domain.value_objects import utc_now

_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}

logger = logging.getLogger(__name__)


class Observer(ABC):
    @abstractmethod
    def record(
        self,
        level: str,
        message: str,
        action: str,
        context: Mapping[str, Any] | None = None,
    ) -> None: ...

    def info(self, message: str, action: str, **context: Any) -> None:
        self.record("info", message, action, context)

    def warn(self, message: str, action: str, **context: Any) -> None:
        self.record("warn", message, action, context)

    def error(self, message: str, action: str, **context: Any) -> None:
        self.record("error", message, action, context)

    @contextmanager
    def failures(self, message: str, action: str, **context: Any) -> Iterator[None]:
        """Record a domain error raised inside the block, then let it propagate."""
        try:
            yield
        except DomainError as exc:
            self.error(message, action, error=exc.code.value, **context)
            raise


class LoggingObserver(Observer):
    """Forwards activity to the ``sportsevents.activity`` logger."""

    def __init__(self, logger_name: str = "sportsevents.activity") -> None:
        self._logger = logging.getLogger(logger_name)

    def record(
        self,
        level: str,
        message: str,
        action: str,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        try:
            self._logger.log(
                _LEVELS.get(level, logging.INFO),
                "%s [%s] %s",
                message,
                action,
                dict(context or {}),
                extra={"action": action, "context": dict(context or {})},
            )
        except Exception:
            logger.debug("Dropped activity record %s", action, exc_info=True)


@dataclass(frozen=True)
class ActivityEntry:
    level: str
    message: str
    action: str
    context: dict[str, Any]
    timestamp: datetime = field(default_factory=utc_now)


class RecordingObserver(Observer):
    """Keeps every entry in memory, most recent last."""

    def __init__(self) -> None:
        self.entries: list[ActivityEntry] = []

    def record(
        self,
        level: str,
        message: str,
        action: str,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        self.entries.append(ActivityEntry(level, message, action, dict(context or {})))

    def actions(self) -> list[str]:
        return [entry.action for entry in self.entries]

    def clear(self) -> None:
        self.entries.clear()
