# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Diagnostic events and the handlers that receive them."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Final, Protocol

from usewiz._internal.logging_utils import structured_extra
from usewiz.core.model_types import EventKind, LogComponent

logger: logging.Logger = logging.getLogger("usewiz.events")

_LOG_LEVELS: Final[dict[EventKind, int]] = {
    EventKind.ERROR: logging.ERROR,
    EventKind.WARNING: logging.WARNING,
    EventKind.INFO: logging.INFO,
    EventKind.DEBUG: logging.DEBUG,
}


@dataclass(slots=True, frozen=True)
class Location:
    """Position inside a manifest file; zero line/column means unknown."""

    file: str
    line: int = 0
    column: int = 0

    def __str__(self) -> str:
        text = self.file
        if self.line > 0:
            text += f":{self.line}"
            if self.column > 0:
                text += f":{self.column}"
        return text


@dataclass(slots=True, frozen=True)
class Event:
    """A single diagnostic addressed to the user."""

    kind: EventKind
    location: Location | None
    message: str

    @classmethod
    def warn(cls, location: Location | None, message: str) -> Event:
        return cls(kind=EventKind.WARNING, location=location, message=message)

    @classmethod
    def error(cls, location: Location | None, message: str) -> Event:
        return cls(kind=EventKind.ERROR, location=location, message=message)

    def format(self) -> str:
        """Render the event the way a build console prints it."""
        prefix = self.kind.value.upper()
        if self.location is None:
            return f"{prefix}: {self.message}"
        return f"{prefix}: {self.location}: {self.message}"


class EventHandler(Protocol):
    def handle(self, event: Event, /) -> None:
        """Receive one event."""
        ...  # pragma: no cover - Protocol stub


def _new_event_list() -> list[Event]:
    return []


@dataclass(slots=True)
class StoredEventHandler:
    """Handler that keeps every event it receives, in order."""

    events: list[Event] = field(default_factory=_new_event_list)

    def handle(self, event: Event, /) -> None:
        self.events.append(event)

    def has_errors(self) -> bool:
        return any(event.kind is EventKind.ERROR for event in self.events)

    def clear(self) -> None:
        self.events.clear()


class LoggingEventHandler:
    """Forward events to the ``usewiz.events`` logger."""

    def __init__(self, target: logging.Logger | None = None) -> None:
        self._logger = target or logger

    def handle(self, event: Event, /) -> None:
        details: dict[str, object] = {"kind": event.kind.value}
        if event.location is not None:
            details["location"] = str(event.location)
        self._logger.log(
            _LOG_LEVELS[event.kind],
            "%s",
            event.message,
            extra=structured_extra(
                component=LogComponent.EVENTS,
                path=event.location.file if event.location is not None else None,
                details=details,
            ),
        )


__all__ = [
    "Event",
    "EventHandler",
    "Location",
    "LoggingEventHandler",
    "StoredEventHandler",
]
