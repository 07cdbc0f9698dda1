"""Named picker occurrences, notification sinks and the state listener registry."""

import logging
from collections.abc import Callable
from enum import Enum
from typing import Any, Protocol

logger = logging.getLogger(__name__)


class PickerEvent(str, Enum):
    """Semantically named occurrences the engine reports to its host."""

    OPEN = "open"
    CLOSE = "close"
    MONTH_CHANGE = "month-change"
    YEAR_CHANGE = "year-change"
    VIEW_MODE_CHANGE = "view-mode-change"
    MODE_CHANGE = "mode-change"
    DATE_CHANGE = "date-change"
    DATE_CLEAR = "date-clear"
    FOCUS_DATE = "focus-date"
    RANGE_START = "range-start"
    RANGE_COMPLETE = "range-complete"
    RANGE_CLEAR = "range-clear"
    EVENTS_ADDED = "events-added"
    EVENTS_REMOVED = "events-removed"
    EVENTS_CLEARED = "events-cleared"


class NotificationSink(Protocol):
    """Receives named occurrences; delivering them is the host's business."""

    def emit(self, event: PickerEvent, detail: dict[str, Any]) -> None:
        ...


class NullSink:
    """Discards every occurrence."""

    def emit(self, event: PickerEvent, detail: dict[str, Any]) -> None:
        pass


class LoggingSink:
    """Logs every occurrence; the default when the host supplies no sink."""

    def __init__(self, level: int = logging.DEBUG):
        self.level = level

    def emit(self, event: PickerEvent, detail: dict[str, Any]) -> None:
        logger.log(self.level, f"{event.value}: {detail}")


class CollectingSink:
    """Records occurrences in order, for hosts that poll and for tests."""

    def __init__(self):
        self.events: list[tuple[PickerEvent, dict[str, Any]]] = []

    def emit(self, event: PickerEvent, detail: dict[str, Any]) -> None:
        self.events.append((event, dict(detail)))

    def names(self) -> list[PickerEvent]:
        return [event for event, _ in self.events]

    def last(self, event: PickerEvent) -> dict[str, Any] | None:
        """Detail of the most recent occurrence of ``event``."""
        for name, detail in reversed(self.events):
            if name == event:
                return detail
        return None

    def clear(self) -> None:
        self.events.clear()


Listener = Callable[[Any], None]


class ListenerRegistry:
    """Ordered subscriber list with synchronous fan-out.

    Subscribers are called in registration order with the owner object, once
    per ``notify``. Unsubscribing during a notification takes effect on the
    next one.
    """

    def __init__(self):
        self._listeners: list[Listener] = []

    def subscribe(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def notify(self, owner: Any) -> None:
        for listener in list(self._listeners):
            listener(owner)

    def __len__(self) -> int:
        return len(self._listeners)
