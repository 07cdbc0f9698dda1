"""Per-day event labels keyed by ISO date."""

import logging
from collections.abc import Mapping
from datetime import date

from datepicker.formatting.base import LocaleFormatter
from datepicker.models.dates import to_calendar_date
from datepicker.notifications import NotificationSink, PickerEvent

logger = logging.getLogger(__name__)


class EventStore:
    """Ordered label lists keyed by ``yyyy-MM-dd``.

    Keys may be given as dates or as text; text keys go through the
    formatter's ``parse`` (a ParseError propagates to the caller). Labels
    keep insertion order and a label already present for a day is not
    added twice.
    """

    def __init__(
        self,
        formatter: LocaleFormatter | None = None,
        sink: NotificationSink | None = None,
    ):
        if formatter is None:
            from datepicker.formatting import DateFormatter

            formatter = DateFormatter()
        self._formatter = formatter
        self._sink = sink
        self._events: dict[str, list[str]] = {}

    def key_for(self, day: date | str) -> str:
        """Normalize a date or date text to its ISO key."""
        if isinstance(day, str):
            day = self._formatter.parse(day)
        return to_calendar_date(day).isoformat()

    def _emit(self, event: PickerEvent, detail: dict) -> None:
        if self._sink is not None:
            self._sink.emit(event, detail)

    def _merge(self, key: str, labels: list[str]) -> list[str]:
        existing = self._events.setdefault(key, [])
        added = [label for label in dict.fromkeys(labels) if label not in existing]
        existing.extend(added)
        if not existing:
            del self._events[key]
        return added

    def add_event(self, day: date | str, label: str) -> None:
        key = self.key_for(day)
        if self._merge(key, [label]):
            self._emit(PickerEvent.EVENTS_ADDED, {"events": {key: [label]}})

    def add_events(self, events: Mapping[date | str, list[str]]) -> None:
        """Merge a mapping of day -> labels into the store."""
        added: dict[str, list[str]] = {}
        for day, labels in events.items():
            key = self.key_for(day)
            new_labels = self._merge(key, list(labels))
            if new_labels:
                added.setdefault(key, []).extend(new_labels)
        if added:
            logger.debug(f"Added events for {len(added)} day(s)")
            self._emit(PickerEvent.EVENTS_ADDED, {"events": added})

    def remove_events(self, day: date | str) -> None:
        key = self.key_for(day)
        if self._events.pop(key, None) is not None:
            self._emit(PickerEvent.EVENTS_REMOVED, {"date": key})

    def clear(self) -> None:
        if self._events:
            self._events.clear()
            self._emit(PickerEvent.EVENTS_CLEARED, {})

    def events_for(self, day: date | str) -> list[str]:
        return list(self._events.get(self.key_for(day), []))

    def has_events(self, day: date | str) -> bool:
        return bool(self._events.get(self.key_for(day)))

    def as_dict(self) -> dict[str, list[str]]:
        return {key: list(labels) for key, labels in self._events.items()}

    def __len__(self) -> int:
        return len(self._events)

    def __contains__(self, day: date | str) -> bool:
        return self.has_events(day)
