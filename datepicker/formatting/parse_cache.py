"""Per-formatter cache of parse results."""

from datetime import date


class DateParseCache:
    """Remembers successful parses keyed by (text, hint).

    Owned by a formatter instance so each picker (and each test) gets its
    own cache.
    """

    def __init__(self, max_entries: int = 512):
        self._entries: dict[tuple[str, str | None], date] = {}
        self._max_entries = max_entries

    def get(self, text: str, hint: str | None) -> date | None:
        return self._entries.get((text, hint))

    def set(self, text: str, hint: str | None, value: date) -> None:
        if len(self._entries) >= self._max_entries:
            # Drop the oldest entry (dicts keep insertion order)
            self._entries.pop(next(iter(self._entries)))
        self._entries[(text, hint)] = value

    def clear(self) -> None:
        self._entries.clear()

    def __contains__(self, key: tuple[str, str | None]) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)
