"""Locale formatter protocol consumed by the engine."""

from datetime import date
from typing import Protocol


class LocaleFormatter(Protocol):
    """Formats and parses dates and supplies localized names.

    ``parse`` raises :class:`datepicker.exceptions.ParseError` on input it
    cannot recognize; the engine never catches it.
    """

    def format(self, day: date, pattern: str, locale: str | None = None) -> str:
        ...

    def parse(self, text: str, hint: str | None = None) -> date:
        ...

    def month_name(self, index: int, length: str = "long", locale: str | None = None) -> str:
        ...

    def weekday_name(self, index: int, length: str = "short", locale: str | None = None) -> str:
        ...


class DateParserStrategy(Protocol):
    """One way of turning text into a date."""

    def can_parse(self, hint: str | None) -> bool:
        """Whether this strategy applies for the given format hint."""
        ...

    def parse(self, text: str, hint: str | None) -> date | None:
        """Return the parsed date, or None to let the next strategy try."""
        ...
