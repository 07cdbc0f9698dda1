"""Default locale formatter: token formatting, strategy-based parsing, name tables."""

import logging
from datetime import date

from datepicker.constants import DEFAULT_LOCALE
from datepicker.exceptions import ParseError
from datepicker.formatting.base import DateParserStrategy
from datepicker.formatting.parse_cache import DateParseCache
from datepicker.formatting.parsers import (
    CommonFormatsDateParser,
    FormatBasedDateParser,
    ISODateParser,
)
from datepicker.formatting.tokens import (
    MONTH_NAMES,
    TOKEN_RE,
    WEEKDAY_NAMES,
    locale_pattern,
    name_table,
)
from datepicker.models.dates import to_calendar_date

logger = logging.getLogger(__name__)


class DateFormatter:
    """Formats and parses calendar dates.

    Patterns use ``yyyy yy MMMM MMM MM M dd d EEEE EEE E`` tokens; text in
    single quotes is copied literally. The special pattern ``"locale"``
    resolves to the locale's default display pattern.

    Parsing tries the registered strategies in order and raises
    :class:`ParseError` when none recognizes the text. Results are cached per
    instance.
    """

    def __init__(
        self,
        locale: str = DEFAULT_LOCALE,
        strategies: list[DateParserStrategy] | None = None,
        cache: DateParseCache | None = None,
    ):
        self.locale = locale
        self._strategies: list[DateParserStrategy] = strategies or [
            FormatBasedDateParser(),
            ISODateParser(),
            CommonFormatsDateParser(),
        ]
        self._cache = cache if cache is not None else DateParseCache()

    @property
    def cache(self) -> DateParseCache:
        return self._cache

    def register(self, strategy: DateParserStrategy, first: bool = False) -> None:
        """Add a parsing strategy, either ahead of or after the built-in ones."""
        if first:
            self._strategies.insert(0, strategy)
        else:
            self._strategies.append(strategy)

    def pattern_for(self, locale: str | None = None) -> str:
        return locale_pattern(locale or self.locale)

    def format(self, day: date, pattern: str, locale: str | None = None) -> str:
        day = to_calendar_date(day)
        if pattern == "locale":
            pattern = self.pattern_for(locale)

        def replace(match) -> str:
            token = match.group(0)
            if token.startswith("'"):
                return token[1:-1]
            if token == "yyyy":
                return f"{day.year:04d}"
            if token == "yy":
                return f"{day.year % 100:02d}"
            if token == "MMMM":
                return MONTH_NAMES["long"][day.month - 1]
            if token == "MMM":
                return MONTH_NAMES["short"][day.month - 1]
            if token == "MM":
                return f"{day.month:02d}"
            if token == "M":
                return str(day.month)
            if token == "dd":
                return f"{day.day:02d}"
            if token == "d":
                return str(day.day)
            weekday = (day.weekday() + 1) % 7
            length = {"EEEE": "long", "EEE": "short", "E": "narrow"}[token]
            return WEEKDAY_NAMES[length][weekday]

        return TOKEN_RE.sub(replace, pattern)

    def iso_key(self, day: date) -> str:
        """``yyyy-MM-dd`` key used for event and disabled-date lookups."""
        return to_calendar_date(day).isoformat()

    def parse(self, text: str, hint: str | None = None) -> date:
        """Parse ``text``; ``hint`` is an optional pattern tried first.

        Raises:
            ParseError: If no strategy recognizes the text.
        """
        if text is None or not str(text).strip():
            raise ParseError(str(text or ""), hint)
        text = str(text).strip()
        if hint == "locale":
            hint = self.pattern_for()

        cached = self._cache.get(text, hint)
        if cached is not None:
            return cached

        for strategy in self._strategies:
            if not strategy.can_parse(hint):
                continue
            result = strategy.parse(text, hint)
            if result is not None:
                self._cache.set(text, hint, result)
                return result

        if hint:
            # A hint that does not match still lets the generic strategies try
            for strategy in self._strategies:
                if strategy.can_parse(None):
                    result = strategy.parse(text, None)
                    if result is not None:
                        self._cache.set(text, hint, result)
                        return result

        logger.debug(f"No parser recognized {text!r} (hint={hint!r})")
        raise ParseError(text, hint)

    def month_name(self, index: int, length: str = "long", locale: str | None = None) -> str:
        if not 0 <= index <= 11:
            raise ValueError(f"month index must be 0-11, got {index}")
        return name_table(MONTH_NAMES, length)[index]

    def month_names(self, length: str = "long", locale: str | None = None) -> list[str]:
        return list(name_table(MONTH_NAMES, length))

    def weekday_name(self, index: int, length: str = "short", locale: str | None = None) -> str:
        if not 0 <= index <= 6:
            raise ValueError(f"weekday index must be 0-6, got {index}")
        return name_table(WEEKDAY_NAMES, length)[index]
