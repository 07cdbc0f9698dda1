"""Date parsing strategies, tried in order by the formatter."""

import logging
import re
from datetime import date

from datepicker.formatting.tokens import MONTH_NAMES, TOKEN_RE, WEEKDAY_NAMES

logger = logging.getLogger(__name__)

_MONTH_LOOKUP = {
    name.lower(): i + 1
    for length in ("long", "short")
    for i, name in enumerate(MONTH_NAMES[length])
}


def _make_date(year: int, month: int, day: int) -> date | None:
    try:
        return date(year, month, day)
    except ValueError:
        return None


def _expand_year(year_str: str) -> int:
    """Two-digit years land in the current century."""
    year = int(year_str)
    if len(year_str) <= 2:
        century = (date.today().year // 100) * 100
        year += century
    return year


class FormatBasedDateParser:
    """Parses text that follows an explicit pattern hint such as ``dd/MM/yyyy``."""

    def can_parse(self, hint: str | None) -> bool:
        return bool(hint)

    def parse(self, text: str, hint: str | None) -> date | None:
        regex, fields = self._compile(hint or "")
        match = regex.fullmatch(text.strip())
        if not match:
            return None

        values = dict(zip(fields, match.groups()))
        if "year" not in values or "month" not in values or "day" not in values:
            logger.debug(f"Pattern {hint!r} lacks year, month or day")
            return None

        month_raw = values["month"]
        if month_raw.isdigit():
            month = int(month_raw)
        else:
            month = _MONTH_LOOKUP.get(month_raw.lower(), 0)
        return _make_date(_expand_year(values["year"]), month, int(values["day"]))

    def _compile(self, pattern: str) -> tuple[re.Pattern, list[str]]:
        fields: list[str] = []
        parts: list[str] = []
        pos = 0
        for match in TOKEN_RE.finditer(pattern):
            parts.append(re.escape(pattern[pos : match.start()]))
            token = match.group(0)
            pos = match.end()
            if token.startswith("'"):
                parts.append(re.escape(token[1:-1]))
            elif token == "yyyy":
                fields.append("year")
                parts.append(r"(\d{4})")
            elif token == "yy":
                fields.append("year")
                parts.append(r"(\d{2})")
            elif token in ("MMMM", "MMM"):
                names = MONTH_NAMES["long" if token == "MMMM" else "short"]
                fields.append("month")
                parts.append("(" + "|".join(re.escape(n) for n in names) + ")")
            elif token in ("MM", "dd"):
                fields.append("month" if token == "MM" else "day")
                parts.append(r"(\d{2})")
            elif token in ("M", "d"):
                fields.append("month" if token == "M" else "day")
                parts.append(r"(\d{1,2})")
            else:
                # Weekday names are matched but not used
                length = {"EEEE": "long", "EEE": "short", "E": "narrow"}[token]
                names = WEEKDAY_NAMES[length]
                parts.append("(?:" + "|".join(re.escape(n) for n in names) + ")")
        parts.append(re.escape(pattern[pos:]))
        return re.compile("".join(parts), re.IGNORECASE), fields


class ISODateParser:
    """Parses ``yyyy-MM-dd`` (optionally followed by a time part)."""

    _ISO_RE = re.compile(r"(\d{4})-(\d{1,2})-(\d{1,2})(?:[T ].*)?")

    def can_parse(self, hint: str | None) -> bool:
        return not hint

    def parse(self, text: str, hint: str | None) -> date | None:
        match = self._ISO_RE.fullmatch(text.strip())
        if not match:
            return None
        year, month, day = (int(g) for g in match.groups())
        return _make_date(year, month, day)


class CommonFormatsDateParser:
    """Fallback for day-first numeric dates and written month names.

    ``15/04/2025`` and ``15.04.2025`` are read day-first; when that is not a
    valid date the month-first reading (``04/15/2025``) is tried. Inputs made
    only of one- or two-digit parts (``04-05-25``) are ambiguous and rejected.
    """

    _AMBIGUOUS_RE = re.compile(r"\d{1,2}[-/.]\d{1,2}[-/.]\d{1,2}")
    _NUMERIC_RE = re.compile(r"(\d{1,2})([-/.])(\d{1,2})\2(\d{4}|\d{2})")
    _MONTH_FIRST_RE = re.compile(r"([A-Za-z]+)\.?\s+(\d{1,2})(?:st|nd|rd|th)?,?\s+(\d{4})")
    _DAY_FIRST_RE = re.compile(r"(\d{1,2})(?:st|nd|rd|th)?\s+([A-Za-z]+)\.?,?\s+(\d{4})")

    def can_parse(self, hint: str | None) -> bool:
        return not hint

    def parse(self, text: str, hint: str | None) -> date | None:
        text = text.strip()
        if self._AMBIGUOUS_RE.fullmatch(text):
            return None

        match = self._NUMERIC_RE.fullmatch(text)
        if match:
            first, _sep, second, year_str = match.groups()
            year = _expand_year(year_str)
            return _make_date(year, int(second), int(first)) or _make_date(
                year, int(first), int(second)
            )

        match = self._MONTH_FIRST_RE.fullmatch(text)
        if match:
            month = _MONTH_LOOKUP.get(match.group(1).lower())
            if month:
                return _make_date(int(match.group(3)), month, int(match.group(2)))

        match = self._DAY_FIRST_RE.fullmatch(text)
        if match:
            month = _MONTH_LOOKUP.get(match.group(2).lower())
            if month:
                return _make_date(int(match.group(3)), month, int(match.group(1)))

        return None
