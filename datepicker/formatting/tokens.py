"""Date pattern tokens and name tables."""

import calendar
import re

# Longest tokens first so "MMMM" wins over "MM"; quoted text is literal
TOKEN_RE = re.compile(r"'[^']*'|yyyy|yy|MMMM|MMM|MM|M|dd|d|EEEE|EEE|E")

# calendar.month_name is 1-based; calendar.day_name starts at Monday
MONTH_NAMES = {
    "long": [calendar.month_name[i] for i in range(1, 13)],
    "short": [calendar.month_abbr[i] for i in range(1, 13)],
}
MONTH_NAMES["narrow"] = [name[0] for name in MONTH_NAMES["long"]]

WEEKDAY_NAMES = {
    "long": [calendar.day_name[(i - 1) % 7] for i in range(7)],
    "short": [calendar.day_abbr[(i - 1) % 7] for i in range(7)],
}
WEEKDAY_NAMES["narrow"] = [name[0] for name in WEEKDAY_NAMES["long"]]

# Default display pattern per locale tag, then per language
LOCALE_PATTERNS = {
    "en-US": "MM/dd/yyyy",
    "en": "dd/MM/yyyy",
    "de": "dd.MM.yyyy",
    "fr": "dd/MM/yyyy",
    "es": "dd/MM/yyyy",
    "it": "dd/MM/yyyy",
    "nl": "dd-MM-yyyy",
    "ja": "yyyy/MM/dd",
    "zh": "yyyy/MM/dd",
}
FALLBACK_PATTERN = "yyyy-MM-dd"


def locale_pattern(locale: str | None) -> str:
    """Default display pattern for a locale tag such as ``en-US`` or ``de-CH``."""
    if not locale:
        return FALLBACK_PATTERN
    tag = locale.replace("_", "-")
    if tag in LOCALE_PATTERNS:
        return LOCALE_PATTERNS[tag]
    return LOCALE_PATTERNS.get(tag.split("-")[0].lower(), FALLBACK_PATTERN)


def name_table(table: dict[str, list[str]], length: str) -> list[str]:
    if length not in table:
        raise ValueError(f"Unknown name length {length!r}; use long, short or narrow")
    return table[length]
