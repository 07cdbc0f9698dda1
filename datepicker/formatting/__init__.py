"""Locale formatter collaborator: formatting, parsing and name lookup."""

from datepicker.formatting.base import DateParserStrategy, LocaleFormatter
from datepicker.formatting.parse_cache import DateParseCache
from datepicker.formatting.parsers import (
    CommonFormatsDateParser,
    FormatBasedDateParser,
    ISODateParser,
)
from datepicker.formatting.service import DateFormatter

__all__ = [
    "CommonFormatsDateParser",
    "DateFormatter",
    "DateParseCache",
    "DateParserStrategy",
    "FormatBasedDateParser",
    "ISODateParser",
    "LocaleFormatter",
]
