"""Tests for date formatting and parsing."""

from datetime import date

import pytest

from datepicker.exceptions import ParseError
from datepicker.formatting import (
    CommonFormatsDateParser,
    DateFormatter,
    DateParseCache,
    FormatBasedDateParser,
    ISODateParser,
)

DAY = date(2025, 4, 5)


class TestFormat:
    @pytest.mark.parametrize(
        "pattern,expected",
        [
            ("yyyy-MM-dd", "2025-04-05"),
            ("dd/MM/yyyy", "05/04/2025"),
            ("d.M.yy", "5.4.25"),
            ("MMMM yyyy", "April 2025"),
            ("EEE, MMM d", "Sat, Apr 5"),
            ("EEEE", "Saturday"),
            ("'Day' d", "Day 5"),
        ],
    )
    def test_patterns(self, formatter, pattern, expected):
        assert formatter.format(DAY, pattern) == expected

    def test_locale_pattern(self):
        assert DateFormatter("en-US").format(DAY, "locale") == "04/05/2025"
        assert DateFormatter("de-DE").format(DAY, "locale") == "05.04.2025"
        assert DateFormatter("xx").format(DAY, "locale") == "2025-04-05"

    def test_iso_key(self, formatter):
        assert formatter.iso_key(DAY) == "2025-04-05"


class TestParse:
    def test_iso(self, formatter):
        assert formatter.parse("2025-04-05") == DAY
        assert formatter.parse("2025-04-05T10:30:00") == DAY

    def test_with_hint(self, formatter):
        assert formatter.parse("05/04/2025", "dd/MM/yyyy") == DAY
        assert formatter.parse("04/05/2025", "MM/dd/yyyy") == DAY

    def test_hint_mismatch_falls_back(self, formatter):
        assert formatter.parse("2025-04-05", "dd/MM/yyyy") == DAY

    def test_day_first_then_month_first(self, formatter):
        assert formatter.parse("15/04/2025") == date(2025, 4, 15)
        assert formatter.parse("04/15/2025") == date(2025, 4, 15)

    def test_month_names(self, formatter):
        assert formatter.parse("April 15, 2025") == date(2025, 4, 15)
        assert formatter.parse("15 Apr 2025") == date(2025, 4, 15)

    def test_ambiguous_two_digit_input_rejected(self, formatter):
        with pytest.raises(ParseError):
            formatter.parse("04-05-25")

    @pytest.mark.parametrize("text", ["", "   ", "garbage", "2025-02-30"])
    def test_unparseable(self, formatter, text):
        with pytest.raises(ParseError):
            formatter.parse(text)

    def test_parse_error_carries_text_and_hint(self, formatter):
        with pytest.raises(ParseError) as exc_info:
            formatter.parse("nope", "dd/MM/yyyy")
        assert exc_info.value.text == "nope"
        assert exc_info.value.hint == "dd/MM/yyyy"

    def test_results_are_cached_per_instance(self):
        cache = DateParseCache()
        formatter = DateFormatter(cache=cache)
        formatter.parse("2025-04-05")
        assert ("2025-04-05", None) in cache
        assert len(DateFormatter().cache) == 0

    def test_custom_strategy_first(self):
        class Tomorrow:
            def can_parse(self, hint):
                return True

            def parse(self, text, hint):
                return date(2030, 1, 1) if text == "someday" else None

        formatter = DateFormatter()
        formatter.register(Tomorrow(), first=True)
        assert formatter.parse("someday") == date(2030, 1, 1)
        assert formatter.parse("2025-04-05") == DAY


class TestStrategies:
    def test_format_based_needs_hint(self):
        parser = FormatBasedDateParser()
        assert not parser.can_parse(None)
        assert parser.parse("5 April 2025", "d MMMM yyyy") == DAY

    def test_iso_only_without_hint(self):
        parser = ISODateParser()
        assert parser.can_parse(None)
        assert parser.parse("05/04/2025", None) is None

    def test_common_formats_invalid_date(self):
        assert CommonFormatsDateParser().parse("31/02/2025", None) is None


class TestNames:
    def test_month_names(self, formatter):
        assert formatter.month_name(0) == "January"
        assert formatter.month_name(11, "short") == "Dec"
        assert len(formatter.month_names()) == 12

    def test_weekday_names(self, formatter):
        assert formatter.weekday_name(0) == "Sun"
        assert formatter.weekday_name(6, "long") == "Saturday"
        assert formatter.weekday_name(1, "narrow") == "M"

    def test_out_of_range(self, formatter):
        with pytest.raises(ValueError):
            formatter.month_name(12)
        with pytest.raises(ValueError):
            formatter.weekday_name(7)
