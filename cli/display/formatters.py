"""Pure formatting functions for display output."""

from datetime import date
from typing import Any

from datepicker.formatting import LocaleFormatter


def format_date(day: date | None) -> str:
    """Format an optional date as ``yyyy-MM-dd``.

    Returns:
        ISO date, or "-" if day is None.
    """
    if day is None:
        return "-"
    return day.isoformat()


def format_weekdays(indices: list[int], formatter: LocaleFormatter) -> str:
    """Format weekday indices (0 = Sunday) as short names, e.g. "Sun, Sat"."""
    if not indices:
        return "-"
    return ", ".join(formatter.weekday_name(i, "short") for i in sorted(indices))


def format_months(indices: list[int], formatter: LocaleFormatter) -> str:
    """Format zero-based month indices as short names, e.g. "Jan, Dec"."""
    if not indices:
        return "-"
    return ", ".join(formatter.month_name(i, "short") for i in sorted(indices))


def format_detail(detail: dict[str, Any]) -> str:
    """Render an occurrence payload as ``key=value`` pairs."""
    if not detail:
        return "-"
    parts = []
    for key, value in detail.items():
        if isinstance(value, date):
            value = value.isoformat()
        parts.append(f"{key}={value}")
    return " ".join(parts)
