"""Calendar date alias and normalization helpers."""

from datetime import date, datetime

# Calendar dates are plain ``datetime.date`` values; time-of-day never matters.
CalendarDate = date


def to_calendar_date(value: date | datetime) -> date:
    """Truncate a datetime to its calendar day; dates pass through unchanged."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    raise TypeError(f"Expected a date, got {type(value).__name__}")


def optional_calendar_date(value):
    """Pydantic ``before`` hook: truncate datetimes, leave anything else alone."""
    if isinstance(value, datetime):
        return value.date()
    return value
