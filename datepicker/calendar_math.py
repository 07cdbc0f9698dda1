"""Pure calendar computations: month grids, week boundaries, ranges and policy checks.

Nothing here holds state. Month indices are 0-11 and weekday indices are
0 = Sunday ... 6 = Saturday, matching the rest of the engine.
"""

import calendar
from datetime import MAXYEAR, MINYEAR, date, timedelta
from typing import TYPE_CHECKING

from datepicker.constants import GRID_CELLS, GRID_COLUMNS, YEAR_PAGE_SIZE
from datepicker.models.dates import to_calendar_date
from datepicker.models.policy import DisabledPolicy

if TYPE_CHECKING:
    from datepicker.formatting.base import LocaleFormatter


def _check_weekday(first_day_of_week: int) -> None:
    if not 0 <= first_day_of_week <= 6:
        raise ValueError(f"first_day_of_week must be 0-6, got {first_day_of_week}")


def _check_month(month: int) -> None:
    if not 0 <= month <= 11:
        raise ValueError(f"month index must be 0-11, got {month}")


def weekday_index(day: date) -> int:
    """Weekday of ``day`` with 0 = Sunday."""
    return (day.weekday() + 1) % 7


def month_index(day: date) -> int:
    """Zero-based month of ``day``."""
    return day.month - 1


def days_in_month(year: int, month: int) -> int:
    """Number of days in the zero-based ``month`` of ``year``."""
    _check_month(month)
    return calendar.monthrange(year, month + 1)[1]


def first_of_month(day: date) -> date:
    return day.replace(day=1)


def last_of_month(day: date) -> date:
    return day.replace(day=calendar.monthrange(day.year, day.month)[1])


def is_same_day(a: date | None, b: date | None) -> bool:
    """Compare calendar days; False when either side is missing."""
    if a is None or b is None:
        return False
    return to_calendar_date(a) == to_calendar_date(b)


def add_days(day: date, n: int) -> date:
    """Shift by ``n`` days, stopping at ``date.min`` / ``date.max``."""
    if n > (date.max - day).days:
        return date.max
    if -n > (day - date.min).days:
        return date.min
    return day + timedelta(days=n)


def add_months(day: date, n: int) -> date:
    """Shift by ``n`` months, clamping the day to the target month's length.

    Jan 31 + 1 month is Feb 28 (or Feb 29 in a leap year).
    """
    total = day.year * 12 + (day.month - 1) + n
    year, month0 = divmod(total, 12)
    if year < MINYEAR:
        return date.min
    if year > MAXYEAR:
        return date.max
    last = calendar.monthrange(year, month0 + 1)[1]
    return date(year, month0 + 1, min(day.day, last))


def add_years(day: date, n: int) -> date:
    """Shift by ``n`` years; Feb 29 clamps to Feb 28 in a common year."""
    return add_months(day, 12 * n)


def first_of_week(day: date, first_day_of_week: int = 0) -> date:
    """Roll ``day`` back to the first day of its week."""
    _check_weekday(first_day_of_week)
    diff = (weekday_index(day) - first_day_of_week) % 7
    return add_days(day, -diff)


def last_of_week(day: date, first_day_of_week: int = 0) -> date:
    """Roll ``day`` forward to the last day of its week."""
    _check_weekday(first_day_of_week)
    diff = (weekday_index(day) - first_day_of_week) % 7
    return add_days(day, 6 - diff)


def month_grid(year: int, month: int, first_day_of_week: int = 0) -> list[list[date]]:
    """Return the 6x7 matrix of dates shown for a month.

    The first cell is the configured first weekday on or before the 1st;
    every following cell is one day later. Always 42 cells, whatever the
    month length.

    Args:
        year: Calendar year.
        month: Zero-based month (0 = January).
        first_day_of_week: 0 = Sunday ... 6 = Saturday.

    Returns:
        Six rows of seven consecutive dates.

    Raises:
        OverflowError: When the grid would reach past ``date.min`` or
            ``date.max`` (January of year 1, December of year 9999).
    """
    _check_month(month)
    _check_weekday(first_day_of_week)
    first = date(year, month + 1, 1)
    start = first - timedelta(days=(weekday_index(first) - first_day_of_week) % 7)
    cells = [start + timedelta(days=i) for i in range(GRID_CELLS)]
    return [cells[i : i + GRID_COLUMNS] for i in range(0, GRID_CELLS, GRID_COLUMNS)]


def weekday_labels(
    first_day_of_week: int,
    locale: str | None = None,
    formatter: "LocaleFormatter | None" = None,
    length: str = "short",
) -> list[str]:
    """Seven weekday labels starting at ``first_day_of_week``."""
    _check_weekday(first_day_of_week)
    if formatter is None:
        from datepicker.formatting import DateFormatter

        formatter = DateFormatter()
    return [
        formatter.weekday_name((first_day_of_week + i) % 7, length, locale)
        for i in range(7)
    ]


def date_range(a: date, b: date) -> list[date]:
    """Every day from the earlier to the later operand, inclusive."""
    a, b = to_calendar_date(a), to_calendar_date(b)
    if a > b:
        a, b = b, a
    return [a + timedelta(days=i) for i in range((b - a).days + 1)]


def is_disabled(day: date, policy: DisabledPolicy) -> bool:
    """True when ``day`` cannot be selected under ``policy``."""
    day = to_calendar_date(day)
    if policy.min_date is not None and day < policy.min_date:
        return True
    if policy.max_date is not None and day > policy.max_date:
        return True
    if weekday_index(day) in policy.disabled_weekdays:
        return True
    if month_index(day) in policy.disabled_months:
        return True
    return day in policy.disabled_dates


def available_dates(a: date, b: date, policy: DisabledPolicy) -> list[date]:
    """Enabled days of the inclusive range between ``a`` and ``b``."""
    return [d for d in date_range(a, b) if not is_disabled(d, policy)]


def is_month_disabled(year: int, month: int, policy: DisabledPolicy) -> bool:
    """True when no day of the month can be selected."""
    _check_month(month)
    if month in policy.disabled_months:
        return True
    first = date(year, month + 1, 1)
    return not available_dates(first, last_of_month(first), policy)


def is_year_disabled(year: int, policy: DisabledPolicy) -> bool:
    """True when the whole year lies outside the bounds."""
    if policy.min_date is not None and year < policy.min_date.year:
        return True
    if policy.max_date is not None and year > policy.max_date.year:
        return True
    return len(policy.disabled_months) == 12


def year_page_start(year: int) -> int:
    """First year of the 12-year page containing ``year``."""
    return (year // YEAR_PAGE_SIZE) * YEAR_PAGE_SIZE


def year_page(start: int) -> list[int]:
    """The years of the page beginning at ``start``."""
    return list(range(start, start + YEAR_PAGE_SIZE))
