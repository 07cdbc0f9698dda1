"""Mutable holder of the date availability policy."""

import logging
from collections.abc import Callable, Iterable
from datetime import date

from datepicker import calendar_math
from datepicker.formatting.tokens import MONTH_NAMES, WEEKDAY_NAMES
from datepicker.models.dates import to_calendar_date
from datepicker.models.policy import DisabledPolicy

logger = logging.getLogger(__name__)


class DisabledDateRegistry:
    """Stores and mutates a :class:`DisabledPolicy`.

    Additions are idempotent and removals of absent values are no-ops.
    Weekday (0-6) and month (0-11) indices outside their range are ignored
    rather than raised. Every change callback (``on_change`` plus any added
    with :meth:`add_change_callback`) is called once, in registration order,
    after each mutation that actually changed the policy.
    """

    def __init__(
        self,
        policy: DisabledPolicy | None = None,
        on_change: Callable[[], None] | None = None,
    ):
        self._policy = policy if policy is not None else DisabledPolicy()
        self._callbacks: list[Callable[[], None]] = []
        if on_change is not None:
            self._callbacks.append(on_change)

    @property
    def policy(self) -> DisabledPolicy:
        """The live policy object (read it, mutate through the registry)."""
        return self._policy

    def add_change_callback(self, callback: Callable[[], None]) -> None:
        if callback not in self._callbacks:
            self._callbacks.append(callback)

    def remove_change_callback(self, callback: Callable[[], None]) -> None:
        if callback in self._callbacks:
            self._callbacks.remove(callback)

    def _changed(self) -> None:
        for callback in list(self._callbacks):
            callback()

    # Queries

    def is_disabled(self, day: date) -> bool:
        return calendar_math.is_disabled(day, self._policy)

    def reason(self, day: date) -> str | None:
        """Stored reason for an explicitly disabled date, else None."""
        return self._policy.disabled_dates.get(to_calendar_date(day))

    def describe(self, day: date) -> str | None:
        """Explain why ``day`` is disabled, or None if it is selectable."""
        day = to_calendar_date(day)
        policy = self._policy
        if policy.min_date is not None and day < policy.min_date:
            return "Before minimum allowed date"
        if policy.max_date is not None and day > policy.max_date:
            return "After maximum allowed date"
        weekday = calendar_math.weekday_index(day)
        if weekday in policy.disabled_weekdays:
            return f"Disabled weekday ({WEEKDAY_NAMES['long'][weekday]})"
        month = calendar_math.month_index(day)
        if month in policy.disabled_months:
            return f"Disabled month ({MONTH_NAMES['long'][month]})"
        if day in policy.disabled_dates:
            return policy.disabled_dates[day] or "Unavailable"
        return None

    # Specific dates

    def add_disabled_date(self, day: date, reason: str | None = None) -> None:
        day = to_calendar_date(day)
        if day in self._policy.disabled_dates:
            return
        self._policy.disabled_dates[day] = reason
        self._changed()

    def add_disabled_dates(self, days: Iterable[date], reason: str | None = None) -> None:
        changed = False
        for day in days:
            day = to_calendar_date(day)
            if day not in self._policy.disabled_dates:
                self._policy.disabled_dates[day] = reason
                changed = True
        if changed:
            self._changed()

    def remove_disabled_date(self, day: date) -> None:
        day = to_calendar_date(day)
        if day in self._policy.disabled_dates:
            del self._policy.disabled_dates[day]
            self._changed()

    def clear_disabled_dates(self) -> None:
        if self._policy.disabled_dates:
            self._policy.disabled_dates.clear()
            self._changed()

    # Weekdays

    def add_disabled_weekday(self, weekday: int) -> None:
        self.add_disabled_weekdays([weekday])

    def add_disabled_weekdays(self, weekdays: Iterable[int]) -> None:
        changed = self._add_indices(self._policy.disabled_weekdays, weekdays, 6, "weekday")
        if changed:
            self._changed()

    def remove_disabled_weekday(self, weekday: int) -> None:
        if weekday in self._policy.disabled_weekdays:
            self._policy.disabled_weekdays.discard(weekday)
            self._changed()

    def clear_disabled_weekdays(self) -> None:
        if self._policy.disabled_weekdays:
            self._policy.disabled_weekdays.clear()
            self._changed()

    def is_weekday_disabled(self, weekday: int) -> bool:
        return weekday in self._policy.disabled_weekdays

    @property
    def disabled_weekdays(self) -> list[int]:
        return sorted(self._policy.disabled_weekdays)

    # Months

    def add_disabled_month(self, month: int) -> None:
        self.add_disabled_months([month])

    def add_disabled_months(self, months: Iterable[int]) -> None:
        changed = self._add_indices(self._policy.disabled_months, months, 11, "month")
        if changed:
            self._changed()

    def remove_disabled_month(self, month: int) -> None:
        if month in self._policy.disabled_months:
            self._policy.disabled_months.discard(month)
            self._changed()

    def clear_disabled_months(self) -> None:
        if self._policy.disabled_months:
            self._policy.disabled_months.clear()
            self._changed()

    def is_month_disabled(self, month: int) -> bool:
        return month in self._policy.disabled_months

    @property
    def disabled_months(self) -> list[int]:
        return sorted(self._policy.disabled_months)

    # Bounds

    @property
    def min_date(self) -> date | None:
        return self._policy.min_date

    @property
    def max_date(self) -> date | None:
        return self._policy.max_date

    def set_min_date(self, day: date | None) -> None:
        day = to_calendar_date(day) if day is not None else None
        if day != self._policy.min_date:
            self._policy.min_date = day
            self._changed()

    def set_max_date(self, day: date | None) -> None:
        day = to_calendar_date(day) if day is not None else None
        if day != self._policy.max_date:
            self._policy.max_date = day
            self._changed()

    def clear_bounds(self) -> None:
        if self._policy.min_date is not None or self._policy.max_date is not None:
            self._policy.min_date = None
            self._policy.max_date = None
            self._changed()

    @staticmethod
    def _add_indices(target: set[int], values: Iterable[int], upper: int, kind: str) -> bool:
        changed = False
        for value in values:
            if not isinstance(value, int) or not 0 <= value <= upper:
                logger.debug(f"Ignoring out-of-range {kind} index {value!r}")
                continue
            if value not in target:
                target.add(value)
                changed = True
        return changed
