"""Selection and view-mode state machine for the date picker."""

import logging
from datetime import MAXYEAR, MINYEAR, date
from typing import Any

from datepicker import calendar_math
from datepicker.constants import YEAR_PAGE_SIZE
from datepicker.disabled_registry import DisabledDateRegistry
from datepicker.models.dates import to_calendar_date
from datepicker.models.state import SelectionMode, SelectionState, ViewMode, ViewState
from datepicker.notifications import (
    Listener,
    ListenerRegistry,
    LoggingSink,
    NotificationSink,
    PickerEvent,
)

logger = logging.getLogger(__name__)

# Year pages holding at least one representable year
_FIRST_PAGE = calendar_math.year_page_start(MINYEAR)
_LAST_PAGE = calendar_math.year_page_start(MAXYEAR)


class DatePickerStateMachine:
    """Owns the selection, the current view mode, the anchor and focused dates.

    View modes move days -> months -> years through explicit triggers
    (:meth:`show_month_selector`, :meth:`show_year_selector`,
    :meth:`choose_month`, :meth:`choose_year`, :meth:`escape`). A trigger that
    does not apply to the current mode is ignored. Outside the days view the
    focused date always lies in the shown year (months) or page (years).

    Every mutation commits first, then calls each subscriber once in
    registration order, then reports named occurrences to the sink.
    Selecting a disabled date is silently ignored.
    """

    def __init__(
        self,
        registry: DisabledDateRegistry | None = None,
        sink: NotificationSink | None = None,
        mode: SelectionMode = SelectionMode.SINGLE,
        view_date: date | None = None,
        today: date | None = None,
    ):
        self._registry = registry if registry is not None else DisabledDateRegistry()
        self._sink = sink if sink is not None else LoggingSink()
        self._listeners = ListenerRegistry()
        self._today = to_calendar_date(today) if today is not None else None

        anchor = to_calendar_date(view_date) if view_date is not None else self.today
        self._selection = SelectionState(mode=SelectionMode(mode))
        self._view = ViewState(
            view_date=anchor,
            focused_date=anchor,
            year_range_start=calendar_math.year_page_start(anchor.year),
        )

        # Policy edits change what subscribers render
        self._registry.add_change_callback(self._policy_changed)

    # Read access

    @property
    def today(self) -> date:
        return self._today if self._today is not None else date.today()

    @property
    def registry(self) -> DisabledDateRegistry:
        return self._registry

    @property
    def selection(self) -> SelectionState:
        """Snapshot of the selection state."""
        return self._selection.model_copy()

    @property
    def view(self) -> ViewState:
        """Snapshot of the view state."""
        return self._view.model_copy()

    @property
    def mode(self) -> SelectionMode:
        return self._selection.mode

    @property
    def selected_date(self) -> date | None:
        return self._selection.selected_date

    @property
    def range_start(self) -> date | None:
        return self._selection.range_start

    @property
    def range_end(self) -> date | None:
        return self._selection.range_end

    @property
    def range_in_progress(self) -> bool:
        return self._selection.range_in_progress

    @property
    def current_view(self) -> ViewMode:
        return self._view.current_view

    @property
    def view_date(self) -> date:
        return self._view.view_date

    @property
    def focused_date(self) -> date:
        return self._view.focused_date

    @property
    def year_range_start(self) -> int:
        return self._view.year_range_start

    def is_disabled(self, day: date) -> bool:
        return self._registry.is_disabled(day)

    def is_selected(self, day: date) -> bool:
        if self._selection.mode == SelectionMode.SINGLE:
            return calendar_math.is_same_day(day, self._selection.selected_date)
        return calendar_math.is_same_day(
            day, self._selection.range_start
        ) or calendar_math.is_same_day(day, self._selection.range_end)

    def is_in_range(self, day: date) -> bool:
        """True for enabled days inside a completed range (endpoints included)."""
        sel = self._selection
        if sel.mode != SelectionMode.RANGE or not sel.has_range:
            return False
        day = to_calendar_date(day)
        if self.is_disabled(day):
            return False
        return sel.range_start <= day <= sel.range_end

    # Subscription

    def subscribe(self, listener: Listener) -> None:
        self._listeners.subscribe(listener)

    def unsubscribe(self, listener: Listener) -> None:
        self._listeners.unsubscribe(listener)

    def _commit(self, *occurrences: tuple[PickerEvent, dict[str, Any]]) -> None:
        self._listeners.notify(self)
        for event, detail in occurrences:
            self._sink.emit(event, detail)

    def _policy_changed(self) -> None:
        self._commit()

    def _ignore(self, trigger: str) -> None:
        logger.warning(f"Ignoring {trigger} in {self._view.current_view.value} view")

    def _view_mode_event(self) -> tuple[PickerEvent, dict[str, Any]]:
        return PickerEvent.VIEW_MODE_CHANGE, {"view": self._view.current_view.value}

    # View-mode transitions

    def show_month_selector(self) -> None:
        """days -> months; the anchor date is left alone."""
        if self._view.current_view != ViewMode.DAYS:
            self._ignore("month selector request")
            return
        self._view.current_view = ViewMode.MONTHS
        self._view.focused_date = self._view.view_date
        logger.debug("View mode days -> months")
        self._commit(self._view_mode_event())

    def show_year_selector(self) -> None:
        """days/months -> years, paging to the 12-year window holding the anchor year."""
        previous = self._view.current_view
        if previous not in (ViewMode.DAYS, ViewMode.MONTHS):
            self._ignore("year selector request")
            return
        self._view.current_view = ViewMode.YEARS
        self._view.year_range_start = calendar_math.year_page_start(self._view.view_date.year)
        self._view.focused_date = self._view.view_date
        logger.debug(
            f"View mode {previous.value} -> years "
            f"({self._view.year_range_start}-{self._view.year_range_end})"
        )
        self._commit(self._view_mode_event())

    def choose_month(self, month: int) -> None:
        """months -> days, anchoring on the zero-based ``month`` of the anchor year."""
        if not 0 <= month <= 11:
            raise ValueError(f"month index must be 0-11, got {month}")
        if self._view.current_view != ViewMode.MONTHS:
            self._ignore("month choice")
            return
        anchor = self._view.view_date
        day = min(anchor.day, calendar_math.days_in_month(anchor.year, month))
        self._view.view_date = date(anchor.year, month + 1, day)
        self._view.focused_date = self._view.view_date
        self._view.current_view = ViewMode.DAYS
        self._commit(
            (PickerEvent.MONTH_CHANGE, {"year": anchor.year, "month": month}),
            self._view_mode_event(),
        )

    def choose_year(self, year: int) -> None:
        """years -> months, moving the anchor to ``year``."""
        if self._view.current_view != ViewMode.YEARS:
            self._ignore("year choice")
            return
        anchor = self._view.view_date
        self._view.view_date = calendar_math.add_years(anchor, year - anchor.year)
        self._view.focused_date = self._view.view_date
        self._view.current_view = ViewMode.MONTHS
        self._commit(
            (PickerEvent.YEAR_CHANGE, {"year": year}),
            self._view_mode_event(),
        )

    def escape(self) -> bool:
        """Step back one view level.

        Returns:
            True when already in the days view, meaning the host should close
            the picker; False when the view mode changed instead.
        """
        current = self._view.current_view
        if current == ViewMode.DAYS:
            return True
        self._view.current_view = ViewMode.DAYS if current == ViewMode.MONTHS else ViewMode.MONTHS
        self._commit(self._view_mode_event())
        return False

    def reset_view(self) -> None:
        """Return to the days view from any mode."""
        if self._view.current_view == ViewMode.DAYS:
            return
        self._view.current_view = ViewMode.DAYS
        self._commit(self._view_mode_event())

    # Period navigation

    def navigate_next(self) -> None:
        self._navigate(1)

    def navigate_previous(self) -> None:
        self._navigate(-1)

    def _navigate(self, step: int) -> None:
        view = self._view
        if view.current_view == ViewMode.DAYS:
            view.view_date = calendar_math.add_months(view.view_date, step)
            occurrence = (
                PickerEvent.MONTH_CHANGE,
                {"year": view.view_date.year, "month": view.view_date.month - 1},
            )
        elif view.current_view == ViewMode.MONTHS:
            view.view_date = calendar_math.add_years(view.view_date, step)
            view.focused_date = calendar_math.add_years(
                view.focused_date, view.view_date.year - view.focused_date.year
            )
            occurrence = (PickerEvent.YEAR_CHANGE, {"year": view.view_date.year})
        else:
            start = view.year_range_start + step * YEAR_PAGE_SIZE
            if not _FIRST_PAGE <= start <= _LAST_PAGE:
                logger.debug(f"No year page starting at {start}")
                return
            view.year_range_start = start
            view.focused_date = calendar_math.add_years(
                view.focused_date, step * YEAR_PAGE_SIZE
            )
            occurrence = (
                PickerEvent.YEAR_CHANGE,
                {
                    "year": view.view_date.year,
                    "range_start": view.year_range_start,
                    "range_end": view.year_range_end,
                },
            )
        logger.debug(f"Navigated {step:+d} in {view.current_view.value} view")
        self._commit(occurrence)

    # Selection

    def select(self, day: date) -> None:
        """Select ``day`` according to the current selection mode."""
        if self._selection.mode == SelectionMode.SINGLE:
            self.select_single(day)
        else:
            self.select_range(day)

    def select_single(self, day: date) -> None:
        day = to_calendar_date(day)
        if self.is_disabled(day):
            logger.debug(f"Ignoring selection of disabled date {day}")
            return
        self._selection.selected_date = day
        self._commit((PickerEvent.DATE_CHANGE, {"date": day, "source": "selection"}))

    def select_range(self, day: date) -> None:
        """First call starts a range, second call completes it (swapping if reversed)."""
        day = to_calendar_date(day)
        if self.is_disabled(day):
            logger.debug(f"Ignoring range endpoint on disabled date {day}")
            return
        sel = self._selection
        if not sel.range_in_progress or sel.range_start is None:
            sel.range_start = day
            sel.range_end = None
            sel.range_in_progress = True
            self._commit((PickerEvent.RANGE_START, {"start": day}))
            return

        if day < sel.range_start:
            sel.range_start, sel.range_end = day, sel.range_start
        else:
            sel.range_end = day
        sel.range_in_progress = False
        self._commit(
            (PickerEvent.RANGE_COMPLETE, {"start": sel.range_start, "end": sel.range_end})
        )

    def reset_range(self) -> None:
        sel = self._selection
        sel.range_start = None
        sel.range_end = None
        sel.range_in_progress = False
        self._commit((PickerEvent.RANGE_CLEAR, {}))

    def clear(self) -> None:
        """Clear the selection of the current mode; the view mode is untouched."""
        sel = self._selection
        if sel.mode == SelectionMode.SINGLE:
            sel.selected_date = None
            self._commit((PickerEvent.DATE_CLEAR, {}))
        else:
            self.reset_range()

    def set_selection_mode(self, mode: SelectionMode | str) -> None:
        """Switch between single and range selection, dropping the other mode's selection."""
        mode = SelectionMode(mode)
        sel = self._selection
        if sel.mode == mode:
            return
        sel.mode = mode
        if mode == SelectionMode.SINGLE:
            sel.range_start = None
            sel.range_end = None
            sel.range_in_progress = False
        else:
            sel.selected_date = None
        self._commit((PickerEvent.MODE_CHANGE, {"mode": mode.value}))

    def set_date(self, day: date | None) -> None:
        """Programmatic single-date value; None clears it."""
        if day is None:
            self._selection.selected_date = None
            self._commit((PickerEvent.DATE_CLEAR, {}))
            return
        day = to_calendar_date(day)
        self._selection.selected_date = day
        self._commit((PickerEvent.DATE_CHANGE, {"date": day, "source": "api"}))

    def set_range(self, start: date | None, end: date | None) -> None:
        """Programmatic range value.

        Both endpoints complete the range (reversed input is swapped); only a
        start leaves the range in progress; neither clears it.
        """
        sel = self._selection
        start = to_calendar_date(start) if start is not None else None
        end = to_calendar_date(end) if end is not None else None
        if start is None and end is not None:
            start, end = end, None

        if start is not None and end is not None:
            if end < start:
                start, end = end, start
            sel.range_start, sel.range_end, sel.range_in_progress = start, end, False
            self._commit((PickerEvent.RANGE_COMPLETE, {"start": start, "end": end}))
        elif start is not None:
            sel.range_start, sel.range_end, sel.range_in_progress = start, None, True
            self._commit((PickerEvent.RANGE_START, {"start": start}))
        else:
            self.reset_range()

    # Focus

    def focus(self, day: date) -> None:
        """Move the keyboard cursor; the shown month, year or year page follows it."""
        day = to_calendar_date(day)
        view = self._view
        view.focused_date = day
        occurrences: list[tuple[PickerEvent, dict[str, Any]]] = []
        if view.current_view == ViewMode.DAYS:
            if (day.year, day.month) != (view.view_date.year, view.view_date.month):
                view.view_date = day
                occurrences.append(
                    (PickerEvent.MONTH_CHANGE, {"year": day.year, "month": day.month - 1})
                )
        elif view.current_view == ViewMode.MONTHS:
            if day.year != view.view_date.year:
                view.view_date = day
                occurrences.append((PickerEvent.YEAR_CHANGE, {"year": day.year}))
        elif not view.year_range_start <= day.year <= view.year_range_end:
            view.year_range_start = calendar_math.year_page_start(day.year)
            occurrences.append(
                (
                    PickerEvent.YEAR_CHANGE,
                    {
                        "year": view.view_date.year,
                        "range_start": view.year_range_start,
                        "range_end": view.year_range_end,
                    },
                )
            )
        occurrences.append((PickerEvent.FOCUS_DATE, {"date": day}))
        self._commit(*occurrences)

    def go_to_today(self) -> None:
        """Show and focus today, selecting it when it is enabled."""
        today = self.today
        self._view.current_view = ViewMode.DAYS
        self._view.view_date = today
        self._view.focused_date = today
        self._commit(
            (PickerEvent.MONTH_CHANGE, {"year": today.year, "month": today.month - 1}),
            (PickerEvent.FOCUS_DATE, {"date": today}),
        )
        if not self.is_disabled(today):
            self.select(today)
