"""Date picker facade: wires the engine parts together for a rendering host."""

import logging
from collections.abc import Iterable, Mapping
from datetime import date

from datepicker import calendar_math
from datepicker.config import PickerConfig
from datepicker.constants import DEFAULT_DATE_FORMAT
from datepicker.disabled_registry import DisabledDateRegistry
from datepicker.event_store import EventStore
from datepicker.formatting import DateFormatter, LocaleFormatter
from datepicker.keyboard import find_nearest_enabled, map_key
from datepicker.models.cell import CalendarCell, MonthCell, YearCell
from datepicker.models.keys import KeyAction, KeyResult, Modifiers
from datepicker.models.options import CalendarOptions
from datepicker.models.policy import DisabledPolicy
from datepicker.models.state import SelectionMode, ViewMode
from datepicker.notifications import LoggingSink, NotificationSink, PickerEvent
from datepicker.state_machine import DatePickerStateMachine

logger = logging.getLogger(__name__)


class DatePicker:
    """One date picker instance as seen by the host that paints it.

    All collaborators are passed in; :meth:`from_config` builds a complete
    picker from a :class:`PickerConfig`.
    """

    def __init__(
        self,
        state: DatePickerStateMachine,
        events: EventStore,
        formatter: LocaleFormatter,
        sink: NotificationSink,
        options: CalendarOptions | None = None,
        date_format: str = DEFAULT_DATE_FORMAT,
    ):
        self.state = state
        self.events = events
        self.formatter = formatter
        self.options = options or CalendarOptions()
        self.date_format = date_format
        self._sink = sink
        self._is_open = False

    @classmethod
    def from_config(
        cls,
        config: PickerConfig,
        sink: NotificationSink | None = None,
        formatter: LocaleFormatter | None = None,
        today: date | None = None,
    ) -> "DatePicker":
        """Assemble registry, event store, state machine and facade from config."""
        sink = sink if sink is not None else LoggingSink()
        formatter = formatter if formatter is not None else DateFormatter(locale=config.locale)

        policy = DisabledPolicy(
            min_date=config.min_date,
            max_date=config.max_date,
            disabled_dates=dict(config.disabled_dates),
            disabled_weekdays=set(config.disabled_weekdays),
            disabled_months=set(config.disabled_months),
        )
        registry = DisabledDateRegistry(policy)
        state = DatePickerStateMachine(
            registry, sink=sink, mode=config.selection_mode, today=today
        )
        events = EventStore(formatter=formatter, sink=sink)
        if config.events:
            events.add_events(config.events)

        options = CalendarOptions(
            first_day_of_week=config.first_day_of_week, locale=config.locale
        )
        logger.debug(
            f"Created picker (mode={config.selection_mode.value}, "
            f"locale={config.locale}, first_day_of_week={config.first_day_of_week})"
        )
        return cls(state, events, formatter, sink, options, config.date_format)

    @property
    def registry(self) -> DisabledDateRegistry:
        return self.state.registry

    @property
    def is_open(self) -> bool:
        return self._is_open

    # Options

    def set_first_day_of_week(self, day: int) -> None:
        if not 0 <= day <= 6:
            logger.debug(f"Ignoring out-of-range first day of week {day!r}")
            return
        self.options.first_day_of_week = day

    def set_locale(self, locale: str) -> None:
        self.options.locale = locale

    # Open / close

    def open(self) -> None:
        """Show the day grid on the current selection, or near today."""
        if self._is_open:
            return
        self._is_open = True
        self.state.reset_view()

        anchor = self._selection_anchor()
        if anchor is None:
            today = self.state.today
            anchor = find_nearest_enabled(today, self.registry.policy) or today
        self.state.focus(anchor)
        self._sink.emit(PickerEvent.OPEN, {})

    def close(self) -> None:
        """Hide the picker, dropping a half-finished range and returning to days view."""
        if not self._is_open:
            return
        if self.state.range_in_progress:
            self.state.reset_range()
        self.state.reset_view()
        self._is_open = False
        self._sink.emit(PickerEvent.CLOSE, {})

    def toggle(self) -> None:
        if self._is_open:
            self.close()
        else:
            self.open()

    def _selection_anchor(self) -> date | None:
        if self.state.mode == SelectionMode.SINGLE:
            return self.state.selected_date
        return self.state.range_start

    # Input

    def handle_key(
        self, key: str, modifiers: Modifiers | Iterable[str] | None = None
    ) -> KeyResult:
        """Apply a key press to the picker and return what it mapped to."""
        result = map_key(
            key,
            modifiers,
            self.state.focused_date,
            self._is_open,
            self.options.first_day_of_week,
        )

        if result.action == KeyAction.FOCUS_ONLY and result.delta is not None:
            self.state.focus(result.delta)
        elif result.action == KeyAction.SELECT:
            self._select_focused()
        elif result.action == KeyAction.CLOSE:
            if self.state.escape():
                self.close()
        return result

    def _select_focused(self) -> None:
        focused = self.state.focused_date
        view = self.state.current_view
        if view == ViewMode.DAYS:
            self.state.select(focused)
        elif view == ViewMode.MONTHS:
            self.state.choose_month(calendar_math.month_index(focused))
        else:
            self.state.choose_year(focused.year)

    def select_date(self, day: date) -> None:
        """Click on a day cell: select it and move focus (and month) to it."""
        if self.state.is_disabled(day):
            return
        self.state.select(day)
        self.state.focus(day)

    def clear_selection(self) -> None:
        self.state.clear()

    def go_to_today(self) -> None:
        self.state.go_to_today()

    def next_period(self) -> None:
        self.state.navigate_next()

    def previous_period(self) -> None:
        self.state.navigate_previous()

    # Events

    def add_events(self, events: Mapping[date | str, list[str]]) -> None:
        self.events.add_events(events)

    def remove_events(self, day: date | str) -> None:
        self.events.remove_events(day)

    def clear_events(self) -> None:
        self.events.clear()

    # Grids

    def weekday_labels(self, length: str = "short") -> list[str]:
        return calendar_math.weekday_labels(
            self.options.first_day_of_week, self.options.locale, self.formatter, length
        )

    def day_cells(self) -> list[list[CalendarCell]]:
        """The 6x7 grid for the anchor month with per-cell flags."""
        anchor = self.state.view_date
        today = self.state.today
        focused = self.state.focused_date
        grid = calendar_math.month_grid(
            anchor.year, anchor.month - 1, self.options.first_day_of_week
        )
        return [
            [
                CalendarCell(
                    date=day,
                    is_current_month=(day.year, day.month) == (anchor.year, anchor.month),
                    is_today=day == today,
                    is_selected=self.state.is_selected(day),
                    is_disabled=self.state.is_disabled(day),
                    has_events=self.events.has_events(day),
                    is_focused=day == focused,
                    in_range=self.state.is_in_range(day),
                )
                for day in row
            ]
            for row in grid
        ]

    def month_cells(self) -> list[MonthCell]:
        anchor = self.state.view_date
        policy = self.registry.policy
        return [
            MonthCell(
                month=i,
                label=self.formatter.month_name(i, "short", self.options.locale),
                is_current=i == anchor.month - 1,
                is_disabled=calendar_math.is_month_disabled(anchor.year, i, policy),
            )
            for i in range(12)
        ]

    def year_cells(self) -> list[YearCell]:
        anchor = self.state.view_date
        policy = self.registry.policy
        return [
            YearCell(
                year=year,
                is_current=year == anchor.year,
                is_disabled=calendar_math.is_year_disabled(year, policy),
            )
            for year in calendar_math.year_page(self.state.year_range_start)
        ]

    def title(self) -> str:
        """Header text for the current view."""
        anchor = self.state.view_date
        view = self.state.current_view
        if view == ViewMode.DAYS:
            return self.formatter.format(anchor, "MMMM yyyy", self.options.locale)
        if view == ViewMode.MONTHS:
            return str(anchor.year)
        start = self.state.year_range_start
        return f"{start} - {start + 11}"

    def display_value(self) -> str:
        """Selection formatted with the configured date format."""
        fmt = self.date_format
        if self.state.mode == SelectionMode.SINGLE:
            selected = self.state.selected_date
            return self.formatter.format(selected, fmt) if selected else ""
        start, end = self.state.range_start, self.state.range_end
        if start is None:
            return ""
        text = f"{self.formatter.format(start, fmt)} - "
        if end is not None:
            text += self.formatter.format(end, fmt)
        return text
