"""Tests for the selection and view-mode state machine."""

from datetime import date, datetime

import pytest

from datepicker.disabled_registry import DisabledDateRegistry
from datepicker.models.state import SelectionMode, ViewMode
from datepicker.notifications import PickerEvent
from datepicker.state_machine import DatePickerStateMachine


class TestInitialState:
    def test_starts_in_days_view_on_today(self, machine, today):
        assert machine.current_view == ViewMode.DAYS
        assert machine.view_date == today
        assert machine.focused_date == today
        assert machine.year_range_start == 2016
        assert machine.selected_date is None

    def test_explicit_view_date(self, registry, sink):
        machine = DatePickerStateMachine(registry, sink=sink, view_date=date(2030, 6, 1))
        assert machine.view_date == date(2030, 6, 1)
        assert machine.year_range_start == 2028


class TestSingleSelection:
    def test_select_commits_and_notifies(self, machine, sink):
        seen = []
        machine.subscribe(lambda m: seen.append(m.selected_date))
        machine.select(date(2025, 4, 20))
        assert machine.selected_date == date(2025, 4, 20)
        assert seen == [date(2025, 4, 20)]
        assert sink.last(PickerEvent.DATE_CHANGE)["date"] == date(2025, 4, 20)

    def test_select_truncates_datetime(self, machine):
        machine.select(datetime(2025, 4, 20, 13, 45))
        assert machine.selected_date == date(2025, 4, 20)

    def test_disabled_date_is_ignored(self, machine, registry, sink):
        registry.add_disabled_date(date(2025, 4, 20))
        sink.clear()
        seen = []
        machine.subscribe(lambda m: seen.append(1))
        machine.select(date(2025, 4, 20))
        assert machine.selected_date is None
        assert seen == []
        assert sink.events == []

    def test_clear_is_idempotent(self, machine):
        machine.select(date(2025, 4, 20))
        machine.clear()
        once = (machine.selection, machine.view)
        machine.clear()
        assert (machine.selection, machine.view) == once
        assert machine.selected_date is None


class TestRangeSelection:
    def test_two_clicks_complete_range(self, range_machine):
        range_machine.select_range(date(2025, 4, 15))
        assert range_machine.range_in_progress
        assert range_machine.range_end is None
        range_machine.select_range(date(2025, 4, 20))
        assert range_machine.range_start == date(2025, 4, 15)
        assert range_machine.range_end == date(2025, 4, 20)
        assert not range_machine.range_in_progress

    def test_reversed_clicks_swap(self, range_machine):
        range_machine.select_range(date(2025, 4, 20))
        range_machine.select_range(date(2025, 4, 15))
        assert range_machine.range_start == date(2025, 4, 15)
        assert range_machine.range_end == date(2025, 4, 20)
        assert not range_machine.range_in_progress

    def test_third_click_starts_new_range(self, range_machine):
        range_machine.select_range(date(2025, 4, 15))
        range_machine.select_range(date(2025, 4, 20))
        range_machine.select_range(date(2025, 5, 1))
        assert range_machine.range_start == date(2025, 5, 1)
        assert range_machine.range_end is None
        assert range_machine.range_in_progress

    def test_same_day_range(self, range_machine):
        range_machine.select_range(date(2025, 4, 15))
        range_machine.select_range(date(2025, 4, 15))
        assert range_machine.range_start == range_machine.range_end == date(2025, 4, 15)

    def test_disabled_endpoint_ignored(self, range_machine, registry):
        registry.add_disabled_date(date(2025, 4, 20))
        range_machine.select_range(date(2025, 4, 15))
        range_machine.select_range(date(2025, 4, 20))
        assert range_machine.range_in_progress
        assert range_machine.range_end is None

    def test_in_range_excludes_disabled_days(self, range_machine, registry):
        registry.add_disabled_date(date(2025, 4, 17))
        range_machine.select_range(date(2025, 4, 15))
        range_machine.select_range(date(2025, 4, 20))
        assert range_machine.is_in_range(date(2025, 4, 16))
        assert not range_machine.is_in_range(date(2025, 4, 17))
        assert range_machine.is_in_range(date(2025, 4, 20))
        assert not range_machine.is_in_range(date(2025, 4, 21))

    def test_reset_range(self, range_machine, sink):
        range_machine.select_range(date(2025, 4, 15))
        range_machine.reset_range()
        assert range_machine.range_start is None
        assert not range_machine.range_in_progress
        assert sink.names()[-1] == PickerEvent.RANGE_CLEAR

    def test_clear_twice_in_range_mode(self, range_machine):
        range_machine.select_range(date(2025, 4, 15))
        range_machine.clear()
        once = range_machine.selection
        range_machine.clear()
        assert range_machine.selection == once

    def test_set_range_swaps(self, range_machine):
        range_machine.set_range(date(2025, 4, 20), date(2025, 4, 15))
        assert range_machine.range_start == date(2025, 4, 15)
        assert range_machine.range_end == date(2025, 4, 20)


class TestSelectionMode:
    def test_switching_drops_other_selection(self, machine, sink):
        machine.select(date(2025, 4, 20))
        machine.set_selection_mode(SelectionMode.RANGE)
        assert machine.mode == SelectionMode.RANGE
        assert machine.selected_date is None
        assert sink.last(PickerEvent.MODE_CHANGE) == {"mode": "range"}

    def test_same_mode_is_noop(self, machine, sink):
        machine.set_selection_mode("single")
        assert sink.events == []


class TestViewTransitions:
    def test_days_to_months_to_days(self, machine):
        machine.show_month_selector()
        assert machine.current_view == ViewMode.MONTHS
        machine.choose_month(0)
        assert machine.current_view == ViewMode.DAYS
        assert machine.view_date == date(2025, 1, 15)

    def test_choose_month_clamps_day(self, registry, sink):
        machine = DatePickerStateMachine(registry, sink=sink, view_date=date(2025, 1, 31))
        machine.show_month_selector()
        machine.choose_month(1)
        assert machine.view_date == date(2025, 2, 28)

    def test_year_selector_and_choose_year(self, machine):
        machine.show_year_selector()
        assert machine.current_view == ViewMode.YEARS
        assert machine.year_range_start == 2016
        machine.choose_year(2030)
        assert machine.current_view == ViewMode.MONTHS
        assert machine.view_date.year == 2030
        machine.choose_month(5)
        assert machine.current_view == ViewMode.DAYS
        assert machine.view_date == date(2030, 6, 15)

    def test_year_selector_from_months(self, machine):
        machine.show_month_selector()
        machine.show_year_selector()
        assert machine.current_view == ViewMode.YEARS

    def test_out_of_domain_trigger_is_ignored(self, machine, sink):
        machine.choose_year(2030)
        assert machine.current_view == ViewMode.DAYS
        assert machine.view_date == date(2025, 4, 15)
        assert sink.events == []

    def test_choose_month_rejects_bad_index(self, machine):
        machine.show_month_selector()
        with pytest.raises(ValueError):
            machine.choose_month(12)

    def test_escape_steps_back(self, machine):
        machine.show_year_selector()
        assert machine.escape() is False
        assert machine.current_view == ViewMode.MONTHS
        assert machine.escape() is False
        assert machine.current_view == ViewMode.DAYS
        assert machine.escape() is True

    def test_view_mode_event(self, machine, sink):
        machine.show_month_selector()
        assert sink.last(PickerEvent.VIEW_MODE_CHANGE) == {"view": "months"}


class TestNavigation:
    def test_days_view_moves_month(self, machine, sink):
        machine.navigate_next()
        assert machine.view_date == date(2025, 5, 15)
        assert sink.last(PickerEvent.MONTH_CHANGE) == {"year": 2025, "month": 4}
        machine.navigate_previous()
        machine.navigate_previous()
        assert machine.view_date == date(2025, 3, 15)

    def test_months_view_moves_year(self, machine):
        machine.show_month_selector()
        machine.navigate_next()
        assert machine.view_date == date(2026, 4, 15)

    def test_years_view_pages_by_twelve(self, machine):
        machine.show_year_selector()
        machine.navigate_next()
        assert machine.year_range_start == 2028
        assert machine.view_date == date(2025, 4, 15)
        machine.navigate_previous()
        machine.navigate_previous()
        assert machine.year_range_start == 2004

    def test_months_view_focus_follows_year(self, machine):
        machine.show_month_selector()
        machine.navigate_next()
        assert machine.focused_date == date(2026, 4, 15)

    def test_years_view_focus_stays_on_page(self, machine):
        machine.show_year_selector()
        machine.navigate_next()
        assert machine.year_range_start <= machine.focused_date.year <= 2039

    def test_days_view_at_last_month_does_not_raise(self, registry, sink):
        machine = DatePickerStateMachine(registry, sink=sink, view_date=date(9999, 12, 15))
        machine.navigate_next()
        assert machine.view_date == date.max

    def test_years_view_does_not_page_past_last_year(self, registry, sink):
        machine = DatePickerStateMachine(registry, sink=sink, view_date=date(9999, 1, 1))
        machine.show_year_selector()
        sink.clear()
        machine.navigate_next()
        assert machine.year_range_start == 9996
        assert sink.events == []


class TestFocus:
    def test_focus_other_month_moves_view(self, machine, sink):
        machine.focus(date(2025, 5, 2))
        assert machine.focused_date == date(2025, 5, 2)
        assert machine.view_date == date(2025, 5, 2)
        assert PickerEvent.MONTH_CHANGE in sink.names()

    def test_focus_same_month_keeps_view(self, machine, sink):
        machine.focus(date(2025, 4, 20))
        assert machine.view_date == date(2025, 4, 15)
        assert sink.names() == [PickerEvent.FOCUS_DATE]

    def test_focus_in_months_view_moves_year(self, machine, sink):
        machine.show_month_selector()
        machine.focus(date(2026, 4, 15))
        assert machine.view_date == date(2026, 4, 15)
        assert sink.last(PickerEvent.YEAR_CHANGE) == {"year": 2026}

    def test_focus_in_years_view_moves_page(self, machine):
        machine.show_year_selector()
        machine.focus(date(2030, 4, 15))
        assert machine.year_range_start == 2028
        machine.focus(date(2029, 4, 15))
        assert machine.year_range_start == 2028

    def test_go_to_today_selects_enabled_today(self, machine, today):
        machine.navigate_next()
        machine.go_to_today()
        assert machine.view_date == today
        assert machine.selected_date == today

    def test_go_to_today_skips_disabled_today(self, machine, registry, today):
        registry.add_disabled_date(today)
        machine.go_to_today()
        assert machine.focused_date == today
        assert machine.selected_date is None


class TestListeners:
    def test_registration_order_and_unsubscribe(self, machine):
        calls = []

        def first(m):
            calls.append("first")

        def second(m):
            calls.append("second")

        machine.subscribe(first)
        machine.subscribe(second)
        machine.navigate_next()
        assert calls == ["first", "second"]

        machine.unsubscribe(first)
        machine.navigate_next()
        assert calls == ["first", "second", "second"]

    def test_policy_change_notifies_listeners(self, machine, registry):
        calls = []
        machine.subscribe(lambda m: calls.append(1))
        registry.add_disabled_weekday(0)
        assert calls == [1]

    def test_policy_change_keeps_existing_callbacks(self, sink):
        calls = []
        registry = DisabledDateRegistry(on_change=lambda: calls.append("host"))
        first = DatePickerStateMachine(registry, sink=sink)
        second = DatePickerStateMachine(registry, sink=sink)
        first.subscribe(lambda m: calls.append("first"))
        second.subscribe(lambda m: calls.append("second"))
        registry.add_disabled_weekday(0)
        assert calls == ["host", "first", "second"]

    def test_listener_sees_committed_state(self, machine):
        seen = []
        machine.subscribe(lambda m: seen.append((m.selected_date, m.focused_date)))
        machine.select(date(2025, 4, 18))
        assert seen == [(date(2025, 4, 18), date(2025, 4, 15))]

    def test_snapshots_are_copies(self, machine):
        snapshot = machine.selection
        snapshot.selected_date = date(2000, 1, 1)
        assert machine.selected_date is None
