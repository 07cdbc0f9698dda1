"""Headless date picker engine: calendar math, availability policy, events and state."""

from datepicker.config import PickerConfig
from datepicker.disabled_registry import DisabledDateRegistry
from datepicker.event_store import EventStore
from datepicker.exceptions import ConfigurationError, ParseError, PickerError
from datepicker.formatting import DateFormatter, LocaleFormatter
from datepicker.keyboard import find_nearest_enabled, map_key, trap_focus
from datepicker.models import (
    CalendarCell,
    CalendarOptions,
    DisabledPolicy,
    KeyAction,
    KeyResult,
    Modifiers,
    MonthCell,
    SelectionMode,
    TabDirection,
    ViewMode,
    YearCell,
)
from datepicker.notifications import (
    CollectingSink,
    LoggingSink,
    NotificationSink,
    NullSink,
    PickerEvent,
)
from datepicker.picker import DatePicker
from datepicker.state_machine import DatePickerStateMachine

__all__ = [
    "CalendarCell",
    "CalendarOptions",
    "CollectingSink",
    "ConfigurationError",
    "DateFormatter",
    "DatePicker",
    "DatePickerStateMachine",
    "DisabledDateRegistry",
    "DisabledPolicy",
    "EventStore",
    "KeyAction",
    "KeyResult",
    "LocaleFormatter",
    "LoggingSink",
    "Modifiers",
    "MonthCell",
    "NotificationSink",
    "NullSink",
    "ParseError",
    "PickerConfig",
    "PickerError",
    "PickerEvent",
    "SelectionMode",
    "TabDirection",
    "ViewMode",
    "YearCell",
    "find_nearest_enabled",
    "map_key",
    "trap_focus",
]
