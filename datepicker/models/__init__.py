"""Pydantic models and value types for the date picker engine."""

from datepicker.models.cell import CalendarCell, MonthCell, YearCell
from datepicker.models.dates import CalendarDate, to_calendar_date
from datepicker.models.keys import (
    FocusTrapResult,
    KeyAction,
    KeyResult,
    Modifiers,
    TabDirection,
)
from datepicker.models.options import CalendarOptions
from datepicker.models.policy import DisabledPolicy
from datepicker.models.state import SelectionMode, SelectionState, ViewMode, ViewState

__all__ = [
    "CalendarCell",
    "CalendarDate",
    "CalendarOptions",
    "DisabledPolicy",
    "FocusTrapResult",
    "KeyAction",
    "KeyResult",
    "Modifiers",
    "MonthCell",
    "SelectionMode",
    "SelectionState",
    "TabDirection",
    "ViewMode",
    "ViewState",
    "YearCell",
    "to_calendar_date",
]
