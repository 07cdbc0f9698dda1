"""Grid cell models produced for the three picker views."""

from pydantic import BaseModel, ConfigDict

from datepicker.models.dates import CalendarDate


class CalendarCell(BaseModel):
    """One position of the 6x7 day grid."""

    model_config = ConfigDict(frozen=True)

    date: CalendarDate
    is_current_month: bool
    is_today: bool = False
    is_selected: bool = False
    is_disabled: bool = False
    has_events: bool = False
    is_focused: bool = False
    in_range: bool = False


class MonthCell(BaseModel):
    """One entry of the month selector (month index 0-11)."""

    model_config = ConfigDict(frozen=True)

    month: int
    label: str
    is_current: bool = False
    is_disabled: bool = False


class YearCell(BaseModel):
    """One entry of the 12-year selector page."""

    model_config = ConfigDict(frozen=True)

    year: int
    is_current: bool = False
    is_disabled: bool = False
