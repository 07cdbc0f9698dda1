"""Selection and view state models."""

from datetime import date
from enum import Enum

from pydantic import BaseModel, field_validator, model_validator

from datepicker.constants import YEAR_PAGE_SIZE
from datepicker.models.dates import optional_calendar_date


class ViewMode(str, Enum):
    """Which grid the picker is showing."""

    DAYS = "days"
    MONTHS = "months"
    YEARS = "years"


class SelectionMode(str, Enum):
    """Single date or two-endpoint range selection."""

    SINGLE = "single"
    RANGE = "range"


class SelectionState(BaseModel):
    """Committed selection.

    ``selected_date`` is used in single mode; ``range_start``/``range_end``
    and ``range_in_progress`` in range mode. When both endpoints are set,
    ``range_start <= range_end``.
    """

    mode: SelectionMode = SelectionMode.SINGLE
    selected_date: date | None = None
    range_start: date | None = None
    range_end: date | None = None
    range_in_progress: bool = False

    @field_validator("selected_date", "range_start", "range_end", mode="before")
    @classmethod
    def truncate_datetimes(cls, v):
        return optional_calendar_date(v)

    @model_validator(mode="after")
    def validate_range_order(self):
        """Reject a reversed range; the state machine always stores it ordered."""
        if self.range_start is not None and self.range_end is not None:
            if self.range_start > self.range_end:
                raise ValueError("range_start must be <= range_end")
        return self

    @property
    def has_range(self) -> bool:
        """True when both endpoints are set."""
        return self.range_start is not None and self.range_end is not None


class ViewState(BaseModel):
    """What the picker displays and where the keyboard cursor is."""

    current_view: ViewMode = ViewMode.DAYS
    view_date: date
    focused_date: date
    year_range_start: int

    @field_validator("view_date", "focused_date", mode="before")
    @classmethod
    def truncate_datetimes(cls, v):
        return optional_calendar_date(v)

    @field_validator("year_range_start")
    @classmethod
    def validate_year_page(cls, v: int) -> int:
        if v % YEAR_PAGE_SIZE != 0:
            raise ValueError(f"year_range_start must be a multiple of {YEAR_PAGE_SIZE}")
        return v

    @property
    def year_range_end(self) -> int:
        """Last year of the current 12-year page."""
        return self.year_range_start + YEAR_PAGE_SIZE - 1
