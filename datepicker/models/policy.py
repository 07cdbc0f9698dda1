"""Date availability policy model."""

from datetime import date

from pydantic import BaseModel, Field, field_validator

from datepicker.models.dates import optional_calendar_date


class DisabledPolicy(BaseModel):
    """Combined rule set deciding whether a date can be selected.

    Bounds are inclusive: ``min_date`` and ``max_date`` themselves are never
    disabled by the bound check. Weekdays use 0 = Sunday ... 6 = Saturday;
    months use 0 = January ... 11 = December.
    """

    min_date: date | None = None
    max_date: date | None = None
    disabled_dates: dict[date, str | None] = Field(default_factory=dict)
    disabled_weekdays: set[int] = Field(default_factory=set)
    disabled_months: set[int] = Field(default_factory=set)

    @field_validator("min_date", "max_date", mode="before")
    @classmethod
    def truncate_datetimes(cls, v):
        return optional_calendar_date(v)

    @field_validator("disabled_weekdays")
    @classmethod
    def validate_weekdays(cls, v: set[int]) -> set[int]:
        bad = sorted(i for i in v if not 0 <= i <= 6)
        if bad:
            raise ValueError(f"weekday indices must be 0-6, got {bad}")
        return v

    @field_validator("disabled_months")
    @classmethod
    def validate_months(cls, v: set[int]) -> set[int]:
        bad = sorted(i for i in v if not 0 <= i <= 11)
        if bad:
            raise ValueError(f"month indices must be 0-11, got {bad}")
        return v
