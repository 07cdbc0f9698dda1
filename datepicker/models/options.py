"""Calendar display options."""

from pydantic import BaseModel, Field

from datepicker.constants import DEFAULT_LOCALE


class CalendarOptions(BaseModel):
    """Options shared by grid computation and label lookup.

    ``first_day_of_week`` uses 0 = Sunday. ``locale`` is an opaque token
    handed to the locale formatter.
    """

    first_day_of_week: int = Field(default=0, ge=0, le=6)
    locale: str = DEFAULT_LOCALE
