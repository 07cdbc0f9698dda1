"""Configuration for the date picker."""

import logging
import os
from datetime import date
from pathlib import Path

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator

from datepicker.constants import DEFAULT_DATE_FORMAT, DEFAULT_LOCALE
from datepicker.exceptions import ConfigurationError
from datepicker.models.state import SelectionMode

logger = logging.getLogger(__name__)


def _parse_index_list(raw: str) -> set[int]:
    """Parse "0, 6" into {0, 6}."""
    return {int(part) for part in raw.split(",") if part.strip()}


class PickerConfig(BaseModel):
    """Host-provided picker configuration with Pydantic validation."""

    # Display
    locale: str = Field(default=DEFAULT_LOCALE)
    first_day_of_week: int = Field(default=0, ge=0, le=6)
    date_format: str = Field(default=DEFAULT_DATE_FORMAT)

    # Selection
    selection_mode: SelectionMode = Field(default=SelectionMode.SINGLE)

    # Availability policy
    min_date: date | None = None
    max_date: date | None = None
    disabled_dates: dict[date, str | None] = Field(default_factory=dict)
    disabled_weekdays: set[int] = Field(default_factory=set)
    disabled_months: set[int] = Field(default_factory=set)

    # Initial event labels
    events: dict[date, list[str]] = Field(default_factory=dict)

    # Logging
    log_dir: Path = Field(default=Path("logs"))
    log_filename: str = Field(default="datepicker.log")

    @field_validator("disabled_weekdays")
    @classmethod
    def validate_weekdays(cls, v: set[int]) -> set[int]:
        if any(not 0 <= i <= 6 for i in v):
            raise ValueError("disabled weekdays must be 0-6")
        return v

    @field_validator("disabled_months")
    @classmethod
    def validate_months(cls, v: set[int]) -> set[int]:
        if any(not 0 <= i <= 11 for i in v):
            raise ValueError("disabled months must be 0-11")
        return v

    @classmethod
    def build(cls, **values) -> "PickerConfig":
        """Construct from plain values, raising ConfigurationError on bad input."""
        try:
            return cls(**values)
        except ValidationError as e:
            raise ConfigurationError(str(e)) from e

    @classmethod
    def from_env(cls) -> "PickerConfig":
        """Load configuration from environment variables and .env file.

        Values that fail to parse are skipped and the default is kept.
        """
        # .env is looked up from the working directory upwards
        load_dotenv(find_dotenv(usecwd=True))

        config_dict = {}

        # Display
        if "PICKER_LOCALE" in os.environ:
            config_dict["locale"] = os.environ["PICKER_LOCALE"]
        if "PICKER_DATE_FORMAT" in os.environ:
            config_dict["date_format"] = os.environ["PICKER_DATE_FORMAT"]
        if "PICKER_FIRST_DAY_OF_WEEK" in os.environ:
            try:
                value = int(os.environ["PICKER_FIRST_DAY_OF_WEEK"])
                if 0 <= value <= 6:
                    config_dict["first_day_of_week"] = value
            except ValueError:
                pass  # Keep default if invalid

        # Selection
        if "PICKER_SELECTION_MODE" in os.environ:
            raw = os.environ["PICKER_SELECTION_MODE"].strip().lower()
            if raw in {m.value for m in SelectionMode}:
                config_dict["selection_mode"] = raw

        # Bounds
        for key, field in (("PICKER_MIN_DATE", "min_date"), ("PICKER_MAX_DATE", "max_date")):
            if key in os.environ:
                try:
                    config_dict[field] = date.fromisoformat(os.environ[key].strip())
                except ValueError:
                    logger.warning(f"Ignoring invalid {key}: {os.environ[key]!r}")

        # Disabled weekdays / months
        for key, field, upper in (
            ("PICKER_DISABLED_WEEKDAYS", "disabled_weekdays", 6),
            ("PICKER_DISABLED_MONTHS", "disabled_months", 11),
        ):
            if key in os.environ:
                try:
                    values = _parse_index_list(os.environ[key])
                except ValueError:
                    logger.warning(f"Ignoring invalid {key}: {os.environ[key]!r}")
                    continue
                config_dict[field] = {i for i in values if 0 <= i <= upper}

        # Logging
        if "PICKER_LOG_DIR" in os.environ:
            config_dict["log_dir"] = Path(os.environ["PICKER_LOG_DIR"])
        if "PICKER_LOG_FILENAME" in os.environ:
            config_dict["log_filename"] = os.environ["PICKER_LOG_FILENAME"]

        return cls(**config_dict)
