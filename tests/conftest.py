import logging
from datetime import date

import pytest

from datepicker.config import PickerConfig
from datepicker.disabled_registry import DisabledDateRegistry
from datepicker.formatting import DateFormatter
from datepicker.models.policy import DisabledPolicy
from datepicker.notifications import CollectingSink
from datepicker.picker import DatePicker
from datepicker.state_machine import DatePickerStateMachine

TODAY = date(2025, 4, 15)  # a Tuesday


@pytest.fixture
def today():
    return TODAY


@pytest.fixture
def sink():
    """Sink that records every occurrence."""
    return CollectingSink()


@pytest.fixture
def formatter():
    return DateFormatter()


@pytest.fixture
def registry():
    return DisabledDateRegistry()


@pytest.fixture
def policy():
    return DisabledPolicy()


@pytest.fixture
def machine(registry, sink):
    """Single-mode state machine anchored on 2025-04-15."""
    return DatePickerStateMachine(registry, sink=sink, today=TODAY)


@pytest.fixture
def range_machine(registry, sink):
    return DatePickerStateMachine(registry, sink=sink, mode="range", today=TODAY)


@pytest.fixture
def picker(sink):
    """Picker built from default config with a fixed today."""
    return DatePicker.from_config(PickerConfig(), sink=sink, today=TODAY)


@pytest.fixture
def cli_env(tmp_path, monkeypatch):
    """Isolate CLI runs: logs go to tmp_path and handlers are removed afterwards."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("PICKER_LOG_DIR", str(tmp_path / "logs"))
    for key in (
        "PICKER_LOCALE",
        "PICKER_DATE_FORMAT",
        "PICKER_FIRST_DAY_OF_WEEK",
        "PICKER_SELECTION_MODE",
        "PICKER_MIN_DATE",
        "PICKER_MAX_DATE",
        "PICKER_DISABLED_WEEKDAYS",
        "PICKER_DISABLED_MONTHS",
    ):
        monkeypatch.delenv(key, raising=False)
    yield tmp_path
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        # Only the handlers setup_logging installed, not pytest's capture handlers
        if type(handler) in (logging.FileHandler, logging.StreamHandler):
            root_logger.removeHandler(handler)
            handler.close()
