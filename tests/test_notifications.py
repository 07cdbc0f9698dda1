"""Tests for notification sinks and the listener registry."""

import logging

from datepicker.notifications import (
    CollectingSink,
    ListenerRegistry,
    LoggingSink,
    NullSink,
    PickerEvent,
)


def test_collecting_sink_records_in_order():
    sink = CollectingSink()
    sink.emit(PickerEvent.OPEN, {})
    sink.emit(PickerEvent.DATE_CHANGE, {"date": "2025-04-15"})
    assert sink.names() == [PickerEvent.OPEN, PickerEvent.DATE_CHANGE]
    assert sink.last(PickerEvent.DATE_CHANGE) == {"date": "2025-04-15"}
    assert sink.last(PickerEvent.CLOSE) is None
    sink.clear()
    assert sink.events == []


def test_logging_sink(caplog):
    with caplog.at_level(logging.DEBUG, logger="datepicker.notifications"):
        LoggingSink().emit(PickerEvent.CLOSE, {})
    assert "close" in caplog.text


def test_null_sink_discards():
    NullSink().emit(PickerEvent.OPEN, {"x": 1})


def test_event_names_are_stable():
    assert PickerEvent.MONTH_CHANGE.value == "month-change"
    assert PickerEvent.RANGE_COMPLETE.value == "range-complete"


def test_unsubscribe_during_notify_applies_next_time():
    registry = ListenerRegistry()
    calls = []

    def once(owner):
        calls.append("once")
        registry.unsubscribe(once)

    def always(owner):
        calls.append("always")

    registry.subscribe(once)
    registry.subscribe(always)
    registry.notify(None)
    registry.notify(None)
    assert calls == ["once", "always", "always"]
    assert len(registry) == 1
