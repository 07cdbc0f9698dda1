"""Tests for exception classes."""

import pytest

from datepicker.exceptions import ConfigurationError, ParseError, PickerError


def test_picker_error():
    """Test PickerError base exception."""
    error = PickerError("Test error")
    assert str(error) == "Test error"
    assert isinstance(error, Exception)


def test_parse_error_message():
    """Test ParseError message and attributes."""
    error = ParseError("31/31/2025")
    assert str(error) == "Unrecognized date '31/31/2025'"
    assert error.text == "31/31/2025"
    assert error.hint is None
    assert isinstance(error, PickerError)


def test_parse_error_with_hint():
    """Test ParseError includes the expected format."""
    error = ParseError("x", "dd/MM/yyyy")
    assert str(error) == "Unrecognized date 'x' (expected format dd/MM/yyyy)"


def test_configuration_error():
    """Test ConfigurationError."""
    error = ConfigurationError("bad config")
    assert str(error) == "bad config"
    assert isinstance(error, PickerError)


def test_exception_hierarchy():
    """Test that all picker exceptions can be caught as PickerError."""
    with pytest.raises(PickerError):
        raise ParseError("x")
    with pytest.raises(PickerError):
        raise ConfigurationError("x")
