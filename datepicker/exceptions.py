"""Exception hierarchy for date picker operations."""


class PickerError(Exception):
    """Base exception for date picker operations."""

    pass


class ParseError(PickerError):
    """Text could not be parsed into a calendar date."""

    def __init__(self, text: str, hint: str | None = None):
        self.text = text
        self.hint = hint
        if hint:
            message = f"Unrecognized date {text!r} (expected format {hint})"
        else:
            message = f"Unrecognized date {text!r}"
        super().__init__(message)


class ConfigurationError(PickerError):
    """Host-provided configuration is invalid."""

    pass
