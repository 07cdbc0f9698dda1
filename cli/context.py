"""Shared CLI context with lazy-initialized dependencies."""

import logging
from datetime import date
from typing import Any

import typer

from datepicker.config import PickerConfig
from datepicker.exceptions import ConfigurationError
from datepicker.formatting import DateFormatter
from datepicker.notifications import NotificationSink
from datepicker.picker import DatePicker

logger = logging.getLogger(__name__)


class CLIContext:
    """Shared context with lazy-initialized dependencies for CLI commands.

    Usage:
        ctx = CLIContext()
        picker = ctx.create_picker(first_day_of_week=1)
    """

    def __init__(self, verbose: bool = False, quiet: bool = False, today: date | None = None):
        """Initialize CLI context.

        Args:
            verbose: If True, enable info logging on the console
            quiet: If True, suppress non-error output
            today: Fixed "today" for the pickers this context builds
        """
        self.verbose = verbose
        self.quiet = quiet
        self.today = today

        # Lazy-loaded dependencies
        self._config: PickerConfig | None = None
        self._formatter: DateFormatter | None = None

    @property
    def config(self) -> PickerConfig:
        """Get configuration (lazy-loaded)."""
        if self._config is None:
            self._config = PickerConfig.from_env()
        return self._config

    @property
    def formatter(self) -> DateFormatter:
        """Get the date formatter for the configured locale (lazy-loaded)."""
        if self._formatter is None:
            self._formatter = DateFormatter(locale=self.config.locale)
        return self._formatter

    def create_picker(
        self, sink: NotificationSink | None = None, **overrides: Any
    ) -> DatePicker:
        """Build a picker from the loaded config with command-line overrides.

        Overrides whose value is None are ignored. Invalid combinations are
        reported and end the command.
        """
        values = self.config.model_dump()
        values.update({k: v for k, v in overrides.items() if v is not None})
        try:
            config = PickerConfig.build(**values)
        except ConfigurationError as e:
            logger.error(f"Invalid picker options: {e}")
            raise typer.Exit(1)
        return DatePicker.from_config(config, sink=sink, today=self.today)


# Global context instance (set by Typer callback)
_ctx: CLIContext | None = None


def get_context() -> CLIContext:
    """Get the current CLI context.

    Raises:
        RuntimeError: If context not initialized
    """
    if _ctx is None:
        raise RuntimeError("CLI context not initialized. This should not happen.")
    return _ctx


def set_context(ctx: CLIContext) -> None:
    """Set the global CLI context."""
    global _ctx
    _ctx = ctx
