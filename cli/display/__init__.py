"""Display module for rendering picker output.

This module provides:
- console: Shared Rich console instance
- GridRenderer: Days, months and years views, key traces and occurrences
- Formatting functions for dates, index lists and occurrence payloads
"""

from cli.display.console import console
from cli.display.formatters import (
    format_date,
    format_detail,
    format_months,
    format_weekdays,
)
from cli.display.grid_renderer import GridRenderer, KeyStep

__all__ = [
    # Console
    "console",
    # Renderers
    "GridRenderer",
    # Data classes
    "KeyStep",
    # Formatters
    "format_date",
    "format_detail",
    "format_months",
    "format_weekdays",
]
