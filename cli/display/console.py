"""Shared Rich console instance for picker output."""

from rich.console import Console

# Dates and day numbers are styled by the renderers, not the auto-highlighter
console = Console(highlight=False)
