"""CLI commands package."""

from cli.commands.config import config
from cli.commands.grid import grid
from cli.commands.keys import keys
from cli.commands.months import months, years

__all__ = [
    "config",
    "grid",
    "keys",
    "months",
    "years",
]
