"""CLI utilities for turning command-line text into picker values."""

import logging
from datetime import date

import typer

from datepicker.exceptions import ParseError
from datepicker.formatting import LocaleFormatter
from datepicker.models.keys import Modifiers

logger = logging.getLogger(__name__)


def parse_date_option(formatter: LocaleFormatter, text: str | None) -> date | None:
    """Parse a date given on the command line.

    Raises:
        typer.BadParameter: If no date format recognizes the text.
    """
    if text is None:
        return None
    try:
        return formatter.parse(text)
    except ParseError as e:
        raise typer.BadParameter(str(e))


def parse_event_options(
    formatter: LocaleFormatter, values: list[str] | None
) -> dict[date, list[str]]:
    """Parse repeated ``DATE=LABEL`` options into a day -> labels mapping."""
    events: dict[date, list[str]] = {}
    for value in values or []:
        raw_date, sep, label = value.partition("=")
        if not sep or not label.strip():
            raise typer.BadParameter(f"Expected DATE=LABEL, got {value!r}")
        day = parse_date_option(formatter, raw_date.strip())
        events.setdefault(day, []).append(label.strip())
    return events


def to_month_indices(months: list[int] | None) -> set[int] | None:
    """Convert 1-12 month numbers from the command line to 0-11 indices."""
    if months is None:
        return None
    bad = [m for m in months if not 1 <= m <= 12]
    if bad:
        raise typer.BadParameter(f"Months must be 1-12, got {bad}")
    return {m - 1 for m in months}


def parse_key_combo(combo: str, shift: bool = False) -> tuple[str, Modifiers]:
    """Split ``Shift+PageDown`` style key combos into key name and modifiers."""
    *names, key = combo.split("+") if combo != "+" else ["+"]
    if not key:
        raise typer.BadParameter(f"Missing key name in {combo!r}")
    if shift:
        names.append("shift")
    return key, Modifiers.coerce(names)
