"""Render the day grid for one month."""

import logging
from datetime import date

import typer
from typing_extensions import Annotated

from cli.context import get_context
from cli.display import GridRenderer
from cli.utils import parse_date_option, parse_event_options, to_month_indices
from datepicker.models.state import SelectionMode

logger = logging.getLogger(__name__)


def grid(
    year: Annotated[int, typer.Argument(help="Year to show")],
    month: Annotated[int, typer.Argument(min=1, max=12, help="Month to show (1-12)")],
    first_day: Annotated[
        int | None,
        typer.Option("--first-day", "-f", min=0, max=6, help="First day of week (0 = Sunday)"),
    ] = None,
    min_date: Annotated[
        str | None,
        typer.Option("--min", help="Earliest selectable date"),
    ] = None,
    max_date: Annotated[
        str | None,
        typer.Option("--max", help="Latest selectable date"),
    ] = None,
    disable_weekday: Annotated[
        list[int] | None,
        typer.Option("--disable-weekday", "-w", min=0, max=6, help="Disabled weekday (0 = Sunday), repeatable"),
    ] = None,
    disable_month: Annotated[
        list[int] | None,
        typer.Option("--disable-month", "-m", help="Disabled month (1-12), repeatable"),
    ] = None,
    disable_date: Annotated[
        list[str] | None,
        typer.Option("--disable-date", "-d", help="Disabled date, repeatable"),
    ] = None,
    event: Annotated[
        list[str] | None,
        typer.Option("--event", "-e", help="Event label as DATE=LABEL, repeatable"),
    ] = None,
    select: Annotated[
        str | None,
        typer.Option("--select", "-s", help="Select a single date"),
    ] = None,
    date_range: Annotated[
        tuple[str, str] | None,
        typer.Option("--range", "-r", help="Select a date range (START END)"),
    ] = None,
) -> None:
    """Render the 6x7 day grid for YEAR MONTH.

    Examples:
        datepicker grid 2025 4
        datepicker grid 2025 4 --first-day 1 --disable-weekday 0 --disable-weekday 6
        datepicker grid 2025 4 --event 2025-04-15=Dentist --select 2025-04-15
        datepicker grid 2025 4 --range 2025-04-10 2025-04-14
    """
    if select and date_range:
        raise typer.BadParameter("Use either --select or --range, not both")

    ctx = get_context()
    formatter = ctx.formatter

    disabled_dates = {}
    for text in disable_date or []:
        disabled_dates[parse_date_option(formatter, text)] = None

    picker = ctx.create_picker(
        first_day_of_week=first_day,
        min_date=parse_date_option(formatter, min_date),
        max_date=parse_date_option(formatter, max_date),
        disabled_weekdays=set(disable_weekday) if disable_weekday else None,
        disabled_months=to_month_indices(disable_month),
        disabled_dates=disabled_dates or None,
        events=parse_event_options(formatter, event) or None,
        selection_mode=SelectionMode.RANGE if date_range else None,
    )

    if select:
        picker.state.set_selection_mode(SelectionMode.SINGLE)
        chosen = [parse_date_option(formatter, select)]
    else:
        chosen = [parse_date_option(formatter, text) for text in date_range or ()]

    for day in chosen:
        if picker.state.is_disabled(day):
            logger.warning(f"Selection ignored: {day} is disabled")
        picker.select_date(day)

    picker.state.focus(date(year, month, 1))
    GridRenderer().render_days(picker)
