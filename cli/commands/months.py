"""Render the month selector and the year selector."""

from datetime import date

import typer
from typing_extensions import Annotated

from cli.context import get_context
from cli.display import GridRenderer
from cli.utils import parse_date_option, to_month_indices


def months(
    year: Annotated[int, typer.Argument(help="Year to show")],
    min_date: Annotated[
        str | None,
        typer.Option("--min", help="Earliest selectable date"),
    ] = None,
    max_date: Annotated[
        str | None,
        typer.Option("--max", help="Latest selectable date"),
    ] = None,
    disable_month: Annotated[
        list[int] | None,
        typer.Option("--disable-month", "-m", help="Disabled month (1-12), repeatable"),
    ] = None,
) -> None:
    """Render the twelve months of YEAR; fully disabled months are struck through."""
    ctx = get_context()
    formatter = ctx.formatter
    picker = ctx.create_picker(
        min_date=parse_date_option(formatter, min_date),
        max_date=parse_date_option(formatter, max_date),
        disabled_months=to_month_indices(disable_month),
    )
    picker.state.focus(date(year, 1, 1))
    picker.state.show_month_selector()
    GridRenderer().render_months(picker)


def years(
    year: Annotated[int, typer.Argument(help="Any year on the page to show")],
    min_date: Annotated[
        str | None,
        typer.Option("--min", help="Earliest selectable date"),
    ] = None,
    max_date: Annotated[
        str | None,
        typer.Option("--max", help="Latest selectable date"),
    ] = None,
) -> None:
    """Render the 12-year page holding YEAR; years outside the bounds are struck through."""
    ctx = get_context()
    formatter = ctx.formatter
    picker = ctx.create_picker(
        min_date=parse_date_option(formatter, min_date),
        max_date=parse_date_option(formatter, max_date),
    )
    picker.state.focus(date(year, 1, 1))
    picker.state.show_year_selector()
    GridRenderer().render_years(picker)
