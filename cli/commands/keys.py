"""Replay key presses through the picker and show what they did."""

import logging

import typer
from typing_extensions import Annotated

from cli.context import get_context
from cli.display import GridRenderer, KeyStep, console, format_date
from cli.utils import parse_date_option, parse_key_combo
from datepicker.models.keys import TabDirection
from datepicker.models.state import SelectionMode
from datepicker.notifications import CollectingSink

logger = logging.getLogger(__name__)


def keys(
    start: Annotated[str, typer.Argument(help="Date to focus before the first key")],
    key_combos: Annotated[
        list[str],
        typer.Argument(
            metavar="KEY...",
            help="Key names, e.g. ArrowLeft, PageDown, Shift+PageUp, Enter, Escape",
        ),
    ],
    shift: Annotated[
        bool,
        typer.Option("--shift", help="Hold Shift for every key"),
    ] = False,
    mode: Annotated[
        SelectionMode,
        typer.Option("--mode", help="Selection mode"),
    ] = SelectionMode.SINGLE,
    show_events: Annotated[
        bool,
        typer.Option("--events/--no-events", help="List the emitted occurrences"),
    ] = True,
) -> None:
    """Open a picker focused on START, press each KEY and report the result.

    Examples:
        datepicker keys 2025-04-15 ArrowLeft Enter
        datepicker keys 2025-04-15 PageDown --shift
        datepicker keys 2025-04-10 Enter ArrowRight ArrowRight Enter --mode range
    """
    ctx = get_context()
    sink = CollectingSink()
    picker = ctx.create_picker(sink=sink, selection_mode=mode)
    focus_date = parse_date_option(ctx.formatter, start)

    picker.open()
    picker.state.focus(focus_date)
    sink.clear()

    steps: list[KeyStep] = []
    for combo in key_combos:
        key, modifiers = parse_key_combo(combo, shift=shift)
        if not picker.is_open:
            logger.info(f"Picker closed, skipping remaining keys from {combo!r}")
            break
        result = picker.handle_key(key, modifiers)
        action = result.action.value
        if result.tab_direction != TabDirection.NONE:
            action = f"{action} (tab {result.tab_direction.value})"
        steps.append(
            KeyStep(
                key=combo,
                action=action,
                focused=format_date(picker.state.focused_date),
                view=picker.state.current_view.value,
            )
        )

    renderer = GridRenderer()
    renderer.render_key_trace(steps)

    console.print(f"\n[bold]Focus:[/bold] {format_date(picker.state.focused_date)}")
    console.print(f"[bold]Selection:[/bold] {picker.display_value() or '-'}")
    console.print(f"[bold]Open:[/bold] {'yes' if picker.is_open else 'no'}")

    if show_events:
        console.print()
        renderer.render_occurrences(sink.events)
