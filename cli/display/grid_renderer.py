"""Rich renderer for picker grids, key traces and emitted occurrences."""

from dataclasses import dataclass
from typing import Any

from rich.table import Table
from rich.text import Text

from cli.display.console import console
from cli.display.formatters import format_date, format_detail
from datepicker.models.cell import CalendarCell
from datepicker.notifications import PickerEvent
from datepicker.picker import DatePicker


@dataclass
class KeyStep:
    """One replayed key press for display."""

    key: str
    action: str
    focused: str
    view: str


def cell_style(cell: CalendarCell) -> str:
    """Rich style string for a day cell."""
    styles = []
    if not cell.is_current_month:
        styles.append("dim")
    if cell.is_disabled:
        styles.append("strike red")
    if cell.is_selected:
        styles.append("bold reverse")
    elif cell.in_range:
        styles.append("reverse")
    if cell.is_today:
        styles.append("underline")
    if cell.is_focused:
        styles.append("cyan")
    return " ".join(styles)


def cell_text(cell: CalendarCell) -> Text:
    label = f"{cell.date.day:>2}"
    if cell.has_events:
        label += "•"
    return Text(label, style=cell_style(cell))


class GridRenderer:
    """Render the picker's days, months and years views.

    Uses Rich's Table class in the same compact style as the rest of the CLI.
    """

    def _table(self, title: str, show_header: bool = True) -> Table:
        return Table(
            title=title,
            show_header=show_header,
            header_style="bold",
            box=None,
            padding=(0, 1),
        )

    def render_days(self, picker: DatePicker) -> None:
        """Render the 6x7 day grid followed by the month's events."""
        table = self._table(picker.title())
        for label in picker.weekday_labels():
            table.add_column(label, justify="right", no_wrap=True)
        for row in picker.day_cells():
            table.add_row(*(cell_text(cell) for cell in row))
        console.print(table)

        month_cells = [c for row in picker.day_cells() for c in row if c.is_current_month]
        with_events = [c for c in month_cells if c.has_events]
        if with_events:
            events = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
            events.add_column("DATE", style="cyan", no_wrap=True)
            events.add_column("EVENTS")
            for cell in with_events:
                events.add_row(
                    format_date(cell.date), ", ".join(picker.events.events_for(cell.date))
                )
            console.print()
            console.print(events)

        value = picker.display_value()
        if value:
            console.print(f"\n[bold]Selected:[/bold] {value}")

    def render_months(self, picker: DatePicker) -> None:
        table = self._table(picker.title(), show_header=False)
        for _ in range(4):
            table.add_column(no_wrap=True)
        cells = picker.month_cells()
        for start in range(0, len(cells), 4):
            row = []
            for cell in cells[start : start + 4]:
                style = "strike red" if cell.is_disabled else ""
                if cell.is_current:
                    style = f"{style} bold".strip()
                row.append(Text(cell.label, style=style))
            table.add_row(*row)
        console.print(table)

    def render_years(self, picker: DatePicker) -> None:
        table = self._table(picker.title(), show_header=False)
        for _ in range(4):
            table.add_column(no_wrap=True)
        cells = picker.year_cells()
        for start in range(0, len(cells), 4):
            row = []
            for cell in cells[start : start + 4]:
                style = "strike red" if cell.is_disabled else ""
                if cell.is_current:
                    style = f"{style} bold".strip()
                row.append(Text(str(cell.year), style=style))
            table.add_row(*row)
        console.print(table)

    def render_key_trace(self, steps: list[KeyStep]) -> None:
        table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
        table.add_column("#", style="dim", justify="right")
        table.add_column("KEY", style="cyan", no_wrap=True)
        table.add_column("ACTION")
        table.add_column("FOCUS", no_wrap=True)
        table.add_column("VIEW", style="dim")
        for i, step in enumerate(steps, 1):
            table.add_row(str(i), step.key, step.action, step.focused, step.view)
        console.print(table)

    def render_occurrences(
        self, occurrences: list[tuple[PickerEvent, dict[str, Any]]]
    ) -> None:
        if not occurrences:
            console.print("[dim]No occurrences emitted[/dim]")
            return
        table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
        table.add_column("EVENT", style="cyan", no_wrap=True)
        table.add_column("DETAIL")
        for event, detail in occurrences:
            table.add_row(event.value, format_detail(detail))
        console.print(table)
