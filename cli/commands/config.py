"""Display configuration file path and settings."""

import os
from pathlib import Path

from rich.table import Table

from cli.context import get_context
from cli.display import console, format_date, format_months, format_weekdays
from datepicker.config import PickerConfig


def _find_env_file() -> Path | None:
    """Find .env file by searching current directory and parent directories."""
    current = Path.cwd()
    for path in [current] + list(current.parents):
        env_file = path / ".env"
        if env_file.exists():
            return env_file.resolve()
    return None


def _get_source(env_key: str, value, default_value) -> str:
    """Where a config value came from: the environment (or .env) or the default."""
    if env_key in os.environ and value != default_value:
        return "env"
    return "default"


def _create_table(setting_width: int, source_width: int) -> Table:
    """Create a styled table for config sections with fixed column widths."""
    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("SETTING", style="cyan", min_width=setting_width, no_wrap=True)
    table.add_column("SOURCE", style="dim", min_width=source_width, no_wrap=True)
    table.add_column("VALUE")
    return table


def config() -> None:
    """Display configuration file path and resolved picker settings."""
    env_file = _find_env_file()
    default_config = PickerConfig()
    ctx = get_context()
    cfg = ctx.config
    formatter = ctx.formatter

    sections: list[tuple[str, list[tuple[str, str, str]]]] = [
        (
            "Display",
            [
                ("locale", cfg.locale, _get_source("PICKER_LOCALE", cfg.locale, default_config.locale)),
                (
                    "first_day_of_week",
                    f"{cfg.first_day_of_week} ({formatter.weekday_name(cfg.first_day_of_week, 'long')})",
                    _get_source(
                        "PICKER_FIRST_DAY_OF_WEEK",
                        cfg.first_day_of_week,
                        default_config.first_day_of_week,
                    ),
                ),
                (
                    "date_format",
                    cfg.date_format,
                    _get_source("PICKER_DATE_FORMAT", cfg.date_format, default_config.date_format),
                ),
            ],
        ),
        (
            "Selection",
            [
                (
                    "selection_mode",
                    cfg.selection_mode.value,
                    _get_source(
                        "PICKER_SELECTION_MODE", cfg.selection_mode, default_config.selection_mode
                    ),
                ),
            ],
        ),
        (
            "Availability",
            [
                (
                    "min_date",
                    format_date(cfg.min_date),
                    _get_source("PICKER_MIN_DATE", cfg.min_date, default_config.min_date),
                ),
                (
                    "max_date",
                    format_date(cfg.max_date),
                    _get_source("PICKER_MAX_DATE", cfg.max_date, default_config.max_date),
                ),
                (
                    "disabled_weekdays",
                    format_weekdays(sorted(cfg.disabled_weekdays), formatter),
                    _get_source(
                        "PICKER_DISABLED_WEEKDAYS",
                        cfg.disabled_weekdays,
                        default_config.disabled_weekdays,
                    ),
                ),
                (
                    "disabled_months",
                    format_months(sorted(cfg.disabled_months), formatter),
                    _get_source(
                        "PICKER_DISABLED_MONTHS",
                        cfg.disabled_months,
                        default_config.disabled_months,
                    ),
                ),
            ],
        ),
        (
            "Logging",
            [
                (
                    "log_dir",
                    str(cfg.log_dir.resolve()),
                    _get_source("PICKER_LOG_DIR", cfg.log_dir, default_config.log_dir),
                ),
                (
                    "log_filename",
                    cfg.log_filename,
                    _get_source(
                        "PICKER_LOG_FILENAME", cfg.log_filename, default_config.log_filename
                    ),
                ),
            ],
        ),
    ]

    # Shared column widths across all sections
    all_rows = [row for _, rows in sections for row in rows]
    setting_width = max(max(len(row[0]) for row in all_rows), len("SETTING"))
    source_width = max(max(len(row[2]) for row in all_rows), len("SOURCE"))

    console.print()
    console.print("━" * 50)
    console.print("[bold]  Configuration[/bold]")
    console.print("━" * 50)

    console.print("\n[bold]Config File:[/bold]")
    if env_file:
        console.print(f"  [cyan]{env_file}[/cyan]")
    else:
        console.print("  [dim]Not found (using defaults and environment variables)[/dim]")

    for section_name, rows in sections:
        console.print(f"\n[bold]{section_name}:[/bold]")
        table = _create_table(setting_width, source_width)
        for setting, value, source in rows:
            table.add_row(setting, source, value)
        console.print(table)

    console.print()
