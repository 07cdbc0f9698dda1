"""Typer application and command routing."""

import logging

import typer
from typing_extensions import Annotated

from cli import setup_logging
from cli.commands import config, grid, keys, months, years
from cli.context import CLIContext, set_context

logger = logging.getLogger(__name__)

app = typer.Typer(
    help="Headless date picker engine: render month grids and replay keyboard input.",
    no_args_is_help=True,
    add_completion=False,
)


@app.callback()
def main_callback(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show info messages on the console"),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Only show errors on the console"),
    ] = False,
) -> None:
    """Set up logging and the shared command context."""
    ctx = CLIContext(verbose=verbose, quiet=quiet)
    setup_logging(verbose, quiet, ctx.config)
    set_context(ctx)
    logger.debug(f"CLI started (verbose={verbose}, quiet={quiet})")


app.command("grid")(grid)
app.command("months")(months)
app.command("years")(years)
app.command("keys")(keys)
app.command("config")(config)
