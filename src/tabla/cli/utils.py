"""Shared CLI helpers: logging setup and error reporting."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..core.exceptions import TablaError

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

LOG_LEVELS = {
    "error": logging.ERROR,
    "warn": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
}


def configure_logging(verbosity: str) -> None:
    """Send tabla log records at or above ``verbosity`` to stderr."""
    level = LOG_LEVELS[verbosity.lower()]
    logger = logging.getLogger("tabla")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False


def build_error_table(error: TablaError) -> Table:
    """Create the Rich table listing an error's diagnostic attributes."""
    table = Table(title=escape(f"{error.message} ({error.error_code})"))
    table.add_column("Attribute", style="cyan", no_wrap=True)
    table.add_column("Value", style="yellow")

    for name, value in error.attributes.items():
        table.add_row(escape(name), escape(value))

    return table


def report_error(error: TablaError, console: Console | None = None) -> None:
    """Print an error and its attributes to stderr."""
    console = console or Console(stderr=True)
    console.print(f"[red]Error: {escape(error.message)}[/red]", highlight=False)
    if error.attributes:
        console.print(build_error_table(error))
