"""
Command-line interface for tabla.

Provides the CLI command group and registers individual subcommands.
"""

from __future__ import annotations

import click

from .. import __version__
from .print_csv import print_csv
from .utils import LOG_LEVELS, configure_logging


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--verbose",
    type=click.Choice(list(LOG_LEVELS), case_sensitive=False),
    default="info",
    show_default=True,
    help="Set the logging level.",
)
def main(verbose):
    """Tabla - Render CSV data as fixed-width tables."""
    configure_logging(verbose)


# Register CLI subcommands
main.add_command(print_csv)


if __name__ == "__main__":
    main()
