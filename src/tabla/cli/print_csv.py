"""
print-csv command for the tabla CLI.

Reads a CSV file and prints its contents as a table.
"""

from __future__ import annotations

import logging
from typing import Optional

import click
from pydantic import ValidationError

from ..core.exceptions import TablaError
from ..core.parser import read_records
from ..services.config import PrintOptions, determine_default_renderer
from ..services.records import table_from_records
from ..services.renderers import Renderer, render_table
from .utils import report_error

logger = logging.getLogger(__name__)

RendererChoice = click.Choice([renderer.value for renderer in Renderer], case_sensitive=False)


def _default_renderer() -> str:
    try:
        return determine_default_renderer().value
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="'--renderer'") from exc


@click.command("print-csv")
@click.option(
    "--input",
    "input_file",
    type=click.Path(exists=True, dir_okay=False),
    required=True,
    help="The input CSV file.",
)
@click.option(
    "--renderer",
    type=RendererChoice,
    default=_default_renderer,
    show_default="framed-unicode",
    help="The table renderer.",
)
@click.option("--table-min-width", type=int, default=None, help="The minimum table width.")
@click.option("--table-max-width", type=int, default=None, help="The maximum table width.")
@click.option(
    "--column-fit-content/--column-fit-header",
    default=False,
    show_default=True,
    help="Fit column widths to row content rather than header text.",
)
def print_csv(
    input_file: str,
    renderer: str,
    table_min_width: Optional[int],
    table_max_width: Optional[int],
    column_fit_content: bool,
) -> None:
    """Print the contents of a CSV file as a table."""
    try:
        options = PrintOptions(
            renderer=Renderer(renderer.lower()),
            table_min_width=table_min_width,
            table_max_width=table_max_width,
            column_fit_content=column_fit_content,
        )
    except ValidationError as exc:
        messages = "; ".join(error["msg"] for error in exc.errors())
        raise click.BadParameter(messages) from exc

    try:
        records = read_records(input_file)
        logger.debug("Read %d records from %s", len(records), input_file)
        table = table_from_records(
            records,
            column_constraint=options.column_constraint(),
            width_constraint=options.width_constraint(),
        )
    except TablaError as exc:
        report_error(exc)
        raise click.Abort() from exc

    if table is None:
        logger.debug("%s contains no records", input_file)
        return

    for line in render_table(table, options.renderer):
        click.echo(line)
