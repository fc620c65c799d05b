"""Build tables from parsed CSV records."""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..core.builder import TableBuilder
from ..core.constraints import ColumnWidthConstraint, TableWidthConstraint
from ..core.models import Table

logger = logging.getLogger(__name__)


def table_from_records(
    records: Sequence[Sequence[str]],
    *,
    column_constraint: Optional[ColumnWidthConstraint] = None,
    width_constraint: Optional[TableWidthConstraint] = None,
) -> Optional[Table]:
    """
    Build a table whose header is the first record and whose rows are the rest.

    Rows longer than the header are truncated and shorter rows are padded with
    empty cells, so every row matches the column count.

    Args:
        records: Parsed records, header first.
        column_constraint: Constraint applied to every column; defaults to
            fitting the header text.
        width_constraint: Constraint on the table width; defaults to
            unconstrained.

    Returns:
        The built table, or ``None`` when there are no records at all.
    """
    if not records:
        return None

    if column_constraint is None:
        column_constraint = ColumnWidthConstraint.at_least_header()

    builder = TableBuilder()
    if width_constraint is not None:
        builder.set_width_constraint(width_constraint)

    header = records[0]
    column_count = len(header)
    for name in header:
        builder.declare_column(name, column_constraint)

    for record_number, record in enumerate(records[1:], start=2):
        if len(record) != column_count:
            logger.debug(
                "Record %d has %d fields, expected %d", record_number, len(record), column_count
            )
        row = builder.add_row()
        for value in record[:column_count]:
            row.add_cell(value)
        for _ in range(column_count - len(record)):
            row.add_cell("")

    return builder.build()
