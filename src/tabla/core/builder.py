"""
Mutable table builders.

A :class:`TableBuilder` accumulates column declarations and row values. The
expensive work (width resolution and text layout) happens once, in
:meth:`TableBuilder.build`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Tuple

from ..services.resolver import resolve_widths
from .constraints import ColumnWidthConstraint, TableWidthConstraint
from .exceptions import TooFewCells, TooManyCells
from .models import Cell, Column, Row, Table

logger = logging.getLogger(__name__)


@dataclass
class ColumnDeclaration:
    """Builder-side state for a declared column."""

    index: int
    name: str
    constraint: ColumnWidthConstraint
    maximum_content_length: int = 0

    def notify_content_length(self, length: int) -> None:
        self.maximum_content_length = max(self.maximum_content_length, length)


class RowBuilder:
    """Accumulates the cells of a single row."""

    def __init__(self, owner: TableBuilder) -> None:
        self._owner = owner
        self._cells: List[str] = []

    @property
    def cell_count(self) -> int:
        return len(self._cells)

    @property
    def cells(self) -> Tuple[str, ...]:
        return tuple(self._cells)

    def add_cell(self, content: str) -> RowBuilder:
        """
        Append a cell to the row.

        Leading and trailing whitespace is removed from ``content``.

        Raises:
            TooManyCells: If the row already has a cell for every declared column.
        """
        column_count = self._owner.column_count
        if len(self._cells) + 1 > column_count:
            raise TooManyCells(column_count)

        trimmed = content.strip()
        self._owner._notify_content_length(len(self._cells), len(trimmed))
        self._cells.append(trimmed)
        return self


class TableBuilder:
    """Build an immutable :class:`Table` from column declarations and rows."""

    def __init__(self) -> None:
        self._columns: List[ColumnDeclaration] = []
        self._rows: List[RowBuilder] = []
        self._width_constraint = TableWidthConstraint.any()

    @property
    def column_count(self) -> int:
        return len(self._columns)

    @property
    def row_count(self) -> int:
        return len(self._rows)

    @property
    def width_constraint(self) -> TableWidthConstraint:
        return self._width_constraint

    def declare_column(
        self,
        name: str,
        constraint: ColumnWidthConstraint | None = None,
    ) -> TableBuilder:
        """Declare a column; by default it is at least as wide as its header."""
        if constraint is None:
            constraint = ColumnWidthConstraint.at_least_header()
        self._columns.append(ColumnDeclaration(len(self._columns), name, constraint))
        return self

    def set_width_constraint(self, constraint: TableWidthConstraint) -> TableBuilder:
        self._width_constraint = constraint
        return self

    def add_row(self) -> RowBuilder:
        row = RowBuilder(self)
        self._rows.append(row)
        return row

    def _notify_content_length(self, index: int, length: int) -> None:
        self._columns[index].notify_content_length(length)

    def build(self) -> Table:
        """
        Resolve column widths, wrap every cell and return the finished table.

        Raises:
            ConstraintsUnsatisfiable: If no column widths satisfy the constraints.
            TooFewCells: If a row has fewer cells than there are columns.
        """
        logger.debug(
            "Building table with %d columns and %d rows", len(self._columns), len(self._rows)
        )
        resolution = resolve_widths(self._columns, self._width_constraint)
        widths = resolution.column_widths
        column_count = len(self._columns)

        columns = tuple(
            Column.create(declaration.name, width)
            for declaration, width in zip(self._columns, widths)
        )

        rows: List[Row] = []
        for row_index, row in enumerate(self._rows):
            if row.cell_count != column_count:
                raise TooFewCells(row_index, column_count, row.cell_count)
            rows.append(
                Row(tuple(Cell.create(width, text) for width, text in zip(widths, row.cells)))
            )

        table = Table(columns=columns, rows=tuple(rows))
        logger.debug("Built table with content width %d", table.content_width)
        return table


def builder() -> TableBuilder:
    """Create a new, empty table builder."""
    return TableBuilder()
