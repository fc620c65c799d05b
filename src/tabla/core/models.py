"""
Immutable table model.

Tables are produced by :class:`tabla.core.builder.TableBuilder` and are never
mutated afterwards, so a built table can be shared freely.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from ..services.layout import wrap_text


@dataclass(frozen=True)
class Cell:
    """A cell's trimmed content together with its wrapped display lines."""

    content: str
    lines: Tuple[str, ...]

    @classmethod
    def create(cls, width: int, content: str) -> Cell:
        return cls(content=content, lines=wrap_text(width, content))

    @property
    def height(self) -> int:
        return len(self.lines)


@dataclass(frozen=True)
class Column:
    """A column with its resolved width."""

    name: str
    width: int
    header: Cell

    @classmethod
    def create(cls, name: str, width: int) -> Column:
        return cls(name=name, width=width, header=Cell.create(width, name))

    @property
    def header_formatted(self) -> str:
        """The header as a single display line of exactly ``width`` characters."""
        return self.header.lines[0]


@dataclass(frozen=True)
class Row:
    """One cell per column."""

    cells: Tuple[Cell, ...]

    @property
    def height(self) -> int:
        """Number of display lines needed by the tallest cell."""
        return max((cell.height for cell in self.cells), default=0)

    def cell_content_raw(self, index: int) -> str:
        return self.cells[index].content

    def cell_content_formatted(self, index: int) -> Tuple[str, ...]:
        return self.cells[index].lines


@dataclass(frozen=True)
class Table:
    """A table whose column widths have been resolved and whose cells have been wrapped."""

    columns: Tuple[Column, ...]
    rows: Tuple[Row, ...]

    @property
    def content_width(self) -> int:
        """Sum of the column widths, excluding any frame or padding."""
        return sum(column.width for column in self.columns)

    @property
    def column_count(self) -> int:
        return len(self.columns)

    @property
    def row_count(self) -> int:
        return len(self.rows)

    def column_of(self, index: int) -> Column:
        return self.columns[index]

    def row_of(self, index: int) -> Row:
        return self.rows[index]
