"""
Framed table rendering.

Example output (ASCII glyphs):
    +----+--------+
    | ID | Name   |
    +----+--------+
    | 1  | Widget |
    +----+--------+
    | 2  | Gadget |
    +----+--------+

Each column occupies a frame character, one space of padding, the column
width and another space of padding. Junction glyphs in horizontal frames are
placed at the absolute character offsets of those column boundaries.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Dict, FrozenSet, List, Mapping, Tuple

if TYPE_CHECKING:
    from ...core.models import Row, Table


class FramePiece(Enum):
    CORNER_BOTTOM_LEFT = "corner-bottom-left"
    CORNER_BOTTOM_RIGHT = "corner-bottom-right"
    CORNER_TOP_LEFT = "corner-top-left"
    CORNER_TOP_RIGHT = "corner-top-right"
    EDGE_LEFT = "edge-left"
    EDGE_RIGHT = "edge-right"
    EDGE_HORIZONTAL = "edge-horizontal"
    JUNCTION_CROSS = "junction-cross"
    JUNCTION_UP_DOWN_RIGHT = "junction-up-down-right"
    JUNCTION_UP_DOWN_LEFT = "junction-up-down-left"
    JUNCTION_LEFT_RIGHT_UP = "junction-left-right-up"
    JUNCTION_LEFT_RIGHT_DOWN = "junction-left-right-down"


UNICODE_GLYPHS: Dict[FramePiece, str] = {
    FramePiece.CORNER_BOTTOM_LEFT: "└",
    FramePiece.CORNER_BOTTOM_RIGHT: "┘",
    FramePiece.CORNER_TOP_LEFT: "┌",
    FramePiece.CORNER_TOP_RIGHT: "┐",
    FramePiece.EDGE_LEFT: "│",
    FramePiece.EDGE_RIGHT: "│",
    FramePiece.EDGE_HORIZONTAL: "─",
    FramePiece.JUNCTION_CROSS: "┼",
    FramePiece.JUNCTION_UP_DOWN_RIGHT: "├",
    FramePiece.JUNCTION_UP_DOWN_LEFT: "┤",
    FramePiece.JUNCTION_LEFT_RIGHT_UP: "┴",
    FramePiece.JUNCTION_LEFT_RIGHT_DOWN: "┬",
}

ASCII_GLYPHS: Dict[FramePiece, str] = {
    FramePiece.CORNER_BOTTOM_LEFT: "+",
    FramePiece.CORNER_BOTTOM_RIGHT: "+",
    FramePiece.CORNER_TOP_LEFT: "+",
    FramePiece.CORNER_TOP_RIGHT: "+",
    FramePiece.EDGE_LEFT: "|",
    FramePiece.EDGE_RIGHT: "|",
    FramePiece.EDGE_HORIZONTAL: "-",
    FramePiece.JUNCTION_CROSS: "+",
    FramePiece.JUNCTION_UP_DOWN_RIGHT: "+",
    FramePiece.JUNCTION_UP_DOWN_LEFT: "+",
    FramePiece.JUNCTION_LEFT_RIGHT_UP: "+",
    FramePiece.JUNCTION_LEFT_RIGHT_DOWN: "+",
}


def column_boundaries(table: Table) -> Tuple[FrozenSet[int], int]:
    """
    Compute the offsets at which each column's frame starts, and the framed width.

    The framed width includes the closing frame character.
    """
    boundaries = set()
    offset = 0
    for column in table.columns:
        boundaries.add(offset)
        # frame, padding, content, padding
        offset += 1 + 1 + column.width + 1
    return frozenset(boundaries), offset + 1


class FramedRenderer:
    """Render a table surrounded by a frame drawn with the given glyphs."""

    def __init__(self, glyphs: Mapping[FramePiece, str]) -> None:
        missing = set(FramePiece) - set(glyphs)
        if missing:
            raise ValueError(f"Missing frame glyphs: {sorted(piece.value for piece in missing)}")
        self._glyphs = dict(glyphs)

    def _glyph(self, piece: FramePiece) -> str:
        return self._glyphs[piece]

    def render_lines(self, table: Table) -> List[str]:
        if table.column_count == 0:
            return []

        boundaries, framed_width = column_boundaries(table)

        lines = [
            self._render_frame(
                boundaries,
                framed_width,
                FramePiece.CORNER_TOP_LEFT,
                FramePiece.JUNCTION_LEFT_RIGHT_DOWN,
                FramePiece.CORNER_TOP_RIGHT,
            ),
            self._render_header(table),
        ]

        if table.row_count == 0:
            lines.append(self._render_bottom(boundaries, framed_width))
            return lines

        middle = self._render_frame(
            boundaries,
            framed_width,
            FramePiece.JUNCTION_UP_DOWN_RIGHT,
            FramePiece.JUNCTION_CROSS,
            FramePiece.JUNCTION_UP_DOWN_LEFT,
        )
        lines.append(middle)

        for row_index, row in enumerate(table.rows):
            for row_line in range(row.height):
                lines.append(self._render_row_line(table, row, row_line))
            if row_index + 1 < table.row_count:
                lines.append(middle)

        lines.append(self._render_bottom(boundaries, framed_width))
        return lines

    def _render_bottom(self, boundaries: FrozenSet[int], framed_width: int) -> str:
        return self._render_frame(
            boundaries,
            framed_width,
            FramePiece.CORNER_BOTTOM_LEFT,
            FramePiece.JUNCTION_LEFT_RIGHT_UP,
            FramePiece.CORNER_BOTTOM_RIGHT,
        )

    def _render_frame(
        self,
        boundaries: FrozenSet[int],
        framed_width: int,
        left: FramePiece,
        junction: FramePiece,
        right: FramePiece,
    ) -> str:
        pieces: List[str] = []
        for offset in range(framed_width):
            if offset == 0:
                pieces.append(self._glyph(left))
            elif offset + 1 == framed_width:
                pieces.append(self._glyph(right))
            elif offset in boundaries:
                pieces.append(self._glyph(junction))
            else:
                pieces.append(self._glyph(FramePiece.EDGE_HORIZONTAL))
        return "".join(pieces)

    def _render_header(self, table: Table) -> str:
        pieces: List[str] = []
        for column in table.columns:
            pieces.append(self._glyph(FramePiece.EDGE_LEFT))
            pieces.append(f" {column.header_formatted} ")
        pieces.append(self._glyph(FramePiece.EDGE_RIGHT))
        return "".join(pieces)

    def _render_row_line(self, table: Table, row: Row, row_line: int) -> str:
        pieces: List[str] = []
        for column, cell in zip(table.columns, row.cells):
            pieces.append(self._glyph(FramePiece.EDGE_LEFT))
            text = cell.lines[row_line] if row_line < cell.height else ""
            pieces.append(f" {text.ljust(column.width)} ")
        pieces.append(self._glyph(FramePiece.EDGE_RIGHT))
        return "".join(pieces)
