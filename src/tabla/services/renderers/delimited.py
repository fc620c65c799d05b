"""CSV rendering of raw table content."""

from __future__ import annotations

import csv
import io
from typing import TYPE_CHECKING, Iterable, List

if TYPE_CHECKING:
    from ...core.models import Table


def format_record(fields: Iterable[str]) -> str:
    """Quote every field and join the fields with commas."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="")
    writer.writerow(fields)
    return buffer.getvalue()


class CSVRenderer:
    """Render a header line plus one line per row, using raw (unwrapped) content."""

    def render_lines(self, table: Table) -> List[str]:
        if table.column_count == 0:
            return []

        lines = [format_record(column.name for column in table.columns)]
        for row in table.rows:
            lines.append(format_record(cell.content for cell in row.cells))
        return lines
