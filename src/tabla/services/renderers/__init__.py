"""
Renderers that turn a built table into lines of text.

Three strategies are provided:
- CSV: every field quoted, one line per row (raw, unwrapped content)
- FRAMED_UNICODE: wrapped content framed with box-drawing characters
- FRAMED_ASCII: wrapped content framed with ``+``, ``-`` and ``|``

Example:
    from tabla.services.renderers import Renderer, render_table

    for line in render_table(table, Renderer.FRAMED_ASCII):
        print(line)
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, List, Protocol

if TYPE_CHECKING:
    from ...core.models import Table


class Renderer(Enum):
    """Available table renderers."""

    CSV = "csv"
    FRAMED_UNICODE = "framed-unicode"
    FRAMED_ASCII = "framed-ascii"


class TableRenderer(Protocol):
    """Protocol for table renderers."""

    def render_lines(self, table: Table) -> List[str]:
        """
        Render a table.

        Args:
            table: A built table

        Returns:
            Complete lines of text, without line terminators
        """
        ...


def render_table(table: Table, renderer: Renderer = Renderer.FRAMED_UNICODE) -> List[str]:
    """Render ``table`` with the requested renderer."""
    from .factory import get_renderer

    return get_renderer(renderer).render_lines(table)


__all__ = ["Renderer", "TableRenderer", "render_table"]
