"""Services for resolving, laying out and rendering tables."""

from .layout import hyphenate, wrap_text
from .renderers import Renderer, TableRenderer, render_table
from .resolver import ColumnBounds, Resolution, resolve_widths

__all__ = [
    "hyphenate",
    "wrap_text",
    "Renderer",
    "TableRenderer",
    "render_table",
    "ColumnBounds",
    "Resolution",
    "resolve_widths",
]
