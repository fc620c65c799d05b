"""Renderer factory."""

from __future__ import annotations

from typing import TYPE_CHECKING

from . import Renderer
from .delimited import CSVRenderer
from .framed import ASCII_GLYPHS, UNICODE_GLYPHS, FramedRenderer

if TYPE_CHECKING:
    from . import TableRenderer


def get_renderer(renderer: Renderer) -> TableRenderer:
    """
    Get a renderer instance for the requested type.

    Raises:
        ValueError: If an unknown renderer is requested
    """
    if renderer == Renderer.CSV:
        return CSVRenderer()

    if renderer == Renderer.FRAMED_UNICODE:
        return FramedRenderer(UNICODE_GLYPHS)

    if renderer == Renderer.FRAMED_ASCII:
        return FramedRenderer(ASCII_GLYPHS)

    raise ValueError(f"Unknown renderer: {renderer}")
