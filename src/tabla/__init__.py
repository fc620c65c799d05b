"""
Tabla - Constrained fixed-width table rendering.

A Python package for laying out rows of text under column and table width
constraints, and rendering them as CSV or framed text.
"""

__version__ = "1.0.0"

# Import main components for easy access
from .core.builder import RowBuilder, TableBuilder, builder
from .core.constraints import (
    UNBOUNDED,
    ColumnMaximum,
    ColumnMinimum,
    ColumnWidthConstraint,
    ConstraintHardness,
    MaximumKind,
    MinimumKind,
    TableWidthConstraint,
    TableWidthKind,
)
from .core.exceptions import (
    ConstraintsUnsatisfiable,
    InputError,
    TablaError,
    TooFewCells,
    TooManyCells,
)
from .core.models import Cell, Column, Row, Table
from .services.layout import wrap_text
from .services.renderers import Renderer, render_table
from .services.renderers.factory import get_renderer

__all__ = [
    "UNBOUNDED",
    "builder",
    "TableBuilder",
    "RowBuilder",
    "ColumnMinimum",
    "ColumnMaximum",
    "ColumnWidthConstraint",
    "ConstraintHardness",
    "MinimumKind",
    "MaximumKind",
    "TableWidthConstraint",
    "TableWidthKind",
    "TablaError",
    "TooManyCells",
    "TooFewCells",
    "ConstraintsUnsatisfiable",
    "InputError",
    "Cell",
    "Column",
    "Row",
    "Table",
    "wrap_text",
    "Renderer",
    "render_table",
    "get_renderer",
]
