"""Core data models, constraints and table building."""

from .constraints import ColumnWidthConstraint, TableWidthConstraint
from .exceptions import TablaError
from .models import Table
from .parser import read_records

__all__ = ["ColumnWidthConstraint", "TableWidthConstraint", "TablaError", "Table", "read_records"]
