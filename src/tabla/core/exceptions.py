"""Exceptions for tabla."""

from __future__ import annotations

from typing import Any, Mapping, Optional


class TablaError(Exception):
    """
    Base exception for all tabla errors.

    Every error carries a stable machine-readable ``error_code`` and a mapping
    of free-form diagnostic ``attributes``. Attributes are kept sorted by key
    so that reports are reproducible.
    """

    error_code = "error"

    def __init__(self, message: str, attributes: Optional[Mapping[str, str]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.attributes: dict[str, str] = dict(sorted((attributes or {}).items()))

    def as_dict(self) -> dict[str, Any]:
        """Serialize for machine-readable error reports."""
        return {
            "error": self.error_code,
            "message": self.message,
            "attributes": dict(self.attributes),
        }


class TooManyCells(TablaError):  # noqa: N818
    """Raised when a row is given more cells than there are declared columns."""

    error_code = "error-too-many-cells"

    def __init__(self, maximum_cells: int) -> None:
        self.maximum_cells = maximum_cells
        super().__init__(
            "Too many cells for this row.",
            {"Maximum Cells": str(maximum_cells)},
        )


class TooFewCells(TablaError):  # noqa: N818
    """Raised at build time when a row holds fewer cells than declared columns."""

    error_code = "error-too-few-cells"

    def __init__(self, row_index: int, expected: int, received: int) -> None:
        self.row_index = row_index
        self.expected = expected
        self.received = received
        super().__init__(
            "Too few cells in row.",
            {
                "Row Index": str(row_index),
                "Expected Count": str(expected),
                "Received Count": str(received),
            },
        )


class ConstraintsUnsatisfiable(TablaError):  # noqa: N818
    """
    Raised when no column widths satisfy the declared constraints.

    The attributes describe each width variable's allowed range and chosen
    value, and whether each constraint was satisfied.
    """

    error_code = "error-constraints"

    def __init__(self, attributes: Mapping[str, str]) -> None:
        super().__init__("Unable to solve table constraints.", attributes)


class InputError(TablaError):
    """Raised when tabular input cannot be read or parsed."""

    error_code = "error-input"

    def __init__(self, message: str, path: str, line: Optional[int] = None) -> None:
        attributes = {"File": path}
        if line is not None:
            attributes["Line"] = str(line)
        super().__init__(message, attributes)
