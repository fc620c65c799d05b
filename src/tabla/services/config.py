"""
Run options for printing tables.

Options are validated with Pydantic. The default renderer can be overridden
with the ``TABLA_RENDERER`` environment variable.
"""

from __future__ import annotations

import os
from typing import Optional

from pydantic import BaseModel, Field, model_validator

from ..core.constraints import UNBOUNDED, ColumnWidthConstraint, TableWidthConstraint
from .renderers import Renderer

DEFAULT_RENDERER = Renderer.FRAMED_UNICODE
RENDERER_ENV_VAR = "TABLA_RENDERER"


def determine_default_renderer() -> Renderer:
    """Return the renderer named by ``TABLA_RENDERER``, or the built-in default."""
    override = os.environ.get(RENDERER_ENV_VAR)
    if not override:
        return DEFAULT_RENDERER
    try:
        return Renderer(override.strip().lower())
    except ValueError as exc:
        choices = ", ".join(renderer.value for renderer in Renderer)
        raise ValueError(
            f"{RENDERER_ENV_VAR} must be one of {choices} (got {override!r})"
        ) from exc


class PrintOptions(BaseModel):
    """Options controlling how a CSV file is printed as a table."""

    renderer: Renderer = Field(default_factory=determine_default_renderer)
    table_min_width: Optional[int] = Field(
        None, ge=0, le=UNBOUNDED, description="Minimum table width"
    )
    table_max_width: Optional[int] = Field(
        None, ge=0, le=UNBOUNDED, description="Maximum table width"
    )
    column_fit_content: bool = Field(
        False, description="Fit columns to their content instead of their headers"
    )

    @model_validator(mode="after")
    def validate_width_range(self) -> PrintOptions:
        if (
            self.table_min_width is not None
            and self.table_max_width is not None
            and self.table_min_width > self.table_max_width
        ):
            raise ValueError(
                f"Minimum table width {self.table_min_width} must be <= "
                f"maximum table width {self.table_max_width}"
            )
        return self

    def column_constraint(self) -> ColumnWidthConstraint:
        if self.column_fit_content:
            return ColumnWidthConstraint.at_least_content()
        return ColumnWidthConstraint.at_least_header()

    def width_constraint(self) -> TableWidthConstraint:
        if self.table_min_width is None and self.table_max_width is None:
            return TableWidthConstraint.any()
        return TableWidthConstraint.within_optional_range(
            self.table_min_width, self.table_max_width
        )
