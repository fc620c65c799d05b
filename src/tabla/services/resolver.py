"""
Column width resolution.

The constraint system is a single linear equality (the column widths sum to
the table width) over bounded integer variables, with one hardness flag for
the table range. It is solved directly:

1. Every column gets a lower and upper bound from its constraint.
2. Unconstrained and soft tables take every column at its lower bound.
3. Hard tables pick the smallest feasible table width and hand the surplus
   over the summed lower bounds to columns in declaration order, each column
   taking as much as its upper bound allows before the next one is considered.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict, List, Optional, Sequence, Tuple

from ..core.constraints import (
    UNBOUNDED,
    ColumnMaximum,
    MaximumKind,
    MinimumKind,
    TableWidthConstraint,
)
from ..core.exceptions import ConstraintsUnsatisfiable

if TYPE_CHECKING:
    from ..core.builder import ColumnDeclaration

logger = logging.getLogger(__name__)

INDETERMINATE = "<indeterminate>"
SUM_CONSTRAINT_NAME = "TableColumnWidthsSum = TableWidth"


@dataclass(frozen=True)
class ColumnBounds:
    """Concrete inclusive width bounds for one column."""

    index: int
    lower: int
    upper: int

    @property
    def is_consistent(self) -> bool:
        return self.lower <= self.upper

    @property
    def slack(self) -> int:
        return self.upper - self.lower


@dataclass(frozen=True)
class Resolution:
    """Resolved widths for every column and for the table as a whole."""

    column_widths: Tuple[int, ...]
    table_width: int


def minimum_of(declaration: ColumnDeclaration) -> int:
    """Lower width bound for a declared column, given the content seen so far."""
    minimum = declaration.constraint.minimum
    if minimum.kind == MinimumKind.ANY:
        return 0
    if minimum.kind == MinimumKind.FIT_HEADER:
        return len(declaration.name)
    if minimum.kind == MinimumKind.FIT_CONTENT:
        return declaration.maximum_content_length
    if minimum.kind == MinimumKind.AT_LEAST:
        return minimum.size
    raise ValueError(f"Unknown minimum width policy: {minimum.kind}")


def maximum_of(maximum: ColumnMaximum) -> int:
    """Upper width bound for a column maximum policy."""
    if maximum.kind == MaximumKind.ANY:
        return UNBOUNDED
    if maximum.kind == MaximumKind.AT_MOST:
        return maximum.size
    raise ValueError(f"Unknown maximum width policy: {maximum.kind}")


def column_bounds(declaration: ColumnDeclaration) -> ColumnBounds:
    return ColumnBounds(
        index=declaration.index,
        lower=minimum_of(declaration),
        upper=maximum_of(declaration.constraint.maximum),
    )


def _describe_range(lower: int, upper: int, chosen: Optional[int] = None) -> str:
    chosen_text = INDETERMINATE if chosen is None else str(chosen)
    return f"Allowed Range [{lower}, {upper}], Chosen Value ({chosen_text})"


def _unsatisfiable(
    bounds: Sequence[ColumnBounds],
    table_constraint: TableWidthConstraint,
    sum_status: str,
) -> ConstraintsUnsatisfiable:
    attributes: Dict[str, str] = {}
    for bound in bounds:
        name = f"ColumnWidth[{bound.index}]"
        attributes[f"Variable[{name}]"] = _describe_range(bound.lower, bound.upper)
        attributes[f"Constraint[{name} Bounds]"] = "TRUE" if bound.is_consistent else "FALSE"

    sum_lower = sum(bound.lower for bound in bounds)
    sum_upper = min(sum(bound.upper for bound in bounds), UNBOUNDED)
    attributes["Variable[TableColumnWidthsSum]"] = _describe_range(sum_lower, sum_upper)
    attributes["Variable[TableWidth]"] = _describe_range(
        table_constraint.minimum, table_constraint.maximum
    )
    attributes[f"Constraint[{SUM_CONSTRAINT_NAME}]"] = sum_status
    attributes["Table Width Hardness"] = table_constraint.hardness.value

    logger.debug("Width constraints unsatisfiable: %s", attributes)
    return ConstraintsUnsatisfiable(attributes)


def resolve_widths(
    columns: Sequence[ColumnDeclaration],
    table_constraint: TableWidthConstraint,
) -> Resolution:
    """
    Assign a concrete width to every column.

    Args:
        columns: Column declarations in declaration order, with their observed
            maximum content lengths.
        table_constraint: The constraint on the sum of the column widths.

    Returns:
        The resolved column widths and table width.

    Raises:
        ConstraintsUnsatisfiable: If a column's bounds are inverted, or a hard
            table range cannot be met by any assignment.
    """
    bounds = [column_bounds(column) for column in columns]
    for bound in bounds:
        logger.debug("Column %d width bounds [%d, %d]", bound.index, bound.lower, bound.upper)

    if not all(bound.is_consistent for bound in bounds):
        raise _unsatisfiable(bounds, table_constraint, "UNDEFINED")

    lower_widths = [bound.lower for bound in bounds]
    sum_lower = sum(lower_widths)
    sum_upper = min(sum(bound.upper for bound in bounds), UNBOUNDED)

    if not table_constraint.is_hard:
        logger.debug("Resolved column widths %s (table width %d)", lower_widths, sum_lower)
        return Resolution(column_widths=tuple(lower_widths), table_width=sum_lower)

    target = max(table_constraint.minimum, sum_lower)
    if target > min(table_constraint.maximum, sum_upper):
        raise _unsatisfiable(bounds, table_constraint, "FALSE")

    surplus = target - sum_lower
    widths: List[int] = []
    for bound in bounds:
        extra = min(surplus, bound.slack)
        widths.append(bound.lower + extra)
        surplus -= extra

    logger.debug("Resolved column widths %s (table width %d)", widths, target)
    return Resolution(column_widths=tuple(widths), table_width=target)
