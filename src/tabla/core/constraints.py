"""
Width constraints for table columns and whole tables.

Column constraints pair a minimum policy with a maximum policy. Table
constraints are either unconstrained or an inclusive range with a hardness
flag.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

# Upper bound used for "no maximum"; sums of column maxima saturate here.
UNBOUNDED = 21_474_836


def _check_size(size: int, label: str) -> None:
    if size < 0:
        raise ValueError(f"{label} must be non-negative (got {size})")
    if size > UNBOUNDED:
        raise ValueError(f"{label} must be at most {UNBOUNDED} (got {size})")


class MinimumKind(Enum):
    """Policy used to derive a column's minimum width."""

    ANY = "any"
    FIT_HEADER = "fit-header"
    FIT_CONTENT = "fit-content"
    AT_LEAST = "at-least"


class MaximumKind(Enum):
    """Policy used to derive a column's maximum width."""

    ANY = "any"
    AT_MOST = "at-most"


class ConstraintHardness(Enum):
    """Whether a table width range must hold or is only advisory."""

    HARD = "hard"
    SOFT = "soft"


class TableWidthKind(Enum):
    ANY = "any"
    RANGE = "range"


@dataclass(frozen=True)
class ColumnMinimum:
    """The minimum half of a column constraint.

    ``size`` is only meaningful for ``MinimumKind.AT_LEAST``.
    """

    kind: MinimumKind
    size: int = 0

    def __post_init__(self) -> None:
        _check_size(self.size, "Minimum column width")

    @classmethod
    def any(cls) -> ColumnMinimum:
        return cls(MinimumKind.ANY)

    @classmethod
    def fit_header(cls) -> ColumnMinimum:
        return cls(MinimumKind.FIT_HEADER)

    @classmethod
    def fit_content(cls) -> ColumnMinimum:
        return cls(MinimumKind.FIT_CONTENT)

    @classmethod
    def at_least(cls, size: int) -> ColumnMinimum:
        return cls(MinimumKind.AT_LEAST, size)


@dataclass(frozen=True)
class ColumnMaximum:
    """The maximum half of a column constraint.

    ``size`` is only meaningful for ``MaximumKind.AT_MOST``.
    """

    kind: MaximumKind
    size: int = UNBOUNDED

    def __post_init__(self) -> None:
        _check_size(self.size, "Maximum column width")

    @classmethod
    def any(cls) -> ColumnMaximum:
        return cls(MaximumKind.ANY)

    @classmethod
    def at_most(cls, size: int) -> ColumnMaximum:
        return cls(MaximumKind.AT_MOST, size)


@dataclass(frozen=True)
class ColumnWidthConstraint:
    """The constraints on the width of a single table column."""

    minimum: ColumnMinimum
    maximum: ColumnMaximum

    @classmethod
    def any(cls) -> ColumnWidthConstraint:
        """A column that may be any width, including zero."""
        return cls(ColumnMinimum.any(), ColumnMaximum.any())

    @classmethod
    def at_least_header(cls) -> ColumnWidthConstraint:
        """A column at least as wide as its header text."""
        return cls(ColumnMinimum.fit_header(), ColumnMaximum.any())

    @classmethod
    def at_least_content(cls) -> ColumnWidthConstraint:
        """A column at least as wide as the longest value in any of its rows."""
        return cls(ColumnMinimum.fit_content(), ColumnMaximum.any())

    @classmethod
    def exact_width(cls, width: int) -> ColumnWidthConstraint:
        """A column exactly ``width`` characters wide."""
        return cls(ColumnMinimum.at_least(width), ColumnMaximum.at_most(width))


@dataclass(frozen=True)
class TableWidthConstraint:
    """
    The constraint on the total content width of a table.

    ``TableWidthKind.ANY`` leaves the width unconstrained. ``TableWidthKind.RANGE``
    requires the width to fall within ``[minimum, maximum]``; a ``SOFT`` range is
    advisory and never influences resolution.
    """

    kind: TableWidthKind
    minimum: int = 0
    maximum: int = UNBOUNDED
    hardness: ConstraintHardness = ConstraintHardness.HARD

    def __post_init__(self) -> None:
        _check_size(self.minimum, "Minimum table width")
        _check_size(self.maximum, "Maximum table width")
        if self.minimum > self.maximum:
            raise ValueError(
                f"Minimum size {self.minimum} must be <= Maximum size {self.maximum}"
            )

    @property
    def is_hard(self) -> bool:
        return self.kind == TableWidthKind.RANGE and self.hardness == ConstraintHardness.HARD

    @classmethod
    def any(cls) -> TableWidthConstraint:
        return cls(TableWidthKind.ANY)

    @classmethod
    def within_range(
        cls,
        minimum: int,
        maximum: int,
        hardness: ConstraintHardness = ConstraintHardness.HARD,
    ) -> TableWidthConstraint:
        return cls(TableWidthKind.RANGE, minimum, maximum, hardness)

    @classmethod
    def within_optional_range(
        cls,
        minimum: Optional[int],
        maximum: Optional[int],
        hardness: ConstraintHardness = ConstraintHardness.HARD,
    ) -> TableWidthConstraint:
        """Build a range where a missing minimum is 0 and a missing maximum is unbounded."""
        return cls.within_range(
            0 if minimum is None else minimum,
            UNBOUNDED if maximum is None else maximum,
            hardness,
        )

    @classmethod
    def at_most(
        cls, maximum: int, hardness: ConstraintHardness = ConstraintHardness.HARD
    ) -> TableWidthConstraint:
        return cls.within_range(0, maximum, hardness)

    @classmethod
    def exact(
        cls, size: int, hardness: ConstraintHardness = ConstraintHardness.HARD
    ) -> TableWidthConstraint:
        return cls.within_range(size, size, hardness)
