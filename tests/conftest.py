"""Pytest configuration and fixtures."""

from pathlib import Path

import pytest

from tabla.core.builder import TableBuilder
from tabla.core.constraints import ColumnWidthConstraint
from tabla.services import config as config_module

INVENTORY_ROWS = [
    ("af6b0d4f-383a-4d3a-807f-8cf53b64dfa8", "Battery", "A 9v battery."),
    ("abec6b1f-4fe7-4ddf-9c13-053575cd6a87", "HDMI 3m", "A 3m HDMI cable."),
    ("10542a71-bf3d-48d4-99e0-70f2fb5e4131", "Screen Cleaner", "A bottle of isopropyl alcohol."),
]


@pytest.fixture(autouse=True)
def isolated_renderer_env(monkeypatch):
    """Ensure a renderer override in the developer's environment never leaks into tests."""
    monkeypatch.delenv(config_module.RENDERER_ENV_VAR, raising=False)


@pytest.fixture
def inventory_csv():
    """Path to the sample inventory CSV."""
    return Path(__file__).parent / "fixtures" / "inventory.csv"


@pytest.fixture
def ragged_csv():
    """Path to a CSV whose rows do not all match the header length."""
    return Path(__file__).parent / "fixtures" / "ragged.csv"


@pytest.fixture
def inventory_builder():
    """Factory producing a builder pre-loaded with the inventory rows."""

    def _make(constraint: ColumnWidthConstraint) -> TableBuilder:
        builder = TableBuilder()
        for name in ("ID", "Name", "Description"):
            builder.declare_column(name, constraint)
        for values in INVENTORY_ROWS:
            row = builder.add_row()
            for value in values:
                row.add_cell(value)
        return builder

    return _make
