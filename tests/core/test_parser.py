"""Tests for CSV record reading."""

import pytest

from tabla.core.exceptions import InputError
from tabla.core.parser import parse_records, read_records


def test_read_records_returns_header_first(inventory_csv):
    records = read_records(inventory_csv)

    assert records[0] == ["ID", "Name", "Description"]
    assert len(records) == 4
    assert records[3][1] == "Screen Cleaner"


def test_read_records_honours_quoting_and_skips_blank_lines(ragged_csv):
    records = read_records(ragged_csv)

    assert records == [
        ["Name", "Description", "Count"],
        ["Battery", "A 9v battery, boxed", "4"],
        ["HDMI 3m"],
        ["Screen Cleaner", 'Says "wipe gently"', "1", "extra"],
    ]


def test_parse_records_keeps_embedded_newlines():
    records = parse_records(['Name,Note\n', 'Widget,"two\n', 'lines"\n'])

    assert records == [["Name", "Note"], ["Widget", "two\nlines"]]


def test_read_records_missing_file(tmp_path):
    missing = tmp_path / "missing.csv"

    with pytest.raises(InputError) as excinfo:
        read_records(missing)

    assert excinfo.value.error_code == "error-input"
    assert excinfo.value.attributes["File"] == str(missing)


def test_read_records_rejects_invalid_utf8(tmp_path):
    sample = tmp_path / "latin1.csv"
    sample.write_bytes("Name\nCafé\n".encode("latin-1"))

    with pytest.raises(InputError, match="not valid UTF-8"):
        read_records(sample)


def test_read_records_empty_file(tmp_path):
    sample = tmp_path / "empty.csv"
    sample.write_text("", encoding="utf-8")

    assert read_records(sample) == []
