"""
CSV input for tabla.

Records are read with the standard library CSV reader. The first record holds
the column names and each following record holds the values of one row.
"""

from __future__ import annotations

import csv
from pathlib import Path
from typing import Iterable, List, Union

from .exceptions import InputError

Record = List[str]


def _row_is_blank(record: Record) -> bool:
    return not record


def parse_records(lines: Iterable[str], source: str = "<input>") -> List[Record]:
    """
    Split CSV text into records.

    Blank lines are skipped. Fields are returned exactly as the CSV reader
    produced them; trimming happens later, when cells are added to a table.

    Raises:
        InputError: If the text is not valid CSV.
    """
    reader = csv.reader(lines)
    records: List[Record] = []
    try:
        for record in reader:
            if _row_is_blank(record):
                continue
            records.append(record)
    except csv.Error as exc:
        raise InputError(f"Malformed CSV: {exc}", source, reader.line_num) from exc
    return records


def read_records(path: Union[str, Path]) -> List[Record]:
    """
    Read all records from a UTF-8 encoded CSV file.

    Raises:
        InputError: If the file cannot be opened, decoded or parsed.
    """
    source = str(path)
    try:
        with open(path, "r", encoding="utf-8", newline="") as handle:
            return parse_records(handle, source)
    except UnicodeDecodeError as exc:
        raise InputError(f"File is not valid UTF-8: {exc.reason}", source) from exc
    except OSError as exc:
        raise InputError(f"Unable to read file: {exc.strerror or exc}", source) from exc
