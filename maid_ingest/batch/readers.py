"""
Row readers for upload files (JSON and CSV).

Readers only parse the file; every value is passed on untouched for the
profile validator to judge.
"""

import csv
import json
from pathlib import Path
from typing import Any

# CSV cells for these columns hold several values separated by LIST_SEPARATOR
LIST_COLUMNS = ("skills", "languages", "previousCountries", "preferredCountries")
LIST_SEPARATOR = ";"


def read_json_rows(file_path: str | Path) -> list[Any]:
    """
    Read a JSON file holding an array of row objects.

    Raises:
        ValueError: If the file does not hold a JSON array
    """
    with open(file_path, encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, list):
        raise ValueError(f"Expected a JSON array of rows in {file_path}")
    return data


def read_csv_rows(file_path: str | Path, delimiter: str = ",") -> list[dict[str, Any]]:
    """
    Read a CSV file with a header row into row dicts.

    Empty cells are dropped so that they count as absent fields; list
    columns are split on ``;``.
    """
    rows = []
    with open(file_path, newline="", encoding="utf-8-sig") as f:
        for record in csv.DictReader(f, delimiter=delimiter):
            row: dict[str, Any] = {}
            for key, value in record.items():
                if key is None or value is None or value.strip() == "":
                    continue
                key = key.strip()
                if key in LIST_COLUMNS:
                    row[key] = [item.strip() for item in value.split(LIST_SEPARATOR) if item.strip()]
                else:
                    row[key] = value.strip()
            rows.append(row)
    return rows


def read_rows(file_path: str | Path, file_format: str | None = None) -> list[Any]:
    """
    Read upload rows, picking the format from the file extension by default.

    Args:
        file_path: Path to input file
        file_format: "json" or "csv" (inferred from the suffix when None)

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the format is unsupported
    """
    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"Input file not found: {file_path}")

    file_format = (file_format or path.suffix.lstrip(".")).lower()
    if file_format == "json":
        return read_json_rows(path)
    if file_format == "csv":
        return read_csv_rows(path)
    raise ValueError(f"Unsupported file format: {file_format}")
