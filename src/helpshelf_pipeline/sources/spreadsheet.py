"""
sources/spreadsheet.py - Approved-resources spreadsheet export (CSV).

The curation sheet is exported from Google Sheets as CSV and saved at
settings.csv_path. Column names are matched case-insensitively against
SPREADSHEET_COLUMNS; a missing column reads as empty for every row.

Usage:
    from helpshelf_pipeline.sources.spreadsheet import SpreadsheetSource

    source = SpreadsheetSource()
    df = source.run(csv_path=Path("data/approved.csv"))
    print(source.filter_stats.kept)
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import polars as pl

from helpshelf_shared.config import settings
from helpshelf_shared.constants import SPREADSHEET_COLUMNS

from helpshelf_pipeline.errors import BuildDataError
from helpshelf_pipeline.sources.base import BaseSource
from helpshelf_pipeline.sources.csv_text import tokenize
from helpshelf_pipeline.transforms.normalize import (
    FilterStats,
    assign_ids,
    clean_string_columns,
    derive_fields,
    filter_rows,
    select_resource_columns,
    sort_resources,
)


def column_index(headers: list[str], name: str) -> int:
    """Index of the first header equal to name (case-insensitive), or -1."""
    wanted = name.lower()
    for i, header in enumerate(headers):
        if header.lower() == wanted:
            return i
    return -1


def rows_to_frame(rows: list[list[str]]) -> pl.DataFrame:
    """
    Build the raw String frame from tokenized rows.

    rows[0] is the header. Each known field becomes a column named by its
    SPREADSHEET_COLUMNS key; short rows and missing columns read as "".
    """
    headers = [h.strip() for h in rows[0]] if rows else []
    body = rows[1:]

    data: dict[str, list[str]] = {}
    for field, column_name in SPREADSHEET_COLUMNS.items():
        idx = column_index(headers, column_name)
        data[field] = [
            row[idx] if 0 <= idx < len(row) else ""
            for row in body
        ]

    schema = {field: pl.String for field in SPREADSHEET_COLUMNS}
    return clean_string_columns(pl.DataFrame(data, schema=schema))


class SpreadsheetSource(BaseSource):
    """Reads the approved-resources CSV export."""

    name = "spreadsheet"

    def __init__(self) -> None:
        super().__init__()
        self.csv_path: Path | None = None
        self.rows_read = 0
        self.filter_stats = FilterStats()
        self.duplicate_ids = 0
        self.missing_columns: list[str] = []

    def extract(self, csv_path: Path | None = None, **kwargs: Any) -> pl.DataFrame:
        """
        Read and tokenize the CSV file.

        Raises:
            BuildDataError: the file is missing, empty, or has no data rows.
        """
        path = Path(csv_path or settings.csv_path)
        self.csv_path = path

        if not path.is_file():
            raise BuildDataError(f"CSV file not found at {path}")

        rows = tokenize(path.read_text(encoding="utf-8-sig"))
        if not rows:
            raise BuildDataError(f"CSV file is empty: {path}")
        if len(rows) == 1:
            raise BuildDataError(f"CSV file has a header but no data rows: {path}")

        headers = [h.strip() for h in rows[0]]
        self.missing_columns = [
            name for name in SPREADSHEET_COLUMNS.values() if column_index(headers, name) < 0
        ]
        if self.missing_columns:
            self._log.warning("columns_missing", columns=self.missing_columns)

        self.rows_read = len(rows) - 1
        self._log.info("csv_read", path=str(path), rows=self.rows_read, columns=len(headers))
        return rows_to_frame(rows)

    def transform(self, raw: pl.DataFrame) -> pl.DataFrame:
        """Filter approved rows, derive fields, assign ids, sort."""
        df, self.filter_stats = filter_rows(raw)
        df = derive_fields(df)
        df = assign_ids(df)
        self.duplicate_ids = int((df["slug"] != df["id"]).sum())
        df = sort_resources(df)
        return select_resource_columns(df)

    def get_metadata(self) -> dict[str, Any]:
        return {
            "source_name": self.name,
            "csv_path": str(self.csv_path) if self.csv_path else None,
            "rows_read": self.rows_read,
            "rows_kept": self.filter_stats.kept,
            "missing_columns": self.missing_columns,
        }
