"""
loaders/json_loader.py - Validating writer for the static resources file.

The build pipeline funnels its normalized DataFrame through this module.
The loader:
  - Converts polars rows to Resource models (pydantic validation)
  - Logs and skips rows that fail validation, counting them as failed
  - Writes the surviving records with helpshelf_shared.store
  - Returns a LoadResult with records_loaded and records_failed counts

Usage:
    from helpshelf_pipeline.loaders.json_loader import JsonLoader

    loader = JsonLoader()
    result = loader.write(df, Path("data/resources.json"), source="approved.csv")
    print(result.records_loaded, result.records_failed)
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from pathlib import Path

import polars as pl
import structlog
from pydantic import ValidationError

from helpshelf_shared.models import Resource
from helpshelf_shared.store import write_resources

log = structlog.get_logger(__name__)


@dataclass
class LoadResult:
    """Summary of a loader write."""

    target: str
    records_loaded: int = 0
    records_failed: int = 0
    bytes_written: int = 0
    errors: list[str] = field(default_factory=list)
    duration_ms: int = 0

    @property
    def status(self) -> str:
        if self.records_failed == 0:
            return "success"
        if self.records_loaded > 0:
            return "partial_failure"
        return "failure"


class JsonLoader:
    """Writes validated resource records to a JSON file."""

    def to_resources(self, df: pl.DataFrame, result: LoadResult) -> list[Resource]:
        """Validate each row, recording failures on result."""
        resources: list[Resource] = []
        for row in df.iter_rows(named=True):
            try:
                resources.append(Resource.from_record(row))
            except ValidationError as exc:
                msg = f"{row.get('id') or row.get('title')!r}: {exc.error_count()} invalid field(s)"
                log.error("record_invalid", id=row.get("id"), error=str(exc))
                result.records_failed += 1
                result.errors.append(msg)
        return resources

    def write(
        self,
        df: pl.DataFrame,
        path: Path,
        *,
        source: str,
        dry_run: bool = False,
    ) -> LoadResult:
        """
        Validate every row of df and write the records to path.

        Args:
            df:      Normalized resource DataFrame, already ordered.
            path:    Output file.
            source:  Input file name recorded in the output.
            dry_run: Validate only; do not touch path.

        Returns:
            LoadResult with counts and error list.
        """
        result = LoadResult(target=str(path))
        t0 = time.monotonic()

        if df.is_empty():
            log.warning("write_empty_dataframe", target=str(path))

        resources = self.to_resources(df, result)
        result.records_loaded = len(resources)

        if not dry_run:
            result.bytes_written = write_resources(path, resources, source=source)

        result.duration_ms = int((time.monotonic() - t0) * 1000)
        log.info(
            "write_complete",
            target=str(path),
            dry_run=dry_run,
            records_loaded=result.records_loaded,
            records_failed=result.records_failed,
            duration_ms=result.duration_ms,
            status=result.status,
        )
        return result
