"""
pipelines/build_data.py - Spreadsheet export → resources.json pipeline.

Reads the approved-resources CSV, keeps approved rows that have a title
and a URL, derives every resource field, orders featured records first
and writes the static file the site loads at startup.

Usage:
    from helpshelf_pipeline.pipelines.build_data import run
    result = run(csv_path=Path("data/approved.csv"))
    print(result.records_written)

    # Validate without writing
    result = run(dry_run=True)
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from pathlib import Path

import structlog

from helpshelf_shared.config import settings

from helpshelf_pipeline.loaders.json_loader import JsonLoader, LoadResult
from helpshelf_pipeline.sources.spreadsheet import SpreadsheetSource

log = structlog.get_logger(__name__)


@dataclass
class BuildResult:
    """Outcome of one build run."""

    csv_path: Path
    output_path: Path
    rows_read: int = 0
    rows_skipped_unapproved: int = 0
    rows_skipped_incomplete: int = 0
    records_written: int = 0
    records_failed: int = 0
    duplicate_ids: int = 0
    featured: int = 0
    missing_columns: list[str] = field(default_factory=list)
    dry_run: bool = False
    duration_ms: int = 0

    def summary(self) -> str:
        verb = "Validated" if self.dry_run else "Generated"
        line = f"{verb} {self.records_written} resources -> {self.output_path}"
        skipped = self.rows_skipped_unapproved + self.rows_skipped_incomplete
        if skipped:
            line += f" ({skipped} of {self.rows_read} rows skipped)"
        return line


def run(
    *,
    csv_path: Path | None = None,
    out_path: Path | None = None,
    dry_run: bool = False,
) -> BuildResult:
    """
    Run the build pipeline.

    Args:
        csv_path: Spreadsheet export (default: settings.csv_path).
        out_path: Resources file to write (default: settings.resources_path).
        dry_run:  Transform and validate but do not write the output file.

    Returns:
        BuildResult with row and record counts.

    Raises:
        BuildDataError: the CSV is missing or has no data rows.
    """
    csv_path = Path(csv_path or settings.csv_path)
    out_path = Path(out_path or settings.resources_path)
    run_log = log.bind(pipeline="build_data")
    run_log.info("build_data_start", csv_path=str(csv_path), out_path=str(out_path), dry_run=dry_run)

    t0 = time.monotonic()
    source = SpreadsheetSource()
    df = source.run(csv_path=csv_path)

    if df.is_empty():
        run_log.warning("no_approved_resources", rows_read=source.rows_read)

    loader = JsonLoader()
    load: LoadResult = loader.write(df, out_path, source=csv_path.name, dry_run=dry_run)

    stats = source.filter_stats
    meta = source.get_metadata()
    result = BuildResult(
        csv_path=csv_path,
        output_path=out_path,
        rows_read=stats.rows_read,
        rows_skipped_unapproved=stats.skipped_unapproved,
        rows_skipped_incomplete=stats.skipped_incomplete,
        records_written=load.records_loaded,
        records_failed=load.records_failed,
        duplicate_ids=source.duplicate_ids,
        featured=int(df["featured"].sum()) if not df.is_empty() else 0,
        missing_columns=meta["missing_columns"],
        dry_run=dry_run,
        duration_ms=int((time.monotonic() - t0) * 1000),
    )
    run_log.info(
        "build_data_complete",
        rows_read=result.rows_read,
        records_written=result.records_written,
        records_failed=result.records_failed,
        featured=result.featured,
        missing_columns=result.missing_columns,
        duration_ms=result.duration_ms,
    )
    return result
