"""
sources/base.py - Abstract base class for resource data sources.

Each concrete source must implement:
  extract()      - read raw data, return polars DataFrame
  transform()    - filter/normalize raw DataFrame into resource columns
  get_metadata() - return dict with source info for the run summary

The run() method orchestrates extract → transform → return and handles
timing/logging automatically. Pipelines call run() rather than the
individual methods.
"""

from __future__ import annotations

import time
from abc import ABC, abstractmethod
from typing import Any

import polars as pl
import structlog

log = structlog.get_logger(__name__)


class BaseSource(ABC):
    """Abstract base for helpshelf data sources."""

    # Override in subclass - used for logging and run summaries
    name: str = "unknown"

    def __init__(self) -> None:
        self._log = log.bind(source_name=self.name)

    # ------------------------------------------------------------------
    # Abstract interface - subclasses must implement all three
    # ------------------------------------------------------------------

    @abstractmethod
    def extract(self, **kwargs: Any) -> pl.DataFrame:
        """
        Read raw rows from the source.

        Returns:
            Raw polars DataFrame, one String column per known field.
        """
        ...

    @abstractmethod
    def transform(self, raw: pl.DataFrame) -> pl.DataFrame:
        """
        Turn a raw DataFrame into resource columns.

        Args:
            raw: DataFrame returned by extract().

        Returns:
            Normalized polars DataFrame ready for loading.
        """
        ...

    @abstractmethod
    def get_metadata(self) -> dict[str, Any]:
        """Return source-level metadata (source_name, path, row counts)."""
        ...

    # ------------------------------------------------------------------
    # Orchestration - pipelines call this
    # ------------------------------------------------------------------

    def run(self, **kwargs: Any) -> pl.DataFrame:
        """
        Extract + transform in sequence with timing and structured logging.

        Args:
            **kwargs: Forwarded to extract().

        Returns:
            Transformed polars DataFrame.

        Raises:
            Any exception from extract() or transform() after logging it.
        """
        run_log = self._log.bind(**{k: str(v) for k, v in kwargs.items()})
        run_log.info("source_run_start")

        t0 = time.monotonic()
        try:
            raw = self.extract(**kwargs)
            run_log.info(
                "extract_complete",
                raw_rows=len(raw),
                raw_cols=raw.width,
                duration_ms=int((time.monotonic() - t0) * 1000),
            )

            t1 = time.monotonic()
            result = self.transform(raw)
            run_log.info(
                "transform_complete",
                result_rows=len(result),
                result_cols=result.width,
                duration_ms=int((time.monotonic() - t1) * 1000),
            )
            return result

        except Exception as exc:
            run_log.error(
                "source_run_failed",
                error=str(exc),
                duration_ms=int((time.monotonic() - t0) * 1000),
            )
            raise
