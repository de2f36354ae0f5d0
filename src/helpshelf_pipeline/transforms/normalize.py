"""
transforms/normalize.py - Row filtering and field derivation for spreadsheet
DataFrames.

Takes the raw String-typed frame produced by SpreadsheetSource.extract()
and turns it into one row per catalog resource, with every enum column
resolved through the parse-with-default helpers in transforms/fields.py.

Usage:
    from helpshelf_pipeline.transforms.normalize import (
        filter_rows, derive_fields, assign_ids, sort_resources,
    )

    df, stats = filter_rows(raw)
    df = sort_resources(assign_ids(derive_fields(df)))
"""

from __future__ import annotations

from dataclasses import dataclass

import polars as pl
import structlog

from helpshelf_shared.constants import (
    DEFAULT_PRICE_TYPE,
    DEFAULT_SENSORY_LOAD,
    DEFAULT_SETUP_EFFORT,
    LEVELS,
    PRICE_TYPES,
)

from helpshelf_pipeline.transforms.fields import (
    assign_unique_ids,
    extract_domain,
    first_sentence,
    is_truthy,
    parse_category,
    parse_option,
    parse_support_needs,
    slugify,
    title_sort_key,
)

log = structlog.get_logger(__name__)

# Column order of a fully derived resource frame
RESOURCE_COLUMNS: list[str] = [
    "id",
    "title",
    "url",
    "description",
    "why_it_helps",
    "category",
    "support_needs",
    "sensory_load",
    "setup_effort",
    "price_type",
    "featured",
    "domain",
]


@dataclass
class FilterStats:
    """Row counts from filter_rows()."""

    rows_read: int = 0
    skipped_unapproved: int = 0
    skipped_incomplete: int = 0

    @property
    def kept(self) -> int:
        return self.rows_read - self.skipped_unapproved - self.skipped_incomplete


# ---------------------------------------------------------------------------
# Stateless frame helpers
# ---------------------------------------------------------------------------


def clean_string_columns(df: pl.DataFrame) -> pl.DataFrame:
    """Strip whitespace from all String columns and turn nulls into ""."""
    return df.with_columns(
        [
            pl.col(c).fill_null("").str.strip_chars()
            for c in df.columns
            if df[c].dtype == pl.String
        ]
    )


def filter_rows(df: pl.DataFrame) -> tuple[pl.DataFrame, FilterStats]:
    """
    Keep approved rows that have both a title and a URL.

    Approval is checked first, so an unapproved row without a title is
    counted as unapproved.
    """
    stats = FilterStats(rows_read=len(df))

    approved = df.filter(
        pl.col("approved").map_elements(is_truthy, return_dtype=pl.Boolean)
    )
    stats.skipped_unapproved = len(df) - len(approved)

    complete = approved.filter((pl.col("title") != "") & (pl.col("url") != ""))
    stats.skipped_incomplete = len(approved) - len(complete)

    log.debug(
        "rows_filtered",
        rows_read=stats.rows_read,
        kept=stats.kept,
        skipped_unapproved=stats.skipped_unapproved,
        skipped_incomplete=stats.skipped_incomplete,
    )
    return complete, stats


def derive_fields(df: pl.DataFrame) -> pl.DataFrame:
    """
    Resolve every derived resource column from the raw spreadsheet columns.

    Adds a "slug" column that assign_ids() turns into unique ids.
    """
    return df.with_columns(
        pl.col("type").map_elements(parse_category, return_dtype=pl.String).alias("category"),
        pl.col("helps_with")
        .map_elements(parse_support_needs, return_dtype=pl.List(pl.String))
        .alias("support_needs"),
        pl.col("why_it_helps").map_elements(first_sentence, return_dtype=pl.String).alias("description"),
        pl.col("sensory_load").map_elements(
            lambda v: parse_option(v, LEVELS, DEFAULT_SENSORY_LOAD), return_dtype=pl.String
        ),
        pl.col("setup_effort").map_elements(
            lambda v: parse_option(v, LEVELS, DEFAULT_SETUP_EFFORT), return_dtype=pl.String
        ),
        pl.col("price_type").map_elements(
            lambda v: parse_option(v, PRICE_TYPES, DEFAULT_PRICE_TYPE), return_dtype=pl.String
        ),
        pl.col("featured").map_elements(is_truthy, return_dtype=pl.Boolean),
        pl.col("url").map_elements(extract_domain, return_dtype=pl.String).alias("domain"),
        pl.col("title").map_elements(slugify, return_dtype=pl.String).alias("slug"),
    )


def assign_ids(df: pl.DataFrame, slug_col: str = "slug") -> pl.DataFrame:
    """Add a unique "id" column from slugs, suffixing repeats in row order."""
    ids = assign_unique_ids(df[slug_col].to_list())
    duplicates = sum(1 for slug, id_ in zip(df[slug_col].to_list(), ids) if slug != id_)
    if duplicates:
        log.info("duplicate_slugs_suffixed", count=duplicates)
    return df.with_columns(pl.Series("id", ids, dtype=pl.String))


def sort_resources(df: pl.DataFrame) -> pl.DataFrame:
    """
    Featured rows first, then by title collation key.

    The sort is stable so rows with identical keys keep input order.
    """
    if df.is_empty():
        return df
    return (
        df.with_columns(
            pl.col("title").map_elements(title_sort_key, return_dtype=pl.String).alias("_title_key")
        )
        .sort(["featured", "_title_key"], descending=[True, False], maintain_order=True)
        .drop("_title_key")
    )


def select_resource_columns(df: pl.DataFrame) -> pl.DataFrame:
    """Project a derived frame onto the resource record columns."""
    return df.select(RESOURCE_COLUMNS)
