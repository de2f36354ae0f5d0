"""
cli.py - Click CLI entrypoint for the build step.

Usage:
    helpshelf-pipeline build-data
    helpshelf-pipeline build-data --csv exports/approved.csv --dry-run
    helpshelf-pipeline status
"""

from __future__ import annotations

from collections import Counter
from pathlib import Path

import click
import structlog

from helpshelf_shared.config import settings
from helpshelf_shared.store import CatalogFileError, read_resources

from helpshelf_pipeline.errors import BuildDataError
from helpshelf_pipeline.utils.logging import configure_logging

log = structlog.get_logger(__name__)


@click.group()
@click.option(
    "--log-level",
    default=settings.log_level,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Log level",
)
@click.option(
    "--log-format",
    default=settings.log_format,
    type=click.Choice(["json", "console"]),
    help="Log renderer",
)
@click.pass_context
def main(ctx: click.Context, log_level: str, log_format: str) -> None:
    """helpshelf data build tools."""
    configure_logging(log_level, log_format, command=ctx.invoked_subcommand)


@main.command("build-data")
@click.option(
    "--csv",
    "csv_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help=f"Spreadsheet export to read (default: {settings.csv_path})",
)
@click.option(
    "--out",
    "out_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help=f"Resources file to write (default: {settings.resources_path})",
)
@click.option("--dry-run", is_flag=True, help="Validate without writing the output file")
def build_data(csv_path: Path | None, out_path: Path | None, dry_run: bool) -> None:
    """Convert the approved spreadsheet export into the resources file."""
    from helpshelf_pipeline.pipelines.build_data import run

    try:
        result = run(csv_path=csv_path, out_path=out_path, dry_run=dry_run)
    except BuildDataError as exc:
        log.error("build_data_failed", error=str(exc))
        click.echo(f"Error: {exc}", err=True)
        click.echo(
            "Export the approved resources sheet as CSV and save it as "
            f"{csv_path or settings.csv_path}.",
            err=True,
        )
        raise SystemExit(1) from exc

    click.echo(result.summary())
    if result.records_failed:
        click.echo(f"  {result.records_failed} record(s) failed validation", err=True)
    if result.missing_columns:
        click.echo(f"  Columns not found: {', '.join(result.missing_columns)}", err=True)


@main.command()
@click.option(
    "--path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help=f"Resources file to inspect (default: {settings.resources_path})",
)
def status(path: Path | None) -> None:
    """Summarize the current resources file."""
    path = path or settings.resources_path
    try:
        resources = read_resources(path)
    except CatalogFileError as exc:
        click.echo(f"Error: {exc}", err=True)
        raise SystemExit(1) from exc

    if resources is None:
        click.echo(f"No resources file at {path}. Run: helpshelf-pipeline build-data", err=True)
        raise SystemExit(1)

    featured = sum(1 for r in resources if r.featured)
    click.echo(f"{path}: {len(resources)} resources ({featured} featured)")
    for category, count in sorted(Counter(r.category for r in resources).items()):
        click.echo(f"  {category:10s} {count}")


if __name__ == "__main__":
    main()
