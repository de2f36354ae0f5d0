"""
store.py - Read and write the generated resources file.

The pipeline writes the file once per build; the site reads it once at
startup. The file is a JSON object:

    {"source": "approved.csv", "count": 2, "resources": [{...}, {...}]}

Usage:
    from helpshelf_shared.store import read_resources, write_resources

    write_resources(path, resources, source="approved.csv")
    resources = read_resources(path)      # None when the file is missing
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from pathlib import Path

import structlog
from pydantic import ValidationError

from helpshelf_shared.models import Resource

logger = structlog.get_logger(__name__)


class CatalogFileError(ValueError):
    """Raised when a resources file exists but cannot be read as records."""


def serialize_resources(resources: Sequence[Resource], *, source: str) -> str:
    """Render records as the resources file body (indent 2, trailing newline)."""
    payload = {
        "source": source,
        "count": len(resources),
        "resources": [r.to_record() for r in resources],
    }
    return json.dumps(payload, ensure_ascii=False, indent=2) + "\n"


def write_resources(path: Path, resources: Sequence[Resource], *, source: str) -> int:
    """
    Write records to path, creating parent directories.

    Returns:
        Number of bytes written.
    """
    body = serialize_resources(resources, source=source)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(body, encoding="utf-8")
    size = len(body.encode("utf-8"))
    logger.info("resources_file_written", path=str(path), count=len(resources), bytes=size)
    return size


def read_resources(path: Path) -> tuple[Resource, ...] | None:
    """
    Load every record from a resources file.

    Returns:
        Tuple of Resource in file order, or None when the file does not exist.

    Raises:
        CatalogFileError: the file is not JSON or holds invalid records.
    """
    if not path.is_file():
        logger.warning("resources_file_missing", path=str(path))
        return None

    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise CatalogFileError(f"{path} is not valid JSON: {exc}") from exc

    rows = payload.get("resources") if isinstance(payload, dict) else payload
    if not isinstance(rows, list):
        raise CatalogFileError(f"{path} has no 'resources' list")

    try:
        resources = tuple(Resource.from_record(row) for row in rows)
    except (TypeError, ValidationError) as exc:
        raise CatalogFileError(f"{path} contains an invalid record: {exc}") from exc

    ids = [r.id for r in resources]
    if len(set(ids)) != len(ids):
        raise CatalogFileError(f"{path} contains duplicate resource ids")

    logger.info("resources_file_loaded", path=str(path), count=len(resources))
    return resources
