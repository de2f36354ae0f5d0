"""
helpshelf_shared.models - Pydantic models for the resources file.

Used by:
- helpshelf_pipeline: validate records before writing resources.json
- helpshelf_site: hold the loaded catalog and serialize API responses

All models provide:
  .from_record(row: dict) -> Model
  .to_record() -> dict
"""

from helpshelf_shared.models.resource import Resource

__all__ = [
    "Resource",
]
