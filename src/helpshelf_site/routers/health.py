"""Health check endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from helpshelf_site.dependencies import get_catalog
from helpshelf_site.services.catalog_service import Catalog

router = APIRouter(tags=["health"])


@router.get("/health")
async def health() -> dict:
    return {"status": "ok", "version": "0.1.0"}


@router.get("/ready")
async def ready(catalog: Catalog | None = Depends(get_catalog)) -> dict:
    if catalog is None:
        return {"status": "no_data", "resources": 0}
    return {"status": "ready", "resources": len(catalog)}
