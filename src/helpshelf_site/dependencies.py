"""Shared FastAPI dependencies."""

from __future__ import annotations

from fastapi import HTTPException, Request

from helpshelf_site.responses import error_response
from helpshelf_site.services.catalog_service import Catalog
from helpshelf_site.services.filters import CatalogFilters


def get_catalog(request: Request) -> Catalog | None:
    """The catalog loaded by create_app(), or None before the first build."""
    return request.app.state.catalog


def require_catalog(request: Request) -> Catalog:
    catalog = get_catalog(request)
    if catalog is None:
        raise HTTPException(
            status_code=503,
            detail=error_response(
                "catalog_unavailable",
                "No resources file has been built yet. Run: helpshelf-pipeline build-data",
            ),
        )
    return catalog


def get_filters(request: Request) -> CatalogFilters:
    filters = CatalogFilters.from_query(request.query_params)
    request.state.filters = filters
    return filters
