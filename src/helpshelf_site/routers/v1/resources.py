"""Resource listing endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Request

from helpshelf_site.dependencies import get_filters, require_catalog
from helpshelf_site.responses import ApiError, error_response, wrap_response
from helpshelf_site.services.catalog_service import Catalog, group_sections
from helpshelf_site.services.filters import CatalogFilters

router = APIRouter(
    prefix="/resources",
    tags=["resources"],
    responses={503: {"model": ApiError}},
)


@router.get("")
async def list_resources(
    request: Request,
    catalog: Catalog = Depends(require_catalog),
    filters: CatalogFilters = Depends(get_filters),
):
    """
    Filtered resources in catalog order.

    Query params: q, category, need (repeatable), price, setup, sensory,
    featured=1, feeling.
    """
    data = [r.to_record() for r in catalog.filter(filters)]
    request.state.matched_count = len(data)
    return wrap_response(
        data,
        total_count=len(data),
        catalog_size=len(catalog),
        links={"self": filters.href("/v1/resources"), "page": filters.href("/")},
    )


@router.get("/sections")
async def list_sections(
    request: Request,
    catalog: Catalog = Depends(require_catalog),
    filters: CatalogFilters = Depends(get_filters),
):
    """Filtered resources grouped into display sections."""
    matched = catalog.filter(filters)
    request.state.matched_count = len(matched)
    data = [
        {
            "key": section.key,
            "title": section.title,
            "resources": [r.to_record() for r in section.resources],
        }
        for section in group_sections(matched)
    ]
    return wrap_response(data, total_count=len(matched), catalog_size=len(catalog))


@router.get("/{resource_id}", responses={404: {"model": ApiError}})
async def get_resource(resource_id: str, catalog: Catalog = Depends(require_catalog)):
    resource = catalog.get(resource_id)
    if resource is None:
        raise HTTPException(
            status_code=404,
            detail=error_response("not_found", f"Resource '{resource_id}' not found"),
        )
    return wrap_response(resource.to_record())
