"""Server-rendered catalog page."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from helpshelf_shared.config import settings
from helpshelf_shared.constants import (
    CATEGORIES,
    CATEGORY_LABELS,
    FEELING_PRESETS,
    LEVELS,
    PRICE_TYPES,
    SUPPORT_NEED_LABELS,
)

from helpshelf_site.dependencies import get_catalog, get_filters
from helpshelf_site.services.cards import CardView
from helpshelf_site.services.catalog_service import Catalog, group_sections
from helpshelf_site.services.filters import CatalogFilters

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent.parent / "templates"))

router = APIRouter(tags=["pages"])


def page_state(catalog: Catalog | None, matched_count: int) -> str:
    """Which of the four page bodies to render."""
    if catalog is None:
        return "onboarding"
    if len(catalog) == 0:
        return "empty"
    if matched_count == 0:
        return "no_matches"
    return "results"


def build_page_context(catalog: Catalog | None, filters: CatalogFilters) -> dict[str, Any]:
    matched = catalog.filter(filters) if catalog is not None else []
    sections = [
        (section, [CardView.from_resource(r) for r in section.resources])
        for section in group_sections(matched)
    ]
    return {
        "site_title": settings.site_title,
        "state": page_state(catalog, len(matched)),
        "csv_path": str(settings.csv_path),
        "filters": filters,
        "sections": sections,
        "matched_count": len(matched),
        "catalog_size": len(catalog) if catalog is not None else 0,
        "feelings": FEELING_PRESETS,
        "categories": [(c, CATEGORY_LABELS[c]) for c in CATEGORIES],
        "available_needs": catalog.available_support_needs if catalog is not None else (),
        "need_labels": SUPPORT_NEED_LABELS,
        "price_types": PRICE_TYPES,
        "levels": LEVELS,
    }


@router.get("/", response_class=HTMLResponse)
async def index(
    request: Request,
    catalog: Catalog | None = Depends(get_catalog),
    filters: CatalogFilters = Depends(get_filters),
):
    ctx = build_page_context(catalog, filters)
    if catalog is not None:
        request.state.matched_count = ctx["matched_count"]
    return templates.TemplateResponse(request, "index.html", ctx)
