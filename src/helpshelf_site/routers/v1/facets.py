"""Filter facet metadata for clients building their own filter UI."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from helpshelf_shared.constants import (
    CATEGORIES,
    CATEGORY_LABELS,
    FEELING_PRESETS,
    LEVELS,
    PRICE_TYPES,
    SUPPORT_NEED_LABELS,
)

from helpshelf_site.dependencies import require_catalog
from helpshelf_site.responses import ApiError, wrap_response
from helpshelf_site.services.catalog_service import Catalog

router = APIRouter(tags=["facets"], responses={503: {"model": ApiError}})


@router.get("/facets")
async def facets(catalog: Catalog = Depends(require_catalog)):
    return wrap_response(
        {
            "categories": [{"value": c, "label": CATEGORY_LABELS[c]} for c in CATEGORIES],
            "support_needs": [
                {"value": n, "label": SUPPORT_NEED_LABELS[n]}
                for n in catalog.available_support_needs
            ],
            "price_types": list(PRICE_TYPES),
            "setup_efforts": list(LEVELS),
            "sensory_loads": list(LEVELS),
            "feelings": [
                {"key": key, "glyph": glyph, "label": label, "support_needs": list(needs)}
                for key, (glyph, label, needs) in FEELING_PRESETS.items()
            ],
        },
        catalog_size=len(catalog),
    )
