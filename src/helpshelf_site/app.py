"""FastAPI application factory.

Start with:
    uvicorn helpshelf_site.app:app --reload --port 8000

Endpoints:
    GET  /                          catalog page
    GET  /health
    GET  /ready
    GET  /v1/resources
    GET  /v1/resources/sections
    GET  /v1/resources/{id}
    GET  /v1/facets
"""

from __future__ import annotations

from pathlib import Path

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from helpshelf_shared.config import settings

from helpshelf_site.middleware.logging import CatalogRequestLogMiddleware
from helpshelf_site.routers.health import router as health_router
from helpshelf_site.routers.pages import router as pages_router
from helpshelf_site.routers.v1 import v1_router
from helpshelf_site.services.catalog_service import Catalog, load_catalog

logger = structlog.get_logger()


def create_app(
    *,
    catalog: Catalog | None = None,
    resources_path: Path | None = None,
) -> FastAPI:
    """
    Build the site around one immutable catalog.

    Args:
        catalog:        Pre-built catalog (tests); skips reading any file.
        resources_path: File to load when no catalog is given
                        (default: settings.resources_path).
    """
    if catalog is None:
        catalog = load_catalog(Path(resources_path or settings.resources_path))

    app = FastAPI(
        title=settings.site_title,
        description="Curated support resources for focus, time awareness, and learning",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )
    app.state.catalog = catalog

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_methods=["GET"],
        allow_headers=["*"],
    )
    app.add_middleware(CatalogRequestLogMiddleware)

    # Routers
    app.include_router(health_router)
    app.include_router(v1_router)
    app.include_router(pages_router)

    logger.info(
        "app_created",
        catalog_loaded=catalog is not None,
        resources=len(catalog) if catalog is not None else 0,
    )
    return app


app = create_app()
