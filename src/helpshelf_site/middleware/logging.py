"""
Request logging for the catalog site.

Every request logs one ``request_completed`` event. Catalog views (the page
and the /v1/resources listings) also log the normalized filter query and
how many resources matched.
"""

from __future__ import annotations

import time

import structlog
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

logger = structlog.get_logger(__name__)


class CatalogRequestLogMiddleware(BaseHTTPMiddleware):
    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        start = time.monotonic()
        response = await call_next(request)

        event: dict[str, object] = {
            "method": request.method,
            "path": request.url.path,
            "status": response.status_code,
            "duration_ms": round((time.monotonic() - start) * 1000, 2),
        }
        # Set by get_filters() and the catalog views
        filters = getattr(request.state, "filters", None)
        if filters is not None:
            event["filters"] = filters.query_string
        matched = getattr(request.state, "matched_count", None)
        if matched is not None:
            event["matched"] = matched

        logger.info("request_completed", **event)
        return response
