# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
HTTP Middleware — request ID propagation, access logging and Prometheus metrics.
"""

import time
import uuid

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from groups_service.core.logging import get_logger
from groups_service.metrics.prometheus import REQUEST_COUNT, REQUEST_LATENCY, HTTP_ERRORS

logger = get_logger("groups_service.access")

# Path segments kept verbatim in metric labels; anything else is an id.
KNOWN_SEGMENTS: set[str] = {
    "api", "v1", "groups", "visible", "members", "rating", "filters",
    "search", "status", "toggle", "session", "user", "navigation",
    "history", "stats", "health", "metrics", "ready",
}

# The segment after one of these is always an id, even one spelled like a route.
ID_COLLECTIONS: set[str] = {"groups", "members"}
COLLECTION_ROUTES: set[str] = {"visible"}

SKIP_PATHS: tuple[str, ...] = (
    "/health", "/health/ready", "/metrics", "/openapi.json", "/docs", "/redoc",
)


def normalize_path(path: str) -> str:
    """Collapse ids so /api/v1/groups/42 and /api/v1/groups/7 share a label."""
    parts = path.strip("/").split("/")
    if parts == [""]:
        return path
    normalized: list[str] = []
    for i, part in enumerate(parts):
        after_collection = i > 0 and parts[i - 1] in ID_COLLECTIONS and part not in COLLECTION_ROUTES
        normalized.append("{param}" if after_collection or part not in KNOWN_SEGMENTS else part)
    return "/" + "/".join(normalized)


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Propagate or generate X-Request-ID and log one access line per request."""

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get("X-Request-ID", str(uuid.uuid4()))
        request.state.request_id = request_id
        response = await call_next(request)
        response.headers["X-Request-ID"] = request_id
        if request.url.path not in SKIP_PATHS:
            logger.info(
                "%s %s -> %d (user=%s)",
                request.method,
                request.url.path,
                response.status_code,
                request.headers.get("X-User-Id", "session"),
                extra={"request_id": request_id},
            )
        return response


class MetricsMiddleware(BaseHTTPMiddleware):
    """Track request count, latency, and error rate via Prometheus."""

    async def dispatch(self, request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        duration = time.perf_counter() - start

        path = request.url.path
        if path in SKIP_PATHS:
            return response

        endpoint = normalize_path(path)
        status = str(response.status_code)
        REQUEST_COUNT.labels(method=request.method, endpoint=endpoint, status=status).inc()
        REQUEST_LATENCY.labels(method=request.method, endpoint=endpoint).observe(duration)
        if response.status_code >= 400:
            HTTP_ERRORS.labels(method=request.method, endpoint=endpoint, status=status).inc()
        return response
