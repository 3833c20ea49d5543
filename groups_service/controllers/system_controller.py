# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Controller: System endpoints — health, readiness, metrics.
Pure HTTP layer — no business logic.
"""

from datetime import datetime, timezone

from fastapi import APIRouter
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from groups_service.core.config import settings
from groups_service.core.dependencies import get_group_repo

router = APIRouter(tags=["System"])


@router.get("/health")
def health_check():
    """Liveness check for Docker and orchestration."""
    group_repo = get_group_repo()
    return {
        "status": "ok",
        "service": settings.SERVICE_NAME,
        "version": settings.SERVICE_VERSION,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "groups_count": group_repo.count(),
        "state_version": group_repo.version,
    }


@router.get("/health/ready")
def readiness_check():
    """Readiness check — verifies the service can serve traffic."""
    group_repo = get_group_repo()
    return {
        "status": "ready",
        "service": settings.SERVICE_NAME,
        "groups_loaded": group_repo.count() > 0,
    }


@router.get("/metrics")
def prometheus_metrics():
    """Expose Prometheus metrics in OpenMetrics format."""
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
