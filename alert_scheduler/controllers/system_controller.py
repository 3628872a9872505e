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

from alert_scheduler.core.config import settings
from alert_scheduler.core.dependencies import get_run_repo, get_scheduling_service

router = APIRouter(tags=["System"])


@router.get("/health")
def health_check():
    """Liveness probe for Docker and orchestration."""
    run_repo = get_run_repo()
    return {
        "status": "ok",
        "service": settings.SERVICE_NAME,
        "version": settings.SERVICE_VERSION,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "runs_stored": run_repo.count(),
    }


@router.get("/health/ready")
def readiness_check():
    """Readiness probe — verifies default teams are configured."""
    service = get_scheduling_service()
    return {
        "status": "ready",
        "service": settings.SERVICE_NAME,
        "default_teams": len(service.default_teams),
        "teams_loaded": len(service.default_teams) > 0,
    }


@router.get("/metrics")
def prometheus_metrics():
    """Expose Prometheus metrics in OpenMetrics format."""
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
