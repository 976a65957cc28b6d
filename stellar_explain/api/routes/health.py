"""Health check routes."""

import structlog
from fastapi import APIRouter, Request

from stellar_explain.core.config import get_settings
from stellar_explain.schemas.v1.health import HealthResponse, ReadyResponse

router = APIRouter(tags=["health"])
logger = structlog.get_logger(__name__)


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Basic health check."""
    settings = get_settings()
    return HealthResponse(
        status="ok",
        network=settings.horizon.network.value,
        version=settings.app.version,
    )


@router.get("/health/live", response_model=HealthResponse)
async def liveness_check():
    """Liveness check."""
    return HealthResponse(status="alive")


@router.get("/health/ready", response_model=ReadyResponse)
async def readiness_check(request: Request):
    """Readiness check: is Horizon reachable?"""
    horizon_ok = False
    client = getattr(request.app.state, "horizon_client", None)
    if client is not None:
        horizon_ok = await client.health_check()
    else:
        logger.warning("HorizonClient not available on app.state for readiness check")

    if not horizon_ok:
        logger.warning("Readiness check degraded", horizon_reachable=False)

    return ReadyResponse(
        status="ready" if horizon_ok else "degraded",
        horizon_reachable=horizon_ok,
    )
