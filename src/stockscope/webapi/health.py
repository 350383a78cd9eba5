"""Health check endpoints for the StockScope API."""

import time
from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import APIRouter, Request

from .. import __version__
from ..config.logging import get_logger
from ..config.settings import LOG_LEVELS, get_settings
from .models.responses import HealthResponse, HealthStatus

logger = get_logger(__name__)
router = APIRouter()

# Track application start time for uptime calculation
_app_start_time = time.time()


def check_configuration_health() -> Dict[str, Any]:
    """Check application configuration health."""
    settings = get_settings()

    checks = {
        "log_level_valid": settings.log_level in LOG_LEVELS,
        "api_key_configured": (
            bool(settings.alpha_vantage_api_key) if settings.is_live() else True
        ),
    }

    return {
        "status": "healthy" if all(checks.values()) else "degraded",
        "checks": checks,
    }


def check_market_data_health(request: Request) -> Dict[str, Any]:
    """Report which market data provider is wired in."""
    service = getattr(request.app.state, "stock_service", None)
    if service is None:
        return {"status": "unhealthy", "error": "Stock service not initialised"}
    return {"status": "healthy", "provider": service.provider.name}


@router.get("/health", response_model=HealthResponse, summary="Basic Health Check")
async def basic_health_check(request: Request):
    """
    Perform a basic health check.

    Returns configuration and market data provider status plus uptime.
    """
    services = {
        "configuration": check_configuration_health(),
        "market_data": check_market_data_health(request),
    }

    statuses = [s["status"] for s in services.values()]
    if "unhealthy" in statuses:
        overall_status = "unhealthy"
    elif "degraded" in statuses:
        overall_status = "degraded"
    else:
        overall_status = "healthy"

    health_status = HealthStatus(
        status=overall_status,
        services=services,
        uptime_seconds=time.time() - _app_start_time,
        version=__version__,
    )

    logger.debug("Basic health check completed", status=overall_status)
    return HealthResponse(success=True, health=health_status)


@router.get("/health/live", summary="Liveness Probe")
async def liveness_probe():
    """Lightweight check that the process can respond."""
    return {
        "status": "alive",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "uptime_seconds": time.time() - _app_start_time,
    }
