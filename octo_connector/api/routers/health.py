"""
Health check endpoints for monitoring and orchestration (K8s, Docker, etc.)

- /health: Basic liveness check (always returns 200)
- /health/live: Alias for /health
- /health/ready: Readiness check (signing secret and supplier endpoint configured)
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from octo_connector.config import Settings, get_settings

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health")
async def health_check():
    """
    Basic liveness probe.

    Returns 200 OK if the application is running.
    """
    return {"status": "ok", "service": "octo-connector"}


@router.get("/health/ready")
async def health_check_ready(settings: Settings = Depends(get_settings)):
    """
    Readiness probe.

    The connector cannot mint or redeem availability keys without a signing
    secret, so it reports 503 until one is configured.
    """
    health_status = {
        "status": "ready",
        "checks": {
            "jwt_key": "configured" if settings.jwt_key else "missing",
            "supplier": "in_memory" if settings.use_in_memory else settings.octo_endpoint,
        },
    }
    if not settings.jwt_key:
        logger.error("Readiness check: availability key secret is not configured")
        health_status["status"] = "not_ready"
        return JSONResponse(status_code=503, content=health_status)
    return health_status


@router.get("/health/live")
async def health_check_live():
    """Alias for /health for Kubernetes liveness probe."""
    return {"status": "ok", "service": "octo-connector"}
