"""
Health check and monitoring router.

Provides endpoints for liveness and readiness probes.
"""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from sqlalchemy.orm import Session

from ..config import settings
from ..database import check_db_connection, get_db

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["health"])


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    timestamp: str
    service: str = settings.SERVICE_NAME
    version: str = settings.VERSION


class ReadinessResponse(BaseModel):
    """Readiness check response model."""

    ready: bool
    checks: dict
    timestamp: str


@router.get(
    "/health",
    response_model=HealthResponse,
    status_code=status.HTTP_200_OK,
    summary="Health check",
    description="Basic health check endpoint - returns 200 if service is running",
)
async def health_check():
    """
    Basic health check.

    Always returns 200 OK if the service is running.
    Used by load balancers and orchestrators for liveness probes.
    """
    return HealthResponse(status="healthy", timestamp=datetime.now(timezone.utc).isoformat())


@router.get(
    "/ready",
    response_model=ReadinessResponse,
    summary="Readiness check",
    description="Check if service is ready to accept traffic (database reachable)",
)
async def readiness_check(db: Session = Depends(get_db)):
    """
    Readiness check.

    Returns 200 if the database answers, 503 otherwise.
    Used by Kubernetes readiness probes.
    """
    checks = {"database": "healthy" if check_db_connection(db) else "unhealthy"}
    all_ready = all(check == "healthy" for check in checks.values())

    response = ReadinessResponse(
        ready=all_ready, checks=checks, timestamp=datetime.now(timezone.utc).isoformat()
    )

    if not all_ready:
        logger.warning(f"Service not ready: {checks}")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE, content=response.model_dump()
        )

    return response
