# =============================================================================
# app/routers/health.py - Health Check Endpoint
# =============================================================================
# Provides the health check endpoint for monitoring and load balancers.
# =============================================================================

from typing import Literal

from fastapi import APIRouter
from pydantic import BaseModel

from app.dependencies import SettingsDep
from lib.utils import isoformat_utc, utc_now

router = APIRouter()


# =============================================================================
# Response Models
# =============================================================================

class HealthResponse(BaseModel):
    """Basic health check response."""
    status: Literal["ok"]
    timestamp: str
    environment: str


# =============================================================================
# Endpoints
# =============================================================================

@router.get("/health", response_model=HealthResponse)
async def health_check(settings: SettingsDep):
    """
    Health check endpoint.

    Returns basic health status for load balancers and monitoring.
    """
    return HealthResponse(
        status="ok",
        timestamp=isoformat_utc(utc_now()),
        environment=settings.NODE_ENV,
    )
