# =============================================================================
# app/routers/health.py - Health Check Endpoints
# =============================================================================
# Provides health check endpoints for monitoring and load balancers.
# =============================================================================

from datetime import datetime, timezone

from fastapi import APIRouter
from pydantic import BaseModel

from app.config import settings
from app.dependencies import ContextDep
from core.services.startup_cache import LoadState

router = APIRouter()

API_VERSION = "1.0.0"


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


# =============================================================================
# Response Models
# =============================================================================

class HealthResponse(BaseModel):
    """Basic health check response."""
    status: str
    timestamp: str
    environment: str
    version: str


class CacheCheck(BaseModel):
    """State of the startup cache."""
    state: LoadState
    records: int
    pending: int
    loaded_at: str | None = None
    error: str | None = None


class ReadinessResponse(BaseModel):
    """Readiness check response."""
    status: str
    cache: CacheCheck
    timestamp: str


class LivenessResponse(BaseModel):
    """Liveness check response."""
    status: str
    timestamp: str


# =============================================================================
# Endpoints
# =============================================================================

@router.get("/health", response_model=HealthResponse)
async def health_check():
    """
    Health check endpoint.

    Returns basic health status for load balancers and monitoring.
    """
    return HealthResponse(
        status="healthy",
        timestamp=_now(),
        environment=settings.ENVIRONMENT,
        version=API_VERSION,
    )


@router.get("/health/ready", response_model=ReadinessResponse)
async def readiness_check(context: ContextDep):
    """
    Readiness check endpoint.

    Reports the startup cache state without triggering a load:
    - ready: CSV loaded (possibly with zero records)
    - loading: nothing loaded yet
    - degraded: last load failed
    """
    cache = context.cache
    status_by_state = {
        LoadState.LOADED: "ready",
        LoadState.NOT_LOADED: "loading",
        LoadState.FAILED: "degraded",
    }

    return ReadinessResponse(
        status=status_by_state[cache.state],
        cache=CacheCheck(
            state=cache.state,
            records=len(cache),
            pending=len(context.pending),
            loaded_at=cache.loaded_at.isoformat() if cache.loaded_at else None,
            error=cache.last_error,
        ),
        timestamp=_now(),
    )


@router.get("/health/live", response_model=LivenessResponse)
async def liveness_check():
    """
    Liveness check endpoint.

    Returns whether the service process is alive.
    Used by Kubernetes/Docker for restart decisions.
    """
    return LivenessResponse(
        status="alive",
        timestamp=_now(),
    )
