"""Health check endpoints."""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from api.v1.dependencies import get_database
from core.config import settings
from infrastructure.memory.database import InMemoryDatabase

router = APIRouter(tags=["health"])

VERSION = "1.0.0"


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str
    timestamp: str
    environment: str
    store: dict[str, int] | None = None


@router.get("/health", response_model=HealthResponse, summary="Basic health check")
async def health_check() -> HealthResponse:
    """
    Basic health check for load balancers.

    Returns service status without touching the store. Fast and lightweight.
    """
    return HealthResponse(
        status="healthy",
        version=VERSION,
        timestamp=datetime.now(timezone.utc).isoformat(),
        environment=settings.app_env,
    )


@router.get(
    "/health/detailed",
    response_model=HealthResponse,
    summary="Detailed health check",
)
async def detailed_health_check(
    database: InMemoryDatabase = Depends(get_database),
) -> HealthResponse:
    """
    Detailed health check including record counts per collection.

    Reports ``degraded`` when the fixed member types are missing, since no
    profile can be created without them.
    """
    stats = database.stats()
    overall_status = "healthy" if stats["member_types"] > 0 else "degraded"

    return HealthResponse(
        status=overall_status,
        version=VERSION,
        timestamp=datetime.now(timezone.utc).isoformat(),
        environment=settings.app_env,
        store=stats,
    )
