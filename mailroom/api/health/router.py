"""Health check endpoints for monitoring."""

from fastapi import APIRouter

from mailroom.api.core.dependencies import AsyncSessionDep
from mailroom.modules.health.service import HealthService, OverallHealthStatus

router = APIRouter(prefix="/health", tags=["health"])


@router.get("/")
async def health_check(db: AsyncSessionDep) -> OverallHealthStatus:
    """Check connectivity of backing services."""
    health_service = HealthService(db)
    return await health_service.run_all_checks()


@router.get("/liveness")
async def liveness_check():
    """Simple liveness check - indicates if service is running."""
    return {"status": "alive", "service": "mailroom-api"}
