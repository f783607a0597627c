from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Literal

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from mailroom.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class HealthCheckResult:
    """Result of a health check."""

    service: str
    status: Literal["healthy", "unhealthy"]
    connected: bool
    error: str | None = None


@dataclass
class OverallHealthStatus:
    status: Literal["healthy", "unhealthy"]
    services: dict[str, HealthCheckResult]
    timestamp: str


class HealthService:
    """Service for performing health checks on backing stores."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def check_database_health(self) -> HealthCheckResult:
        try:
            result = await self.db.execute(text("SELECT 1"))
            result.scalar()
        except SQLAlchemyError as e:
            logger.error("Database health check failed", error=str(e))
            return HealthCheckResult(
                service="database", status="unhealthy", connected=False, error=str(e)
            )

        return HealthCheckResult(service="database", status="healthy", connected=True)

    async def run_all_checks(self) -> OverallHealthStatus:
        database = await self.check_database_health()
        return OverallHealthStatus(
            status=database.status,
            services={"database": database},
            timestamp=datetime.now(timezone.utc).isoformat(),
        )
