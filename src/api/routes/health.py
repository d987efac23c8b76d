"""Health check and service description endpoints."""

from datetime import datetime, timezone
from typing import Any

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from api.v1.dependencies import get_database
from core.config import settings
from infrastructure.database.session import Database

router = APIRouter(tags=["health"])


class DatabaseHealth(BaseModel):
    """Database section of the health document."""

    connected: bool
    message: str
    timestamp: datetime | str | None = None
    error: str | None = None
    connection_pool: dict[str, Any]


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    timestamp: str
    database: DatabaseHealth


@router.get("/health", response_model=HealthResponse, summary="Health check")
async def health_check(database: Database = Depends(get_database)) -> HealthResponse:
    """
    Health check including database connectivity.

    Always answers 200; a failed database round trip is reported as
    ``status: "unhealthy"``.
    """
    check = await database.check_connection()
    pool_status = database.get_status()

    return HealthResponse(
        status="healthy" if check.connected else "unhealthy",
        timestamp=datetime.now(timezone.utc).isoformat(),
        database=DatabaseHealth(
            **check.to_dict(),
            connection_pool=pool_status.to_dict(),
        ),
    )


@router.get("/", summary="API description")
async def service_info() -> dict[str, Any]:
    """Describe the service and its endpoints."""
    return {
        "message": settings.app_name,
        "version": settings.app_version,
        "endpoints": {
            "health": "GET /health",
            "profiles": {
                "getAll": "GET /api/v1/profiles",
                "getById": "GET /api/v1/profiles/:id",
                "create": "POST /api/v1/profiles",
                "update": "PUT /api/v1/profiles/:id",
            },
        },
    }
