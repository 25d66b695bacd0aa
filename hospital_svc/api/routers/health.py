"""
Health and readiness endpoints for operational visibility.

- /health: Liveness probe (is the app running?)
- /ready: Readiness probe (can the database be reached?)
- /: Root endpoint with service information

No authentication required (infrastructure use).
"""
import logging
import time
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, Response
from pydantic import BaseModel

from core.datetime_utils import format_iso, utc_now
from core.dependencies import get_database
from repositories import Database

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

SERVICE_NAME = "Hospital Records API"
SERVICE_VERSION = "1.0.0"


class HealthResponse(BaseModel):
    """Response model for /health endpoint."""
    status: str
    version: str
    timestamp: str


class DependencyStatus(BaseModel):
    """Status of a single dependency."""
    name: str
    status: str  # "ok" or "unavailable"
    latency_ms: Optional[float] = None
    message: Optional[str] = None


class ReadyResponse(BaseModel):
    """Response model for /ready endpoint."""
    status: str  # "ready" or "not_ready"
    dependencies: List[DependencyStatus]
    timestamp: str


@router.get("/health", response_model=HealthResponse, summary="Liveness probe")
async def health_check() -> HealthResponse:
    """Returns immediately without touching the database."""
    return HealthResponse(
        status="healthy",
        version=SERVICE_VERSION,
        timestamp=format_iso(utc_now())
    )


def _check_database(db: Database) -> DependencyStatus:
    """Run a trivial query to prove the store is reachable."""
    start = time.perf_counter()
    try:
        with db.connection("readiness check") as conn:
            conn.execute("SELECT 1")
    except Exception as e:
        latency_ms = (time.perf_counter() - start) * 1000
        logger.error("Database readiness check failed", extra={"error": str(e)})
        return DependencyStatus(
            name="database",
            status="unavailable",
            latency_ms=round(latency_ms, 2),
            message=f"Connection failed: {type(e).__name__}"
        )

    latency_ms = (time.perf_counter() - start) * 1000
    return DependencyStatus(
        name="database",
        status="ok",
        latency_ms=round(latency_ms, 2),
        message="SQLite connection healthy"
    )


@router.get("/ready", response_model=ReadyResponse, summary="Readiness probe")
async def readiness_check(
    response: Response,
    db: Database = Depends(get_database)
) -> ReadyResponse:
    """Returns 503 with status="not_ready" when the database cannot be reached."""
    db_status = _check_database(db)
    ready = db_status.status == "ok"
    if not ready:
        response.status_code = 503

    return ReadyResponse(
        status="ready" if ready else "not_ready",
        dependencies=[db_status],
        timestamp=format_iso(utc_now())
    )


@router.get("/", summary="API root")
async def root() -> Dict[str, Any]:
    return {
        "service": SERVICE_NAME,
        "version": SERVICE_VERSION,
        "docs": "/docs",
        "health": "/health",
        "ready": "/ready",
    }
