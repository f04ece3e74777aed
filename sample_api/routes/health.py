"""
Sample API: Health Check Route
================================

What:  Liveness and storage probe for load balancers and container health checks.
How:   Runs SELECT 1 on a fresh pooled connection and reports pool occupancy.

Status levels:
    - healthy:   storage reachable (HTTP 200)
    - unhealthy: storage unreachable (HTTP 503)
"""

import logging
import time

from fastapi import APIRouter, Request, Response
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from sample_api import __version__
from sample_api.database import Database
from sample_api.schemas.common import HealthResponse, PoolStatus

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    responses={503: {"description": "Storage unreachable", "model": HealthResponse}},
    summary="Service health check",
)
async def health_check(request: Request, response: Response) -> HealthResponse:
    """
    Probe the database and report pool usage.

    The probe connection is released before the pool is inspected, so
    `checked_out` reflects request traffic only.
    """
    database: Database = request.app.state.database
    db_status = "connected"
    overall = "healthy"

    try:
        async with database.engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except (SQLAlchemyError, OSError) as e:
        db_status = "disconnected"
        overall = "unhealthy"
        response.status_code = 503
        logger.warning("Health check: database unreachable: %s", str(e))

    return HealthResponse(
        status=overall,
        version=__version__,
        database=db_status,
        pool=PoolStatus(**database.pool_status()),
        uptime_seconds=round(time.time() - _start_time, 2),
    )
