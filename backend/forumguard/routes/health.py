"""
ForumGuard Backend — Health Check Route
=========================================

What:  Health check endpoint for container probes and load balancers.
How:   Runs `SELECT 1` against the forum store. The validator has no
       dependencies, so the database is the only thing that can be down.

Status levels:
    - healthy:   forum store reachable (HTTP 200)
    - unhealthy: forum store unreachable (HTTP 503); validation still
                 works, engagement and posts endpoints will fail
"""

import logging
import time

from fastapi import APIRouter, Response
from sqlalchemy import text

from forumguard import __version__
from forumguard.database import engine
from forumguard.schemas.forum import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check(response: Response) -> HealthResponse:
    db_status = "connected"
    overall = "healthy"

    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except Exception as e:
        db_status = "disconnected"
        overall = "unhealthy"
        response.status_code = 503
        logger.warning("Health check: forum store unreachable: %s", str(e))

    return HealthResponse(
        status=overall,
        version=__version__,
        database=db_status,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
