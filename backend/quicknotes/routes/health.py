"""
QuickNotes Backend - Health Check Routes
==========================================

What:  Liveness and health endpoints for monitoring and load balancer probes.
How:   GET / always answers {"message": "Healthy"} while the process is up.
       GET /health adds version, store type, note count and uptime.
Who:   Called by container health checks, load balancers, and monitoring systems.

The in-memory store has no external dependency to probe, so both endpoints
report healthy whenever they can answer at all.
"""

import logging
import time

from fastapi import APIRouter, Request

from quicknotes import __version__
from quicknotes.schemas.note import HealthResponse, LivenessResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

# Process start time for uptime reporting
_start_time = time.time()


@router.get(
    "/",
    response_model=LivenessResponse,
    summary="Service liveness check",
    description="Returns a simple object indicating the service is running.",
)
async def liveness() -> LivenessResponse:
    return LivenessResponse(message="Healthy")


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
    description=(
        "Returns the health status of the backend service together with the "
        "backing store type and the number of stored notes."
    ),
)
async def health_check(request: Request) -> HealthResponse:
    """
    Report service health.

    Returns:
        HealthResponse with store information and uptime.
    """
    repository = request.app.state.note_repository
    return HealthResponse(
        status="healthy",
        version=__version__,
        storage=type(repository).__name__,
        note_count=repository.count(),
        uptime_seconds=round(time.time() - _start_time, 2),
    )
