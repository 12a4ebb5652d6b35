"""Health check endpoint."""

import time
from fastapi import APIRouter

from svg_inspector import __version__
from svg_inspector.models.responses import HealthResponse
from svg_inspector.validators import schema_registry

router = APIRouter()

_start_time = time.time()


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Service health, including a consistency check of the schema tables."""
    problems = schema_registry.check_consistency()

    return HealthResponse(
        status="healthy" if not problems else "degraded",
        version=__version__,
        uptime_seconds=round(time.time() - _start_time, 2),
        known_elements=len(schema_registry),
        schema_problems=problems,
    )
