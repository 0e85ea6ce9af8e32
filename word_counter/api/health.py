"""
Word Counter Service - Health API Route

Patterns Applied:
- Health Check Pattern with a Pydantic response model
"""

import time

from fastapi import APIRouter
from pydantic import BaseModel

from word_counter import __version__
from word_counter.core.logging import SERVICE_NAME, get_logger

router = APIRouter(tags=["health"])

logger = get_logger(__name__)


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    service: str
    version: str
    timestamp: int


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health Check",
    description="Basic health check endpoint for liveness probe",
)
async def health_check() -> HealthResponse:
    """Health check endpoint.

    Returns:
        Service status with a millisecond timestamp
    """
    logger.debug("health_check", status="UP")
    return HealthResponse(
        status="UP",
        service=SERVICE_NAME,
        version=__version__,
        timestamp=int(time.time() * 1000),
    )
