"""
Health check endpoint.

Provides a liveness probe. The service has no external dependencies to
check for readiness.
"""

from fastapi import APIRouter
from pydantic import BaseModel

from deckcodes.models.factions import MAX_KNOWN_VERSION

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    max_version: int


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """
    Liveness probe.

    Returns healthy if the service is running, along with the highest
    deck code version it can decode.
    """
    return HealthResponse(status="healthy", max_version=MAX_KNOWN_VERSION)
