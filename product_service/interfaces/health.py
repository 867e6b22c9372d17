"""
Health check router.

Provides a simple liveness endpoint. No business logic and no
database round trip.
"""

from fastapi import APIRouter
from pydantic import BaseModel

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Response schema for the health check endpoint."""

    status: str
    message: str


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Returns liveness status only.",
)
def health_check() -> HealthResponse:
    """Return current application health status."""
    return HealthResponse(status="ok", message="Service is healthy")
