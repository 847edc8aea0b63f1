"""
Health check router.

Provides a simple health endpoint for liveness/readiness probes.
"""

from fastapi import APIRouter
from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str
    version: str


def build_health_router(version: str) -> APIRouter:
    """Create the health router reporting the given application version."""
    router = APIRouter(tags=["health"])

    @router.get(
        "/health",
        response_model=HealthResponse,
        summary="Health check",
        description="Returns application health status and version.",
    )
    def health_check() -> HealthResponse:
        """Return current application health status."""
        return HealthResponse(status="ok", version=version)

    return router
