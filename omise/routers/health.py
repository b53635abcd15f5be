"""Health and readiness endpoints.

- GET /health: process is up
- GET /readiness: 200 only when the Omise API accepts the configured key
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Response

from omise.api.result import Failure
from omise.models.responses import ApiResponse


def create_health_router(*, account: Any = None) -> APIRouter:
    """Factory that creates the health router with injected dependencies."""

    health_router = APIRouter(tags=["health"])

    @health_router.get("/health")
    def health() -> dict:
        return ApiResponse(success=True, data={"status": "healthy"}).model_dump()

    @health_router.get("/readiness")
    def readiness(response: Response) -> dict:
        """Readiness probe: one authenticated ``GET /account`` call."""
        if account is None:
            response.status_code = 503
            return ApiResponse(
                success=False, data={"ready": False}, error="Omise client not configured"
            ).model_dump()

        result = account.retrieve()
        if isinstance(result, Failure):
            response.status_code = 503
            return ApiResponse(
                success=False,
                data={"ready": False},
                error="Service not ready",
                meta={"kind": result.error.kind.value, "code": result.error.code},
            ).model_dump()

        return ApiResponse(success=True, data={"ready": True}).model_dump()

    return health_router
