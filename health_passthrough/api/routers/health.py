"""Local liveness router composition."""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from health_passthrough.config import AppSettings
from health_passthrough.domain import HealthStatus


def api_create_health_router(settings: AppSettings) -> APIRouter:
    """Create the local liveness router.

    Args:
        settings: Runtime settings used for environment metadata.

    Returns:
        APIRouter: Router exposing `GET /health`.

    Raises:
        ValueError: Raised when settings are missing.
    """

    if settings is None:
        raise ValueError("settings must not be None")

    router = APIRouter(tags=["health"])

    @router.get("/health")
    def api_health_status() -> JSONResponse:
        """Return process liveness without contacting any remote target."""

        health = HealthStatus(status="ok", detail="passthrough process is running")
        payload = {
            "status": health.status,
            "app": "up",
            "detail": health.detail,
            "environment": settings.environment_name,
        }
        return JSONResponse(content=payload, status_code=status.HTTP_200_OK)

    return router
