"""FastAPI application factory for the passthrough service."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from health_passthrough.config import AppSettings
from health_passthrough.passthrough import HealthPassthroughPort

from .routers import api_create_health_router, api_create_passthrough_router


def create_api_application(settings: AppSettings, orchestrator: HealthPassthroughPort) -> FastAPI:
    """Create the FastAPI application instance for the service.

    Args:
        settings: Validated application settings.
        orchestrator: Passthrough orchestrator used by the check endpoint.

    Returns:
        FastAPI: Framework application instance with routers and CORS attached.

    Raises:
        ValueError: Raised when dependencies are missing.
    """

    application = FastAPI(title="gRPC Health Passthrough")
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["content-type"],
    )

    application.include_router(api_create_passthrough_router(orchestrator=orchestrator))
    application.include_router(api_create_health_router(settings=settings))
    return application
