"""Application bootstrap wiring for startup validation and dependency assembly."""

from fastapi import FastAPI

from health_passthrough.adapters import GrpcHealthTransport
from health_passthrough.api import create_api_application
from health_passthrough.config import AppSettings, config_load_settings
from health_passthrough.passthrough import HealthPassthroughConfig, HealthPassthroughOrchestrator


def bootstrap_create_orchestrator(settings: AppSettings) -> HealthPassthroughOrchestrator:
    """Build the passthrough orchestrator from validated settings.

    Args:
        settings: Validated runtime settings.

    Returns:
        HealthPassthroughOrchestrator: Fully wired orchestrator instance.

    Raises:
        ValueError: Raised when settings carry invalid transport values.
    """

    transport = GrpcHealthTransport(
        method_path=settings.grpc_health_method_path,
        call_timeout_seconds=settings.grpc_call_timeout_seconds,
    )
    return HealthPassthroughOrchestrator(
        transport=transport,
        config=HealthPassthroughConfig(
            auth_window_seconds=settings.auth_window_seconds,
            default_insecure=settings.default_insecure,
        ),
    )


def bootstrap_create_application(settings: AppSettings | None = None) -> FastAPI:
    """Assemble the runtime application after validating startup configuration.

    Args:
        settings: Optional pre-loaded settings; loaded from the environment when omitted.

    Returns:
        FastAPI: Fully initialized FastAPI application instance.

    Raises:
        SettingsLoadError: Raised when startup configuration validation fails.
    """

    resolved_settings = settings or config_load_settings()
    return create_api_application(
        settings=resolved_settings,
        orchestrator=bootstrap_create_orchestrator(resolved_settings),
    )
