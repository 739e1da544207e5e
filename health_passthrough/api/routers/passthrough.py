"""Health-check passthrough router composition."""

from __future__ import annotations

import json
from typing import Any

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from health_passthrough.domain import HealthCheckResult, MetadataEntry
from health_passthrough.passthrough import (
    HealthPassthroughPort,
    PassthroughAuthRejectedError,
    PassthroughDispatchError,
    PassthroughInputError,
    PreparedHealthCheck,
)


def api_render_result_payload(prepared: PreparedHealthCheck, result: HealthCheckResult) -> dict[str, object]:
    """Render one successful passthrough result as a JSON-compatible body.

    Args:
        prepared: Prepared request state.
        result: Classified result.

    Returns:
        dict[str, object]: Response body.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    request = prepared.request
    return {
        "target": request.target,
        "service": request.service,
        "insecure": request.insecure,
        "metadataSent": _api_render_metadata(prepared.metadata_sent),
        "status": result.status.value,
        "rawStatus": result.raw_status,
        "serving": result.serving,
        "grpcResponse": result.decoded.decoded_as_payload(),
        "timeline": list(result.timeline),
    }


def api_render_failure_payload(
    error: PassthroughDispatchError,
    prepared: PreparedHealthCheck,
) -> dict[str, object]:
    """Render one classified dispatch failure as a JSON-compatible body."""

    return {
        "error": str(error) or "Health check failed.",
        "code": error.code,
        "details": error.details,
        "metadata": error.metadata,
        "target": prepared.request.target,
        "service": prepared.request.service,
        "metadataSent": _api_render_metadata(error.metadata_sent),
    }


def api_create_passthrough_router(orchestrator: HealthPassthroughPort) -> APIRouter:
    """Create the passthrough router with banner and check endpoints.

    Args:
        orchestrator: Passthrough orchestrator.

    Returns:
        APIRouter: Router exposing `GET /` and `POST /health/check`.

    Raises:
        ValueError: Raised when orchestrator is missing.
    """

    if orchestrator is None:
        raise ValueError("orchestrator must not be None")

    router = APIRouter(tags=["passthrough"])

    @router.get("/")
    def api_passthrough_index() -> dict[str, object]:
        return {
            "message": "gRPC health passthrough is running.",
            "endpoint": "POST /health/check",
            "payloadExample": {
                "target": "health.example.internal:443",
                "service": "",
                "insecure": False,
                "metadata": [{"key": "Authorization", "value": "Bearer token"}],
            },
        }

    @router.post("/health/check")
    async def api_passthrough_check(request: Request) -> JSONResponse:
        """Pass one health check through to the remote target.

        Returns:
            JSONResponse: 200 when serving, 503 when not serving, 400 for unusable
            input, 401 for rejected credentials, 502 for other remote failures.

        Raises:
            RuntimeError: Raised when execution fails unexpectedly.
        """

        try:
            payload: Any = await request.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as error:
            return JSONResponse(
                content={"error": "Invalid JSON payload.", "details": str(error)},
                status_code=status.HTTP_400_BAD_REQUEST,
            )

        try:
            prepared = orchestrator.passthrough_prepare(payload)
        except PassthroughInputError as error:
            body = payload if isinstance(payload, dict) else {}
            return JSONResponse(
                content={
                    "error": str(error),
                    "target": body.get("target", body.get("host")),
                    "service": body.get("service") or "",
                },
                status_code=status.HTTP_400_BAD_REQUEST,
            )

        try:
            result = await orchestrator.passthrough_dispatch(prepared)
        except PassthroughDispatchError as error:
            status_code = (
                status.HTTP_401_UNAUTHORIZED
                if isinstance(error, PassthroughAuthRejectedError)
                else status.HTTP_502_BAD_GATEWAY
            )
            return JSONResponse(content=api_render_failure_payload(error, prepared), status_code=status_code)

        return JSONResponse(
            content=api_render_result_payload(prepared, result),
            status_code=status.HTTP_200_OK if result.serving else status.HTTP_503_SERVICE_UNAVAILABLE,
        )

    return router


def _api_render_metadata(entries: tuple[MetadataEntry, ...]) -> list[dict[str, object]]:
    return [entry.entry_as_payload() for entry in entries]
