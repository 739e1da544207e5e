"""Passthrough orchestrator composing normalization, auth, codec, and transport."""

from __future__ import annotations

import logging
import time
from typing import Any, Callable

from health_passthrough.adapters import HealthTransportError, HealthTransportPort, rpc_status_is_auth_rejection
from health_passthrough.auth import auth_apply_client_key_authorization
from health_passthrough.domain import HealthCheckResult, StatusKind, domain_build_stage_event
from health_passthrough.wire import wire_decode_response, wire_encode_health_request

from .errors import PassthroughAuthRejectedError, PassthroughDispatchError, PassthroughRemoteFailureError
from .interfaces import HealthPassthroughConfig, HealthPassthroughPort, PreparedHealthCheck
from .normalization import passthrough_normalize_request
from .status import passthrough_classify_status

logger = logging.getLogger(__name__)


class HealthPassthroughOrchestrator(HealthPassthroughPort):
    """Concrete orchestrator for one-shot health-check passthrough requests.

    Each request moves through normalize, authorize, encode, dispatch, decode,
    and classify. Only dispatch suspends, and a failed dispatch ends the request
    with a classified `PassthroughDispatchError`.
    """

    def __init__(
        self,
        transport: HealthTransportPort,
        config: HealthPassthroughConfig | None = None,
        unix_seconds_provider: Callable[[], float] | None = None,
    ):
        """Initialize passthrough orchestrator dependencies.

        Args:
            transport: Adapter used to reach the remote health service.
            config: Passthrough configuration.
            unix_seconds_provider: Optional clock for credential windows.

        Returns:
            None: Initializer does not return a value.

        Raises:
            ValueError: Raised when dependencies or config values are invalid.
        """

        if transport is None:
            raise ValueError("transport must not be None")
        resolved_config = config or HealthPassthroughConfig()
        if resolved_config.auth_window_seconds <= 0:
            raise ValueError("config.auth_window_seconds must be > 0")

        self._transport = transport
        self._config = resolved_config
        self._unix_seconds_provider = unix_seconds_provider or time.time

    def passthrough_prepare(self, payload: Any) -> PreparedHealthCheck:
        """Normalize, authorize, and encode one caller payload.

        Args:
            payload: Decoded JSON request body.

        Returns:
            PreparedHealthCheck: Prepared request state with stage timeline.

        Raises:
            PassthroughInputError: Raised when the payload is unusable.
        """

        request = passthrough_normalize_request(payload, default_insecure=self._config.default_insecure)
        timeline: list[dict[str, object]] = [
            domain_build_stage_event(
                stage="normalize",
                status="completed",
                details={"metadata_count": len(request.metadata)},
            )
        ]

        metadata_sent = tuple(
            auth_apply_client_key_authorization(
                request.metadata,
                unix_seconds_provider=self._unix_seconds_provider,
                window_seconds=self._config.auth_window_seconds,
            )
        )
        timeline.append(
            domain_build_stage_event(
                stage="authorize",
                status="completed",
                details={"credential_derived": metadata_sent != request.metadata},
            )
        )

        request_bytes = wire_encode_health_request(request.service)
        timeline.append(
            domain_build_stage_event(
                stage="encode",
                status="completed",
                details={"request_bytes": len(request_bytes)},
            )
        )
        return PreparedHealthCheck(
            request=request,
            metadata_sent=metadata_sent,
            request_bytes=request_bytes,
            timeline=tuple(timeline),
        )

    async def passthrough_dispatch(self, prepared: PreparedHealthCheck) -> HealthCheckResult:
        """Call the remote health method once, then decode and classify the response.

        Args:
            prepared: Prepared request state.

        Returns:
            HealthCheckResult: Classified result with full decode payload.

        Raises:
            PassthroughAuthRejectedError: Raised when the failure looks like rejected credentials.
            PassthroughRemoteFailureError: Raised for every other transport failure.
        """

        request = prepared.request
        timeline = list(prepared.timeline)
        dispatch_started = time.monotonic()
        logger.info(
            "Dispatching health check target=%s service=%r insecure=%s via %s",
            request.target,
            request.service,
            request.insecure,
            self._transport.adapter_source_name(),
        )

        try:
            channel = self._transport.adapter_open_channel(request.target, request.insecure)
        except HealthTransportError as error:
            raise self._passthrough_build_dispatch_error(error, prepared) from error

        try:
            response_bytes = await self._transport.adapter_call_health_check(
                channel,
                prepared.request_bytes,
                prepared.metadata_sent,
            )
        except HealthTransportError as error:
            raise self._passthrough_build_dispatch_error(error, prepared) from error
        finally:
            await self._transport.adapter_close_channel(channel)

        timeline.append(
            domain_build_stage_event(
                stage="dispatch",
                status="completed",
                details={"response_bytes": len(response_bytes)},
                started_monotonic=dispatch_started,
            )
        )

        decoded = wire_decode_response(response_bytes)
        decode_details: dict[str, object] = {"field_numbers": sorted(decoded.fields)}
        if not decoded.decoded_is_complete():
            decode_details["stop_reason"] = decoded.stop_reason
            decode_details["stop_offset"] = decoded.stop_offset
        timeline.append(
            domain_build_stage_event(
                stage="decode",
                status="completed" if decoded.decoded_is_complete() else "partial",
                details=decode_details,
            )
        )

        status_kind = passthrough_classify_status(decoded.status)
        timeline.append(
            domain_build_stage_event(stage="classify", status="completed", details={"status": status_kind.value})
        )
        logger.info("Health check target=%s resolved status=%s", request.target, status_kind.value)
        return HealthCheckResult(
            status=status_kind,
            raw_status=decoded.status,
            serving=status_kind is StatusKind.SERVING,
            decoded=decoded,
            timeline=tuple(timeline),
        )

    async def passthrough_execute(self, payload: Any) -> HealthCheckResult:
        """Prepare and dispatch one caller payload.

        Args:
            payload: Decoded JSON request body.

        Returns:
            HealthCheckResult: Classified result.

        Raises:
            PassthroughInputError: Raised when the payload is unusable.
            PassthroughDispatchError: Raised when the remote call fails.
        """

        return await self.passthrough_dispatch(self.passthrough_prepare(payload))

    def _passthrough_build_dispatch_error(
        self,
        error: HealthTransportError,
        prepared: PreparedHealthCheck,
    ) -> PassthroughDispatchError:
        """Classify one transport failure as auth rejection or remote failure.

        Args:
            error: Transport failure.
            prepared: Prepared request state that was being dispatched.

        Returns:
            PassthroughDispatchError: Classified failure carrying transport detail.

        Raises:
            RuntimeError: This helper does not raise runtime errors.
        """

        error_type = (
            PassthroughAuthRejectedError
            if rpc_status_is_auth_rejection(error.code, error.details)
            else PassthroughRemoteFailureError
        )
        logger.warning(
            "Health check target=%s failed as %s: %s",
            prepared.request.target,
            error_type.__name__,
            error,
        )
        return error_type(
            str(error) or "Health check failed.",
            code=error.code,
            details=error.details,
            metadata=error.metadata,
            metadata_sent=prepared.metadata_sent,
        )
