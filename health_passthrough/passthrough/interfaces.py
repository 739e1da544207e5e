"""Typed interfaces for passthrough orchestration responsibilities."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol

from health_passthrough.auth import DEFAULT_WINDOW_SECONDS
from health_passthrough.domain import HealthCheckRequest, HealthCheckResult, MetadataEntry


@dataclass(frozen=True)
class HealthPassthroughConfig:
    """Configuration values for passthrough orchestration.

    Attributes:
        auth_window_seconds: Window size for client-key derived credentials.
        default_insecure: Channel mode used when a payload omits `insecure`.
    """

    auth_window_seconds: int = DEFAULT_WINDOW_SECONDS
    default_insecure: bool = False


@dataclass(frozen=True)
class PreparedHealthCheck:
    """Request state after normalization, authorization, and encoding.

    Attributes:
        request: Normalized caller request.
        metadata_sent: Metadata entries after the auth transform.
        request_bytes: Encoded request message.
        timeline: Stage events recorded so far.
    """

    request: HealthCheckRequest
    metadata_sent: tuple[MetadataEntry, ...]
    request_bytes: bytes
    timeline: tuple[dict[str, object], ...] = ()


class HealthPassthroughPort(Protocol):
    """Port definition for running one health-check passthrough."""

    def passthrough_prepare(self, payload: Any) -> PreparedHealthCheck:
        """Normalize, authorize, and encode one caller payload.

        Args:
            payload: Decoded JSON request body.

        Returns:
            PreparedHealthCheck: Prepared request state.

        Raises:
            PassthroughInputError: Raised when the payload is unusable.
        """

    async def passthrough_dispatch(self, prepared: PreparedHealthCheck) -> HealthCheckResult:
        """Dispatch one prepared request and classify the decoded response.

        Args:
            prepared: Prepared request state.

        Returns:
            HealthCheckResult: Classified result.

        Raises:
            PassthroughDispatchError: Raised when the remote call fails.
        """
