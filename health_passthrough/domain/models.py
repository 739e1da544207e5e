"""Typed domain models shared across runtime layers.

This module provides the per-request data contracts passed between the API,
the passthrough orchestrator, the auth transform, and the transport adapter.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from health_passthrough.wire import DecodedResponse

MetadataValue = Union[str, int, float, bool]


class StatusKind(str, Enum):
    """Serving status reported by the remote health service."""

    SERVING = "SERVING"
    NOT_SERVING = "NOT_SERVING"
    SERVICE_UNKNOWN = "SERVICE_UNKNOWN"
    UNKNOWN = "UNKNOWN"


@dataclass(frozen=True)
class MetadataEntry:
    """One caller-supplied metadata key/value pair.

    Attributes:
        key: Metadata key exactly as provided by the caller.
        value: Scalar metadata value.
    """

    key: str
    value: MetadataValue

    def entry_key_matches(self, key: str) -> bool:
        """Return whether this entry key equals `key` ignoring case."""

        return self.key.lower() == key.lower()

    def entry_value_text(self) -> str:
        """Return the metadata value rendered as transmitted text."""

        return domain_metadata_value_to_text(self.value)

    def entry_as_payload(self) -> dict[str, MetadataValue]:
        return {"key": self.key, "value": self.value}


@dataclass(frozen=True)
class HealthCheckRequest:
    """Normalized health-check passthrough request.

    Attributes:
        target: Remote address in `host:port` form.
        service: Service name to check; empty means overall server health.
        insecure: Whether to use a plaintext channel instead of TLS.
        metadata: Well-formed caller metadata entries in original order.
    """

    target: str
    service: str = ""
    insecure: bool = False
    metadata: tuple[MetadataEntry, ...] = ()


@dataclass(frozen=True)
class HealthCheckResult:
    """Classified outcome of one successful remote health check.

    Attributes:
        status: Classified serving status.
        raw_status: Status value exactly as decoded, if any.
        serving: Whether the remote service reported SERVING.
        decoded: Full decode result of the response buffer.
        timeline: Structured stage events recorded while handling the request.
    """

    status: StatusKind
    raw_status: int | str | None
    serving: bool
    decoded: DecodedResponse
    timeline: tuple[dict[str, object], ...] = ()


@dataclass(frozen=True)
class HealthStatus:
    """Health response contract used by the local liveness surface.

    Attributes:
        status: Overall status text for service health.
        detail: Additional message suitable for operational diagnostics.
    """

    status: str
    detail: str


def domain_metadata_value_to_text(value: MetadataValue) -> str:
    """Render one scalar metadata value as text.

    Booleans render as `true`/`false` and integral floats without a fractional
    part, so JSON inputs produce the same text regardless of numeric type.

    Args:
        value: Scalar metadata value.

    Returns:
        str: Text representation.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
