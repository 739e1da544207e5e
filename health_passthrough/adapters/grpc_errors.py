"""Project-native typed exceptions for health transport failures."""

from __future__ import annotations


class HealthTransportError(Exception):
    """Base exception for transport-level health-check failures.

    Attributes:
        code: Optional numeric RPC status code.
        details: Optional textual detail from the remote side.
        metadata: Optional metadata attached to the failure.
    """

    def __init__(
        self,
        message: str,
        code: int | None = None,
        details: str | None = None,
        metadata: dict[str, str] | None = None,
    ):
        super().__init__(message)
        self.code = code
        self.details = details
        self.metadata = metadata


class HealthTransportConnectionError(HealthTransportError, ConnectionError):
    """Channel could not be established to the remote target."""


class HealthTransportCallError(HealthTransportError, RuntimeError):
    """Remote health-check call completed with a non-OK status."""
