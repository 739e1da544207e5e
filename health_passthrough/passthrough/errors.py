"""Typed exceptions surfaced by the passthrough orchestrator."""

from __future__ import annotations

from health_passthrough.domain import MetadataEntry


class PassthroughError(Exception):
    """Base exception for passthrough request failures."""


class PassthroughInputError(PassthroughError, ValueError):
    """Caller payload is unusable; the remote call was not attempted."""


class PassthroughDispatchError(PassthroughError, RuntimeError):
    """Remote call failed after the request was prepared.

    Attributes:
        code: Optional numeric RPC status code.
        details: Optional textual detail from the remote side.
        metadata: Optional metadata attached to the failure by the transport.
        metadata_sent: Metadata entries that were sent with the failed call.
    """

    def __init__(
        self,
        message: str,
        code: int | None = None,
        details: str | None = None,
        metadata: dict[str, str] | None = None,
        metadata_sent: tuple[MetadataEntry, ...] = (),
    ):
        super().__init__(message)
        self.code = code
        self.details = details
        self.metadata = metadata
        self.metadata_sent = metadata_sent


class PassthroughAuthRejectedError(PassthroughDispatchError):
    """Remote side most likely rejected the supplied credentials."""


class PassthroughRemoteFailureError(PassthroughDispatchError):
    """Remote side was unreachable or answered with a non-auth failure."""
