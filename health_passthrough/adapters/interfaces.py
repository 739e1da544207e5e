"""Typed interfaces for transport adapter responsibilities."""

from typing import Any, Protocol, Sequence

from health_passthrough.domain import MetadataEntry


class HealthTransportPort(Protocol):
    """Port definition for invoking the remote health-check method with raw bytes."""

    def adapter_source_name(self) -> str:
        """Return adapter source identifier for diagnostics.

        Returns:
            str: Human-readable transport identifier.

        Raises:
            RuntimeError: Raised when source metadata is unavailable.
        """

    def adapter_open_channel(self, target: str, insecure: bool) -> Any:
        """Open one channel to the remote target.

        Args:
            target: Remote address in `host:port` form.
            insecure: Use plaintext when True, TLS otherwise.

        Returns:
            Any: Opaque channel handle passed back to call/close.

        Raises:
            HealthTransportConnectionError: Raised when the channel cannot be created.
        """

    async def adapter_call_health_check(
        self,
        channel: Any,
        request_bytes: bytes,
        metadata: Sequence[MetadataEntry],
    ) -> bytes:
        """Invoke the health-check method once and return the raw response bytes.

        Args:
            channel: Channel handle from `adapter_open_channel`.
            request_bytes: Encoded request message.
            metadata: Metadata entries to send with the call.

        Returns:
            bytes: Raw response message bytes.

        Raises:
            HealthTransportCallError: Raised when the remote call fails.
        """

    async def adapter_close_channel(self, channel: Any) -> None:
        """Release one channel handle.

        Args:
            channel: Channel handle from `adapter_open_channel`.

        Returns:
            None: Closes the channel as side effect.

        Raises:
            RuntimeError: Raised when channel release fails unexpectedly.
        """
