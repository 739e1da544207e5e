"""gRPC transport adapter that invokes the health-check method with raw bytes."""

from __future__ import annotations

import base64
import logging
import re
from typing import Final, Sequence

import grpc

from health_passthrough.domain import MetadataEntry

from .grpc_errors import HealthTransportCallError, HealthTransportConnectionError
from .grpc_status_codes import rpc_status_name
from .interfaces import HealthTransportPort

logger = logging.getLogger(__name__)

DEFAULT_HEALTH_METHOD_PATH: Final[str] = "/grpc.health.v1.Health/Check"
_METADATA_KEY_PATTERN: Final[re.Pattern[str]] = re.compile(r"[0-9a-z_.-]+")
_METADATA_VALUE_PATTERN: Final[re.Pattern[str]] = re.compile(r"[\x20-\x7e]*")


class GrpcHealthTransport(HealthTransportPort):
    """Adapter implementation over `grpc.aio` generic unary-unary calls.

    Requests and responses cross the channel as opaque bytes: no serializer is
    registered, so encoding and decoding stay in the wire package.
    """

    _USER_AGENT: Final[str] = "grpc-health-passthrough/1.0"
    _BINARY_METADATA_SUFFIX: Final[str] = "-bin"

    def __init__(
        self,
        method_path: str = DEFAULT_HEALTH_METHOD_PATH,
        call_timeout_seconds: float | None = None,
    ):
        """Initialize gRPC health transport.

        Args:
            method_path: Fully qualified RPC method path.
            call_timeout_seconds: Optional per-call deadline; None waits indefinitely.

        Returns:
            None: Initializer does not return a value.

        Raises:
            ValueError: Raised when config values are invalid.
        """

        normalized_method_path = method_path.strip()
        if not normalized_method_path.startswith("/"):
            raise ValueError("method_path must start with '/'")
        if call_timeout_seconds is not None and call_timeout_seconds <= 0:
            raise ValueError("call_timeout_seconds must be > 0")

        self._method_path = normalized_method_path
        self._call_timeout_seconds = call_timeout_seconds

    def adapter_source_name(self) -> str:
        return f"grpc:{self._method_path}"

    def adapter_open_channel(self, target: str, insecure: bool) -> grpc.aio.Channel:
        """Create one plaintext or TLS channel to the target.

        Args:
            target: Remote address in `host:port` form.
            insecure: Use plaintext when True, TLS otherwise.

        Returns:
            grpc.aio.Channel: Lazily connecting channel.

        Raises:
            HealthTransportConnectionError: Raised when the channel cannot be created.
        """

        normalized_target = target.strip()
        if not normalized_target:
            raise HealthTransportConnectionError("target must not be blank")

        options = [("grpc.primary_user_agent", self._USER_AGENT)]
        try:
            if insecure:
                return grpc.aio.insecure_channel(normalized_target, options=options)
            return grpc.aio.secure_channel(normalized_target, grpc.ssl_channel_credentials(), options=options)
        except (ValueError, RuntimeError) as error:
            raise HealthTransportConnectionError(f"failed to open channel to {normalized_target}: {error}") from error

    async def adapter_call_health_check(
        self,
        channel: grpc.aio.Channel,
        request_bytes: bytes,
        metadata: Sequence[MetadataEntry],
    ) -> bytes:
        """Invoke the health-check method once.

        Args:
            channel: Channel from `adapter_open_channel`.
            request_bytes: Encoded request message.
            metadata: Metadata entries to send with the call.

        Returns:
            bytes: Raw response message bytes.

        Raises:
            HealthTransportCallError: Raised when metadata cannot be sent or the call
                ends with a non-OK status.
        """

        call_metadata = self._adapter_build_call_metadata(metadata)
        call = channel.unary_unary(
            self._method_path,
            request_serializer=None,
            response_deserializer=None,
        )
        try:
            response = await call(
                request_bytes,
                metadata=call_metadata,
                timeout=self._call_timeout_seconds,
            )
        except grpc.aio.AioRpcError as error:
            raise self._adapter_build_call_error(error) from error
        except Exception as error:
            logger.warning("Health call failed before completion: %s", error)
            raise HealthTransportCallError(
                f"health call failed before completion: {error}",
                details=str(error) or type(error).__name__,
            ) from error
        return bytes(response or b"")

    async def adapter_close_channel(self, channel: grpc.aio.Channel) -> None:
        await channel.close()

    def _adapter_build_call_metadata(self, metadata: Sequence[MetadataEntry]) -> tuple[tuple[str, str | bytes], ...]:
        """Convert metadata entries into gRPC call metadata.

        gRPC only accepts lowercase keys of `[0-9a-z_.-]`, `-bin` keys carry bytes,
        and every other value must be printable ASCII.

        Args:
            metadata: Metadata entries in caller order.

        Returns:
            tuple[tuple[str, str | bytes], ...]: gRPC metadata pairs.

        Raises:
            HealthTransportCallError: Raised when an entry cannot be sent as gRPC metadata.
        """

        call_metadata: list[tuple[str, str | bytes]] = []
        for entry in metadata:
            key = entry.key.lower()
            if not _METADATA_KEY_PATTERN.fullmatch(key):
                raise self._adapter_build_metadata_error(
                    f"metadata key {entry.key!r} contains characters not allowed in gRPC metadata"
                )
            value_text = entry.entry_value_text()
            if key.endswith(self._BINARY_METADATA_SUFFIX):
                call_metadata.append((key, value_text.encode("utf-8")))
            elif _METADATA_VALUE_PATTERN.fullmatch(value_text):
                call_metadata.append((key, value_text))
            else:
                raise self._adapter_build_metadata_error(
                    f"metadata value for key {entry.key!r} must be printable ASCII"
                )
        return tuple(call_metadata)

    def _adapter_build_call_error(self, error: grpc.aio.AioRpcError) -> HealthTransportCallError:
        """Translate one gRPC error into a project-native transport error.

        Args:
            error: Failed call error raised by grpc.

        Returns:
            HealthTransportCallError: Error carrying code, details, and trailing metadata.

        Raises:
            RuntimeError: This helper does not raise runtime errors.
        """

        status_code = error.code()
        code_value = int(status_code.value[0]) if status_code is not None else None
        code_name = rpc_status_name(code_value)
        details = error.details()
        error_metadata = self._adapter_metadata_to_map(error.trailing_metadata())
        logger.warning("Health call failed: code=%s (%s) details=%s", code_value, code_name, details)
        return HealthTransportCallError(
            f"{code_value} {code_name}: {details or ''}".rstrip(),
            code=code_value,
            details=details,
            metadata=error_metadata,
        )

    def _adapter_metadata_to_map(self, metadata) -> dict[str, str] | None:
        if not metadata:
            return None
        metadata_map: dict[str, str] = {}
        for key, value in metadata:
            if isinstance(value, bytes):
                metadata_map[key] = base64.b64encode(value).decode("ascii")
            else:
                metadata_map[key] = str(value)
        return metadata_map

    def _adapter_build_metadata_error(self, details: str) -> HealthTransportCallError:
        logger.warning("Health call rejected before sending: %s", details)
        return HealthTransportCallError(f"invalid call metadata: {details}", details=details)
