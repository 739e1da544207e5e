"""Schema-less encoder for the health-check request message."""

from __future__ import annotations

from typing import Final

from .interfaces import WireType
from .varint import wire_encode_varint

HEALTH_REQUEST_SERVICE_FIELD_NUMBER: Final[int] = 1


def wire_encode_tag(field_number: int, wire_type: WireType) -> bytes:
    """Encode one field tag as a varint.

    Args:
        field_number: Positive field number.
        wire_type: Field wire type.

    Returns:
        bytes: Encoded tag bytes.

    Raises:
        ValueError: Raised when field number is not positive.
    """

    if field_number < 1:
        raise ValueError("field_number must be >= 1")
    return wire_encode_varint((field_number << 3) | int(wire_type))


def wire_encode_health_request(service: str) -> bytes:
    """Encode a `HealthCheckRequest{service}` message.

    Only the `service` field is supported. An empty service encodes to no bytes,
    which the remote side reads as "overall server health".

    Args:
        service: Service name to check.

    Returns:
        bytes: Encoded request message.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    if not service:
        return b""

    service_bytes = service.encode("utf-8")
    return b"".join(
        (
            wire_encode_tag(HEALTH_REQUEST_SERVICE_FIELD_NUMBER, WireType.LENGTH_DELIMITED),
            wire_encode_varint(len(service_bytes)),
            service_bytes,
        )
    )
