"""Typed wire-format field and decode result contracts."""

from __future__ import annotations

import base64
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Union


class WireType(IntEnum):
    """Wire types encoded in the low three bits of a field tag."""

    VARINT = 0
    FIXED64 = 1
    LENGTH_DELIMITED = 2
    START_GROUP = 3
    END_GROUP = 4
    FIXED32 = 5


@dataclass(frozen=True)
class VarintField:
    """Decoded varint field.

    Attributes:
        field_number: Field number taken from the tag.
        value: Unsigned integer value.
    """

    field_number: int
    value: int

    @property
    def wire_type(self) -> WireType:
        return WireType.VARINT

    def field_payload_value(self) -> int:
        """Return the JSON-compatible representation of this field."""

        return self.value


@dataclass(frozen=True)
class LengthDelimitedField:
    """Decoded length-delimited field.

    Attributes:
        field_number: Field number taken from the tag.
        data: Raw payload bytes copied out of the input buffer.
        text: UTF-8 decoded payload, or None when the bytes are not valid UTF-8.
    """

    field_number: int
    data: bytes
    text: str | None

    @property
    def wire_type(self) -> WireType:
        return WireType.LENGTH_DELIMITED

    def field_payload_value(self) -> str | dict[str, str]:
        """Return the JSON-compatible representation of this field.

        Returns:
            str | dict[str, str]: Decoded text, or a base64 envelope for raw bytes.

        Raises:
            RuntimeError: This helper does not raise runtime errors.
        """

        if self.text is not None:
            return self.text
        return {"base64": base64.b64encode(self.data).decode("ascii")}


WireField = Union[VarintField, LengthDelimitedField]


DECODE_STOP_TRUNCATED = "truncated"
DECODE_STOP_UNSUPPORTED_WIRE_TYPE = "unsupported_wire_type"
DECODE_STOP_INVALID_FIELD_NUMBER = "invalid_field_number"


@dataclass
class DecodedResponse:
    """Best-effort decode result built incrementally during one decode pass.

    Attributes:
        fields: Generic mapping of field number to the last decoded field.
        status: Varint value of field 1 when present.
        latency_raw: Text of field 2 when present.
        error_code: Text of field 4 when present.
        error_message: Text of field 5 when present.
        stop_reason: Why decoding halted before the end of the buffer, if it did.
        stop_offset: Buffer offset at which decoding halted, if it did.
    """

    fields: dict[int, WireField] = field(default_factory=dict)
    status: int | None = None
    latency_raw: str | None = None
    error_code: str | None = None
    error_message: str | None = None
    stop_reason: str | None = None
    stop_offset: int | None = None

    def decoded_is_complete(self) -> bool:
        """Return whether the whole input buffer was consumed."""

        return self.stop_reason is None

    def decoded_as_payload(self) -> dict[str, object]:
        """Render the decode result as a JSON-compatible mapping.

        Generic fields are rendered as `field_<n>` keys, followed by the known
        semantic attributes that were populated.

        Returns:
            dict[str, object]: JSON-compatible decode payload.

        Raises:
            RuntimeError: This helper does not raise runtime errors.
        """

        payload: dict[str, object] = {
            f"field_{field_number}": wire_field.field_payload_value()
            for field_number, wire_field in self.fields.items()
        }
        if self.status is not None:
            payload["status"] = self.status
        if self.latency_raw is not None:
            payload["latency"] = self.latency_raw
        if self.error_code is not None:
            payload["error_code"] = self.error_code
        if self.error_message is not None:
            payload["error_message"] = self.error_message
        if self.stop_reason is not None:
            payload["decode_stop"] = {"reason": self.stop_reason, "offset": self.stop_offset}
        return payload
