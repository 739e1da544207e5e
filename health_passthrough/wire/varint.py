"""Base-128 varint encoding helpers for the protobuf wire format."""

from __future__ import annotations

from typing import Final

VARINT_MAX_VALUE: Final[int] = (1 << 64) - 1
VARINT_MAX_BYTES: Final[int] = 10

_VARINT_PAYLOAD_MASK: Final[int] = 0x7F
_VARINT_CONTINUATION_BIT: Final[int] = 0x80


def wire_encode_varint(value: int) -> bytes:
    """Encode one unsigned integer as a little-endian base-128 varint.

    Args:
        value: Unsigned integer in the 64-bit range.

    Returns:
        bytes: Varint bytes with the continuation bit set on all but the last byte.

    Raises:
        ValueError: Raised when value is negative or exceeds 64 bits.
    """

    if value < 0:
        raise ValueError("varint value must be >= 0")
    if value > VARINT_MAX_VALUE:
        raise ValueError("varint value must fit in 64 bits")

    encoded = bytearray()
    while True:
        low_bits = value & _VARINT_PAYLOAD_MASK
        value >>= 7
        if value:
            encoded.append(low_bits | _VARINT_CONTINUATION_BIT)
        else:
            encoded.append(low_bits)
            return bytes(encoded)


def wire_decode_varint(buffer: bytes, offset: int) -> tuple[int, int] | None:
    """Decode one varint starting at `offset` without reading past the buffer.

    Args:
        buffer: Source bytes.
        offset: Index of the first varint byte.

    Returns:
        tuple[int, int] | None: `(value, bytes_consumed)`, or None when the buffer
        ends before a terminating byte or the varint is longer than 10 bytes.

    Raises:
        ValueError: Raised when offset is negative.
    """

    if offset < 0:
        raise ValueError("offset must be >= 0")

    value = 0
    shift = 0
    cursor = offset
    buffer_length = len(buffer)
    while cursor < buffer_length and cursor - offset < VARINT_MAX_BYTES:
        current_byte = buffer[cursor]
        cursor += 1
        value |= (current_byte & _VARINT_PAYLOAD_MASK) << shift
        if not current_byte & _VARINT_CONTINUATION_BIT:
            return value & VARINT_MAX_VALUE, cursor - offset
        shift += 7
    return None
