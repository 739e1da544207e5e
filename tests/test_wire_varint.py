"""Regression tests for varint encoding and bounds-safe decoding."""

from __future__ import annotations

import pytest

from health_passthrough.wire import wire_decode_varint, wire_encode_varint


def test_wire_varint_encodes_single_and_multi_byte_values() -> None:
    """Encode boundary values with the continuation bit on all but the last byte.

    Returns:
        None: Assertions validate encoded byte layout.

    Raises:
        AssertionError: Raised when encoded bytes are incorrect.
    """

    assert wire_encode_varint(0) == b"\x00"
    assert wire_encode_varint(1) == b"\x01"
    assert wire_encode_varint(127) == b"\x7f"
    assert wire_encode_varint(128) == b"\x80\x01"
    assert wire_encode_varint(300) == b"\xac\x02"
    assert wire_encode_varint((1 << 64) - 1) == b"\xff" * 9 + b"\x01"


def test_wire_varint_rejects_out_of_range_values() -> None:
    """Reject negative values and values wider than 64 bits."""

    with pytest.raises(ValueError):
        wire_encode_varint(-1)
    with pytest.raises(ValueError):
        wire_encode_varint(1 << 64)


def test_wire_varint_decodes_value_and_consumed_size_at_offset() -> None:
    """Decode a varint in the middle of a buffer and report consumed bytes.

    Returns:
        None: Assertions validate decoded tuple.

    Raises:
        AssertionError: Raised when decoded values are incorrect.
    """

    buffer = b"\x08\xac\x02\x10"

    assert wire_decode_varint(buffer, 1) == (300, 2)
    assert wire_decode_varint(buffer, 0) == (8, 1)
    assert wire_decode_varint(b"\xff" * 9 + b"\x01", 0) == ((1 << 64) - 1, 10)


def test_wire_varint_never_reads_past_end_for_any_truncation_point() -> None:
    """Return None for every truncated prefix of a multi-byte varint.

    Returns:
        None: Assertions validate truncation handling.

    Raises:
        AssertionError: Raised when a truncated prefix decodes or raises.
    """

    encoded = wire_encode_varint((1 << 63) + 12345)
    for truncation_point in range(len(encoded)):
        assert wire_decode_varint(encoded[:truncation_point], 0) is None
    assert wire_decode_varint(encoded, 0) == ((1 << 63) + 12345, len(encoded))
    assert wire_decode_varint(b"\x01", 1) is None
    assert wire_decode_varint(b"\x01", 5) is None


def test_wire_varint_rejects_overlong_encodings() -> None:
    """Stop after ten bytes instead of scanning an unterminated run."""

    assert wire_decode_varint(b"\x80" * 11 + b"\x01", 0) is None
