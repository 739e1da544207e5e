"""Regression tests for lenient response decoding."""

from __future__ import annotations

from health_passthrough.wire import (
    DECODE_STOP_INVALID_FIELD_NUMBER,
    DECODE_STOP_TRUNCATED,
    DECODE_STOP_UNSUPPORTED_WIRE_TYPE,
    LengthDelimitedField,
    VarintField,
    wire_decode_response,
)


def _length_delimited(field_number: int, data: bytes) -> bytes:
    return bytes([(field_number << 3) | 2, len(data)]) + data


def test_wire_decoder_empty_buffer_returns_empty_result() -> None:
    """Return no fields and no status for an empty buffer.

    Returns:
        None: Assertions validate empty decode.

    Raises:
        AssertionError: Raised when empty decode is not empty.
    """

    decoded = wire_decode_response(b"")

    assert decoded.fields == {}
    assert decoded.status is None
    assert decoded.decoded_is_complete()
    assert decoded.decoded_as_payload() == {}


def test_wire_decoder_serving_status_varint() -> None:
    """Decode `[0x08, 0x01]` as status 1."""

    decoded = wire_decode_response(bytes([0x08, 0x01]))

    assert decoded.status == 1
    assert decoded.fields == {1: VarintField(field_number=1, value=1)}
    assert decoded.decoded_as_payload() == {"field_1": 1, "status": 1}


def test_wire_decoder_projects_known_string_fields_and_keeps_unknown_ones() -> None:
    """Project fields 2, 4, and 5 and record unknown fields generically.

    Returns:
        None: Assertions validate semantic projection and forward compatibility.

    Raises:
        AssertionError: Raised when fields are dropped or mis-projected.
    """

    buffer = (
        bytes([0x08, 0x02])
        + _length_delimited(2, b"12ms")
        + _length_delimited(4, b"E_DOWN")
        + _length_delimited(5, b"backend unavailable")
        + _length_delimited(9, b"extra")
        + bytes([0x50, 0x07])
    )

    decoded = wire_decode_response(buffer)

    assert decoded.decoded_is_complete()
    assert decoded.status == 2
    assert decoded.latency_raw == "12ms"
    assert decoded.error_code == "E_DOWN"
    assert decoded.error_message == "backend unavailable"
    assert decoded.fields[9].text == "extra"
    assert decoded.fields[10] == VarintField(field_number=10, value=7)
    assert decoded.decoded_as_payload() == {
        "field_1": 2,
        "field_2": "12ms",
        "field_4": "E_DOWN",
        "field_5": "backend unavailable",
        "field_9": "extra",
        "field_10": 7,
        "status": 2,
        "latency": "12ms",
        "error_code": "E_DOWN",
        "error_message": "backend unavailable",
    }


def test_wire_decoder_keeps_raw_bytes_when_payload_is_not_utf8() -> None:
    """Record non-UTF-8 payloads as bytes without projecting them."""

    decoded = wire_decode_response(_length_delimited(5, b"\xff\xfe\x00"))

    assert decoded.fields[5] == LengthDelimitedField(field_number=5, data=b"\xff\xfe\x00", text=None)
    assert decoded.error_message is None
    assert decoded.decoded_as_payload() == {"field_5": {"base64": "//4A"}}


def test_wire_decoder_duplicate_field_numbers_last_write_wins() -> None:
    """Overwrite earlier values when a field number repeats."""

    decoded = wire_decode_response(bytes([0x08, 0x02, 0x08, 0x01]))

    assert decoded.status == 1
    assert decoded.fields[1].value == 1


def test_wire_decoder_truncated_inputs_keep_fields_parsed_before_truncation() -> None:
    """Stop cleanly for every truncation point of a multi-field buffer.

    Returns:
        None: Assertions validate partial results at each truncation point.

    Raises:
        AssertionError: Raised when decoding raises or loses earlier fields.
    """

    buffer = bytes([0x08, 0x01]) + _length_delimited(2, b"5ms") + bytes([0x18, 0xAC, 0x02])
    field_end_offsets = {2: {1}, 7: {1, 2}, 10: {1, 2, 3}}

    for truncation_point in range(len(buffer) + 1):
        decoded = wire_decode_response(buffer[:truncation_point])
        complete_fields = set()
        for end_offset, field_numbers in field_end_offsets.items():
            if truncation_point >= end_offset:
                complete_fields = field_numbers
        assert set(decoded.fields) == complete_fields
        if truncation_point in (0, 2, 7, 10):
            assert decoded.decoded_is_complete()
        else:
            assert decoded.stop_reason == DECODE_STOP_TRUNCATED


def test_wire_decoder_length_longer_than_buffer_stops_at_field_start() -> None:
    """Refuse to read a payload whose declared length exceeds the buffer."""

    decoded = wire_decode_response(bytes([0x08, 0x01, 0x12, 0x10]) + b"abc")

    assert decoded.status == 1
    assert 2 not in decoded.fields
    assert decoded.stop_reason == DECODE_STOP_TRUNCATED
    assert decoded.stop_offset == 2


def test_wire_decoder_unsupported_wire_type_halts_and_keeps_prior_fields() -> None:
    """Halt at a fixed64 tag and keep every field before it.

    Returns:
        None: Assertions validate halt policy.

    Raises:
        AssertionError: Raised when decoding guesses past the unknown type.
    """

    buffer = bytes([0x08, 0x01, 0x19]) + b"\x00" * 8 + bytes([0x10, 0x05])

    decoded = wire_decode_response(buffer)

    assert decoded.status == 1
    assert set(decoded.fields) == {1}
    assert decoded.stop_reason == DECODE_STOP_UNSUPPORTED_WIRE_TYPE
    assert decoded.stop_offset == 2
    assert decoded.decoded_as_payload()["decode_stop"] == {"reason": "unsupported_wire_type", "offset": 2}


def test_wire_decoder_field_number_zero_halts() -> None:
    decoded = wire_decode_response(bytes([0x08, 0x03, 0x00, 0x01]))

    assert decoded.status == 3
    assert decoded.stop_reason == DECODE_STOP_INVALID_FIELD_NUMBER
    assert decoded.stop_offset == 2


def test_wire_decoder_reads_multi_byte_tags() -> None:
    """Decode field numbers above 15, whose tags span two bytes."""

    decoded = wire_decode_response(bytes([0x80, 0x01, 0x2A]))

    assert decoded.fields == {16: VarintField(field_number=16, value=42)}
    assert decoded.status is None


def test_wire_decoder_trailing_continuation_byte_is_truncated_tag() -> None:
    """Treat a trailing high-bit byte as an incomplete varint tag."""

    decoded = wire_decode_response(bytes([0x08, 0x01, 0xFF]))

    assert decoded.status == 1
    assert decoded.stop_reason == DECODE_STOP_TRUNCATED
    assert decoded.stop_offset == 2
