"""Lenient decoder for health-check response buffers.

The decoder does not need a compiled schema. It walks the buffer tag by tag,
records every varint and length-delimited field it can read in full, and projects
the fields that health servers are known to send onto named attributes:

* field 1 (varint): serving status
* field 2 (string): latency text
* field 4 (string): error code
* field 5 (string): error message

Decoding never raises. A truncated field or an unsupported wire type stops the
walk at that offset, and everything decoded before it is kept.
"""

from __future__ import annotations

import logging
from typing import Final

from .interfaces import (
    DECODE_STOP_INVALID_FIELD_NUMBER,
    DECODE_STOP_TRUNCATED,
    DECODE_STOP_UNSUPPORTED_WIRE_TYPE,
    DecodedResponse,
    LengthDelimitedField,
    VarintField,
    WireType,
)
from .varint import wire_decode_varint

logger = logging.getLogger(__name__)

STATUS_FIELD_NUMBER: Final[int] = 1
LATENCY_FIELD_NUMBER: Final[int] = 2
ERROR_CODE_FIELD_NUMBER: Final[int] = 4
ERROR_MESSAGE_FIELD_NUMBER: Final[int] = 5


def wire_decode_response(buffer: bytes) -> DecodedResponse:
    """Decode an arbitrary response buffer into a best-effort field mapping.

    Args:
        buffer: Raw response message bytes.

    Returns:
        DecodedResponse: Decoded fields plus semantic projection and stop diagnostics.

    Raises:
        RuntimeError: This function does not raise runtime errors.
    """

    decoded = DecodedResponse()
    buffer = bytes(buffer)
    buffer_length = len(buffer)
    offset = 0

    while offset < buffer_length:
        field_offset = offset
        tag_result = wire_decode_varint(buffer, offset)
        if tag_result is None:
            _wire_decode_stop(decoded, DECODE_STOP_TRUNCATED, field_offset)
            break
        tag, tag_size = tag_result
        offset += tag_size

        field_number = tag >> 3
        wire_type = tag & 0x07
        if field_number == 0:
            _wire_decode_stop(decoded, DECODE_STOP_INVALID_FIELD_NUMBER, field_offset)
            break

        if wire_type == WireType.VARINT:
            value_result = wire_decode_varint(buffer, offset)
            if value_result is None:
                _wire_decode_stop(decoded, DECODE_STOP_TRUNCATED, field_offset)
                break
            value, value_size = value_result
            offset += value_size
            _wire_decode_record_varint(decoded, field_number, value)
            continue

        if wire_type == WireType.LENGTH_DELIMITED:
            length_result = wire_decode_varint(buffer, offset)
            if length_result is None:
                _wire_decode_stop(decoded, DECODE_STOP_TRUNCATED, field_offset)
                break
            payload_length, length_size = length_result
            offset += length_size
            if payload_length > buffer_length - offset:
                _wire_decode_stop(decoded, DECODE_STOP_TRUNCATED, field_offset)
                break
            data = buffer[offset : offset + payload_length]
            offset += payload_length
            _wire_decode_record_length_delimited(decoded, field_number, data)
            continue

        logger.warning("Unsupported wire type %s at offset %s; stopping decode", wire_type, field_offset)
        _wire_decode_stop(decoded, DECODE_STOP_UNSUPPORTED_WIRE_TYPE, field_offset)
        break

    return decoded


def _wire_decode_record_varint(decoded: DecodedResponse, field_number: int, value: int) -> None:
    decoded.fields[field_number] = VarintField(field_number=field_number, value=value)
    if field_number == STATUS_FIELD_NUMBER:
        decoded.status = value


def _wire_decode_record_length_delimited(decoded: DecodedResponse, field_number: int, data: bytes) -> None:
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError:
        decoded.fields[field_number] = LengthDelimitedField(field_number=field_number, data=data, text=None)
        return

    decoded.fields[field_number] = LengthDelimitedField(field_number=field_number, data=data, text=text)
    if field_number == LATENCY_FIELD_NUMBER:
        decoded.latency_raw = text
    elif field_number == ERROR_CODE_FIELD_NUMBER:
        decoded.error_code = text
    elif field_number == ERROR_MESSAGE_FIELD_NUMBER:
        decoded.error_message = text


def _wire_decode_stop(decoded: DecodedResponse, reason: str, offset: int) -> None:
    if reason == DECODE_STOP_TRUNCATED:
        logger.warning("Response buffer truncated at offset %s; keeping %s decoded fields", offset, len(decoded.fields))
    decoded.stop_reason = reason
    decoded.stop_offset = offset
