"""Wire-format codec package for schema-less health-check messages."""

from .decoder import wire_decode_response
from .encoder import wire_encode_health_request, wire_encode_tag
from .interfaces import (
	DECODE_STOP_INVALID_FIELD_NUMBER,
	DECODE_STOP_TRUNCATED,
	DECODE_STOP_UNSUPPORTED_WIRE_TYPE,
	DecodedResponse,
	LengthDelimitedField,
	VarintField,
	WireField,
	WireType,
)
from .varint import wire_decode_varint, wire_encode_varint

__all__ = [
	"DECODE_STOP_INVALID_FIELD_NUMBER",
	"DECODE_STOP_TRUNCATED",
	"DECODE_STOP_UNSUPPORTED_WIRE_TYPE",
	"DecodedResponse",
	"LengthDelimitedField",
	"VarintField",
	"WireField",
	"WireType",
	"wire_decode_response",
	"wire_decode_varint",
	"wire_encode_health_request",
	"wire_encode_tag",
	"wire_encode_varint",
]
