"""Adapter layer package for remote transport boundaries."""

from .grpc_errors import (
	HealthTransportCallError,
	HealthTransportConnectionError,
	HealthTransportError,
)
from .grpc_status_codes import (
	RPC_AUTH_REJECTION_CODES,
	RPC_AUTH_REJECTION_DETAIL_PATTERNS,
	RpcStatusCode,
	rpc_status_is_auth_rejection,
	rpc_status_name,
)
from .grpc_transport import DEFAULT_HEALTH_METHOD_PATH, GrpcHealthTransport
from .interfaces import HealthTransportPort

__all__ = [
	"DEFAULT_HEALTH_METHOD_PATH",
	"GrpcHealthTransport",
	"HealthTransportCallError",
	"HealthTransportConnectionError",
	"HealthTransportError",
	"HealthTransportPort",
	"RPC_AUTH_REJECTION_CODES",
	"RPC_AUTH_REJECTION_DETAIL_PATTERNS",
	"RpcStatusCode",
	"rpc_status_is_auth_rejection",
	"rpc_status_name",
]
