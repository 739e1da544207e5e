"""Canonical RPC status-code semantics for passthrough failure routing."""

from __future__ import annotations

from enum import IntEnum
from typing import Final


class RpcStatusCode(IntEnum):
    """Numeric RPC status codes reported by the remote side."""

    OK = 0
    CANCELLED = 1
    UNKNOWN = 2
    INVALID_ARGUMENT = 3
    DEADLINE_EXCEEDED = 4
    NOT_FOUND = 5
    ALREADY_EXISTS = 6
    PERMISSION_DENIED = 7
    RESOURCE_EXHAUSTED = 8
    FAILED_PRECONDITION = 9
    ABORTED = 10
    OUT_OF_RANGE = 11
    UNIMPLEMENTED = 12
    INTERNAL = 13
    UNAVAILABLE = 14
    DATA_LOSS = 15
    UNAUTHENTICATED = 16


RPC_AUTH_REJECTION_CODES: Final[frozenset[int]] = frozenset(
    {
        RpcStatusCode.UNAUTHENTICATED.value,
        RpcStatusCode.PERMISSION_DENIED.value,
    }
)

# Gateways that reject credentials often answer with a non-RPC body, which the
# client reports as INTERNAL with a parse failure detail.
RPC_AUTH_REJECTION_DETAIL_CODES: Final[frozenset[int]] = frozenset({RpcStatusCode.INTERNAL.value})
RPC_AUTH_REJECTION_DETAIL_PATTERNS: Final[tuple[str, ...]] = ("Response message parsing error",)


def rpc_status_name(code: int | None) -> str:
    """Return the canonical name for a numeric status code.

    Args:
        code: Numeric status code, or None.

    Returns:
        str: Enum name for known codes, else `UNKNOWN`.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    if code is None:
        return RpcStatusCode.UNKNOWN.name
    try:
        return RpcStatusCode(code).name
    except ValueError:
        return RpcStatusCode.UNKNOWN.name


def rpc_status_is_auth_rejection(code: int | None, details: str | None) -> bool:
    """Return whether a failed call most likely means credentials were rejected.

    This is a best-effort heuristic. Detail matching depends on upstream
    wording, so unrecognized signals fall back to False.

    Args:
        code: Optional numeric status code.
        details: Optional textual failure detail.

    Returns:
        bool: True when the failure looks like an authentication rejection.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    if code is None:
        return False
    if code in RPC_AUTH_REJECTION_CODES:
        return True
    if code in RPC_AUTH_REJECTION_DETAIL_CODES and details:
        return any(pattern in details for pattern in RPC_AUTH_REJECTION_DETAIL_PATTERNS)
    return False
