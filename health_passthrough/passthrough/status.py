"""Serving-status classification for decoded health responses."""

from __future__ import annotations

from typing import Final

from health_passthrough.domain import StatusKind

_STATUS_BY_NUMBER: Final[dict[int, StatusKind]] = {
    1: StatusKind.SERVING,
    2: StatusKind.NOT_SERVING,
    3: StatusKind.SERVICE_UNKNOWN,
}


def passthrough_classify_status(raw_status: object) -> StatusKind:
    """Map a decoded status value onto `StatusKind`.

    Numeric and textual forms are equivalent: `1`/`"SERVING"`,
    `2`/`"NOT_SERVING"`, `3`/`"SERVICE_UNKNOWN"`. Anything else is UNKNOWN.

    Args:
        raw_status: Status value as decoded, or None.

    Returns:
        StatusKind: Classified serving status.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    if isinstance(raw_status, bool):
        return StatusKind.UNKNOWN
    if isinstance(raw_status, int):
        return _STATUS_BY_NUMBER.get(raw_status, StatusKind.UNKNOWN)
    if isinstance(raw_status, str) and raw_status in _STATUS_BY_NUMBER.values():
        return StatusKind(raw_status)
    return StatusKind.UNKNOWN
