"""Shared stage timeline helpers for passthrough diagnostics."""

from __future__ import annotations

import time
from datetime import datetime, timezone
from typing import Any


def domain_build_stage_event(
    stage: str,
    status: str,
    details: dict[str, Any] | None = None,
    started_monotonic: float | None = None,
) -> dict[str, object]:
    """Build one structured stage event payload.

    Args:
        stage: Stage name (`normalize`, `authorize`, `encode`, `dispatch`, ...).
        status: Stage status marker.
        details: Optional structured details object.
        started_monotonic: Optional `time.monotonic()` value taken when the stage
            started; adds `elapsed_ms` to the event.

    Returns:
        dict[str, object]: Structured stage event.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    event_payload: dict[str, object] = {
        "stage": stage,
        "status": status,
        "at_utc": datetime.now(timezone.utc).isoformat(),
    }
    if started_monotonic is not None:
        event_payload["elapsed_ms"] = max(0, int((time.monotonic() - started_monotonic) * 1000))
    if details is not None:
        event_payload["details"] = details
    return event_payload
