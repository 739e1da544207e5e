"""Lenient normalization of caller health-check payloads."""

from __future__ import annotations

from typing import Any

from health_passthrough.domain import HealthCheckRequest, MetadataEntry

from .errors import PassthroughInputError

_SCALAR_METADATA_TYPES = (str, int, float, bool)


def passthrough_normalize_metadata(metadata: object) -> tuple[MetadataEntry, ...]:
    """Coerce caller metadata into well-formed entries.

    Entries that are not mappings, lack a string `key`, or carry a missing,
    null, or non-scalar `value` are dropped without failing the request.

    Args:
        metadata: Candidate metadata list from the caller payload.

    Returns:
        tuple[MetadataEntry, ...]: Well-formed entries in original order.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    if not isinstance(metadata, list):
        return ()

    entries: list[MetadataEntry] = []
    for candidate in metadata:
        if not isinstance(candidate, dict):
            continue
        key = candidate.get("key")
        value = candidate.get("value")
        if not isinstance(key, str) or not key:
            continue
        if value is None or not isinstance(value, _SCALAR_METADATA_TYPES):
            continue
        entries.append(MetadataEntry(key=key, value=value))
    return tuple(entries)


def passthrough_normalize_request(payload: Any, default_insecure: bool = False) -> HealthCheckRequest:
    """Build a normalized health-check request from a decoded JSON payload.

    `target` is preferred; `host` is accepted as an alias when `target` is absent.

    Args:
        payload: Decoded JSON request body.
        default_insecure: Channel mode used when the payload omits `insecure`.

    Returns:
        HealthCheckRequest: Normalized request.

    Raises:
        PassthroughInputError: Raised when the payload is not an object, the target
            is missing or not a non-blank string, or the service is not a string.
    """

    if not isinstance(payload, dict):
        raise PassthroughInputError("payload must be a JSON object with a `target` field.")

    target = payload.get("target")
    if target is None:
        target = payload.get("host")
    if not isinstance(target, str) or not target.strip():
        raise PassthroughInputError("`target` (host:port) is required in the payload.")

    service = payload.get("service")
    if service is None:
        service = ""
    if not isinstance(service, str):
        raise PassthroughInputError("`service` must be a string when provided.")

    insecure = payload.get("insecure")
    return HealthCheckRequest(
        target=target.strip(),
        service=service,
        insecure=default_insecure if insecure is None else bool(insecure),
        metadata=passthrough_normalize_metadata(payload.get("metadata")),
    )
