"""Regression tests for caller payload normalization."""

from __future__ import annotations

import pytest

from health_passthrough.domain import HealthCheckRequest, MetadataEntry
from health_passthrough.passthrough import (
    PassthroughInputError,
    passthrough_normalize_metadata,
    passthrough_normalize_request,
)


def test_passthrough_normalize_metadata_drops_malformed_entries() -> None:
    """Keep well-formed entries in order and drop every malformed one.

    Returns:
        None: Assertions validate lenient normalization.

    Raises:
        AssertionError: Raised when malformed entries survive or valid ones are lost.
    """

    metadata = [
        {"key": "authorization", "value": "Bearer t"},
        {"key": "missing-value"},
        {"value": "missing-key"},
        {"key": 12, "value": "numeric-key"},
        {"key": "null-value", "value": None},
        {"key": "nested", "value": {"a": 1}},
        "not-a-mapping",
        None,
        {"key": "x-count", "value": 3},
        {"key": "x-flag", "value": False},
    ]

    assert passthrough_normalize_metadata(metadata) == (
        MetadataEntry(key="authorization", value="Bearer t"),
        MetadataEntry(key="x-count", value=3),
        MetadataEntry(key="x-flag", value=False),
    )


@pytest.mark.parametrize("metadata", [None, "text", {"key": "a", "value": "b"}, 5])
def test_passthrough_normalize_metadata_non_list_yields_no_entries(metadata: object) -> None:
    assert passthrough_normalize_metadata(metadata) == ()


def test_passthrough_normalize_request_applies_defaults() -> None:
    """Default service to empty, insecure to the configured mode, metadata to empty."""

    assert passthrough_normalize_request({"target": "svc:443"}) == HealthCheckRequest(target="svc:443")
    assert passthrough_normalize_request({"target": "svc:80"}, default_insecure=True).insecure is True


def test_passthrough_normalize_request_accepts_host_alias() -> None:
    """Read `host` when `target` is absent and prefer `target` when both exist.

    Returns:
        None: Assertions validate alias resolution.

    Raises:
        AssertionError: Raised when alias precedence is wrong.
    """

    assert passthrough_normalize_request({"host": "alias:50051"}).target == "alias:50051"
    assert passthrough_normalize_request({"host": "alias:1", "target": "primary:2"}).target == "primary:2"


@pytest.mark.parametrize(
    "payload",
    [
        {},
        {"target": ""},
        {"target": "   "},
        {"target": 443},
        {"target": None, "host": None},
        ["svc:443"],
        "svc:443",
    ],
)
def test_passthrough_normalize_request_rejects_missing_target(payload: object) -> None:
    """Raise an input error for missing, blank, or non-string targets.

    Args:
        payload: Candidate payload.

    Returns:
        None: Assertions validate input rejection.

    Raises:
        AssertionError: Raised when invalid payload is accepted.
    """

    with pytest.raises(PassthroughInputError):
        passthrough_normalize_request(payload)


def test_passthrough_normalize_request_rejects_non_string_service() -> None:
    with pytest.raises(PassthroughInputError, match="service"):
        passthrough_normalize_request({"target": "svc:443", "service": 3})
