"""Domain models used across application layer boundaries."""

from .models import (
    HealthCheckRequest,
    HealthCheckResult,
    HealthStatus,
    MetadataEntry,
    MetadataValue,
    StatusKind,
    domain_metadata_value_to_text,
)
from .timeline import domain_build_stage_event

__all__ = [
    "HealthCheckRequest",
    "HealthCheckResult",
    "HealthStatus",
    "MetadataEntry",
    "MetadataValue",
    "StatusKind",
    "domain_build_stage_event",
    "domain_metadata_value_to_text",
]
