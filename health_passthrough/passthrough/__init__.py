"""Passthrough layer package for health-check orchestration."""

from .errors import (
	PassthroughAuthRejectedError,
	PassthroughDispatchError,
	PassthroughError,
	PassthroughInputError,
	PassthroughRemoteFailureError,
)
from .interfaces import HealthPassthroughConfig, HealthPassthroughPort, PreparedHealthCheck
from .normalization import passthrough_normalize_metadata, passthrough_normalize_request
from .orchestrator import HealthPassthroughOrchestrator
from .status import passthrough_classify_status

__all__ = [
	"HealthPassthroughConfig",
	"HealthPassthroughOrchestrator",
	"HealthPassthroughPort",
	"PassthroughAuthRejectedError",
	"PassthroughDispatchError",
	"PassthroughError",
	"PassthroughInputError",
	"PassthroughRemoteFailureError",
	"PreparedHealthCheck",
	"passthrough_classify_status",
	"passthrough_normalize_metadata",
	"passthrough_normalize_request",
]
