"""Check classifications and their user-facing reasons."""

from enum import Enum
from typing import Optional

MINIMUM_VERSION = "0.25.1"
"""Oldest buildifier release known to support the probe invocation."""

BUILDTOOLS_RELEASES_URL = "https://github.com/bazelbuild/buildtools/releases"
"""The URL to load for buildifier's releases."""

NOT_FOUND_REASON = "Buildifier was not found"
INCOMPATIBLE_VERSION_REASON = (
    f"Buildifier is too old ({MINIMUM_VERSION} or higher is needed)"
)
PROBE_FAILED_REASON = "Buildifier could not be run"


class ProbeResult(Enum):
    """Terminal classification of a single availability check."""

    COMPATIBLE = "compatible"
    INCOMPATIBLE_VERSION = "incompatible_version"
    NOT_FOUND = "not_found"
    PROBE_FAILED = "probe_failed"


REASONS = {
    ProbeResult.NOT_FOUND: NOT_FOUND_REASON,
    ProbeResult.INCOMPATIBLE_VERSION: INCOMPATIBLE_VERSION_REASON,
    ProbeResult.PROBE_FAILED: PROBE_FAILED_REASON,
}


def reason_for(status: ProbeResult) -> Optional[str]:
    """Get the human-readable reason for a status; None when compatible."""
    return REASONS.get(status)


class CheckOutcome:
    """Status of an availability check plus the reason shown to the user."""

    def __init__(self, status: ProbeResult, reason: Optional[str] = None):
        self.status = status
        self.reason = reason

    @classmethod
    def from_status(cls, status: ProbeResult) -> "CheckOutcome":
        return cls(status, reason_for(status))

    @property
    def is_available(self) -> bool:
        return self.status is ProbeResult.COMPATIBLE

    def __eq__(self, other):
        if isinstance(other, CheckOutcome):
            return self.status == other.status and self.reason == other.reason
        return NotImplemented

    def __repr__(self):
        return f"CheckOutcome(status={self.status!r}, reason={self.reason!r})"
