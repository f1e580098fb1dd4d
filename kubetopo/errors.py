"""Failure taxonomy for the topology pipeline.

Every error carries a human-readable ``reason`` that becomes the
degradation reason of the fallback snapshot.
"""

from __future__ import annotations

from kubetopo.constants.values import (
    REASON_CREDENTIALS,
    REASON_METRICS_UNAVAILABLE,
    REASON_NOT_IN_CLUSTER,
    REASON_PODS_FORBIDDEN,
)


class TopologyError(Exception):
    """Base class for failures that degrade a poll."""

    default_reason = "Topology collection failed"

    def __init__(self, reason: str | None = None, detail: str | None = None) -> None:
        self.reason = reason or self.default_reason
        self.detail = detail
        super().__init__(f"{self.reason}: {detail}" if detail else self.reason)


class NotInClusterError(TopologyError):
    """Service account files are absent; the process runs outside a cluster."""

    default_reason = REASON_NOT_IN_CLUSTER


class CredentialError(TopologyError):
    """Service account files exist but could not be read."""

    default_reason = REASON_CREDENTIALS

    def __init__(self, detail: str) -> None:
        super().__init__(f"{REASON_CREDENTIALS}: {detail}")
        self.detail = detail


class BackendUnavailableError(TopologyError):
    """Metrics API discovery endpoint did not answer with success."""

    default_reason = REASON_METRICS_UNAVAILABLE


class ClusterPermissionError(TopologyError):
    """Pods could not be listed."""

    default_reason = REASON_PODS_FORBIDDEN


class TransportError(TopologyError):
    """A mandatory request failed, timed out or returned undecodable data."""

    default_reason = "Cluster request failed"

    def __init__(
        self,
        reason: str | None = None,
        detail: str | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(reason, detail)
        self.status_code = status_code


class CpuParseError(ValueError):
    """A CPU quantity string could not be parsed."""


__all__ = [
    "BackendUnavailableError",
    "ClusterPermissionError",
    "CpuParseError",
    "CredentialError",
    "NotInClusterError",
    "TopologyError",
    "TransportError",
]
