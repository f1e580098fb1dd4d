"""Core cluster and topology models."""

from kubetopo.models.core.cluster_state import (
    ClusterState,
    MetricSamples,
    NetworkService,
    NodeSummary,
    WorkloadGroup,
)
from kubetopo.models.core.topology_record import (
    EnrichedWorkloadRecord,
    OwnerResolution,
    PodStatusSummary,
    ServiceSummary,
    Snapshot,
)
from kubetopo.models.core.workload_instance import (
    ContainerLimitsInfo,
    ContainerStatusInfo,
    OwnerReference,
    ResourceUsageSample,
    WorkloadInstance,
)

__all__ = [
    "ClusterState",
    "ContainerLimitsInfo",
    "ContainerStatusInfo",
    "EnrichedWorkloadRecord",
    "MetricSamples",
    "NetworkService",
    "NodeSummary",
    "OwnerReference",
    "OwnerResolution",
    "PodStatusSummary",
    "ResourceUsageSample",
    "ServiceSummary",
    "Snapshot",
    "WorkloadGroup",
    "WorkloadInstance",
]
