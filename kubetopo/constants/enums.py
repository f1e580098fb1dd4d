"""All enum definitions for kubetopo.

This module consolidates all enumerations used throughout the package.
"""

from enum import Enum

# =============================================================================
# Workload Enums
# =============================================================================

class PodPhase(Enum):
    """Pod lifecycle phase values from Kubernetes API."""

    PENDING = "Pending"
    RUNNING = "Running"
    SUCCEEDED = "Succeeded"
    FAILED = "Failed"
    UNKNOWN = "Unknown"


class HealthStatus(Enum):
    """Derived workload health classification."""

    HEALTHY = "Healthy"
    DEGRADED = "Degraded"
    FAILED = "Failed"


class OwnerKind(Enum):
    """Owner kinds a pod can resolve to.

    ``UNKNOWN`` covers any owner reference kind outside the known set so that
    decoding never fails on new controller types.
    """

    DEPLOYMENT = "Deployment"
    REPLICA_SET = "ReplicaSet"
    STATEFUL_SET = "StatefulSet"
    DAEMON_SET = "DaemonSet"
    JOB = "Job"
    NODE = "Node"
    UNKNOWN = "Unknown"

    @classmethod
    def from_kind(cls, kind: str | None) -> "OwnerKind":
        """Decode a raw owner reference kind, falling back to UNKNOWN."""
        for member in cls:
            if member.value == kind:
                return member
        return cls.UNKNOWN


class GroupKind(Enum):
    """Workload group kinds."""

    REPLICA_CONTROLLED = "Deployment"
    IDENTITY_CONTROLLED = "StatefulSet"


class ServiceType(Enum):
    """Service exposure kinds.

    HEADLESS is not a Kubernetes service type; it is reported for ClusterIP
    services without a cluster IP.
    """

    CLUSTER_IP = "ClusterIP"
    HEADLESS = "Headless"
    NODE_PORT = "NodePort"
    LOAD_BALANCER = "LoadBalancer"
    EXTERNAL_NAME = "ExternalName"


# =============================================================================
# Fetch State Enums
# =============================================================================

class FetchState(Enum):
    """Data fetch state values."""

    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


class FetchSources(Enum):
    """Data source identifiers."""

    CREDENTIALS = "credentials"
    METRICS_BACKEND = "metrics_backend"
    PODS = "pods"
    NODES = "nodes"
    SERVICES = "services"
    DEPLOYMENTS = "deployments"
    STATEFUL_SETS = "stateful_sets"
    POD_METRICS = "pod_metrics"


__all__ = [
    "FetchSources",
    "FetchState",
    "GroupKind",
    "HealthStatus",
    "OwnerKind",
    "PodPhase",
    "ServiceType",
]
