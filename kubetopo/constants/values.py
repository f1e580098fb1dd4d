"""Scalar constants for kubetopo.

API paths, waiting reasons and fallback reasons with proper type hints using Final.
"""

from typing import Final

# ============================================================================
# Kubernetes API paths
# ============================================================================

PODS_PATH: Final = "/api/v1/pods"
NODES_PATH: Final = "/api/v1/nodes"
SERVICES_PATH: Final = "/api/v1/services"
DEPLOYMENTS_PATH: Final = "/apis/apps/v1/deployments"
STATEFUL_SETS_PATH: Final = "/apis/apps/v1/statefulsets"
NAMESPACED_STATEFUL_SETS_PATH: Final = "/apis/apps/v1/namespaces/{namespace}/statefulsets"
NAMESPACED_PODS_PATH: Final = "/api/v1/namespaces/{namespace}/pods"
METRICS_API_PATH: Final = "/apis/metrics.k8s.io/v1beta1"
POD_METRICS_PATH: Final = f"{METRICS_API_PATH}/pods"

# ============================================================================
# Container waiting reasons that mark a pod as failed
# ============================================================================

FAILED_WAITING_REASONS: Final = frozenset(
    {
        "CrashLoopBackOff",
        "CreateContainerConfigError",
    }
)

# ============================================================================
# Layer label -> visualization layer
# ============================================================================

LAYER_MAP: Final = {
    "frontend": "client-layer",
    "application": "server-layer",
    "persistence": "data-layer",
    "monitoring": "observability-layer",
}

# ============================================================================
# Degradation reasons
# ============================================================================

REASON_NOT_IN_CLUSTER: Final = "Running outside cluster"
REASON_CREDENTIALS: Final = "Service account credentials error"
REASON_METRICS_UNAVAILABLE: Final = "Metrics server not available"
REASON_PODS_FORBIDDEN: Final = "Insufficient permissions to list pods"
REASON_METRICS_FETCH: Final = "Failed to fetch metrics"
REASON_POLL_TIMEOUT: Final = "Cluster poll timed out"
REASON_UNKNOWN: Final = "Unknown error in cluster metrics pipeline"

__all__ = [
    "DEPLOYMENTS_PATH",
    "FAILED_WAITING_REASONS",
    "LAYER_MAP",
    "METRICS_API_PATH",
    "NAMESPACED_PODS_PATH",
    "NAMESPACED_STATEFUL_SETS_PATH",
    "NODES_PATH",
    "PODS_PATH",
    "POD_METRICS_PATH",
    "REASON_CREDENTIALS",
    "REASON_METRICS_FETCH",
    "REASON_METRICS_UNAVAILABLE",
    "REASON_NOT_IN_CLUSTER",
    "REASON_PODS_FORBIDDEN",
    "REASON_POLL_TIMEOUT",
    "REASON_UNKNOWN",
    "SERVICES_PATH",
    "STATEFUL_SETS_PATH",
]
