"""Constants module for kubetopo.

Centralized constants organized by domain:
- enums.py: All Enum class definitions
- values.py: Scalar constants (API paths, reasons, lookups)
- timeouts.py: Timeout values (seconds)
- defaults.py: Default values for settings
- patterns.py: Pod name regex patterns
"""

from kubetopo.constants.defaults import (
    API_SERVER_URL_DEFAULT,
    CA_PATH_DEFAULT,
    LAYER_NAMESPACES_DEFAULT,
    TOKEN_PATH_DEFAULT,
)
from kubetopo.constants.enums import (
    FetchSources,
    FetchState,
    GroupKind,
    HealthStatus,
    OwnerKind,
    PodPhase,
    ServiceType,
)
from kubetopo.constants.timeouts import (
    CLUSTER_REQUEST_TIMEOUT,
    METRICS_HEALTH_CHECK_TIMEOUT,
    POLL_DEADLINE,
    POLL_INTERVAL,
)

__all__ = [
    # Defaults
    "API_SERVER_URL_DEFAULT",
    "CA_PATH_DEFAULT",
    # Timeouts
    "CLUSTER_REQUEST_TIMEOUT",
    "LAYER_NAMESPACES_DEFAULT",
    "METRICS_HEALTH_CHECK_TIMEOUT",
    "POLL_DEADLINE",
    "POLL_INTERVAL",
    "TOKEN_PATH_DEFAULT",
    # Enums
    "FetchSources",
    "FetchState",
    "GroupKind",
    "HealthStatus",
    "OwnerKind",
    "PodPhase",
    "ServiceType",
]
