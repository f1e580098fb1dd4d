"""Timeout constants for kubetopo.

All timeout and interval values for API requests and polling cycles.
"""

from typing import Final

# ============================================================================
# HTTP request timeouts (float, in seconds)
# ============================================================================

CLUSTER_REQUEST_TIMEOUT: Final = 10.0
METRICS_HEALTH_CHECK_TIMEOUT: Final = 3.0

# ============================================================================
# Poll timeouts (float, in seconds)
# ============================================================================

# Whole-poll deadline; must exceed the per-request timeout
POLL_DEADLINE: Final = 30.0
POLL_INTERVAL: Final = 30.0

RETRY_BACKOFF: Final = 0.5

__all__ = [
    "CLUSTER_REQUEST_TIMEOUT",
    "METRICS_HEALTH_CHECK_TIMEOUT",
    "POLL_DEADLINE",
    "POLL_INTERVAL",
    "RETRY_BACKOFF",
]
