"""Default values for settings.

All default values used in the TopologySettings model.
"""

from typing import Final

# ============================================================================
# In-cluster defaults
# ============================================================================

SERVICE_ACCOUNT_DIR: Final = "/var/run/secrets/kubernetes.io/serviceaccount"
TOKEN_PATH_DEFAULT: Final = f"{SERVICE_ACCOUNT_DIR}/token"
CA_PATH_DEFAULT: Final = f"{SERVICE_ACCOUNT_DIR}/ca.crt"
API_SERVER_URL_DEFAULT: Final = "https://kubernetes.default.svc"
VERIFY_TLS_DEFAULT: Final = True

# ============================================================================
# Labels
# ============================================================================

LAYER_LABEL_KEY_DEFAULT: Final = "layer"
APP_NAME_LABEL_KEYS_DEFAULT: Final = ("app", "app.kubernetes.io/name")

# Namespaces scanned for StatefulSets
LAYER_NAMESPACES_DEFAULT: Final = (
    "client-layer",
    "server-layer",
    "data-layer",
    "observability-layer",
)

# ============================================================================
# Retry defaults
# ============================================================================

LIST_RETRY_ATTEMPTS_DEFAULT: Final = 1

__all__ = [
    "API_SERVER_URL_DEFAULT",
    "APP_NAME_LABEL_KEYS_DEFAULT",
    "CA_PATH_DEFAULT",
    "LAYER_LABEL_KEY_DEFAULT",
    "LAYER_NAMESPACES_DEFAULT",
    "LIST_RETRY_ATTEMPTS_DEFAULT",
    "SERVICE_ACCOUNT_DIR",
    "TOKEN_PATH_DEFAULT",
    "VERIFY_TLS_DEFAULT",
]
