"""Topology collector settings models."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from kubetopo.constants.defaults import (
    API_SERVER_URL_DEFAULT,
    APP_NAME_LABEL_KEYS_DEFAULT,
    CA_PATH_DEFAULT,
    LAYER_LABEL_KEY_DEFAULT,
    LAYER_NAMESPACES_DEFAULT,
    LIST_RETRY_ATTEMPTS_DEFAULT,
    TOKEN_PATH_DEFAULT,
    VERIFY_TLS_DEFAULT,
)
from kubetopo.constants.timeouts import (
    CLUSTER_REQUEST_TIMEOUT,
    METRICS_HEALTH_CHECK_TIMEOUT,
    POLL_DEADLINE,
    POLL_INTERVAL,
    RETRY_BACKOFF,
)


class TopologySettings(BaseModel):
    """Collector settings model with validation."""

    model_config = ConfigDict(populate_by_name=True)

    # Control plane access
    api_server_url: str = API_SERVER_URL_DEFAULT
    token_path: str = TOKEN_PATH_DEFAULT
    ca_path: str = CA_PATH_DEFAULT
    verify_tls: bool = VERIFY_TLS_DEFAULT

    # Timeouts (seconds)
    request_timeout_seconds: float = Field(default=CLUSTER_REQUEST_TIMEOUT, gt=0)
    health_check_timeout_seconds: float = Field(default=METRICS_HEALTH_CHECK_TIMEOUT, gt=0)
    poll_deadline_seconds: float = Field(default=POLL_DEADLINE, gt=0)
    poll_interval_seconds: float = Field(default=POLL_INTERVAL, gt=0)

    # Retry of list calls on timeout-like failures
    list_retry_attempts: int = Field(default=LIST_RETRY_ATTEMPTS_DEFAULT, ge=0)
    retry_backoff_seconds: float = Field(default=RETRY_BACKOFF, ge=0)

    # StatefulSet scan scope; empty means all namespaces
    identity_group_namespaces: list[str] = Field(
        default_factory=lambda: list(LAYER_NAMESPACES_DEFAULT)
    )

    # Label conventions
    layer_label_key: str = LAYER_LABEL_KEY_DEFAULT
    app_name_label_keys: list[str] = Field(
        default_factory=lambda: list(APP_NAME_LABEL_KEYS_DEFAULT)
    )

    @field_validator("api_server_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigLoadError(ConfigError):
    """Raised when settings fail to load."""
