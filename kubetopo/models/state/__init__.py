"""Settings state models."""

from kubetopo.models.state.app_settings import (
    ConfigError,
    ConfigLoadError,
    TopologySettings,
)
from kubetopo.models.state.config_manager import ConfigManager

__all__ = [
    "ConfigError",
    "ConfigLoadError",
    "ConfigManager",
    "TopologySettings",
]
