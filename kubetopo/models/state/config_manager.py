"""Settings loading from YAML files and environment variables."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from kubetopo.models.state.app_settings import (
    ConfigError,
    ConfigLoadError,
    TopologySettings,
)

logger = logging.getLogger(__name__)

__all__ = [
    "ConfigError",
    "ConfigLoadError",
    "ConfigManager",
    "TopologySettings",
]


class ConfigManager:
    """Builds TopologySettings from an optional YAML file and the environment.

    Precedence, lowest first: model defaults, YAML file, in-cluster service
    discovery variables, ``KUBETOPO_*`` overrides.
    """

    ENV_PREFIX = "KUBETOPO_"
    CONFIG_PATH_ENV = "KUBETOPO_CONFIG"
    _LIST_FIELDS = ("identity_group_namespaces", "app_name_label_keys")

    def __init__(
        self,
        config_path: str | Path | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        self._environ = os.environ if environ is None else environ
        path = config_path or self._environ.get(self.CONFIG_PATH_ENV)
        self.config_path = Path(path) if path else None

    def load(self) -> TopologySettings:
        """Load and validate settings.

        Raises:
            ConfigLoadError: If the file cannot be read or values are invalid.
        """
        values: dict[str, Any] = {}
        if self.config_path is not None:
            values.update(self._read_file(self.config_path))

        api_server_url = self._discover_api_server()
        if api_server_url:
            values["api_server_url"] = api_server_url

        values.update(self._read_env_overrides())

        try:
            settings = TopologySettings(**values)
        except ValidationError as exc:
            raise ConfigLoadError(f"Invalid settings: {exc}") from exc

        logger.debug("Loaded settings for API server %s", settings.api_server_url)
        return settings

    @staticmethod
    def _read_file(path: Path) -> dict[str, Any]:
        try:
            with path.open(encoding="utf-8") as handle:
                data = yaml.safe_load(handle) or {}
        except (OSError, yaml.YAMLError) as exc:
            raise ConfigLoadError(f"Failed to read settings file {path}: {exc}") from exc
        if not isinstance(data, dict):
            raise ConfigLoadError(f"Settings file {path} must contain a mapping")
        return data

    def _discover_api_server(self) -> str | None:
        """Build the API server URL from in-cluster service variables."""
        host = self._environ.get("KUBERNETES_SERVICE_HOST")
        if not host:
            return None
        port = self._environ.get("KUBERNETES_SERVICE_PORT", "443")
        if ":" in host:
            host = f"[{host}]"
        return f"https://{host}:{port}"

    def _read_env_overrides(self) -> dict[str, Any]:
        overrides: dict[str, Any] = {}
        for field_name in TopologySettings.model_fields:
            raw = self._environ.get(f"{self.ENV_PREFIX}{field_name.upper()}")
            if raw is None:
                continue
            if field_name in self._LIST_FIELDS:
                overrides[field_name] = [
                    part.strip() for part in raw.split(",") if part.strip()
                ]
            else:
                overrides[field_name] = raw
        return overrides
