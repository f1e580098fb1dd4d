"""Service parser - decodes Service objects."""

from __future__ import annotations

from typing import Any

from kubetopo.constants.enums import ServiceType
from kubetopo.models.core.cluster_state import NetworkService


class ServiceParser:
    """Parses Service objects into NetworkService."""

    def parse_service(self, item: dict[str, Any]) -> NetworkService:
        """Parse a single service."""
        metadata = item.get("metadata") or {}
        spec = item.get("spec") or {}
        return NetworkService(
            name=str(metadata.get("name") or ""),
            namespace=str(metadata.get("namespace") or ""),
            type=str(spec.get("type") or ServiceType.CLUSTER_IP.value),
            cluster_ip=spec.get("clusterIP"),
            selector={str(k): str(v) for k, v in (spec.get("selector") or {}).items()},
        )

    def parse_services(self, items: list[dict[str, Any]]) -> list[NetworkService]:
        """Parse services, preserving fetch order."""
        return [self.parse_service(item) for item in items]
