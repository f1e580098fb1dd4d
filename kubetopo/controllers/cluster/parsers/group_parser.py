"""Group parser - decodes Deployments and StatefulSets."""

from __future__ import annotations

from typing import Any

from kubetopo.constants.enums import GroupKind
from kubetopo.models.core.cluster_state import WorkloadGroup


class GroupParser:
    """Parses Deployment and StatefulSet objects into WorkloadGroup."""

    def _parse_group(self, item: dict[str, Any], kind: GroupKind) -> WorkloadGroup:
        metadata = item.get("metadata") or {}
        spec = item.get("spec") or {}
        match_labels = (spec.get("selector") or {}).get("matchLabels") or {}
        try:
            replicas = int(spec.get("replicas") or 0)
        except (ValueError, TypeError):
            replicas = 0

        return WorkloadGroup(
            kind=kind,
            name=str(metadata.get("name") or ""),
            namespace=str(metadata.get("namespace") or ""),
            replicas=replicas,
            selector={str(k): str(v) for k, v in match_labels.items()},
        )

    def parse_deployments(self, items: list[dict[str, Any]]) -> list[WorkloadGroup]:
        """Parse Deployments, preserving fetch order."""
        return [self._parse_group(item, GroupKind.REPLICA_CONTROLLED) for item in items]

    def parse_stateful_sets(self, items: list[dict[str, Any]]) -> list[WorkloadGroup]:
        """Parse StatefulSets, preserving fetch order."""
        return [self._parse_group(item, GroupKind.IDENTITY_CONTROLLED) for item in items]
