"""Pod parser - decodes raw pod objects into WorkloadInstance models."""

from __future__ import annotations

import logging
from typing import Any

from kubetopo.constants.enums import OwnerKind, PodPhase
from kubetopo.models.core.topology_record import PodStatusSummary
from kubetopo.models.core.workload_instance import (
    ContainerLimitsInfo,
    ContainerStatusInfo,
    OwnerReference,
    WorkloadInstance,
)

logger = logging.getLogger(__name__)


class PodParser:
    """Parses pod data into structured formats."""

    @staticmethod
    def _parse_phase(raw_phase: Any) -> PodPhase:
        for phase in PodPhase:
            if phase.value == raw_phase:
                return phase
        return PodPhase.UNKNOWN

    @staticmethod
    def _parse_owner_reference(ref: dict[str, Any]) -> OwnerReference:
        raw_kind = str(ref.get("kind") or "")
        return OwnerReference(
            kind=OwnerKind.from_kind(raw_kind),
            name=str(ref.get("name") or ""),
            raw_kind=raw_kind,
        )

    @staticmethod
    def _parse_container_status(status: dict[str, Any]) -> ContainerStatusInfo:
        waiting = (status.get("state") or {}).get("waiting")
        is_waiting = isinstance(waiting, dict)
        return ContainerStatusInfo(
            name=str(status.get("name") or ""),
            ready=bool(status.get("ready", False)),
            restart_count=int(status.get("restartCount") or 0),
            waiting_reason=waiting.get("reason") if is_waiting else None,
            is_waiting=is_waiting,
        )

    @staticmethod
    def _parse_container_limits(container: dict[str, Any]) -> ContainerLimitsInfo:
        limits = (container.get("resources") or {}).get("limits") or {}
        cpu = limits.get("cpu")
        memory = limits.get("memory")
        return ContainerLimitsInfo(
            name=str(container.get("name") or ""),
            cpu_limit=str(cpu) if cpu is not None else None,
            memory_limit=str(memory) if memory is not None else None,
        )

    def parse_pod(self, pod: dict[str, Any]) -> WorkloadInstance:
        """Parse a single pod.

        Args:
            pod: Raw pod dictionary from API

        Returns:
            WorkloadInstance object.
        """
        metadata = pod.get("metadata") or {}
        spec = pod.get("spec") or {}
        status = pod.get("status") or {}
        raw_phase = str(status.get("phase") or "")

        return WorkloadInstance(
            name=str(metadata.get("name") or ""),
            namespace=str(metadata.get("namespace") or ""),
            phase=self._parse_phase(raw_phase),
            raw_phase=raw_phase,
            container_statuses=[
                self._parse_container_status(item)
                for item in status.get("containerStatuses") or []
                if isinstance(item, dict)
            ],
            containers=[
                self._parse_container_limits(item)
                for item in spec.get("containers") or []
                if isinstance(item, dict)
            ],
            labels={str(k): str(v) for k, v in (metadata.get("labels") or {}).items()},
            owner_references=[
                self._parse_owner_reference(ref)
                for ref in metadata.get("ownerReferences") or []
                if isinstance(ref, dict)
            ],
            creation_timestamp=metadata.get("creationTimestamp"),
        )

    def parse_pods(self, items: list[dict[str, Any]]) -> list[WorkloadInstance]:
        """Parse pods, preserving fetch order."""
        return [self.parse_pod(item) for item in items]

    def parse_pod_status(self, pod: dict[str, Any]) -> PodStatusSummary:
        """Parse a pod into a status row using its first container."""
        instance = self.parse_pod(pod)
        first = instance.container_statuses[0] if instance.container_statuses else None
        return PodStatusSummary(
            name=instance.name,
            status=instance.raw_phase or PodPhase.UNKNOWN.value,
            ready=first.ready if first else False,
            restarts=first.restart_count if first else 0,
            age=instance.creation_timestamp or "",
        )
