"""Enrichment - turns one pod and its resolved context into a record."""

from __future__ import annotations

import logging

from kubetopo.constants.defaults import LAYER_LABEL_KEY_DEFAULT
from kubetopo.constants.enums import HealthStatus, OwnerKind, PodPhase, ServiceType
from kubetopo.constants.values import FAILED_WAITING_REASONS, LAYER_MAP
from kubetopo.models.core.topology_record import (
    EnrichedWorkloadRecord,
    OwnerResolution,
    ServiceSummary,
)
from kubetopo.models.core.workload_instance import ResourceUsageSample, WorkloadInstance
from kubetopo.utils.name_utils import shorten_pod_name
from kubetopo.utils.resource_parser import cpu_percent_of_limit, parse_cpu_millicores

logger = logging.getLogger(__name__)


def classify_health(pod: WorkloadInstance) -> str:
    """Classify pod health from its container statuses.

    Any container waiting on a crash loop or config error is Failed; any
    other waiting or unready container is Degraded; otherwise the phase is
    used, with Running reported as Healthy.
    """
    statuses = pod.container_statuses
    if any(s.is_waiting and s.waiting_reason in FAILED_WAITING_REASONS for s in statuses):
        return HealthStatus.FAILED.value
    if any(s.is_waiting or not s.ready for s in statuses):
        return HealthStatus.DEGRADED.value
    if pod.phase is PodPhase.RUNNING:
        return HealthStatus.HEALTHY.value
    return pod.raw_phase or pod.phase.value


def map_layer(label_value: str) -> str:
    """Map a layer label to its visualization layer, passing unknowns through."""
    return LAYER_MAP.get(label_value, label_value)


def is_load_balancer_eligible(owner: OwnerResolution, service: ServiceSummary | None) -> bool:
    """True for multi-replica Deployments behind a non-headless Service."""
    return (
        owner.owner_kind is OwnerKind.DEPLOYMENT
        and owner.replicas > 1
        and service is not None
        and service.type != ServiceType.HEADLESS.value
    )


class WorkloadEnricher:
    """Builds EnrichedWorkloadRecord rows."""

    def __init__(self, layer_label_key: str = LAYER_LABEL_KEY_DEFAULT) -> None:
        self._layer_label_key = layer_label_key

    def enrich(
        self,
        pod: WorkloadInstance,
        owner: OwnerResolution,
        service: ServiceSummary | None,
        usage: ResourceUsageSample | None,
    ) -> EnrichedWorkloadRecord:
        """Combine pod, owner, service and usage into one record."""
        cpu = usage.cpu if usage else ""
        memory = usage.memory if usage else ""

        cpu_percent = 0.0
        if cpu and pod.cpu_limit:
            cpu_percent = cpu_percent_of_limit(
                parse_cpu_millicores(cpu),
                parse_cpu_millicores(pod.cpu_limit),
            )

        return EnrichedWorkloadRecord(
            name=pod.name,
            short_name=shorten_pod_name(pod.name),
            status=classify_health(pod),
            cpu=cpu,
            cpu_percent=cpu_percent,
            memory=memory,
            deployment=owner.group_name,
            is_deployment_pod=owner.owner_kind is not None,
            layer=map_layer(pod.labels.get(self._layer_label_key, "")),
            owner_kind=owner.owner_kind,
            replicas=owner.replicas,
            service=service,
            labels=dict(pod.labels),
            load_balancer_eligible=is_load_balancer_eligible(owner, service),
        )
