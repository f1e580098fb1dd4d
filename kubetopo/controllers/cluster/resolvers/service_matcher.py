"""Service matching - finds the Service that selects a pod."""

from __future__ import annotations

from collections.abc import Sequence

from kubetopo.constants.enums import ServiceType
from kubetopo.models.core.cluster_state import NetworkService
from kubetopo.models.core.topology_record import ServiceSummary
from kubetopo.models.core.workload_instance import WorkloadInstance
from kubetopo.utils.selectors import first_selector_match


def exposure_type(service: NetworkService) -> str:
    """Report ClusterIP services without a cluster IP as Headless."""
    if service.type == ServiceType.CLUSTER_IP.value and service.cluster_ip in (None, "", "None"):
        return ServiceType.HEADLESS.value
    return service.type


def match_service(
    pod: WorkloadInstance,
    services: Sequence[NetworkService],
) -> ServiceSummary | None:
    """Return the first Service in the pod namespace whose selector matches."""
    service = first_selector_match(services, pod.namespace, pod.labels)
    if service is None:
        return None
    return ServiceSummary(name=service.name, type=exposure_type(service))
