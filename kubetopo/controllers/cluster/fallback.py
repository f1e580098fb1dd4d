"""Fallback policy - substitutes a canned snapshot when a poll fails."""

from __future__ import annotations

import asyncio
import logging

from kubetopo.constants.enums import HealthStatus, OwnerKind, ServiceType
from kubetopo.constants.values import REASON_POLL_TIMEOUT, REASON_UNKNOWN
from kubetopo.errors import TopologyError
from kubetopo.models.core.topology_record import (
    EnrichedWorkloadRecord,
    ServiceSummary,
    Snapshot,
)

logger = logging.getLogger(__name__)

_HEALTHY = HealthStatus.HEALTHY.value
_FAILED = HealthStatus.FAILED.value


def _record(
    name: str,
    short_name: str,
    status: str,
    cpu: str,
    cpu_percent: float,
    memory: str,
    layer: str,
    deployment: str = "",
    owner_kind: OwnerKind | None = None,
    replicas: int = 1,
    service: tuple[str, ServiceType] | None = None,
) -> EnrichedWorkloadRecord:
    summary = ServiceSummary(name=service[0], type=service[1].value) if service else None
    return EnrichedWorkloadRecord(
        name=name,
        short_name=short_name,
        status=status,
        cpu=cpu,
        cpu_percent=cpu_percent,
        memory=memory,
        deployment=deployment,
        is_deployment_pod=owner_kind is not None,
        layer=layer,
        owner_kind=owner_kind,
        replicas=replicas,
        service=summary,
        load_balancer_eligible=(
            owner_kind is OwnerKind.DEPLOYMENT
            and replicas > 1
            and summary is not None
            and summary.type != ServiceType.HEADLESS.value
        ),
    )


SYNTHETIC_RECORDS: tuple[EnrichedWorkloadRecord, ...] = (
    # Server pods (deployment)
    _record(
        "server-abc12345-x1y2z", "server-x1y2", _FAILED, "120m", 3.0, "256Mi",
        "server-layer", "server", OwnerKind.DEPLOYMENT, 2,
        ("server-service", ServiceType.CLUSTER_IP),
    ),
    _record(
        "server-abc12345-6fn5q", "server-6fn5", _FAILED, "90m", 2.2, "220Mi",
        "server-layer", "server", OwnerKind.DEPLOYMENT, 2,
        ("server-service", ServiceType.CLUSTER_IP),
    ),
    # Client pod (standalone)
    _record(
        "client-v7qr", "client-v7qr", _HEALTHY, "80m", 100.0, "180Mi",
        "client-layer", service=("client-service", ServiceType.CLUSTER_IP),
    ),
    # Data stores (statefulsets)
    _record(
        "postgres-0", "postgres-0", _HEALTHY, "200m", 100.0, "512Mi",
        "data-layer", "postgres", OwnerKind.STATEFUL_SET, 1,
        ("postgres", ServiceType.HEADLESS),
    ),
    _record(
        "rabbitmq-0", "rabbitmq-0", _HEALTHY, "150m", 100.0, "256Mi",
        "data-layer", "rabbitmq", OwnerKind.STATEFUL_SET, 1,
        ("rabbitmq", ServiceType.HEADLESS),
    ),
    _record(
        "redis-0", "redis-0", _HEALTHY, "100m", 100.0, "128Mi",
        "data-layer", "redis", OwnerKind.STATEFUL_SET, 1,
        ("redis", ServiceType.HEADLESS),
    ),
    # Worker pod (standalone, no service)
    _record("worker-cwnr", "worker-cwnr", _HEALTHY, "100m", 100.0, "256Mi", "server-layer"),
    # Monitoring pods (standalone)
    _record(
        "grafana-wkgk", "grafana-wkgk", _FAILED, "50m", 100.0, "128Mi",
        "observability-layer", service=("grafana", ServiceType.CLUSTER_IP),
    ),
    _record(
        "prometheus-gkwr", "prometheus-gkwr", _HEALTHY, "150m", 100.0, "512Mi",
        "observability-layer", service=("prometheus", ServiceType.CLUSTER_IP),
    ),
)


def synthetic_snapshot(reason: str) -> Snapshot:
    """Return the canned snapshot marked as degraded."""
    return Snapshot(records=list(SYNTHETIC_RECORDS), degraded=True, reason=reason)


def degradation_reason(error: BaseException) -> str:
    """Human-readable reason for a failed poll."""
    if isinstance(error, TopologyError):
        return error.reason
    if isinstance(error, asyncio.TimeoutError):
        return REASON_POLL_TIMEOUT
    return str(error).strip() or REASON_UNKNOWN


class FallbackPolicy:
    """Decides the degraded snapshot returned for a failed poll."""

    def degrade(self, error: BaseException) -> Snapshot:
        """Log the failure and return the synthetic snapshot."""
        reason = degradation_reason(error)
        if isinstance(error, (TopologyError, asyncio.TimeoutError)):
            logger.warning("Returning synthetic topology: %s", reason)
        else:
            logger.error("Unexpected error in topology pipeline, returning synthetic topology", exc_info=error)
        return synthetic_snapshot(reason)
