"""Tests for pod, group, service, node and metrics parsers."""

from __future__ import annotations

from typing import Any

import pytest

from kubetopo.constants.enums import GroupKind, OwnerKind, PodPhase
from kubetopo.controllers.cluster.parsers import (
    GroupParser,
    MetricsParser,
    NodeParser,
    PodParser,
    ServiceParser,
)


def _raw_pod(**overrides: Any) -> dict[str, Any]:
    pod: dict[str, Any] = {
        "metadata": {
            "name": "server-5489b5fdcf-9vj6b",
            "namespace": "server-layer",
            "creationTimestamp": "2024-05-01T10:00:00Z",
            "labels": {"app": "server", "pod-template-hash": "5489b5fdcf"},
            "ownerReferences": [
                {"kind": "ReplicaSet", "name": "server-5489b5fdcf", "uid": "abc"},
                {"kind": "Node", "name": "ignored"},
            ],
        },
        "spec": {
            "containers": [
                {"name": "server", "resources": {"limits": {"cpu": "500m", "memory": "256Mi"}}},
                {"name": "sidecar"},
            ]
        },
        "status": {
            "phase": "Running",
            "containerStatuses": [
                {"name": "server", "ready": True, "restartCount": 2, "state": {"running": {}}},
                {
                    "name": "sidecar",
                    "ready": False,
                    "restartCount": 0,
                    "state": {"waiting": {"reason": "ContainerCreating"}},
                },
            ],
        },
    }
    pod.update(overrides)
    return pod


class TestPodParser:
    """Tests for PodParser class."""

    @pytest.fixture
    def parser(self) -> PodParser:
        """Create PodParser instance."""
        return PodParser()

    def test_parse_pod_identity_and_labels(self, parser: PodParser) -> None:
        """Test parse_pod extracts identity, phase and labels."""
        pod = parser.parse_pod(_raw_pod())

        assert pod.name == "server-5489b5fdcf-9vj6b"
        assert pod.namespace == "server-layer"
        assert pod.phase is PodPhase.RUNNING
        assert pod.raw_phase == "Running"
        assert pod.labels == {"app": "server", "pod-template-hash": "5489b5fdcf"}
        assert pod.creation_timestamp == "2024-05-01T10:00:00Z"

    def test_parse_pod_owner_references_keep_order(self, parser: PodParser) -> None:
        """Test owner references decode in order with the first authoritative."""
        pod = parser.parse_pod(_raw_pod())

        assert pod.primary_owner is not None
        assert pod.primary_owner.kind is OwnerKind.REPLICA_SET
        assert pod.primary_owner.name == "server-5489b5fdcf"
        assert [ref.kind for ref in pod.owner_references] == [
            OwnerKind.REPLICA_SET,
            OwnerKind.NODE,
        ]

    def test_parse_pod_unknown_owner_kind(self, parser: PodParser) -> None:
        """Test unknown owner kinds decode to UNKNOWN instead of failing."""
        raw = _raw_pod()
        raw["metadata"]["ownerReferences"] = [{"kind": "Rollout", "name": "canary"}]

        pod = parser.parse_pod(raw)

        assert pod.primary_owner is not None
        assert pod.primary_owner.kind is OwnerKind.UNKNOWN
        assert pod.primary_owner.raw_kind == "Rollout"

    def test_parse_pod_container_statuses(self, parser: PodParser) -> None:
        """Test waiting state and readiness are captured per container."""
        pod = parser.parse_pod(_raw_pod())

        first, second = pod.container_statuses
        assert first.ready is True
        assert first.restart_count == 2
        assert first.is_waiting is False
        assert second.is_waiting is True
        assert second.waiting_reason == "ContainerCreating"

    def test_parse_pod_cpu_limit_from_first_container(self, parser: PodParser) -> None:
        """Test cpu_limit comes from the primary container."""
        pod = parser.parse_pod(_raw_pod())
        assert pod.cpu_limit == "500m"

    def test_parse_pod_without_limits(self, parser: PodParser) -> None:
        """Test missing limits decode to None."""
        pod = parser.parse_pod(_raw_pod(spec={"containers": [{"name": "app"}]}))
        assert pod.cpu_limit is None

    def test_parse_pod_minimal(self, parser: PodParser) -> None:
        """Test sparse objects decode with defaults."""
        pod = parser.parse_pod({"metadata": {"name": "lonely", "namespace": "default"}})

        assert pod.phase is PodPhase.UNKNOWN
        assert pod.raw_phase == ""
        assert pod.primary_owner is None
        assert pod.container_statuses == []
        assert pod.cpu_limit is None

    def test_parse_pods_preserves_order(self, parser: PodParser) -> None:
        """Test parse_pods keeps fetch order."""
        items = [
            {"metadata": {"name": name, "namespace": "default"}}
            for name in ("b-0", "a-0", "c-0")
        ]
        assert [p.name for p in parser.parse_pods(items)] == ["b-0", "a-0", "c-0"]

    def test_parse_pod_status(self, parser: PodParser) -> None:
        """Test status rows use the first container."""
        row = parser.parse_pod_status(_raw_pod())

        assert row.name == "server-5489b5fdcf-9vj6b"
        assert row.status == "Running"
        assert row.ready is True
        assert row.restarts == 2
        assert row.age == "2024-05-01T10:00:00Z"

    def test_parse_pod_status_defaults(self, parser: PodParser) -> None:
        """Test status rows for pods without status."""
        row = parser.parse_pod_status({"metadata": {"name": "new"}})

        assert row.status == "Unknown"
        assert row.ready is False
        assert row.restarts == 0


class TestGroupParser:
    """Tests for GroupParser class."""

    def test_parse_deployments(self) -> None:
        """Test Deployments decode name, replicas and matchLabels."""
        items = [
            {
                "metadata": {"name": "server", "namespace": "server-layer"},
                "spec": {"replicas": 2, "selector": {"matchLabels": {"app": "server"}}},
            }
        ]

        (group,) = GroupParser().parse_deployments(items)

        assert group.kind is GroupKind.REPLICA_CONTROLLED
        assert group.name == "server"
        assert group.replicas == 2
        assert group.selector == {"app": "server"}

    def test_parse_stateful_sets_missing_replicas(self) -> None:
        """Test StatefulSets without replicas decode to zero."""
        items = [{"metadata": {"name": "postgres", "namespace": "data-layer"}, "spec": {}}]

        (group,) = GroupParser().parse_stateful_sets(items)

        assert group.kind is GroupKind.IDENTITY_CONTROLLED
        assert group.replicas == 0
        assert group.selector == {}


class TestServiceParser:
    """Tests for ServiceParser class."""

    def test_parse_service(self) -> None:
        """Test services decode type, clusterIP and selector."""
        service = ServiceParser().parse_service(
            {
                "metadata": {"name": "postgres", "namespace": "data-layer"},
                "spec": {"type": "ClusterIP", "clusterIP": "None", "selector": {"app": "postgres"}},
            }
        )

        assert service.name == "postgres"
        assert service.type == "ClusterIP"
        assert service.cluster_ip == "None"
        assert service.selector == {"app": "postgres"}

    def test_parse_service_defaults_to_cluster_ip(self) -> None:
        """Test services without a type are ClusterIP."""
        service = ServiceParser().parse_service({"metadata": {"name": "x", "namespace": "y"}})
        assert service.type == "ClusterIP"
        assert service.selector == {}


class TestNodeParser:
    """Tests for NodeParser class."""

    def test_parse_node_ready(self) -> None:
        """Test Ready condition maps to is_ready."""
        node = NodeParser().parse_node(
            {
                "metadata": {"name": "node-a"},
                "status": {"conditions": [{"type": "Ready", "status": "True"}]},
            }
        )
        assert node.name == "node-a"
        assert node.is_ready is True

    def test_parse_node_not_ready(self) -> None:
        """Test nodes without a true Ready condition."""
        node = NodeParser().parse_node({"metadata": {"name": "node-b"}, "status": {}})
        assert node.is_ready is False


class TestMetricsParser:
    """Tests for MetricsParser class."""

    def test_parse_pod_metrics_uses_first_container(self) -> None:
        """Test samples take the first container's usage."""
        samples = MetricsParser().parse_pod_metrics(
            [
                {
                    "metadata": {"name": "server-0", "namespace": "server-layer"},
                    "containers": [
                        {"name": "server", "usage": {"cpu": "73m", "memory": "120Mi"}},
                        {"name": "sidecar", "usage": {"cpu": "5m", "memory": "10Mi"}},
                    ],
                }
            ]
        )

        sample = samples.get("server-layer", "server-0")
        assert sample is not None
        assert sample.cpu == "73m"
        assert sample.memory == "120Mi"
        assert len(samples) == 1

    def test_parse_pod_metrics_without_containers(self) -> None:
        """Test items without containers yield empty usage."""
        samples = MetricsParser().parse_pod_metrics(
            [{"metadata": {"name": "idle", "namespace": "default"}, "containers": []}]
        )
        sample = samples.get("default", "idle")
        assert sample is not None
        assert sample.cpu == ""
        assert samples.get("default", "missing") is None
