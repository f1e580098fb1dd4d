"""Tests for ownership resolution and service matching."""

from __future__ import annotations

import pytest

from kubetopo.constants.enums import GroupKind, OwnerKind
from kubetopo.controllers.cluster.resolvers import (
    OwnershipResolver,
    exposure_type,
    match_service,
)
from kubetopo.models.core.cluster_state import NetworkService, WorkloadGroup
from kubetopo.models.core.workload_instance import OwnerReference, WorkloadInstance


def _pod(
    name: str,
    labels: dict[str, str] | None = None,
    owner: tuple[str, str] | None = None,
    namespace: str = "server-layer",
) -> WorkloadInstance:
    refs = []
    if owner is not None:
        refs.append(
            OwnerReference(kind=OwnerKind.from_kind(owner[0]), name=owner[1], raw_kind=owner[0])
        )
    return WorkloadInstance(
        name=name,
        namespace=namespace,
        labels=labels or {},
        owner_references=refs,
    )


def _deployment(name: str, replicas: int, selector: dict[str, str], namespace: str = "server-layer") -> WorkloadGroup:
    return WorkloadGroup(
        kind=GroupKind.REPLICA_CONTROLLED,
        name=name,
        namespace=namespace,
        replicas=replicas,
        selector=selector,
    )


def _stateful_set(name: str, replicas: int, namespace: str = "data-layer") -> WorkloadGroup:
    return WorkloadGroup(
        kind=GroupKind.IDENTITY_CONTROLLED,
        name=name,
        namespace=namespace,
        replicas=replicas,
        selector={"app": name},
    )


class TestOwnershipResolver:
    """Tests for OwnershipResolver class."""

    @pytest.fixture
    def resolver(self) -> OwnershipResolver:
        """Create OwnershipResolver instance."""
        return OwnershipResolver()

    def test_replica_set_owner_resolves_to_deployment(self, resolver: OwnershipResolver) -> None:
        """Test a ReplicaSet-owned pod resolves to the matching Deployment."""
        pod = _pod(
            "server-5489b5fdcf-9vj6b",
            {"app": "server", "pod-template-hash": "5489b5fdcf"},
            ("ReplicaSet", "server-5489b5fdcf"),
        )

        result = resolver.resolve_owner(pod, [_deployment("server", 2, {"app": "server"})], [])

        assert result.group_name == "server"
        assert result.owner_kind is OwnerKind.DEPLOYMENT
        assert result.replicas == 2

    def test_replica_set_without_matching_deployment(self, resolver: OwnershipResolver) -> None:
        """Test unmatched ReplicaSet pods degrade to ReplicaSet with zero replicas."""
        pod = _pod("orphan-5489b5fdcf-9vj6b", {"tier": "api"}, ("ReplicaSet", "orphan-5489b5fdcf"))

        result = resolver.resolve_owner(pod, [_deployment("server", 2, {"app": "server"})], [])

        assert result.owner_kind is OwnerKind.REPLICA_SET
        assert result.replicas == 0
        assert result.group_name == "orphan"

    def test_deployment_in_other_namespace_ignored(self, resolver: OwnershipResolver) -> None:
        """Test Deployments must share the pod namespace."""
        pod = _pod("server-5489b5fdcf-9vj6b", {"app": "server"}, ("ReplicaSet", "server-5489b5fdcf"))
        deployments = [_deployment("server", 3, {"app": "server"}, namespace="other")]

        result = resolver.resolve_owner(pod, deployments, [])

        assert result.owner_kind is OwnerKind.REPLICA_SET

    def test_first_matching_deployment_wins(self, resolver: OwnershipResolver) -> None:
        """Test ambiguous selectors resolve to the first Deployment fetched."""
        pod = _pod("server-5489b5fdcf-9vj6b", {"app": "server", "tier": "api"}, ("ReplicaSet", "rs"))
        deployments = [
            _deployment("first", 2, {"app": "server"}),
            _deployment("second", 5, {"tier": "api"}),
        ]

        result = resolver.resolve_owner(pod, deployments, [])

        assert result.group_name == "first"
        assert result.replicas == 2

    def test_stateful_set_owner(self, resolver: OwnershipResolver) -> None:
        """Test StatefulSet pods resolve by exact name and namespace."""
        pod = _pod("postgres-0", {"app": "postgres"}, ("StatefulSet", "postgres"), namespace="data-layer")

        result = resolver.resolve_owner(pod, [], [_stateful_set("postgres", 3)])

        assert result.group_name == "postgres"
        assert result.owner_kind is OwnerKind.STATEFUL_SET
        assert result.replicas == 3

    def test_stateful_set_not_listed(self, resolver: OwnershipResolver) -> None:
        """Test StatefulSet pods keep their kind when the group was not listed."""
        pod = _pod("postgres-0", {}, ("StatefulSet", "postgres"), namespace="data-layer")

        result = resolver.resolve_owner(pod, [], [])

        assert result.owner_kind is OwnerKind.STATEFUL_SET
        assert result.replicas == 0
        assert result.group_name == "postgres"

    def test_standalone_pod(self, resolver: OwnershipResolver) -> None:
        """Test pods without owner references are standalone."""
        result = resolver.resolve_owner(_pod("client-v7qr"), [], [])

        assert result.owner_kind is None
        assert result.replicas == 0
        assert result.group_name == ""

    def test_standalone_pod_uses_app_label(self, resolver: OwnershipResolver) -> None:
        """Test standalone pods take their group name from the app label."""
        result = resolver.resolve_owner(_pod("client-v7qr", {"app.kubernetes.io/name": "client"}), [], [])
        assert result.group_name == "client"

    def test_other_controller_kinds_are_not_grouped(self, resolver: OwnershipResolver) -> None:
        """Test DaemonSet pods resolve without an owner kind."""
        pod = _pod("fluentd-x7k2p", {}, ("DaemonSet", "fluentd"))

        result = resolver.resolve_owner(pod, [], [])

        assert result.owner_kind is None
        assert result.replicas == 0


class TestServiceMatcher:
    """Tests for match_service and exposure_type."""

    def _service(self, name: str, type_: str = "ClusterIP", cluster_ip: str | None = "10.0.0.1", **selector: str) -> NetworkService:
        return NetworkService(
            name=name,
            namespace="server-layer",
            type=type_,
            cluster_ip=cluster_ip,
            selector=selector,
        )

    def test_match_service(self) -> None:
        """Test the selecting service is reported with its type."""
        pod = _pod("server-0", {"app": "server", "tier": "api"})

        result = match_service(pod, [self._service("other", app="client"), self._service("server-service", app="server")])

        assert result is not None
        assert result.name == "server-service"
        assert result.type == "ClusterIP"

    def test_no_service_matches(self) -> None:
        """Test None when no selector matches."""
        assert match_service(_pod("server-0", {"app": "server"}), [self._service("x", app="client")]) is None

    def test_service_without_selector_matches_nothing(self) -> None:
        """Test selector-less services never match."""
        assert match_service(_pod("server-0", {"app": "server"}), [self._service("external")]) is None

    def test_first_matching_service_wins(self) -> None:
        """Test ties resolve to fetch order."""
        services = [self._service("a", app="server"), self._service("b", app="server")]
        result = match_service(_pod("server-0", {"app": "server"}), services)
        assert result is not None
        assert result.name == "a"

    @pytest.mark.parametrize(
        ("type_", "cluster_ip", "expected"),
        [
            ("ClusterIP", "None", "Headless"),
            ("ClusterIP", None, "Headless"),
            ("ClusterIP", "10.0.0.7", "ClusterIP"),
            ("NodePort", "10.0.0.8", "NodePort"),
            ("LoadBalancer", "10.0.0.9", "LoadBalancer"),
        ],
    )
    def test_exposure_type(self, type_: str, cluster_ip: str | None, expected: str) -> None:
        """Test headless detection and verbatim passthrough."""
        assert exposure_type(self._service("svc", type_, cluster_ip, app="x")) == expected
