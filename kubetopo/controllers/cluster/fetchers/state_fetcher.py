"""Cluster state fetcher - lists pods, nodes, services and workload groups."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from typing import Any

from kubetopo.constants.enums import FetchSources, FetchState
from kubetopo.constants.values import (
    DEPLOYMENTS_PATH,
    NAMESPACED_PODS_PATH,
    NAMESPACED_STATEFUL_SETS_PATH,
    NODES_PATH,
    PODS_PATH,
    REASON_PODS_FORBIDDEN,
    SERVICES_PATH,
    STATEFUL_SETS_PATH,
)
from kubetopo.controllers.cluster.fetchers.api_client import KubeApiClient
from kubetopo.controllers.cluster.parsers import (
    GroupParser,
    NodeParser,
    PodParser,
    ServiceParser,
)
from kubetopo.errors import ClusterPermissionError, TopologyError, TransportError
from kubetopo.models.core.cluster_state import ClusterState, WorkloadGroup

logger = logging.getLogger(__name__)

StateCallback = Callable[[str, FetchState, "str | None"], None]


class ClusterStateFetcher:
    """Fetches one consistent view of cluster state per poll.

    Independent list calls run concurrently; only the pod listing is
    mandatory for the poll to be meaningful.
    """

    def __init__(
        self,
        api: KubeApiClient,
        identity_group_namespaces: list[str] | tuple[str, ...] = (),
        state_callback: StateCallback | None = None,
    ) -> None:
        """Initialize the fetcher.

        Args:
            api: Open API client for this poll
            identity_group_namespaces: Namespaces scanned for StatefulSets;
                empty means one all-namespaces listing
            state_callback: Optional ``(source, state, error)`` reporter
        """
        self._api = api
        self._identity_group_namespaces = list(identity_group_namespaces)
        self._state_callback = state_callback
        self._pod_parser = PodParser()
        self._node_parser = NodeParser()
        self._service_parser = ServiceParser()
        self._group_parser = GroupParser()
        self.nonfatal_warnings: dict[str, str] = {}

    def _notify(self, source: FetchSources, state: FetchState, error: str | None = None) -> None:
        if self._state_callback:
            self._state_callback(source.value, state, error)

    async def _list(self, source: FetchSources, path: str) -> list[dict[str, Any]]:
        try:
            items = await self._api.list_items(path, reason=f"Failed to list {source.value}")
        except TopologyError as exc:
            self._notify(source, FetchState.ERROR, str(exc))
            raise
        self._notify(source, FetchState.SUCCESS)
        return items

    async def fetch_pods_raw(self) -> list[dict[str, Any]]:
        """List pods across all namespaces.

        Raises:
            ClusterPermissionError: If pods cannot be listed.
        """
        try:
            return await self._list(FetchSources.PODS, PODS_PATH)
        except TransportError as exc:
            logger.error("Permission error listing pods: %s", exc)
            raise ClusterPermissionError(REASON_PODS_FORBIDDEN, detail=exc.detail) from exc

    async def fetch_namespaced_pods_raw(self, namespace: str) -> list[dict[str, Any]]:
        """List pods of a single namespace."""
        return await self._api.list_items(
            NAMESPACED_PODS_PATH.format(namespace=namespace),
            reason=f"Failed to list pods in {namespace}",
        )

    async def fetch_stateful_sets(self) -> list[WorkloadGroup]:
        """List StatefulSets; failures are logged and skipped per namespace."""
        if not self._identity_group_namespaces:
            paths = {"*": STATEFUL_SETS_PATH}
        else:
            paths = {
                namespace: NAMESPACED_STATEFUL_SETS_PATH.format(namespace=namespace)
                for namespace in self._identity_group_namespaces
            }

        results = await asyncio.gather(
            *(
                self._api.list_items(path, reason=f"Cannot list StatefulSets in {scope}")
                for scope, path in paths.items()
            ),
            return_exceptions=True,
        )

        groups: list[WorkloadGroup] = []
        failures = 0
        for scope, result in zip(paths, results):
            if isinstance(result, TopologyError):
                failures += 1
                logger.info("Note: cannot list StatefulSets in %s: %s", scope, result)
                self.nonfatal_warnings[f"{FetchSources.STATEFUL_SETS.value}:{scope}"] = str(result)
                continue
            if isinstance(result, BaseException):
                raise result
            groups.extend(self._group_parser.parse_stateful_sets(result))

        if failures:
            self._notify(
                FetchSources.STATEFUL_SETS,
                FetchState.ERROR,
                f"{failures} of {len(paths)} StatefulSet listings failed",
            )
        else:
            self._notify(FetchSources.STATEFUL_SETS, FetchState.SUCCESS)
        return groups

    async def fetch_state(self) -> ClusterState:
        """Fetch pods, nodes, services, Deployments and StatefulSets concurrently.

        Raises:
            ClusterPermissionError: If pods cannot be listed.
            TransportError: If nodes, services or Deployments cannot be listed.
        """
        self.nonfatal_warnings = {}
        pods, nodes, services, deployments, stateful_sets = await asyncio.gather(
            self.fetch_pods_raw(),
            self._list(FetchSources.NODES, NODES_PATH),
            self._list(FetchSources.SERVICES, SERVICES_PATH),
            self._list(FetchSources.DEPLOYMENTS, DEPLOYMENTS_PATH),
            self.fetch_stateful_sets(),
            return_exceptions=True,
        )

        # Pod failure takes precedence: without pods nothing else matters.
        for result in (pods, nodes, services, deployments, stateful_sets):
            if isinstance(result, BaseException):
                raise result

        state = ClusterState(
            pods=self._pod_parser.parse_pods(pods),
            nodes=self._node_parser.parse_nodes(nodes),
            services=self._service_parser.parse_services(services),
            deployments=self._group_parser.parse_deployments(deployments),
            stateful_sets=stateful_sets,
        )
        logger.info(
            "Found %s pods, %s nodes, %s services, %s deployments, %s statefulsets",
            len(state.pods),
            len(state.nodes),
            len(state.services),
            len(state.deployments),
            len(state.stateful_sets),
        )
        return state
