"""Topology controller for cluster snapshot operations.

This module serves as the main orchestrator of one poll, delegating to
specialized components:
- CredentialResolver: service account token and CA bundle
- MetricsFetcher: metrics backend health check and pod usage samples
- ClusterStateFetcher: pods, nodes, services, Deployments, StatefulSets
- OwnershipResolver / match_service: per-pod ownership and service
- WorkloadEnricher: record construction
- FallbackPolicy: canned snapshot on failure
"""

from __future__ import annotations

import asyncio
import logging
from contextlib import suppress
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any

import httpx

from kubetopo.constants.enums import FetchSources, FetchState
from kubetopo.controllers.base import BaseController
from kubetopo.controllers.cluster.enricher import WorkloadEnricher
from kubetopo.controllers.cluster.fallback import FallbackPolicy
from kubetopo.controllers.cluster.fetchers import (
    ClusterStateFetcher,
    CredentialResolver,
    Credentials,
    KubeApiClient,
    MetricsFetcher,
)
from kubetopo.controllers.cluster.parsers import PodParser
from kubetopo.controllers.cluster.resolvers import OwnershipResolver, match_service
from kubetopo.errors import BackendUnavailableError, TopologyError
from kubetopo.models.core.cluster_state import ClusterState, MetricSamples
from kubetopo.models.core.topology_record import PodStatusSummary, Snapshot
from kubetopo.models.state.app_settings import TopologySettings

logger = logging.getLogger(__name__)


@dataclass
class FetchStatus:
    """Status tracking for a single data source fetch operation."""

    source_name: str
    state: FetchState = FetchState.SUCCESS
    error_message: str | None = None
    last_updated: datetime | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "source_name": self.source_name,
            "state": self.state.value,
            "error_message": self.error_message,
            "last_updated": self.last_updated.isoformat()
            if self.last_updated
            else None,
        }


class TopologyController(BaseController):
    """Produces enriched topology snapshots of the cluster.

    Each ``get_snapshot()`` call is one stateless poll: data fetched in one
    poll is never mixed with another. Concurrent callers share the poll
    already in flight. Failures never propagate; they yield the synthetic
    snapshot marked as degraded.
    """

    def __init__(
        self,
        settings: TopologySettings | None = None,
        credential_resolver: CredentialResolver | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the topology controller.

        Args:
            settings: Collector settings; defaults when omitted.
            credential_resolver: Override of the service account reader.
            transport: Optional httpx transport, used by tests.
        """
        self.settings = settings or TopologySettings()
        self._credential_resolver = credential_resolver or CredentialResolver(
            self.settings.token_path,
            self.settings.ca_path,
            self.settings.api_server_url,
        )
        self._transport = transport

        self._ownership_resolver = OwnershipResolver(self.settings.app_name_label_keys)
        self._enricher = WorkloadEnricher(self.settings.layer_label_key)
        self._fallback = FallbackPolicy()
        self._pod_parser = PodParser()

        self._inflight: asyncio.Task[Snapshot] | None = None
        self._nonfatal_warnings: dict[str, str] = {}
        self._fetch_states: dict[str, FetchStatus] = {}
        self._initialize_fetch_states()

    # ------------------------------------------------------------------
    # Fetch state tracking
    # ------------------------------------------------------------------

    def _initialize_fetch_states(self) -> None:
        """Initialize fetch states for all data sources."""
        for source in FetchSources:
            self._fetch_states[source.value] = FetchStatus(
                source_name=source.value,
                state=FetchState.LOADING,
            )

    def _update_fetch_state(
        self,
        source: str,
        state: FetchState,
        error_message: str | None = None,
    ) -> None:
        """Update the fetch state for a data source."""
        if source not in self._fetch_states:
            self._fetch_states[source] = FetchStatus(source_name=source)
        self._fetch_states[source].state = state
        self._fetch_states[source].error_message = error_message
        if state == FetchState.SUCCESS:
            self._fetch_states[source].last_updated = datetime.now(timezone.utc)

    def get_fetch_state(self, source: str) -> FetchStatus | None:
        """Get the fetch state for a specific data source."""
        return self._fetch_states.get(source)

    def get_all_fetch_states(self) -> dict[str, FetchStatus]:
        """Get all fetch states."""
        return self._fetch_states.copy()

    def get_error_sources(self) -> list[str]:
        """Get list of data sources with errors."""
        return [
            source
            for source, status in self._fetch_states.items()
            if status.state == FetchState.ERROR
        ]

    def get_last_nonfatal_warnings(self) -> dict[str, str]:
        """Return warnings from permission-optional sources of the last poll."""
        return dict(self._nonfatal_warnings)

    # ------------------------------------------------------------------
    # Pipeline
    # ------------------------------------------------------------------

    def _resolve_credentials(self) -> Credentials:
        try:
            credentials = self._credential_resolver.resolve()
        except TopologyError as exc:
            self._update_fetch_state(FetchSources.CREDENTIALS.value, FetchState.ERROR, exc.reason)
            raise
        self._update_fetch_state(FetchSources.CREDENTIALS.value, FetchState.SUCCESS)
        return credentials

    def _open_api(self, credentials: Credentials) -> KubeApiClient:
        return KubeApiClient(credentials, self.settings, transport=self._transport)

    async def _ensure_metrics_backend(self, metrics_fetcher: MetricsFetcher) -> None:
        if not await metrics_fetcher.check_metrics_backend():
            self._update_fetch_state(
                FetchSources.METRICS_BACKEND.value,
                FetchState.ERROR,
                BackendUnavailableError.default_reason,
            )
            raise BackendUnavailableError()
        self._update_fetch_state(FetchSources.METRICS_BACKEND.value, FetchState.SUCCESS)

    async def _fetch_metrics(self, metrics_fetcher: MetricsFetcher) -> MetricSamples:
        try:
            samples = await metrics_fetcher.fetch_metrics()
        except TopologyError as exc:
            self._update_fetch_state(FetchSources.POD_METRICS.value, FetchState.ERROR, str(exc))
            raise
        self._update_fetch_state(FetchSources.POD_METRICS.value, FetchState.SUCCESS)
        return samples

    def build_snapshot(self, state: ClusterState, metrics: MetricSamples) -> Snapshot:
        """Enrich every pod of ``state``, preserving pod fetch order."""
        records = []
        for pod in state.pods:
            owner = self._ownership_resolver.resolve_owner(
                pod, state.deployments, state.stateful_sets
            )
            service = match_service(pod, state.services)
            usage = metrics.get(pod.namespace, pod.name)
            records.append(self._enricher.enrich(pod, owner, service, usage))
        return Snapshot(records=records, degraded=False)

    async def _collect(self) -> Snapshot:
        """Run one poll end to end; raises on any mandatory failure."""
        self._nonfatal_warnings = {}
        self._initialize_fetch_states()
        credentials = self._resolve_credentials()
        async with self._open_api(credentials) as api:
            metrics_fetcher = MetricsFetcher(
                api, health_check_timeout=self.settings.health_check_timeout_seconds
            )
            await self._ensure_metrics_backend(metrics_fetcher)

            state_fetcher = ClusterStateFetcher(
                api,
                identity_group_namespaces=self.settings.identity_group_namespaces,
                state_callback=self._update_fetch_state,
            )
            state, metrics = await asyncio.gather(
                state_fetcher.fetch_state(),
                self._fetch_metrics(metrics_fetcher),
                return_exceptions=True,
            )
            self._nonfatal_warnings = dict(state_fetcher.nonfatal_warnings)

        for result in (state, metrics):
            if isinstance(result, BaseException):
                raise result

        snapshot = self.build_snapshot(state, metrics)
        logger.info("Successfully processed metrics for %s pods", len(snapshot.records))
        return snapshot

    async def _poll(self) -> Snapshot:
        try:
            return await asyncio.wait_for(
                self._collect(), timeout=self.settings.poll_deadline_seconds
            )
        except asyncio.CancelledError:
            raise
        except Exception as exc:
            return self._fallback.degrade(exc)

    async def get_snapshot(self) -> Snapshot:
        """Poll the cluster and return a fresh snapshot.

        Never raises for pipeline failures; a degraded snapshot carries the
        reason instead.
        """
        existing = self._inflight
        if existing is not None and not existing.done():
            return await asyncio.shield(existing)

        task = asyncio.create_task(self._poll())
        self._inflight = task
        task.add_done_callback(self._clear_inflight)
        return await asyncio.shield(task)

    def _clear_inflight(self, task: asyncio.Task[Snapshot]) -> None:
        if self._inflight is task:
            self._inflight = None

    async def cancel(self) -> None:
        """Cancel the poll in flight, if any, and wait for it to unwind.

        Callers sharing that poll see it cancelled as well.
        """
        task = self._inflight
        if task is None or task.done():
            return
        task.cancel()
        with suppress(asyncio.CancelledError):
            await task
        logger.debug("Cancelled topology poll in flight")

    # ------------------------------------------------------------------
    # BaseController interface
    # ------------------------------------------------------------------

    async def check_connection(self) -> bool:
        """Check that credentials exist and the metrics backend answers."""
        try:
            credentials = self._resolve_credentials()
            async with self._open_api(credentials) as api:
                metrics_fetcher = MetricsFetcher(
                    api, health_check_timeout=self.settings.health_check_timeout_seconds
                )
                return await metrics_fetcher.check_metrics_backend()
        except TopologyError as exc:
            logger.info("Cluster connection check failed: %s", exc.reason)
            return False

    async def fetch_all(self) -> dict[str, Any]:
        """Fetch a snapshot as a JSON-compatible dictionary."""
        snapshot = await self.get_snapshot()
        return snapshot.to_dict()

    async def fetch_pod_statuses(self, namespace: str) -> list[PodStatusSummary]:
        """List pod status rows for one namespace.

        Raises:
            TopologyError: On credential or fetch failure.
        """
        credentials = self._resolve_credentials()
        async with self._open_api(credentials) as api:
            fetcher = ClusterStateFetcher(api)
            items = await fetcher.fetch_namespaced_pods_raw(namespace)
        return [self._pod_parser.parse_pod_status(item) for item in items]
