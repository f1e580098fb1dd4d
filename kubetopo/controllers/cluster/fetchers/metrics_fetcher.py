"""Metrics fetcher - probes and queries the metrics.k8s.io API."""

from __future__ import annotations

import logging

from kubetopo.constants.timeouts import METRICS_HEALTH_CHECK_TIMEOUT
from kubetopo.constants.values import METRICS_API_PATH, POD_METRICS_PATH, REASON_METRICS_FETCH
from kubetopo.controllers.cluster.fetchers.api_client import KubeApiClient
from kubetopo.controllers.cluster.parsers import MetricsParser
from kubetopo.models.core.cluster_state import MetricSamples

logger = logging.getLogger(__name__)


class MetricsFetcher:
    """Fetches pod usage samples from the metrics backend."""

    def __init__(
        self,
        api: KubeApiClient,
        health_check_timeout: float = METRICS_HEALTH_CHECK_TIMEOUT,
    ) -> None:
        self._api = api
        self._health_check_timeout = health_check_timeout
        self._parser = MetricsParser()

    async def check_metrics_backend(self) -> bool:
        """Return True when the metrics API discovery path answers 200.

        Single attempt; the next poll checks again.
        """
        available = await self._api.probe(METRICS_API_PATH, timeout=self._health_check_timeout)
        if not available:
            logger.error("Metrics server not available")
        return available

    async def fetch_metrics(self) -> MetricSamples:
        """Fetch current usage for all pods in all namespaces.

        Raises:
            TransportError: With reason "Failed to fetch metrics".
        """
        items = await self._api.list_items(POD_METRICS_PATH, reason=REASON_METRICS_FETCH)
        samples = self._parser.parse_pod_metrics(items)
        logger.info("Received metrics for %s pods", len(samples))
        return samples
