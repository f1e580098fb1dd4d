"""Metrics parser - decodes PodMetrics items from the metrics API."""

from __future__ import annotations

from typing import Any

from kubetopo.models.core.cluster_state import MetricSamples
from kubetopo.models.core.workload_instance import ResourceUsageSample


class MetricsParser:
    """Parses PodMetrics items into usage samples of the first container."""

    def parse_pod_metric(self, item: dict[str, Any]) -> ResourceUsageSample:
        """Parse one PodMetrics item."""
        metadata = item.get("metadata") or {}
        containers = item.get("containers") or []
        usage = (containers[0].get("usage") or {}) if containers else {}
        return ResourceUsageSample(
            name=str(metadata.get("name") or ""),
            namespace=str(metadata.get("namespace") or ""),
            cpu=str(usage.get("cpu") or ""),
            memory=str(usage.get("memory") or ""),
        )

    def parse_pod_metrics(self, items: list[dict[str, Any]]) -> MetricSamples:
        """Parse all PodMetrics items keyed by (namespace, name)."""
        samples: dict[tuple[str, str], ResourceUsageSample] = {}
        for item in items:
            sample = self.parse_pod_metric(item)
            samples.setdefault((sample.namespace, sample.name), sample)
        return MetricSamples(samples=samples)
