"""Init file for cluster module."""

from kubetopo.controllers.cluster.controller import FetchStatus, TopologyController
from kubetopo.controllers.cluster.enricher import WorkloadEnricher
from kubetopo.controllers.cluster.fallback import FallbackPolicy, synthetic_snapshot
from kubetopo.controllers.cluster.fetchers import (
    ClusterStateFetcher,
    CredentialResolver,
    MetricsFetcher,
)

__all__ = [
    "ClusterStateFetcher",
    "CredentialResolver",
    "FallbackPolicy",
    "FetchStatus",
    "MetricsFetcher",
    "TopologyController",
    "WorkloadEnricher",
    "synthetic_snapshot",
]
