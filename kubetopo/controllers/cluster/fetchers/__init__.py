"""Fetchers for control plane and metrics data."""

from kubetopo.controllers.cluster.fetchers.api_client import KubeApiClient
from kubetopo.controllers.cluster.fetchers.credential_resolver import (
    CredentialResolver,
    Credentials,
)
from kubetopo.controllers.cluster.fetchers.metrics_fetcher import MetricsFetcher
from kubetopo.controllers.cluster.fetchers.state_fetcher import ClusterStateFetcher

__all__ = [
    "ClusterStateFetcher",
    "CredentialResolver",
    "Credentials",
    "KubeApiClient",
    "MetricsFetcher",
]
