"""Controllers module for kubetopo.

This module provides the controllers that fetch Kubernetes cluster state
and metrics and turn them into topology snapshots.
"""

from __future__ import annotations

# Base classes
from kubetopo.controllers.base import BaseController, WorkerResult

# Cluster domain
from kubetopo.controllers.cluster.controller import (
    FetchStatus,
    TopologyController,
)

__all__ = [
    # Base
    "BaseController",
    # Cluster domain
    "FetchStatus",
    "TopologyController",
    "WorkerResult",
]
