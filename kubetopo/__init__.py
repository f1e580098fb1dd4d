"""kubetopo - enriched Kubernetes topology snapshots for visualization."""

from kubetopo.controllers.cluster.controller import TopologyController
from kubetopo.models.core.topology_record import EnrichedWorkloadRecord, Snapshot
from kubetopo.models.state import ConfigManager, TopologySettings
from kubetopo.utils.poller import SnapshotPoller

__version__ = "0.1.0"

__all__ = [
    "ConfigManager",
    "EnrichedWorkloadRecord",
    "Snapshot",
    "SnapshotPoller",
    "TopologyController",
    "TopologySettings",
]
