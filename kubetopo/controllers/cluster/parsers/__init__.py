"""Parsers turning raw API objects into kubetopo models."""

from kubetopo.controllers.cluster.parsers.group_parser import GroupParser
from kubetopo.controllers.cluster.parsers.metrics_parser import MetricsParser
from kubetopo.controllers.cluster.parsers.node_parser import NodeParser
from kubetopo.controllers.cluster.parsers.pod_parser import PodParser
from kubetopo.controllers.cluster.parsers.service_parser import ServiceParser

__all__ = [
    "GroupParser",
    "MetricsParser",
    "NodeParser",
    "PodParser",
    "ServiceParser",
]
