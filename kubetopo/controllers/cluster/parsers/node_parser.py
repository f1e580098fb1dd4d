"""Node parser for cluster controller - parses node data into structured formats."""

from __future__ import annotations

from typing import Any

from kubetopo.models.core.cluster_state import NodeSummary


class NodeParser:
    """Parses node data into structured formats."""

    def parse_node(self, node: dict[str, Any]) -> NodeSummary:
        """Parse a single node into NodeSummary.

        Args:
            node: Raw node dictionary from API

        Returns:
            NodeSummary object.
        """
        metadata = node.get("metadata") or {}
        status = node.get("status") or {}

        # Node conditions for readiness
        conditions = {
            c["type"]: c["status"]
            for c in status.get("conditions") or []
            if "type" in c and "status" in c
        }

        return NodeSummary(
            name=str(metadata.get("name") or "Unknown"),
            is_ready=conditions.get("Ready") == "True",
        )

    def parse_nodes(self, items: list[dict[str, Any]]) -> list[NodeSummary]:
        """Parse nodes, preserving fetch order."""
        return [self.parse_node(item) for item in items]
