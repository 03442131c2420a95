"""🗺️ Lineage Maps - Adjacency lookups for port-level traversal.

Built once per graph:
- port id -> port relationships touching it (as source or target)
- node id -> direct relationships touching it
- port id -> owning node and side (input/output)
- node id -> node record
"""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Iterable
from dataclasses import dataclass, field

from dplineage.graph.models import (
    DataProductNode,
    DirectRelationship,
    PortDirection,
    PortRelationship,
    Relationship,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PortLocation:
    """Where a port lives."""

    node_id: str
    direction: PortDirection


@dataclass
class LineageMaps:
    """Lookup tables used by the traversal functions."""

    port_to_edges: dict[str, list[PortRelationship]] = field(default_factory=dict)
    node_to_edges: dict[str, list[DirectRelationship]] = field(default_factory=dict)
    port_to_node: dict[str, PortLocation] = field(default_factory=dict)
    node_data: dict[str, DataProductNode] = field(default_factory=dict)

    def related_ports(self, port_id: str, node_id: str) -> list[str]:
        """Declared related ports of ``port_id`` on ``node_id``.

        Returns an empty list when the node or port is unknown.
        """
        node = self.node_data.get(node_id)
        if node is None:
            return []
        port = node.get_port(port_id)
        if port is None:
            return []
        return list(port.related_ports)


def build_lineage_maps(
    relationships: Iterable[Relationship],
    nodes: Iterable[DataProductNode],
) -> LineageMaps:
    """Index a graph for traversal.

    Malformed input never fails; it just yields sparse maps. A port listed
    twice keeps its last location.

    Args:
        relationships: Direct and port relationships
        nodes: Data product nodes

    Returns:
        LineageMaps for the graph
    """
    port_to_edges: defaultdict[str, list[PortRelationship]] = defaultdict(list)
    node_to_edges: defaultdict[str, list[DirectRelationship]] = defaultdict(list)
    port_to_node: dict[str, PortLocation] = {}
    node_data: dict[str, DataProductNode] = {}

    for node in nodes:
        node_data[node.id] = node
        for port, direction in node.iter_ports():
            port_to_node[port.id] = PortLocation(node.id, direction)

    for rel in relationships:
        if rel.type == "port":
            port_to_edges[rel.source_port].append(rel)
            port_to_edges[rel.target_port].append(rel)
        elif rel.type == "direct":
            node_to_edges[rel.source_node].append(rel)
            node_to_edges[rel.target_node].append(rel)

    logger.debug(
        "Built lineage maps: %d nodes, %d ports, %d port keys, %d node keys",
        len(node_data),
        len(port_to_node),
        len(port_to_edges),
        len(node_to_edges),
    )
    return LineageMaps(
        port_to_edges=dict(port_to_edges),
        node_to_edges=dict(node_to_edges),
        port_to_node=port_to_node,
        node_data=node_data,
    )
