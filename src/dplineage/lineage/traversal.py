"""🧭 Lineage Traversal - Walk a port graph upstream or downstream.

A walk threads between two kinds of step:
- Intra-node: follow a port's declared related ports on the same node.
  Outputs do this going upstream, inputs going downstream.
- Cross-node: follow port relationships to another node.
  Inputs do this going upstream, outputs going downstream.

Each walk owns its visited set, so cycles in related ports or relationships
end the branch instead of looping.
"""

from __future__ import annotations

import logging

from dplineage.graph.models import PortDirection, TraversalDirection

from .maps import LineageMaps
from .results import LineageResult

logger = logging.getLogger(__name__)


# Port side whose related ports are followed in each direction
_INTRA_NODE_SIDE = {
    TraversalDirection.UPSTREAM: PortDirection.OUTPUT,
    TraversalDirection.DOWNSTREAM: PortDirection.INPUT,
}


def traverse(port_id: str, maps: LineageMaps, direction: TraversalDirection) -> LineageResult:
    """Collect the ports, nodes and relationships reachable from ``port_id``.

    Depth-first with an explicit stack. A port is marked visited before its
    neighbours are pushed, and the starting port is always in ``ports``
    even when it is not on any node.

    Args:
        port_id: Port to start from
        maps: Lookups from ``build_lineage_maps``
        direction: UPSTREAM or DOWNSTREAM

    Returns:
        LineageResult for one direction
    """
    direction = TraversalDirection(direction)
    result = LineageResult()
    visited: set[str] = set()
    stack = [port_id]

    while stack:
        current = stack.pop()
        if current in visited:
            continue
        visited.add(current)
        result.ports.add(current)

        location = maps.port_to_node.get(current)
        if location is None:
            # Dangling reference, nothing to follow
            continue
        result.nodes.add(location.node_id)

        if location.direction == _INTRA_NODE_SIDE[direction]:
            stack.extend(reversed(maps.related_ports(current, location.node_id)))
            continue

        next_ports = []
        for rel in maps.port_to_edges.get(current, []):
            if direction == TraversalDirection.UPSTREAM and rel.target_port == current:
                result.edges.add(rel.id)
                next_ports.append(rel.source_port)
            elif direction == TraversalDirection.DOWNSTREAM and rel.source_port == current:
                result.edges.add(rel.id)
                next_ports.append(rel.target_port)
        stack.extend(reversed(next_ports))

    logger.debug(
        "%s lineage from %s: %d nodes, %d edges, %d ports",
        direction.value.capitalize(),
        port_id,
        len(result.nodes),
        len(result.edges),
        len(result.ports),
    )
    return result


def find_upstream_lineage(port_id: str, maps: LineageMaps) -> LineageResult:
    """Trace every source that feeds ``port_id``."""
    return traverse(port_id, maps, TraversalDirection.UPSTREAM)


def find_downstream_lineage(port_id: str, maps: LineageMaps) -> LineageResult:
    """Trace every consumer of data leaving ``port_id``."""
    return traverse(port_id, maps, TraversalDirection.DOWNSTREAM)
