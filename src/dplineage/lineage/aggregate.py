"""🔗 Lineage Aggregation - Complete lineage for a port or a collapsed node."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from dplineage.graph.models import DataProductNode, Relationship

from .maps import LineageMaps, build_lineage_maps
from .results import CompleteLineageResult, NodeLineageResult
from .traversal import find_downstream_lineage, find_upstream_lineage

logger = logging.getLogger(__name__)


def complete_lineage_from_maps(port_id: str | None, maps: LineageMaps) -> CompleteLineageResult:
    """Run both directions from ``port_id`` over prebuilt maps."""
    if not port_id:
        return CompleteLineageResult.empty()

    upstream = find_upstream_lineage(port_id, maps)
    downstream = find_downstream_lineage(port_id, maps)
    return CompleteLineageResult.combine(upstream, downstream)


def find_complete_lineage(
    port_id: str | None,
    relationships: Iterable[Relationship],
    nodes: Iterable[DataProductNode],
) -> CompleteLineageResult:
    """Find upstream and downstream lineage of a port.

    Args:
        port_id: Selected port, or None when nothing is selected
        relationships: All relationships in the graph
        nodes: All data product nodes

    Returns:
        Combined sets plus the upstream and downstream halves.
        All sets are empty when ``port_id`` is None.
    """
    if not port_id:
        return CompleteLineageResult.empty()

    return complete_lineage_from_maps(port_id, build_lineage_maps(relationships, nodes))


def node_lineage_from_maps(node_id: str | None, maps: LineageMaps) -> NodeLineageResult:
    """Flood-fill direct relationships in both directions from ``node_id``."""
    if not node_id:
        return NodeLineageResult.empty()

    result = NodeLineageResult(nodes={node_id})
    visited: set[str] = set()
    stack = [node_id]

    while stack:
        current = stack.pop()
        if current in visited:
            continue
        visited.add(current)

        for rel in maps.node_to_edges.get(current, []):
            if rel.source_node == current:
                result.edges.add(rel.id)
                result.nodes.add(rel.target_node)
                stack.append(rel.target_node)
            if rel.target_node == current:
                result.edges.add(rel.id)
                result.nodes.add(rel.source_node)
                stack.append(rel.source_node)

    logger.debug(
        "Node lineage from %s: %d nodes, %d edges",
        node_id,
        len(result.nodes),
        len(result.edges),
    )
    return result


def find_node_lineage(
    node_id: str | None,
    relationships: Iterable[Relationship],
    nodes: Iterable[DataProductNode] = (),
) -> NodeLineageResult:
    """Find every node linked to a collapsed node through direct relationships.

    Port relationships are ignored; a collapsed node shows no ports. The walk
    is undirected: ancestors and descendants land in the same sets.
    """
    if not node_id:
        return NodeLineageResult.empty()

    return node_lineage_from_maps(node_id, build_lineage_maps(relationships, nodes))
