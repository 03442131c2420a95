"""🔍 Graph Queries - Ownership and dependency lookups on the rendered graph.

When a data product is expanded, its ports are drawn in separate group nodes:
- ``group``: output ports, linked from the owning data product
- ``inputGroup``: input ports, linked to the owning data product

Data products depend on each other through ``group -> inputGroup`` edges.
All lookups are linear scans; "not found" is None, an empty list or False.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Literal

ViewNodeType = Literal["dataproduct", "group", "inputGroup"]


@dataclass(frozen=True)
class ViewNode:
    """A node in the rendered graph."""

    id: str
    type: ViewNodeType


@dataclass(frozen=True)
class ViewEdge:
    """An edge in the rendered graph."""

    id: str
    source: str
    target: str


def _node_type(node_id: str, nodes: Sequence[ViewNode]) -> str | None:
    for node in nodes:
        if node.id == node_id:
            return node.type
    return None


def get_data_product_for_group(
    group_id: str, edges: Sequence[ViewEdge], nodes: Sequence[ViewNode]
) -> str | None:
    """Data product that owns an output group."""
    for edge in edges:
        if edge.target == group_id and _node_type(edge.source, nodes) == "dataproduct":
            return edge.source
    return None


def get_data_product_for_input_group(
    input_group_id: str, edges: Sequence[ViewEdge], nodes: Sequence[ViewNode]
) -> str | None:
    """Data product that owns an input group."""
    for edge in edges:
        if edge.source == input_group_id and _node_type(edge.target, nodes) == "dataproduct":
            return edge.target
    return None


def is_node_expanded(
    node_id: str,
    node_type: str,
    edges: Sequence[ViewEdge],
    nodes: Sequence[ViewNode],
    expanded_nodes: Mapping[str, bool],
) -> bool:
    """Whether a group node's owning data product is expanded.

    Anything other than a group or input group is never expanded.
    """
    if node_type == "group":
        owner = get_data_product_for_group(node_id, edges, nodes)
    elif node_type == "inputGroup":
        owner = get_data_product_for_input_group(node_id, edges, nodes)
    else:
        return False

    if owner is None:
        return False
    return bool(expanded_nodes.get(owner, False))


def get_dependent_data_products(
    data_product_id: str, edges: Sequence[ViewEdge], nodes: Sequence[ViewNode]
) -> list[str]:
    """Data products that receive data from ``data_product_id``."""
    dependents = []
    for edge in edges:
        if _node_type(edge.source, nodes) != "group":
            continue
        if get_data_product_for_group(edge.source, edges, nodes) != data_product_id:
            continue
        if _node_type(edge.target, nodes) != "inputGroup":
            continue
        owner = get_data_product_for_input_group(edge.target, edges, nodes)
        if owner:
            dependents.append(owner)
    return dependents


def get_dependency_data_products(
    data_product_id: str, edges: Sequence[ViewEdge], nodes: Sequence[ViewNode]
) -> list[str]:
    """Data products that ``data_product_id`` receives data from."""
    dependencies = []
    for edge in edges:
        if _node_type(edge.target, nodes) != "inputGroup":
            continue
        if get_data_product_for_input_group(edge.target, edges, nodes) != data_product_id:
            continue
        if _node_type(edge.source, nodes) != "group":
            continue
        owner = get_data_product_for_group(edge.source, edges, nodes)
        if owner:
            dependencies.append(owner)
    return dependencies


def has_connecting_edges(source_id: str, target_id: str, edges: Sequence[ViewEdge]) -> bool:
    """Whether any edge runs from ``source_id`` to ``target_id``."""
    return any(edge.source == source_id and edge.target == target_id for edge in edges)


def get_input_groups_connected_to_group(
    group_id: str, edges: Sequence[ViewEdge], nodes: Sequence[ViewNode]
) -> list[str]:
    """Input groups fed by an output group."""
    return [
        edge.target
        for edge in edges
        if edge.source == group_id and _node_type(edge.target, nodes) == "inputGroup"
    ]


def get_groups_connected_to_input_group(
    input_group_id: str, edges: Sequence[ViewEdge], nodes: Sequence[ViewNode]
) -> list[str]:
    """Output groups feeding an input group."""
    return [
        edge.source
        for edge in edges
        if edge.target == input_group_id and _node_type(edge.source, nodes) == "group"
    ]
