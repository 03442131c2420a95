"""🗺️ Column Lineage Maps - Adjacency lookups for column-level traversal.

Only the ports handed in (selected, upstream, downstream) are indexed, not
the whole graph.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Iterable
from dataclasses import dataclass, field

from dplineage.graph.models import ColumnLineageData, ColumnPort, ColumnRelationship

logger = logging.getLogger(__name__)

COLUMN_EDGE_PREFIX = "col-edge-"


@dataclass(frozen=True)
class ColumnEdge:
    """A column relationship with a synthesized id.

    The id comes from the relationship's position in the list it was built
    from. It is stable across rebuilds of the same list only.
    """

    id: str
    source_column: str
    target_column: str


@dataclass(frozen=True)
class ColumnPortInfo:
    """The port a column belongs to."""

    port_id: str
    port_label: str
    node_id: str
    node_label: str


@dataclass
class ColumnLineageMaps:
    """Lookup tables used by the column traversal functions."""

    column_to_edges: dict[str, list[ColumnEdge]] = field(default_factory=dict)
    column_to_port: dict[str, ColumnPortInfo] = field(default_factory=dict)
    port_data: dict[str, ColumnPort] = field(default_factory=dict)


def column_edge_id(index: int) -> str:
    """Synthesized id of the column relationship at ``index``."""
    return f"{COLUMN_EDGE_PREFIX}{index}"


def build_column_lineage_maps(
    column_relationships: Iterable[ColumnRelationship],
    ports: ColumnLineageData | Iterable[ColumnPort],
) -> ColumnLineageMaps:
    """Index columns and column relationships for traversal.

    Args:
        column_relationships: Column edges, in a stable order
        ports: A ColumnLineageData (selected + upstream + downstream ports)
            or a flat iterable of ports

    Returns:
        ColumnLineageMaps
    """
    port_list = ports.all_ports() if isinstance(ports, ColumnLineageData) else list(ports)

    column_to_edges: defaultdict[str, list[ColumnEdge]] = defaultdict(list)
    column_to_port: dict[str, ColumnPortInfo] = {}
    port_data: dict[str, ColumnPort] = {}

    for port in port_list:
        port_data[port.port_id] = port
        info = ColumnPortInfo(
            port_id=port.port_id,
            port_label=port.port_label,
            node_id=port.node_id,
            node_label=port.node_label,
        )
        for column in port.columns:
            column_to_port[column.id] = info

    for index, rel in enumerate(column_relationships):
        edge = ColumnEdge(
            id=column_edge_id(index),
            source_column=rel.source_column,
            target_column=rel.target_column,
        )
        column_to_edges[rel.source_column].append(edge)
        column_to_edges[rel.target_column].append(edge)

    logger.debug(
        "Built column maps: %d ports, %d columns, %d column keys",
        len(port_data),
        len(column_to_port),
        len(column_to_edges),
    )
    return ColumnLineageMaps(
        column_to_edges=dict(column_to_edges),
        column_to_port=column_to_port,
        port_data=port_data,
    )
