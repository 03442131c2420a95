"""🧭 Column Traversal - Walk column relationships upstream or downstream.

Flatter than the port walk: no nodes and no intra-port step. Upstream follows
edges where the column is the target, downstream edges where it is the source.
"""

from __future__ import annotations

import logging

from dplineage.graph.models import TraversalDirection

from .maps import ColumnLineageMaps
from .results import ColumnLineageResult

logger = logging.getLogger(__name__)


def traverse_columns(
    column_id: str, maps: ColumnLineageMaps, direction: TraversalDirection
) -> ColumnLineageResult:
    """Collect columns, edges and ports reachable from ``column_id``.

    The starting column is always included. Ports are only recorded for
    columns that belong to one of the indexed ports.
    """
    direction = TraversalDirection(direction)
    result = ColumnLineageResult()
    visited: set[str] = set()
    stack = [column_id]
    upstream = direction == TraversalDirection.UPSTREAM

    while stack:
        current = stack.pop()
        if current in visited:
            continue
        visited.add(current)
        result.columns.add(current)

        port_info = maps.column_to_port.get(current)
        if port_info is not None:
            result.ports.add(port_info.port_id)

        next_columns = []
        for edge in maps.column_to_edges.get(current, []):
            if upstream and edge.target_column == current:
                result.edges.add(edge.id)
                next_columns.append(edge.source_column)
            elif not upstream and edge.source_column == current:
                result.edges.add(edge.id)
                next_columns.append(edge.target_column)
        stack.extend(reversed(next_columns))

    logger.debug(
        "%s column lineage from %s: %d columns, %d edges",
        direction.value.capitalize(),
        column_id,
        len(result.columns),
        len(result.edges),
    )
    return result


def find_upstream_column_lineage(column_id: str, maps: ColumnLineageMaps) -> ColumnLineageResult:
    """Trace the columns ``column_id`` is derived from."""
    return traverse_columns(column_id, maps, TraversalDirection.UPSTREAM)


def find_downstream_column_lineage(column_id: str, maps: ColumnLineageMaps) -> ColumnLineageResult:
    """Trace the columns derived from ``column_id``."""
    return traverse_columns(column_id, maps, TraversalDirection.DOWNSTREAM)
