"""🔗 Column Lineage Aggregation - Complete lineage for a selected column."""

from __future__ import annotations

from collections.abc import Iterable

from dplineage.graph.models import ColumnLineageData, ColumnPort, ColumnRelationship

from .maps import build_column_lineage_maps
from .results import CompleteColumnLineageResult
from .traversal import find_downstream_column_lineage, find_upstream_column_lineage


def find_complete_column_lineage(
    column_id: str | None,
    column_relationships: Iterable[ColumnRelationship],
    ports: ColumnLineageData | Iterable[ColumnPort],
) -> CompleteColumnLineageResult:
    """Find upstream and downstream lineage of a column.

    Args:
        column_id: Selected column, or None when nothing is selected
        column_relationships: Column edges
        ports: Selected, upstream and downstream ports

    Returns:
        Combined sets plus the upstream and downstream halves.
        All sets are empty when ``column_id`` is None.
    """
    if not column_id:
        return CompleteColumnLineageResult.empty()

    maps = build_column_lineage_maps(column_relationships, ports)
    upstream = find_upstream_column_lineage(column_id, maps)
    downstream = find_downstream_column_lineage(column_id, maps)
    return CompleteColumnLineageResult.combine(upstream, downstream)
