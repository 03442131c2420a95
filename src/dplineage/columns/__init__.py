"""🧬 Column Lineage - Lineage at column granularity.

Mirrors the port engine over a selected port, its upstream and downstream
ports and a flat list of column relationships.

Example:
    from dplineage.columns import find_complete_column_lineage

    data = ColumnLineageData.from_yaml("column_lineage.yaml")
    lineage = find_complete_column_lineage(
        "dp1-out1-col-1", data.column_relationships, data
    )
    lineage.columns   # {'dp1-out1-col-1', 'dp2-in1-col-1'}
"""

from .aggregate import find_complete_column_lineage
from .assemble import assemble_column_lineage
from .lookup import ColumnHit, get_column_by_id, get_port_by_id
from .maps import (
    ColumnEdge,
    ColumnLineageMaps,
    ColumnPortInfo,
    build_column_lineage_maps,
    column_edge_id,
)
from .results import ColumnLineageResult, CompleteColumnLineageResult
from .traversal import (
    find_downstream_column_lineage,
    find_upstream_column_lineage,
    traverse_columns,
)

__all__ = [
    # Maps
    "ColumnEdge",
    "ColumnLineageMaps",
    "ColumnPortInfo",
    "build_column_lineage_maps",
    "column_edge_id",
    # Traversal
    "traverse_columns",
    "find_upstream_column_lineage",
    "find_downstream_column_lineage",
    "find_complete_column_lineage",
    # Results
    "ColumnLineageResult",
    "CompleteColumnLineageResult",
    # Lookups
    "ColumnHit",
    "get_column_by_id",
    "get_port_by_id",
    "assemble_column_lineage",
]
