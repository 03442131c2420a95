"""🔗 dplineage - Data product lineage traversal.

Quick Start:
    from dplineage import FlowData, find_complete_lineage

    flow = FlowData.from_yaml("flow.yaml")
    lineage = find_complete_lineage("dp2-input-1", flow.relationships, flow.nodes)

    lineage.nodes               # every touched data product
    lineage.upstream.ports      # ports feeding the selection
    lineage.downstream.edges    # relationships leaving it

Column lineage:
    from dplineage import find_complete_column_lineage

    lineage = find_complete_column_lineage(column_id, data.column_relationships, data)
"""

from dplineage.columns import (
    CompleteColumnLineageResult,
    find_complete_column_lineage,
)
from dplineage.config import LineageSettings, get_settings
from dplineage.exceptions import GraphLoadError, LineageError
from dplineage.graph import (
    ColumnLineageData,
    DataProductNode,
    FlowData,
    Port,
    validate_graph,
)
from dplineage.lineage import (
    CompleteLineageResult,
    LineageEngine,
    LineageResult,
    NodeLineageResult,
    build_lineage_maps,
    find_complete_lineage,
    find_downstream_lineage,
    find_node_lineage,
    find_upstream_lineage,
)
from dplineage.logging_config import configure_logging

__version__ = "0.1.0"

__all__ = [
    "ColumnLineageData",
    "CompleteColumnLineageResult",
    "CompleteLineageResult",
    "DataProductNode",
    "FlowData",
    "GraphLoadError",
    "LineageEngine",
    "LineageError",
    "LineageResult",
    "LineageSettings",
    "NodeLineageResult",
    "Port",
    "build_lineage_maps",
    "configure_logging",
    "find_complete_column_lineage",
    "find_complete_lineage",
    "find_downstream_lineage",
    "find_node_lineage",
    "find_upstream_lineage",
    "get_settings",
    "validate_graph",
    "__version__",
]
