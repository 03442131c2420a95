"""🧩 Lineage Graph - Models, loading and validation.

Example:
    from dplineage.graph import FlowData, validate_graph

    flow = FlowData.from_yaml("flow.yaml")
    for issue in validate_graph(flow):
        print(issue.message)
"""

from .loader import load_column_lineage, load_flow_data, parse_document
from .models import (
    Column,
    ColumnLineageData,
    ColumnPort,
    ColumnRelationship,
    DataProductNode,
    DirectRelationship,
    FlowData,
    Port,
    PortDirection,
    PortRelationship,
    Relationship,
)
from .validation import GraphIssue, validate_graph

__all__ = [
    # Models
    "Column",
    "ColumnLineageData",
    "ColumnPort",
    "ColumnRelationship",
    "DataProductNode",
    "DirectRelationship",
    "FlowData",
    "Port",
    "PortDirection",
    "PortRelationship",
    "Relationship",
    # Loading
    "load_flow_data",
    "load_column_lineage",
    "parse_document",
    # Validation
    "GraphIssue",
    "validate_graph",
]
