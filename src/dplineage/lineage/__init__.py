"""🔗 Port Lineage - Upstream and downstream lineage of data product ports.

Tracks:
- Ports reached inside a node through related-port declarations
- Ports and nodes reached across port relationships
- Direct node-to-node lineage for collapsed nodes
"""

from .aggregate import (
    complete_lineage_from_maps,
    find_complete_lineage,
    find_node_lineage,
    node_lineage_from_maps,
)
from .engine import LineageEngine
from .maps import LineageMaps, PortLocation, build_lineage_maps
from .results import CompleteLineageResult, LineageResult, NodeLineageResult
from .traversal import (
    TraversalDirection,
    find_downstream_lineage,
    find_upstream_lineage,
    traverse,
)

__all__ = [
    "LineageEngine",
    "LineageMaps",
    "PortLocation",
    "build_lineage_maps",
    "TraversalDirection",
    "traverse",
    "find_upstream_lineage",
    "find_downstream_lineage",
    "find_complete_lineage",
    "find_node_lineage",
    "complete_lineage_from_maps",
    "node_lineage_from_maps",
    "LineageResult",
    "CompleteLineageResult",
    "NodeLineageResult",
]
