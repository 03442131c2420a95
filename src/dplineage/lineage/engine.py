"""🚂 Lineage Engine - Selection-driven lineage with cached adjacency maps.

The free functions rebuild maps on every call. The engine keeps the maps
for its current graph and rebuilds them only when the graph changes.

Example:
    engine = LineageEngine(FlowData.from_yaml("flow.yaml"))

    lineage = engine.complete("dp2-input-1")
    lineage.upstream.nodes      # ancestors
    lineage.downstream.nodes    # descendants

    engine.node("dataproduct-1")  # collapsed node
"""

from __future__ import annotations

import logging

from dplineage.columns.aggregate import find_complete_column_lineage
from dplineage.columns.results import CompleteColumnLineageResult
from dplineage.config import LineageSettings, get_settings
from dplineage.graph.models import ColumnLineageData, FlowData
from dplineage.graph.validation import validate_graph

from .aggregate import complete_lineage_from_maps, node_lineage_from_maps
from .maps import LineageMaps, build_lineage_maps
from .results import CompleteLineageResult, LineageResult, NodeLineageResult
from .traversal import find_downstream_lineage, find_upstream_lineage

logger = logging.getLogger(__name__)


class LineageEngine:
    """Answers lineage queries against one graph at a time.

    Calls are stateless apart from the map cache. The selected id lives
    with the caller.
    """

    def __init__(self, flow: FlowData | None = None, settings: LineageSettings | None = None):
        self.settings = settings or get_settings()
        self.flow = flow or FlowData()
        self._maps: LineageMaps | None = None
        self._cache_key: tuple[int, int] | None = None

    def set_graph(self, flow: FlowData) -> None:
        """Swap in a new graph and drop cached maps."""
        self.flow = flow
        self.invalidate()

    def invalidate(self) -> None:
        """Forget cached maps; the next query rebuilds them."""
        self._maps = None
        self._cache_key = None

    @property
    def maps(self) -> LineageMaps:
        """Adjacency maps for the current graph."""
        key = (id(self.flow.relationships), id(self.flow.nodes))
        if self.settings.cache_maps and self._maps is not None and self._cache_key == key:
            return self._maps

        if self.settings.validate_graphs:
            for issue in validate_graph(self.flow):
                logger.warning("Graph issue (%s): %s", issue.kind, issue.message)

        maps = build_lineage_maps(self.flow.relationships, self.flow.nodes)
        if self.settings.cache_maps:
            self._maps = maps
            self._cache_key = key
        return maps

    def complete(self, port_id: str | None) -> CompleteLineageResult:
        """Upstream, downstream and combined lineage of a port."""
        if not port_id:
            return CompleteLineageResult.empty()
        return complete_lineage_from_maps(port_id, self.maps)

    def upstream(self, port_id: str) -> LineageResult:
        return find_upstream_lineage(port_id, self.maps)

    def downstream(self, port_id: str) -> LineageResult:
        return find_downstream_lineage(port_id, self.maps)

    def node(self, node_id: str | None) -> NodeLineageResult:
        """Lineage of a collapsed node over direct relationships."""
        if not node_id:
            return NodeLineageResult.empty()
        return node_lineage_from_maps(node_id, self.maps)

    @staticmethod
    def column(column_id: str | None, data: ColumnLineageData) -> CompleteColumnLineageResult:
        """Column lineage within one selected-port neighbourhood.

        Column graphs are small and come per selected port, so they are not
        cached.
        """
        return find_complete_column_lineage(
            column_id,
            data.column_relationships,
            data,
        )
