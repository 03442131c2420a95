"""Lineage result types.

Results are plain sets of ids, recomputed on every selection and never
persisted. Iteration order carries no meaning.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class LineageResult:
    """Nodes, relationship ids and ports touched by one traversal."""

    nodes: set[str] = field(default_factory=set)
    edges: set[str] = field(default_factory=set)
    ports: set[str] = field(default_factory=set)

    @classmethod
    def empty(cls) -> "LineageResult":
        return cls()

    def is_empty(self) -> bool:
        return not (self.nodes or self.edges or self.ports)

    def union(self, other: LineageResult) -> LineageResult:
        """Combine two results into a new one."""
        return LineageResult(
            nodes=self.nodes | other.nodes,
            edges=self.edges | other.edges,
            ports=self.ports | other.ports,
        )


@dataclass
class CompleteLineageResult(LineageResult):
    """Upstream and downstream lineage, plus their union.

    ``nodes``, ``edges`` and ``ports`` hold the combined view; the two halves
    are kept so ancestors and descendants can be styled differently.
    """

    upstream: LineageResult = field(default_factory=LineageResult)
    downstream: LineageResult = field(default_factory=LineageResult)

    @classmethod
    def empty(cls) -> "CompleteLineageResult":
        """Deselection sentinel: every set empty."""
        return cls()

    @classmethod
    def combine(cls, upstream: LineageResult, downstream: LineageResult) -> "CompleteLineageResult":
        combined = upstream.union(downstream)
        return cls(
            nodes=combined.nodes,
            edges=combined.edges,
            ports=combined.ports,
            upstream=upstream,
            downstream=downstream,
        )


@dataclass
class NodeLineageResult:
    """Collapsed-node lineage: nodes and direct relationship ids only."""

    nodes: set[str] = field(default_factory=set)
    edges: set[str] = field(default_factory=set)

    @classmethod
    def empty(cls) -> "NodeLineageResult":
        return cls()
