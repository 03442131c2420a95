"""Column lineage result types."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class ColumnLineageResult:
    """Columns, synthesized edge ids and ports touched by one traversal."""

    columns: set[str] = field(default_factory=set)
    edges: set[str] = field(default_factory=set)
    ports: set[str] = field(default_factory=set)

    def is_empty(self) -> bool:
        return not (self.columns or self.edges or self.ports)

    def union(self, other: ColumnLineageResult) -> ColumnLineageResult:
        return ColumnLineageResult(
            columns=self.columns | other.columns,
            edges=self.edges | other.edges,
            ports=self.ports | other.ports,
        )


@dataclass
class CompleteColumnLineageResult(ColumnLineageResult):
    """Upstream and downstream column lineage, plus their union."""

    upstream: ColumnLineageResult = field(default_factory=ColumnLineageResult)
    downstream: ColumnLineageResult = field(default_factory=ColumnLineageResult)

    @classmethod
    def empty(cls) -> "CompleteColumnLineageResult":
        """Deselection sentinel: every set empty."""
        return cls()

    @classmethod
    def combine(
        cls, upstream: ColumnLineageResult, downstream: ColumnLineageResult
    ) -> "CompleteColumnLineageResult":
        combined = upstream.union(downstream)
        return cls(
            columns=combined.columns,
            edges=combined.edges,
            ports=combined.ports,
            upstream=upstream,
            downstream=downstream,
        )
