"""Exceptions raised at the data-loading boundary.

The traversal engine itself never raises: unknown ids and cycles simply
end a branch of the walk.
"""


class LineageError(Exception):
    """Base exception for dplineage."""


class GraphLoadError(LineageError, ValueError):
    """A graph payload could not be parsed into lineage models."""

    def __init__(self, source: str, message: str):
        self.source = source
        super().__init__(f"Could not load lineage graph from {source}: {message}")
