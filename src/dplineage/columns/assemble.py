"""📐 Column Lineage Assembly - Build the column neighbourhood of a port.

Given a catalog of column ports and the port relationships of the graph:
- Upstream ports are sources of relationships targeting the selected port
- Downstream ports are targets of relationships the selected port sources
- Columns are annotated with the columns they feed or are fed by

Ports missing from the catalog are skipped.
"""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable, Mapping

from dplineage.graph.models import (
    ColumnLineageData,
    ColumnPort,
    ColumnRelationship,
    PortRelationship,
    Relationship,
)


def _annotate(
    port: ColumnPort,
    upstream_of: Mapping[str, list[str]] | None,
    downstream_of: Mapping[str, list[str]] | None,
) -> ColumnPort:
    columns = []
    for column in port.columns:
        update = {}
        if upstream_of is not None:
            update["upstream_columns"] = list(upstream_of.get(column.id, []))
        if downstream_of is not None:
            update["downstream_columns"] = list(downstream_of.get(column.id, []))
        columns.append(column.model_copy(update=update))
    return port.model_copy(update={"columns": columns})


def assemble_column_lineage(
    port_id: str,
    port_catalog: Mapping[str, ColumnPort],
    relationships: Iterable[Relationship],
    column_relationships: Iterable[ColumnRelationship],
) -> ColumnLineageData:
    """Collect the selected port, its neighbour ports and the column edges.

    Args:
        port_id: Selected port
        port_catalog: Column ports keyed by port id
        relationships: Graph relationships; only port relationships are used
        column_relationships: All known column edges

    Returns:
        ColumnLineageData ready for ``find_complete_column_lineage``

    Raises:
        KeyError: If the selected port is not in the catalog
    """
    if port_id not in port_catalog:
        raise KeyError(f"Port {port_id} not found")

    column_relationships = list(column_relationships)
    upstream_of: defaultdict[str, list[str]] = defaultdict(list)
    downstream_of: defaultdict[str, list[str]] = defaultdict(list)
    for rel in column_relationships:
        upstream_of[rel.target_column].append(rel.source_column)
        downstream_of[rel.source_column].append(rel.target_column)

    upstream_ports: list[ColumnPort] = []
    downstream_ports: list[ColumnPort] = []
    for rel in relationships:
        if not isinstance(rel, PortRelationship):
            continue
        if rel.target_port == port_id and rel.source_port in port_catalog:
            upstream_ports.append(port_catalog[rel.source_port])
        if rel.source_port == port_id and rel.target_port in port_catalog:
            downstream_ports.append(port_catalog[rel.target_port])

    return ColumnLineageData(
        selected_port=_annotate(port_catalog[port_id], upstream_of, downstream_of),
        upstream_ports=[_annotate(p, None, downstream_of) for p in upstream_ports],
        downstream_ports=[_annotate(p, upstream_of, None) for p in downstream_ports],
        column_relationships=column_relationships,
    )
