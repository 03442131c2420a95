"""Column and port lookups within a column lineage neighbourhood."""

from __future__ import annotations

from dataclasses import dataclass

from dplineage.graph.models import Column, ColumnLineageData, ColumnPort


@dataclass(frozen=True)
class ColumnHit:
    """A column found by id, with the port that carries it."""

    column: Column
    port_id: str
    port_label: str


def get_column_by_id(column_id: str, data: ColumnLineageData) -> ColumnHit | None:
    """Find a column in the selected, upstream or downstream ports."""
    for port in data.all_ports():
        for column in port.columns:
            if column.id == column_id:
                return ColumnHit(column=column, port_id=port.port_id, port_label=port.port_label)
    return None


def get_port_by_id(port_id: str, data: ColumnLineageData) -> ColumnPort | None:
    """Find a port, checking the selected port, then upstream, then downstream."""
    if data.selected_port.port_id == port_id:
        return data.selected_port

    for port in data.upstream_ports:
        if port.port_id == port_id:
            return port

    for port in data.downstream_ports:
        if port.port_id == port_id:
            return port

    return None
