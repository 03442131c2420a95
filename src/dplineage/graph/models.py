"""🧩 Graph Models - Pydantic models for data-product lineage graphs.

The loader hands us:
- Data product nodes with ordered input and output ports
- Relationships, either node-to-node (``direct``) or port-to-port (``port``)
- Column ports and column-to-column relationships for column lineage

Keys arrive camelCased from the data loader (``sourceNode``, ``relatedPorts``)
and are accepted as snake_case too.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class PortDirection(str, Enum):
    """Which list of its node a port sits in."""

    INPUT = "input"
    OUTPUT = "output"


class TraversalDirection(str, Enum):
    """Which way a lineage walk follows edges."""

    UPSTREAM = "upstream"  # toward data sources
    DOWNSTREAM = "downstream"  # toward consumers


class GraphModel(BaseModel):
    """Base for all graph models: camelCase aliases, snake_case names."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class Port(GraphModel):
    """An input or output port on a data product."""

    id: str = Field(description="Port id, unique across the graph")
    label: str = Field(default="", description="Display label")
    related_ports: list[str] = Field(
        default_factory=list,
        description="Ports on the same node this port transforms into/from",
    )


class DataProductNode(GraphModel):
    """A data product with its input and output ports."""

    id: str = Field(description="Node id")
    label: str = Field(default="", description="Display label")
    inputs: list[Port] = Field(default_factory=list)
    outputs: list[Port] = Field(default_factory=list)

    def iter_ports(self):
        """Yield ``(port, direction)`` for inputs, then outputs."""
        for port in self.inputs:
            yield port, PortDirection.INPUT
        for port in self.outputs:
            yield port, PortDirection.OUTPUT

    def get_port(self, port_id: str) -> Port | None:
        """Find a port by id, inputs first."""
        for port, _ in self.iter_ports():
            if port.id == port_id:
                return port
        return None


class DirectRelationship(GraphModel):
    """Node-to-node edge, used when port detail is collapsed."""

    type: Literal["direct"] = "direct"
    id: str
    source_node: str
    target_node: str


class PortRelationship(GraphModel):
    """Port-to-port edge between two nodes."""

    type: Literal["port"] = "port"
    id: str
    source_node: str
    source_port: str
    target_node: str
    target_port: str


Relationship = Annotated[
    Union[DirectRelationship, PortRelationship],
    Field(discriminator="type"),
]


class Column(GraphModel):
    """A column flowing through a port."""

    id: str
    name: str
    data_type: str = ""
    nullable: bool = True
    is_primary_key: bool = False
    description: str = ""

    # Filled in by the column lineage assembler
    upstream_columns: list[str] | None = None
    downstream_columns: list[str] | None = None


class ColumnPort(GraphModel):
    """A port together with the columns it carries."""

    port_id: str
    port_label: str = ""
    node_id: str = ""
    node_label: str = ""
    columns: list[Column] = Field(default_factory=list)


class ColumnRelationship(GraphModel):
    """Column-to-column edge. Carries no id of its own."""

    source_column: str
    target_column: str


class FlowData(GraphModel):
    """A full port-level lineage graph.

    Example YAML:
        nodes:
          - id: dataproduct-1
            label: WMA Account
            inputs:
              - {id: dp1-input-1, label: Raw Data, relatedPorts: [dp1-output-1]}
            outputs:
              - {id: dp1-output-1, label: Web App, relatedPorts: [dp1-input-1]}
        relationships:
          - {id: rel-1, type: direct, sourceNode: dataproduct-1, targetNode: dataproduct-2}
    """

    nodes: list[DataProductNode] = Field(default_factory=list)
    relationships: list[Relationship] = Field(default_factory=list)

    @classmethod
    def from_yaml(cls, path: Path | str) -> "FlowData":
        """Load a graph from a YAML (or JSON) file."""
        from .loader import load_flow_data

        return load_flow_data(path)

    @classmethod
    def from_dict(cls, data: dict) -> "FlowData":
        """Create from a dictionary."""
        return cls.model_validate(data)

    def get_node(self, node_id: str) -> DataProductNode | None:
        """Get a node by id."""
        for node in self.nodes:
            if node.id == node_id:
                return node
        return None


class ColumnLineageData(GraphModel):
    """Column lineage input: a selected port, its neighbours and column edges."""

    selected_port: ColumnPort
    upstream_ports: list[ColumnPort] = Field(default_factory=list)
    downstream_ports: list[ColumnPort] = Field(default_factory=list)
    column_relationships: list[ColumnRelationship] = Field(default_factory=list)

    @classmethod
    def from_yaml(cls, path: Path | str) -> "ColumnLineageData":
        """Load column lineage data from a YAML (or JSON) file."""
        from .loader import load_column_lineage

        return load_column_lineage(path)

    @classmethod
    def from_dict(cls, data: dict) -> "ColumnLineageData":
        """Create from a dictionary."""
        return cls.model_validate(data)

    def all_ports(self) -> list[ColumnPort]:
        """Selected port first, then upstream, then downstream."""
        return [self.selected_port, *self.upstream_ports, *self.downstream_ports]
