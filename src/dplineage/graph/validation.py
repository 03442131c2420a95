"""🔎 Graph Validation - Report structural problems in a lineage graph.

Traversal trusts the data as-is. This check is opt-in and only reports:
- Port ids declared on more than one node (or twice on one node)
- Related ports that are missing, on another node, or on the same side
- Port relationships pointing at unknown ports or the wrong node/side
- Direct relationships between unknown nodes
- Duplicate relationship ids
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Literal

from .models import (
    DirectRelationship,
    FlowData,
    PortDirection,
    PortRelationship,
)

IssueKind = Literal[
    "duplicate_port",
    "unknown_related_port",
    "foreign_related_port",
    "same_side_related_port",
    "unknown_port",
    "port_node_mismatch",
    "port_direction_mismatch",
    "unknown_node",
    "duplicate_relationship",
]


@dataclass(frozen=True)
class GraphIssue:
    """A single problem found in a graph."""

    kind: IssueKind
    subject: str  # Port, node or relationship id the issue is about
    message: str


def validate_graph(flow: FlowData) -> list[GraphIssue]:
    """Check a graph against the lineage invariants.

    Args:
        flow: Graph to check

    Returns:
        Issues found, empty if the graph is clean
    """
    issues: list[GraphIssue] = []

    owners: dict[str, tuple[str, PortDirection]] = {}
    seen_ports: Counter[str] = Counter()
    for node in flow.nodes:
        for port, direction in node.iter_ports():
            seen_ports[port.id] += 1
            owners[port.id] = (node.id, direction)

    for port_id, count in seen_ports.items():
        if count > 1:
            issues.append(
                GraphIssue("duplicate_port", port_id, f"Port {port_id} is declared {count} times")
            )

    for node in flow.nodes:
        for port, direction in node.iter_ports():
            for related_id in port.related_ports:
                owner = owners.get(related_id)
                if owner is None:
                    issues.append(
                        GraphIssue(
                            "unknown_related_port",
                            port.id,
                            f"Port {port.id} relates to unknown port {related_id}",
                        )
                    )
                elif owner[0] != node.id:
                    issues.append(
                        GraphIssue(
                            "foreign_related_port",
                            port.id,
                            f"Port {port.id} relates to {related_id} on another node ({owner[0]})",
                        )
                    )
                elif owner[1] == direction:
                    issues.append(
                        GraphIssue(
                            "same_side_related_port",
                            port.id,
                            f"Port {port.id} relates to {related_id}, both are {direction.value} ports",
                        )
                    )

    node_ids = {node.id for node in flow.nodes}
    rel_ids: Counter[str] = Counter()
    for rel in flow.relationships:
        rel_ids[rel.id] += 1
        if isinstance(rel, DirectRelationship):
            for node_id in (rel.source_node, rel.target_node):
                if node_id not in node_ids:
                    issues.append(
                        GraphIssue("unknown_node", rel.id, f"Relationship {rel.id} references unknown node {node_id}")
                    )
        elif isinstance(rel, PortRelationship):
            issues.extend(_check_endpoint(rel, rel.source_port, rel.source_node, PortDirection.OUTPUT, owners))
            issues.extend(_check_endpoint(rel, rel.target_port, rel.target_node, PortDirection.INPUT, owners))

    for rel_id, count in rel_ids.items():
        if count > 1:
            issues.append(
                GraphIssue("duplicate_relationship", rel_id, f"Relationship id {rel_id} is used {count} times")
            )

    return issues


def _check_endpoint(
    rel: PortRelationship,
    port_id: str,
    node_id: str,
    expected: PortDirection,
    owners: dict[str, tuple[str, PortDirection]],
) -> list[GraphIssue]:
    owner = owners.get(port_id)
    if owner is None:
        return [GraphIssue("unknown_port", rel.id, f"Relationship {rel.id} references unknown port {port_id}")]

    issues = []
    if owner[0] != node_id:
        issues.append(
            GraphIssue(
                "port_node_mismatch",
                rel.id,
                f"Relationship {rel.id} says {port_id} is on {node_id}, it is on {owner[0]}",
            )
        )
    if owner[1] != expected:
        issues.append(
            GraphIssue(
                "port_direction_mismatch",
                rel.id,
                f"Relationship {rel.id} uses {owner[1].value} port {port_id} as its {expected.value} end",
            )
        )
    return issues
