"""🧪 Pytest configuration and shared fixtures."""

from pathlib import Path

import pytest

from dplineage.config import get_settings
from dplineage.graph.models import (
    DataProductNode,
    FlowData,
    Port,
    PortRelationship,
)


@pytest.fixture(scope="session")
def project_root():
    """Get project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture(scope="session")
def fixtures_dir(project_root):
    """Get test fixtures directory."""
    return project_root / "tests" / "fixtures"


def _make_node(node_id, inputs=(), outputs=()):
    """Build a node from ``(port_id, related_ports)`` pairs."""
    return DataProductNode(
        id=node_id,
        label=node_id,
        inputs=[Port(id=pid, label=pid, related_ports=list(rel)) for pid, rel in inputs],
        outputs=[Port(id=pid, label=pid, related_ports=list(rel)) for pid, rel in outputs],
    )


def _port_rel(rel_id, source_node, source_port, target_node, target_port):
    return PortRelationship(
        id=rel_id,
        source_node=source_node,
        source_port=source_port,
        target_node=target_node,
        target_port=target_port,
    )


@pytest.fixture
def chain_flow():
    """A -> B -> C chained by port relationships, no related ports."""
    return FlowData(
        nodes=[
            _make_node("A", outputs=[("A.out1", [])]),
            _make_node("B", inputs=[("B.in1", [])], outputs=[("B.out1", [])]),
            _make_node("C", inputs=[("C.in1", [])]),
        ],
        relationships=[
            _port_rel("A-B", "A", "A.out1", "B", "B.in1"),
            _port_rel("B-C", "B", "B.out1", "C", "C.in1"),
        ],
    )


@pytest.fixture
def linked_chain_flow():
    """A -> B -> C where B's input feeds B's output."""
    return FlowData(
        nodes=[
            _make_node("A", inputs=[("A.in1", ["A.out1"])], outputs=[("A.out1", ["A.in1"])]),
            _make_node("B", inputs=[("B.in1", ["B.out1"])], outputs=[("B.out1", ["B.in1"])]),
            _make_node("C", inputs=[("C.in1", [])]),
        ],
        relationships=[
            _port_rel("A-B", "A", "A.out1", "B", "B.in1"),
            _port_rel("B-C", "B", "B.out1", "C", "C.in1"),
        ],
    )


@pytest.fixture
def sample_flow(fixtures_dir):
    """Three data products loaded from YAML."""
    return FlowData.from_yaml(fixtures_dir / "flow.yaml")


# Environment setup for tests
@pytest.fixture(autouse=True)
def setup_test_env(monkeypatch):
    """Isolate settings from the developer's environment."""
    for var in ("DPLINEAGE_CACHE_MAPS", "DPLINEAGE_VALIDATE_GRAPHS", "DPLINEAGE_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def node_factory():
    """Factory for nodes built from ``(port_id, related_ports)`` pairs."""
    return _make_node


@pytest.fixture
def port_rel_factory():
    """Factory for port relationships."""
    return _port_rel
