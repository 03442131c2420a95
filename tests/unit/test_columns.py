"""🧪 Tests for column-level lineage."""

import pytest

from dplineage.columns import (
    CompleteColumnLineageResult,
    assemble_column_lineage,
    build_column_lineage_maps,
    column_edge_id,
    find_complete_column_lineage,
    find_downstream_column_lineage,
    find_upstream_column_lineage,
    get_column_by_id,
    get_port_by_id,
)
from dplineage.graph.models import (
    Column,
    ColumnLineageData,
    ColumnPort,
    ColumnRelationship,
    DirectRelationship,
    PortRelationship,
)


def _port(port_id, *column_ids, node_id="node"):
    return ColumnPort(
        port_id=port_id,
        port_label=port_id.title(),
        node_id=node_id,
        node_label=node_id.title(),
        columns=[Column(id=cid, name=cid) for cid in column_ids],
    )


def _rel(source, target):
    return ColumnRelationship(source_column=source, target_column=target)


@pytest.fixture
def column_data(fixtures_dir):
    """Web App port and its downstream Web Data port, from JSON."""
    return ColumnLineageData.from_yaml(fixtures_dir / "column_lineage.json")


@pytest.fixture
def three_layer_data():
    """upstream u1 -> selected s1 -> downstream d1, plus an unrelated column."""
    return ColumnLineageData(
        selected_port=_port("selected", "s1", "s2"),
        upstream_ports=[_port("up", "u1")],
        downstream_ports=[_port("down", "d1", "d2")],
        column_relationships=[_rel("u1", "s1"), _rel("s1", "d1"), _rel("s2", "d2")],
    )


class TestColumnMaps:
    """Tests for column adjacency maps."""

    def test_synthesized_edge_ids_follow_position(self, three_layer_data):
        """Test that edge ids come from list position."""
        maps = build_column_lineage_maps(three_layer_data.column_relationships, three_layer_data)

        assert [e.id for e in maps.column_to_edges["s1"]] == [column_edge_id(0), column_edge_id(1)]
        assert maps.column_to_edges["d2"][0].id == "col-edge-2"

    def test_columns_map_to_ports(self, three_layer_data):
        """Test that columns resolve to their port and node."""
        maps = build_column_lineage_maps([], three_layer_data)

        assert maps.column_to_port["u1"].port_id == "up"
        assert maps.column_to_port["d2"].node_label == "Node"
        assert set(maps.port_data) == {"selected", "up", "down"}

    def test_accepts_flat_port_list(self):
        """Test building maps from a plain list of ports."""
        maps = build_column_lineage_maps([_rel("a", "b")], [_port("p", "a", "b")])

        assert maps.column_to_port["b"].port_id == "p"


class TestColumnTraversal:
    """Tests for directional column walks."""

    def test_upstream(self, three_layer_data):
        maps = build_column_lineage_maps(three_layer_data.column_relationships, three_layer_data)
        result = find_upstream_column_lineage("d1", maps)

        assert result.columns == {"d1", "s1", "u1"}
        assert result.edges == {"col-edge-0", "col-edge-1"}
        assert result.ports == {"down", "selected", "up"}

    def test_downstream(self, three_layer_data):
        maps = build_column_lineage_maps(three_layer_data.column_relationships, three_layer_data)
        result = find_downstream_column_lineage("u1", maps)

        assert result.columns == {"u1", "s1", "d1"}
        assert "s2" not in result.columns

    def test_column_outside_known_ports(self):
        """Test that columns on unindexed ports add no port."""
        maps = build_column_lineage_maps([_rel("a", "ghost")], [_port("p", "a")])
        result = find_downstream_column_lineage("a", maps)

        assert result.columns == {"a", "ghost"}
        assert result.ports == {"p"}

    def test_cycle_terminates(self):
        maps = build_column_lineage_maps([_rel("a", "b"), _rel("b", "a")], [_port("p", "a", "b")])

        assert find_downstream_column_lineage("a", maps).columns == {"a", "b"}
        assert find_upstream_column_lineage("a", maps).edges == {"col-edge-0", "col-edge-1"}


class TestCompleteColumnLineage:
    """Tests for combined column lineage."""

    def test_selected_to_downstream_scenario(self, column_data):
        """Test a column feeding one downstream column."""
        result = find_complete_column_lineage(
            "dp1-out1-col-1", column_data.column_relationships, column_data
        )

        assert result.columns == {"dp1-out1-col-1", "dp2-in1-col-1"}
        assert result.ports == {"dp1-output-1", "dp2-input-1"}
        assert result.edges == {"col-edge-0"}
        assert result.upstream.columns == {"dp1-out1-col-1"}

    def test_none_returns_empty_sentinel(self, column_data):
        result = find_complete_column_lineage(None, column_data.column_relationships, column_data)

        assert result == CompleteColumnLineageResult.empty()
        assert result.upstream.is_empty()
        assert result.downstream.is_empty()

    def test_includes_itself_without_neighbours(self, three_layer_data):
        result = find_complete_column_lineage("lonely", [], three_layer_data)

        assert result.columns == {"lonely"}
        assert result.ports == set()

    def test_union_of_both_directions(self, three_layer_data):
        result = find_complete_column_lineage(
            "s1", three_layer_data.column_relationships, three_layer_data
        )

        assert result.columns == {"u1", "s1", "d1"}
        assert result.ports == {"up", "selected", "down"}
        assert result.upstream.edges == {"col-edge-0"}
        assert result.downstream.edges == {"col-edge-1"}


class TestColumnLookups:
    """Tests for column and port lookups."""

    def test_get_column_by_id(self, three_layer_data):
        hit = get_column_by_id("d2", three_layer_data)

        assert hit is not None
        assert hit.column.name == "d2"
        assert hit.port_id == "down"
        assert hit.port_label == "Down"

    def test_get_column_missing(self, three_layer_data):
        assert get_column_by_id("nope", three_layer_data) is None

    def test_get_port_by_id(self, three_layer_data):
        assert get_port_by_id("selected", three_layer_data).port_id == "selected"
        assert get_port_by_id("up", three_layer_data).port_id == "up"
        assert get_port_by_id("down", three_layer_data).port_id == "down"
        assert get_port_by_id("nope", three_layer_data) is None


class TestAssembleColumnLineage:
    """Tests for building a column neighbourhood from a port catalog."""

    @pytest.fixture
    def catalog(self):
        return {
            "a.out": _port("a.out", "a1", node_id="a"),
            "b.in": _port("b.in", "b1", node_id="b"),
            "b.out": _port("b.out", "b2", node_id="b"),
            "c.in": _port("c.in", "c1", node_id="c"),
        }

    @pytest.fixture
    def relationships(self):
        return [
            DirectRelationship(id="a-b", source_node="a", target_node="b"),
            PortRelationship(id="p1", source_node="a", source_port="a.out", target_node="b", target_port="b.in"),
            PortRelationship(id="p2", source_node="b", source_port="b.out", target_node="c", target_port="c.in"),
            PortRelationship(id="p3", source_node="x", source_port="x.out", target_node="b", target_port="b.in"),
        ]

    def test_neighbour_ports(self, catalog, relationships):
        """Test that upstream and downstream ports come from port relationships."""
        data = assemble_column_lineage("b.in", catalog, relationships, [_rel("a1", "b1")])

        assert data.selected_port.port_id == "b.in"
        # x.out is not in the catalog
        assert [p.port_id for p in data.upstream_ports] == ["a.out"]
        assert data.downstream_ports == []

    def test_column_annotations(self, catalog, relationships):
        """Test that columns carry their neighbours."""
        column_rels = [_rel("a1", "b1"), _rel("b2", "c1")]
        data = assemble_column_lineage("b.out", catalog, relationships, column_rels)

        selected = data.selected_port.columns[0]
        assert selected.upstream_columns == []
        assert selected.downstream_columns == ["c1"]

        downstream = data.downstream_ports[0].columns[0]
        assert downstream.upstream_columns == ["b2"]
        assert downstream.downstream_columns is None

    def test_upstream_ports_only_get_downstream_columns(self, catalog, relationships):
        data = assemble_column_lineage("b.in", catalog, relationships, [_rel("a1", "b1")])

        upstream = data.upstream_ports[0].columns[0]
        assert upstream.downstream_columns == ["b1"]
        assert upstream.upstream_columns is None

    def test_catalog_not_modified(self, catalog, relationships):
        assemble_column_lineage("b.in", catalog, relationships, [_rel("a1", "b1")])

        assert catalog["b.in"].columns[0].upstream_columns is None

    def test_unknown_port(self, catalog, relationships):
        with pytest.raises(KeyError, match="not found"):
            assemble_column_lineage("nope", catalog, relationships, [])

    def test_feeds_column_traversal(self, catalog, relationships):
        """Test that assembled data works with the column engine."""
        data = assemble_column_lineage("b.in", catalog, relationships, [_rel("a1", "b1")])
        result = find_complete_column_lineage("b1", data.column_relationships, data)

        assert result.columns == {"a1", "b1"}
        assert result.ports == {"a.out", "b.in"}
