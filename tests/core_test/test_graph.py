# tests/core_test/test_graph.py
"""
Tests for the Graph model (pathviz_api/models/graph.py).

Covers:
    • Node add / remove, id generation without reuse
    • Edge add / remove by index, no validation at model level
    • Cascading removal (edges + selection)
    • Traversable edges per direction
    • Selection toggling
    • Revision counter and snapshot restore
    • to_dict serialization
"""
from copy import deepcopy

import pytest

from pathviz_api.models.graph import Graph
from pathviz_api.models.edge import Edge, EdgeDirection
from pathviz_api.models.node import Node
from pathviz_api.models.selection import Selection


# ═════════════════════════════════════════════════════════════════
#  FIXTURES
# ═════════════════════════════════════════════════════════════════

@pytest.fixture
def empty_graph() -> Graph:
    """An empty graph with no nodes or edges."""
    return Graph("empty")


# ═════════════════════════════════════════════════════════════════
#  NODES
# ═════════════════════════════════════════════════════════════════

class TestNodes:

    def test_add_node_returns_generated_id(self, empty_graph):
        node_id = empty_graph.add_node(12.5, 40)
        assert node_id == "node-0"
        node = empty_graph.get_node(node_id)
        assert node.position == (12.5, 40.0)

    def test_ids_are_sequential(self, empty_graph):
        ids = [empty_graph.add_node() for _ in range(3)]
        assert ids == ["node-0", "node-1", "node-2"]

    def test_ids_are_not_reused_after_removal(self, empty_graph):
        empty_graph.add_node()
        second = empty_graph.add_node()
        empty_graph.remove_node(second)
        third = empty_graph.add_node()
        assert third == "node-2"
        assert third != second

    def test_ids_are_not_reused_after_clear(self, empty_graph):
        empty_graph.add_node()
        empty_graph.clear()
        assert empty_graph.add_node() == "node-1"

    def test_custom_prefix(self):
        g = Graph(id_prefix="v")
        assert g.add_node() == "v0"

    def test_node_order_is_insertion_order(self, empty_graph):
        for _ in range(4):
            empty_graph.add_node()
        empty_graph.remove_node("node-1")
        assert empty_graph.node_ids() == ["node-0", "node-2", "node-3"]

    def test_remove_missing_node_is_noop(self, chain_graph):
        revision = chain_graph.revision
        assert chain_graph.remove_node("ghost") is False
        assert chain_graph.get_number_of_nodes() == 3
        assert chain_graph.revision == revision

    def test_get_node_returns_none_for_missing(self, empty_graph):
        assert empty_graph.get_node("nonexistent") is None

    def test_has_node(self, chain_graph):
        assert chain_graph.has_node("node-0")
        assert not chain_graph.has_node("node-9")
        assert not chain_graph.has_node(None)

    def test_node_label_strips_prefix(self):
        assert Node("node-12").label == "12"
        assert Node("A").label == "A"


# ═════════════════════════════════════════════════════════════════
#  EDGES
# ═════════════════════════════════════════════════════════════════

class TestEdges:

    def test_add_edge_appends_in_order(self, chain_graph):
        edges = chain_graph.get_all_edges()
        assert [(e.source_id, e.target_id, e.weight) for e in edges] == [
            ("node-0", "node-1", 1.0),
            ("node-1", "node-2", 2.0),
        ]

    def test_parallel_edges_are_kept(self, make_graph):
        g = make_graph(2, [(0, 1, 4), (0, 1, 1)])
        assert g.get_number_of_edges() == 2

    def test_self_loop_is_accepted(self, make_graph):
        g = make_graph(1, [(0, 0, 3)])
        assert g.get_edge(0).is_self_loop()

    def test_dangling_endpoint_is_accepted(self, empty_graph):
        empty_graph.add_node()
        empty_graph.add_edge("node-0", "node-7", 1)
        assert empty_graph.get_number_of_edges() == 1

    def test_negative_weight_is_accepted(self, make_graph):
        g = make_graph(2, [(0, 1, -2)])
        assert g.get_edge(0).is_negative()
        assert g.has_negative_weights()

    def test_remove_edge_by_index(self, chain_graph):
        removed = chain_graph.remove_edge(0)
        assert removed.get_source_target() == ("node-0", "node-1")
        assert chain_graph.get_number_of_edges() == 1
        assert chain_graph.get_edge(0).source_id == "node-1"

    @pytest.mark.parametrize("index", [-1, 2, 99])
    def test_remove_edge_out_of_range_is_safe(self, chain_graph, index):
        assert chain_graph.remove_edge(index) is None
        assert chain_graph.get_number_of_edges() == 2

    def test_get_edge_out_of_range(self, chain_graph):
        assert chain_graph.get_edge(5) is None


# ═════════════════════════════════════════════════════════════════
#  CASCADING REMOVAL
# ═════════════════════════════════════════════════════════════════

class TestCascadingRemoval:

    def test_remove_node_removes_incident_edges(self, chain_graph):
        """Removing node-1 drops both 0->1 and 1->2."""
        chain_graph.remove_node("node-1")
        assert chain_graph.get_number_of_edges() == 0

    def test_remove_node_keeps_other_edges(self, make_graph):
        g = make_graph(4, [(0, 1, 1), (2, 3, 1), (3, 0, 1)])
        g.remove_node("node-1")
        assert [(e.source_id, e.target_id) for e in g.get_all_edges()] == [
            ("node-2", "node-3"),
            ("node-3", "node-0"),
        ]

    def test_remove_node_removes_self_loop(self, make_graph):
        g = make_graph(2, [(1, 1, 2), (0, 1, 1)])
        g.remove_node("node-1")
        assert g.get_number_of_edges() == 0

    def test_remove_node_clears_start(self, chain_graph):
        chain_graph.selection.set_start("node-0")
        chain_graph.selection.set_end("node-2")
        chain_graph.remove_node("node-0")
        assert chain_graph.selection.start is None
        assert chain_graph.selection.end == "node-2"

    def test_remove_node_clears_end(self, chain_graph):
        chain_graph.selection.set_start("node-0")
        chain_graph.selection.set_end("node-2")
        chain_graph.remove_node("node-2")
        assert chain_graph.selection.start == "node-0"
        assert chain_graph.selection.end is None

    def test_no_edge_references_removed_node(self, city_graph):
        city_graph.remove_node("node-2")
        for edge in city_graph.get_all_edges():
            assert city_graph.has_node(edge.source_id)
            assert city_graph.has_node(edge.target_id)


# ═════════════════════════════════════════════════════════════════
#  DIRECTION / TRAVERSAL
# ═════════════════════════════════════════════════════════════════

class TestTraversal:

    def test_directed_only_follows_source_to_target(self, chain_graph):
        neighbors = [n for _, n in chain_graph.get_traversable_edges("node-1")]
        assert neighbors == ["node-2"]

    def test_undirected_follows_both_ways(self, chain_graph):
        chain_graph.set_directed(False)
        neighbors = [n for _, n in chain_graph.get_traversable_edges("node-1")]
        assert neighbors == ["node-0", "node-2"]

    def test_undirected_keeps_edge_identity(self, chain_graph):
        chain_graph.set_directed(False)
        edge, _ = chain_graph.get_traversable_edges("node-1")[0]
        assert edge.get_source_target() == ("node-0", "node-1")

    def test_set_directed(self, empty_graph):
        assert empty_graph.is_directed()
        empty_graph.set_directed(False)
        assert empty_graph.direction == EdgeDirection.UNDIRECTED
        assert not empty_graph.is_directed()

    def test_edge_leads_from(self):
        edge = Edge("a", "b", 1)
        assert edge.leads_from("a", EdgeDirection.DIRECTED) == "b"
        assert edge.leads_from("b", EdgeDirection.DIRECTED) is None
        assert edge.leads_from("b", EdgeDirection.UNDIRECTED) == "a"
        assert edge.leads_from("c", EdgeDirection.UNDIRECTED) is None

    def test_edge_connects_nodes(self):
        edge = Edge("a", "b", 1)
        assert edge.connects_nodes("a", "b", EdgeDirection.DIRECTED)
        assert not edge.connects_nodes("b", "a", EdgeDirection.DIRECTED)
        assert edge.connects_nodes("b", "a", EdgeDirection.UNDIRECTED)


# ═════════════════════════════════════════════════════════════════
#  SELECTION
# ═════════════════════════════════════════════════════════════════

class TestSelectionToggle:

    def test_first_click_sets_start(self):
        s = Selection()
        s.toggle("a")
        assert (s.start, s.end) == ("a", None)

    def test_second_distinct_click_sets_end(self):
        s = Selection()
        s.toggle("a")
        s.toggle("b")
        assert (s.start, s.end) == ("a", "b")

    def test_click_on_start_clears_it(self):
        s = Selection("a", "b")
        s.toggle("a")
        assert (s.start, s.end) == (None, "b")

    def test_click_on_only_start_clears_it(self):
        s = Selection()
        s.toggle("a")
        s.toggle("a")
        assert s.is_empty()

    def test_click_on_end_clears_it(self):
        s = Selection("a", "b")
        s.toggle("b")
        assert (s.start, s.end) == ("a", None)

    def test_third_node_replaces_start_keeps_end(self):
        s = Selection("a", "b")
        s.toggle("c")
        assert (s.start, s.end) == ("c", "b")

    def test_click_with_only_end_set_becomes_start(self):
        s = Selection(None, "b")
        s.toggle("c")
        assert (s.start, s.end) == ("c", "b")

    def test_discard(self):
        s = Selection("a", "a")
        assert s.discard("a") is True
        assert s.is_empty()
        assert s.discard("a") is False


# ═════════════════════════════════════════════════════════════════
#  REVISION / RESTORE / SERIALIZATION
# ═════════════════════════════════════════════════════════════════

class TestRevision:

    def test_every_mutation_bumps_revision(self, empty_graph):
        revisions = [empty_graph.revision]
        empty_graph.add_node()
        revisions.append(empty_graph.revision)
        empty_graph.add_node()
        empty_graph.add_edge("node-0", "node-1", 1)
        revisions.append(empty_graph.revision)
        empty_graph.set_directed(False)
        revisions.append(empty_graph.revision)
        empty_graph.remove_edge(0)
        revisions.append(empty_graph.revision)
        assert revisions == sorted(set(revisions))

    def test_set_same_direction_does_not_bump(self, empty_graph):
        before = empty_graph.revision
        empty_graph.set_directed(True)
        assert empty_graph.revision == before

    def test_restore_from_snapshot(self, chain_graph):
        snapshot = deepcopy(chain_graph)
        chain_graph.remove_node("node-1")
        chain_graph.restore_from(snapshot)
        assert chain_graph.node_ids() == ["node-0", "node-1", "node-2"]
        assert chain_graph.get_number_of_edges() == 2

    def test_restore_does_not_rewind_id_counter(self, empty_graph):
        snapshot = deepcopy(empty_graph)
        empty_graph.add_node()
        empty_graph.restore_from(snapshot)
        assert empty_graph.add_node() == "node-1"

    def test_to_dict(self, chain_graph):
        chain_graph.selection.set_start("node-0")
        d = chain_graph.to_dict()
        assert d['directed'] is True
        assert [n['id'] for n in d['nodes']] == ["node-0", "node-1", "node-2"]
        assert d['edges'][0] == {'source': "node-0", 'target': "node-1", 'weight': 1.0}
        assert d['selection'] == {'start': "node-0", 'end': None}
