"""Tests for Graph, Node, Edge and the heap-index tree helpers."""

import pytest

from graph import Edge, Graph, GraphError, Node, UnknownNode, tree_children, tree_depth, tree_parent


class TestEdge:
    def test_other_end(self):
        e = Edge(1, 4, 2.5)
        assert e.other_end(1) == 4
        assert e.other_end(4) == 1
        assert e.other_end(9) is None

    def test_undirected_connects(self):
        e = Edge(1, 4)
        assert e.connects(4, 1)
        assert e.cost == 1.0

    def test_self_loop_rejected(self):
        with pytest.raises(ValueError):
            Edge(2, 2)

    def test_negative_cost_rejected(self):
        with pytest.raises(ValueError):
            Edge(0, 1, -1)


class TestNode:
    def test_identity_ignores_position(self):
        assert Node(3, x=1, y=1) == Node(3, x=50, y=50)
        assert len({Node(3), Node(3, x=9)}) == 1

    def test_default_label(self):
        assert Node(7).label == "7"

    def test_distance(self):
        assert Node(0, 0, 0).distance_to(Node(1, 3, 4)) == 5.0


class TestGraphQueries:
    def test_neighbors_returns_id_cost_pairs(self, detour_graph):
        assert detour_graph.neighbors(0) == {(1, 3), (2, 1)}
        assert detour_graph.neighbors(1) == {(0, 3), (2, 1), (3, 1)}

    def test_neighbors_unknown_node(self, detour_graph):
        with pytest.raises(UnknownNode) as info:
            detour_graph.neighbors(42)
        assert info.value.node_id == 42

    def test_unknown_node_is_graph_error_and_key_error(self):
        err = UnknownNode(5)
        assert isinstance(err, GraphError)
        assert isinstance(err, KeyError)
        assert "5" in str(err)

    def test_has_node(self, detour_graph):
        assert detour_graph.has_node(3)
        assert not detour_graph.has_node(4)

    def test_edges_from_keeps_insertion_order(self, detour_graph):
        assert [e.other_end(1) for e in detour_graph.edges_from(1)] == [0, 2, 3]

    def test_edge_counts(self, detour_graph):
        assert detour_graph.node_count() == 4
        assert detour_graph.edge_count() == 4
        assert len(detour_graph.edges()) == 4


class TestGraphBuild:
    def test_edge_to_missing_node_rejected(self):
        g = Graph()
        g.create_node(0)
        with pytest.raises(UnknownNode):
            g.create_edge(0, 1)

    def test_duplicate_pair_keeps_first_edge(self):
        g = Graph()
        g.create_node(0)
        g.create_node(1)
        first = g.create_edge(0, 1, 4)
        second = g.create_edge(1, 0, 9)
        assert second is first
        assert g.edge_count() == 1
        assert g.neighbors(0) == {(1, 4)}

    def test_to_dict(self, detour_graph):
        data = detour_graph.to_dict()
        assert len(data["nodes"]) == 4
        assert {"a": 0, "b": 2, "cost": 1} in data["edges"]


class TestTreeArithmetic:
    def test_parent(self):
        assert tree_parent(0) is None
        assert tree_parent(1) == 0
        assert tree_parent(2) == 0
        assert tree_parent(5) == 2
        assert tree_parent(6) == 2

    def test_children(self):
        assert tree_children(0) == (1, 2)
        assert tree_children(2) == (5, 6)

    def test_depth(self):
        assert [tree_depth(i) for i in range(7)] == [0, 1, 1, 2, 2, 2, 2]
        assert tree_depth(7) == 3


class TestCompleteBinaryTree:
    @pytest.mark.parametrize("height,count", [(0, 1), (1, 3), (2, 7), (5, 63)])
    def test_size(self, height, count):
        g = Graph.complete_binary_tree(height)
        assert g.node_count() == count
        assert g.edge_count() == count - 1
        assert g.is_heap_tree()

    def test_children_split_parent_slice(self):
        g = Graph.complete_binary_tree(2, x1=0, x2=800, y1=0, y2=400)
        root, left, right = g.nodes[0], g.nodes[1], g.nodes[2]
        assert (root.x, root.y) == (400, 0)
        assert (left.x, left.y) == (200, 200)
        assert (right.x, right.y) == (600, 200)
        assert g.nodes[6].y == 400

    def test_tree_edges_cost_one(self, tree2):
        assert all(e.cost == 1.0 for e in tree2.edges())

    def test_negative_height(self):
        with pytest.raises(ValueError):
            Graph.complete_binary_tree(-1)

    def test_non_tree_is_not_heap_tree(self, detour_graph):
        assert not detour_graph.is_heap_tree()

    def test_missing_parent_edge_is_not_heap_tree(self):
        g = Graph()
        for nid in range(3):
            g.create_node(nid)
        g.create_edge(0, 1)
        g.create_edge(1, 2)
        assert not g.is_heap_tree()


class TestRandomGraph:
    def test_seed_is_reproducible(self):
        a = Graph.generate_random(12, 2, seed=7)
        b = Graph.generate_random(12, 2, seed=7)
        assert a.to_dict() == b.to_dict()

    def test_shape(self):
        g = Graph.generate_random(20, 3, x1=30, x2=970, y1=30, y2=610, seed=1)
        assert g.node_count() == 20
        assert 0 < g.edge_count() <= 20 * 3
        for node in g.nodes.values():
            assert 30 <= node.x < 970
            assert 30 <= node.y < 610
        for e in g.edges():
            assert e.a != e.b

    def test_cost_is_euclidean(self):
        g = Graph.generate_random(10, 1, seed=3)
        for e in g.edges():
            assert e.cost == pytest.approx(g.nodes[e.a].distance_to(g.nodes[e.b]))

    def test_needs_two_nodes(self):
        with pytest.raises(ValueError):
            Graph.generate_random(1, 1)
