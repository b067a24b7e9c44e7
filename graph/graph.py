"""
graph.py — Graph Container & Generators
=======================================
Single source of truth for the graph.  The traversal engine reads it,
the board and renderer read it, nobody mutates it during a run.

Responsibilities:
  1. Build nodes & edges                    (add / create)
  2. Adjacency queries                      (neighbors, edges_from, …)
  3. Heap-index tree arithmetic             (tree_parent, tree_children)
  4. Factory methods                        (complete binary tree, random)
  5. Serialisation for the web layer        (to_dict)

Design decisions:
  - Adjacency is `_adj[node_id] → {neighbour_id: Edge}`.  Dict order is
    insertion order, so `edges_from` is deterministic and neighbour
    lookups are O(1).
  - One edge per unordered pair.  Adding a duplicate pair returns the
    edge already there (the random generator relies on this).
  - Generators take their own `random.Random` so seeding one board never
    disturbs another.
"""

import logging
import random
from typing import Dict, List, Optional, Set, Tuple

from graph.edge import Edge
from graph.errors import UnknownNode
from graph.node import Node

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Heap-index tree arithmetic
# ---------------------------------------------------------------------------
def tree_parent(node_id: int) -> Optional[int]:
    """Parent id in a heap-indexed tree, None for the root."""
    if node_id <= 0:
        return None
    return (node_id - 1) // 2


def tree_children(node_id: int) -> Tuple[int, int]:
    """(left, right) child ids in a heap-indexed tree."""
    return 2 * node_id + 1, 2 * node_id + 2


def tree_depth(node_id: int) -> int:
    """Level of a heap-indexed node; the root is at depth 0."""
    return (node_id + 1).bit_length() - 1


class Graph:
    """
    Attributes:
        nodes : {node_id: Node}
        _adj  : {node_id: {neighbour_id: Edge}}
    """

    def __init__(self):
        self.nodes: Dict[int, Node] = {}
        self._adj:  Dict[int, Dict[int, Edge]] = {}

    # ==================================================================
    # BUILD
    # ==================================================================
    def add_node(self, node: Node) -> Node:
        self.nodes[node.id] = node
        self._adj.setdefault(node.id, {})
        return node

    def create_node(self, node_id: int, x: float = 0.0, y: float = 0.0, label: Optional[str] = None) -> Node:
        """Convenience: create + add in one call."""
        return self.add_node(Node(node_id, x=x, y=y, label=label))

    def add_edge(self, edge: Edge) -> Edge:
        for end in (edge.a, edge.b):
            if end not in self.nodes:
                raise UnknownNode(end)
        existing = self._adj[edge.a].get(edge.b)
        if existing is not None:
            return existing
        self._adj[edge.a][edge.b] = edge
        self._adj[edge.b][edge.a] = edge
        return edge

    def create_edge(self, a: int, b: int, cost: float = 1.0) -> Edge:
        return self.add_edge(Edge(a, b, cost))

    # ==================================================================
    # QUERIES
    # ==================================================================
    def has_node(self, node_id: int) -> bool:
        return node_id in self.nodes

    def get_node(self, node_id: int) -> Node:
        try:
            return self.nodes[node_id]
        except KeyError:
            raise UnknownNode(node_id) from None

    def neighbors(self, node_id: int) -> Set[Tuple[int, float]]:
        """{(neighbour_id, edge_cost)} for every edge touching node_id."""
        return {(nbr, edge.cost) for nbr, edge in self._incident(node_id).items()}

    def edges_from(self, node_id: int) -> List[Edge]:
        """Incident edges in insertion order."""
        return list(self._incident(node_id).values())

    def edge_between(self, a: int, b: int) -> Optional[Edge]:
        return self._adj.get(a, {}).get(b)

    def degree(self, node_id: int) -> int:
        return len(self._incident(node_id))

    def node_ids(self) -> List[int]:
        return list(self.nodes.keys())

    def edges(self) -> List[Edge]:
        """Every edge exactly once."""
        seen: Set[frozenset] = set()
        result = []
        for incident in self._adj.values():
            for edge in incident.values():
                if edge.key not in seen:
                    seen.add(edge.key)
                    result.append(edge)
        return result

    def node_count(self) -> int:
        return len(self.nodes)

    def edge_count(self) -> int:
        return sum(len(incident) for incident in self._adj.values()) // 2

    def is_heap_tree(self) -> bool:
        """
        True when ids are exactly 0..n-1 and every non-root node is joined
        to its arithmetic parent, with no other edges.  This is the shape
        DFS / BFS rely on to derive parents without a map.
        """
        n = self.node_count()
        if set(self.nodes) != set(range(n)):
            return False
        if self.edge_count() != max(n - 1, 0):
            return False
        return all(self.edge_between(i, tree_parent(i)) is not None for i in range(1, n))

    def _incident(self, node_id: int) -> Dict[int, Edge]:
        try:
            return self._adj[node_id]
        except KeyError:
            raise UnknownNode(node_id) from None

    # ==================================================================
    # SERIALISATION
    # ==================================================================
    def to_dict(self) -> dict:
        return {
            "nodes": [n.to_dict() for n in self.nodes.values()],
            "edges": [e.to_dict() for e in self.edges()],
        }

    # ==================================================================
    # GENERATORS — Factory class-methods
    # ==================================================================

    # ---------- Complete Binary Tree ----------
    @classmethod
    def complete_binary_tree(
        cls,
        height: int,
        x1: float = 0.0,
        x2: float = 800.0,
        y1: float = 0.0,
        y2: float = 500.0,
    ) -> "Graph":
        """
        Complete binary tree of `height` levels below the root, so
        2^(height+1) - 1 nodes with heap-index ids.  Each node sits in the
        middle of its horizontal slice; children split the slice in two.
        """
        if height < 0:
            raise ValueError(f"Tree height must be >= 0, got {height}")

        g = cls()
        count = 2 ** (height + 1) - 1
        row_gap = (y2 - y1) / height if height else 0.0

        # explicit stack instead of recursion: (id, left x, right x, y)
        pending = [(0, x1, x2, y1)]
        while pending:
            nid, left, right, y = pending.pop()
            if nid >= count:
                continue
            mid = (left + right) / 2
            g.create_node(nid, x=mid, y=y)
            lc, rc = tree_children(nid)
            pending.append((rc, mid, right, y + row_gap))
            pending.append((lc, left, mid, y + row_gap))

        for nid in range(1, count):
            g.create_edge(tree_parent(nid), nid, cost=1.0)

        logger.debug("Built complete binary tree: height=%d nodes=%d", height, count)
        return g

    # ---------- Random Graph ----------
    @classmethod
    def generate_random(
        cls,
        node_count: int = 20,
        edges_per_node: int = 1,
        x1: float = 0.0,
        x2: float = 800.0,
        y1: float = 0.0,
        y2: float = 500.0,
        seed: Optional[int] = None,
    ) -> "Graph":
        """
        Scatter `node_count` nodes at random integer positions, then give
        every node `edges_per_node` edges to random other nodes.  Edge
        cost is the Euclidean distance between the endpoints.

        Connectivity is NOT guaranteed: Dijkstra may legitimately end in
        Exhausted on these graphs.
        """
        if node_count < 2:
            raise ValueError(f"A random graph needs at least 2 nodes, got {node_count}")
        if edges_per_node < 0:
            raise ValueError(f"edges_per_node must be >= 0, got {edges_per_node}")

        rng = random.Random(seed)
        g = cls()

        for nid in range(node_count):
            g.create_node(nid, x=rng.randrange(int(x1), int(x2)), y=rng.randrange(int(y1), int(y2)))

        for nid in range(node_count):
            for _ in range(edges_per_node):
                other = _random_other(rng, node_count, nid)
                a, b = g.nodes[nid], g.nodes[other]
                g.create_edge(nid, other, cost=a.distance_to(b))

        logger.debug(
            "Generated random graph: nodes=%d edges=%d seed=%s",
            g.node_count(), g.edge_count(), seed,
        )
        return g

    def __repr__(self) -> str:
        return f"Graph(nodes={self.node_count()}, edges={self.edge_count()})"


def _random_other(rng: random.Random, count: int, exclude: int) -> int:
    """Uniform id in [0, count) bumped past `exclude`."""
    pick = rng.randrange(count)
    if pick == exclude:
        return (pick + 1) % count
    return pick
