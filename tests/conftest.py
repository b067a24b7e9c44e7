"""Shared fixtures: small hand-built graphs and a controllable clock."""

import pytest

from graph import Graph


class FakeClock:
    """Monotonic clock the test moves by hand."""

    def __init__(self, start: float = 100.0):
        self.now = start

    def advance(self, seconds: float) -> None:
        self.now += seconds

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def tree2():
    """Complete binary tree of height 2: ids 0..6."""
    return Graph.complete_binary_tree(2)


@pytest.fixture
def detour_graph():
    """
    0 --3-- 1 --1-- 3
     \\     /
      1   1
       \\ /
        2
    Cheapest 0→3 goes 0-2-1-3 (cost 3), not 0-1-3 (cost 4).
    """
    g = Graph()
    for nid in range(4):
        g.create_node(nid)
    g.create_edge(0, 1, 3)
    g.create_edge(0, 2, 1)
    g.create_edge(2, 1, 1)
    g.create_edge(1, 3, 1)
    return g


@pytest.fixture
def split_graph():
    """Two components: 0-1-2 (a triangle) and 3-4."""
    g = Graph()
    for nid in range(5):
        g.create_node(nid)
    g.create_edge(0, 1, 2)
    g.create_edge(1, 2, 2)
    g.create_edge(0, 2, 5)
    g.create_edge(3, 4, 1)
    return g
