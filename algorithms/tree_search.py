"""
tree_search.py — Depth-First / Breadth-First Tree Search
========================================================
Uninformed search over a heap-indexed complete binary tree.

The two modes share everything except which end of the frontier is
popped:

    DFS  – stack, pop from the end       (last in, first out)
    BFS  – queue, pop from the front     (first in, first out)

Because the graph is a tree, a node can only be pushed once, so no
visited check is needed before pushing.  Parents come from the heap
arithmetic  parent = (id - 1) // 2  rather than from edge direction.
"""

import logging
from collections import deque
from typing import Deque, List

from graph import Graph, tree_children, tree_parent
from algorithms.base import Searcher
from algorithms.step import Exhausted, Expanded, StepResult

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Pseudocode
# ---------------------------------------------------------------------------
DFS_PSEUDOCODE: List[str] = [
    "def DFS(tree, source, target):",            # 0
    "    stack ← [source]",                      # 1
    "    while stack is not empty:",             # 2
    "        node ← stack.pop()",                # 3
    "        mark edge(parent(node), node)",     # 4
    "        if node == target: return path",    # 5
    "        stack.push(left(node))",            # 6
    "        stack.push(right(node))",           # 7
    "    return NOT FOUND",                      # 8
]

BFS_PSEUDOCODE: List[str] = [
    "def BFS(tree, source, target):",            # 0
    "    queue ← [source]",                      # 1
    "    while queue is not empty:",             # 2
    "        node ← queue.popleft()",            # 3
    "        mark edge(parent(node), node)",     # 4
    "        if node == target: return path",    # 5
    "        queue.push(left(node))",            # 6
    "        queue.push(right(node))",           # 7
    "    return NOT FOUND",                      # 8
]


class TreeSearch(Searcher):
    """Shared stepper; subclasses only choose the pop end."""

    def __init__(self, graph: Graph, source: int, target: int):
        super().__init__(graph, source, target)
        self._frontier: Deque[int] = deque([source])

    def _pop(self) -> int:
        raise NotImplementedError

    def advance(self) -> StepResult:
        if not self._frontier:
            logger.info("Frontier empty; target %s not reached", self.target)
            return Exhausted()

        current = self._pop()
        self.visited.add(current)

        if current == self.target:
            return self._found(logger)

        via = None
        if current != self.source:
            via = self.graph.edge_between(tree_parent(current), current)

        enqueued = []
        for child in tree_children(current):
            if self.graph.has_node(child):
                self.parent[child] = current
                self._frontier.append(child)
                enqueued.append(child)

        logger.debug("Expanded %s, pushed %s", current, enqueued)
        return Expanded(node=current, discovered_via=via, newly_enqueued=tuple(enqueued))


class DepthFirstSearch(TreeSearch):
    def _pop(self) -> int:
        return self._frontier.pop()

    def frontier(self) -> List[int]:
        return list(self._frontier)


class BreadthFirstSearch(TreeSearch):
    def _pop(self) -> int:
        return self._frontier.popleft()

    def frontier(self) -> List[int]:
        return list(reversed(self._frontier))
