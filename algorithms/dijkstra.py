"""
dijkstra.py — Dijkstra's Algorithm (lazy deletion)
==================================================
Single-source shortest path over a non-negative weighted graph, one
finalised node per `advance()`.

Frontier entries are  (tentative_cost, (node_id, via_edge)).  There is no
decrease-key: a cheaper route to a node just inserts another entry, and
the older, dearer one is thrown away when it surfaces because the node is
already visited by then.

Relaxation only fires when the candidate STRICTLY improves the best known
cost.  That keeps `best_cost`, `parent` and the cheapest live queue entry
in agreement, which is what makes the reconstructed path optimal.
"""

import logging
from typing import Dict, List

from graph import Graph
from algorithms.base import Searcher
from algorithms.min_heap import MinPriorityQueue
from algorithms.step import Exhausted, Expanded, StepResult

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Pseudocode
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def Dijkstra(graph, source, target):",                  # 0
    "    best[source] ← 0;  pq ← {(0, source)}",             # 1
    "    while pq is not empty:",                            # 2
    "        (d, node) ← pq.extract_min()",                  # 3
    "        if node in visited: continue",                  # 4
    "        visited.add(node)",                             # 5
    "        if node == target: return path",                # 6
    "        for (nbr, w) in adj(node), nbr not visited:",   # 7
    "            if best[node] + w < best[nbr]:",            # 8
    "                best[nbr] ← best[node] + w",            # 9
    "                parent[nbr] ← node",                    # 10
    "                pq.insert(best[nbr], nbr)",             # 11
    "    return NOT FOUND",                                  # 12
]


class DijkstraSearch(Searcher):
    """
    Attributes:
        best_cost : {node_id: lowest tentative cost seen so far}
        queue     : MinPriorityQueue of (cost, (node_id, via_edge))
        stale_discarded : Count of outdated entries thrown away on pop.
    """

    def __init__(self, graph: Graph, source: int, target: int):
        super().__init__(graph, source, target)
        self.best_cost: Dict[int, float] = {source: 0.0}
        self.queue = MinPriorityQueue()
        self.queue.insert(0.0, (source, None))
        self.stale_discarded = 0

    def advance(self) -> StepResult:
        # pop until a live entry surfaces; stale ones don't count as a step
        while True:
            entry = self.queue.extract_min()
            if entry is None:
                logger.info("Priority queue empty; target %s unreachable from %s", self.target, self.source)
                return Exhausted()
            current, via = entry.payload
            if current not in self.visited:
                break
            self.stale_discarded += 1
            logger.debug("Discarded stale entry (%g, %s)", entry.priority, current)

        self.visited.add(current)

        if current == self.target:
            return self._found(logger)

        enqueued = []
        base = self.best_cost[current]
        for edge in self.graph.edges_from(current):
            nbr = edge.other_end(current)
            if nbr in self.visited:
                continue
            candidate = base + edge.cost
            if candidate < self.best_cost.get(nbr, float("inf")):
                self.best_cost[nbr] = candidate
                self.parent[nbr] = current
                self.queue.insert(candidate, (nbr, edge))
                enqueued.append(nbr)

        logger.debug("Expanded %s at cost %g, relaxed %s", current, base, enqueued)
        return Expanded(node=current, discovered_via=via, newly_enqueued=tuple(enqueued))

    def frontier(self) -> List[int]:
        """Distinct unvisited ids in the queue, cheapest last."""
        entries = sorted(self.queue.snapshot(), key=lambda e: e.priority)
        seen = set()
        result = []
        for entry in entries:
            nid = entry.payload[0]
            if nid not in self.visited and nid not in seen:
                seen.add(nid)
                result.append(nid)
        result.reverse()
        return result
