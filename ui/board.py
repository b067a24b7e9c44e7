"""
board.py — Board (presentation adapter)
=======================================
Glues a Graph, the user's source / target picks and a Stepper together,
and turns every StepResult into colour changes the renderer can draw.

Two kinds of board, matching the two demos:

    TREE    – complete binary tree, DFS or BFS.  Search always starts at
              the root; the first click picks the target.
    RANDOM  – random weighted graph, Dijkstra.  First click picks the
              source, second click the target.

Colour state lives here, not on Node / Edge, so the graph stays a plain
read-only structure the engine can trust.
"""

import logging
from enum import Enum
from typing import Dict, Optional, Union

from graph import Edge, Graph
from algorithms import SearchMode, get_algorithm, parse_mode, result_to_dict
from algorithms.step import StepResult
from engine import Stepper, TraversalEngine
from ui.config import VisualizerConfig

logger = logging.getLogger(__name__)


class BoardError(RuntimeError):
    """User-facing problem with the board (bad selection, wrong mode, …)."""


class BoardKind(Enum):
    TREE   = "tree"
    RANDOM = "random"


class NodeState(Enum):
    INACTIVE = "inactive"
    ACTIVE   = "active"     # expanded
    SOURCE   = "source"
    TARGET   = "target"
    PATH     = "path"       # on the found path


class EdgeState(Enum):
    INACTIVE = "inactive"
    ACTIVE   = "active"     # discovered the node it leads to
    PATH     = "path"


_MODES_BY_KIND = {
    BoardKind.TREE:   (SearchMode.DFS, SearchMode.BFS),
    BoardKind.RANDOM: (SearchMode.DIJKSTRA,),
}


def edge_key(edge: Edge) -> str:
    """Stable id for an undirected edge: "low-high"."""
    low, high = sorted((edge.a, edge.b))
    return f"{low}-{high}"


class Board:
    """
    Attributes:
        kind        : BoardKind.
        mode        : SearchMode used by the next start().
        config      : VisualizerConfig this board was built with.
        graph       : The Graph on display.
        source      : Selected source id (always 0 on tree boards).
        target      : Selected target id.
        stepper     : Stepper for the current run (None until start()).
        node_states : {node_id: NodeState}
        edge_states : {edge_key: EdgeState}
        message     : Last user-facing status line.
    """

    def __init__(
        self,
        kind: Union[BoardKind, str] = BoardKind.TREE,
        mode: Optional[Union[SearchMode, str]] = None,
        config: Optional[VisualizerConfig] = None,
    ):
        self.kind:   BoardKind        = BoardKind(kind)
        self.config: VisualizerConfig = config or VisualizerConfig()
        self.mode:   SearchMode       = _MODES_BY_KIND[self.kind][0]
        self.stepper: Optional[Stepper] = None
        if mode is not None:
            self.set_mode(mode)
        self.reset()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def reset(self) -> None:
        """New graph (re-drawn for random boards), no selection, no run."""
        self.graph:   Graph             = self._build_graph()
        self.source:  Optional[int]     = 0 if self.kind is BoardKind.TREE else None
        self.target:  Optional[int]     = None
        self.stepper: Optional[Stepper] = None
        self.message: str               = self._prompt()
        self.node_states: Dict[int, NodeState] = {nid: NodeState.INACTIVE for nid in self.graph.node_ids()}
        self.edge_states: Dict[str, EdgeState] = {edge_key(e): EdgeState.INACTIVE for e in self.graph.edges()}
        if self.source is not None:
            self.node_states[self.source] = NodeState.SOURCE
        logger.info("Board reset: kind=%s mode=%s %r", self.kind.value, self.mode.value, self.graph)

    def _build_graph(self) -> Graph:
        c, b = self.config, self.config.bounds
        if self.kind is BoardKind.TREE:
            return Graph.complete_binary_tree(c.tree_height, b["x1"], b["x2"], b["y1"], b["y2"])
        return Graph.generate_random(
            node_count=c.node_count,
            edges_per_node=c.edges_per_node,
            x1=b["x1"], x2=b["x2"], y1=b["y1"], y2=b["y2"],
            seed=c.seed,
        )

    def set_mode(self, mode: Union[SearchMode, str]) -> None:
        mode = parse_mode(mode)
        if mode not in _MODES_BY_KIND[self.kind]:
            raise BoardError(f"{get_algorithm(mode).label} is not available on a {self.kind.value} board")
        if self.is_running:
            raise BoardError("Reset the board before switching algorithm")
        self.mode = mode

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------
    def select(self, node_id: int) -> Optional[str]:
        """
        Handle a click on a node.  Returns "source" / "target" for the role
        assigned, or None when the click is ignored (run in progress, both
        already picked, or clicking the source again).
        """
        self.graph.get_node(node_id)
        if self.stepper is not None:
            return None
        if self.source is None:
            self.source = node_id
            self.node_states[node_id] = NodeState.SOURCE
            self.message = self._prompt()
            return "source"
        # the tree root may also be the target; a random board needs two nodes
        if self.target is None and (node_id != self.source or self.kind is BoardKind.TREE):
            self.target = node_id
            self.node_states[node_id] = NodeState.TARGET
            self.message = self._prompt()
            return "target"
        return None

    def _prompt(self) -> str:
        if self.source is None:
            return "Please select the starting point"
        if self.target is None:
            return "Please select the target"
        return "Ready"

    # ------------------------------------------------------------------
    # Running
    # ------------------------------------------------------------------
    def start(self) -> Stepper:
        if self.stepper is not None:
            return self.stepper
        if self.source is None or self.target is None:
            raise BoardError(self._prompt())

        engine = TraversalEngine(self.graph, self.source, self.target, self.mode)
        interval = self.config.tree_interval if self.kind is BoardKind.TREE else self.config.dijkstra_interval
        self.stepper = Stepper(engine, interval=interval, on_step=self.apply)
        self.message = "Searching…"
        return self.stepper

    def advance(self) -> StepResult:
        """One step now, regardless of play state."""
        stepper = self.start()
        result = stepper.next_step()
        return result if result is not None else stepper.engine.result

    def tick(self) -> Optional[StepResult]:
        if self.stepper is None:
            return None
        return self.stepper.tick()

    def toggle_play(self) -> bool:
        stepper = self.start()
        stepper.toggle_play()
        return stepper.is_playing

    @property
    def is_running(self) -> bool:
        return self.stepper is not None and not self.stepper.is_finished

    # ------------------------------------------------------------------
    # StepResult → colours
    # ------------------------------------------------------------------
    def apply(self, result: StepResult) -> None:
        if result.kind == "expanded":
            self.node_states[result.node] = NodeState.ACTIVE
            if result.discovered_via is not None:
                self.edge_states[edge_key(result.discovered_via)] = EdgeState.ACTIVE
        elif result.kind == "found":
            for nid in result.path:
                self.node_states[nid] = NodeState.PATH
            for edge in result.edges:
                self.edge_states[edge_key(edge)] = EdgeState.PATH
            self.message = f"Found {result.node} (cost {result.cost:g})"
        else:
            self.message = "No path found"

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> dict:
        stepper = self.stepper
        return {
            "kind":        self.kind.value,
            "mode":        self.mode.value,
            "source":      self.source,
            "target":      self.target,
            "message":     self.message,
            "running":     self.is_running,
            "playing":     bool(stepper and stepper.is_playing),
            "finished":    bool(stepper and stepper.is_finished),
            "interval":    stepper.interval if stepper else None,
            "last_result": result_to_dict(stepper.current) if stepper and stepper.current else None,
            "frontier":    stepper.engine.frontier() if stepper else [],
            "graph":       self.graph.to_dict(),
            "node_states": {str(k): v.value for k, v in self.node_states.items()},
            "edge_states": {k: v.value for k, v in self.edge_states.items()},
        }
