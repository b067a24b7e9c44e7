"""
ui/
---
Presentation layer.

    from ui import Board, VisualizerConfig, render_canvas
"""

from ui.config import VisualizerConfig, ConfigError
from ui.board  import Board, BoardKind, BoardError, NodeState, EdgeState, edge_key
from ui.canvas import render_canvas

__all__ = [
    "VisualizerConfig",
    "ConfigError",
    "Board",
    "BoardKind",
    "BoardError",
    "NodeState",
    "EdgeState",
    "edge_key",
    "render_canvas",
]
