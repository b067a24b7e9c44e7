"""
canvas.py — SVG Board Renderer
================================
Pure rendering function: Board → SVG string.

Design decisions:
  - NO mutation.  The board already holds every colour decision; this
    module only maps NodeState / EdgeState to the config palette.
  - Edges are drawn first so nodes sit on top of them.
  - Each node circle carries `data-id` so the page can post clicks back.
  - The frontier panel lists what the engine will pop next (top of the
    list = next pop).
"""

from typing import List, Optional

from graph import Edge, Node
from ui.board import Board, EdgeState, NodeState, edge_key
from ui.config import VisualizerConfig


def render_canvas(board: Board, config: Optional[VisualizerConfig] = None) -> str:
    config = config or board.config
    graph = board.graph

    svg_parts = [
        f'<svg width="{config.width}" height="{config.height}" '
        f'viewBox="0 0 {config.width} {config.height}" '
        f'xmlns="http://www.w3.org/2000/svg">'
    ]

    for edge in graph.edges():
        state = board.edge_states.get(edge_key(edge), EdgeState.INACTIVE)
        svg_parts.append(_render_edge(graph.get_node(edge.a), graph.get_node(edge.b), edge, state, config))

    for node in graph.nodes.values():
        state = board.node_states.get(node.id, NodeState.INACTIVE)
        svg_parts.append(_render_node(node, state, config))

    if board.stepper is not None:
        svg_parts.append(_render_frontier_panel(board.stepper.engine.frontier(), board.mode.value, config))

    svg_parts.append("</svg>")
    return "\n".join(svg_parts)


# ---------------------------------------------------------------------------
# Node Rendering
# ---------------------------------------------------------------------------
def _render_node(node: Node, state: NodeState, config: VisualizerConfig) -> str:
    fill = config.node_colors.get(state.value, config.node_colors["inactive"])
    r = config.node_radius
    return "\n".join([
        f'<g class="node" data-id="{node.id}">',
        f'  <circle cx="{node.x}" cy="{node.y}" r="{r}" fill="{fill}" data-id="{node.id}"/>',
        f'  <text x="{node.x}" y="{node.y - r}" fill="{config.label_color}" '
        f'text-anchor="middle" font-size="12">{node.label}</text>',
        '</g>',
    ])


# ---------------------------------------------------------------------------
# Edge Rendering
# ---------------------------------------------------------------------------
def _render_edge(a: Node, b: Node, edge: Edge, state: EdgeState, config: VisualizerConfig) -> str:
    stroke = config.edge_colors.get(state.value, config.edge_colors["inactive"])
    width = config.edge_width * 2 if state is EdgeState.PATH else config.edge_width
    return (
        f'<line class="edge" data-id="{edge_key(edge)}" '
        f'x1="{a.x}" y1="{a.y}" x2="{b.x}" y2="{b.y}" '
        f'stroke="{stroke}" stroke-width="{width}"/>'
    )


# ---------------------------------------------------------------------------
# Frontier Panel
# ---------------------------------------------------------------------------
def _render_frontier_panel(frontier: List[int], mode: str, config: VisualizerConfig) -> str:
    title = {"dfs": "Stack", "bfs": "Queue"}.get(mode, "Priority Queue")
    upcoming = list(reversed(frontier))
    parts = [
        f'<g class="frontier-panel" transform="translate({config.width - 150},{config.padding})">',
        f'  <text x="0" y="0" font-size="13" font-weight="700">{title} ({len(upcoming)})</text>',
    ]
    for i, nid in enumerate(upcoming[:8]):
        parts.append(f'  <text x="8" y="{18 + i * 16}" font-size="12" font-family="monospace">{nid}</text>')
    if len(upcoming) > 8:
        parts.append(f'  <text x="8" y="{18 + 8 * 16}" font-size="11">… +{len(upcoming) - 8} more</text>')
    parts.append('</g>')
    return "\n".join(parts)
