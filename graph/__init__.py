"""
graph/
-----
Core data layer.  Public API:

    from graph import Graph, Node, Edge
    from graph import GraphError, UnknownNode
    from graph import tree_parent, tree_children, tree_depth
"""

from graph.node   import Node
from graph.edge   import Edge
from graph.errors import GraphError, UnknownNode
from graph.graph  import Graph, tree_parent, tree_children, tree_depth

__all__ = [
    "Node",
    "Edge",
    "Graph",
    "GraphError",  "UnknownNode",
    "tree_parent", "tree_children", "tree_depth",
]
