"""
config.py — Visualizer Configuration
====================================
One explicit value object handed to the board, the renderer and the web
app.  Nothing reads module-level settings; to change a setting, build a
new config with `updated()` and a new board with it.
"""

import dataclasses
import os
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional


class ConfigError(ValueError):
    """A config field is unknown or out of range."""


# dotted names used by the settings form → field names
_ALIASES = {
    "node.radius":    "node_radius",
    "node.count":     "node_count",
    "edge.width":     "edge_width",
    "edge.per_node":  "edges_per_node",
    "tree.height":    "tree_height",
}

# limits are set where the config is built, never through updated()
_FIXED_FIELDS = frozenset({
    "min_edges_per_node",
    "max_edges_per_node",
    "max_tree_height",
    "max_node_count",
})

_ENV_FIELDS = {
    "VISUALIZER_TREE_HEIGHT":    ("tree_height", int),
    "VISUALIZER_NODE_COUNT":     ("node_count", int),
    "VISUALIZER_EDGES_PER_NODE": ("edges_per_node", int),
    "VISUALIZER_SEED":           ("seed", int),
}


def _default_node_colors() -> Dict[str, str]:
    return {
        "inactive": "black",
        "active":   "blue",
        "source":   "green",
        "target":   "red",
        "path":     "green",
    }


def _default_edge_colors() -> Dict[str, str]:
    return {
        "inactive": "black",
        "active":   "blue",
        "path":     "green",
    }


@dataclass(frozen=True)
class VisualizerConfig:
    # canvas
    width:   int = 1000
    height:  int = 640
    padding: int = 30           # must clear node_radius + the id label

    # nodes / edges
    node_radius: int = 10
    edge_width:  int = 2
    label_color: str = "red"
    node_colors: Dict[str, str] = field(default_factory=_default_node_colors)
    edge_colors: Dict[str, str] = field(default_factory=_default_edge_colors)

    # graph generation
    tree_height:        int = 5
    max_tree_height:    int = 10     # 2047 nodes
    node_count:         int = 20
    max_node_count:     int = 200
    edges_per_node:     int = 1
    min_edges_per_node: int = 1
    max_edges_per_node: int = 5
    seed: Optional[int] = None

    # cadence (seconds per step)
    tree_interval:     float = 0.5
    dijkstra_interval: float = 1.0

    def __post_init__(self):
        if not 0 <= self.tree_height <= self.max_tree_height:
            raise ConfigError(f"tree_height must be in [0, {self.max_tree_height}], got {self.tree_height}")
        if not 2 <= self.node_count <= self.max_node_count:
            raise ConfigError(f"node_count must be in [2, {self.max_node_count}], got {self.node_count}")
        if not self.min_edges_per_node <= self.edges_per_node <= self.max_edges_per_node:
            raise ConfigError(
                f"edges_per_node must be in [{self.min_edges_per_node}, "
                f"{self.max_edges_per_node}], got {self.edges_per_node}"
            )
        if self.padding * 2 >= min(self.width, self.height):
            raise ConfigError("padding leaves no room to draw")

    # ------------------------------------------------------------------
    # Board bounds
    # ------------------------------------------------------------------
    @property
    def bounds(self) -> Dict[str, float]:
        return {
            "x1": self.padding,
            "y1": self.padding,
            "x2": self.width - self.padding,
            "y2": self.height - self.padding,
        }

    # ------------------------------------------------------------------
    # Copies
    # ------------------------------------------------------------------
    def updated(self, path: str, value: Any) -> "VisualizerConfig":
        """Copy with one field replaced, e.g. updated("edge.per_node", 3)."""
        name = _ALIASES.get(path, path)
        if name not in {f.name for f in dataclasses.fields(self)}:
            raise ConfigError(f"Unknown config field: {path!r}")
        if name in _FIXED_FIELDS:
            raise ConfigError(f"{path} cannot be changed at runtime")
        current = getattr(self, name)
        if name == "seed" and value is not None:
            current = 0
        if isinstance(current, (int, float)) and not isinstance(current, bool):
            try:
                value = type(current)(value)
            except (TypeError, ValueError):
                raise ConfigError(f"{path} expects a number, got {value!r}") from None
        return dataclasses.replace(self, **{name: value})

    def updated_many(self, changes: Mapping[str, Any]) -> "VisualizerConfig":
        if not isinstance(changes, Mapping):
            raise ConfigError(f"changes must be an object of field: value pairs, got {type(changes).__name__}")
        config = self
        for path, value in changes.items():
            config = config.updated(path, value)
        return config

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "VisualizerConfig":
        """Defaults overridden by VISUALIZER_* environment variables."""
        environ = os.environ if environ is None else environ
        overrides = {}
        for var, (name, cast) in _ENV_FIELDS.items():
            raw = environ.get(var)
            if raw is None or raw == "":
                continue
            try:
                overrides[name] = cast(raw)
            except ValueError:
                raise ConfigError(f"{var} must be an integer, got {raw!r}") from None
        return cls(**overrides)

    def to_dict(self) -> dict:
        return dataclasses.asdict(self)
