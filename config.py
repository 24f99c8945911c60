"""
Graph construction config.

Reads a small YAML file choosing the internal layout and whether to run
representation checks after every mutation, then builds an empty graph.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

from graph import Graph, Representation, as_representation


@dataclass(frozen=True)
class GraphConfig:
    representation: Representation = Representation.VERTICES
    check_rep: bool = False


def config_from_dict(data: Dict[str, Any]) -> GraphConfig:
    defaults = GraphConfig()
    return GraphConfig(
        representation=as_representation(data.get("representation", defaults.representation)),
        check_rep=bool(data.get("check_rep", defaults.check_rep)),
    )


def load_config(path: Path) -> GraphConfig:
    import yaml  # type: ignore

    data = yaml.safe_load(Path(path).read_text()) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Graph config {path} must be a mapping, got {type(data).__name__}.")
    return config_from_dict(data)


def make_graph(config: GraphConfig | None = None) -> Graph:
    """Build an empty graph as described by config (defaults if None)."""
    cfg = config or GraphConfig()
    return Graph.empty(cfg.representation, check_rep=cfg.check_rep)
