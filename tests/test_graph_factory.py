"""
Tests for picking a layout at construction time.
"""

import logging
from pathlib import Path

import pytest

from config import GraphConfig, config_from_dict, load_config, make_graph
from edges_graph import EdgeListGraph
from graph import Graph, Representation
from vertices_graph import VertexListGraph


def test_empty_defaults_to_vertex_list():
    g = Graph.empty()
    assert isinstance(g, VertexListGraph)
    assert g.vertices() == frozenset()


@pytest.mark.parametrize(
    "rep, cls",
    [
        (Representation.EDGES, EdgeListGraph),
        ("edges", EdgeListGraph),
        (Representation.VERTICES, VertexListGraph),
        ("vertices", VertexListGraph),
    ],
)
def test_empty_accepts_enum_or_name(rep, cls):
    assert isinstance(Graph.empty(rep), cls)


def test_empty_returns_fresh_instances():
    a = Graph.empty()
    b = Graph.empty()
    a.add("X")
    assert b.vertices() == frozenset()


def test_unknown_representation_rejected():
    with pytest.raises(ValueError, match="Unknown graph representation"):
        Graph.empty("matrix")


def test_load_config_from_yaml(tmp_path: Path):
    cfg_path = tmp_path / "graph.yml"
    cfg_path.write_text(
        """
representation: edges
check_rep: true
"""
    )

    cfg = load_config(cfg_path)
    assert cfg == GraphConfig(representation=Representation.EDGES, check_rep=True)

    g = make_graph(cfg)
    assert isinstance(g, EdgeListGraph)
    assert g._check_rep_enabled is True


def test_load_config_empty_file_uses_defaults(tmp_path: Path):
    cfg_path = tmp_path / "graph.yml"
    cfg_path.write_text("")
    assert load_config(cfg_path) == GraphConfig()


def test_config_rejects_unknown_representation():
    with pytest.raises(ValueError):
        config_from_dict({"representation": "matrix"})


@pytest.mark.parametrize("body", ["- edges\n- vertices\n", "edges\n"])
def test_load_config_rejects_non_mapping(tmp_path: Path, body: str):
    cfg_path = tmp_path / "graph.yml"
    cfg_path.write_text(body)

    with pytest.raises(ValueError, match="must be a mapping"):
        load_config(cfg_path)


def test_make_graph_without_config():
    assert isinstance(make_graph(), VertexListGraph)


def test_mutations_are_logged(caplog):
    g = Graph.empty("edges")
    with caplog.at_level(logging.DEBUG, logger="edges_graph"):
        g.set("A", "B", 2)
        g.remove("A")

    messages = [r.getMessage() for r in caplog.records]
    assert "created edge 'A' -> 'B' (weight 2)" in messages
    assert "removed vertex 'A' and 1 incident edge(s)" in messages
