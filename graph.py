"""
Mutable, directed, weighted graph abstraction.

Vertices are hashable, immutable labels.
Edges are directed: source -> target with a non-zero int weight.
Setting an edge's weight to 0 deletes it.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from types import MappingProxyType
from typing import Dict, FrozenSet, Generic, Hashable, List, Mapping, Tuple, TypeVar, Union

L = TypeVar("L", bound=Hashable)


class Representation(Enum):
    """
    Internal layout used by a concrete graph.

    EDGES: flat list of edge records plus a separate vertex set.
    VERTICES: vertex records that each own their outgoing edges.
    """

    EDGES = "edges"
    VERTICES = "vertices"


def as_representation(value: Union[Representation, str]) -> Representation:
    """Coerce an enum member or its string value to a Representation."""
    if isinstance(value, Representation):
        return value
    try:
        return Representation(value)
    except ValueError:
        known = ", ".join(r.value for r in Representation)
        raise ValueError(f"Unknown graph representation '{value}' (expected one of: {known}).") from None


def is_label(label: object) -> bool:
    """True if label could name a vertex: not None and hashable."""
    if label is None:
        return False
    try:
        hash(label)
    except TypeError:
        return False
    return True


def check_label(label: object) -> None:
    if label is None:
        raise ValueError("Vertex label must not be None.")
    if not is_label(label):
        raise TypeError(f"Vertex label must be hashable, got {type(label).__name__}.")


def check_weight(weight: object) -> None:
    # bool is an int subclass but never a meaningful weight
    if isinstance(weight, bool) or not isinstance(weight, int):
        raise TypeError(f"Edge weight must be an int, got {type(weight).__name__}.")


def frozen_map(items: Dict[L, int]) -> Mapping[L, int]:
    """Wrap a freshly built dict so callers can't write back through it."""
    return MappingProxyType(items)


class Graph(ABC, Generic[L]):
    """
    Directed, weighted graph over labels of type L.

    At most one edge exists per ordered (source, target) pair, every edge
    endpoint is a vertex, and no stored edge has weight 0. Lookups of absent
    vertices, or of values that can never be labels, never raise; they return
    False, 0 or an empty mapping.
    """

    def __init__(self, check_rep: bool = False) -> None:
        self._check_rep_enabled = check_rep

    @staticmethod
    def empty(
        representation: Union[Representation, str] = Representation.VERTICES,
        check_rep: bool = False,
    ) -> "Graph":
        """Return a new empty graph backed by the requested layout."""
        rep = as_representation(representation)
        if rep is Representation.EDGES:
            from edges_graph import EdgeListGraph

            return EdgeListGraph(check_rep=check_rep)
        from vertices_graph import VertexListGraph

        return VertexListGraph(check_rep=check_rep)

    # --- Mutation API --------------------------------------------------------

    @abstractmethod
    def add(self, vertex: L) -> bool:
        """
        Add vertex if absent.

        Returns: True if the vertex was new, False if it already existed.
        """
        raise NotImplementedError

    @abstractmethod
    def set(self, source: L, target: L, weight: int) -> int:
        """
        Add, reweight or delete the edge source -> target.

        Both endpoints are added first if missing. A weight of 0 deletes the
        edge; any other weight creates it or replaces the existing weight.

        Returns: the edge's previous weight, or 0 if it did not exist.
        """
        raise NotImplementedError

    @abstractmethod
    def remove(self, vertex: L) -> bool:
        """
        Remove vertex along with every edge into or out of it.

        Returns: True if the vertex existed.
        """
        raise NotImplementedError

    # --- Queries -------------------------------------------------------------

    @abstractmethod
    def vertices(self) -> FrozenSet[L]:
        """Snapshot of the current vertex set."""
        raise NotImplementedError

    @abstractmethod
    def sources(self, target: L) -> Mapping[L, int]:
        """
        Incoming edges of target.

        Returns: read-only dict[source, weight].
        """
        raise NotImplementedError

    @abstractmethod
    def targets(self, source: L) -> Mapping[L, int]:
        """
        Outgoing edges of source.

        Returns: read-only dict[target, weight].
        """
        raise NotImplementedError

    @abstractmethod
    def edges(self) -> List[Tuple[L, L, int]]:
        """Snapshot of every edge as (source, target, weight)."""
        raise NotImplementedError

    @abstractmethod
    def __len__(self) -> int:
        """Number of vertices."""
        raise NotImplementedError

    @abstractmethod
    def __contains__(self, vertex: object) -> bool:
        """Vertex membership; False for labels that can never be vertices."""
        raise NotImplementedError

    @abstractmethod
    def _check_rep(self) -> None:
        raise NotImplementedError

    # --- Shared helpers ------------------------------------------------------

    def _after_mutation(self) -> None:
        if self._check_rep_enabled:
            self._check_rep()

    def __str__(self) -> str:
        labels = ", ".join(sorted(str(v) for v in self.vertices()))
        lines = [f"Vertices: {{{labels}}}", "Edges:"]
        for source, target, weight in self.edges():
            lines.append(f"  {source} -> {target} (weight: {weight})")
        return "\n".join(lines)
