"""
Vertex-list graph implementation.

Implements the Graph interface with one record per vertex, each owning its
outgoing edges. targets() only looks at the source's own edges; sources()
still has to visit every vertex.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Generic, List, Mapping, Tuple
import logging

from graph import Graph, L, check_label, check_weight, frozen_map, is_label

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OutEdge(Generic[L]):
    target: L
    weight: int


@dataclass
class Vertex(Generic[L]):
    """A labelled vertex and the outgoing edges it owns."""

    label: L
    edges: List[OutEdge[L]] = field(default_factory=list)

    def find(self, target: L) -> int:
        for i, edge in enumerate(self.edges):
            if edge.target == target:
                return i
        return -1


class VertexListGraph(Graph[L]):
    """
    Directed, weighted graph backed by label -> Vertex records.
    """

    def __init__(self, check_rep: bool = False) -> None:
        super().__init__(check_rep=check_rep)
        self._vertices: Dict[L, Vertex[L]] = {}

    # --- Mutation API --------------------------------------------------------

    def add(self, vertex: L) -> bool:
        check_label(vertex)
        if vertex in self._vertices:
            return False
        self._vertices[vertex] = Vertex(vertex)
        logger.debug("added vertex %r", vertex)
        self._after_mutation()
        return True

    def set(self, source: L, target: L, weight: int) -> int:
        check_label(source)
        check_label(target)
        check_weight(weight)
        self.add(source)
        self.add(target)

        owner = self._vertices[source]
        i = owner.find(target)
        previous = owner.edges[i].weight if i >= 0 else 0

        if weight == 0:
            if i >= 0:
                del owner.edges[i]
                logger.debug("deleted edge %r -> %r (was %d)", source, target, previous)
        elif i >= 0:
            owner.edges[i] = OutEdge(target, weight)
            logger.debug("reweighted edge %r -> %r: %d -> %d", source, target, previous, weight)
        else:
            owner.edges.append(OutEdge(target, weight))
            logger.debug("created edge %r -> %r (weight %d)", source, target, weight)

        self._after_mutation()
        return previous

    def remove(self, vertex: L) -> bool:
        if not is_label(vertex) or vertex not in self._vertices:
            return False
        # Compute every stripped edge list before touching any record.
        survivors = {
            label: [e for e in v.edges if e.target != vertex]
            for label, v in self._vertices.items()
            if label != vertex
        }
        dropped = len(self._vertices[vertex].edges) + sum(
            len(self._vertices[label].edges) - len(kept) for label, kept in survivors.items()
        )
        del self._vertices[vertex]
        for label, kept in survivors.items():
            self._vertices[label].edges = kept
        logger.debug("removed vertex %r and %d incident edge(s)", vertex, dropped)
        self._after_mutation()
        return True

    # --- Queries -------------------------------------------------------------

    def vertices(self) -> FrozenSet[L]:
        return frozenset(self._vertices)

    def sources(self, target: L) -> Mapping[L, int]:
        result: Dict[L, int] = {}
        for label, v in self._vertices.items():
            for e in v.edges:
                if e.target == target:
                    result[label] = e.weight
        return frozen_map(result)

    def targets(self, source: L) -> Mapping[L, int]:
        owner = self._vertices.get(source) if is_label(source) else None
        if owner is None:
            return frozen_map({})
        return frozen_map({e.target: e.weight for e in owner.edges})

    def edges(self) -> List[Tuple[L, L, int]]:
        return [(label, e.target, e.weight) for label, v in self._vertices.items() for e in v.edges]

    def __len__(self) -> int:
        return len(self._vertices)

    def __contains__(self, vertex: object) -> bool:
        return is_label(vertex) and vertex in self._vertices

    def _check_rep(self) -> None:
        for label, v in self._vertices.items():
            assert v.label == label, f"record {v.label!r} filed under {label!r}"
            seen = set()
            for e in v.edges:
                assert e.weight != 0, f"zero-weight edge stored: {label!r} -> {e}"
                assert e.target not in seen, f"parallel edge: {label!r} -> {e.target!r}"
                assert e.target in self._vertices, f"dangling target: {label!r} -> {e.target!r}"
                seen.add(e.target)
