"""
Edge-list graph implementation.

Implements the Graph interface with a flat list of edge records and a
separate vertex set. Every query scans the whole edge list.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Dict, FrozenSet, Generic, List, Mapping, Tuple
import logging

from graph import Graph, L, check_label, check_weight, frozen_map, is_label

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Edge(Generic[L]):
    """Immutable edge record; a reweight swaps in a new record."""

    source: L
    target: L
    weight: int


class EdgeListGraph(Graph[L]):
    """
    Directed, weighted graph backed by a list of Edge records.

    The vertex set is a dict used as an insertion-ordered set so that
    rendering is stable across runs.
    """

    def __init__(self, check_rep: bool = False) -> None:
        super().__init__(check_rep=check_rep)
        self._vertices: Dict[L, None] = {}
        self._edges: List[Edge[L]] = []

    def _find(self, source: L, target: L) -> int:
        for i, edge in enumerate(self._edges):
            if edge.source == source and edge.target == target:
                return i
        return -1

    # --- Mutation API --------------------------------------------------------

    def add(self, vertex: L) -> bool:
        check_label(vertex)
        if vertex in self._vertices:
            return False
        self._vertices[vertex] = None
        logger.debug("added vertex %r", vertex)
        self._after_mutation()
        return True

    def set(self, source: L, target: L, weight: int) -> int:
        check_label(source)
        check_label(target)
        check_weight(weight)
        self.add(source)
        self.add(target)

        i = self._find(source, target)
        previous = self._edges[i].weight if i >= 0 else 0

        if weight == 0:
            if i >= 0:
                del self._edges[i]
                logger.debug("deleted edge %r -> %r (was %d)", source, target, previous)
        elif i >= 0:
            self._edges[i] = replace(self._edges[i], weight=weight)
            logger.debug("reweighted edge %r -> %r: %d -> %d", source, target, previous, weight)
        else:
            self._edges.append(Edge(source, target, weight))
            logger.debug("created edge %r -> %r (weight %d)", source, target, weight)

        self._after_mutation()
        return previous

    def remove(self, vertex: L) -> bool:
        if not is_label(vertex) or vertex not in self._vertices:
            return False
        # Build the surviving list first so both fields change together.
        kept = [e for e in self._edges if e.source != vertex and e.target != vertex]
        dropped = len(self._edges) - len(kept)
        del self._vertices[vertex]
        self._edges = kept
        logger.debug("removed vertex %r and %d incident edge(s)", vertex, dropped)
        self._after_mutation()
        return True

    # --- Queries -------------------------------------------------------------

    def vertices(self) -> FrozenSet[L]:
        return frozenset(self._vertices)

    def sources(self, target: L) -> Mapping[L, int]:
        return frozen_map({e.source: e.weight for e in self._edges if e.target == target})

    def targets(self, source: L) -> Mapping[L, int]:
        return frozen_map({e.target: e.weight for e in self._edges if e.source == source})

    def edges(self) -> List[Tuple[L, L, int]]:
        return [(e.source, e.target, e.weight) for e in self._edges]

    def __len__(self) -> int:
        return len(self._vertices)

    def __contains__(self, vertex: object) -> bool:
        return is_label(vertex) and vertex in self._vertices

    def _check_rep(self) -> None:
        seen = set()
        for e in self._edges:
            assert e.weight != 0, f"zero-weight edge stored: {e}"
            assert (e.source, e.target) not in seen, f"parallel edge: {e}"
            assert e.source in self._vertices, f"dangling source: {e}"
            assert e.target in self._vertices, f"dangling target: {e}"
            seen.add((e.source, e.target))
