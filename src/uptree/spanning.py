"""Minimum spanning forests built on the disjoint-set forest."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Hashable, Iterable, List, Sequence

from .structures import DisjointSetForest


@dataclass(frozen=True)
class Edge:
    """Undirected weighted edge between two vertices."""

    source: Hashable
    target: Hashable
    weight: float
    payload: Any = None


def kruskal(vertices: Iterable[Hashable], edges: Sequence[Edge]) -> List[Edge]:
    """Return the edges of a minimum spanning forest in acceptance order.

    Ties between equal weights are broken by input order.
    """

    forest: DisjointSetForest = DisjointSetForest()
    for vertex in vertices:
        forest.make_set(vertex)

    accepted: List[Edge] = []
    limit = max(len(forest) - 1, 0)
    for edge in sorted(edges, key=lambda e: e.weight):
        if len(accepted) == limit:
            break
        root_source = forest.find(edge.source)
        root_target = forest.find(edge.target)
        if root_source == root_target:
            continue
        forest.union(root_source, root_target)
        accepted.append(edge)
    return accepted


def total_weight(edges: Iterable[Edge]) -> float:
    return sum(edge.weight for edge in edges)
