"""Weighted graphs read from a text file, with Bellman-Ford and Prim's algorithm.

Vertices are numbered from 1. The graph file's first line lists the
vertices separated by single spaces; each following triple of integers
``u v w`` is an edge.
"""

from __future__ import annotations

import heapq
import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Union

__all__ = [
    "Edge",
    "ShortestPaths",
    "SpanningTree",
    "NegativeCycleError",
    "parse_graph",
    "read_graph",
    "bellman_ford",
    "prim",
]


@dataclass(frozen=True, slots=True)
class Edge:
    u: int
    v: int
    weight: int


@dataclass(frozen=True)
class ShortestPaths:
    """Distances and paths from one source vertex.

    Unreachable vertices have distance ``math.inf`` and a path holding only
    the vertex itself.
    """

    source: int
    distances: dict[int, float]
    paths: dict[int, list[int]]


@dataclass(frozen=True)
class SpanningTree:
    """The edges (parent, child) chosen by Prim's algorithm and their total weight."""

    edges: list[tuple[int, int]]
    weight: int


class NegativeCycleError(ValueError):
    """Raised when a graph holds a cycle of negative total weight."""


def parse_graph(text: str) -> tuple[int, list[Edge]]:
    """Return the vertex count and edge list described by ``text``.

    Reading of edges stops at the first token that is not an integer; an
    incomplete trailing triple is ignored.
    """
    first_line, _, rest = text.partition("\n")
    vertex_count = first_line.rstrip("\r").count(" ") + 1
    numbers: list[int] = []
    for token in rest.split():
        try:
            numbers.append(int(token))
        except ValueError:
            break
    triples = iter(numbers)
    edges = [Edge(u, v, w) for u, v, w in zip(triples, triples, triples)]
    return vertex_count, edges


def read_graph(path: Union[str, Path]) -> tuple[int, list[Edge]]:
    """Read a graph file; see :func:`parse_graph`."""
    return parse_graph(Path(path).read_text())


def _check_edges(vertex_count: int, edges: Sequence[Edge]) -> None:
    if vertex_count < 1:
        raise ValueError(f"a graph needs at least one vertex, got {vertex_count}")
    for edge in edges:
        for vertex in (edge.u, edge.v):
            if not 1 <= vertex <= vertex_count:
                raise ValueError(f"edge {edge} refers to a vertex outside 1..{vertex_count}")


def bellman_ford(vertex_count: int, source: int, edges: Iterable[Edge]) -> ShortestPaths:
    """Shortest paths from ``source`` along directed edges ``u -> v``.

    Raises NegativeCycleError if a negative cycle is reachable.
    """
    edge_list = list(edges)
    _check_edges(vertex_count, edge_list)
    if not 1 <= source <= vertex_count:
        raise ValueError(f"source {source} is outside 1..{vertex_count}")

    vertices = range(1, vertex_count + 1)
    distance: dict[int, float] = {vertex: math.inf for vertex in vertices}
    parent: dict[int, int] = {}
    distance[source] = 0

    def relaxes(edge: Edge) -> bool:
        return distance[edge.u] != math.inf and distance[edge.u] + edge.weight < distance[edge.v]

    for _ in range(vertex_count - 1):
        for edge in edge_list:
            if relaxes(edge):
                distance[edge.v] = distance[edge.u] + edge.weight
                parent[edge.v] = edge.u

    if any(relaxes(edge) for edge in edge_list):
        raise NegativeCycleError("the graph has a negative-weight cycle")

    paths: dict[int, list[int]] = {}
    for vertex in vertices:
        path = [vertex]
        while path[-1] in parent:
            path.append(parent[path[-1]])
        path.reverse()
        paths[vertex] = path
    return ShortestPaths(source, distance, paths)


def prim(vertex_count: int, edges: Iterable[Edge]) -> SpanningTree:
    """Minimum spanning tree of the component holding vertex 1, edges undirected."""
    edge_list = list(edges)
    _check_edges(vertex_count, edge_list)

    adjacency: dict[int, list[tuple[int, int]]] = {v: [] for v in range(1, vertex_count + 1)}
    for edge in edge_list:
        adjacency[edge.u].append((edge.v, edge.weight))
        adjacency[edge.v].append((edge.u, edge.weight))

    in_tree: set[int] = set()
    heap: list[tuple[int, int, int]] = [(0, 1, -1)]
    total = 0
    chosen: list[tuple[int, int]] = []
    while heap:
        weight, vertex, parent = heapq.heappop(heap)
        if vertex in in_tree:
            continue
        in_tree.add(vertex)
        total += weight
        if parent != -1:
            chosen.append((parent, vertex))
        for neighbour, edge_weight in adjacency[vertex]:
            if neighbour not in in_tree:
                heapq.heappush(heap, (edge_weight, neighbour, vertex))
    return SpanningTree(chosen, total)