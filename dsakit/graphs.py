"""Shortest paths: Bellman-Ford, Dijkstra and Floyd-Warshall.

Each algorithm also reports how many basic operations it performed, so
the growth of its running time can be observed on different inputs.
Unreachable vertices have a distance of ``None``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Sequence


@dataclass(frozen=True)
class Edge:
    """A directed, weighted edge."""

    src: int
    dest: int
    weight: int


@dataclass
class PathResult:
    """Distances found by an algorithm and the operations it counted.

    ``distances`` is a list for single-source algorithms and a list of rows
    for all-pairs algorithms.
    """

    distances: list
    operations: int


class NegativeCycleError(ValueError):
    """The graph contains a cycle of negative total weight."""


def _check_vertex(vertex: int, vertex_count: int, what: str) -> None:
    if not 0 <= vertex < vertex_count:
        raise ValueError(f"{what} {vertex} is not a vertex of the graph")


def _square(graph: Sequence[Sequence[int | None]]) -> list[list[int | None]]:
    rows = [list(row) for row in graph]
    if any(len(row) != len(rows) for row in rows):
        raise ValueError("the adjacency matrix must be square")
    return rows


def bellman_ford(edges: Iterable[Edge], vertex_count: int, source: int) -> PathResult:
    """Single-source shortest paths allowing negative edge weights.

    Raises NegativeCycleError when a negative cycle is reachable.
    """
    if vertex_count <= 0:
        raise ValueError("the graph needs at least one vertex")
    _check_vertex(source, vertex_count, "source")
    edges = list(edges)
    for edge in edges:
        _check_vertex(edge.src, vertex_count, "edge source")
        _check_vertex(edge.dest, vertex_count, "edge destination")

    distances: list[int | None] = [None] * vertex_count
    operations = vertex_count
    distances[source] = 0

    for _ in range(vertex_count - 1):
        for edge in edges:
            operations += 1
            start = distances[edge.src]
            if start is None:
                continue
            candidate = start + edge.weight
            current = distances[edge.dest]
            if current is None or candidate < current:
                operations += 1
                distances[edge.dest] = candidate

    for edge in edges:
        operations += 1
        start = distances[edge.src]
        if start is None:
            continue
        current = distances[edge.dest]
        if current is None or start + edge.weight < current:
            raise NegativeCycleError("graph contains negative weight cycle")

    return PathResult(distances, operations)


def dijkstra(graph: Sequence[Sequence[int]], source: int) -> PathResult:
    """Single-source shortest paths over an adjacency matrix.

    A weight of 0 means there is no edge. Weights must not be negative.
    """
    rows = _square(graph)
    count = len(rows)
    if count == 0:
        raise ValueError("the graph needs at least one vertex")
    _check_vertex(source, count, "source")
    if any(weight is None or weight < 0 for row in rows for weight in row):
        raise ValueError("dijkstra needs non-negative weights")

    distances: list[float] = [math.inf] * count
    settled = [False] * count
    operations = count
    distances[source] = 0

    for _ in range(count - 1):
        operations += 1
        nearest = -1
        best = math.inf
        for vertex, distance in enumerate(distances):
            operations += 1
            if not settled[vertex] and distance <= best:
                best = distance
                nearest = vertex
        settled[nearest] = True

        base = distances[nearest]
        for vertex, weight in enumerate(rows[nearest]):
            operations += 1
            if (
                not settled[vertex]
                and weight
                and base != math.inf
                and base + weight < distances[vertex]
            ):
                operations += 1
                distances[vertex] = base + weight

    # Reporting every distance counts as one operation per vertex.
    operations += count
    return PathResult(
        [None if distance == math.inf else int(distance) for distance in distances],
        operations,
    )


def floyd_warshall(graph: Sequence[Sequence[int | None]]) -> PathResult:
    """All-pairs shortest paths; ``None`` in the matrix means there is no edge."""
    rows = _square(graph)
    count = len(rows)
    dist: list[list[float]] = [
        [math.inf if weight is None else weight for weight in row] for row in rows
    ]
    operations = 0
    for k in range(count):
        through = dist[k]
        for row in dist:
            via = row[k]
            for j, weight in enumerate(through):
                operations += 1
                if via + weight < row[j]:
                    row[j] = via + weight
    return PathResult(
        [[None if value == math.inf else int(value) for value in row] for row in dist],
        operations,
    )