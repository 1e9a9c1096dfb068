"""Shortest and longest paths over weight matrices where 0 means no arc."""

from __future__ import annotations

import heapq
import math
from collections import deque
from collections.abc import Sequence

Distances = list["int | None"]
Previous = list["int | None"]


def _validate(weights: Sequence[Sequence[int]], source: int) -> int:
    size = len(weights)
    if any(len(row) != size for row in weights):
        raise ValueError("the weight matrix must be square")
    if not 0 <= source < size:
        raise ValueError(f"no vertex {source} in a graph of {size}")
    return size


def _finish(distances: list[float]) -> Distances:
    return [None if math.isinf(value) else int(value) for value in distances]


def dijkstra(
    weights: Sequence[Sequence[int]], source: int
) -> tuple[Distances, Previous, int]:
    """Distances from ``source`` (None if unreachable), predecessors and relaxation checks.

    Vertices may be re-queued when a shorter distance appears, so negative
    arcs are handled as long as there is no negative cycle.
    """
    size = _validate(weights, source)
    distances: list[float] = [math.inf] * size
    previous: Previous = [None] * size
    distances[source] = 0
    queue = [(0, source)]
    iterations = 0
    while queue:
        distance, vertex = heapq.heappop(queue)
        if distance != distances[vertex]:
            continue
        for target, weight in enumerate(weights[vertex]):
            iterations += 1
            if weight and distances[target] > distance + weight:
                distances[target] = distance + weight
                previous[target] = vertex
                heapq.heappush(queue, (distance + weight, target))
    return _finish(distances), previous, iterations


def bfs_shortest(
    weights: Sequence[Sequence[int]], source: int
) -> tuple[Distances, Previous, int]:
    """Shortest distances by breadth-first relaxation, with predecessors and checks made."""
    size = _validate(weights, source)
    distances: list[float] = [math.inf] * size
    previous: Previous = [None] * size
    distances[source] = 0
    queue = deque([source])
    iterations = 0
    while queue:
        vertex = queue.popleft()
        for target, weight in enumerate(weights[vertex]):
            iterations += 1
            if weight and distances[target] > distances[vertex] + weight:
                distances[target] = distances[vertex] + weight
                previous[target] = vertex
                queue.append(target)
    return _finish(distances), previous, iterations


def longest_paths(
    weights: Sequence[Sequence[int]], source: int
) -> tuple[Distances, Previous, int]:
    """Longest distances from ``source`` in an acyclic graph, with predecessors and checks."""
    size = _validate(weights, source)
    distances: list[float] = [-math.inf] * size
    previous: Previous = [None] * size
    distances[source] = 0
    queue = [(0, source)]
    iterations = 0
    while queue:
        distance, vertex = heapq.heappop(queue)
        if distance != distances[vertex]:
            continue
        for target, weight in enumerate(weights[vertex]):
            iterations += 1
            if weight and distances[target] < distance + weight:
                distances[target] = distance + weight
                previous[target] = vertex
                heapq.heappush(queue, (distance + weight, target))
    return _finish(distances), previous, iterations


def reconstruct_path(previous: Sequence[int | None], target: int) -> list[int]:
    """Vertices from the source to ``target``; empty when ``target`` has no predecessor."""
    if not 0 <= target < len(previous):
        raise ValueError(f"no vertex {target}")
    if previous[target] is None:
        return []
    path: list[int] = []
    seen: set[int] = set()
    vertex: int | None = target
    while vertex is not None:
        if vertex in seen:
            raise ValueError("predecessors form a cycle")
        seen.add(vertex)
        path.append(vertex)
        vertex = previous[vertex]
    path.reverse()
    return path