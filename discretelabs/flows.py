"""Maximum flow and a greedy minimum-cost flow on capacity matrices."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence
from itertools import pairwise
from random import Random

from discretelabs.paths import dijkstra, reconstruct_path

Matrix = list[list[int]]


def _square(matrix: Sequence[Sequence[int]], name: str) -> int:
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError(f"the {name} matrix must be square")
    return size


def capacity_matrix(
    adjacency: Sequence[Sequence[int]],
    weights: Sequence[Sequence[int]],
    rng: Random | None = None,
) -> Matrix:
    """Give each arc a random capacity from 1 up to the magnitude of its weight."""
    size = _square(adjacency, "adjacency")
    if _square(weights, "weight") != size:
        raise ValueError("adjacency and weight matrices differ in size")
    rng = rng or Random()
    result = [[0] * size for _ in range(size)]
    for i, row in enumerate(adjacency):
        for j, edge in enumerate(row):
            if edge != 1:
                continue
            bound = abs(weights[i][j])
            if bound == 0:
                raise ValueError(f"arc {i}->{j} has zero weight")
            result[i][j] = rng.randint(1, bound)
    return result


def _augmenting_path(residual: Matrix, source: int, sink: int) -> list[int] | None:
    parent: dict[int, int | None] = {source: None}
    queue = deque([source])
    while queue:
        vertex = queue.popleft()
        for target, capacity in enumerate(residual[vertex]):
            if capacity > 0 and target not in parent:
                parent[target] = vertex
                queue.append(target)
    if sink not in parent:
        return None
    path = [sink]
    while (previous := parent[path[-1]]) is not None:
        path.append(previous)
    path.reverse()
    return path


def ford_fulkerson(
    capacity: Sequence[Sequence[int]], source: int = 0, sink: int | None = None
) -> tuple[int, Matrix]:
    """Maximum flow from ``source`` to ``sink`` (the last vertex by default) and the residual matrix."""
    size = _square(capacity, "capacity")
    if sink is None:
        sink = size - 1
    for vertex in (source, sink):
        if not 0 <= vertex < size:
            raise ValueError(f"no vertex {vertex} in a graph of {size}")
    if source == sink:
        raise ValueError("source and sink are the same vertex")

    residual = [list(row) for row in capacity]
    total = 0
    while (path := _augmenting_path(residual, source, sink)) is not None:
        amount = min(residual[u][v] for u, v in pairwise(path))
        for u, v in pairwise(path):
            residual[u][v] -= amount
            residual[v][u] += amount
        total += amount
    return total, residual


def target_flow(max_flow: int) -> int:
    """Two thirds of ``max_flow``, rounded to the nearest whole unit."""
    if max_flow < 0:
        raise ValueError(f"flow must not be negative, got {max_flow}")
    return (20 * max_flow // 3 + 5) // 10


def min_cost_flow(
    capacity: Sequence[Sequence[int]], cost: Sequence[Sequence[int]], flow: int
) -> tuple[int, list[tuple[int, list[int]]]]:
    """Send ``flow`` units from the first to the last vertex one at a time along cheapest paths.

    Each unit takes the cheapest path over arcs with capacity left, which then
    loses one unit of capacity on every arc. Returns the total cost and, per
    unit, its cost and the vertices it passes.
    """
    size = _square(capacity, "capacity")
    if _square(cost, "cost") != size:
        raise ValueError("capacity and cost matrices differ in size")
    if size < 2:
        raise ValueError("a flow needs at least two vertices")
    if flow < 0:
        raise ValueError(f"flow must not be negative, got {flow}")

    remaining = [list(row) for row in capacity]
    sink = size - 1
    units: list[tuple[int, list[int]]] = []
    for number in range(flow):
        usable = [
            [price if left > 0 else 0 for price, left in zip(price_row, left_row)]
            for price_row, left_row in zip(cost, remaining)
        ]
        distances, previous, _ = dijkstra(usable, 0)
        price = distances[sink]
        if price is None:
            raise ValueError(f"no path left for unit {number + 1} of {flow}")
        path = reconstruct_path(previous, sink)
        for u, v in pairwise(path):
            remaining[u][v] -= 1
        units.append((price, path))
    return sum(price for price, _ in units), units