"""Eulerian and Hamiltonian cycles on undirected weight matrices where 0 means no edge."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from itertools import pairwise
from random import Random

Matrix = list[list[int]]
Tour = tuple[list[int], int]

MAX_ADDED_WEIGHT = 10


def _square(matrix: Sequence[Sequence[int]]) -> int:
    size = len(matrix)
    if size == 0:
        raise ValueError("the graph has no vertices")
    if any(len(row) != size for row in matrix):
        raise ValueError("the matrix must be square")
    return size


def vertex_degrees(matrix: Sequence[Sequence[int]]) -> list[int]:
    """Number of non-zero entries in each row."""
    return [sum(1 for value in row if value) for row in matrix]


def is_eulerian(degrees: Sequence[int]) -> bool:
    """True when every degree is even."""
    return all(degree % 2 == 0 for degree in degrees)


def _odd_partner(graph: Matrix, degrees: list[int], vertex: int, connected: bool) -> int | None:
    if degrees[vertex] % 2 == 0:
        return None
    return next(
        (
            other
            for other, weight in enumerate(graph[vertex])
            if other != vertex and degrees[other] % 2 and bool(weight) == connected
        ),
        None,
    )


def make_eulerian(
    matrix: Sequence[Sequence[int]], rng: Random | None = None
) -> tuple[Matrix, list[tuple[int, int, int]], list[tuple[int, int]]]:
    """Add and remove edges between odd vertices until every degree is even.

    Returns the new matrix, the added edges as (u, v, weight) and the removed
    edges as (u, v). The input is left unchanged.
    """
    size = _square(matrix)
    if size < 3:
        raise ValueError("a graph with fewer than three vertices cannot be made Eulerian")
    rng = rng or Random()
    graph = [list(row) for row in matrix]
    degrees = vertex_degrees(graph)
    added: list[tuple[int, int, int]] = []
    removed: list[tuple[int, int]] = []

    while not is_eulerian(degrees):
        for vertex in range(size):
            other = _odd_partner(graph, degrees, vertex, connected=False)
            if other is not None:
                weight = rng.randint(1, MAX_ADDED_WEIGHT)
                graph[vertex][other] = graph[other][vertex] = weight
                degrees[vertex] += 1
                degrees[other] += 1
                added.append((vertex, other, weight))
        for vertex in range(size):
            other = _odd_partner(graph, degrees, vertex, connected=True)
            if other is not None:
                graph[vertex][other] = graph[other][vertex] = 0
                degrees[vertex] -= 1
                degrees[other] -= 1
                removed.append((vertex, other))
    return graph, added, removed


def euler_cycle(matrix: Sequence[Sequence[int]]) -> list[int]:
    """A closed walk using every edge reachable from the first vertex that has one."""
    _square(matrix)
    if not is_eulerian(vertex_degrees(matrix)):
        raise ValueError("the graph has vertices of odd degree")
    graph = [list(row) for row in matrix]
    start = next((vertex for vertex, row in enumerate(graph) if any(row)), 0)
    stack = [start]
    cycle: list[int] = []
    while stack:
        vertex = stack[-1]
        neighbour = next((other for other, weight in enumerate(graph[vertex]) if weight), None)
        if neighbour is None:
            cycle.append(stack.pop())
        else:
            stack.append(neighbour)
            graph[vertex][neighbour] = graph[neighbour][vertex] = 0
    return cycle


def _tours(matrix: Sequence[Sequence[int]]) -> Iterator[Tour]:
    """Every Hamiltonian cycle from vertex 0, depth first, with its total weight."""
    size = len(matrix)
    path = [0]
    visited = {0}

    def extend(vertex: int, cost: int) -> Iterator[Tour]:
        if len(path) == size:
            back = matrix[vertex][0]
            if back:
                yield [*path, 0], cost + back
            return
        for target, weight in enumerate(matrix[vertex]):
            if weight and target not in visited:
                visited.add(target)
                path.append(target)
                yield from extend(target, cost + weight)
                path.pop()
                visited.discard(target)

    yield from extend(0, 0)


def has_hamiltonian_cycle(matrix: Sequence[Sequence[int]]) -> bool:
    """True when some cycle passes through every vertex exactly once."""
    _square(matrix)
    return next(_tours(matrix), None) is not None


def make_hamiltonian(
    matrix: Sequence[Sequence[int]], rng: Random | None = None
) -> tuple[Matrix, list[tuple[int, int, int]]]:
    """Join the vertices in a random circular order, adding the missing edges.

    Returns the new matrix and the added edges as (u, v, weight).
    """
    size = _square(matrix)
    if size < 3:
        raise ValueError("a graph with fewer than three vertices cannot be made Hamiltonian")
    rng = rng or Random()
    graph = [list(row) for row in matrix]
    order = list(range(size))
    rng.shuffle(order)
    added: list[tuple[int, int, int]] = []
    for first, second in pairwise([*order, order[0]]):
        if graph[first][second] == 0:
            weight = rng.randint(1, MAX_ADDED_WEIGHT)
            graph[first][second] = graph[second][first] = weight
            added.append((first, second, weight))
    return graph, added


def travelling_salesman(matrix: Sequence[Sequence[int]]) -> tuple[list[int], int, list[Tour]]:
    """The cheapest Hamiltonian cycle from vertex 0, its cost, and every cycle tried."""
    _square(matrix)
    tours = list(_tours(matrix))
    if not tours:
        raise ValueError("the graph has no Hamiltonian cycle")
    path, cost = min(tours, key=lambda tour: tour[1])
    return path, cost, tours