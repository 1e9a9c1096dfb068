"""Random directed acyclic graphs, their weights and matrix path counting."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from random import Random

Matrix = list[list[int]]

_CHOOSERS: dict[str, Callable[[list[int]], int]] = {"min": min, "max": max}


def hypergeometric_sample(
    population: float, successes: float, draws: int, rng: Random | None = None
) -> int:
    """Draw ``draws`` items without replacement and count the successes."""
    if draws > population:
        raise ValueError(f"cannot draw {draws} items from a population of {population}")
    rng = rng or Random()
    population = float(population)
    successes = float(successes)
    count = 0
    for _ in range(draws):
        chance = successes / population
        if rng.randint(1, 100) / 100 < chance:
            count += 1
            successes -= 1
        population -= 1
    return count


def matrix_multiply(a: Sequence[Sequence[int]], b: Sequence[Sequence[int]]) -> Matrix:
    """The ordinary product of two integer matrices."""
    if a and len(a[0]) != len(b):
        raise ValueError("matrix dimensions do not match")
    columns = list(zip(*b))
    return [[sum(x * y for x, y in zip(row, column)) for column in columns] for row in a]


def _chooser(mode: str) -> Callable[[list[int]], int]:
    try:
        return _CHOOSERS[mode]
    except KeyError:
        raise ValueError(f"mode must be 'min' or 'max', got {mode!r}") from None


def shimbell_multiply(
    mode: str, a: Sequence[Sequence[int]], b: Sequence[Sequence[int]]
) -> Matrix:
    """Shimbell product: sums replace products, ``min`` or ``max`` replaces the sum."""
    choose = _chooser(mode)
    if a and len(a[0]) != len(b):
        raise ValueError("matrix dimensions do not match")
    columns = list(zip(*b))
    result: Matrix = []
    for row in a:
        out = []
        for column in columns:
            candidates = [x + y for x, y in zip(row, column) if x and y]
            out.append(choose(candidates) if candidates else 0)
        result.append(out)
    return result


def format_matrix(matrix: Sequence[Sequence[int]]) -> str:
    """Right-aligned columns, two spaces wider than the largest magnitude."""
    widest = max((abs(value) for row in matrix for value in row), default=0)
    width = len(str(widest)) + 2
    return "\n".join("".join(f"{value:>{width}}" for value in row) for row in matrix)


class Graph:
    """A directed graph on ``size`` vertices with adjacency and weight matrices."""

    def __init__(self, size: int) -> None:
        if size < 2:
            raise ValueError(f"a graph needs at least two vertices, got {size}")
        self.size = size
        self.adjacency: Matrix = [[0] * size for _ in range(size)]
        self.weights: Matrix = [[0] * size for _ in range(size)]

    @classmethod
    def random(cls, size: int, rng: Random | None = None) -> Graph:
        """A connected acyclic graph with one source (vertex 0) and one sink (the last)."""
        rng = rng or Random()
        graph = cls(size)
        degrees = sorted(
            (hypergeometric_sample(size * 3, size * 1.6, size - 1, rng) for _ in range(size)),
            reverse=True,
        )
        rest = degrees[1:]
        rng.shuffle(rest)
        degrees[1:] = rest

        matrix = graph.adjacency
        for vertex, degree in enumerate(degrees):
            span = size - vertex - 1
            ones = min(degree, span)
            row = [1] * ones + [0] * (span - ones)
            rng.shuffle(row)
            matrix[vertex][vertex + 1:] = row

        last = size - 1
        for vertex in range(1, size):
            if not any(matrix[other][vertex] for other in range(size)):
                matrix[0][vertex] = 1
            if vertex != last and not any(matrix[vertex]):
                matrix[vertex][last] = 1

        graph.weights = [row[:] for row in matrix]
        return graph

    def _edges(self) -> Iterator[tuple[int, int]]:
        for i, row in enumerate(self.adjacency):
            for j, value in enumerate(row):
                if value == 1:
                    yield i, j

    def _check_vertex(self, vertex: int) -> None:
        if not 0 <= vertex < self.size:
            raise ValueError(f"no vertex {vertex} in a graph of {self.size}")

    def generate_weights(self, maximum: int, rng: Random | None = None) -> None:
        """Give every edge a positive weight from 1 to ``maximum``."""
        if maximum < 0:
            raise ValueError(f"maximum must not be negative, got {maximum}")
        rng = rng or Random()
        for i, j in self._edges():
            self.weights[i][j] = hypergeometric_sample(maximum * 3, maximum * 1.6, maximum - 1, rng) + 1

    def generate_signed_weights(self, minimum: int, maximum: int, rng: Random | None = None) -> None:
        """Give every edge a non-zero weight from ``minimum`` up to ``maximum - 1``."""
        if minimum >= 0:
            raise ValueError(f"minimum must be negative, got {minimum}")
        if maximum <= minimum:
            raise ValueError(f"maximum {maximum} must exceed minimum {minimum}")
        rng = rng or Random()
        for i, j in self._edges():
            value = rng.randrange(minimum, maximum)
            self.weights[i][j] = value or 1

    def shimbell(self, mode: str, edges: int) -> Matrix:
        """Shortest (``min``) or longest (``max``) path weights using exactly ``edges`` arcs."""
        _chooser(mode)
        if not 1 <= edges <= self.size:
            raise ValueError(f"the number of edges must be from 1 to {self.size}, got {edges}")
        result = [row[:] for row in self.weights]
        for _ in range(edges - 1):
            result = shimbell_multiply(mode, result, self.weights)
        return result

    def count_routes(self, source: int, target: int) -> int:
        """Number of routes from ``source`` to ``target`` counted by adjacency powers."""
        self._check_vertex(source)
        self._check_vertex(target)
        if source == target:
            raise ValueError("source and target are the same vertex")
        power = self.adjacency
        total = power[source][target]
        for _ in range(self.size):
            power = matrix_multiply(power, self.adjacency)
            total += power[source][target]
        return total