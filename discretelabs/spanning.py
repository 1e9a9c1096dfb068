"""Spanning trees: Kirchhoff counting, Prim, Boruvka and Prufer codes with weights."""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Sequence

Matrix = list[list[int]]
Edge = tuple[int, int, int]


def _square(matrix: Sequence[Sequence[int]]) -> int:
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("the matrix must be square")
    return size


def undirected_matrix(matrix: Sequence[Sequence[int]]) -> Matrix:
    """Mirror the upper triangle onto the lower one; the diagonal is kept."""
    size = _square(matrix)
    return [[matrix[min(i, j)][max(i, j)] for j in range(size)] for i in range(size)]


def kirchhoff_matrix(adjacency: Sequence[Sequence[int]]) -> Matrix:
    """The Laplacian of an undirected graph: degrees on the diagonal, minus adjacency elsewhere."""
    size = _square(adjacency)
    result: Matrix = []
    for i, row in enumerate(adjacency):
        degree = row[i] + sum(value for j, value in enumerate(row) if j != i)
        result.append([degree if j == i else -row[j] for j in range(size)])
    return result


def determinant(matrix: Sequence[Sequence[int]]) -> int:
    """Exact determinant of an integer matrix by fraction-free elimination."""
    size = _square(matrix)
    if size == 0:
        return 1
    work = [list(row) for row in matrix]
    sign = 1
    pivot_before = 1
    for k in range(size - 1):
        if work[k][k] == 0:
            swap = next((r for r in range(k + 1, size) if work[r][k] != 0), None)
            if swap is None:
                return 0
            work[k], work[swap] = work[swap], work[k]
            sign = -sign
        pivot = work[k][k]
        for i in range(k + 1, size):
            factor = work[i][k]
            row_k = work[k]
            work[i] = work[i][:k + 1] + [
                (value * pivot - factor * row_k[j]) // pivot_before
                for j, value in enumerate(work[i][k + 1:], start=k + 1)
            ]
        pivot_before = pivot
    return sign * work[-1][-1]


def count_spanning_trees(adjacency: Sequence[Sequence[int]]) -> int:
    """Number of spanning trees of an undirected graph by the matrix-tree theorem."""
    if _square(adjacency) == 0:
        raise ValueError("the graph has no vertices")
    laplacian = kirchhoff_matrix(adjacency)
    return determinant([row[1:] for row in laplacian[1:]])


def prim(weights: Sequence[Sequence[int]]) -> tuple[list[Edge], int]:
    """Minimum spanning tree grown from vertex 0; edges as (parent, child, weight) and checks made."""
    size = _square(weights)
    if size == 0:
        raise ValueError("the graph has no vertices")
    key = [math.inf] * size
    parent: list[int | None] = [None] * size
    in_tree = [False] * size
    key[0] = 0
    iterations = 0
    for _ in range(size - 1):
        vertex = min((v for v in range(size) if not in_tree[v]), key=key.__getitem__)
        in_tree[vertex] = True
        for target, weight in enumerate(weights[vertex]):
            iterations += 1
            if weight and not in_tree[target] and weight < key[target]:
                parent[target] = vertex
                key[target] = weight
    if any(parent[v] is None for v in range(1, size)):
        raise ValueError("the graph is not connected")
    edges = [(parent[v], v, weights[v][parent[v]]) for v in range(1, size)]
    return edges, iterations


def boruvka(weights: Sequence[Sequence[int]]) -> tuple[list[Edge], int]:
    """Minimum spanning tree by merging cheapest outgoing edges; edges and checks made."""
    size = _square(weights)
    if size == 0:
        raise ValueError("the graph has no vertices")
    parent = list(range(size))
    rank = [0] * size

    def find(vertex: int) -> int:
        root = vertex
        while parent[root] != root:
            root = parent[root]
        while parent[vertex] != root:
            parent[vertex], vertex = root, parent[vertex]
        return root

    def union(a: int, b: int) -> None:
        if rank[a] < rank[b]:
            parent[a] = b
        elif rank[a] > rank[b]:
            parent[b] = a
        else:
            parent[b] = a
            rank[a] += 1

    edges: list[Edge] = []
    iterations = 0
    trees = size
    while trees > 1:
        cheapest: dict[int, Edge] = {}
        for i, row in enumerate(weights):
            for j, weight in enumerate(row):
                if not weight:
                    continue
                first, second = find(i), find(j)
                if first == second:
                    continue
                iterations += 1
                for root in (first, second):
                    best = cheapest.get(root)
                    if best is None or best[2] > weight:
                        cheapest[root] = (i, j, weight)
        added = False
        for node in range(size):
            if node not in cheapest:
                continue
            u, v, weight = cheapest[node]
            first, second = find(u), find(v)
            if first != second:
                union(first, second)
                edges.append((u, v, weight))
                trees -= 1
                added = True
        if not added:
            raise ValueError("the graph is not connected")
    return edges, iterations


def prufer_encode(tree: Sequence[Sequence[int]]) -> tuple[list[int], list[int]]:
    """Prufer code of a weighted tree matrix and the weights of the edges in removal order."""
    size = _square(tree)
    if size < 2:
        raise ValueError("a tree needs at least two vertices")
    arcs: dict[tuple[int, int], int] = {}
    degree = [0] * size
    for i, row in enumerate(tree):
        for j, weight in enumerate(row):
            if weight:
                if tree[j][i] != weight:
                    raise ValueError("the tree matrix must be symmetric")
                arcs[(i, j)] = weight
                degree[i] += 1
    if sum(degree) != 2 * (size - 1):
        raise ValueError("the matrix does not describe a tree")

    code: list[int] = []
    code_weights: list[int] = []
    for _ in range(size - 2):
        leaf = next((v for v, d in enumerate(degree) if d == 1), None)
        if leaf is None:
            raise ValueError("the matrix does not describe a tree")
        neighbour = min(j for i, j in arcs if i == leaf)
        degree[leaf] -= 1
        degree[neighbour] -= 1
        code_weights.append(arcs.pop((leaf, neighbour)))
        arcs.pop((neighbour, leaf), None)
        code.append(neighbour)

    remaining = [v for v, d in enumerate(degree) if d > 0]
    if len(remaining) != 2 or (remaining[0], remaining[1]) not in arcs:
        raise ValueError("the matrix does not describe a tree")
    code_weights.append(arcs[(remaining[0], remaining[1])])
    return code, code_weights


def prufer_decode(code: Sequence[int], weights: Sequence[int]) -> list[Edge]:
    """Rebuild the weighted tree edges from a Prufer code and its edge weights."""
    if len(weights) != len(code) + 1:
        raise ValueError("there must be exactly one more weight than code entries")
    count = len(code) + 2
    if any(not 0 <= vertex < count for vertex in code):
        raise ValueError("code refers to a vertex outside the tree")
    pending = Counter(code)
    available = list(range(count))
    edges: list[Edge] = []
    for vertex, weight in zip(code, weights):
        leaf = next(v for v in available if pending[v] == 0)
        edges.append((leaf, vertex, weight))
        available.remove(leaf)
        pending[vertex] -= 1
    first, second = available
    edges.append((first, second, weights[-1]))
    return edges