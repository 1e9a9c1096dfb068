from random import Random

import pytest

from discretelabs.cycles import (
    euler_cycle,
    has_hamiltonian_cycle,
    is_eulerian,
    make_eulerian,
    make_hamiltonian,
    travelling_salesman,
    vertex_degrees,
)
from discretelabs.graph import Graph
from discretelabs.spanning import undirected_matrix

TRIANGLE = [[0, 3, 4], [3, 0, 5], [4, 5, 0]]
PATH4 = [[0, 1, 0, 0], [1, 0, 2, 0], [0, 2, 0, 3], [0, 0, 3, 0]]
STAR5 = [
    [0, 1, 1, 1, 1],
    [1, 0, 0, 0, 0],
    [1, 0, 0, 0, 0],
    [1, 0, 0, 0, 0],
    [1, 0, 0, 0, 0],
]
SQUARE = [[0, 1, 5, 1], [1, 0, 1, 5], [5, 1, 0, 1], [1, 5, 1, 0]]


def _edge_set(matrix):
    return {frozenset((i, j)) for i, row in enumerate(matrix) for j, w in enumerate(row) if w}


def _walk_edges(walk):
    steps = [frozenset(pair) for pair in zip(walk, walk[1:])]
    return steps


def test_vertex_degrees_counts_nonzero_entries():
    assert vertex_degrees([[0, 3, 0], [3, 0, -2], [0, -2, 0]]) == [1, 2, 1]


def test_is_eulerian():
    assert is_eulerian([2, 4, 0]) is True
    assert is_eulerian([1, 2, 1]) is False


def test_make_eulerian_gives_even_degrees_and_keeps_input():
    original = [row[:] for row in PATH4]
    graph, added, removed = make_eulerian(PATH4, Random(3))
    assert PATH4 == original
    assert is_eulerian(vertex_degrees(graph))
    assert all(graph[i][j] == graph[j][i] for i in range(4) for j in range(4))
    for i, j, weight in added:
        assert original[i][j] == 0
        assert graph[i][j] == weight
        assert 1 <= weight <= 10
    for i, j in removed:
        assert original[i][j] != 0
        assert graph[i][j] == 0


def test_make_eulerian_leaves_eulerian_graph_alone():
    graph, added, removed = make_eulerian(TRIANGLE, Random(0))
    assert graph == TRIANGLE
    assert added == [] and removed == []


@pytest.mark.parametrize("seed", range(6))
def test_make_eulerian_on_random_graphs(seed):
    rng = Random(seed)
    generated = Graph.random(6, rng)
    matrix = undirected_matrix(generated.adjacency)
    graph, _, _ = make_eulerian(matrix, rng)
    assert is_eulerian(vertex_degrees(graph))


def test_make_eulerian_rejects_two_vertices():
    with pytest.raises(ValueError):
        make_eulerian([[0, 1], [1, 0]], Random(0))


def test_euler_cycle_on_triangle_uses_every_edge_once():
    cycle = euler_cycle(TRIANGLE)
    assert cycle[0] == cycle[-1]
    steps = _walk_edges(cycle)
    assert len(steps) == len(_edge_set(TRIANGLE))
    assert set(steps) == _edge_set(TRIANGLE)


def test_euler_cycle_on_bowtie():
    bowtie = [
        [0, 1, 1, 1, 1],
        [1, 0, 1, 0, 0],
        [1, 1, 0, 0, 0],
        [1, 0, 0, 0, 1],
        [1, 0, 0, 1, 0],
    ]
    cycle = euler_cycle(bowtie)
    steps = _walk_edges(cycle)
    assert cycle[0] == cycle[-1]
    assert len(steps) == len(set(steps)) == len(_edge_set(bowtie))


def test_euler_cycle_skips_isolated_first_vertex():
    matrix = [[0, 0, 0, 0], [0, 0, 1, 1], [0, 1, 0, 1], [0, 1, 1, 0]]
    cycle = euler_cycle(matrix)
    assert 0 not in cycle
    assert cycle[0] == cycle[-1]
    assert set(_walk_edges(cycle)) == _edge_set(matrix)


def test_euler_cycle_rejects_odd_degrees():
    with pytest.raises(ValueError):
        euler_cycle(PATH4)


def test_hamiltonian_detection():
    assert has_hamiltonian_cycle(SQUARE) is True
    assert has_hamiltonian_cycle(STAR5) is False


def test_hamiltonian_rejects_empty_matrix():
    with pytest.raises(ValueError):
        has_hamiltonian_cycle([])


def test_make_hamiltonian_adds_cycle():
    graph, added = make_hamiltonian(STAR5, Random(5))
    assert has_hamiltonian_cycle(graph)
    assert added
    for i, row in enumerate(STAR5):
        for j, weight in enumerate(row):
            if weight:
                assert graph[i][j] == weight
    for i, j, weight in added:
        assert STAR5[i][j] == 0
        assert graph[i][j] == graph[j][i] == weight
        assert 1 <= weight <= 10


def test_make_hamiltonian_rejects_two_vertices():
    with pytest.raises(ValueError):
        make_hamiltonian([[0, 1], [1, 0]], Random(0))


def test_travelling_salesman_on_square():
    path, cost, tours = travelling_salesman(SQUARE)
    assert path == [0, 1, 2, 3, 0]
    assert cost == 4
    assert len(tours) == 6
    assert cost == sum(SQUARE[a][b] for a, b in zip(path, path[1:]))
    assert all(cost <= other for _, other in tours)
    for tour, tour_cost in tours:
        assert tour[0] == tour[-1] == 0
        assert sorted(tour[:-1]) == [0, 1, 2, 3]
        assert tour_cost == sum(SQUARE[a][b] for a, b in zip(tour, tour[1:]))


def test_travelling_salesman_without_cycle_raises():
    with pytest.raises(ValueError):
        travelling_salesman(STAR5)