from random import Random

import pytest

from discretelabs.graph import (
    Graph,
    format_matrix,
    hypergeometric_sample,
    matrix_multiply,
    shimbell_multiply,
)


def test_hypergeometric_without_successes_is_zero():
    assert hypergeometric_sample(30, 0, 9, Random(1)) == 0


def test_hypergeometric_without_draws_is_zero():
    assert hypergeometric_sample(30, 16, 0, Random(1)) == 0


@pytest.mark.parametrize("seed", range(20))
def test_hypergeometric_is_bounded_by_draws(seed):
    assert 0 <= hypergeometric_sample(30, 16, 9, Random(seed)) <= 9


def test_hypergeometric_is_reproducible():
    first = [hypergeometric_sample(30, 16, 9, Random(5)) for _ in range(3)]
    second = [hypergeometric_sample(30, 16, 9, Random(5)) for _ in range(3)]
    assert first == second


def test_hypergeometric_rejects_too_many_draws():
    with pytest.raises(ValueError):
        hypergeometric_sample(3, 1, 4, Random(0))


def test_graph_needs_two_vertices():
    with pytest.raises(ValueError):
        Graph(1)


@pytest.mark.parametrize("size", [2, 3, 5, 8, 12])
@pytest.mark.parametrize("seed", range(5))
def test_random_graph_invariants(size, seed):
    graph = Graph.random(size, Random(seed))
    m = graph.adjacency
    for i in range(size):
        for j in range(i + 1):
            assert m[i][j] == 0
    for vertex in range(1, size):
        assert any(m[other][vertex] for other in range(size))
    for vertex in range(size - 1):
        assert any(m[vertex])
    assert graph.weights == m
    assert graph.weights is not m


def test_random_graph_is_reproducible():
    first = Graph.random(7, Random(3)).adjacency
    second = Graph.random(7, Random(3)).adjacency
    assert len(first) == 7
    assert sum(map(sum, first)) >= 6
    assert all(value in (0, 1) for row in first for value in row)
    assert first == second


def test_generate_weights_in_range():
    graph = Graph.random(9, Random(2))
    graph.generate_weights(10, Random(4))
    for i in range(9):
        for j in range(9):
            if graph.adjacency[i][j]:
                assert 1 <= graph.weights[i][j] <= 10
            else:
                assert graph.weights[i][j] == 0


def test_generate_weights_rejects_negative_maximum():
    with pytest.raises(ValueError):
        Graph.random(4, Random(0)).generate_weights(-1, Random(0))


def test_signed_weights_with_positive_maximum():
    graph = Graph.random(10, Random(6))
    graph.generate_signed_weights(-5, 5, Random(1))
    for i in range(10):
        for j in range(10):
            if graph.adjacency[i][j]:
                assert -5 <= graph.weights[i][j] <= 4
                assert graph.weights[i][j] != 0
            else:
                assert graph.weights[i][j] == 0


def test_signed_weights_all_negative():
    graph = Graph.random(10, Random(8))
    graph.generate_signed_weights(-5, -2, Random(1))
    edge_weights = [
        graph.weights[i][j] for i in range(10) for j in range(10) if graph.adjacency[i][j]
    ]
    assert edge_weights
    assert all(-5 <= w <= -3 for w in edge_weights)


@pytest.mark.parametrize("minimum, maximum", [(3, 5), (-2, -5), (-2, -2)])
def test_signed_weights_rejects_bad_bounds(minimum, maximum):
    with pytest.raises(ValueError):
        Graph.random(4, Random(0)).generate_signed_weights(minimum, maximum, Random(0))


def test_matrix_multiply_identity():
    a = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
    identity = [[1, 0, 0], [0, 1, 0], [0, 0, 1]]
    assert matrix_multiply(a, identity) == a
    assert matrix_multiply(identity, a) == a


def test_matrix_multiply_counts_two_step_walks():
    chain = [[0, 1, 0], [0, 0, 1], [0, 0, 0]]
    assert matrix_multiply(chain, chain) == [[0, 0, 1], [0, 0, 0], [0, 0, 0]]


def test_matrix_multiply_rejects_mismatch():
    with pytest.raises(ValueError):
        matrix_multiply([[1, 2]], [[1, 2]])


def test_shimbell_multiply_rejects_mode():
    with pytest.raises(ValueError):
        shimbell_multiply("avg", [[0]], [[0]])


def test_shimbell_multiply_sums_along_chain():
    w = [[0, 2, 0], [0, 0, 3], [0, 0, 0]]
    result = shimbell_multiply("min", w, w)
    assert result[0][2] == w[0][1] + w[1][2]
    assert result[0][1] == 0


def test_graph_shimbell_one_edge_is_weights():
    graph = Graph.random(6, Random(1))
    graph.generate_weights(9, Random(2))
    assert graph.shimbell("min", 1) == graph.weights


def test_graph_shimbell_two_edges():
    graph = Graph(3)
    graph.weights = [[0, 2, 10], [0, 0, 3], [0, 0, 0]]
    assert graph.shimbell("max", 2)[0][2] == graph.weights[0][1] + graph.weights[1][2]


def test_graph_shimbell_min_not_above_max():
    graph = Graph.random(8, Random(11))
    graph.generate_weights(20, Random(12))
    low = graph.shimbell("min", 3)
    high = graph.shimbell("max", 3)
    for low_row, high_row in zip(low, high):
        for a, b in zip(low_row, high_row):
            assert a <= b
            assert (a == 0) == (b == 0)


@pytest.mark.parametrize("edges", [0, 7])
def test_graph_shimbell_rejects_edge_count(edges):
    with pytest.raises(ValueError):
        Graph.random(6, Random(0)).shimbell("min", edges)


def test_graph_shimbell_rejects_mode():
    with pytest.raises(ValueError):
        Graph.random(4, Random(0)).shimbell("median", 1)


def test_format_matrix():
    assert format_matrix([[1, -10], [3, 4]]) == "   1 -10\n   3   4"


def _diamond():
    graph = Graph(4)
    for i, j in [(0, 1), (0, 2), (1, 3), (2, 3), (0, 3)]:
        graph.adjacency[i][j] = 1
    return graph


def test_count_routes():
    assert _diamond().count_routes(0, 3) == 3


def test_count_routes_against_direction():
    assert _diamond().count_routes(3, 0) == 0


def test_count_routes_same_vertex():
    with pytest.raises(ValueError):
        _diamond().count_routes(2, 2)


def test_count_routes_unknown_vertex():
    with pytest.raises(ValueError):
        _diamond().count_routes(0, 4)