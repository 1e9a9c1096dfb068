import random
from itertools import pairwise

import pytest

from discretelabs.flows import capacity_matrix, ford_fulkerson, min_cost_flow, target_flow

CLASSIC = [
    [0, 16, 13, 0, 0, 0],
    [0, 0, 10, 12, 0, 0],
    [0, 4, 0, 0, 14, 0],
    [0, 0, 9, 0, 0, 20],
    [0, 0, 0, 7, 0, 4],
    [0, 0, 0, 0, 0, 0],
]


def test_capacity_matrix_bounds():
    adjacency = [[0, 1, 1], [0, 0, 1], [0, 0, 0]]
    weights = [[0, 5, -3], [0, 0, 1], [0, 0, 0]]
    result = capacity_matrix(adjacency, weights, random.Random(4))
    for i in range(3):
        for j in range(3):
            if adjacency[i][j]:
                assert 1 <= result[i][j] <= abs(weights[i][j])
            else:
                assert result[i][j] == 0
    assert result[1][2] == 1


def test_capacity_matrix_zero_weight_arc():
    with pytest.raises(ValueError):
        capacity_matrix([[0, 1], [0, 0]], [[0, 0], [0, 0]], random.Random(1))


def test_capacity_matrix_size_mismatch():
    with pytest.raises(ValueError):
        capacity_matrix([[0, 1], [0, 0]], [[0]], random.Random(1))


def test_ford_fulkerson_classic_network():
    total, _ = ford_fulkerson(CLASSIC, 0, 5)
    assert total == 23


def test_ford_fulkerson_single_arc():
    total, residual = ford_fulkerson([[0, 5], [0, 0]])
    assert total == 5
    assert residual == [[0, 0], [5, 0]]


def test_ford_fulkerson_conserves_flow():
    total, residual = ford_fulkerson(CLASSIC)
    net = [[CLASSIC[i][j] - residual[i][j] for j in range(6)] for i in range(6)]
    assert sum(net[0]) == total
    assert sum(net[i][5] for i in range(6)) == total
    for vertex in range(1, 5):
        assert sum(net[vertex]) == 0
    for i in range(6):
        for j in range(6):
            assert net[i][j] == -net[j][i]


def test_ford_fulkerson_residual_is_saturated():
    _, residual = ford_fulkerson(CLASSIC)
    extra, _ = ford_fulkerson(residual)
    assert extra == 0


def test_ford_fulkerson_does_not_mutate_input():
    capacity = [row[:] for row in CLASSIC]
    ford_fulkerson(capacity)
    assert capacity == CLASSIC


def test_ford_fulkerson_unreachable_sink():
    total, residual = ford_fulkerson([[0, 0], [3, 0]])
    assert total == 0
    assert residual == [[0, 0], [3, 0]]


def test_ford_fulkerson_same_source_and_sink():
    with pytest.raises(ValueError):
        ford_fulkerson(CLASSIC, 2, 2)


def test_target_flow_values():
    assert target_flow(0) == 0
    assert target_flow(3) == 2
    assert target_flow(23) == 15


def test_target_flow_bounds():
    for value in range(60):
        assert 0 <= target_flow(value) <= value


def test_target_flow_negative():
    with pytest.raises(ValueError):
        target_flow(-1)


def test_min_cost_flow_prefers_cheap_path_until_full():
    capacity = [[0, 1, 2, 0], [0, 0, 0, 1], [0, 0, 0, 2], [0, 0, 0, 0]]
    cost = [[0, 1, 5, 0], [0, 0, 0, 1], [0, 0, 0, 5], [0, 0, 0, 0]]
    total, units = min_cost_flow(capacity, cost, 2)
    assert [path for _, path in units] == [[0, 1, 3], [0, 2, 3]]
    for price, path in units:
        assert price == sum(cost[u][v] for u, v in pairwise(path))
    assert total == sum(price for price, _ in units)


def test_min_cost_flow_zero_units():
    assert min_cost_flow([[0, 1], [0, 0]], [[0, 1], [0, 0]], 0) == (0, [])


def test_min_cost_flow_runs_out_of_capacity():
    with pytest.raises(ValueError):
        min_cost_flow([[0, 1], [0, 0]], [[0, 4], [0, 0]], 2)


def test_min_cost_flow_negative_flow():
    with pytest.raises(ValueError):
        min_cost_flow([[0, 1], [0, 0]], [[0, 4], [0, 0]], -1)