import pytest

from algolab.flow import max_flow


def network(count, edges):
    capacity = [[0] * count for _ in range(count)]
    for u, v, c in edges:
        capacity[u][v] = c
    return capacity


SAMPLE = network(20, [(0, 1, 16), (0, 2, 13), (1, 2, 10), (1, 3, 12), (2, 1, 4), (2, 4, 14)])


def test_sample_network():
    assert max_flow(SAMPLE, 0, 4) == 14


def test_flow_bounded_by_source_and_sink_capacity():
    flow = max_flow(SAMPLE, 0, 4)
    assert flow <= sum(SAMPLE[0])
    assert flow <= sum(row[4] for row in SAMPLE)


def test_single_edge():
    assert max_flow(network(2, [(0, 1, 9)]), 0, 1) == 9


def test_chain_limited_by_bottleneck():
    assert max_flow(network(3, [(0, 1, 7), (1, 2, 3)]), 0, 2) == 3


def test_no_path_gives_zero():
    assert max_flow(network(3, [(0, 1, 5)]), 0, 2) == 0


def test_reverse_direction_has_no_flow():
    assert max_flow(network(2, [(0, 1, 6)]), 1, 0) == 0


def test_input_not_modified():
    capacity = network(3, [(0, 1, 4), (1, 2, 4)])
    snapshot = [row[:] for row in capacity]
    max_flow(capacity, 0, 2)
    assert capacity == snapshot


def test_same_source_and_sink_rejected():
    with pytest.raises(ValueError):
        max_flow(network(2, [(0, 1, 1)]), 1, 1)


def test_out_of_range_vertex_rejected():
    with pytest.raises(ValueError):
        max_flow(network(2, [(0, 1, 1)]), 0, 2)


def test_non_square_rejected():
    with pytest.raises(ValueError):
        max_flow([[0, 1], [0]], 0, 1)