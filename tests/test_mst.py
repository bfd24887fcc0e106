import random

import pytest

from algolab.mst import Edge, benchmark_mst, kruskal, prim, random_complete_graph

SAMPLE_EDGES = [
    (0, 1, 2),
    (0, 3, 6),
    (1, 2, 3),
    (1, 3, 8),
    (1, 4, 5),
    (2, 4, 7),
    (3, 4, 9),
]

SAMPLE_MATRIX = [
    [0, 2, 0, 6, 0],
    [2, 0, 3, 8, 5],
    [0, 3, 0, 0, 7],
    [6, 8, 0, 0, 9],
    [0, 5, 7, 9, 0],
]


def _undirected(edges):
    return {(frozenset((e.src, e.dest)), e.weight) for e in edges}


def test_kruskal_sample_graph():
    tree = kruskal(5, SAMPLE_EDGES)
    assert tree == [Edge(0, 1, 2), Edge(1, 2, 3), Edge(1, 4, 5), Edge(0, 3, 6)]


def test_prim_matches_kruskal_on_sample():
    assert _undirected(prim(SAMPLE_MATRIX)) == _undirected(kruskal(5, SAMPLE_EDGES))


def test_prim_edges_point_to_each_vertex():
    tree = prim(SAMPLE_MATRIX)
    assert [e.dest for e in tree] == [1, 2, 3, 4]
    assert all(SAMPLE_MATRIX[e.src][e.dest] == e.weight for e in tree)


@pytest.mark.parametrize("seed", range(5))
def test_random_graph_totals_agree(seed):
    graph = random_complete_graph(8, random.Random(seed))
    edges = [(i, j, graph[i][j]) for i in range(8) for j in range(i + 1, 8)]
    via_kruskal = kruskal(8, edges)
    via_prim = prim(graph)
    assert len(via_kruskal) == 7
    assert len(via_prim) == 7
    assert sum(e.weight for e in via_kruskal) == sum(e.weight for e in via_prim)


def test_random_complete_graph_shape():
    graph = random_complete_graph(6, random.Random(3))
    for i in range(6):
        assert graph[i][i] == 0
        for j in range(6):
            assert graph[i][j] == graph[j][i]
            if i != j:
                assert 1 <= graph[i][j] <= 100


def test_kruskal_forest_on_disconnected_graph():
    tree = kruskal(4, [(0, 1, 1), (2, 3, 4)])
    assert _undirected(tree) == _undirected([Edge(0, 1, 1), Edge(2, 3, 4)])


def test_kruskal_rejects_unknown_vertex():
    with pytest.raises(ValueError):
        kruskal(3, [(0, 5, 1)])


def test_prim_rejects_disconnected_graph():
    with pytest.raises(ValueError):
        prim([[0, 1, 0], [1, 0, 0], [0, 0, 0]])


def test_prim_rejects_non_square():
    with pytest.raises(ValueError):
        prim([[0, 1], [1, 0, 2]])


def test_benchmark_writes_csv(tmp_path):
    target = tmp_path / "output.csv"
    rows = benchmark_mst(target, trials=4, vertex_count=6, rng=random.Random(1))
    lines = target.read_text(encoding="utf-8").splitlines()
    assert lines[0] == "Graph,Prim_Time(ms),Kruskal_Time(ms)"
    assert len(lines) == 5
    assert [int(line.split(",")[0]) for line in lines[1:]] == [1, 2, 3, 4]
    assert [row[0] for row in rows] == [1, 2, 3, 4]
    assert all(float(cell) >= 0 for line in lines[1:] for cell in line.split(",")[1:])