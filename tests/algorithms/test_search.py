import logging

import pytest

from steinerweb.algorithms.search import frontier_search
from steinerweb.config import SteinerConfig
from steinerweb.graph.annotated import build_annotated_graph
from steinerweb.types import Edge


def run(problem, config=None):
    graph = build_annotated_graph(*problem)
    return graph, frontier_search(graph, config)


def test_single_required_node_finds_nothing():
    a, b = "A", "B"
    graph, res = run(([a, b], [Edge(a, b, 1), Edge(b, a, 1)], [a]))

    assert res.solution == []
    assert res.exhausted
    assert res.merges == 0
    # the lone source still explored the graph
    assert graph.nodes[1].in_temporary_web
    assert graph.nodes[1].witness.source == 0


def test_no_required_nodes_runs_no_rounds():
    res = frontier_search(build_annotated_graph(["A"], [], []))
    assert res.rounds == 0
    assert res.solution == []
    assert not res.exhausted


@pytest.mark.parametrize("weight", [1, 2, 7, 50])
def test_direct_edge_between_required_nodes(weight):
    a, b = "A", "B"
    _, res = run(([a, b], [Edge(a, b, weight)], [a, b]))

    assert res.solution == [0]
    assert res.merges == 1


def test_terminal_merges_on_path(path_abc):
    graph, res = run(path_abc)

    # A -> B, then C -> B
    assert res.solution == [0, 3]
    assert res.merges == 2
    assert res.solved == 2
    assert res.rounds == 3
    assert res.exhausted
    # empty paths mark nothing but the reached node
    assert not graph.nodes[0].in_permanent_web
    assert graph.nodes[1].in_permanent_web


def test_steiner_node_on_lighter_route(diamond):
    graph, res = run(diamond)

    # A -> B -> C (weight 5) beats A -> D -> C (weight 8)
    assert res.solution == [0, 4]
    assert res.merges == 1
    assert graph.nodes[0].in_permanent_web
    assert graph.nodes[2].in_permanent_web
    # closing edge source is not marked by a terminal merge
    assert not graph.nodes[1].in_permanent_web
    assert graph.edges[4].in_permanent_web


def test_collision_merge_joins_two_frontiers(line_axyc):
    graph, res = run(line_axyc)

    # C's path to Y, A's witness path to X, then the Y -> X closing edge
    assert res.solution == [5, 0, 3]
    assert res.solved == 2
    assert res.merges == 1
    assert res.rounds == 2
    assert not res.exhausted
    assert all(graph.nodes[i].in_permanent_web for i in range(4))


def test_weight_replication_lets_lighter_path_overtake():
    a, b, c, d = "A", "B", "C", "D"
    edges = [Edge(a, b, 5), Edge(a, d, 1), Edge(b, c, 1), Edge(d, c, 1)]
    _, res = run(([a, b, c, d], edges, [a, c]))

    # A -> B was queued first but spends five turns in the queue
    assert res.solution == [1, 3]


def test_disconnected_required_nodes_exhaust(stranded):
    _, res = run(stranded)

    assert res.solution == [0]
    assert res.exhausted
    assert res.solved < res.required


def test_search_is_deterministic(diamond):
    _, first = run(diamond)
    _, second = run(diamond)
    assert first == second


def test_progress_logged_at_interval(diamond, caplog):
    caplog.set_level(logging.DEBUG, logger="steinerweb")
    run(diamond, SteinerConfig(progress_log_interval=2))

    progress = [r for r in caplog.records if "Search round" in r.getMessage()]
    assert [r.getMessage().split(":")[0] for r in progress] == [
        "Search round 2",
        "Search round 4",
    ]
