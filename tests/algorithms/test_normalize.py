from steinerweb.algorithms.normalize import total_weight, uniqueify, unwrap
from steinerweb.graph.annotated import build_annotated_graph
from steinerweb.types import Edge


def build():
    a, b = "A", "B"
    edges = [Edge(a, b, 1), Edge(a, b, 2), Edge(b, a, 1)]
    return edges, build_annotated_graph([a, b], edges, [a, b])


def test_uniqueify_keeps_first_per_ordered_pair():
    _, graph = build()
    # the parallel A -> B edge is a duplicate, the reverse direction is not
    assert uniqueify([0, 1, 2, 0, 2], graph) == [0, 2]
    assert uniqueify([1, 0], graph) == [1]


def test_uniqueify_is_idempotent():
    _, graph = build()
    once = uniqueify([2, 0, 1, 2], graph)
    assert uniqueify(once, graph) == once


def test_unwrap_returns_caller_objects():
    edges, graph = build()
    out = unwrap([2, 0], graph)
    assert out[0] is edges[2]
    assert out[1] is edges[0]


def test_total_weight():
    _, graph = build()
    assert total_weight([0, 1, 2], graph) == 4
    assert total_weight([], graph) == 0
