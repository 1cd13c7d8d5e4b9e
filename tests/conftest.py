"""Shared graph fixtures.

Each fixture returns ``(nodes, edges, required)`` with :class:`Edge` records
listed in a fixed order; the order matters because it drives the search.
"""

from __future__ import annotations

from typing import Any, List, Tuple

import pytest

from steinerweb.types import Edge

Problem = Tuple[List[Any], List[Edge], List[Any]]


def both_ways(u: Any, v: Any, weight: int) -> List[Edge]:
    return [Edge(u, v, weight), Edge(v, u, weight)]


@pytest.fixture
def path_abc() -> Problem:
    # All three required:
    #     [2]      [3]
    #  A◄─────►B◄─────►C
    a, b, c = "A", "B", "C"
    edges = both_ways(a, b, 2) + both_ways(b, c, 3)
    return [a, b, c], edges, [a, b, c]


@pytest.fixture
def diamond() -> Problem:
    # A and C required; B and D are Steiner nodes:
    #      [2]   [3]
    #   A◄────►B◄────►C
    #   ▲             ▲
    #   │[4]       [4]│
    #   └─────►D◄─────┘
    a, b, c, d = "A", "B", "C", "D"
    edges = both_ways(a, b, 2) + both_ways(a, d, 4) + both_ways(b, c, 3)
    edges += both_ways(c, d, 4)
    return [a, b, c, d], edges, [a, c]


@pytest.fixture
def line_axyc() -> Problem:
    # A and C required, unit weights; the searches meet between X and Y:
    #  A◄──►X◄──►Y◄──►C
    a, x, y, c = "A", "X", "Y", "C"
    edges = both_ways(a, x, 1) + both_ways(x, y, 1) + both_ways(y, c, 1)
    return [a, x, y, c], edges, [a, c]


@pytest.fixture
def stranded() -> Problem:
    # A, B and C required. The search links A to B, then C has nowhere to go;
    # only the B -> D -> C route joins C:
    #  A ──► B ──► D ──► C
    a, b, c, d = "A", "B", "C", "D"
    edges = [Edge(a, b, 1), Edge(d, c, 1), Edge(b, d, 1)]
    return [a, b, c, d], edges, [a, b, c]
