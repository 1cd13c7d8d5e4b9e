"""Connectivity repair for search results that stayed disconnected.

The frontier search stops early when the unsolved required nodes run out of
queued work, and its merges may leave several islands. The repair step joins
the first island to the others, one shortest path at a time, and repeats
until one island remains or nothing more can be reached.

Islands are the undirected connected components of the solution edges, plus
each required node no solution edge touches. They are ordered by first
appearance: solution edges first, then required nodes in input order.

The repair never removes edges and returns an already connected solution
unchanged.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Set, Tuple

import networkx as nx

from steinerweb.graph.annotated import AnnotatedGraph
from steinerweb.logging import get_logger
from steinerweb.types import EdgeIndex, NodeIndex

logger = get_logger(__name__)


def solution_components(
    solution: List[EdgeIndex], graph: AnnotatedGraph
) -> List[Set[NodeIndex]]:
    """Return the islands of ``solution`` in first-appearance order."""
    ug = nx.Graph()
    for ei in solution:
        e = graph.edges[ei]
        ug.add_edge(e.src, e.dst)
    ug.add_nodes_from(graph.required)
    # connected_components walks nodes in insertion order
    return [set(c) for c in nx.connected_components(ug)]


def required_connected(solution: List[EdgeIndex], graph: AnnotatedGraph) -> bool:
    """Whether every required node lies in the same island of ``solution``."""
    if len(graph.required) <= 1:
        return True
    first = graph.required[0]
    for comp in solution_components(solution, graph):
        if first in comp:
            return all(r in comp for r in graph.required)
    return False


def weighted_digraph(graph: AnnotatedGraph) -> nx.DiGraph:
    """Project the arena onto a simple weighted DiGraph of node indices.

    Parallel edges collapse onto the lightest one (the earliest on ties),
    whose arena index is kept in the ``index`` attribute. Self-loops are
    dropped.
    """
    dg = nx.DiGraph()
    dg.add_nodes_from(range(len(graph.nodes)))
    for e in graph.edges:
        if e.src == e.dst:
            continue
        if dg.has_edge(e.src, e.dst) and dg[e.src][e.dst]["weight"] <= e.weight:
            continue
        dg.add_edge(e.src, e.dst, weight=e.weight, index=e.index)
    return dg


def _cheapest_link(
    dg: nx.DiGraph, components: List[Set[NodeIndex]]
) -> Optional[List[EdgeIndex]]:
    """Find the lightest path between the first island and any other one.

    Paths leaving the first island are searched on ``dg``, paths entering it
    on the reversed view. Ties prefer leaving paths, then earlier islands.

    Returns:
        Arena edge indices of the path in travel order, or None when no other
        island is reachable in either direction.
    """
    first = components[0]
    owner: Dict[NodeIndex, int] = {
        n: ci for ci, comp in enumerate(components[1:], start=1) for n in comp
    }

    best_key: Optional[Tuple[float, int, int]] = None
    best_path: List[NodeIndex] = []
    best_reversed = False
    for direction, g in enumerate((dg, dg.reverse(copy=False))):
        dist, paths = nx.multi_source_dijkstra(g, first, weight="weight")
        for n, d in dist.items():
            ci = owner.get(n)
            if ci is None:
                continue
            key = (d, direction, ci)
            if best_key is None or key < best_key:
                best_key, best_path, best_reversed = key, paths[n], bool(direction)

    if best_key is None:
        return None

    hops = list(zip(best_path, best_path[1:]))
    if best_reversed:
        hops = [(v, u) for u, v in reversed(hops)]
    return [dg[u][v]["index"] for u, v in hops]


def connect_components(
    solution: List[EdgeIndex],
    graph: AnnotatedGraph,
    max_passes: Optional[int] = None,
) -> List[EdgeIndex]:
    """Join the islands of ``solution`` with shortest paths from ``graph``.

    Args:
        solution: Edge indices produced by the frontier search.
        graph: The arena the search ran on; supplies the candidate edges.
        max_passes: Stop after this many joins; None means no limit.

    Returns:
        A new list: ``solution`` followed by the edges of each join.
    """
    out = list(solution)
    dg: Optional[nx.DiGraph] = None
    passes = 0
    while max_passes is None or passes < max_passes:
        components = solution_components(out, graph)
        if len(components) <= 1:
            break
        if dg is None:
            dg = weighted_digraph(graph)

        link = _cheapest_link(dg, components)
        if link is None:
            logger.warning(
                "Repair stopped: %d islands remain and none is reachable "
                "from the first one",
                len(components),
            )
            break
        logger.debug(
            "Repair pass %d: joined 1 of %d islands with %d edges",
            passes + 1,
            len(components) - 1,
            len(link),
        )
        out.extend(link)
        passes += 1
    return out
