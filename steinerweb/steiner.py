"""Approximate Steiner trees over caller-supplied nodes and edges.

Pipeline: annotate the input, run the frontier search, repair leftover
disconnection, then deduplicate and map the edges back to the caller's
objects.

Example:
    >>> from steinerweb import Edge, approx_steiner
    >>> a, b, c = "A", "B", "C"
    >>> edges = [Edge(a, b, 2), Edge(b, a, 2), Edge(b, c, 3), Edge(c, b, 3)]
    >>> [(e.source, e.target) for e in approx_steiner([a, b, c], edges, [a, c])]
    [('A', 'B'), ('B', 'C')]
"""

from __future__ import annotations

from functools import partial
from typing import Any, Callable, List, Optional, Sequence

from steinerweb.algorithms.normalize import total_weight, uniqueify, unwrap
from steinerweb.algorithms.repair import connect_components, required_connected
from steinerweb.algorithms.search import frontier_search
from steinerweb.config import DEFAULT_CONFIG, SteinerConfig
from steinerweb.graph.annotated import AnnotatedGraph, build_annotated_graph
from steinerweb.logging import get_logger
from steinerweb.types import EdgeIndex, SteinerResult

logger = get_logger(__name__)

# (solution edge indices, arena) -> solution with joining edges appended
RepairFunc = Callable[[List[EdgeIndex], AnnotatedGraph], List[EdgeIndex]]


def _no_repair(solution: List[EdgeIndex], graph: AnnotatedGraph) -> List[EdgeIndex]:
    return list(solution)


def _resolve_repair(config: SteinerConfig, repair: Optional[RepairFunc]) -> RepairFunc:
    if repair is not None:
        return repair
    if not config.repair_enabled:
        return _no_repair
    return partial(connect_components, max_passes=config.max_repair_passes)


def solve(
    nodes: Sequence[Any],
    edges: Sequence[Any],
    required: Sequence[Any],
    *,
    config: Optional[SteinerConfig] = None,
    repair: Optional[RepairFunc] = None,
) -> SteinerResult:
    """Compute an approximate Steiner tree and report how it was found.

    Args:
        nodes: Node objects, matched by identity.
        edges: Edge records with positive integer weights; mappings with
            ``from``/``to``/``weight`` or objects with ``source``/``target``/
            ``weight`` (see :class:`steinerweb.types.Edge`).
        required: Nodes that must end up connected; a subset of ``nodes``.
        config: Pipeline settings; ``DEFAULT_CONFIG`` when omitted.
        repair: Replacement for the connectivity repair step. It must keep
            every edge it is given. Overrides ``config.repair_enabled``.

    Returns:
        SteinerResult whose ``edges`` are the caller's own edge objects.

    Raises:
        ValueError: On malformed input (unknown nodes, duplicate nodes,
            non-positive or non-integer weights) or when ``repair`` drops
            solution edges.
        TypeError: On unrecognized edge records.
    """
    cfg = config or DEFAULT_CONFIG
    graph = build_annotated_graph(nodes, edges, required)

    search = frontier_search(graph, cfg)
    repaired = _resolve_repair(cfg, repair)(list(search.solution), graph)
    if not set(search.solution) <= set(repaired):
        raise ValueError("Repair step removed edges from the search solution.")

    unique = uniqueify(repaired, graph)
    connected = required_connected(unique, graph)
    if not connected:
        logger.warning(
            "Result leaves required nodes disconnected (%d unique edges)", len(unique)
        )

    return SteinerResult(
        edges=unwrap(unique, graph),
        total_weight=total_weight(unique, graph),
        connected=connected,
        search=search,
        repair_edges=len(repaired) - len(search.solution),
    )


def approx_steiner(
    nodes: Sequence[Any],
    edges: Sequence[Any],
    required: Sequence[Any],
    *,
    config: Optional[SteinerConfig] = None,
    repair: Optional[RepairFunc] = None,
) -> List[Any]:
    """Return the caller edges of an approximate Steiner tree.

    Same arguments as :func:`solve`. No two returned edges share the same
    ordered (source, target) pair.
    """
    return solve(nodes, edges, required, config=config, repair=repair).edges
