"""Weighted multi-source frontier search.

Every required node runs its own breadth-first expansion; the expansions
advance in lock-step, one queue step per required node per pass. An edge of
weight ``W`` keeps its partial path cycling through the owner's FIFO ``W``
times before the path arrives, so a plain deque yields paths in
non-decreasing total weight for each source. This approximates simultaneous
Dijkstra runs without a priority queue and its ordering on ties is part of
the observable output.

Two expansions are merged when one of them:
  - steps onto another required node or onto a node already in the permanent
    web (terminal merge), or
  - steps onto a node last reached by a different source (collision merge).

After any merge the next pass starts again from the first required node.
The search ends when the solved counter reaches the number of required nodes
or when no unsolved required node has queued work left.
"""

from __future__ import annotations

from typing import Optional, Tuple

from steinerweb.config import DEFAULT_CONFIG, SteinerConfig
from steinerweb.graph.annotated import AnnotatedGraph, AnnotatedNode
from steinerweb.logging import get_logger
from steinerweb.types import PartialPath, PathIndices, SearchResult, Witness

logger = get_logger(__name__)


def frontier_search(
    graph: AnnotatedGraph, config: Optional[SteinerConfig] = None
) -> SearchResult:
    """Run the search to completion on a freshly built annotated graph.

    Mutates the annotation flags of ``graph`` in place.

    Args:
        graph: Output of :func:`steinerweb.graph.annotated.build_annotated_graph`.
        config: Only ``progress_log_interval`` is consulted.

    Returns:
        SearchResult with the raw solution (edge indices, possibly repeated).
    """
    cfg = config or DEFAULT_CONFIG
    result = SearchResult(required=len(graph.required))

    while result.solved < result.required:
        active, merged = _run_pass(graph, result)
        result.rounds += 1
        if cfg.should_log_progress(result.rounds):
            logger.debug(
                "Search round %d: solved %d/%d, %d merges, %d solution edges",
                result.rounds,
                result.solved,
                result.required,
                result.merges,
                len(result.solution),
            )
        if not active:
            result.exhausted = True
            break

    if result.exhausted and result.solved < result.required:
        logger.info(
            "Search exhausted after %d rounds with %d/%d required nodes solved",
            result.rounds,
            result.solved,
            result.required,
        )
    else:
        logger.debug(
            "Search finished after %d rounds with %d merges",
            result.rounds,
            result.merges,
        )
    return result


def _run_pass(graph: AnnotatedGraph, result: SearchResult) -> Tuple[bool, bool]:
    """Give each unsolved required node one queue step.

    Returns:
        ``(active, merged)``: whether any queue had work, and whether the pass
        was cut short by a merge.
    """
    active = False
    for si in graph.required:
        source = graph.nodes[si]
        if source.in_permanent_web or not source.queue:
            continue
        active = True

        ppath = source.queue.popleft()
        if ppath.endweight > 1:
            ppath.endweight -= 1
            source.queue.append(ppath)
            continue

        if _arrive(graph, source, ppath, result):
            return True, True
    return active, False


def _arrive(
    graph: AnnotatedGraph,
    source: AnnotatedNode,
    ppath: PartialPath,
    result: SearchResult,
) -> bool:
    """Land a partial path on its point and look one edge further.

    Returns:
        True if a merge happened.
    """
    point = graph.nodes[ppath.point]
    path = ppath.path
    point.in_temporary_web = True
    point.witness = Witness(source=source.index, path=path)

    assert source.queue is not None
    for ei in point.outgoing:
        edge = graph.edges[ei]
        to = graph.nodes[edge.dst]

        if (to.required and to is not source) or to.in_permanent_web:
            added = path + (ei,)
            graph.mark_permanent(path)
            edge.in_permanent_web = True
            # Credits one even when both ends were unsolved.
            _record_merge(graph, result, added, to, credit=1, kind="terminal")
            return True

        if to.in_temporary_web:
            assert to.witness is not None
            if to.witness.source == source.index:
                continue
            added = path + to.witness.path + (ei,)
            graph.mark_permanent(added)
            _record_merge(graph, result, added, to, credit=2, kind="collision")
            return True

        source.queue.append(
            PartialPath(point=to.index, path=path + (ei,), endweight=edge.weight)
        )
    return False


def _record_merge(
    graph: AnnotatedGraph,
    result: SearchResult,
    added: PathIndices,
    to: AnnotatedNode,
    credit: int,
    kind: str,
) -> None:
    to.in_permanent_web = True
    result.solution.extend(added)
    result.solved += credit
    result.merges += 1
    logger.debug(
        "%s merge at %r: +%d edges, solved %d/%d",
        kind,
        to.node,
        len(added),
        result.solved,
        result.required,
    )
