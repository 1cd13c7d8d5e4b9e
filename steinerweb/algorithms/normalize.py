"""Final cleanup of a solution before it is handed back to the caller."""

from __future__ import annotations

from typing import Any, List, Set, Tuple

from steinerweb.graph.annotated import AnnotatedGraph
from steinerweb.types import EdgeIndex, NodeIndex


def uniqueify(solution: List[EdgeIndex], graph: AnnotatedGraph) -> List[EdgeIndex]:
    """Drop entries whose ordered (source, target) pair was already seen.

    The first occurrence wins. Parallel edges between the same ordered pair
    count as duplicates; the two directions of a pair do not.
    """
    seen: Set[Tuple[NodeIndex, NodeIndex]] = set()
    out: List[EdgeIndex] = []
    for ei in solution:
        e = graph.edges[ei]
        pair = (e.src, e.dst)
        if pair in seen:
            continue
        seen.add(pair)
        out.append(ei)
    return out


def unwrap(solution: List[EdgeIndex], graph: AnnotatedGraph) -> List[Any]:
    """Map edge indices back to the caller's edge objects."""
    return [graph.edges[ei].edge for ei in solution]


def total_weight(solution: List[EdgeIndex], graph: AnnotatedGraph) -> int:
    return sum(graph.edges[ei].weight for ei in solution)
