"""Record types shared across the steinerweb pipeline.

Caller-facing:
    Edge: a ready-made edge record for callers without their own edge type.
    SteinerResult: final output of :func:`steinerweb.steiner.solve`.

Search-internal (index based; indices point into an ``AnnotatedGraph`` arena):
    PartialPath, Witness, SearchResult.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple

# Index of a node or edge inside an AnnotatedGraph arena
NodeIndex = int
EdgeIndex = int
PathIndices = Tuple[EdgeIndex, ...]


@dataclass(eq=False)
class Edge:
    """Directed weighted edge supplied by a caller.

    Compared by identity so that two equal-looking edges stay distinct,
    mirroring how arbitrary caller objects are treated.

    Attributes:
        source: Source node object.
        target: Destination node object.
        weight: Positive integer weight.
        data: Free-form metadata, ignored by the search.
    """

    source: Any
    target: Any
    weight: int
    data: Dict[str, Any] = field(default_factory=dict)


def edge_fields(edge: Any) -> Tuple[Any, Any, Any]:
    """Extract ``(source, target, weight)`` from a caller edge record.

    Accepted shapes:
      - a mapping with ``from``/``to`` (or ``source``/``target``) and ``weight``;
      - any object with ``source``, ``target`` and ``weight`` attributes
        (including :class:`Edge`).

    Raises:
        TypeError: If the record has neither shape.
    """
    if isinstance(edge, Mapping):
        if "from" in edge and "to" in edge:
            src, dst = edge["from"], edge["to"]
        elif "source" in edge and "target" in edge:
            src, dst = edge["source"], edge["target"]
        else:
            raise TypeError(
                f"Edge mapping needs 'from'/'to' or 'source'/'target' keys: {edge!r}"
            )
        if "weight" not in edge:
            raise TypeError(f"Edge mapping has no 'weight': {edge!r}")
        return src, dst, edge["weight"]

    try:
        return edge.source, edge.target, edge.weight
    except AttributeError as exc:
        raise TypeError(
            f"Unsupported edge record of type {type(edge).__name__}: {edge!r}"
        ) from exc


@dataclass
class PartialPath:
    """One in-flight candidate path of a source's expansion.

    Attributes:
        point: Node the path leads to.
        path: Edges walked from the owning source, in order.
        endweight: Queue turns left before the path arrives at ``point``.
    """

    point: NodeIndex
    path: PathIndices
    endweight: int


@dataclass(frozen=True)
class Witness:
    """Which source last arrived at a node, and by which path."""

    source: NodeIndex
    path: PathIndices


@dataclass
class SearchResult:
    """Raw outcome of the frontier search.

    Attributes:
        solution: Edge indices in merge order; may repeat.
        solved: Value of the solved-required counter at termination.
        required: Number of distinct required nodes.
        rounds: Completed passes over the required nodes.
        merges: Merge events recorded.
        exhausted: True when the search stopped because no queue had work left.
    """

    solution: List[EdgeIndex] = field(default_factory=list)
    solved: int = 0
    required: int = 0
    rounds: int = 0
    merges: int = 0
    exhausted: bool = False


@dataclass
class SteinerResult:
    """Final outcome of a Steiner tree computation.

    Attributes:
        edges: Caller edge objects, no two with the same ordered endpoints.
        total_weight: Sum of the weights of ``edges``.
        connected: True when all required nodes share one undirected component
            of ``edges`` (trivially True for zero or one required node).
        search: Statistics of the frontier search.
        repair_edges: Edges appended by the repair step, before deduplication.
    """

    edges: List[Any]
    total_weight: int
    connected: bool
    search: SearchResult
    repair_edges: int = 0

    def endpoints(self) -> List[Tuple[Any, Any]]:
        """Return ``(source, target)`` for every edge, in order."""
        return [edge_fields(e)[:2] for e in self.edges]
