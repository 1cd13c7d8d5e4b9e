"""Annotated graph arena consumed by the frontier search.

`AnnotatedGraph` wraps every caller node and edge in a mutable record that
carries search state, keeping a back-reference to the caller's object so
results can be reported in the caller's terms. Records live in two lists and
refer to each other by integer index only.

Caller nodes are matched by identity (``is``), never by equality. The same
object may not appear twice in the node list.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from numbers import Integral
from typing import Any, Deque, Dict, Iterable, List, Optional, Sequence

from steinerweb.logging import get_logger
from steinerweb.types import (
    EdgeIndex,
    NodeIndex,
    PartialPath,
    Witness,
    edge_fields,
)

logger = get_logger(__name__)


@dataclass(eq=False)
class AnnotatedNode:
    """Search-side wrapper of one caller node.

    Attributes:
        index: Position in ``AnnotatedGraph.nodes``.
        node: The caller's node object.
        required: Whether the node is a terminal.
        outgoing: Indices of edges leaving this node, in input order.
        incoming: Indices of edges entering this node, in input order.
        in_permanent_web: Node is part of a confirmed connection.
        in_temporary_web: Node was reached by some expansion.
        witness: Last expansion to arrive here and its path.
        queue: FIFO of partial paths; only required nodes own one.
    """

    index: NodeIndex
    node: Any
    required: bool = False
    outgoing: List[EdgeIndex] = field(default_factory=list)
    incoming: List[EdgeIndex] = field(default_factory=list)
    in_permanent_web: bool = False
    in_temporary_web: bool = False
    witness: Optional[Witness] = None
    queue: Optional[Deque[PartialPath]] = None


@dataclass(eq=False)
class AnnotatedEdge:
    """Search-side wrapper of one caller edge."""

    index: EdgeIndex
    edge: Any
    src: NodeIndex
    dst: NodeIndex
    weight: int
    in_permanent_web: bool = False


@dataclass
class AnnotatedGraph:
    """Arena holding annotated nodes and edges for a single computation.

    Attributes:
        nodes: Annotated nodes in caller order.
        edges: Annotated edges in caller order.
        required: Indices of required nodes in caller node order.
    """

    nodes: List[AnnotatedNode] = field(default_factory=list)
    edges: List[AnnotatedEdge] = field(default_factory=list)
    required: List[NodeIndex] = field(default_factory=list)
    _by_id: Dict[int, NodeIndex] = field(default_factory=dict, repr=False)

    def index_of(self, node: Any) -> NodeIndex:
        """Return the arena index of a caller node.

        Raises:
            KeyError: If the object is not one of the graph's nodes.
        """
        idx = self._by_id.get(id(node))
        if idx is None or self.nodes[idx].node is not node:
            raise KeyError(node)
        return idx

    def __contains__(self, node: Any) -> bool:
        try:
            self.index_of(node)
        except KeyError:
            return False
        return True

    def edge_nodes(self, edge_index: EdgeIndex) -> tuple[AnnotatedNode, AnnotatedNode]:
        """Return the (source, destination) records of an edge."""
        e = self.edges[edge_index]
        return self.nodes[e.src], self.nodes[e.dst]

    def mark_permanent(self, edge_indices: Iterable[EdgeIndex]) -> None:
        """Flag the given edges and their source nodes as part of the web."""
        for ei in edge_indices:
            e = self.edges[ei]
            e.in_permanent_web = True
            self.nodes[e.src].in_permanent_web = True


def check_weight(weight: Any, edge: Any) -> int:
    """Validate an edge weight and return it as ``int``.

    Raises:
        ValueError: If the weight is not a positive integer.
    """
    if isinstance(weight, bool) or not isinstance(weight, Integral):
        raise ValueError(
            f"Edge weight must be a positive integer, got {weight!r} on {edge!r}"
        )
    if weight <= 0:
        raise ValueError(f"Edge weight must be positive, got {weight!r} on {edge!r}")
    return int(weight)


def build_annotated_graph(
    nodes: Sequence[Any],
    edges: Sequence[Any],
    required: Sequence[Any],
) -> AnnotatedGraph:
    """Wrap caller nodes and edges into a fresh `AnnotatedGraph`.

    Every input is validated before any record is created, so a rejected
    input leaves nothing behind.

    Args:
        nodes: Caller node objects in a fixed order.
        edges: Caller edge records (see :func:`steinerweb.types.edge_fields`).
        required: Subset of ``nodes`` (by identity) that must be connected.

    Returns:
        The annotated arena. Required nodes own a queue seeded with their
        zero-length partial path.

    Raises:
        ValueError: On duplicate nodes, edges or required values that reference
            unknown nodes, or weights that are not positive integers.
        TypeError: On edge records with no recognizable endpoints.
    """
    by_id: Dict[int, NodeIndex] = {}
    for i, n in enumerate(nodes):
        if id(n) in by_id:
            raise ValueError(f"Node {n!r} appears more than once in the node list.")
        by_id[id(n)] = i

    def lookup(obj: Any, what: str) -> NodeIndex:
        idx = by_id.get(id(obj))
        if idx is None:
            raise ValueError(f"{what} {obj!r} is not in the node list.")
        return idx

    wired = []
    for e in edges:
        src, dst, weight = edge_fields(e)
        wired.append(
            (
                e,
                lookup(src, "Edge source"),
                lookup(dst, "Edge target"),
                check_weight(weight, e),
            )
        )

    required_idx = {lookup(r, "Required node") for r in required}

    graph = AnnotatedGraph(_by_id=by_id)
    for i, n in enumerate(nodes):
        graph.nodes.append(AnnotatedNode(index=i, node=n, required=i in required_idx))

    for ei, (e, src, dst, weight) in enumerate(wired):
        graph.edges.append(
            AnnotatedEdge(index=ei, edge=e, src=src, dst=dst, weight=weight)
        )
        graph.nodes[src].outgoing.append(ei)
        graph.nodes[dst].incoming.append(ei)

    for xn in graph.nodes:
        if xn.required:
            graph.required.append(xn.index)
            xn.queue = deque([PartialPath(point=xn.index, path=(), endweight=0)])

    logger.debug(
        "Annotated graph: %d nodes, %d edges, %d required",
        len(graph.nodes),
        len(graph.edges),
        len(graph.required),
    )
    return graph
