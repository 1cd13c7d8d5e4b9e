"""NetworkX adapter.

Example:
    >>> import networkx as nx
    >>> from steinerweb.lib.nx import steiner_subgraph
    >>>
    >>> G = nx.Graph()
    >>> G.add_edge("A", "B", weight=2)
    >>> G.add_edge("B", "C", weight=3)
    >>> G.add_edge("A", "D", weight=4)
    >>> G.add_edge("C", "D", weight=4)
    >>> sorted(steiner_subgraph(G, ["A", "C"]).edges())
    [('A', 'B'), ('B', 'C')]
"""

from __future__ import annotations

from typing import Any, Dict, Hashable, Iterable, List, Optional, Tuple

import networkx as nx

from steinerweb.config import SteinerConfig
from steinerweb.steiner import approx_steiner
from steinerweb.types import Edge


def _check_graph(G: Any) -> None:
    if not isinstance(G, nx.Graph):
        raise TypeError(
            f"Expected NetworkX graph (Graph, DiGraph, MultiGraph, MultiDiGraph), "
            f"got {type(G).__name__}"
        )


def from_networkx(
    G: nx.Graph,
    *,
    weight_attr: str = "weight",
    default_weight: int = 1,
) -> Tuple[List[Hashable], List[Edge]]:
    """Convert a NetworkX graph into ``(nodes, edges)`` for :func:`approx_steiner`.

    Node order follows ``G.nodes``. Edge endpoints are the very node objects
    stored in ``G`` so identity matching holds even if equal-but-distinct
    objects were used when the edges were added. Undirected graphs contribute
    each edge in both directions.

    Each :class:`Edge` keeps ``key`` (multigraph key or None) and ``reversed``
    (True for the synthesized direction of an undirected edge) in ``data``.

    Args:
        G: Any NetworkX graph.
        weight_attr: Edge attribute holding the weight.
        default_weight: Weight used when the attribute is missing.

    Returns:
        Tuple of (nodes, edges).

    Raises:
        TypeError: If G is not a NetworkX graph.
    """
    _check_graph(G)

    canon: Dict[Hashable, Hashable] = {n: n for n in G.nodes}
    nodes = list(canon.values())

    if G.is_multigraph():
        edges_iter: Iterable = G.edges(keys=True, data=True)
    else:
        edges_iter = ((u, v, None, d) for u, v, d in G.edges(data=True))

    edges: List[Edge] = []
    for u, v, key, data in edges_iter:
        src, dst = canon[u], canon[v]
        weight = data.get(weight_attr, default_weight)
        edges.append(Edge(src, dst, weight, {"key": key, "reversed": False}))
        if not G.is_directed() and src is not dst:
            edges.append(Edge(dst, src, weight, {"key": key, "reversed": True}))
    return nodes, edges


def steiner_subgraph(
    G: nx.Graph,
    terminals: Iterable[Hashable],
    *,
    weight_attr: str = "weight",
    default_weight: int = 1,
    config: Optional[SteinerConfig] = None,
) -> nx.Graph:
    """Return a view of ``G`` restricted to an approximate Steiner tree.

    The view holds the chosen edges only, so a lone terminal yields an empty
    graph.

    Raises:
        TypeError: If G is not a NetworkX graph.
        ValueError: If a terminal is not a node of G, or on invalid weights.
    """
    _check_graph(G)
    nodes, edges = from_networkx(
        G, weight_attr=weight_attr, default_weight=default_weight
    )
    canon = {n: n for n in nodes}
    required = []
    for t in terminals:
        if t not in canon:
            raise ValueError(f"Terminal {t!r} is not a node of the graph.")
        required.append(canon[t])

    chosen = approx_steiner(nodes, edges, required, config=config)
    if G.is_multigraph():
        refs: List[Tuple[Any, ...]] = [
            (e.source, e.target, e.data["key"]) for e in chosen
        ]
    else:
        refs = [(e.source, e.target) for e in chosen]
    return G.edge_subgraph(refs)
