"""steinerweb: approximate Steiner trees in weighted directed graphs.

Every required node grows its own weighted breadth-first search; searches
that meet are merged into the solution, leftover islands are joined by a
repair step, and the caller gets back its own edge objects.

Primary API:
    approx_steiner() - Edges of an approximate Steiner tree
    solve() - Same, with search statistics (SteinerResult)
    Edge - Ready-made edge record
    SteinerConfig - Pipeline settings
    from_networkx(), steiner_subgraph() - NetworkX integration

Example:
    from steinerweb import Edge, approx_steiner

    a, b, c = "A", "B", "C"
    edges = [Edge(a, b, 2), Edge(b, a, 2), Edge(b, c, 3), Edge(c, b, 3)]
    tree = approx_steiner([a, b, c], edges, required=[a, c])
"""

from __future__ import annotations

from steinerweb import cli, logging
from steinerweb._version import __version__
from steinerweb.config import DEFAULT_CONFIG, SteinerConfig
from steinerweb.io import Problem, load_problem, load_problem_yaml
from steinerweb.lib.nx import from_networkx, steiner_subgraph
from steinerweb.steiner import approx_steiner, solve
from steinerweb.types import Edge, SearchResult, SteinerResult

__all__ = [
    # Version
    "__version__",
    # Solver
    "approx_steiner",
    "solve",
    # Types
    "Edge",
    "SearchResult",
    "SteinerResult",
    # Configuration
    "SteinerConfig",
    "DEFAULT_CONFIG",
    # Problem files
    "Problem",
    "load_problem",
    "load_problem_yaml",
    # Library integrations (NetworkX)
    "from_networkx",
    "steiner_subgraph",
    # Utilities
    "cli",
    "logging",
]
