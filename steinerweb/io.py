"""Load Steiner problems from YAML (or JSON) files.

File shape::

    nodes: [A, B, C, D]
    edges:
      - {from: A, to: B, weight: 2}
      - {from: B, to: C, weight: 3, label: backbone}
    required: [A, C]
    bidirectional: true   # optional, adds the reverse of every edge

Extra keys on an edge are kept in ``Edge.data``. Node names are resolved to a
single canonical object per node, so the identity matching of the solver
sees one object per name.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Union

import yaml

from steinerweb.logging import get_logger
from steinerweb.types import Edge

logger = get_logger(__name__)

_EDGE_KEYS = {"from", "to", "weight"}
_TOP_KEYS = {"nodes", "edges", "required", "bidirectional"}


@dataclass
class Problem:
    """A Steiner problem ready to pass to :func:`steinerweb.steiner.solve`."""

    nodes: List[Any] = field(default_factory=list)
    edges: List[Edge] = field(default_factory=list)
    required: List[Any] = field(default_factory=list)

    def summary(self) -> Dict[str, Any]:
        """Counts and weight range, for logs and ``inspect``."""
        weights = [e.weight for e in self.edges]
        return {
            "nodes": len(self.nodes),
            "edges": len(self.edges),
            "required": len(self.required),
            "min_weight": min(weights) if weights else None,
            "max_weight": max(weights) if weights else None,
        }


def _check_name(value: Any, where: str) -> None:
    if isinstance(value, (dict, list)) or value is None:
        raise ValueError(f"{where} must be a scalar node name, got {value!r}")


def parse_problem(data: Any, bidirectional: bool = False) -> Problem:
    """Build a Problem from an already-parsed mapping.

    Args:
        data: Mapping with ``nodes``, ``edges`` and ``required``.
        bidirectional: Add reverse edges even if the mapping does not ask to.

    Raises:
        ValueError: On any shape problem; the message names the entry.
    """
    if not isinstance(data, dict):
        raise ValueError("The problem must map to a dictionary at top-level.")
    unknown = set(data) - _TOP_KEYS
    if unknown:
        raise ValueError(f"Unrecognized top-level keys: {sorted(map(str, unknown))}")
    for key in ("nodes", "edges", "required"):
        if not isinstance(data.get(key), list):
            raise ValueError(f"'{key}' must be a list")

    canon: Dict[Any, Any] = {}
    for name in data["nodes"]:
        _check_name(name, "Node")
        if name in canon:
            raise ValueError(f"Duplicate node name {name!r}")
        canon[name] = name

    def resolve(name: Any, where: str) -> Any:
        _check_name(name, where)
        if name not in canon:
            raise ValueError(f"{where} {name!r} is not declared under 'nodes'")
        return canon[name]

    edges: List[Edge] = []
    for i, entry in enumerate(data["edges"]):
        if not isinstance(entry, dict):
            raise ValueError(
                f"Edge #{i} must be a mapping with 'from', 'to' and 'weight'"
            )
        missing = _EDGE_KEYS - set(entry)
        if missing:
            raise ValueError(f"Edge #{i} is missing {sorted(missing)}")
        extra = {k: v for k, v in entry.items() if k not in _EDGE_KEYS}
        edges.append(
            Edge(
                resolve(entry["from"], f"Edge #{i} source"),
                resolve(entry["to"], f"Edge #{i} target"),
                entry["weight"],
                extra,
            )
        )

    if bidirectional or data.get("bidirectional", False):
        edges.extend(
            Edge(e.target, e.source, e.weight, {**e.data, "reversed": True})
            for e in list(edges)
        )

    required = [resolve(r, "Required node") for r in data["required"]]
    return Problem(nodes=list(canon.values()), edges=edges, required=required)


def load_problem_yaml(text: str, bidirectional: bool = False) -> Problem:
    """Parse a YAML (or JSON) string into a Problem."""
    data = yaml.safe_load(text)
    if data is None:
        raise ValueError("The problem file is empty.")
    return parse_problem(data, bidirectional=bidirectional)


def load_problem(path: Union[str, Path], bidirectional: bool = False) -> Problem:
    """Read and parse a problem file.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: On malformed content.
    """
    path = Path(path)
    problem = load_problem_yaml(path.read_text(), bidirectional=bidirectional)
    logger.debug("Loaded %s: %s", path, problem.summary())
    return problem
