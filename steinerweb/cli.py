"""Command-line interface for steinerweb."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from time import perf_counter
from typing import Any, Dict, List, Optional

from steinerweb.config import SteinerConfig
from steinerweb.io import Problem, load_problem
from steinerweb.logging import get_logger, set_global_log_level
from steinerweb.steiner import solve
from steinerweb.types import SteinerResult, edge_fields

logger = get_logger(__name__)


def _format_table(headers: List[str], rows: List[List[str]], min_width: int = 6) -> str:
    """Format rows as an indented ASCII table; empty string when no rows."""
    if not rows:
        return ""

    all_rows = [headers] + rows
    widths = [
        max(min_width, max(len(str(row[i])) for row in all_rows))
        for i in range(len(headers))
    ]

    def fmt(row: List[str]) -> str:
        return "   " + " | ".join(f"{str(v):<{widths[i]}}" for i, v in enumerate(row))

    lines = [fmt(headers), "   " + "-+-".join("-" * w for w in widths)]
    lines.extend(fmt(row) for row in rows)
    return "\n".join(lines)


def _format_duration(seconds: float) -> str:
    """Return a short duration string, e.g. ``12.3 ms`` or ``1.23 s``."""
    if seconds < 1.0:
        return f"{seconds * 1000.0:.1f} ms"
    return f"{seconds:.2f} s"


def _result_to_dict(result: SteinerResult) -> Dict[str, Any]:
    edges = []
    for e in result.edges:
        src, dst, weight = edge_fields(e)
        edges.append({"from": src, "to": dst, "weight": weight})
    return {
        "edges": edges,
        "total_weight": result.total_weight,
        "connected": result.connected,
        "rounds": result.search.rounds,
        "merges": result.search.merges,
        "repair_edges": result.repair_edges,
    }


def _solve_problem(
    path: Path,
    output: Optional[Path],
    no_repair: bool,
    bidirectional: bool,
) -> None:
    """Solve a problem file and print or write the JSON result."""
    logger.info(f"Loading problem from: {path}")
    start = perf_counter()
    try:
        problem = load_problem(path, bidirectional=bidirectional)
        result = solve(
            problem.nodes,
            problem.edges,
            problem.required,
            config=SteinerConfig(repair_enabled=not no_repair),
        )
    except FileNotFoundError:
        logger.error(f"Problem file not found: {path}")
        print(f"ERROR: Problem file not found: {path}")
        sys.exit(1)
    except (ValueError, TypeError) as e:
        logger.error(f"Failed to solve problem: {type(e).__name__}: {e}")
        print(f"ERROR: Failed to solve problem: {type(e).__name__}: {e}")
        sys.exit(1)

    payload = json.dumps(_result_to_dict(result), indent=2, default=str)
    if output is not None:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(payload + "\n")
        logger.info(f"Result written to: {output}")
    else:
        print(payload)

    logger.info(
        f"Solved in {_format_duration(perf_counter() - start)}: "
        f"{len(result.edges)} edges, total weight {result.total_weight}"
    )


def _inspect_problem(path: Path, bidirectional: bool) -> None:
    """Validate a problem file and print its key characteristics."""
    try:
        problem = load_problem(path, bidirectional=bidirectional)
    except FileNotFoundError:
        logger.error(f"Problem file not found: {path}")
        print(f"ERROR: Problem file not found: {path}")
        sys.exit(1)
    except ValueError as e:
        logger.error(f"Invalid problem file: {e}")
        print(f"ERROR: Invalid problem file: {e}")
        sys.exit(1)

    summary = problem.summary()
    print(f"   Nodes: {summary['nodes']:,}")
    print(f"   Edges: {summary['edges']:,}")
    print(f"   Required: {summary['required']:,}")
    if summary["edges"]:
        print(f"   Weight range: {summary['min_weight']} .. {summary['max_weight']}")
    table = _format_table(["required", "out", "in"], _degree_rows(problem))
    if table:
        print("\n" + table)


def _degree_rows(problem: Problem) -> List[List[str]]:
    out_deg = {id(n): 0 for n in problem.nodes}
    in_deg = dict(out_deg)
    for e in problem.edges:
        out_deg[id(e.source)] += 1
        in_deg[id(e.target)] += 1
    return [
        [str(r), str(out_deg[id(r)]), str(in_deg[id(r)])] for r in problem.required
    ]


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``steinerweb`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="steinerweb",
        description="Approximate Steiner trees for weighted directed graphs.",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log warnings and errors"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{solve,inspect}",
        help="Available commands",
    )

    solve_parser = subparsers.add_parser("solve", help="Solve a problem file")
    solve_parser.add_argument("problem", type=Path, help="Path to problem YAML/JSON")
    solve_parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        help="Write the JSON result to this file instead of stdout",
    )
    solve_parser.add_argument(
        "--no-repair",
        action="store_true",
        help="Skip the connectivity repair step",
    )

    inspect_parser = subparsers.add_parser(
        "inspect", help="Validate a problem file and show its size"
    )
    inspect_parser.add_argument(
        "problem", type=Path, help="Path to problem YAML/JSON"
    )

    for p in (solve_parser, inspect_parser):
        p.add_argument(
            "--bidirectional",
            "-b",
            action="store_true",
            help="Add the reverse of every edge before solving",
        )

    effective_args = sys.argv[1:] if argv is None else argv
    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    if args.verbose:
        set_global_log_level(logging.DEBUG)
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_global_log_level(logging.WARNING)
    else:
        set_global_log_level(logging.INFO)

    if args.command == "solve":
        _solve_problem(
            path=args.problem,
            output=args.output,
            no_repair=args.no_repair,
            bidirectional=args.bidirectional,
        )
    elif args.command == "inspect":
        _inspect_problem(args.problem, bidirectional=args.bidirectional)


if __name__ == "__main__":
    main()
