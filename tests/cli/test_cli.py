import json
from pathlib import Path

import pytest

from steinerweb import cli

DIAMOND = Path(__file__).resolve().parent.parent / "data" / "diamond.yaml"


def extract_json_from_stdout(output: str) -> str:
    """Return the first balanced JSON object found in stdout."""
    start = output.find("{")
    if start == -1:
        return output

    depth = 0
    for i in range(start, len(output)):
        if output[i] == "{":
            depth += 1
        elif output[i] == "}":
            depth -= 1
            if depth == 0:
                return output[start : i + 1]
    return output[start:]


def test_solve_prints_json(capsys) -> None:
    cli.main(["--quiet", "solve", str(DIAMOND)])
    payload = json.loads(extract_json_from_stdout(capsys.readouterr().out))

    assert payload["edges"] == [
        {"from": "A", "to": "B", "weight": 2},
        {"from": "B", "to": "C", "weight": 3},
    ]
    assert payload["total_weight"] == 5
    assert payload["connected"] is True
    assert payload["repair_edges"] == 0


def test_solve_writes_output_file(tmp_path: Path) -> None:
    out = tmp_path / "nested" / "result.json"
    cli.main(["solve", str(DIAMOND), "--output", str(out)])

    data = json.loads(out.read_text())
    assert data["total_weight"] == 5
    assert len(data["edges"]) == 2


def test_solve_no_repair_flag(tmp_path: Path) -> None:
    problem = tmp_path / "stranded.yaml"
    problem.write_text(
        "nodes: [A, B, C, D]\n"
        "edges:\n"
        "  - {from: A, to: B, weight: 1}\n"
        "  - {from: D, to: C, weight: 1}\n"
        "  - {from: B, to: D, weight: 1}\n"
        "required: [A, B, C]\n"
    )
    repaired = tmp_path / "repaired.json"
    bare = tmp_path / "bare.json"

    cli.main(["solve", str(problem), "-o", str(repaired)])
    cli.main(["solve", str(problem), "-o", str(bare), "--no-repair"])

    assert json.loads(repaired.read_text())["connected"] is True
    bare_data = json.loads(bare.read_text())
    assert bare_data["connected"] is False
    assert bare_data["edges"] == [{"from": "A", "to": "B", "weight": 1}]


def test_solve_bidirectional_flag(tmp_path: Path) -> None:
    problem = tmp_path / "one_way.yaml"
    problem.write_text(
        "nodes: [A, B]\nedges: [{from: B, to: A, weight: 2}]\nrequired: [A, B]\n"
    )
    out = tmp_path / "out.json"

    cli.main(["solve", str(problem), "--bidirectional", "-o", str(out)])

    # A's search runs first and uses the added reverse edge
    assert json.loads(out.read_text())["edges"] == [
        {"from": "A", "to": "B", "weight": 2}
    ]


def test_solve_missing_file_exits_1(tmp_path: Path, capsys) -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["solve", str(tmp_path / "missing.yaml")])
    assert exc_info.value.code == 1
    assert "not found" in capsys.readouterr().out


def test_solve_invalid_weight_exits_1(tmp_path: Path, capsys) -> None:
    problem = tmp_path / "bad.yaml"
    problem.write_text(
        "nodes: [A, B]\nedges: [{from: A, to: B, weight: 0}]\nrequired: [A, B]\n"
    )
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["solve", str(problem)])
    assert exc_info.value.code == 1
    assert "ValueError" in capsys.readouterr().out


def test_inspect_prints_summary(capsys) -> None:
    cli.main(["inspect", str(DIAMOND)])
    out = capsys.readouterr().out

    assert "Nodes: 4" in out
    assert "Edges: 8" in out
    assert "Required: 2" in out
    assert "Weight range: 2 .. 4" in out
    assert "required" in out and "out" in out


def test_inspect_invalid_file_exits_1(tmp_path: Path) -> None:
    problem = tmp_path / "bad.yaml"
    problem.write_text("nodes: A\n")
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["inspect", str(problem)])
    assert exc_info.value.code == 1


def test_no_arguments_prints_help(capsys) -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main([])
    assert exc_info.value.code == 0
    assert "usage: steinerweb" in capsys.readouterr().out


def test_format_table_alignment() -> None:
    table = cli._format_table(["name", "n"], [["A", "1"], ["long-name", "22"]])
    lines = table.splitlines()
    assert len(lines) == 4
    assert len({len(line) for line in lines}) == 1
    assert cli._format_table(["a"], []) == ""
