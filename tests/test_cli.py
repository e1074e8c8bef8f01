import json

import pytest

from linsys.cli import build_parser, main, run_solve
from linsys.config import MatrixDocument


def test_example_then_solve(tmp_path, capsys):
    path = tmp_path / "system.json"
    assert main(["example", "2 x 2 system", str(path)]) == 0
    assert path.exists()

    assert main(["solve", str(path), "--scale", "2"]) == 0
    out = capsys.readouterr().out
    assert "x1 = 2.00" in out
    assert "x2 = 1.00" in out
    assert "Unresolved" not in out


def test_solve_reports_unresolved_pivot(tmp_path, capsys):
    path = tmp_path / "zero.json"
    main(["example", "Zero pivot", str(path)])
    capsys.readouterr()

    assert main(["solve", str(path)]) == 0
    assert "Unresolved pivot(s) in column(s): 1" in capsys.readouterr().out

    assert main(["solve", str(path), "--pivoting"]) == 0
    out = capsys.readouterr().out
    assert "Unresolved" not in out
    assert "x1 = 2.0000" in out


def test_solve_writes_output(tmp_path):
    source = tmp_path / "thirds.json"
    target = tmp_path / "solved.json"
    main(["example", "One third", str(source)])

    code = main(["solve", str(source), "-p", "4", "-s", "4", "-r", "down", "-o", str(target)])
    assert code == 0

    solved = MatrixDocument.from_json(target)
    assert solved.cells == [["1.0000", "0.3333"]]
    assert solved.precision == 4
    assert solved.rounding.name == "DOWN"


def test_solve_missing_document(tmp_path, capsys):
    assert main(["solve", str(tmp_path / "missing.json")]) == 1
    assert "No such document" in capsys.readouterr().out


def test_solve_invalid_json(tmp_path, capsys):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    assert main(["solve", str(path)]) == 1
    assert "Could not read" in capsys.readouterr().out


def test_solve_bad_cell(tmp_path, capsys):
    path = tmp_path / "bad.json"
    path.write_text(json.dumps({"cells": [["1", "abc"]]}), encoding="utf-8")
    assert main(["solve", str(path)]) == 1
    assert "Solve failed" in capsys.readouterr().out


def test_new_document(tmp_path):
    path = tmp_path / "blank.json"
    assert main(["new", "2", "3", str(path)]) == 0
    document = MatrixDocument.from_json(path)
    assert document.cells == [["0", "0", "0"], ["0", "0", "0"]]


def test_new_rejects_empty_size(tmp_path, capsys):
    path = tmp_path / "blank.json"
    assert main(["new", "0", "3", str(path)]) == 1
    assert not path.exists()
    assert "Cannot create matrix" in capsys.readouterr().out


def test_unknown_example_is_rejected_by_parser(tmp_path):
    with pytest.raises(SystemExit):
        build_parser().parse_args(["example", "Nope", str(tmp_path / "x.json")])


def test_unknown_rounding_mode_is_rejected(tmp_path, capsys):
    source = tmp_path / "thirds.json"
    target = tmp_path / "solved.json"
    main(["example", "One third", str(source)])

    with pytest.raises(SystemExit) as excinfo:
        main(["solve", str(source), "-p", "4", "-r", "flor", "-o", str(target)])
    assert excinfo.value.code == 2
    assert "unknown rounding mode" in capsys.readouterr().err
    assert not target.exists()


def test_run_solve_rejects_unknown_rounding(tmp_path, capsys):
    source = tmp_path / "thirds.json"
    main(["example", "One third", str(source)])
    capsys.readouterr()

    assert run_solve(str(source), rounding="sideways") == 1
    assert "Unknown rounding mode" in capsys.readouterr().out
