import os
import sys

import pytest

# Ensure we can import from the project
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from slist.cli import main, parse_op


def run_lines(capsys, argv):
    main(argv)
    return capsys.readouterr().out.splitlines()


def test_parse_op():
    assert parse_op("push:4") == ("push", ["4"])
    assert parse_op("pop") == ("pop", [])
    assert parse_op("insert-at:1:a:b") == ("insert-at", [1, "a:b"])
    assert parse_op("delete-at:2") == ("delete-at", [2])


def test_run_scenario(capsys):
    lines = run_lines(capsys, ["run", "push:4", "delete-at:1", "pop", "--items", "1", "2", "3"])
    assert lines == [
        "start -> size 3 | 1, 2, 3",
        "push 4 -> size 4 | 1, 2, 3, 4",
        "delete-at 1 -> size 3 | 1, 3, 4",
        "pop -> removed 4 | 1, 3",
    ]


def test_run_reports_failures_and_continues(capsys):
    lines = run_lines(capsys, ["run", "shift", "get-at:0", "insert-at:1:x", "find:z", "unshift:a", "get-at:0"])
    assert lines[1:] == [
        "shift -> list is empty | ",
        "get-at 0 -> index out of range | ",
        "insert-at 1 x -> index out of range | ",
        "find z -> not found | ",
        "unshift a -> size 1 | a",
        "get-at 0 -> value a | a",
    ]


def test_run_delete_and_clear_with_separator(capsys):
    lines = run_lines(capsys, ["run", "delete:b", "clear", "--items", "a", "b", "c", "b", "--separator", "|"])
    assert lines == [
        "start -> size 4 | a|b|c|b",
        "delete b -> size 2 | a|c",
        "clear -> size 0 | ",
    ]


@pytest.mark.parametrize("bad", ["bogus", "push", "pop:1", "get-at:x", "insert-at:1"])
def test_run_rejects_malformed_ops(bad, capsys):
    with pytest.raises(SystemExit) as exc:
        main(["run", bad])
    assert exc.value.code == 2
    assert "error" in capsys.readouterr().err


def test_bench_writes_report(tmp_path, capsys):
    out = tmp_path / "report.csv"
    main(["bench", "--path", str(out), "--base-input", "2", "--steps", "1", "--iterations", "1"])
    assert out.exists()
    assert f"to {out}" in capsys.readouterr().out


def test_bench_rejects_non_positive_steps(tmp_path):
    with pytest.raises(SystemExit):
        main(["bench", "--path", str(tmp_path / "x.csv"), "--steps", "0"])
