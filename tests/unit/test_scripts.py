from __future__ import annotations

import json
import sys

import pytest

from experiments.microbench.random_trees import build_random_spec
from experiments.microbench.random_trees import main as random_trees_main
from scripts.dump_schedule import main
from tiny_ion.schedule.flatten import build_schedule
from tiny_ion.tree.traversal import depth


def _run(monkeypatch, capsys, *argv: str):
    monkeypatch.setattr(sys, "argv", ["dump_schedule.py", "--quiet-warnings", *argv])
    code = main()
    return code, capsys.readouterr().out


def test_dump_schedule_table(monkeypatch, capsys) -> None:
    code, out = _run(monkeypatch, capsys)
    assert code == 0
    assert out.splitlines()[0].split()[0] == "name"
    assert "Foo_0_20" in out


def test_dump_schedule_json(monkeypatch, capsys) -> None:
    code, out = _run(monkeypatch, capsys, "--format", "json", "--check-names", "--identifiers")
    assert code == 0
    assert json.loads(out)[0]["effects"][0] == "period 20a"


def test_dump_schedule_report_and_tree(monkeypatch, capsys) -> None:
    code, out = _run(monkeypatch, capsys, "--format", "report")
    assert code == 0
    assert "Hyperperiod: 60000" in out

    code, out = _run(monkeypatch, capsys, "--format", "tree")
    assert code == 0
    assert out.startswith("Node {")


@pytest.mark.parametrize("seed", [0, 1, 2])
def test_random_spec_is_reproducible(seed: int) -> None:
    first = build_random_spec(3, 3, 10, seed=seed)
    second = build_random_spec(3, 3, 10, seed=seed)
    assert first == second
    assert depth(first.root()) <= 3 * 2 + 2
    assert build_schedule(first).entries == build_schedule(second).entries


@pytest.mark.parametrize("repeats", ["0", "-3"])
def test_random_trees_rejects_non_positive_repeats(monkeypatch, capsys, repeats: str) -> None:
    monkeypatch.setattr(sys, "argv", ["random_trees.py", "--profile", "small", "--repeats", repeats])
    with pytest.raises(SystemExit) as info:
        random_trees_main()
    assert info.value.code == 2
    assert "--repeats must be at least 1" in capsys.readouterr().err


def test_random_trees_runs_small_profile(monkeypatch, capsys) -> None:
    monkeypatch.setattr(sys, "argv", ["random_trees.py", "--profile", "small", "--repeats", "1"])
    random_trees_main()
    assert "Flatten Microbenchmark" in capsys.readouterr().out
