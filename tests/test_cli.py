"""Tests for the disksort command line driver."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from disksort.cli import main


def test_sort_prints_rows_and_swaps(capsys) -> None:
    main(["sort", "--light-count", "4", "--algorithm", "lawnmower"])
    out = capsys.readouterr().out

    assert "before: L D L D L D L D" in out
    assert "after:  L L L L D D D D" in out
    assert "swaps:  6" in out


def test_sort_left_to_right_alias(capsys) -> None:
    main(["--log-level", "debug", "sort", "--light-count", "2", "--algorithm", "left-to-right"])
    out = capsys.readouterr().out

    assert "after:  L L D D" in out
    assert "swaps:  1" in out


def test_sort_rejects_zero_light_count() -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["sort", "--light-count", "0"])
    assert excinfo.value.code == 2


def test_compare_reports_agreement(capsys) -> None:
    main(["compare", "--light-count", "4"])
    out = capsys.readouterr().out

    assert "sequential swaps=6 passes=3" in out
    assert "lawnmower  swaps=6 passes=2" in out
    assert "final rows agree: yes" in out


def test_benchmark_writes_json(tmp_path: Path) -> None:
    out = tmp_path / "reports" / "bench.json"
    main(["benchmark", "--sizes", "1,2", "--repeats", "1", "--out", str(out)])

    payload = json.loads(out.read_text(encoding="utf-8"))
    assert len(payload) == 4
    assert {entry["algorithm"] for entry in payload} == {"sequential", "lawnmower"}


def test_benchmark_table(capsys, tmp_path: Path) -> None:
    config = tmp_path / "bench.yaml"
    config.write_text("benchmark:\n  sizes: [3]\n  algorithms: [lawnmower]\n", encoding="utf-8")

    main(["benchmark", "--config", str(config), "--repeats", "1"])
    out = capsys.readouterr().out

    assert "lawnmower" in out
    assert "sequential" not in out
    assert "yes" in out


def test_benchmark_rejects_bad_sizes() -> None:
    with pytest.raises(SystemExit):
        main(["benchmark", "--sizes", "1,x"])
