from __future__ import annotations

from pathlib import Path

import pytest

pytest.importorskip("matplotlib")

from disksort.benchmark import run_benchmark
from disksort.viz import plot_swap_counts


def test_plot_swap_counts_writes_file(tmp_path: Path) -> None:
    records = run_benchmark([1, 2, 3], ["sequential", "lawnmower"])
    out = tmp_path / "plots" / "swaps.png"

    plot_swap_counts(records, out)

    assert out.exists()
    assert out.stat().st_size > 0


def test_plot_swap_counts_requires_data(tmp_path: Path) -> None:
    with pytest.raises(RuntimeError):
        plot_swap_counts([], tmp_path / "empty.png")
