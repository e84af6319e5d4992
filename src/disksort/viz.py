"""Plot swap and pass growth per algorithm."""

from __future__ import annotations

from collections import defaultdict
from pathlib import Path
from typing import Sequence

try:  # pragma: no cover - optional dependency
    import matplotlib

    matplotlib.use("Agg")
    import matplotlib.pyplot as plt
except ImportError:  # pragma: no cover - optional
    plt = None

from .benchmark import BenchmarkRecord


def plot_swap_counts(records: Sequence[BenchmarkRecord], out_path: Path) -> None:
    if plt is None:
        raise RuntimeError("matplotlib is required for visualisation")
    if not records:
        raise RuntimeError("No data to plot")

    by_algorithm: dict[str, list[BenchmarkRecord]] = defaultdict(list)
    for record in records:
        by_algorithm[record.algorithm].append(record)

    fig, (ax_swaps, ax_passes) = plt.subplots(1, 2, figsize=(10, 4))
    for name, rows in by_algorithm.items():
        rows = sorted(rows, key=lambda r: r.light_count)
        xs = [r.light_count for r in rows]
        ax_swaps.plot(xs, [r.swap_count for r in rows], marker="o", label=name)
        ax_passes.plot(xs, [r.passes for r in rows], marker="o", label=name)
    ax_swaps.set_xlabel("light disks")
    ax_swaps.set_ylabel("swaps")
    ax_swaps.set_title("Swaps")
    ax_passes.set_xlabel("light disks")
    ax_passes.set_ylabel("passes")
    ax_passes.set_title("Passes")
    ax_swaps.legend()
    ax_passes.legend()
    out_path.parent.mkdir(parents=True, exist_ok=True)
    fig.tight_layout()
    fig.savefig(out_path)
    plt.close(fig)
