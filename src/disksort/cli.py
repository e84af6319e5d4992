"""Command line interface for disksort."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .benchmark import records_to_json, run_benchmark
from .config import load_config, load_settings
from .row import build_alternating_row
from .sorters import SORTERS, get_sorter, sort_lawnmower, sort_sequential
from .viz import plot_swap_counts

logger = logging.getLogger(__name__)


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value!r}") from exc
    if number < 1:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value!r}")
    return number


def _parse_sizes(raw: str) -> list[int]:
    return [_positive_int(part.strip()) for part in raw.split(",") if part.strip()]


def _benchmark_cfg(args: argparse.Namespace) -> dict:
    overrides: dict = {"benchmark": {}}
    if args.sizes:
        try:
            overrides["benchmark"]["sizes"] = _parse_sizes(args.sizes)
        except argparse.ArgumentTypeError as exc:
            raise SystemExit(f"Invalid --sizes: {exc}") from exc
    if args.repeats is not None:
        overrides["benchmark"]["repeats"] = args.repeats
    try:
        return load_config(args.config, overrides=overrides)
    except (OSError, ValueError) as exc:
        raise SystemExit(f"Could not load configuration: {exc}") from exc


def _run_benchmark(bench_cfg: dict):
    try:
        return run_benchmark(
            bench_cfg["sizes"],
            bench_cfg["algorithms"],
            repeats=int(bench_cfg["repeats"]),
        )
    except ValueError as exc:
        raise SystemExit(str(exc)) from exc


def cmd_sort(args: argparse.Namespace) -> None:
    try:
        sorter = get_sorter(args.algorithm)
    except ValueError as exc:
        raise SystemExit(str(exc)) from exc
    before = build_alternating_row(args.light_count)
    result = sorter(before)
    logger.info(
        "Sorted %s disks with %s in %s pass(es)",
        before.total_count(),
        args.algorithm,
        result.passes,
    )
    print(f"before: {before.to_text()}")
    print(f"after:  {result.after.to_text()}")
    print(f"swaps:  {result.swap_count}")


def cmd_compare(args: argparse.Namespace) -> None:
    before = build_alternating_row(args.light_count)
    sequential = sort_sequential(before)
    lawnmower = sort_lawnmower(before)
    print(f"input: {before.to_text()}")
    print(f"sequential swaps={sequential.swap_count} passes={sequential.passes}")
    print(f"lawnmower  swaps={lawnmower.swap_count} passes={lawnmower.passes}")
    agree = sequential.after == lawnmower.after
    print(f"final rows agree: {'yes' if agree else 'no'}")
    if not agree:
        raise SystemExit(1)


def cmd_benchmark(args: argparse.Namespace) -> None:
    cfg = _benchmark_cfg(args)
    records = _run_benchmark(cfg["benchmark"])
    if args.out:
        out = Path(args.out)
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(records_to_json(records), encoding="utf-8")
        print(f"Benchmark written to {args.out}")
        return
    print(f"{'algorithm':<14}{'k':>6}{'swaps':>10}{'passes':>8}{'time_ms':>12}  ok")
    for record in records:
        print(
            f"{record.algorithm:<14}{record.light_count:>6}{record.swap_count:>10}"
            f"{record.passes:>8}{record.time_ms:>12.4f}  {'yes' if record.passed else 'no'}"
        )


def cmd_viz(args: argparse.Namespace) -> None:
    cfg = _benchmark_cfg(args)
    records = _run_benchmark(cfg["benchmark"])
    out = Path(args.out or cfg["viz"]["out"])
    try:
        plot_swap_counts(records, out)
    except RuntimeError as exc:
        raise SystemExit(str(exc)) from exc
    print(f"Plot written to {out}")


def build_parser() -> argparse.ArgumentParser:
    settings = load_settings()
    parser = argparse.ArgumentParser(prog="disksort", description="Alternating disks sorter")
    parser.add_argument("--log-level", default=settings.log_level, help="Logging level")
    sub = parser.add_subparsers(dest="command", required=True)

    p_sort = sub.add_parser("sort", help="Sort one alternating row")
    p_sort.add_argument("--light-count", type=_positive_int, default=settings.light_count)
    p_sort.add_argument("--algorithm", choices=sorted(SORTERS), default=settings.algorithm)
    p_sort.set_defaults(func=cmd_sort)

    p_compare = sub.add_parser("compare", help="Run both algorithms on the same row")
    p_compare.add_argument("--light-count", type=_positive_int, default=settings.light_count)
    p_compare.set_defaults(func=cmd_compare)

    p_bench = sub.add_parser("benchmark", help="Time both algorithms over several sizes")
    p_bench.add_argument("--config")
    p_bench.add_argument("--sizes", help="Comma separated light counts")
    p_bench.add_argument("--repeats", type=_positive_int)
    p_bench.add_argument("--out", help="Write JSON records to this path")
    p_bench.set_defaults(func=cmd_benchmark)

    p_viz = sub.add_parser("viz", help="Plot swap and pass counts")
    p_viz.add_argument("--config")
    p_viz.add_argument("--sizes", help="Comma separated light counts")
    p_viz.add_argument("--repeats", type=_positive_int)
    p_viz.add_argument("--out")
    p_viz.set_defaults(func=cmd_viz)

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level.upper())
    args.func(args)


if __name__ == "__main__":  # pragma: no cover
    main(sys.argv[1:])
