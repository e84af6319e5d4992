"""Outcome checks and timing runs for the disk sorters."""

from __future__ import annotations

import json
import logging
import time
from dataclasses import asdict, dataclass, field
from statistics import mean
from typing import Mapping, Sequence

from .result import SortResult
from .row import DiskColor, TokenRow, build_alternating_row
from .sorters import get_sorter

logger = logging.getLogger(__name__)


def count_inversions(row: TokenRow) -> int:
    """Return the number of (dark, light) pairs where the dark disk comes first."""

    inversions = 0
    darks_seen = 0
    for color in row:
        if color is DiskColor.DARK:
            darks_seen += 1
        else:
            inversions += darks_seen
    return inversions


def check_result(before: TokenRow, result: SortResult, *, original_text: str | None = None) -> dict[str, float]:
    """Return 1.0/0.0 metrics describing whether *result* is a valid sort of *before*.

    *original_text* is the rendering of *before* taken prior to sorting; when
    given, ``unchanged_input`` verifies the sorter left the caller's row alone.
    """

    after = result.after
    conserved = (
        after.total_count() == before.total_count()
        and sum(color is DiskColor.LIGHT for color in after) == before.light_count()
    )
    unchanged = original_text is None or before.to_text() == original_text
    return {
        "sorted": 1.0 if after.is_sorted() else 0.0,
        "conserved": 1.0 if conserved else 0.0,
        "unchanged_input": 1.0 if unchanged and after is not before else 0.0,
        "inversions_resolved": 1.0 if result.swap_count == count_inversions(before) else 0.0,
    }


@dataclass(slots=True)
class BenchmarkRecord:
    algorithm: str
    light_count: int
    swap_count: int
    passes: int
    time_ms: float
    checks: Mapping[str, float] = field(default_factory=dict)

    @property
    def passed(self) -> bool:
        return all(value == 1.0 for value in self.checks.values())


def run_benchmark(
    sizes: Sequence[int],
    algorithms: Sequence[str],
    *,
    repeats: int = 1,
) -> list[BenchmarkRecord]:
    """Sort a fresh alternating row for every size/algorithm pair."""

    if repeats < 1:
        raise ValueError(f"repeats must be at least 1, got {repeats}")
    records: list[BenchmarkRecord] = []
    for name in algorithms:
        sorter = get_sorter(name)
        for light_count in sizes:
            before = build_alternating_row(light_count)
            original_text = before.to_text()
            durations: list[float] = []
            for _ in range(repeats):
                start = time.perf_counter()
                result = sorter(before)
                durations.append((time.perf_counter() - start) * 1000)
            checks = check_result(before, result, original_text=original_text)
            record = BenchmarkRecord(
                algorithm=name,
                light_count=light_count,
                swap_count=result.swap_count,
                passes=result.passes,
                time_ms=mean(durations),
                checks=checks,
            )
            if not record.passed:
                logger.warning(
                    "%s failed checks for light_count=%s: %s",
                    name,
                    light_count,
                    checks,
                )
            logger.debug(
                "%s light_count=%s swaps=%s passes=%s time_ms=%.4f",
                name,
                light_count,
                record.swap_count,
                record.passes,
                record.time_ms,
            )
            records.append(record)
    return records


def records_to_json(records: Sequence[BenchmarkRecord]) -> str:
    payload = []
    for record in records:
        entry = asdict(record)
        entry["checks"] = dict(record.checks)
        entry["passed"] = record.passed
        payload.append(entry)
    return json.dumps(payload, indent=2)
