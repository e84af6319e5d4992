"""Adjacent-swap sorters for alternating disk rows."""

from __future__ import annotations

import logging
from typing import Callable

from .result import SortResult
from .row import DiskColor, InvalidRowError, TokenRow

logger = logging.getLogger(__name__)


def _needs_swap(row: TokenRow, index: int) -> bool:
    return row.get(index) is DiskColor.DARK and row.get(index + 1) is DiskColor.LIGHT


def scan_left_to_right(row: TokenRow) -> int:
    """Swap every dark-before-light pair over indices ``0 .. N-2``; return swaps made."""

    swaps = 0
    for index in range(row.total_count() - 1):
        if _needs_swap(row, index):
            row.swap_adjacent(index)
            swaps += 1
    return swaps


def scan_right_to_left(row: TokenRow) -> int:
    """Swap every dark-before-light pair from ``N-2`` down to ``1``; return swaps made."""

    swaps = 0
    for index in range(row.total_count() - 2, 0, -1):
        if _needs_swap(row, index):
            row.swap_adjacent(index)
            swaps += 1
    return swaps


def _working_copy(before: TokenRow) -> TokenRow:
    if not before.is_alternating():
        raise InvalidRowError(f"row is not alternating: {before.to_text()}")
    return before.copy()


def sort_sequential(before: TokenRow) -> SortResult:
    """Sort with repeated left-to-right passes until the row is sorted."""

    row = _working_copy(before)
    swap_count = 0
    passes = 0
    while not row.is_sorted():
        swaps = scan_left_to_right(row)
        passes += 1
        swap_count += swaps
        logger.debug("Sequential pass %s made %s swap(s)", passes, swaps)

    logger.debug(
        "Sequential sort of %s disks finished: swaps=%s passes=%s",
        row.total_count(),
        swap_count,
        passes,
    )
    return SortResult(after=row, swap_count=swap_count, passes=passes)


def sort_lawnmower(before: TokenRow) -> SortResult:
    """Sort with alternating left-to-right and right-to-left passes."""

    row = _working_copy(before)
    swap_count = 0
    passes = 0
    while not row.is_sorted():
        forward = scan_left_to_right(row)
        backward = scan_right_to_left(row)
        passes += 1
        swap_count += forward + backward
        logger.debug(
            "Lawnmower double pass %s made %s forward and %s backward swap(s)",
            passes,
            forward,
            backward,
        )

    logger.debug(
        "Lawnmower sort of %s disks finished: swaps=%s passes=%s",
        row.total_count(),
        swap_count,
        passes,
    )
    return SortResult(after=row, swap_count=swap_count, passes=passes)


Sorter = Callable[[TokenRow], SortResult]

SORTERS: dict[str, Sorter] = {
    "sequential": sort_sequential,
    "left-to-right": sort_sequential,
    "lawnmower": sort_lawnmower,
}


def get_sorter(name: str) -> Sorter:
    sorter = SORTERS.get(name)
    if sorter is None:
        raise ValueError(f"Unknown algorithm {name}")
    return sorter
