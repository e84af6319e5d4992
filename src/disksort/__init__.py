"""disksort public package exports."""

from .benchmark import BenchmarkRecord, check_result, count_inversions, run_benchmark
from .config import DiskSortSettings, load_config, load_settings
from .result import SortResult
from .row import DiskColor, InvalidRowError, RowIndexError, TokenRow, build_alternating_row
from .sorters import SORTERS, get_sorter, scan_left_to_right, scan_right_to_left, sort_lawnmower, sort_sequential

__all__ = [
    "SORTERS",
    "BenchmarkRecord",
    "DiskColor",
    "DiskSortSettings",
    "InvalidRowError",
    "RowIndexError",
    "SortResult",
    "TokenRow",
    "build_alternating_row",
    "check_result",
    "count_inversions",
    "get_sorter",
    "load_config",
    "load_settings",
    "run_benchmark",
    "scan_left_to_right",
    "scan_right_to_left",
    "sort_lawnmower",
    "sort_sequential",
]
