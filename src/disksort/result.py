"""Outcome of a sorting run."""

from __future__ import annotations

from dataclasses import dataclass

from .row import TokenRow


@dataclass(frozen=True, slots=True)
class SortResult:
    after: TokenRow
    swap_count: int
    passes: int = 0

    def __post_init__(self) -> None:
        if self.swap_count < 0:
            raise ValueError(f"swap_count must be non-negative, got {self.swap_count}")
        if self.passes < 0:
            raise ValueError(f"passes must be non-negative, got {self.passes}")
