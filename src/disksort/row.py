"""Row of light and dark disks with bounds-checked adjacent swaps."""

from __future__ import annotations

from enum import Enum
from typing import Iterator


class InvalidRowError(ValueError):
    """Raised when a row is built or passed in a shape the operation rejects."""


class RowIndexError(IndexError):
    """Raised when an index falls outside the row."""


class DiskColor(Enum):
    LIGHT = "L"
    DARK = "D"


class TokenRow:
    """Fixed-length row holding the same number of light and dark disks.

    A new row alternates light and dark starting with light at index 0. The
    only mutation is :meth:`swap_adjacent`, so the length and the per-colour
    counts never change.
    """

    __slots__ = ("_colors",)

    def __init__(self, light_count: int) -> None:
        if light_count < 1:
            raise InvalidRowError(f"light_count must be at least 1, got {light_count}")
        self._colors: list[DiskColor] = [
            DiskColor.LIGHT if index % 2 == 0 else DiskColor.DARK for index in range(light_count * 2)
        ]

    def copy(self) -> TokenRow:
        clone = TokenRow.__new__(TokenRow)
        clone._colors = list(self._colors)
        return clone

    def total_count(self) -> int:
        return len(self._colors)

    def dark_count(self) -> int:
        return self.total_count() // 2

    def light_count(self) -> int:
        return self.dark_count()

    def is_index(self, index: int) -> bool:
        return 0 <= index < self.total_count()

    def get(self, index: int) -> DiskColor:
        if not self.is_index(index):
            raise RowIndexError(f"index {index} outside row of {self.total_count()} disks")
        return self._colors[index]

    def swap_adjacent(self, left_index: int) -> None:
        """Exchange the disk at *left_index* with its right neighbour."""

        right_index = left_index + 1
        if not (self.is_index(left_index) and self.is_index(right_index)):
            raise RowIndexError(
                f"cannot swap {left_index} and {right_index} in row of {self.total_count()} disks"
            )
        colors = self._colors
        colors[left_index], colors[right_index] = colors[right_index], colors[left_index]

    def is_alternating(self) -> bool:
        if self._colors[0] is not DiskColor.LIGHT:
            return False
        return all(left is not right for left, right in zip(self._colors, self._colors[1:]))

    def is_sorted(self) -> bool:
        return all(color is DiskColor.LIGHT for color in self._colors[: self.light_count()])

    def to_text(self) -> str:
        return " ".join(color.value for color in self._colors)

    def __iter__(self) -> Iterator[DiskColor]:
        return iter(self._colors)

    def __len__(self) -> int:
        return len(self._colors)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TokenRow):
            return NotImplemented
        return self._colors == other._colors

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"TokenRow({self.to_text()!r})"


def build_alternating_row(light_count: int) -> TokenRow:
    """Return a fresh alternating row with *light_count* disks of each colour."""

    return TokenRow(light_count)
