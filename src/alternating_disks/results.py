"""Result container returned by the sorting algorithms."""

from __future__ import annotations

from dataclasses import dataclass

from .disks import DiskRow


@dataclass(frozen=True, slots=True)
class SortResult:
    after: DiskRow
    swap_count: int

    def __post_init__(self) -> None:
        if self.swap_count < 0:
            raise ValueError(f"swap_count must be non-negative, got {self.swap_count}")
