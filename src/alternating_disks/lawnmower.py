"""Lawnmower algorithm for the disks problem."""

from __future__ import annotations

import logging

from .disks import Color, DiskRow
from .results import SortResult

logger = logging.getLogger(__name__)


def round_count(light_count: int) -> int:
    """Return ceil((n + 1) / 2), the number of back-and-forth rounds."""

    return (light_count + 2) // 2


def sort_lawnmower(before: DiskRow) -> SortResult:
    """Sort a copy of *before* with left-to-right then right-to-left sweeps."""

    disks = before.copy()
    total = disks.total_count()
    rounds = round_count(disks.light_count())
    swaps = 0

    for _ in range(rounds):
        # dark disks ride rightward
        for j in range(total - 1):
            if disks.get(j) is Color.DARK and disks.get(j + 1) is Color.LIGHT:
                disks.swap(j)
                swaps += 1
        # light disks ride leftward
        for j in range(total - 1, 0, -1):
            if disks.get(j) is Color.LIGHT and disks.get(j - 1) is Color.DARK:
                disks.swap(j - 1)
                swaps += 1

    logger.debug("lawnmower: %s rounds over %s disks, %s swaps", rounds, total, swaps)
    return SortResult(after=disks, swap_count=swaps)
