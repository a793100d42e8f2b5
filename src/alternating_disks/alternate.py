"""Alternate (odd-even transposition) algorithm for the disks problem."""

from __future__ import annotations

import logging

from .disks import Color, DiskRow
from .results import SortResult

logger = logging.getLogger(__name__)


def sort_alternate(before: DiskRow) -> SortResult:
    """Sort a copy of *before* by alternating even and odd passes.

    Pass ``i`` compares the pairs starting at positions with the parity of
    ``i``. A row with ``n`` light disks is sorted after ``n + 1`` passes.
    """

    disks = before.copy()
    n = disks.light_count()
    last_left = disks.total_count() - 2
    swaps = 0

    for run in range(n + 1):
        for j in range(run % 2, last_left + 1, 2):
            if disks.get(j) is Color.DARK and disks.get(j + 1) is Color.LIGHT:
                disks.swap(j)
                swaps += 1

    logger.debug("alternate: %s passes over %s disks, %s swaps", n + 1, disks.total_count(), swaps)
    return SortResult(after=disks, swap_count=swaps)
