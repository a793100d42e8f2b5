"""Run both algorithms over a range of row sizes and check their guarantees."""

from __future__ import annotations

import dataclasses
import json
import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Sequence

from .alternate import sort_alternate
from .disks import DiskRow
from .lawnmower import sort_lawnmower

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class BenchmarkRecord:
    light_count: int
    alternate_swaps: int
    lawnmower_swaps: int
    alternate_sorted: bool
    lawnmower_sorted: bool
    rows_agree: bool
    within_bounds: bool
    bounds_checked: bool = True
    alternate_ms: float = 0.0
    lawnmower_ms: float = 0.0

    @property
    def ok(self) -> bool:
        if not (self.alternate_sorted and self.lawnmower_sorted and self.rows_agree):
            return False
        return self.within_bounds or not self.bounds_checked


def benchmark_one(light_count: int, *, check_bounds: bool = True) -> BenchmarkRecord:
    row = DiskRow(light_count)

    start = time.perf_counter()
    alternate = sort_alternate(row)
    alternate_ms = (time.perf_counter() - start) * 1000

    start = time.perf_counter()
    lawnmower = sort_lawnmower(row)
    lawnmower_ms = (time.perf_counter() - start) * 1000

    within_bounds = (
        alternate.swap_count <= light_count * light_count
        and lawnmower.swap_count <= alternate.swap_count
    )
    record = BenchmarkRecord(
        light_count=light_count,
        alternate_swaps=alternate.swap_count,
        lawnmower_swaps=lawnmower.swap_count,
        alternate_sorted=alternate.after.is_sorted_blocks(),
        lawnmower_sorted=lawnmower.after.is_sorted_blocks(),
        rows_agree=alternate.after == lawnmower.after,
        within_bounds=within_bounds,
        bounds_checked=check_bounds,
        alternate_ms=alternate_ms,
        lawnmower_ms=lawnmower_ms,
    )
    LOGGER.debug(
        "k=%s: alternate %s swaps in %.4f ms, lawnmower %s swaps in %.4f ms",
        light_count,
        record.alternate_swaps,
        alternate_ms,
        record.lawnmower_swaps,
        lawnmower_ms,
    )
    return record


def run_benchmark(light_counts: Iterable[int], *, check_bounds: bool = True) -> list[BenchmarkRecord]:
    """Benchmark every light count in *light_counts*.

    Sortedness and agreement are always checked. The swap-count bounds only
    count against ``record.ok`` when ``check_bounds`` is set. Failing records
    are logged as warnings.
    """

    records: list[BenchmarkRecord] = []
    for light_count in light_counts:
        record = benchmark_one(light_count, check_bounds=check_bounds)
        if not record.ok:
            LOGGER.warning("k=%s failed checks: %s", light_count, dataclasses.asdict(record))
        records.append(record)

    failures = sum(1 for record in records if not record.ok)
    LOGGER.info("Benchmarked %s row size(s), %s failing", len(records), failures)
    return records


def light_count_range(start: int, stop: int) -> range:
    """Return the inclusive range ``start..stop`` after validating it."""

    if start < 1:
        raise ValueError(f"start must be positive, got {start}")
    if stop < start:
        raise ValueError(f"stop ({stop}) must not be less than start ({start})")
    return range(start, stop + 1)


def export_report(records: Sequence[BenchmarkRecord], path: Path, indent: int | None = 2) -> None:
    payload = []
    for record in records:
        entry = dataclasses.asdict(record)
        entry["ok"] = record.ok
        payload.append(entry)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as fh:
        json.dump(payload, fh, indent=indent)
