"""Visualization helpers for benchmark results."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

try:  # pragma: no cover - optional dependency
    import matplotlib

    matplotlib.use("Agg")
    import matplotlib.pyplot as plt
except ImportError:  # pragma: no cover - optional
    plt = None

from .benchmark import BenchmarkRecord


def plot_swap_counts(
    records: Sequence[BenchmarkRecord],
    out_path: Path,
    title: str = "Swaps per light disk count",
) -> None:
    if plt is None:
        raise RuntimeError("matplotlib is required for visualisation")
    if not records:
        raise ValueError("No benchmark records to plot")
    ks = [record.light_count for record in records]
    plt.figure(figsize=(6, 4))
    plt.plot(ks, [record.alternate_swaps for record in records], marker="o", label="alternate")
    plt.plot(ks, [record.lawnmower_swaps for record in records], marker="x", linestyle="--", label="lawnmower")
    plt.xlabel("light disks")
    plt.ylabel("swaps")
    plt.title(title)
    plt.legend()
    out_path.parent.mkdir(parents=True, exist_ok=True)
    plt.tight_layout()
    plt.savefig(out_path)
    plt.close()
