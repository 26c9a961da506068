"""Chart generation using Matplotlib."""

from __future__ import annotations

from typing import Sequence

from matplotlib.figure import Figure

from invengine.core.primitives import OpStats
from invengine.core.sliding_window import max_window_sum, window_sums


def build_window_sum_series(values: Sequence[int], k: int) -> Figure:
    """Plot every window's sum against its start index and mark the best window."""
    fig = Figure(figsize=(5, 4), dpi=100)
    ax = fig.add_subplot(111)

    if values:
        sums = window_sums(values, k)
        best = max_window_sum(values, k)
        ax.plot(range(len(sums)), sums, color='steelblue', marker='o', markersize=3)
        ax.scatter([best.start_index], [best.max_sum], color='red', zorder=3,
                   label=f"max={best.max_sum} @ {best.start_index}")
        ax.set_xlabel("Window start index")
        ax.set_ylabel(f"Sum of {min(k, len(values))} entries")
        ax.set_title("Sliding Window Sums")
        ax.legend(loc='best')
        ax.grid(True, linestyle='--', alpha=0.7)
    else:
        ax.text(0.5, 0.5, "No Data", ha='center', va='center')

    fig.tight_layout()
    return fig


def build_inversion_depth_chart(stats: OpStats) -> Figure:
    """Bar chart of inversions found at each recursion depth."""
    depths = sorted(stats.inversions_by_depth)
    counts = [stats.inversions_by_depth[d] for d in depths]

    fig = Figure(figsize=(5, 4), dpi=100)
    ax = fig.add_subplot(111)

    if depths:
        ax.bar(depths, counts, color='skyblue', edgecolor='black')
        ax.set_xlabel("Recursion depth (0 = top-level merge)")
        ax.set_ylabel("Inversions")
        ax.set_title("Inversions by Merge Depth")
    else:
        ax.text(0.5, 0.5, "No Inversions", ha='center', va='center')

    fig.tight_layout()
    return fig
