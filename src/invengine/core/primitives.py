"""Low-level compare / swap primitives shared by the engine's algorithms.

Every element exchange and ordering test performed by the inversion counter
goes through these helpers, so an optional :class:`OpStats` record can tally
exactly how much work a run did.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, MutableSequence, Sequence


@dataclass
class OpStats:
    """Operation counters for one engine run."""

    comparisons: int = 0
    swaps: int = 0
    block_exchanges: int = 0
    moves: int = 0
    merges: int = 0
    inversions_by_depth: Dict[int, int] = field(default_factory=dict)

    def record_inversions(self, depth: int, count: int) -> None:
        self.inversions_by_depth[depth] = self.inversions_by_depth.get(depth, 0) + count

    def reset(self) -> None:
        self.comparisons = 0
        self.swaps = 0
        self.block_exchanges = 0
        self.moves = 0
        self.merges = 0
        self.inversions_by_depth.clear()


def out_of_order(seq: Sequence[int], i: int, j: int, stats: OpStats | None = None) -> bool:
    """Return True when ``seq[i] > seq[j]``. Equal values are never out of order."""

    if stats is not None:
        stats.comparisons += 1
    return seq[i] > seq[j]


def swap(seq: MutableSequence[int], i: int, j: int, stats: OpStats | None = None) -> None:
    if stats is not None:
        stats.swaps += 1
    seq[i], seq[j] = seq[j], seq[i]


def swap_blocks(
    seq: MutableSequence[int],
    a: int,
    b: int,
    length: int,
    stats: OpStats | None = None,
) -> None:
    """Exchange ``seq[a:a+length]`` and ``seq[b:b+length]`` as whole blocks.

    The blocks must not overlap.
    """

    if stats is not None:
        stats.block_exchanges += 1
        stats.moves += 2 * length
    seq[a : a + length], seq[b : b + length] = seq[b : b + length], seq[a : a + length]


def advance_window(current: int, leaving: int, entering: int) -> int:
    """Slide a running window sum one position to the right."""

    return current - leaving + entering


def is_sorted(seq: Sequence[int], start: int = 0, length: int | None = None) -> bool:
    """Return True if ``seq[start:start+length]`` is in non-decreasing order."""

    stop = len(seq) if length is None else start + length
    for idx in range(start, stop - 1):
        if seq[idx] > seq[idx + 1]:
            return False
    return True
