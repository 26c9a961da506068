"""Inversion counting by in-place merge sort.

An inversion is a pair of positions ``i < j`` with ``seq[i] > seq[j]``. The
counter recursively splits the sequence into a lower half of ``n // 2``
elements and an upper half holding the rest, counts and sorts each half, then
merges the halves while counting the cross-half inversions. The caller's list
is left sorted in non-decreasing order.

Equal elements never count as an inversion against each other.
"""

from __future__ import annotations

from typing import Iterable, MutableSequence, Sequence

from .errors import check
from .primitives import OpStats, is_sorted, out_of_order, swap, swap_blocks


class InversionCounter:
    """Count and sort a caller-owned list of integers in place.

    Args:
        seq: The list to sort. It is mutated, never rebound or resized.
        check_invariants: Validate partition descriptors and post-merge
            ordering. Defaults to ``__debug__``.
        stats: Optional :class:`OpStats` record to accumulate operation counts.
    """

    def __init__(
        self,
        seq: MutableSequence[int],
        *,
        check_invariants: bool | None = None,
        stats: OpStats | None = None,
    ) -> None:
        self.seq = seq
        self.check_invariants = __debug__ if check_invariants is None else check_invariants
        self.stats = stats
        self._scratch: MutableSequence[int] = []

    def count(self) -> int:
        """Sort ``seq`` and return the number of inversions it contained."""

        nitems = len(self.seq)
        if nitems <= 1:
            return 0
        if nitems == 2:
            return self._count_pair(0, depth=0)

        # One scratch buffer per run, of the same type as seq; the lower half
        # of any merge fits in it.
        self._scratch = self.seq[: nitems // 2]
        total = self._count_range(0, nitems, depth=0)
        self._scratch = []
        return total

    def _count_range(self, start: int, nitems: int, depth: int) -> int:
        if self.check_invariants:
            check(
                start >= 0 and nitems >= 0 and start + nitems <= len(self.seq),
                f"Invalid partition (start={start}, length={nitems}) for {len(self.seq)} items",
            )
        if nitems <= 1:
            return 0
        if nitems == 2:
            return self._count_pair(start, depth)

        half = nitems // 2
        lo = start
        hi = start + half
        total = self._count_range(lo, half, depth + 1)
        total += self._count_range(hi, nitems - half, depth + 1)
        total += self._merge(lo, half, hi, nitems - half, depth)
        return total

    def _count_pair(self, start: int, depth: int) -> int:
        if not out_of_order(self.seq, start, start + 1, self.stats):
            return 0
        swap(self.seq, start, start + 1, self.stats)
        if self.stats is not None:
            self.stats.record_inversions(depth, 1)
        return 1

    def _merge(self, lo: int, n_lo: int, hi: int, n_hi: int, depth: int) -> int:
        """Merge the sorted runs at ``lo`` and ``hi`` and return cross-half inversions."""

        seq = self.seq
        stats = self.stats
        if self.check_invariants:
            check(n_lo >= 1, f"Empty lower run at {lo}")
            check(lo + n_lo == hi, f"Runs are not adjacent: {lo} + {n_lo} != {hi}")
            check(
                n_hi in (n_lo, n_lo + 1),
                f"Upper run length {n_hi} must equal {n_lo} or {n_lo + 1}",
            )
        if stats is not None:
            stats.merges += 1

        # Already in order across the boundary.
        if not out_of_order(seq, hi - 1, hi, stats):
            return 0

        if n_lo == n_hi and out_of_order(seq, lo, hi + n_hi - 1, stats):
            # Every lower element exceeds every upper element.
            swap_blocks(seq, lo, hi, n_lo, stats)
            inversions = n_lo * n_hi
        else:
            inversions = self._merge_runs(lo, n_lo, hi)
            if n_hi > n_lo:
                inversions += self._bubble_down(hi + n_lo, lo)

        if stats is not None:
            stats.record_inversions(depth, inversions)
        if self.check_invariants:
            check(is_sorted(seq, lo, n_lo + n_hi), f"Merge left [{lo}, {hi + n_hi}) unsorted")
        return inversions

    def _merge_runs(self, lo: int, n_lo: int, hi: int) -> int:
        # Two-pointer merge of seq[lo:hi] with seq[hi:hi + n_lo]. The lower run
        # is parked in scratch; the write index never passes the upper read index.
        seq = self.seq
        scratch = self._scratch
        scratch[:n_lo] = seq[lo:hi]

        i = 0
        j = hi
        end = hi + n_lo
        write = lo
        inversions = 0
        comparisons = 0
        while i < n_lo and j < end:
            comparisons += 1
            if scratch[i] <= seq[j]:
                seq[write] = scratch[i]
                i += 1
            else:
                seq[write] = seq[j]
                j += 1
                inversions += n_lo - i
            write += 1

        remaining = n_lo - i
        if remaining:
            seq[write : write + remaining] = scratch[i:n_lo]

        if self.stats is not None:
            self.stats.comparisons += comparisons
            self.stats.moves += (write - lo) + remaining
        return inversions

    def _bubble_down(self, pos: int, floor: int) -> int:
        """Move the surplus upper element at ``pos`` left past larger predecessors."""

        swaps = 0
        while pos > floor and out_of_order(self.seq, pos - 1, pos, self.stats):
            swap(self.seq, pos - 1, pos, self.stats)
            pos -= 1
            swaps += 1
        return swaps


def count_and_sort(
    seq: MutableSequence[int],
    *,
    check_invariants: bool | None = None,
    stats: OpStats | None = None,
) -> int:
    """Return the number of inversions in ``seq`` and leave it sorted ascending."""

    return InversionCounter(seq, check_invariants=check_invariants, stats=stats).count()


def count_inversions(values: Iterable[int]) -> int:
    """Count inversions without touching ``values`` (sorts a private copy)."""

    return count_and_sort(list(values))


def count_inversions_bruteforce(values: Sequence[int]) -> int:
    """O(n^2) pairwise inversion count. Does not modify ``values``."""

    total = 0
    nitems = len(values)
    for i in range(nitems):
        for j in range(i + 1, nitems):
            if values[i] > values[j]:
                total += 1
    return total
