"""Fixed-length sliding window sums.

The optimized routines keep a running window sum and advance it by dropping
the element leaving on the left and adding the element entering on the
right, so each step is O(1). The ``*_bruteforce`` twins recompute every
window from scratch and exist to cross-check the running versions.

A window length ``k`` at or above the sequence length selects the whole
sequence as the single window.
"""

from __future__ import annotations

from typing import List, NamedTuple, Sequence

from .errors import EmptySequenceError, WindowSizeError
from .primitives import advance_window


class WindowResult(NamedTuple):
    max_sum: int
    start_index: int


def _validate(seq: Sequence[int], k: int) -> None:
    if len(seq) == 0:
        raise EmptySequenceError("Cannot define a window over an empty sequence")
    if k < 1:
        raise WindowSizeError(f"Window length must be >= 1, got {k}")


def window_sum(seq: Sequence[int], start: int, length: int) -> int:
    """Return the sum of ``length`` elements starting at ``start``."""

    total = 0
    for idx in range(start, start + length):
        total += seq[idx]
    return total


class SlidingWindowMaxSum:
    """Maximum-sum window search over a caller-owned sequence.

    The sequence is read, never modified.
    """

    def __init__(self, seq: Sequence[int], k: int) -> None:
        _validate(seq, k)
        self.seq = seq
        self.k = k

    @property
    def whole_sequence(self) -> bool:
        return self.k >= len(self.seq)

    def compute(self) -> WindowResult:
        """Return the best window in O(n); the first maximum wins ties."""

        seq = self.seq
        if self.whole_sequence:
            return WindowResult(window_sum(seq, 0, len(seq)), 0)

        k = self.k
        current = window_sum(seq, 0, k)
        best = current
        best_start = 0
        for right in range(k, len(seq)):
            current = advance_window(current, seq[right - k], seq[right])
            if current > best:
                best = current
                best_start = right - k + 1
        return WindowResult(best, best_start)

    def compute_bruteforce(self) -> WindowResult:
        """Return the best window by summing every window independently."""

        seq = self.seq
        if self.whole_sequence:
            return WindowResult(window_sum(seq, 0, len(seq)), 0)

        best = window_sum(seq, 0, self.k)
        best_start = 0
        for start in range(1, len(seq) - self.k + 1):
            total = window_sum(seq, start, self.k)
            if total > best:
                best = total
                best_start = start
        return WindowResult(best, best_start)

    def sums(self) -> List[int]:
        """Return every window's sum, ordered by start index."""

        seq = self.seq
        if self.whole_sequence:
            return [window_sum(seq, 0, len(seq))]

        k = self.k
        current = window_sum(seq, 0, k)
        out = [current]
        for right in range(k, len(seq)):
            current = advance_window(current, seq[right - k], seq[right])
            out.append(current)
        return out


def max_window_sum(seq: Sequence[int], k: int) -> WindowResult:
    """Return ``(max_sum, start_index)`` over all windows of length ``k``.

    Raises:
        EmptySequenceError: If ``seq`` is empty.
        WindowSizeError: If ``k < 1``.
    """

    return SlidingWindowMaxSum(seq, k).compute()


def max_window_sum_bruteforce(seq: Sequence[int], k: int) -> WindowResult:
    """O(n*k) reference version of :func:`max_window_sum`."""

    return SlidingWindowMaxSum(seq, k).compute_bruteforce()


def window_sums(seq: Sequence[int], k: int) -> List[int]:
    return SlidingWindowMaxSum(seq, k).sums()


def window_averages(seq: Sequence[int], k: int) -> List[float]:
    """Running average of every window of length ``k``.

    When ``k`` covers the whole sequence the result is its single mean.
    """

    sums = window_sums(seq, k)
    divisor = min(k, len(seq))
    return [total / divisor for total in sums]


def window_averages_bruteforce(seq: Sequence[int], k: int) -> List[float]:
    _validate(seq, k)
    if k >= len(seq):
        return [window_sum(seq, 0, len(seq)) / len(seq)]
    return [window_sum(seq, start, k) / k for start in range(len(seq) - k + 1)]
