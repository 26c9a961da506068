"""Tests for fixed-length sliding window sums."""

from __future__ import annotations

import random

import pytest

from invengine.core.errors import EmptySequenceError, WindowSizeError
from invengine.core.sliding_window import (
    SlidingWindowMaxSum,
    WindowResult,
    max_window_sum,
    max_window_sum_bruteforce,
    window_averages,
    window_averages_bruteforce,
    window_sum,
    window_sums,
)


def test_rise_and_fall_sequence() -> None:
    values = [2, 3, 4, 5, 4, 3, 2, 1]
    assert max_window_sum(values, 3) == (13, 2)
    assert max_window_sum_bruteforce(values, 3) == (13, 2)
    assert window_sums(values, 3) == [9, 12, 13, 12, 9, 6]


def test_best_window_at_the_end() -> None:
    values = [1, 3, 9, 4, 3, 22, 11, 3, 4, 55]
    result = max_window_sum(values, 3)
    assert result == WindowResult(max_sum=62, start_index=7)
    assert result.max_sum == 62
    assert result.start_index == 7


def test_window_covering_whole_sequence() -> None:
    assert max_window_sum([3, 1, 2], 3) == (6, 0)
    assert max_window_sum([3, 1, 2], 10) == (6, 0)
    assert max_window_sum_bruteforce([3, 1, 2], 10) == (6, 0)


def test_unit_window_is_first_maximum_element() -> None:
    assert max_window_sum([3, 7, 7, 2], 1) == (7, 1)
    assert max_window_sum([-5, -2, -9], 1) == (-2, 1)


def test_first_maximum_wins_ties() -> None:
    values = [1, 2, 1, 2, 1]
    assert window_sums(values, 2) == [3, 3, 3, 3]
    assert max_window_sum(values, 2) == (3, 0)
    assert max_window_sum_bruteforce(values, 2) == (3, 0)


def test_all_negative_values() -> None:
    values = [-4, -1, -3, -8, -2]
    assert max_window_sum(values, 2) == (-4, 1)
    assert max_window_sum_bruteforce(values, 2) == (-4, 1)


def test_running_and_bruteforce_agree() -> None:
    rng = random.Random(42)
    for _ in range(200):
        n = rng.randint(1, 30)
        values = [rng.randint(-50, 50) for _ in range(n)]
        for k in range(1, n + 2):
            assert max_window_sum(values, k) == max_window_sum_bruteforce(values, k), (values, k)


def test_input_is_not_modified() -> None:
    values = [5, 1, 4, 2]
    max_window_sum(values, 2)
    window_sums(values, 2)
    assert values == [5, 1, 4, 2]


def test_empty_sequence_is_rejected() -> None:
    with pytest.raises(EmptySequenceError):
        max_window_sum([], 1)
    with pytest.raises(ValueError):
        max_window_sum_bruteforce([], 3)


@pytest.mark.parametrize("k", [0, -2])
def test_window_length_below_one_is_rejected(k: int) -> None:
    with pytest.raises(WindowSizeError):
        max_window_sum([1, 2, 3], k)
    with pytest.raises(WindowSizeError):
        SlidingWindowMaxSum([1, 2, 3], k)


def test_window_sum_helper() -> None:
    assert window_sum([1, 2, 3, 4], 1, 2) == 5
    assert window_sum([1, 2, 3, 4], 0, 0) == 0


def test_window_averages() -> None:
    values = [2, 1, 5, 1, 3, 2]
    assert window_averages(values, 3) == pytest.approx([8 / 3, 7 / 3, 3.0, 2.0])
    assert window_averages(values, 3) == window_averages_bruteforce(values, 3)
    assert window_averages(values, 6) == [14 / 6]
    assert window_averages_bruteforce(values, 9) == [14 / 6]


def test_window_averages_agree_on_random_input() -> None:
    rng = random.Random(5)
    values = [rng.randint(-20, 20) for _ in range(25)]
    for k in range(1, 27):
        assert window_averages(values, k) == window_averages_bruteforce(values, k)
