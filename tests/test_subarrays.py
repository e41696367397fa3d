import pytest
from hypothesis import given, strategies as st

from arraydrills.subarrays import (
    count_subarrays_with_sum,
    count_subarrays_with_sum_brute,
    longest_subarray_with_sum,
    longest_subarray_with_sum_brute,
    longest_subarray_with_sum_nonneg,
    max_consecutive_ones,
    max_profit,
    max_subarray,
    max_subarray_sum,
    max_subarray_sum_clamped,
    max_subarray_sum_cubic,
    max_subarray_sum_quadratic,
)

small_ints = st.integers(min_value=-10, max_value=10)
short_lists = st.lists(small_ints, min_size=1, max_size=10)
any_lists = st.lists(small_ints, max_size=15)
nonneg_lists = st.lists(st.integers(min_value=0, max_value=10), max_size=15)
targets = st.integers(min_value=-15, max_value=15)


@given(short_lists)
def test_max_subarray_sum_variants_agree(items):
    expected = max_subarray_sum_cubic(items)
    assert max_subarray_sum_quadratic(items) == expected
    assert max_subarray_sum(items) == expected


@given(short_lists)
def test_max_subarray_sum_bounds(items):
    result = max_subarray_sum(items)
    assert result >= max(items)
    assert result >= sum(items)


@pytest.mark.parametrize(
    "func",
    [max_subarray_sum_cubic, max_subarray_sum_quadratic, max_subarray_sum, max_subarray],
)
def test_empty_raises(func):
    with pytest.raises(ValueError):
        func([])


@given(short_lists)
def test_clamped_never_negative(items):
    assert max_subarray_sum_clamped(items) == max(max_subarray_sum(items), 0)


def test_clamped_empty_is_zero():
    assert max_subarray_sum_clamped([]) == 0


@given(short_lists)
def test_max_subarray_returns_contiguous_slice(items):
    best, sub = max_subarray(items)
    assert best == max_subarray_sum(items)
    assert sum(sub) == best
    assert any(items[i:i + len(sub)] == sub for i in range(len(items)))


@given(any_lists, targets)
def test_longest_prefix_matches_brute(items, k):
    assert longest_subarray_with_sum(items, k) == longest_subarray_with_sum_brute(items, k)


@given(nonneg_lists, st.integers(min_value=0, max_value=20))
def test_longest_window_matches_brute_for_nonneg(items, k):
    assert longest_subarray_with_sum_nonneg(items, k) == longest_subarray_with_sum_brute(items, k)


@given(nonneg_lists)
def test_longest_whole_sum_is_full_length(items):
    assert longest_subarray_with_sum(items, sum(items)) == len(items)


@given(any_lists, targets)
def test_count_prefix_matches_brute(items, k):
    assert count_subarrays_with_sum(items, k) == count_subarrays_with_sum_brute(items, k)


def test_count_no_match_is_zero():
    assert count_subarrays_with_sum([1, 1, 1], 100) == 0


def test_max_profit_worked_example():
    assert max_profit([7, 1, 5, 3, 6, 4]) == 5


@given(st.lists(st.integers(min_value=0, max_value=100), max_size=15))
def test_max_profit_zero_for_falling_prices(prices):
    assert max_profit(sorted(prices, reverse=True)) == 0


@given(st.lists(st.integers(min_value=0, max_value=100), min_size=1, max_size=15))
def test_max_profit_rising_prices(prices):
    ordered = sorted(prices)
    assert max_profit(ordered) == ordered[-1] - ordered[0]


def test_max_consecutive_ones_example():
    assert max_consecutive_ones([1, 1, 0, 1, 1, 1]) == 3


@given(st.integers(min_value=0, max_value=20))
def test_max_consecutive_ones_all_ones(n):
    assert max_consecutive_ones([1] * n) == n


def test_max_consecutive_ones_none_present():
    assert max_consecutive_ones([0, 2, 0]) == 0