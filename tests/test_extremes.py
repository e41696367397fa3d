import pytest
from hypothesis import given, strategies as st

from arraydrills.extremes import (
    is_sorted,
    largest,
    largest_two,
    smallest,
    smallest_two,
)

SAMPLE = [5, 4, 22, 4, 5, 6]
nonempty = st.lists(st.integers(min_value=-100, max_value=100), min_size=1, max_size=20)


def test_sample_largest_and_smallest():
    assert largest(SAMPLE) == 22
    assert smallest(SAMPLE) == 4


def test_sample_first_and_second():
    assert largest_two(SAMPLE) == (22, 6)
    assert smallest_two(SAMPLE) == (4, 5)


def test_second_missing_when_all_equal():
    assert largest_two([3, 3, 3]) == (3, None)
    assert smallest_two([3, 3, 3]) == (3, None)


@pytest.mark.parametrize("func", [largest, smallest, largest_two, smallest_two])
def test_empty_raises(func):
    with pytest.raises(ValueError):
        func([])


@given(nonempty)
def test_largest_smallest_match_builtins(items):
    assert largest(items) == max(items)
    assert smallest(items) == min(items)


@given(nonempty)
def test_largest_two_invariants(items):
    first, second = largest_two(items)
    assert first == max(items)
    below = [v for v in items if v < first]
    if below:
        assert second == max(below)
    else:
        assert second is None


@given(nonempty)
def test_smallest_two_invariants(items):
    first, second = smallest_two(items)
    assert first == min(items)
    above = [v for v in items if v > first]
    if above:
        assert second == min(above)
    else:
        assert second is None


@given(st.lists(st.integers(), max_size=20))
def test_is_sorted_matches_sorted(items):
    assert is_sorted(sorted(items)) is True
    assert is_sorted(items) == (items == sorted(items))


def test_is_sorted_detects_descent():
    assert is_sorted([1, 3, 2]) is False