"""Searching a sequence for a value or for a pair of values with a given sum."""

from itertools import combinations


def linear_search(items, target):
    """Return the index of the first occurrence of ``target``, or -1 if absent."""
    for index, value in enumerate(items):
        if value == target:
            return index
    return -1


def two_sum_brute(items, target):
    """Check every pair and return the first index pair ``(i, j)`` whose values sum to ``target``.

    Pairs are tried in order of ``i`` and then ``j``. Returns ``None`` when no pair matches.
    """
    for (i, first), (j, second) in combinations(enumerate(items), 2):
        if first + second == target:
            return (i, j)
    return None


def two_sum(items, target):
    """Find an index pair summing to ``target`` in one pass with a value-to-index map.

    Returns ``(earlier_index, later_index)`` for the first pair completed while
    scanning, or ``None`` when no pair exists.
    """
    seen = {}
    for index, value in enumerate(items):
        remainder = target - value
        if remainder in seen:
            return (seen[remainder], index)
        seen[value] = index
    return None


def has_pair_with_sum(items, target):
    """Report whether any two distinct positions hold values summing to ``target``.

    Works on a sorted copy with two pointers; the input is left untouched.
    """
    values = sorted(items)
    left, right = 0, len(values) - 1
    while left < right:
        total = values[left] + values[right]
        if total == target:
            return True
        if total < target:
            left += 1
        else:
            right -= 1
    return False