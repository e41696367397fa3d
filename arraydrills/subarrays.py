"""Contiguous-subarray problems: maximum sums, target sums, runs and stock profit."""

from collections import defaultdict
from itertools import accumulate, groupby


def _nonempty(items):
    values = list(items)
    if not values:
        raise ValueError("sequence is empty")
    return values


def max_subarray_sum_cubic(items):
    """Maximum sum of a non-empty contiguous subarray, by summing every range afresh."""
    values = _nonempty(items)
    best = None
    size = len(values)
    for start in range(size):
        for stop in range(start, size):
            total = 0
            for value in values[start:stop + 1]:
                total += value
                if best is None or total > best:
                    best = total
    return best


def max_subarray_sum_quadratic(items):
    """Maximum sum of a non-empty contiguous subarray, extending each start point."""
    values = _nonempty(items)
    best = None
    for start in range(len(values)):
        for total in accumulate(values[start:]):
            if best is None or total > best:
                best = total
    return best


def max_subarray_sum(items):
    """Maximum sum of a non-empty contiguous subarray (Kadane's algorithm)."""
    values = _nonempty(items)
    best = None
    total = 0
    for value in values:
        total += value
        if best is None or total > best:
            best = total
        if total < 0:
            total = 0
    return best


def max_subarray_sum_clamped(items):
    """Kadane's maximum, but 0 when every subarray sum is negative or the input is empty."""
    values = list(items)
    if not values:
        return 0
    return max(max_subarray_sum(values), 0)


def max_subarray(items):
    """Return ``(best_sum, subarray)`` for the first contiguous subarray reaching the maximum."""
    values = _nonempty(items)
    best = None
    total = 0
    start = best_start = best_end = 0
    for index, value in enumerate(values):
        if total == 0:
            start = index
        total += value
        if best is None or total > best:
            best = total
            best_start, best_end = start, index
        if total < 0:
            total = 0
    return best, values[best_start:best_end + 1]


def longest_subarray_with_sum_brute(items, k):
    """Length of the longest contiguous subarray summing to ``k``, checking every range."""
    values = list(items)
    best = 0
    for start in range(len(values)):
        for length, total in enumerate(accumulate(values[start:]), start=1):
            if total == k:
                best = max(best, length)
    return best


def longest_subarray_with_sum(items, k):
    """Length of the longest subarray summing to ``k`` using first-seen prefix sums.

    Correct for any mix of negative, zero and positive values.
    """
    first_seen = {}
    best = 0
    total = 0
    for index, value in enumerate(items):
        total += value
        if total == k:
            best = max(best, index + 1)
        earlier = first_seen.get(total - k)
        if earlier is not None:
            best = max(best, index - earlier)
        first_seen.setdefault(total, index)
    return best


def longest_subarray_with_sum_nonneg(items, k):
    """Length of the longest subarray summing to ``k`` with a sliding window.

    Only correct when every value is zero or positive.
    """
    values = list(items)
    best = 0
    left = 0
    total = 0
    for right, value in enumerate(values):
        total += value
        while left <= right and total > k:
            total -= values[left]
            left += 1
        if total == k:
            best = max(best, right - left + 1)
    return best


def count_subarrays_with_sum_brute(items, k):
    """Count contiguous subarrays summing to ``k`` by checking every range."""
    values = list(items)
    return sum(
        1
        for start in range(len(values))
        for total in accumulate(values[start:])
        if total == k
    )


def count_subarrays_with_sum(items, k):
    """Count contiguous subarrays summing to ``k`` using prefix-sum frequencies."""
    seen = defaultdict(int)
    seen[0] = 1
    count = 0
    total = 0
    for value in items:
        total += value
        count += seen[total - k]
        seen[total] += 1
    return count


def max_profit(prices):
    """Best gain from one buy followed by one later sell; 0 if no gain is possible."""
    values = list(prices)
    if not values:
        return 0
    best = 0
    cheapest = values[0]
    for price in values[1:]:
        best = max(best, price - cheapest)
        cheapest = min(cheapest, price)
    return best


def max_consecutive_ones(items):
    """Length of the longest run of consecutive 1 values."""
    return max((sum(1 for _ in run) for key, run in groupby(items) if key == 1), default=0)