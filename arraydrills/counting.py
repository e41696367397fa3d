"""Problems solved by counting occurrences: single, missing, majority and consecutive runs."""

from collections import Counter
from functools import reduce
from operator import xor


def single_element_brute(items):
    """Return the first value that occurs exactly once, counting each afresh."""
    values = list(items)
    for value in values:
        if values.count(value) == 1:
            return value
    raise ValueError("no element occurs exactly once")


def single_element_counting(items):
    """Return the smallest value that occurs exactly once, using a frequency table."""
    singles = [value for value, count in Counter(items).items() if count == 1]
    if not singles:
        raise ValueError("no element occurs exactly once")
    return min(singles)


def single_element(items):
    """XOR of all values: the lone value when every other value appears twice."""
    return reduce(xor, items, 0)


def _checked(items, n):
    values = list(items)
    if n < 1:
        raise ValueError("n must be at least 1")
    if len(values) != n - 1:
        raise ValueError(f"expected {n - 1} values, got {len(values)}")
    return values


def missing_number_brute(items, n):
    """Return the number in ``1..n`` absent from the ``n - 1`` given values, by scanning."""
    values = _checked(items, n)
    for candidate in range(1, n + 1):
        if candidate not in values:
            return candidate
    raise ValueError("no number is missing")


def missing_number_hash(items, n):
    """Return the number in ``1..n`` absent from the given values, using a presence table."""
    values = _checked(items, n)
    present = [False] * (n + 1)
    for value in values:
        if not 1 <= value <= n:
            raise ValueError(f"value {value} outside 1..{n}")
        present[value] = True
    for candidate in range(1, n + 1):
        if not present[candidate]:
            return candidate
    raise ValueError("no number is missing")


def missing_number_sum(items, n):
    """Return the missing number as the expected total minus the actual total."""
    values = _checked(items, n)
    return n * (n + 1) // 2 - sum(values)


def missing_number(items, n):
    """Return the missing number by XOR-ing ``1..n`` with the given values."""
    values = _checked(items, n)
    return reduce(xor, range(1, n + 1), 0) ^ reduce(xor, values, 0)


def majority_element_brute(items):
    """Return the value occurring more than ``len // 2`` times, or ``None``."""
    values = list(items)
    threshold = len(values) // 2
    for value in values:
        if values.count(value) > threshold:
            return value
    return None


def majority_element_counting(items):
    """Return the majority value using a frequency table, or ``None``."""
    counts = Counter(items)
    threshold = sum(counts.values()) // 2
    winners = [value for value, count in counts.items() if count > threshold]
    return min(winners) if winners else None


def majority_element(items):
    """Return the majority value by Boyer-Moore voting with a verifying pass, or ``None``."""
    values = list(items)
    candidate = None
    votes = 0
    for value in values:
        if votes == 0:
            candidate = value
            votes = 1
        elif value == candidate:
            votes += 1
        else:
            votes -= 1
    if values and values.count(candidate) > len(values) // 2:
        return candidate
    return None


def longest_consecutive_brute(items):
    """Length of the longest run of consecutive integers, probing with linear scans."""
    values = list(items)
    best = 0
    for value in values:
        current = value
        length = 1
        while current + 1 in values:
            current += 1
            length += 1
        best = max(best, length)
    return best


def longest_consecutive_sorted(items):
    """Length of the longest run of consecutive integers, walking a sorted copy."""
    best = 0
    length = 0
    last = None
    for value in sorted(items):
        if last is not None and value - 1 == last:
            length += 1
            last = value
        elif value != last:
            length = 1
            last = value
        best = max(best, length)
    return best


def longest_consecutive(items):
    """Length of the longest run of consecutive integers, counting up from each run start."""
    present = set(items)
    best = 0
    for value in present:
        if value - 1 in present:
            continue
        current = value
        length = 1
        while current + 1 in present:
            current += 1
            length += 1
        best = max(best, length)
    return best