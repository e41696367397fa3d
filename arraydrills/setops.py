"""Set operations on sorted sequences: intersection, union and removing duplicates."""

from heapq import merge
from itertools import groupby


def intersection_brute(first, second):
    """Multiset intersection of two sorted sequences, pairing each value with an unused match."""
    others = list(second)
    used = [False] * len(others)
    result = []
    for value in first:
        for index, other in enumerate(others):
            if other > value:
                break
            if other == value and not used[index]:
                result.append(value)
                used[index] = True
                break
    return result


def intersection(first, second):
    """Multiset intersection of two sorted sequences by walking both with two pointers."""
    left, right = list(first), list(second)
    i = j = 0
    result = []
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            i += 1
        elif right[j] < left[i]:
            j += 1
        else:
            result.append(left[i])
            i += 1
            j += 1
    return result


def union_set(first, second):
    """Sorted distinct values present in either sequence."""
    return sorted(set(first) | set(second))


def union(first, second):
    """Sorted distinct values of two sorted sequences, merged in one pass."""
    return [value for value, _ in groupby(merge(first, second))]


def unique_sorted(items):
    """Sorted distinct values of a sequence."""
    return sorted(set(items))


def dedupe_sorted_in_place(items):
    """Pack the distinct values of a sorted mutable sequence at its front.

    Returns how many distinct values there are; the slots after them are left as they were.
    """
    if not items:
        return 0
    slot = 0
    for value in items[1:]:
        if value != items[slot]:
            slot += 1
            items[slot] = value
    return slot + 1