"""Reordering a sequence: rotations, zero moving, permutations, sign alternation and leaders."""

from collections import Counter

_COLORS = (0, 1, 2)


def rotate_left_one(items):
    """Return a new list with every value moved one place left and the first moved to the end."""
    values = list(items)
    return values[1:] + values[:1]


def rotate_left(items, d):
    """Return a new list rotated left by ``d`` places, holding the first ``d`` values aside.

    ``d`` must lie between 0 and the length of the sequence.
    """
    values = list(items)
    if not 0 <= d <= len(values):
        raise ValueError(f"rotation {d} outside 0..{len(values)}")
    held = values[:d]
    return values[d:] + held


def rotate_left_reversal(items, k):
    """Rotate by three reversals: the whole list, then the first ``k``, then the rest.

    ``k`` is taken modulo the length, and the effect is that the last ``k``
    values come to the front.
    """
    values = list(items)
    if not values:
        return values
    k %= len(values)
    values.reverse()
    values[:k] = reversed(values[:k])
    values[k:] = reversed(values[k:])
    return values


def move_zeros_to_end(items):
    """Return a new list with the non-zero values in order followed by all the zeros."""
    values = list(items)
    nonzero = [value for value in values if value != 0]
    return nonzero + [0] * (len(values) - len(nonzero))


def move_zeros_in_place(items):
    """Move every zero of a mutable sequence to its end by swapping, keeping other values in order."""
    slot = 0
    for index in range(len(items)):
        if items[index] != 0:
            items[index], items[slot] = items[slot], items[index]
            slot += 1


def next_permutation(items):
    """Return the next lexicographic permutation; the last one wraps round to ascending order."""
    values = list(items)
    pivot = next(
        (i for i in range(len(values) - 2, -1, -1) if values[i] < values[i + 1]),
        None,
    )
    if pivot is None:
        values.reverse()
        return values
    successor = next(
        i for i in range(len(values) - 1, pivot, -1) if values[i] > values[pivot]
    )
    values[pivot], values[successor] = values[successor], values[pivot]
    values[pivot + 1:] = reversed(values[pivot + 1:])
    return values


def alternate_signs_split(items):
    """Interleave non-negative and negative values, starting with a non-negative one.

    Both kinds keep their order. The counts of the two kinds must be equal.
    """
    values = list(items)
    positives = [value for value in values if value >= 0]
    negatives = [value for value in values if value < 0]
    if len(positives) != len(negatives):
        raise ValueError("needs as many negative values as non-negative ones")
    return [value for pair in zip(positives, negatives) for value in pair]


def alternate_signs(items):
    """Place non-negative values at even indices and negative values at odd ones, in one pass.

    Raises ``ValueError`` when one kind runs out of slots.
    """
    values = list(items)
    result = [0] * len(values)
    even, odd = 0, 1
    for value in values:
        if value >= 0:
            if even >= len(result):
                raise ValueError("too many non-negative values to alternate")
            result[even] = value
            even += 2
        else:
            if odd >= len(result):
                raise ValueError("too many negative values to alternate")
            result[odd] = value
            odd += 2
    return result


def leaders_brute(items):
    """Values with nothing strictly greater to their right, in left-to-right order."""
    values = list(items)
    return [
        value
        for index, value in enumerate(values)
        if all(other <= value for other in values[index + 1:])
    ]


def leaders(items):
    """Values greater than everything to their right, scanned from the right.

    The result runs right to left, and a repeated value is reported once.
    """
    result = []
    highest = None
    for value in reversed(list(items)):
        if highest is None or value > highest:
            highest = value
            result.append(value)
    return result


def _check_colors(values):
    for value in values:
        if value not in _COLORS:
            raise ValueError(f"value {value!r} is not 0, 1 or 2")


def sort_colors_counting(items):
    """Return a sorted copy of a sequence of 0, 1 and 2 built from their counts."""
    values = list(items)
    _check_colors(values)
    counts = Counter(values)
    return [color for color in _COLORS for _ in range(counts[color])]


def sort_colors(items):
    """Sort a mutable sequence of 0, 1 and 2 in place in one pass (Dutch national flag)."""
    _check_colors(items)
    low, mid, high = 0, 0, len(items) - 1
    while mid <= high:
        if items[mid] == 0:
            items[low], items[mid] = items[mid], items[low]
            low += 1
            mid += 1
        elif items[mid] == 1:
            mid += 1
        else:
            items[mid], items[high] = items[high], items[mid]
            high -= 1