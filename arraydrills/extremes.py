"""Largest, smallest and ordering checks over a sequence."""


def _nonempty(items):
    values = list(items)
    if not values:
        raise ValueError("sequence is empty")
    return values


def largest(items):
    """Return the largest value; raise ``ValueError`` on an empty sequence."""
    values = _nonempty(items)
    best = values[0]
    for value in values[1:]:
        if value > best:
            best = value
    return best


def smallest(items):
    """Return the smallest value; raise ``ValueError`` on an empty sequence."""
    values = _nonempty(items)
    best = values[0]
    for value in values[1:]:
        if value < best:
            best = value
    return best


def largest_two(items):
    """Return ``(largest, second_largest)`` with distinct values.

    The second is ``None`` when no value below the largest exists.
    """
    values = _nonempty(items)
    first = values[0]
    second = None
    for value in values[1:]:
        if value > first:
            second = first
            first = value
        elif value < first and (second is None or value > second):
            second = value
    return (first, second)


def smallest_two(items):
    """Return ``(smallest, second_smallest)`` with distinct values.

    The second is ``None`` when no value above the smallest exists.
    """
    values = _nonempty(items)
    first = values[0]
    second = None
    for value in values[1:]:
        if value < first:
            second = first
            first = value
        elif value > first and (second is None or value < second):
            second = value
    return (first, second)


def is_sorted(items):
    """Return True if the values never decrease from one to the next."""
    values = list(items)
    return all(prev <= cur for prev, cur in zip(values, values[1:]))