"""Classic comparison sorts, each returning a new sorted list."""


def _merge(left, right):
    merged = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(items):
    """Return a sorted copy by splitting in halves and merging them; stable."""
    values = list(items)
    if len(values) <= 1:
        return values
    mid = (len(values) - 1) // 2 + 1
    return _merge(merge_sort(values[:mid]), merge_sort(values[mid:]))


def _partition(values, low, high):
    pivot = values[low]
    i, j = low, high
    while i < j:
        while values[i] <= pivot and i < high:
            i += 1
        while values[j] > pivot and j > low:
            j -= 1
        if i < j:
            values[i], values[j] = values[j], values[i]
    values[low], values[j] = values[j], values[low]
    return j


def quick_sort(items):
    """Return a sorted copy by partitioning around the first value of each range."""
    values = list(items)
    pending = [(0, len(values) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            split = _partition(values, low, high)
            pending.append((low, split - 1))
            pending.append((split + 1, high))
    return values


def selection_sort(items):
    """Return a sorted copy by repeatedly swapping the smallest remaining value forward."""
    values = list(items)
    size = len(values)
    for i in range(size - 1):
        least = min(range(i, size), key=values.__getitem__)
        values[i], values[least] = values[least], values[i]
    return values


def bubble_sort(items):
    """Return a sorted copy by bubbling large values right, stopping once a pass swaps nothing."""
    values = list(items)
    for end in range(len(values) - 1, 0, -1):
        swapped = False
        for j in range(end):
            if values[j] > values[j + 1]:
                values[j], values[j + 1] = values[j + 1], values[j]
                swapped = True
        if not swapped:
            break
    return values


def insertion_sort(items):
    """Return a sorted copy by sliding each value left past larger ones."""
    values = list(items)
    for i in range(len(values)):
        j = i
        while j > 0 and values[j - 1] > values[j]:
            values[j - 1], values[j] = values[j], values[j - 1]
            j -= 1
    return values