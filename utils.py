def natural_compare(a, b) -> int:
    """Three-way comparison using the values' own ordering."""
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


def compare_entry(a, b, compare) -> int:
    """Compare two entries by value, then by insertion sequence."""
    result = compare(a.value, b.value)
    if result == 0:
        return -1 if a.sequence < b.sequence else (1 if a.sequence > b.sequence else 0)
    return result


def is_equal_value(entry, target, compare) -> bool:
    """Check if an entry's value matches a target, ignoring the sequence."""
    return compare(entry.value, target) == 0


def is_heap(slots, length, compare) -> bool:
    """Check the min-heap property over the populated slots [0, length)."""
    for i in range(length):
        left = 2 * i + 1
        right = 2 * i + 2
        if left < length and compare_entry(slots[i], slots[left], compare) > 0:
            return False
        if right < length and compare_entry(slots[i], slots[right], compare) > 0:
            return False
    return True
