from array_ import Array
from iterator_ import HeapIterator
from logger import print_
from priority_queue import PriorityQueue
from utils import natural_compare, compare_entry, is_equal_value

# Constants
DEFAULT_MAX_CAPACITY = 1000


class Entry:
    """A stored value tagged with its insertion sequence number."""

    def __init__(self, value, sequence):
        self.value = value
        self.sequence = sequence

    def __repr__(self):
        return f"Entry({self.value!r}, {self.sequence})"

    def __str__(self):
        return str(self.value)


class Heap(PriorityQueue):
    """
    Bounded binary min-heap with stable ordering of equal values.

    Values are wrapped in an Entry carrying a sequence number, so two values
    that compare equal leave the heap in the order they were inserted. The
    capacity is fixed: insert on a full heap returns False instead of growing.
    Insert and remove cost O(log n); delete and contains scan every slot.
    """

    def __init__(self, capacity=DEFAULT_MAX_CAPACITY, compare=None):
        if isinstance(capacity, bool) or not isinstance(capacity, int):
            raise TypeError(f"capacity must be an int, got {type(capacity).__name__}")
        if capacity < 1:
            raise ValueError(f"capacity must be positive, got {capacity}")

        self.capacity = capacity
        self.compare = compare if compare is not None else natural_compare
        self.slots = Array(capacity)
        self.modification_counter = 0
        self.entry_number = 0

    def insert(self, value):
        if self.is_full():
            print_(f"insert rejected: heap is full (capacity {self.capacity})")
            return False

        entry = Entry(value, self.entry_number)
        self.entry_number += 1
        self.slots.insert(entry)
        self._sift_up(self.slots.length() - 1)
        self.modification_counter += 1
        return True

    def remove(self):
        if self.is_empty():
            print_("remove on empty heap")
            return None

        root_entry = self.slots.get(0)
        last_entry = self.slots.pop_last()
        self.modification_counter += 1
        if self.slots.length() > 0:
            self.slots.set(0, last_entry)
            self._sift_down(0)
        return root_entry.value

    def delete(self, target):
        """
        Remove every entry whose value compares equal to target.

        Each match is replaced by the last entry and the slot is scanned again,
        so duplicates are all removed in one call. Matches at the tail are
        dropped first, which keeps the entry moved into a hole from being a
        match that the scan has already passed.

        :param target: Value to remove. Sequence numbers are ignored.
        :return: True if at least one entry was removed.
        """
        if self.is_empty():
            print_(f"delete({target!r}) on empty heap")
            return False

        removed = 0
        counter = 0
        while counter < self.slots.length():
            if not is_equal_value(self.slots.get(counter), target, self.compare):
                counter += 1
                continue

            while self.slots.length() - 1 > counter and is_equal_value(self.slots.last(), target, self.compare):
                self.slots.pop_last()
                self.modification_counter += 1
                removed += 1

            filler = self.slots.pop_last()
            self.modification_counter += 1
            removed += 1
            if counter < self.slots.length():
                self.slots.set(counter, filler)
                if self._sift_down(counter) == counter:
                    self._sift_up(counter)

        if removed == 0:
            print_(f"delete({target!r}): no matching value")
            return False
        print_(f"delete({target!r}): removed {removed} entries")
        return True

    def peek(self):
        if self.is_empty():
            return None
        return self.slots.get(0).value

    def contains(self, target):
        for i in range(self.slots.length()):
            if is_equal_value(self.slots.get(i), target, self.compare):
                return True
        return False

    def size(self):
        return self.slots.length()

    def clear(self):
        self.slots.delete_all()
        self.modification_counter += 1
        print_("heap cleared")

    def is_empty(self):
        return self.slots.length() == 0

    def is_full(self):
        return self.slots.is_full()

    def iterator(self):
        return HeapIterator(self)

    # Move the entry at i towards the root until its parent is not greater
    def _sift_up(self, i):
        parent = (i - 1) // 2
        while i > 0 and compare_entry(self.slots.get(parent), self.slots.get(i), self.compare) > 0:
            self.slots.swap(i, parent)
            i = parent
            parent = (i - 1) // 2
        return i

    # Move the entry at i towards the leaves until no child is smaller
    def _sift_down(self, i):
        length = self.slots.length()
        while True:
            left = 2 * i + 1
            right = 2 * i + 2
            smallest = i

            if left < length and compare_entry(self.slots.get(left), self.slots.get(smallest), self.compare) < 0:
                smallest = left
            if right < length and compare_entry(self.slots.get(right), self.slots.get(smallest), self.compare) < 0:
                smallest = right

            if smallest == i:
                return i

            self.slots.swap(i, smallest)
            i = smallest
