from enum import Enum


class ConcurrentModificationError(RuntimeError):
    """Raised when a heap is mutated while an iterator over it is in use."""


class UnsupportedOperationError(TypeError):
    """Raised when removal is attempted through a read-only heap iterator."""


class IterState(Enum):
    VALUE = "VALUE"
    END = "END"
    INVALIDATED = "INVALIDATED"


class HeapIterator:
    """
    Read-only view over the populated slots of a heap, in raw array order.

    The iterator remembers the heap's modification counter when it is created.
    Any insert, remove, delete or clear performed afterwards makes the next
    progress check fail with ConcurrentModificationError. Once that happens the
    iterator stays invalid; create a new one to read the heap again.
    """

    def __init__(self, heap):
        self.heap = heap
        self.iter_index = 0
        self.state_check = heap.modification_counter

    def is_valid(self) -> bool:
        return self.state_check == self.heap.modification_counter

    def has_next(self) -> bool:
        if not self.is_valid():
            raise ConcurrentModificationError(
                f"heap modified during iteration (expected generation {self.state_check}, "
                f"found {self.heap.modification_counter})"
            )
        return self.iter_index < self.heap.size()

    def next_step(self):
        """
        Advance without raising.

        :return: (IterState.VALUE, value), (IterState.END, None) or
                 (IterState.INVALIDATED, None).
        """
        if not self.is_valid():
            return IterState.INVALIDATED, None
        if self.iter_index >= self.heap.size():
            return IterState.END, None
        entry = self.heap.slots.get(self.iter_index)
        self.iter_index += 1
        return IterState.VALUE, entry.value

    def remove(self):
        raise UnsupportedOperationError("heap iterators are read-only")

    def __iter__(self):
        return self

    def __next__(self):
        if not self.has_next():
            raise StopIteration
        entry = self.heap.slots.get(self.iter_index)
        self.iter_index += 1
        return entry.value
