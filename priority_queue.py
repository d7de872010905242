from abc import ABC, abstractmethod


class PriorityQueue(ABC):
    """Minimum priority queue interface. Lower values are served first."""

    @abstractmethod
    def insert(self, value) -> bool:
        pass

    @abstractmethod
    def remove(self):
        pass

    @abstractmethod
    def delete(self, target) -> bool:
        pass

    @abstractmethod
    def peek(self):
        pass

    @abstractmethod
    def contains(self, target) -> bool:
        pass

    @abstractmethod
    def size(self) -> int:
        pass

    @abstractmethod
    def clear(self) -> None:
        pass

    @abstractmethod
    def is_empty(self) -> bool:
        pass

    @abstractmethod
    def is_full(self) -> bool:
        pass

    @abstractmethod
    def iterator(self):
        pass

    def __len__(self):
        return self.size()

    def __contains__(self, target):
        return self.contains(target)

    def __iter__(self):
        return self.iterator()
