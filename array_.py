class Array:
    """Fixed-capacity slot storage. Populated slots are always [0, length())."""

    def __init__(self, size):
        self.size = size
        self.index = 0
        self.elements = [None] * size

    def insert(self, data):
        if self.index >= self.size:
            return False
        self.elements[self.index] = data
        self.index += 1
        return True

    def get(self, i):
        if i >= self.size or i >= self.index:
            return None
        return self.elements[i]

    def set(self, i, data):
        if i >= self.index:
            raise IndexError(f"slot {i} is outside the populated range [0, {self.index})")
        self.elements[i] = data

    def swap(self, i, j):
        self.elements[i], self.elements[j] = self.elements[j], self.elements[i]

    def last(self):
        if self.index == 0:
            return None
        return self.elements[self.index - 1]

    def pop_last(self):
        if self.index == 0:
            return None
        self.index -= 1
        data = self.elements[self.index]
        self.elements[self.index] = None
        return data

    def length(self):
        return self.index

    def is_full(self):
        return self.index == self.size

    def delete_all(self):
        # Slots keep their references; everything at or past index is unreachable.
        self.index = 0
