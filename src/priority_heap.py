"""Binary heap ordered by a caller-supplied priority predicate.

``comparator(a, b)`` returns True when ``a`` must sit closer to the root than
``b``. The predicate should be a strict weak ordering; it is not checked.
"""

import operator
from typing import Callable, Generic, List, Optional, TypeVar

T = TypeVar('T')

Comparator = Callable[[T, T], bool]


class Heap(Generic[T]):
    def __init__(self, comparator: Comparator) -> None:
        if not callable(comparator):
            raise TypeError("comparator must be callable")
        self._data: List[T] = []
        self._comparator = comparator

    @classmethod
    def min_heap(cls) -> 'Heap[T]':
        return cls(operator.lt)

    @classmethod
    def max_heap(cls) -> 'Heap[T]':
        return cls(operator.gt)

    @property
    def comparator(self) -> Comparator:
        return self._comparator

    def add(self, element: T) -> None:
        self._data.append(element)
        self._sift_up(len(self._data) - 1)

    def remove_first(self) -> Optional[T]:
        """Remove and return the highest-priority element, or None if empty."""
        if not self._data:
            return None
        last = len(self._data) - 1
        self._data[0], self._data[last] = self._data[last], self._data[0]
        result = self._data.pop()
        if self._data:
            self._sift_down(0)
        return result

    def top(self) -> Optional[T]:
        if not self._data:
            return None
        return self._data[0]

    def size(self) -> int:
        return len(self._data)

    def is_empty(self) -> bool:
        return len(self._data) == 0

    def copy(self) -> 'Heap[T]':
        clone: Heap[T] = Heap(self._comparator)
        clone._data = self._data.copy()
        return clone

    def _sift_up(self, index: int) -> None:
        while index > 0:
            parent = (index - 1) // 2
            if self._comparator(self._data[index], self._data[parent]):
                self._data[index], self._data[parent] = self._data[parent], self._data[index]
                index = parent
            else:
                break

    def _sift_down(self, index: int) -> None:
        # Swap with the strongest child that outranks the current element.
        size = len(self._data)
        while True:
            best = index
            left = 2 * index + 1
            right = 2 * index + 2
            if left < size and self._comparator(self._data[left], self._data[best]):
                best = left
            if right < size and self._comparator(self._data[right], self._data[best]):
                best = right
            if best == index:
                break
            self._data[index], self._data[best] = self._data[best], self._data[index]
            index = best

    def __len__(self) -> int:
        return len(self._data)

    def __bool__(self) -> bool:
        return len(self._data) > 0

    def __repr__(self) -> str:
        return f"Heap({self._data})"

    def __str__(self) -> str:
        return f"Heap(size={len(self._data)})"
