"""Array-backed min priority queue ordered by a three-way comparator.

Keys live in slots 1..n of the backing list; slot 0 is unused so the children
of k sit at 2k and 2k+1 and its parent at k // 2.
"""

from typing import Callable, Generic, Iterable, Iterator, List, Optional, TypeVar

T = TypeVar('T')

Comparator = Callable[[T, T], int]


def natural_order(a, b) -> int:
    return (a > b) - (a < b)


class Underflow(IndexError):
    def __init__(self, message: str = "Priority queue underflow") -> None:
        super().__init__(message)


class MinPQ(Generic[T]):
    def __init__(self, comparator: Optional[Comparator] = None, initial_capacity: int = 1) -> None:
        if not isinstance(initial_capacity, int) or initial_capacity < 0:
            raise ValueError("initial_capacity must be a non-negative integer")
        self._comparator: Comparator = comparator if comparator is not None else natural_order
        self._pq: List[Optional[T]] = [None] * (initial_capacity + 1)
        self._n = 0

    @staticmethod
    def from_array(arr: Iterable[T], comparator: Optional[Comparator] = None) -> 'MinPQ[T]':
        """Build a heap from an iterable in linear time.

        Note: Creates a shallow copy of the input; the store is left exactly full.
        """
        heap: MinPQ[T] = MinPQ(comparator, 0)
        heap._pq = [None]
        heap._pq.extend(arr)
        heap._n = len(heap._pq) - 1
        for k in range(heap._n // 2, 0, -1):
            heap._sink(k)
        return heap

    def is_empty(self) -> bool:
        return self._n == 0

    def size(self) -> int:
        return self._n

    def min(self) -> T:
        if self.is_empty():
            raise Underflow()
        return self._pq[1]

    def insert(self, x: T) -> None:
        if self._n == len(self._pq) - 1:
            self._resize(2 * len(self._pq))
        self._n += 1
        self._pq[self._n] = x
        self._swim(self._n)

    def extract_min(self) -> T:
        if self.is_empty():
            raise Underflow()
        result = self._pq[1]
        self._exch(1, self._n)
        self._n -= 1
        self._sink(1)
        self._pq[self._n + 1] = None
        if self._n > 0 and self._n <= (len(self._pq) - 1) // 4:
            self._resize(len(self._pq) // 2)
        return result

    def clear(self) -> None:
        self._pq = [None] * 2
        self._n = 0

    def copy(self) -> 'MinPQ[T]':
        clone: MinPQ[T] = MinPQ(self._comparator, 0)
        clone._pq = self._pq.copy()
        clone._n = self._n
        return clone

    def _resize(self, capacity: int) -> None:
        temp: List[Optional[T]] = [None] * capacity
        temp[1:self._n + 1] = self._pq[1:self._n + 1]
        self._pq = temp

    def _swim(self, k: int) -> None:
        while k > 1 and self._greater(k // 2, k):
            self._exch(k, k // 2)
            k = k // 2

    def _sink(self, k: int) -> None:
        while 2 * k <= self._n:
            j = 2 * k
            if j < self._n and self._greater(j, j + 1):
                j += 1
            if not self._greater(k, j):
                break
            self._exch(k, j)
            k = j

    def _greater(self, i: int, j: int) -> bool:
        return self._comparator(self._pq[i], self._pq[j]) > 0

    def _exch(self, i: int, j: int) -> None:
        self._pq[i], self._pq[j] = self._pq[j], self._pq[i]

    def _is_min_heap(self, k: int = 1) -> bool:
        # subtree rooted at k
        if k > self._n:
            return True
        left = 2 * k
        right = 2 * k + 1
        if left <= self._n and self._greater(k, left):
            return False
        if right <= self._n and self._greater(k, right):
            return False
        return self._is_min_heap(left) and self._is_min_heap(right)

    def __len__(self) -> int:
        return self._n

    def __bool__(self) -> bool:
        return self._n > 0

    def __repr__(self) -> str:
        return f"MinPQ({self._pq[1:self._n + 1]})"

    def __str__(self) -> str:
        return f"MinPQ(size={self._n})"

    def __iter__(self) -> 'HeapIterator[T]':
        return HeapIterator(self)


class HeapIterator(Generic[T]):
    """Yields the keys of a heap in ascending order.

    Works on a private copy taken at creation; the source heap is never
    touched, and later changes to it are not seen.
    """

    def __init__(self, heap: MinPQ[T]) -> None:
        self._copy = heap.copy()

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        if self._copy.is_empty():
            raise StopIteration
        return self._copy.extract_min()

    def __len__(self) -> int:
        return self._copy.size()

    def __length_hint__(self) -> int:
        return self._copy.size()
