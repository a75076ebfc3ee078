"""A growable array with explicit capacity management."""

from __future__ import annotations

from typing import Generic, Iterable, Iterator, List, TypeVar

T = TypeVar("T")

DEFAULT_CAPACITY = 8


def _check_count(n: int) -> None:
    if n < 0:
        raise ValueError(f"count must not be negative: {n}")


class Vector(Generic[T]):
    """Array whose capacity doubles (or grows to fit) when it runs out."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity <= 0:
            raise ValueError(f"capacity must be positive: {capacity}")
        self._items: List[T] = []
        self._cap = capacity

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, pos: int) -> T:
        size = len(self._items)
        if not -size <= pos < size:
            raise IndexError(f"position {pos} out of range for size {size}")
        return self._items[pos]

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._items))

    def __repr__(self) -> str:
        return f"Vector({self._items!r}, capacity={self._cap})"

    def capacity(self) -> int:
        return self._cap

    def empty(self) -> bool:
        return not self._items

    def reserve(self, size: int) -> None:
        """Make room for at least ``size`` items."""
        if self._cap >= size:
            return
        self._cap = max(self._cap << 1, size)

    def push(self, item: T) -> None:
        self.reserve(len(self._items) + 1)
        self._items.append(item)

    def pop(self) -> T:
        """Remove and return the last item."""
        if not self._items:
            raise IndexError("pop from empty Vector")
        return self._items.pop()

    def _insert_list(self, pos: int, items: List[T]) -> None:
        if not 0 <= pos <= len(self._items):
            raise IndexError(f"position {pos} out of range for size {len(self._items)}")
        if not items:
            return
        self.reserve(len(self._items) + len(items))
        self._items[pos:pos] = items

    def insert(self, pos: int, items: Iterable[T]) -> None:
        """Insert ``items`` before ``pos``."""
        self._insert_list(pos, list(items))

    def insert_repeat(self, pos: int, n: int, item: T) -> None:
        """Insert ``n`` copies of ``item`` before ``pos``."""
        _check_count(n)
        self._insert_list(pos, [item] * n)

    def remove(self, pos: int, n: int = 1) -> None:
        """Remove ``n`` items starting at ``pos``."""
        _check_count(n)
        if pos < 0 or pos + n > len(self._items):
            raise IndexError("range out of bounds")
        del self._items[pos:pos + n]

    def fill(self, items: Iterable[T]) -> None:
        """Replace the contents with ``items``."""
        new_items = list(items)
        self.reserve(len(new_items))
        self._items = new_items

    def fill_repeat(self, n: int, item: T) -> None:
        """Replace the contents with ``n`` copies of ``item``."""
        _check_count(n)
        self.reserve(n)
        self._items = [item] * n

    def clear(self) -> None:
        """Remove every item, keeping the capacity."""
        self._items = []

    def copy(self) -> "Vector[T]":
        """Return a shallow copy with the same capacity."""
        other: Vector[T] = Vector(self._cap)
        other._items = list(self._items)
        return other

    def resize(self, n: int, item: T = None) -> None:  # type: ignore[assignment]
        """Grow with copies of ``item`` or truncate to ``n`` items."""
        _check_count(n)
        size = len(self._items)
        if n > size:
            self._insert_list(size, [item] * (n - size))
        else:
            del self._items[n:]

    def back(self) -> T:
        """Return the last item."""
        if not self._items:
            raise IndexError("back of empty Vector")
        return self._items[-1]