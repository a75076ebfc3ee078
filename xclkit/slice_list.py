"""A list stored as a chain of fixed-size slices.

Capacity grows one slice at a time, so it is always a multiple of
``SLICE_CAP``. Removing items gives back slices that are no longer needed.
"""

from __future__ import annotations

from typing import Any, Generic, Iterable, Iterator, List, TypeVar

T = TypeVar("T")

SLICE_CAP_SHIFT = 9
SLICE_CAP = 1 << SLICE_CAP_SHIFT


def _slices_for(n: int) -> int:
    return (n + SLICE_CAP - 1) >> SLICE_CAP_SHIFT


def _check_count(n: int) -> None:
    if n < 0:
        raise ValueError(f"count must not be negative: {n}")


class SliceList(Generic[T]):
    """Sequence whose storage is allocated in slices of ``SLICE_CAP`` items."""

    def __init__(self) -> None:
        self._items: List[T] = []
        self._slices = 0

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, i: int) -> T:
        size = len(self._items)
        if not -size <= i < size:
            raise IndexError(f"index {i} out of range for size {size}")
        return self._items[i]

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._items))

    def __repr__(self) -> str:
        return f"SliceList({self._items!r})"

    def capacity(self) -> int:
        """Number of items the allocated slices can hold."""
        return self._slices << SLICE_CAP_SHIFT

    def empty(self) -> bool:
        return not self._items

    def _grow_to(self, n: int) -> None:
        required = _slices_for(n)
        if required > self._slices:
            self._slices = required

    def _shrink_to_size(self) -> None:
        self._slices = _slices_for(len(self._items))

    def _check_insert_pos(self, i: int) -> None:
        if not 0 <= i <= len(self._items):
            raise IndexError(f"insert position {i} out of range for size {len(self._items)}")

    def _insert_list(self, i: int, items: List[T]) -> None:
        self._check_insert_pos(i)
        self._grow_to(len(self._items) + len(items))
        self._items[i:i] = items

    def push(self, item: T) -> None:
        """Append one item."""
        self._insert_list(len(self._items), [item])

    def pop(self) -> T:
        """Remove and return the last item."""
        if not self._items:
            raise IndexError("pop from empty SliceList")
        return self._items.pop()

    def insert(self, i: int, items: Iterable[T]) -> None:
        """Insert ``items`` before position ``i``."""
        self._insert_list(i, list(items))

    def insert_repeat(self, i: int, n: int, item: T) -> None:
        """Insert ``n`` copies of ``item`` before position ``i``."""
        _check_count(n)
        self._insert_list(i, [item] * n)

    def insert_from(self, i: int, other: "SliceList[T]", j: int, n: int) -> None:
        """Insert ``n`` items of ``other`` starting at ``j`` before position ``i``."""
        _check_count(n)
        if i > len(self._items) or j < 0 or j + n > len(other):
            raise IndexError("source or destination range out of bounds")
        self._insert_list(i, other._items[j:j + n])

    def remove(self, i: int) -> T:
        """Remove and return the item at position ``i``."""
        if not 0 <= i < len(self._items):
            raise IndexError(f"index {i} out of range for size {len(self._items)}")
        item = self._items.pop(i)
        self._shrink_to_size()
        return item

    def remove_range(self, i: int, n: int) -> List[T]:
        """Remove ``n`` items starting at ``i`` and return them."""
        _check_count(n)
        if i < 0 or i + n > len(self._items):
            raise IndexError("range out of bounds")
        removed = self._items[i:i + n]
        del self._items[i:i + n]
        self._shrink_to_size()
        return removed

    def _fill_list(self, items: List[T]) -> None:
        self._grow_to(len(items))
        self._items = items

    def fill(self, items: Iterable[T]) -> None:
        """Replace the contents with ``items``."""
        self._fill_list(list(items))

    def fill_repeat(self, n: int, item: T) -> None:
        """Replace the contents with ``n`` copies of ``item``."""
        _check_count(n)
        self._fill_list([item] * n)

    def fill_from(self, other: "SliceList[T]", i: int, n: int) -> None:
        """Replace the contents with ``n`` items of ``other`` starting at ``i``."""
        _check_count(n)
        if i < 0 or i + n > len(other):
            raise IndexError("source range out of bounds")
        self._fill_list(other._items[i:i + n])

    def get(self, i: int, n: int) -> List[Any]:
        """Return a copy of ``n`` items starting at ``i``."""
        _check_count(n)
        if i < 0 or i + n > len(self._items):
            raise IndexError("range out of bounds")
        return self._items[i:i + n]

    def clear(self) -> None:
        """Remove every item and release all slices."""
        self._items = []
        self._slices = 0