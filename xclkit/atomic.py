"""Integer and reference cells whose operations happen atomically."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")

_WIDTHS = (8, 16, 32, 64)


@dataclass(frozen=True)
class CasResult(Generic[T]):
    """Outcome of a compare-and-exchange.

    ``value`` is what the cell held before the operation; it equals the
    expected value when ``success`` is True. The result is truthy on success.
    """

    success: bool
    value: T

    def __bool__(self) -> bool:
        return self.success


class AtomicInt:
    """Signed two's-complement integer of 8, 16, 32 or 64 bits.

    Stored values and arithmetic results wrap around to the width.
    """

    def __init__(self, bits: int = 32, value: int = 0) -> None:
        if bits not in _WIDTHS:
            raise ValueError(f"bits must be one of {_WIDTHS}, got {bits}")
        self._bits = bits
        self._mask = (1 << bits) - 1
        self._sign = 1 << (bits - 1)
        self._lock = threading.Lock()
        self._value = self._wrap(value)

    @property
    def bits(self) -> int:
        return self._bits

    def _wrap(self, value: int) -> int:
        value &= self._mask
        return value - (1 << self._bits) if value & self._sign else value

    def __repr__(self) -> str:
        return f"AtomicInt(bits={self._bits}, value={self.load()})"

    def load(self) -> int:
        with self._lock:
            return self._value

    def store(self, value: int) -> None:
        with self._lock:
            self._value = self._wrap(value)

    def fetch_add(self, delta: int) -> int:
        """Add ``delta`` and return the previous value."""
        with self._lock:
            old = self._value
            self._value = self._wrap(old + delta)
            return old

    def fetch_sub(self, delta: int) -> int:
        """Subtract ``delta`` and return the previous value."""
        with self._lock:
            old = self._value
            self._value = self._wrap(old - delta)
            return old

    def exchange(self, value: int) -> int:
        """Store ``value`` and return the previous value."""
        with self._lock:
            old = self._value
            self._value = self._wrap(value)
            return old

    def compare_exchange(self, expected: int, desired: int) -> CasResult[int]:
        """Store ``desired`` if the cell holds ``expected``."""
        expected = self._wrap(expected)
        with self._lock:
            old = self._value
            if old == expected:
                self._value = self._wrap(desired)
                return CasResult(True, old)
            return CasResult(False, old)


class AtomicRef(Generic[T]):
    """Cell holding an object reference; comparison is by identity."""

    def __init__(self, value: Any = None) -> None:
        self._lock = threading.Lock()
        self._value = value

    def __repr__(self) -> str:
        return f"AtomicRef({self.load()!r})"

    def load(self) -> Any:
        with self._lock:
            return self._value

    def store(self, value: Any) -> None:
        with self._lock:
            self._value = value

    def exchange(self, value: Any) -> Any:
        """Store ``value`` and return the previous reference."""
        with self._lock:
            old = self._value
            self._value = value
            return old

    def compare_exchange(self, expected: Any, desired: Any) -> CasResult[Any]:
        """Store ``desired`` if the cell holds the very object ``expected``."""
        with self._lock:
            old = self._value
            if old is expected:
                self._value = desired
                return CasResult(True, old)
            return CasResult(False, old)