"""Fixed-width 128-bit integers built from two 64-bit halves."""

from __future__ import annotations

from dataclasses import dataclass

_MASK64 = (1 << 64) - 1
_MASK128 = (1 << 128) - 1
_I64_MIN = -(1 << 63)
_I64_MAX = (1 << 63) - 1


def _to_signed128(value: int) -> int:
    value &= _MASK128
    return value - (1 << 128) if value >> 127 else value


@dataclass(frozen=True, order=True)
class Int128:
    """Signed 128-bit value; ordering compares ``high`` then ``low``."""

    high: int
    low: int

    def __post_init__(self) -> None:
        if not _I64_MIN <= self.high <= _I64_MAX:
            raise OverflowError(f"high half out of signed 64-bit range: {self.high}")
        if not 0 <= self.low <= _MASK64:
            raise OverflowError(f"low half out of unsigned 64-bit range: {self.low}")

    @classmethod
    def from_int(cls, value: int) -> "Int128":
        if not -(1 << 127) <= value < (1 << 127):
            raise OverflowError(f"value out of signed 128-bit range: {value}")
        return cls._wrap(value)

    @classmethod
    def _wrap(cls, value: int) -> "Int128":
        value = _to_signed128(value)
        return cls(value >> 64, value & _MASK64)

    def __int__(self) -> int:
        return (self.high << 64) | self.low

    def __add__(self, other: "Int128") -> "Int128":
        if not isinstance(other, Int128):
            return NotImplemented
        return Int128._wrap(int(self) + int(other))

    def __sub__(self, other: "Int128") -> "Int128":
        if not isinstance(other, Int128):
            return NotImplemented
        return Int128._wrap(int(self) - int(other))

    def to_unsigned(self) -> "UInt128":
        """Reinterpret the same bits as an unsigned value."""
        return UInt128(self.high & _MASK64, self.low)


@dataclass(frozen=True, order=True)
class UInt128:
    """Unsigned 128-bit value; ordering compares ``high`` then ``low``."""

    high: int
    low: int

    def __post_init__(self) -> None:
        for name, half in (("high", self.high), ("low", self.low)):
            if not 0 <= half <= _MASK64:
                raise OverflowError(f"{name} half out of unsigned 64-bit range: {half}")

    @classmethod
    def from_int(cls, value: int) -> "UInt128":
        if not 0 <= value <= _MASK128:
            raise OverflowError(f"value out of unsigned 128-bit range: {value}")
        return cls._wrap(value)

    @classmethod
    def _wrap(cls, value: int) -> "UInt128":
        value &= _MASK128
        return cls(value >> 64, value & _MASK64)

    def __int__(self) -> int:
        return (self.high << 64) | self.low

    def __add__(self, other: "UInt128") -> "UInt128":
        if not isinstance(other, UInt128):
            return NotImplemented
        return UInt128._wrap(int(self) + int(other))

    def __sub__(self, other: "UInt128") -> "UInt128":
        if not isinstance(other, UInt128):
            return NotImplemented
        return UInt128._wrap(int(self) - int(other))

    def to_signed(self) -> Int128:
        """Reinterpret the same bits as a signed value."""
        return Int128._wrap(int(self))