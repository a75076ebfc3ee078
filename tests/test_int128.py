import pytest

from xclkit.int128 import Int128, UInt128

SIGNED_SAMPLES = [0, 1, -1, 2**64, -(2**64), 2**127 - 1, -(2**127), 12345678901234567890]
UNSIGNED_SAMPLES = [0, 1, 2**64 - 1, 2**64, 2**128 - 1]


@pytest.mark.parametrize("value", SIGNED_SAMPLES)
def test_signed_round_trip(value):
    assert int(Int128.from_int(value)) == value


@pytest.mark.parametrize("value", UNSIGNED_SAMPLES)
def test_unsigned_round_trip(value):
    assert int(UInt128.from_int(value)) == value


def test_minus_one_halves():
    v = Int128.from_int(-1)
    assert v.high == -1
    assert v.low == 2**64 - 1


def test_out_of_range():
    with pytest.raises(OverflowError):
        Int128.from_int(2**127)
    with pytest.raises(OverflowError):
        UInt128.from_int(-1)
    with pytest.raises(OverflowError):
        Int128(0, -1)


@pytest.mark.parametrize("a", SIGNED_SAMPLES)
@pytest.mark.parametrize("b", SIGNED_SAMPLES)
def test_signed_ordering_matches_int(a, b):
    x, y = Int128.from_int(a), Int128.from_int(b)
    assert (x < y) == (a < b)
    assert (x == y) == (a == b)


def test_signed_add_wraps():
    top = Int128.from_int(2**127 - 1)
    assert top + Int128.from_int(1) == Int128.from_int(-(2**127))


def test_unsigned_sub_wraps():
    zero = UInt128.from_int(0)
    assert zero - UInt128.from_int(1) == UInt128.from_int(2**128 - 1)


def test_add_sub_inverse():
    a = Int128.from_int(-(2**70) + 5)
    b = Int128.from_int(2**65 + 3)
    assert (a + b) - b == a


@pytest.mark.parametrize("value", SIGNED_SAMPLES)
def test_reinterpret_round_trip(value):
    v = Int128.from_int(value)
    u = v.to_unsigned()
    assert u.low == v.low
    assert u.to_signed() == v


def test_minus_one_as_unsigned_is_max():
    assert Int128.from_int(-1).to_unsigned() == UInt128.from_int(2**128 - 1)