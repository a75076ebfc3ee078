import pytest

from xclkit.slice_list import SLICE_CAP, SliceList


def make(values):
    sl = SliceList()
    for v in values:
        sl.push(v)
    return sl


def test_new_list_is_empty_without_capacity():
    sl = SliceList()
    assert sl.empty()
    assert len(sl) == 0
    assert sl.capacity() == 0


def test_push_allocates_one_slice():
    sl = make([1])
    assert sl.capacity() == SLICE_CAP
    assert sl[0] == 1


def test_push_across_slice_boundary():
    values = list(range(SLICE_CAP + 3))
    sl = make(values)
    assert list(sl) == values
    assert sl.capacity() == 2 * SLICE_CAP


def test_pop_returns_last_and_raises_when_empty():
    sl = make(["a", "b"])
    assert sl.pop() == "b"
    assert sl.pop() == "a"
    with pytest.raises(IndexError):
        sl.pop()


def test_getitem_out_of_range():
    sl = make([1, 2])
    with pytest.raises(IndexError):
        sl[2]
    assert sl[-1] == 2


def test_insert_in_middle_matches_list():
    base = list(range(SLICE_CAP * 2))
    sl = make(base)
    extra = list(range(-10, 0))
    sl.insert(SLICE_CAP - 3, extra)
    expected = base[: SLICE_CAP - 3] + extra + base[SLICE_CAP - 3 :]
    assert list(sl) == expected


def test_insert_position_beyond_size():
    sl = make([1])
    with pytest.raises(IndexError):
        sl.insert(2, [5])


def test_insert_repeat():
    sl = make([1, 2])
    sl.insert_repeat(1, 3, "x")
    assert list(sl) == [1, "x", "x", "x", 2]


def test_insert_from_other_list():
    a = make([1, 2, 3])
    b = make([7, 8, 9])
    a.insert_from(1, b, 1, 2)
    assert list(a) == [1, 8, 9, 2, 3]


def test_insert_from_self():
    a = make([1, 2, 3])
    a.insert_from(0, a, 1, 2)
    assert list(a) == [2, 3, 1, 2, 3]


def test_insert_from_bad_range():
    a = make([1])
    b = make([1, 2])
    with pytest.raises(IndexError):
        a.insert_from(0, b, 1, 2)
    with pytest.raises(IndexError):
        a.insert_from(5, b, 0, 1)


def test_remove_returns_item_and_shrinks():
    values = list(range(SLICE_CAP + 1))
    sl = make(values)
    assert sl.remove(0) == 0
    assert list(sl) == values[1:]
    assert sl.capacity() == SLICE_CAP
    with pytest.raises(IndexError):
        sl.remove(len(sl))


def test_remove_range():
    sl = make(list(range(10)))
    removed = sl.remove_range(2, 3)
    assert removed == [2, 3, 4]
    assert list(sl) == [0, 1, 5, 6, 7, 8, 9]
    with pytest.raises(IndexError):
        sl.remove_range(5, 10)


def test_fill_replaces_contents():
    sl = make([1, 2, 3])
    sl.fill(["a"])
    assert list(sl) == ["a"]


def test_fill_repeat_and_fill_from():
    sl = SliceList()
    sl.fill_repeat(4, 0)
    assert list(sl) == [0, 0, 0, 0]
    other = make([5, 6, 7])
    sl.fill_from(other, 1, 2)
    assert list(sl) == [6, 7]
    with pytest.raises(IndexError):
        sl.fill_from(other, 2, 2)


def test_get_range():
    sl = make(list(range(SLICE_CAP + 10)))
    assert sl.get(SLICE_CAP - 1, 3) == [SLICE_CAP - 1, SLICE_CAP, SLICE_CAP + 1]
    with pytest.raises(IndexError):
        sl.get(SLICE_CAP, 11)


def test_negative_count_rejected():
    sl = make([1])
    with pytest.raises(ValueError):
        sl.insert_repeat(0, -1, 1)


def test_clear_releases_capacity():
    sl = make(list(range(5)))
    sl.clear()
    assert sl.empty()
    assert sl.capacity() == 0