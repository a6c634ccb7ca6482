from dataclasses import dataclass, field

import pytest
from hypothesis import given
from hypothesis import strategies as st

from audioblocks.containers import (
    FixedList,
    FixedMatrix,
    FixedVector,
    distribute_list,
    undistribute_list,
)


# FixedVector

def test_vector_with_size_uses_factory_for_each_element():
    v = FixedVector(3, list)
    assert len(v) == 3
    assert v.capacity == 3
    assert all(item == [] for item in v)
    v[0].append(1)
    assert v[1] == []


def test_vector_default_elements_are_none():
    v = FixedVector(2)
    assert list(v) == [None, None]


def test_vector_from_iterable():
    v = FixedVector(["a", "b"])
    assert list(v) == ["a", "b"]
    assert v.capacity == 2


def test_vector_append_when_full_raises():
    v = FixedVector(2)
    with pytest.raises(RuntimeError):
        v.append("x")


def test_vector_reserve_then_append_up_to_capacity():
    v = FixedVector()
    assert v.capacity == 0
    v.reserve(2)
    v.append("a")
    v.append("b")
    assert list(v) == ["a", "b"]
    with pytest.raises(RuntimeError):
        v.append("c")


def test_vector_reserve_twice_raises():
    v = FixedVector()
    v.reserve(2)
    with pytest.raises(RuntimeError):
        v.reserve(4)


def test_vector_resize_only_when_empty():
    v = FixedVector(factory=dict)
    v.resize(3)
    assert list(v) == [{}, {}, {}]
    with pytest.raises(RuntimeError):
        v.resize(5)


def test_vector_resize_after_construction_with_size_raises():
    v = FixedVector(1)
    with pytest.raises(RuntimeError):
        v.resize(1)


def test_vector_setitem_and_getitem():
    v = FixedVector(3)
    v[1] = "mid"
    v[-1] = "last"
    assert v[1] == "mid"
    assert v[2] == "last"
    assert v[0:2] == [None, "mid"]


def test_vector_setitem_out_of_range_raises():
    v = FixedVector(2)
    with pytest.raises(IndexError):
        v[2] = "x"
    assert list(v) == [None, None]
    assert len(v) == 2


def test_vector_slice_assignment_keeps_size():
    v = FixedVector(3)
    v[0:2] = ["a", "b"]
    assert list(v) == ["a", "b", None]
    with pytest.raises(ValueError):
        v[0:2] = ["a"]
    assert len(v) == 3


def test_vector_negative_size_raises():
    with pytest.raises(ValueError):
        FixedVector(-1)


# FixedList

def test_list_move_places_element_before_target():
    fl = FixedList(["a", "b", "c", "d"])
    fl.move(0, 3)
    assert list(fl) == ["b", "c", "a", "d"]


def test_list_move_to_end():
    fl = FixedList(["a", "b", "c"])
    fl.move(0, len(fl))
    assert list(fl) == ["b", "c", "a"]


def test_list_move_backwards():
    fl = FixedList(["a", "b", "c", "d"])
    fl.move(3, 1)
    assert list(fl) == ["a", "d", "b", "c"]


def test_list_move_to_own_position_is_noop():
    fl = FixedList(["a", "b", "c"])
    fl.move(1, 1)
    fl.move(1, 2)
    assert list(fl) == ["a", "b", "c"]


def test_list_move_range():
    fl = FixedList(["a", "b", "c", "d", "e"])
    fl.move_range(0, 2, 4)
    assert list(fl) == ["c", "d", "a", "b", "e"]


def test_list_move_range_forward():
    fl = FixedList(["a", "b", "c", "d", "e"])
    fl.move_range(3, 5, 0)
    assert list(fl) == ["d", "e", "a", "b", "c"]


def test_list_move_range_into_itself_raises():
    fl = FixedList(["a", "b", "c", "d"])
    with pytest.raises(ValueError):
        fl.move_range(0, 3, 1)


def test_list_move_out_of_range_raises():
    fl = FixedList(["a", "b"])
    with pytest.raises(IndexError):
        fl.move(2, 0)


def test_list_reverse_and_sort():
    fl = FixedList([3, 1, 2])
    fl.sort()
    assert list(fl) == [1, 2, 3]
    fl.reverse()
    assert list(fl) == [3, 2, 1]
    fl.sort(key=lambda x: -x)
    assert list(fl) == [3, 2, 1]


def test_list_getitem_and_len():
    fl = FixedList("xyz")
    assert len(fl) == 3
    assert fl[0] == "x"
    assert fl[-1] == "z"
    with pytest.raises(IndexError):
        fl[3]


@given(st.lists(st.integers(), min_size=1), st.data())
def test_list_move_preserves_elements(items, data):
    fl = FixedList(items)
    source = data.draw(st.integers(0, len(items) - 1))
    target = data.draw(st.integers(0, len(items)))
    fl.move(source, target)
    assert sorted(fl) == sorted(items)
    assert len(fl) == len(items)


# FixedMatrix

def test_matrix_starts_with_zeros():
    m = FixedMatrix(2, 3)
    assert len(m.channels) == 2
    assert len(m.slices) == 3
    assert all(len(ch) == 3 for ch in m.channels)
    assert all(len(sl) == 2 for sl in m.slices)
    assert m.data == [0.0] * 6


def test_matrix_channel_write_is_visible_in_slices_and_data():
    m = FixedMatrix(2, 3)
    m.channels[1][2] = 7.0
    assert m.slices[2][1] == 7.0
    assert m.data[5] == 7.0


def test_matrix_slices_are_columns_of_channels():
    m = FixedMatrix(2, 3)
    m.set_channels([[1, 2, 3], [4, 5, 6]])
    assert [list(s) for s in m.slices] == [[1, 4], [2, 5], [3, 6]]
    assert m.data == [1, 2, 3, 4, 5, 6]


def test_matrix_set_channels_from_slices_transposes():
    source = FixedMatrix(2, 3)
    source.set_channels([[1, 2, 3], [4, 5, 6]])
    target = FixedMatrix(3, 2)
    target.set_channels(source.slices)
    assert [list(c) for c in target.channels] == [list(s) for s in source.slices]
    back = FixedMatrix(2, 3)
    back.set_channels(target.slices)
    assert back.data == source.data


def test_matrix_set_channels_dimension_mismatch_raises():
    m = FixedMatrix(2, 3)
    with pytest.raises(ValueError):
        m.set_channels([[1, 2, 3]])
    with pytest.raises(ValueError):
        m.set_channels([[1, 2, 3], [4, 5]])
    assert m.data == [0.0] * 6


def test_matrix_initialize_only_when_empty():
    m = FixedMatrix()
    assert m.data == []
    m.initialize(2, 2)
    assert len(m.channels) == 2
    with pytest.raises(RuntimeError):
        m.initialize(3, 3)


def test_matrix_data_is_shared_storage():
    m = FixedMatrix(1, 2)
    m.data[1] = 3.5
    assert m.channels[0][1] == 3.5


@given(st.integers(0, 5), st.integers(0, 5), st.data())
def test_matrix_transpose_round_trip(channels, slices, data):
    rows = [data.draw(st.lists(st.integers(), min_size=slices, max_size=slices))
            for _ in range(channels)]
    m = FixedMatrix(channels, slices)
    m.set_channels(rows)
    assert [list(c) for c in m.channels] == rows
    t = FixedMatrix(slices, channels)
    t.set_channels(m.slices)
    back = FixedMatrix(channels, slices)
    back.set_channels(t.slices)
    assert [list(c) for c in back.channels] == rows


# distribute_list / undistribute_list

@dataclass
class Holder:
    items: list = field(default_factory=list)


def test_distribute_list_appends_one_element_to_each_target():
    targets = [Holder(["old"]), Holder()]
    source = ["a", "b"]
    distribute_list(source, targets, "items")
    assert source == []
    assert targets[0].items == ["old", "a"]
    assert targets[1].items == ["b"]


def test_distribute_list_size_mismatch_raises():
    source = ["a"]
    with pytest.raises(ValueError):
        distribute_list(source, [Holder(), Holder()], "items")
    assert source == ["a"]


def test_undistribute_list_reverses_distribute():
    targets = [Holder(["x"]), Holder(["y"])]
    source = ["a", "b"]
    distribute_list(source, targets, "items")
    garbage = []
    undistribute_list(["a", "b"], targets, "items", garbage)
    assert garbage == ["a", "b"]
    assert targets[0].items == ["x"]
    assert targets[1].items == ["y"]


def test_undistribute_list_missing_element_raises():
    targets = [Holder(["a"]), Holder(["c"])]
    garbage = []
    with pytest.raises(ValueError):
        undistribute_list(["a", "b"], targets, "items", garbage)
    assert garbage == ["a"]


def test_undistribute_list_size_mismatch_raises():
    with pytest.raises(ValueError):
        undistribute_list(["a", "b"], [Holder(["a"])], "items", [])