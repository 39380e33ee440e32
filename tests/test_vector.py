import pytest

from boundedkit.vector import Vector


def test_add_and_iterate():
    vec = Vector(4)
    for item in ("a", "b", "c"):
        vec.add(item)
    assert list(vec) == ["a", "b", "c"]
    assert len(vec) == 3


def test_default_capacity():
    vec = Vector()
    for n in range(16):
        vec.add(n)
    with pytest.raises(OverflowError):
        vec.add(16)


def test_overflow():
    vec = Vector(1)
    vec.add(1)
    with pytest.raises(OverflowError):
        vec.add(2)
    assert list(vec) == [1]


def test_remove_shifts_items():
    vec = Vector(4)
    for item in (1, 2, 3):
        vec.add(item)
    assert vec.remove(0) == 1
    assert list(vec) == [2, 3]


def test_remove_out_of_range():
    vec = Vector(4)
    vec.add(1)
    with pytest.raises(IndexError):
        vec.remove(1)


def test_at_unused_slot_is_none():
    vec = Vector(3)
    vec.add("x")
    assert vec.at(0) == "x"
    assert vec.at(2) is None
    with pytest.raises(IndexError):
        vec.at(3)


def test_getitem_and_setitem():
    vec = Vector(3)
    vec.add(1)
    vec.add(2)
    vec[1] = 5
    assert vec[1] == 5
    assert vec[-1] == 5
    with pytest.raises(IndexError):
        vec[2]


def test_copy_is_independent():
    vec = Vector(3)
    vec.add(1)
    clone = vec.copy()
    assert clone == vec
    clone.add(2)
    assert list(vec) == [1]
    assert clone.capacity == vec.capacity


def test_negative_capacity():
    with pytest.raises(ValueError):
        Vector(-1)