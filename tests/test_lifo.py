import pytest

from boundedkit.lifo import Stack


def test_last_in_first_out():
    stack = Stack(4)
    for item in ("a", "b", "c"):
        stack.push(item)
    assert [stack.pop() for _ in range(3)] == ["c", "b", "a"]
    assert len(stack) == 0


def test_top_and_back():
    stack = Stack(4)
    stack.push(1)
    stack.push(2)
    assert stack.top() == 2
    assert stack.back() == 1
    assert len(stack) == 2


def test_empty_stack_errors():
    stack = Stack(2)
    with pytest.raises(IndexError):
        stack.pop()
    with pytest.raises(IndexError):
        stack.top()
    with pytest.raises(IndexError):
        stack.back()


def test_overflow():
    stack = Stack(1)
    stack.push("x")
    with pytest.raises(OverflowError):
        stack.push("y")
    assert stack.top() == "x"