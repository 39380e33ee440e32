import pytest

from boundedkit.text import BoundedString


def test_construct_from_text():
    text = BoundedString("hello")
    assert str(text) == "hello"
    assert len(text) == 5


def test_remove_first_occurrence_only():
    text = BoundedString("hello")
    result = text.remove("l")
    assert result is text
    assert str(text) == "helo"


def test_remove_missing_char_keeps_text():
    text = BoundedString("hello")
    text.remove("z")
    assert str(text) == "hello"


def test_append_char_and_string():
    text = BoundedString("ab")
    text += "c"
    text += "de"
    assert text == "abcde"
    assert len(text) == 5


def test_append_bounded_string():
    text = BoundedString("ab")
    text += BoundedString("cd")
    assert str(text) == "abcd"


def test_equality():
    assert BoundedString("same") == BoundedString("same")
    assert BoundedString("same") != BoundedString("other")
    assert BoundedString("abc") != BoundedString("ab")


def test_capacity_limit():
    full = "x" * BoundedString.CAPACITY
    text = BoundedString(full)
    assert len(text) == BoundedString.CAPACITY
    with pytest.raises(OverflowError):
        text += "y"
    assert str(text) == full


def test_too_long_initial_text():
    with pytest.raises(OverflowError):
        BoundedString("x" * (BoundedString.CAPACITY + 1))


def test_append_rejects_non_text():
    text = BoundedString("a")
    with pytest.raises(TypeError):
        text += 5
    assert str(text) == "a"
    assert len(text) == 1