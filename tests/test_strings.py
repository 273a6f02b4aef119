import pytest

from algonotes.strings import are_rotations


def test_source_example():
    assert are_rotations("AACD", "ACDA") is True


def test_not_a_rotation():
    assert are_rotations("AACD", "AADC") is False


@pytest.mark.parametrize("shift", range(5))
def test_every_rotation_is_found(shift):
    word = "hello"
    assert are_rotations(word, word[shift:] + word[:shift])


def test_identical_strings():
    assert are_rotations("abc", "abc")
    assert are_rotations("", "")