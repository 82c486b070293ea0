import pytest

from containment import (
    ContainmentTypeError,
    Member,
    UnsupportedContainerError,
    contains,
    is_in,
    typed,
)


def test_matching_type_delegates():
    names = typed({"x": 1, "y": 2}, str)
    assert contains(names, "x")
    assert not contains(names, "z")
    assert "y" in names
    assert is_in("x", names)


def test_mismatch_raises_instead_of_false():
    names = typed({"x": 1, "y": 2}, str)
    # Untyped, this is a silent False
    assert not contains({"x": 1, "y": 2}, 1)
    with pytest.raises(ContainmentTypeError):
        contains(names, 1)
    with pytest.raises(ContainmentTypeError):
        is_in(1, names)
    with pytest.raises(ContainmentTypeError):
        Member(1).is_in(names)


def test_tuple_of_types():
    numbers = typed([1, 2.5], (int, float))
    assert contains(numbers, 2.5)
    assert not contains(numbers, 3)
    with pytest.raises(ContainmentTypeError):
        contains(numbers, "1")


def test_unsupported_container():
    with pytest.raises(UnsupportedContainerError):
        typed(42, int)


def test_repr():
    assert repr(typed([1], int)) == "typed([1], <class 'int'>)"


def test_no_instance_dict():
    assert not hasattr(typed([1], int), "__dict__")
