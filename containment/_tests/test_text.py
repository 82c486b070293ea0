from collections import UserString
from fractions import Fraction

import numpy as np
import pytest

from containment import ContainmentTypeError, contains, is_in


class TestStr:

    def test_characters(self):
        assert contains("hello", "e")
        assert not contains("hello", "z")
        assert is_in("h", "hello")

    def test_fragments(self):
        assert contains("hello", "ell")
        assert contains("hello", "hello")
        assert not contains("hello", "xyz")
        assert not contains("hello", "hello!")
        assert contains("hello world!", "hello")

    def test_empty_fragment(self):
        assert contains("hello", "")
        assert not contains("", "")

    def test_case_sensitive(self):
        assert not contains("hello", "H")

    def test_user_string(self):
        assert contains(UserString("hello"), "ell")
        assert contains("hello", UserString("ell"))
        assert not contains(UserString(""), "a")

    def test_type_mismatch(self):
        for value in [1, None, ["e"], b"e"]:
            with pytest.raises(ContainmentTypeError):
                contains("hello", value)


class TestBytes:

    def test_byte_values(self):
        assert contains(b"hello", ord("e"))
        assert not contains(b"hello", ord("z"))
        assert contains(bytearray(b"\x00\xff"), 255)

    def test_integral_numbers_are_byte_values(self):
        for buffer in [b"\x03", bytearray(b"\x03"), memoryview(b"\x03")]:
            for value in [3, 3.0, np.int64(3), np.float64(3.0), Fraction(3)]:
                assert contains(buffer, value)
                assert is_in(value, buffer)
            assert not contains(buffer, 3.5)
            assert not contains(buffer, float("nan"))
        with pytest.raises(ContainmentTypeError):
            contains(b"\x03", 256.0)

    def test_fragments(self):
        assert contains(b"hello", b"ell")
        assert contains(bytearray(b"hello"), bytearray(b"ll"))
        assert contains(b"hello", memoryview(b"lo"))
        assert not contains(b"hello", b"xyz")

    def test_memoryview(self):
        view = memoryview(b"hello")
        assert contains(view, b"ell")
        assert contains(view, ord("h"))
        assert not contains(view, b"hex")

    def test_memoryview_of_other_formats(self):
        view = memoryview(b"\x01\x00\x02\x00").cast("H")
        assert contains(view, 2)
        assert not contains(view, 3)

    def test_type_mismatch(self):
        for value in [256, -1, "e", None]:
            with pytest.raises(ContainmentTypeError):
                contains(b"hello", value)
