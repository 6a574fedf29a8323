"""Unit tests for Memory."""

import pytest

from intcode.core.errors import NegativeAddress
from intcode.core.memory import INT64_MAX, INT64_MIN, Memory, wrap_int64


class TestMemoryRead:
    """Tests for reads."""

    def test_read_stored_values(self):
        mem = Memory([1, -2, 3])
        assert mem.read(0) == 1
        assert mem.read(1) == -2
        assert mem[2] == 3

    def test_read_past_end_is_zero(self):
        mem = Memory([1, 2, 3])
        assert mem.read(3) == 0
        assert mem.read(10_000) == 0

    def test_read_past_end_does_not_grow(self):
        mem = Memory([1, 2, 3])
        mem.read(500)
        assert len(mem) == 3
        assert mem.to_list() == [1, 2, 3]

    def test_negative_read_is_fatal(self):
        mem = Memory([1, 2, 3])
        with pytest.raises(NegativeAddress):
            mem.read(-1)

    def test_read_returns_python_int(self):
        mem = Memory([7])
        assert type(mem.read(0)) is int


class TestMemoryWrite:
    """Tests for writes and growth."""

    def test_overwrite_in_place(self):
        mem = Memory([1, 2, 3])
        mem.write(1, 42)
        assert mem.to_list() == [1, 42, 3]

    def test_write_past_end_grows_zero_filled(self):
        mem = Memory([1, 2])
        mem.write(5, 9)
        assert mem.to_list() == [1, 2, 0, 0, 0, 9]
        assert len(mem) == 6

    def test_write_just_past_end_repeatedly(self):
        mem = Memory()
        for i in range(100):
            mem[i] = i * i
        assert len(mem) == 100
        assert mem.to_list() == [i * i for i in range(100)]

    def test_never_shrinks(self):
        mem = Memory([0] * 10)
        mem.write(2, 5)
        assert len(mem) == 10

    def test_negative_write_is_fatal(self):
        mem = Memory([1, 2, 3])
        with pytest.raises(NegativeAddress) as info:
            mem.write(-4, 1)
        assert info.value.address == -4
        assert mem.to_list() == [1, 2, 3]


class TestWideValues:
    """64-bit storage and wrap-around."""

    def test_wide_values_roundtrip(self):
        mem = Memory([1125899906842624, INT64_MIN, INT64_MAX])
        assert mem.to_list() == [1125899906842624, INT64_MIN, INT64_MAX]

    def test_write_wraps_to_int64(self):
        mem = Memory([0])
        mem.write(0, INT64_MAX + 1)
        assert mem.read(0) == INT64_MIN

    def test_wrap_int64(self):
        assert wrap_int64(5) == 5
        assert wrap_int64(-5) == -5
        assert wrap_int64(1 << 64) == 0
        assert wrap_int64(INT64_MIN - 1) == INT64_MAX


class TestMemoryHelpers:

    def test_copy_is_independent(self):
        mem = Memory([1, 2, 3])
        clone = mem.copy()
        clone.write(0, 99)
        clone.write(10, 1)
        assert mem.to_list() == [1, 2, 3]
        assert clone.read(0) == 99

    def test_equality_with_list(self):
        assert Memory([1, 2]) == [1, 2]
        assert Memory([1, 2]) == Memory([1, 2])
        assert Memory([1, 2]) != [1, 2, 0]
