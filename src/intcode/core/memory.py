"""
Memory: the growable integer tape a machine runs on.

The tape is both code and data. It only ever grows:
- reads past the end return 0 and leave the tape untouched
- writes past the end extend it, zero-filled, up to the written address

Cells are two's-complement 64-bit integers backed by a numpy int64 buffer.
The buffer keeps spare capacity so repeated writes just past the end do
not reallocate every time; the logical length is tracked separately.
"""

from __future__ import annotations
from typing import Iterable

import numpy as np

from intcode.core.errors import NegativeAddress

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1


def wrap_int64(value: int) -> int:
    """Reduce an arbitrary Python int to its signed 64-bit representation."""
    return ((value - INT64_MIN) & 0xFFFF_FFFF_FFFF_FFFF) + INT64_MIN


class Memory:
    """
    Index-addressed integer tape with zero-fill on demand.

    Exclusively owned by one machine; not safe to share between threads.
    """

    def __init__(self, program: Iterable[int] = ()):
        values = [wrap_int64(int(v)) for v in program]
        self._cells = np.array(values, dtype=np.int64)
        self._size = len(values)

    def __len__(self) -> int:
        return self._size

    def __getitem__(self, address: int) -> int:
        return self.read(address)

    def __setitem__(self, address: int, value: int):
        self.write(address, value)

    def __eq__(self, other) -> bool:
        if isinstance(other, Memory):
            return self.to_list() == other.to_list()
        if isinstance(other, (list, tuple)):
            return self.to_list() == list(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"Memory(size={self._size})"

    def read(self, address: int) -> int:
        """Value at address, or 0 past the end of the tape."""
        if address < 0:
            raise NegativeAddress(address)
        if address >= self._size:
            return 0
        return int(self._cells[address])

    def write(self, address: int, value: int):
        """Store value at address, growing the tape first if needed."""
        if address < 0:
            raise NegativeAddress(address)
        if address >= self._size:
            self._grow(address + 1)
        self._cells[address] = wrap_int64(value)

    def _grow(self, size: int):
        capacity = len(self._cells)
        if size > capacity:
            new_capacity = max(size, 2 * capacity)
            grown = np.zeros(new_capacity, dtype=np.int64)
            grown[:self._size] = self._cells[:self._size]
            self._cells = grown
        self._size = size

    def to_list(self) -> list[int]:
        """Snapshot of the tape as plain Python ints."""
        return self._cells[:self._size].tolist()

    def copy(self) -> Memory:
        result = Memory()
        result._cells = self._cells[:self._size].copy()
        result._size = self._size
        return result
