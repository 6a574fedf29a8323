"""
Instruction decoding.

An instruction word packs the opcode into its two lowest decimal digits
and one parameter mode per operand slot into the digits above:

    ABCDE
     1002  ->  DE = 02 (multiply), C = 0, B = 1, A = 0

Missing leading digits are mode 0 (position).
"""

from __future__ import annotations
from enum import IntEnum

from intcode.core.errors import DecodeError

N_PARAMETER_SLOTS = 3


class Opcode(IntEnum):
    """The closed instruction set."""

    ADD = 1
    MULTIPLY = 2
    INPUT = 3
    OUTPUT = 4
    JUMP_IF_TRUE = 5
    JUMP_IF_FALSE = 6
    LESS_THAN = 7
    EQUALS = 8
    ADJUST_RELATIVE_BASE = 9
    HALT = 99

    @property
    def length(self) -> int:
        """Instruction length in cells, opcode word included."""
        return _LENGTHS[self]


_LENGTHS = {
    Opcode.ADD: 4,
    Opcode.MULTIPLY: 4,
    Opcode.INPUT: 2,
    Opcode.OUTPUT: 2,
    Opcode.JUMP_IF_TRUE: 3,
    Opcode.JUMP_IF_FALSE: 3,
    Opcode.LESS_THAN: 4,
    Opcode.EQUALS: 4,
    Opcode.ADJUST_RELATIVE_BASE: 2,
    Opcode.HALT: 1,
}


class ParameterMode(IntEnum):
    """How an operand is resolved."""

    POSITION = 0   # memory[v]
    IMMEDIATE = 1  # v
    RELATIVE = 2   # memory[v + relative_base]


Modes = tuple[ParameterMode, ParameterMode, ParameterMode]


def decode(word: int) -> tuple[Opcode, Modes]:
    """
    Split an instruction word into its opcode and parameter modes.

    Pure function of the word. Raises DecodeError for an opcode or mode
    digit outside the instruction set.
    """
    if word < 0:
        raise DecodeError(word, "negative instruction word")

    try:
        opcode = Opcode(word % 100)
    except ValueError:
        raise DecodeError(word, f"unknown opcode {word % 100}") from None

    modes = []
    for slot in range(N_PARAMETER_SLOTS):
        digit = (word // 10 ** (slot + 2)) % 10
        try:
            modes.append(ParameterMode(digit))
        except ValueError:
            raise DecodeError(word, f"unknown mode {digit} for parameter {slot + 1}") from None

    return opcode, tuple(modes)
