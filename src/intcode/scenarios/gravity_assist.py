"""
Gravity assist: patch two inputs into memory and read the result back.

The program takes its "noun" at address 1 and its "verb" at address 2,
does no I/O, and leaves its answer at address 0.
"""

from __future__ import annotations
from typing import Sequence

from intcode.core.machine import Machine


def run_with_noun_verb(program: Sequence[int], noun: int, verb: int) -> int:
    """Run a copy of program with addresses 1 and 2 patched; return address 0."""
    machine = Machine(program)
    machine.memory.write(1, noun)
    machine.memory.write(2, verb)
    machine.run()
    return machine.memory.read(0)


def find_noun_verb(program: Sequence[int], target: int, limit: int = 99) -> int:
    """
    Search noun, verb in 0..limit (noun-major) for the pair producing target.

    Returns:
        100 * noun + verb

    Raises:
        ValueError: if no pair produces target
    """
    for noun in range(limit + 1):
        for verb in range(limit + 1):
            if run_with_noun_verb(program, noun, verb) == target:
                return 100 * noun + verb
    raise ValueError(f"no noun/verb in 0..{limit} produces {target}")
