"""
Program text: comma-separated decimal integers.

    1,9,10,3,2,3,11,0,99,30,40,50

A trailing newline and whitespace around values are tolerated.
"""

from __future__ import annotations
from pathlib import Path
from typing import TextIO

from intcode.core.errors import ProgramFormatError
from intcode.core.memory import INT64_MAX, INT64_MIN


def parse_program(text: str) -> list[int]:
    """
    Parse program text into a list of integers.

    Raises:
        ProgramFormatError: on a token that is not a signed 64-bit integer
    """
    text = text.strip()
    if not text:
        return []

    program = []
    for index, token in enumerate(text.split(",")):
        token = token.strip()
        try:
            if "_" in token:
                raise ValueError(token)
            value = int(token, 10)
        except ValueError:
            raise ProgramFormatError(f"value {index}: {token!r} is not an integer") from None
        if not INT64_MIN <= value <= INT64_MAX:
            raise ProgramFormatError(f"value {index}: {token} does not fit in 64 bits")
        program.append(value)
    return program


def load_program(source: str | Path | TextIO) -> list[int]:
    """Read and parse a program from a file path or an open text stream."""
    if hasattr(source, "read"):
        return parse_program(source.read())
    return parse_program(Path(source).read_text())


def format_program(program) -> str:
    """Inverse of parse_program."""
    return ",".join(str(int(v)) for v in program)
