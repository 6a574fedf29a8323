"""
Error taxonomy for the machine and its I/O.

Two families:
- Program defects (DecodeError, NegativeAddress): fatal, abort the run.
- Port failures (PortError): capability-level, the machine decides whether
  they end the run gracefully or not.
"""


class IntcodeError(Exception):
    """Base class for every error raised by this package."""


class DecodeError(IntcodeError):
    """Instruction word with an unknown opcode or parameter mode digit."""

    def __init__(self, word: int, reason: str):
        super().__init__(f"cannot decode instruction {word}: {reason}")
        self.word = word


class InvalidDestination(DecodeError):
    """Immediate mode used for a parameter the instruction writes to."""

    def __init__(self, word: int, slot: int):
        super().__init__(word, f"parameter {slot + 1} is a write target in immediate mode")
        self.slot = slot


class NegativeAddress(IntcodeError):
    """A resolved memory address is below zero."""

    def __init__(self, address: int):
        super().__init__(f"negative memory address {address}")
        self.address = address


class ProgramFormatError(IntcodeError, ValueError):
    """Program text that is not a comma-separated list of 64-bit integers."""


class PortError(IntcodeError):
    """An I/O port could not deliver or accept a value."""


class ChannelClosed(PortError):
    """The peer endpoint of a channel is gone."""


class BufferExhausted(PortError):
    """A buffered port has no more preset input values."""
