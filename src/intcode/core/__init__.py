"""
Core machine primitives.

This layer knows NOTHING about threads, channels or topologies.
It only knows:
- Memory: a growable integer tape
- Decoding instruction words into opcode + parameter modes
- Executing instructions against memory and an I/O port
- Parsing program text

Multi-machine wiring lives in intcode.fabric.
"""

from intcode.core.errors import (
    IntcodeError,
    DecodeError,
    InvalidDestination,
    NegativeAddress,
    ProgramFormatError,
    PortError,
    ChannelClosed,
    BufferExhausted,
)
from intcode.core.memory import Memory
from intcode.core.decoder import Opcode, ParameterMode, decode
from intcode.core.ports import Port, NullPort, BufferedPort
from intcode.core.machine import Machine, MachineConfig, MachineState, run_program
from intcode.core.program import parse_program, load_program, format_program

__all__ = [
    "IntcodeError",
    "DecodeError",
    "InvalidDestination",
    "NegativeAddress",
    "ProgramFormatError",
    "PortError",
    "ChannelClosed",
    "BufferExhausted",
    "Memory",
    "Opcode",
    "ParameterMode",
    "decode",
    "Port",
    "NullPort",
    "BufferedPort",
    "Machine",
    "MachineConfig",
    "MachineState",
    "run_program",
    "parse_program",
    "load_program",
    "format_program",
]
