"""
Machine: the fetch-decode-execute loop.

Each step:
1. Decode the word at the instruction pointer
2. Resolve operands by parameter mode
3. Apply the opcode's effect (memory, port, relative base or IP)
4. Advance IP by the instruction length unless a jump set it

The machine owns its memory, instruction pointer and relative base; no
other object mutates them. It talks to the outside world only through
its Port.

I/O failure policy:
- ChannelClosed on get/put: the machine halts gracefully. This is how
  shutdown propagates through multi-machine topologies.
- BufferExhausted on get: fatal unless config.halt_on_exhausted_input.
- Decode and address errors are program defects and always propagate.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable

from intcode.core.decoder import Modes, Opcode, ParameterMode, decode
from intcode.core.errors import (
    BufferExhausted,
    ChannelClosed,
    InvalidDestination,
    NegativeAddress,
    PortError,
)
from intcode.core.memory import Memory
from intcode.core.ports import BufferedPort, NullPort, Port

logger = logging.getLogger(__name__)


@dataclass
class MachineConfig:
    """Configuration for a single machine."""

    name: str = "vm"  # Used in log messages and worker names
    halt_on_exhausted_input: bool = False  # Treat BufferExhausted as end of input


class MachineState(Enum):
    READY = "ready"
    RUNNING = "running"
    HALTED = "halted"


class Machine:
    """
    One Intcode machine instance.

    Usage:
        machine = Machine([1, 0, 0, 0, 99])
        machine.run()
        machine.memory.to_list()  # [2, 0, 0, 0, 99]
    """

    def __init__(
        self,
        program: Iterable[int] | Memory,
        port: Port | None = None,
        config: MachineConfig | None = None,
    ):
        if isinstance(program, Memory):
            self.memory = program.copy()
        else:
            self.memory = Memory(program)
        self.port = port if port is not None else NullPort()
        self.config = config if config is not None else MachineConfig()

        self.ip = 0
        self.relative_base = 0
        self.state = MachineState.READY
        self.steps = 0

    @property
    def name(self) -> str:
        return self.config.name

    @property
    def halted(self) -> bool:
        return self.state is MachineState.HALTED

    def run(self) -> Machine:
        """
        Run until Halt (or a graceful I/O halt).

        The port is closed when the machine stops, whether it halted or
        failed, so peers waiting on it are released.

        Returns self for chaining.
        """
        try:
            while not self.halted:
                self.step()
        finally:
            self.port.close()
        return self

    def step(self):
        """Execute a single instruction. No-op once halted."""
        if self.halted:
            return
        self.state = MachineState.RUNNING
        word = self.memory.read(self.ip)
        opcode, modes = decode(word)
        self.steps += 1

        if opcode is Opcode.ADD:
            a, b = self._read(0, modes), self._read(1, modes)
            self.memory.write(self._target(2, modes, word), a + b)
        elif opcode is Opcode.MULTIPLY:
            a, b = self._read(0, modes), self._read(1, modes)
            self.memory.write(self._target(2, modes, word), a * b)
        elif opcode is Opcode.INPUT:
            target = self._target(0, modes, word)
            try:
                value = self.port.get()
            except PortError as exc:
                self._halt_on_port_error(exc)
                return
            self.memory.write(target, value)
        elif opcode is Opcode.OUTPUT:
            value = self._read(0, modes)
            try:
                self.port.put(value)
            except PortError as exc:
                self._halt_on_port_error(exc)
                return
        elif opcode is Opcode.JUMP_IF_TRUE:
            if self._read(0, modes) != 0:
                self._jump(self._read(1, modes))
                return
        elif opcode is Opcode.JUMP_IF_FALSE:
            if self._read(0, modes) == 0:
                self._jump(self._read(1, modes))
                return
        elif opcode is Opcode.LESS_THAN:
            a, b = self._read(0, modes), self._read(1, modes)
            self.memory.write(self._target(2, modes, word), int(a < b))
        elif opcode is Opcode.EQUALS:
            a, b = self._read(0, modes), self._read(1, modes)
            self.memory.write(self._target(2, modes, word), int(a == b))
        elif opcode is Opcode.ADJUST_RELATIVE_BASE:
            self.relative_base += self._read(0, modes)
        elif opcode is Opcode.HALT:
            self._halt()
            return

        self.ip += opcode.length

    # -------------------------- Operand resolution --------------------------
    def _raw(self, slot: int) -> int:
        return self.memory.read(self.ip + 1 + slot)

    def _read(self, slot: int, modes: Modes) -> int:
        raw = self._raw(slot)
        mode = modes[slot]
        if mode is ParameterMode.POSITION:
            return self.memory.read(raw)
        if mode is ParameterMode.IMMEDIATE:
            return raw
        return self.memory.read(raw + self.relative_base)

    def _target(self, slot: int, modes: Modes, word: int) -> int:
        raw = self._raw(slot)
        mode = modes[slot]
        if mode is ParameterMode.POSITION:
            return raw
        if mode is ParameterMode.RELATIVE:
            return raw + self.relative_base
        raise InvalidDestination(word, slot)

    # -------------------------- Control flow --------------------------
    def _jump(self, target: int):
        if target < 0:
            raise NegativeAddress(target)
        self.ip = target

    def _halt(self):
        self.state = MachineState.HALTED
        logger.debug("%s halted after %d steps", self.name, self.steps)

    def _halt_on_port_error(self, exc: PortError):
        graceful = isinstance(exc, ChannelClosed) or (
            isinstance(exc, BufferExhausted) and self.config.halt_on_exhausted_input
        )
        if not graceful:
            raise exc
        logger.debug("%s stopping at ip=%d: %s", self.name, self.ip, exc)
        self._halt()


def run_program(program: Iterable[int], inputs: Iterable[int] = ()) -> list[int]:
    """Run a program to completion against a BufferedPort and return its outputs."""
    port = BufferedPort(inputs)
    Machine(program, port).run()
    return port.outputs
