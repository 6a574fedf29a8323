"""
I/O ports: the capability a machine uses for its Input and Output opcodes.

A port answers get() with a value and accepts put(value). Failure is
signalled by raising a PortError subclass; the machine decides whether a
failure ends the run gracefully or aborts it.

Variants here:
- NullPort: get() is always 0, put() discards; never fails
- BufferedPort: preset FIFO of inputs, collects outputs

The channel-backed variant lives in intcode.fabric.channels.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from collections import deque
from typing import Iterable

from intcode.core.errors import BufferExhausted


class Port(ABC):
    """Base class for machine I/O capabilities."""

    @abstractmethod
    def get(self) -> int:
        """
        Return the next input value.

        Raises:
            PortError: if no value can be delivered
        """
        ...

    @abstractmethod
    def put(self, value: int) -> None:
        """
        Accept one output value.

        Raises:
            PortError: if the value cannot be delivered
        """
        ...

    def close(self) -> None:
        """Release any endpoints held by the port. Called when the machine stops."""


class NullPort(Port):
    """Port for programs that do no I/O: reads 0, discards writes."""

    def get(self) -> int:
        return 0

    def put(self, value: int) -> None:
        pass


class BufferedPort(Port):
    """
    Port fed from a preset sequence of inputs.

    Outputs are appended to `outputs` in order.
    """

    def __init__(self, inputs: Iterable[int] = ()):
        self._inputs = deque(int(v) for v in inputs)
        self.outputs: list[int] = []

    def feed(self, *values: int):
        """Append more input values."""
        self._inputs.extend(int(v) for v in values)

    @property
    def remaining(self) -> int:
        """Number of inputs not yet consumed."""
        return len(self._inputs)

    def get(self) -> int:
        if not self._inputs:
            raise BufferExhausted("no more buffered input values")
        return self._inputs.popleft()

    def put(self, value: int) -> None:
        self.outputs.append(value)
