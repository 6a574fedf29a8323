"""
Channels: unbounded FIFO queues between workers.

A channel has any number of Sender endpoints and exactly one Receiver:
- recv() blocks until a value arrives, and fails with ChannelClosed once
  the queue is empty and every sender is closed
- send() never blocks, and fails with ChannelClosed once the receiver is
  closed

Closing an endpoint is the only shutdown signal there is. Connectors and
machines close their endpoints when they stop, so closure propagates
through a whole topology.
"""

from __future__ import annotations
import threading
from collections import deque
from typing import Iterator

from intcode.core.errors import ChannelClosed
from intcode.core.ports import Port


class _ChannelState:
    """Queue plus endpoint bookkeeping shared by the two ends of a channel."""

    def __init__(self, name: str):
        self.name = name
        self.queue: deque[int] = deque()
        self.cond = threading.Condition()
        self.open_senders = 0
        self.receiver_open = True


class Sender:
    """Producing end of a channel. Clone it to get more producers."""

    def __init__(self, state: _ChannelState):
        self._state = state
        self._open = True
        with state.cond:
            state.open_senders += 1

    @property
    def name(self) -> str:
        return self._state.name

    @property
    def closed(self) -> bool:
        return not self._open

    def send(self, value: int):
        state = self._state
        with state.cond:
            if not self._open:
                raise ChannelClosed(f"send on closed sender of {state.name}")
            if not state.receiver_open:
                raise ChannelClosed(f"receiver of {state.name} is gone")
            state.queue.append(value)
            state.cond.notify()

    def clone(self) -> Sender:
        if not self._open:
            raise ChannelClosed(f"cannot clone closed sender of {self._state.name}")
        return Sender(self._state)

    def close(self):
        state = self._state
        with state.cond:
            if not self._open:
                return
            self._open = False
            state.open_senders -= 1
            if state.open_senders == 0:
                state.cond.notify_all()

    def __enter__(self) -> Sender:
        return self

    def __exit__(self, *exc_info):
        self.close()


class Receiver:
    """Consuming end of a channel."""

    def __init__(self, state: _ChannelState):
        self._state = state

    @property
    def name(self) -> str:
        return self._state.name

    @property
    def closed(self) -> bool:
        return not self._state.receiver_open

    def recv(self) -> int:
        """Block until a value is available; ChannelClosed once none can arrive."""
        state = self._state
        with state.cond:
            while state.receiver_open and not state.queue and state.open_senders > 0:
                state.cond.wait()
            if state.receiver_open and state.queue:
                return state.queue.popleft()
        raise ChannelClosed(f"{state.name} is closed")

    def drain(self) -> list[int]:
        """Take every value queued right now, without blocking."""
        state = self._state
        with state.cond:
            values = list(state.queue)
            state.queue.clear()
        return values

    def close(self):
        """Stop receiving. Pending values are dropped and senders start failing."""
        state = self._state
        with state.cond:
            state.receiver_open = False
            state.queue.clear()
            state.cond.notify_all()

    def __iter__(self) -> Iterator[int]:
        """Yield values until the channel closes."""
        while True:
            try:
                yield self.recv()
            except ChannelClosed:
                return

    def __enter__(self) -> Receiver:
        return self

    def __exit__(self, *exc_info):
        self.close()


def channel(name: str = "channel") -> tuple[Sender, Receiver]:
    """Create a new channel and return its (sender, receiver) pair."""
    state = _ChannelState(name)
    return Sender(state), Receiver(state)


class ChannelPort(Port):
    """
    Machine port backed by channels.

    get() blocks on the inbound receiver; put() sends on the outbound
    sender. A missing endpoint behaves like a closed one.
    """

    def __init__(self, inbound: Receiver | None = None, outbound: Sender | None = None):
        self.inbound = inbound
        self.outbound = outbound

    def get(self) -> int:
        if self.inbound is None:
            raise ChannelClosed("port has no inbound channel")
        return self.inbound.recv()

    def put(self, value: int) -> None:
        if self.outbound is None:
            raise ChannelClosed("port has no outbound channel")
        self.outbound.send(value)

    def close(self) -> None:
        if self.inbound is not None:
            self.inbound.close()
        if self.outbound is not None:
            self.outbound.close()
