"""
Network: builds and runs a topology of machines and connectors.

Every machine node gets:
- an input channel (fed by preloaded values and by upstream connectors)
- an output channel, drained by the node's own connector

Wiring is expressed only through connectors:
- chain:      a -> b -> c
- broadcast:  a -> {b, c, sink}
- feedback:   a -> b -> ... -> e -> a

run() preloads every input channel, then starts one worker per machine and
per connector and joins them all. Results are collected from Sinks.
"""

from __future__ import annotations
import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from typing import Iterable, Sequence

from intcode.core.machine import Machine, MachineConfig
from intcode.fabric.channels import ChannelPort, Receiver, Sender, channel
from intcode.fabric.connector import Connector

logger = logging.getLogger(__name__)


@dataclass
class NetworkConfig:
    """Configuration for a network run."""

    name: str = "network"  # Prefix for worker thread names
    # Worker threads; None = one per machine and connector. Must be at least
    # that many, since every worker may block on a receive.
    max_workers: int | None = None


class Sink:
    """
    Designated result channel.

    Values are buffered in the channel while the network runs; read them
    afterwards with values() or last().
    """

    def __init__(self, name: str, receiver: Receiver):
        self.name = name
        self._receiver = receiver
        self._values: list[int] = []

    def values(self) -> list[int]:
        """Full ordered sequence received so far."""
        self._values.extend(self._receiver.drain())
        return list(self._values)

    def last(self) -> int:
        """Last value received."""
        values = self.values()
        if not values:
            raise ValueError(f"sink {self.name} received no values")
        return values[-1]


@dataclass
class MachineNode:
    """A machine plus the endpoints the network wires it with."""

    name: str
    machine: Machine
    connector: Connector
    feed: Sender  # Input channel sender held for preloads and cloning
    preload: list[int] = field(default_factory=list)


class Network:
    """
    Directed graph of machines and connectors.

    Usage:
        net = Network()
        a = net.add_machine("a", program, inputs=[phase_a, 0])
        b = net.add_machine("b", program, inputs=[phase_b])
        net.connect(a, b)
        out = net.sink(b)
        net.run()
        out.last()
    """

    def __init__(self, config: NetworkConfig | None = None):
        self.config = config if config is not None else NetworkConfig()
        self.nodes: dict[str, MachineNode] = {}
        self.sinks: dict[str, Sink] = {}
        self._started = False

    def add_machine(
        self,
        name: str,
        program: Iterable[int],
        inputs: Iterable[int] = (),
    ) -> str:
        """
        Add a machine node.

        Args:
            name: Unique node name
            program: Initial memory contents (copied)
            inputs: Values preloaded into the node's input channel

        Returns:
            The node name, for use in connect() and sink()
        """
        self._check_not_started()
        if name in self.nodes:
            raise ValueError(f"duplicate node name {name!r}")

        feed, inbound = channel(f"{name}.in")
        outbound, relay_in = channel(f"{name}.out")
        machine = Machine(
            program,
            ChannelPort(inbound, outbound),
            MachineConfig(name=name),
        )
        connector = Connector(relay_in, name=f"{name}.relay")
        self.nodes[name] = MachineNode(
            name=name,
            machine=machine,
            connector=connector,
            feed=feed,
            preload=[int(v) for v in inputs],
        )
        return name

    def feed(self, name: str, *values: int):
        """Append values to a node's preload."""
        self._check_not_started()
        self._node(name).preload.extend(int(v) for v in values)

    def connect(self, source: str, *targets: str):
        """Wire source's output to each target's input."""
        self._check_not_started()
        if not targets:
            raise ValueError("connect() needs at least one target")
        relay = self._node(source).connector
        for target in targets:
            relay.add_target(self._node(target).feed.clone())

    def sink(self, source: str, name: str | None = None) -> Sink:
        """Create a result sink fed by source's output."""
        self._check_not_started()
        name = name if name is not None else f"{source}.sink"
        if name in self.sinks:
            raise ValueError(f"duplicate sink name {name!r}")
        sender, receiver = channel(name)
        self._node(source).connector.add_target(sender)
        sink = Sink(name, receiver)
        self.sinks[name] = sink
        return sink

    def machine(self, name: str) -> Machine:
        return self._node(name).machine

    def run(self) -> Network:
        """
        Preload inputs, run every worker to completion, re-raise the first
        fatal error.

        A network can only run once.
        """
        self._check_not_started()
        if not self.nodes:
            raise ValueError("network has no machines")
        n_workers = 2 * len(self.nodes)
        max_workers = self.config.max_workers or n_workers
        if max_workers < n_workers:
            raise ValueError(
                f"max_workers={max_workers} is below the {n_workers} workers this network runs"
            )
        self._started = True

        for node in self.nodes.values():
            for value in node.preload:
                node.feed.send(value)
            node.feed.close()

        tasks = {}
        logger.info("%s: starting %d machines", self.config.name, len(self.nodes))
        with ThreadPoolExecutor(
            max_workers=max_workers,
            thread_name_prefix=self.config.name,
        ) as pool:
            for node in self.nodes.values():
                tasks[pool.submit(node.machine.run)] = node.name
                tasks[pool.submit(node.connector.run)] = node.connector.name

            errors = []
            for future in as_completed(tasks):
                exc = future.exception()
                if exc is not None:
                    logger.error("%s: worker %s failed: %s", self.config.name, tasks[future], exc)
                    errors.append(exc)

        if errors:
            raise errors[0]
        logger.info("%s: all workers finished", self.config.name)
        return self

    def _node(self, name: str) -> MachineNode:
        try:
            return self.nodes[name]
        except KeyError:
            raise ValueError(f"unknown node {name!r}") from None

    def _check_not_started(self):
        if self._started:
            raise RuntimeError("network has already been run")


# Standard topologies
def _build_ring(
    programs: Sequence[Sequence[int]],
    preloads: Sequence[Iterable[int]] | None,
    config: NetworkConfig | None,
    close_loop: bool,
) -> tuple[Network, Sink]:
    if not programs:
        raise ValueError("need at least one program")
    if preloads is None:
        preloads = [()] * len(programs)
    if len(preloads) != len(programs):
        raise ValueError("preloads must match programs one to one")

    net = Network(config)
    names = [
        net.add_machine(f"vm-{i}", program, inputs)
        for i, (program, inputs) in enumerate(zip(programs, preloads))
    ]
    for upstream, downstream in zip(names, names[1:]):
        net.connect(upstream, downstream)
    if close_loop:
        net.connect(names[-1], names[0])
    sink = net.sink(names[-1], name="output")
    return net, sink


def chain(
    programs: Sequence[Sequence[int]],
    preloads: Sequence[Iterable[int]] | None = None,
    config: NetworkConfig | None = None,
) -> tuple[Network, Sink]:
    """Linear pipeline vm-0 -> vm-1 -> ... with a sink on the last machine."""
    return _build_ring(programs, preloads, config, close_loop=False)


def feedback_loop(
    programs: Sequence[Sequence[int]],
    preloads: Sequence[Iterable[int]] | None = None,
    config: NetworkConfig | None = None,
) -> tuple[Network, Sink]:
    """Pipeline whose last machine also feeds the first; sink on the last machine."""
    return _build_ring(programs, preloads, config, close_loop=True)


def broadcast(
    source_program: Sequence[int],
    consumer_programs: Sequence[Sequence[int]],
    source_inputs: Iterable[int] = (),
    consumer_preloads: Sequence[Iterable[int]] | None = None,
    config: NetworkConfig | None = None,
) -> tuple[Network, list[Sink]]:
    """
    One source machine fanned out to several consumers.

    Returns the network and one sink per consumer, in consumer order.
    """
    if not consumer_programs:
        raise ValueError("need at least one consumer")
    if consumer_preloads is None:
        consumer_preloads = [()] * len(consumer_programs)
    if len(consumer_preloads) != len(consumer_programs):
        raise ValueError("consumer_preloads must match consumer_programs one to one")

    net = Network(config)
    source = net.add_machine("source", source_program, source_inputs)
    consumers = [
        net.add_machine(f"consumer-{i}", program, inputs)
        for i, (program, inputs) in enumerate(zip(consumer_programs, consumer_preloads))
    ]
    net.connect(source, *consumers)
    sinks = [net.sink(name) for name in consumers]
    return net, sinks
