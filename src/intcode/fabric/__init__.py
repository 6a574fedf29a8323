"""
Concurrency fabric: channels, connectors and network orchestration.

Two primitives build every topology:
- channel(): unbounded FIFO with closable endpoints
- Connector: relays one channel to one or more others

Network composes them around machines (one worker thread each) and
collects results from Sinks.
"""

from intcode.fabric.channels import Sender, Receiver, ChannelPort, channel
from intcode.fabric.connector import Connector
from intcode.fabric.network import (
    Network,
    NetworkConfig,
    MachineNode,
    Sink,
    chain,
    feedback_loop,
    broadcast,
)

__all__ = [
    "Sender",
    "Receiver",
    "ChannelPort",
    "channel",
    "Connector",
    "Network",
    "NetworkConfig",
    "MachineNode",
    "Sink",
    "chain",
    "feedback_loop",
    "broadcast",
]
