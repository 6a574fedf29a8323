"""
Connector: relays one inbound channel to any number of outbound channels.

The connector is the single wiring primitive. With one target it extends a
pipeline; with several it broadcasts; pointing it back at the first node of
a chain closes a feedback loop.

Shutdown rules:
- inbound closes -> close every outbound sender (downstream sees closure)
- a target's receiver is gone -> drop that target
- no targets left -> close the inbound receiver (upstream sees closure)
"""

from __future__ import annotations
import logging
from typing import Iterable

from intcode.core.errors import ChannelClosed
from intcode.fabric.channels import Receiver, Sender

logger = logging.getLogger(__name__)


class Connector:
    """Stateless relay from one receiver to a list of senders."""

    def __init__(
        self,
        inbound: Receiver,
        outbound: Iterable[Sender] = (),
        name: str = "connector",
    ):
        self.inbound = inbound
        self.name = name
        self._targets: list[Sender] = list(outbound)
        self.relayed = 0

    @property
    def targets(self) -> list[Sender]:
        return list(self._targets)

    def add_target(self, sender: Sender):
        """Register one more outbound channel. Only valid before run()."""
        self._targets.append(sender)

    def run(self) -> int:
        """
        Relay values until the inbound channel closes or no target is left.

        Returns:
            Number of values received and forwarded
        """
        try:
            for value in self.inbound:
                self._forward(value)
                self.relayed += 1
                if not self._targets:
                    logger.debug("%s has no targets left, closing inbound", self.name)
                    break
        finally:
            self.inbound.close()
            for sender in self._targets:
                sender.close()
            logger.debug("%s shut down after %d values", self.name, self.relayed)
        return self.relayed

    def _forward(self, value: int):
        for sender in list(self._targets):
            try:
                sender.send(value)
            except ChannelClosed:
                logger.debug("%s dropping closed target %s", self.name, sender.name)
                sender.close()
                self._targets.remove(sender)
