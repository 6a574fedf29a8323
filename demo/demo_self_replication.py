#!/usr/bin/env python3
"""
Demo: Self-Replication and Broadcast

1. Runs a program that outputs a copy of itself (relative addressing
   and memory growth)
2. Broadcasts that output to two consumers over the fabric: one echoes
   every value, one doubles it
"""

import logging

from intcode.core import Machine, BufferedPort
from intcode.fabric import broadcast

QUINE = [109, 1, 204, -1, 1001, 100, 1, 100, 1008, 100, 16, 101, 1006, 101, 0, 99]

ECHO_FOREVER = [3, 100, 4, 100, 1105, 1, 0]
DOUBLE_FOREVER = [3, 100, 1002, 100, 2, 100, 4, 100, 1105, 1, 0]


def main():
    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")

    print("=" * 60)
    print("  SELF-REPLICATION")
    print("=" * 60)

    port = BufferedPort()
    machine = Machine(QUINE, port).run()
    print(f"\n1. Program ({len(QUINE)} values):")
    print(f"   {QUINE}")
    print(f"   Output matches program: {port.outputs == QUINE}")
    print(f"   Memory grew to {len(machine.memory)} cells in {machine.steps} steps")

    print("\n2. Broadcast to two consumers")
    net, (echoed, doubled) = broadcast(QUINE, [ECHO_FOREVER, DOUBLE_FOREVER])
    net.run()
    print(f"   Echo:   {echoed.values()}")
    print(f"   Double: {doubled.values()}")


if __name__ == "__main__":
    main()
