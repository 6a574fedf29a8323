#!/usr/bin/env python3
"""
Demo: Amplifier Circuits

Runs five copies of an amplifier program:
1. As a linear chain (each phase 0-4 used once)
2. As a feedback loop (phases 5-9), where the last amplifier feeds the first

Every permutation of phases is tried and the best thruster signal reported.
An optional program file can be passed as the first argument.
"""

import logging
import sys
import time

from intcode.core import load_program
from intcode.scenarios.amplifiers import max_thruster_signal

CHAIN_EXAMPLE = [3, 15, 3, 16, 1002, 16, 10, 16, 1, 16, 15, 15, 4, 15, 99, 0, 0]

FEEDBACK_EXAMPLE = [
    3, 26, 1001, 26, -4, 26, 3, 27, 1002, 27, 2, 27, 1, 27, 26,
    27, 4, 27, 1001, 28, -1, 28, 1005, 28, 6, 99, 0, 0, 5,
]


def main():
    logging.basicConfig(level=logging.WARNING, format="[%(levelname)s] %(message)s")

    print("=" * 60)
    print("  AMPLIFIER CIRCUITS")
    print("=" * 60)

    if len(sys.argv) > 1:
        chain_program = feedback_program = load_program(sys.argv[1])
        print(f"\nProgram: {sys.argv[1]} ({len(chain_program)} values)")
    else:
        chain_program, feedback_program = CHAIN_EXAMPLE, FEEDBACK_EXAMPLE
        print("\nProgram: built-in examples")

    print("\n1. Linear chain, phases 0-4")
    t0 = time.time()
    signal, phases = max_thruster_signal(chain_program, range(5))
    print(f"   Best signal: {signal}")
    print(f"   Phases:      {','.join(map(str, phases))}")
    print(f"   Time:        {time.time() - t0:.2f}s")

    print("\n2. Feedback loop, phases 5-9")
    t0 = time.time()
    signal, phases = max_thruster_signal(feedback_program, range(5, 10), feedback=True)
    print(f"   Best signal: {signal}")
    print(f"   Phases:      {','.join(map(str, phases))}")
    print(f"   Time:        {time.time() - t0:.2f}s")


if __name__ == "__main__":
    main()
