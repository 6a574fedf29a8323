"""
Amplifier circuits: N copies of one program, each configured by a phase.

Every amplifier first reads its phase setting, then an input signal, and
outputs an amplified signal. Two wirings:

- chain: A -> B -> C -> D -> E, the signal passes once
- feedback loop: E also feeds A; the signal circulates until every
  amplifier halts, and the last value E produced is the result
"""

from __future__ import annotations
from itertools import permutations
from typing import Sequence

from intcode.fabric.network import NetworkConfig, chain, feedback_loop


def _preloads(phases: Sequence[int], signal: int) -> list[list[int]]:
    preloads = [[phase] for phase in phases]
    preloads[0].append(signal)
    return preloads


def run_chain(program: Sequence[int], phases: Sequence[int], signal: int = 0) -> int:
    """Output of the last amplifier of a linear chain."""
    if not phases:
        raise ValueError("need at least one phase setting")
    net, sink = chain(
        [program] * len(phases),
        _preloads(phases, signal),
        NetworkConfig(name="amplifier-chain"),
    )
    net.run()
    return sink.last()


def run_feedback_loop(program: Sequence[int], phases: Sequence[int], signal: int = 0) -> int:
    """Last output of the final amplifier once the whole loop has halted."""
    if not phases:
        raise ValueError("need at least one phase setting")
    net, sink = feedback_loop(
        [program] * len(phases),
        _preloads(phases, signal),
        NetworkConfig(name="amplifier-loop"),
    )
    net.run()
    return sink.last()


def max_thruster_signal(
    program: Sequence[int],
    phases: Sequence[int],
    feedback: bool = False,
) -> tuple[int, tuple[int, ...]]:
    """
    Try every ordering of phases.

    Returns:
        (best signal, phase ordering that produced it)
    """
    run = run_feedback_loop if feedback else run_chain
    return max(
        ((run(program, order), order) for order in permutations(phases)),
        key=lambda result: result[0],
    )
