"""
Diagnostic runs: feed a system ID, collect every output.

Diagnostic programs print a series of self-test results (0 when a test
passes) followed by a single diagnostic code.
"""

from __future__ import annotations
from typing import Sequence

from intcode.core.machine import run_program


def run_diagnostic(program: Sequence[int], *inputs: int) -> list[int]:
    """Run program with the given inputs; return all outputs in order."""
    return run_program(program, inputs)


def diagnostic_code(program: Sequence[int], system_id: int) -> int:
    """
    Final output of a diagnostic run.

    Raises:
        ValueError: if the program produced no output, or a self-test failed
    """
    outputs = run_diagnostic(program, system_id)
    if not outputs:
        raise ValueError("diagnostic program produced no output")
    *checks, code = outputs
    failed = [i for i, value in enumerate(checks) if value != 0]
    if failed:
        raise ValueError(f"self-tests failed at output(s) {failed}")
    return code
