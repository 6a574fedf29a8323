"""
Pytest configuration and shared fixtures.
"""

import matplotlib

matplotlib.use("Agg")

import pytest


@pytest.fixture
def quine():
    """Program that outputs a copy of itself (relative mode + memory growth)."""
    return [109, 1, 204, -1, 1001, 100, 1, 100, 1008, 100, 16, 101, 1006, 101, 0, 99]


@pytest.fixture
def amplifier_program():
    """Amplifier for a linear chain: phases 4,3,2,1,0 give 43210."""
    return [3, 15, 3, 16, 1002, 16, 10, 16, 1, 16, 15, 15, 4, 15, 99, 0, 0]


@pytest.fixture
def feedback_amplifier_program():
    """Amplifier for a feedback loop: phases 9,8,7,6,5 give 139629729."""
    return [
        3, 26, 1001, 26, -4, 26, 3, 27, 1002, 27, 2, 27, 1, 27, 26,
        27, 4, 27, 1001, 28, -1, 28, 1005, 28, 6, 99, 0, 0, 5,
    ]


@pytest.fixture
def echo_program():
    """Reads one value, outputs it, halts."""
    return [3, 0, 4, 0, 99]


@pytest.fixture
def double_program():
    """Reads values forever, outputs each doubled."""
    return [3, 100, 1002, 100, 2, 100, 4, 100, 1105, 1, 0]


def print_program(text: str) -> list[int]:
    """Program that prints text as character codes, then halts."""
    program = []
    for ch in text:
        program += [104, ord(ch)]
    return program + [99]


@pytest.fixture
def make_print_program():
    return print_program
