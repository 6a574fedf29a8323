"""
Scaffold camera.

The camera program prints its view as ASCII character codes:

    ..#..........
    ..#..........
    #######...###
    #.#...#...#.#
    #############
    ..#...#...#..
    ..#####...^..

'#' is scaffold, '.' open space, and ^ v < > the vacuum robot. The
alignment parameter of an intersection is x * y.
"""

from __future__ import annotations
from typing import Sequence

from intcode.analysis.grid import find_intersections, parse_text_grid
from intcode.core.machine import run_program

OPEN = 0
SCAFFOLD = 1
ROBOT = 2
TUMBLING = 3

CELLS = {
    ".": OPEN,
    "#": SCAFFOLD,
    "^": ROBOT,
    "v": ROBOT,
    "<": ROBOT,
    ">": ROBOT,
    "X": TUMBLING,
}


def camera_view(program: Sequence[int]) -> str:
    """Run the camera program and decode its output as text."""
    outputs = run_program(program)
    try:
        return "".join(chr(v) for v in outputs).strip("\n")
    except (ValueError, OverflowError):
        raise ValueError("camera output is not ASCII text") from None


def alignment_parameters(view: str) -> int:
    """Sum of x * y over every scaffold intersection."""
    grid = parse_text_grid(view, CELLS)
    return sum(x * y for x, y in find_intersections(grid == SCAFFOLD))


def calibrate(program: Sequence[int]) -> int:
    """Alignment parameter sum of the view a camera program prints."""
    return alignment_parameters(camera_view(program))
