"""
Hull painting robot.

The robot's brain is a machine running on its own worker. The robot and
the brain talk over a pair of channels:

    robot --(colour under robot)--> brain
    robot <--(paint colour, turn)-- brain

Colours: 0 black, 1 white. Turns: 0 left, 1 right. After each exchange the
robot paints, turns 90 degrees and moves one panel forward. The run ends
when the brain halts and its channels close.
"""

from __future__ import annotations
from concurrent.futures import ThreadPoolExecutor
from typing import Sequence

from intcode.analysis.grid import points_to_array, render
from intcode.core.errors import ChannelClosed
from intcode.core.machine import Machine, MachineConfig
from intcode.fabric.channels import ChannelPort, channel

BLACK = 0
WHITE = 1
PALETTE = {BLACK: ".", WHITE: "#"}

TURN_LEFT = 0
TURN_RIGHT = 1


class HullPaintingRobot:
    """Robot that paints hull panels as instructed by its program."""

    def __init__(self, program: Sequence[int]):
        self.program = list(program)
        self.position = (0, 0)
        self.direction = (0, -1)  # Facing up; y grows downward

    def paint(self, start_color: int = BLACK) -> dict[tuple[int, int], int]:
        """
        Run the brain to completion.

        Args:
            start_color: Colour of the starting panel. A white start counts
                         as a painted panel.

        Returns:
            {(x, y): colour} for every panel painted at least once
        """
        panels: dict[tuple[int, int], int] = {}
        if start_color != BLACK:
            panels[(0, 0)] = start_color
        self.position = (0, 0)
        self.direction = (0, -1)

        camera, brain_in = channel("robot.camera")
        brain_out, commands = channel("robot.commands")
        brain = Machine(
            self.program,
            ChannelPort(brain_in, brain_out),
            MachineConfig(name="hull-robot"),
        )

        with ThreadPoolExecutor(max_workers=1, thread_name_prefix="hull-robot") as pool:
            future = pool.submit(brain.run)
            try:
                while True:
                    try:
                        camera.send(panels.get(self.position, BLACK))
                        color = commands.recv()
                        turn = commands.recv()
                    except ChannelClosed:
                        break
                    self._check(color, turn)
                    panels[self.position] = color
                    self._turn(turn)
                    self._advance()
            finally:
                camera.close()
                commands.close()
            future.result()

        return panels

    def _check(self, color: int, turn: int):
        if color not in PALETTE:
            raise ValueError(f"invalid paint colour {color}")
        if turn not in (TURN_LEFT, TURN_RIGHT):
            raise ValueError(f"invalid turn {turn}")

    def _turn(self, turn: int):
        dx, dy = self.direction
        if turn == TURN_LEFT:
            self.direction = (dy, -dx)
        else:
            self.direction = (-dy, dx)

    def _advance(self):
        x, y = self.position
        dx, dy = self.direction
        self.position = (x + dx, y + dy)


def count_painted_panels(program: Sequence[int]) -> int:
    """Number of panels painted at least once, starting on black."""
    return len(HullPaintingRobot(program).paint(BLACK))


def render_registration(program: Sequence[int]) -> str:
    """Paint starting on a white panel and render the hull as text."""
    panels = HullPaintingRobot(program).paint(WHITE)
    grid, _ = points_to_array(panels, fill=BLACK)
    return render(grid, PALETTE)
