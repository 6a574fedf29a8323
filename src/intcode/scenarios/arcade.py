"""
Arcade cabinet.

The game program draws by outputting (x, y, tile) triples; the special
triple (-1, 0, score) updates the score display. When it reads input it
expects the joystick position: -1 left, 0 neutral, 1 right.

The cabinet is itself a Port: it runs in the machine's own thread and
steers the paddle toward the ball whenever the program asks.
"""

from __future__ import annotations
from typing import Sequence

import numpy as np

from intcode.analysis.grid import points_to_array, render
from intcode.core.machine import Machine, MachineConfig
from intcode.core.ports import Port

EMPTY = 0
WALL = 1
BLOCK = 2
PADDLE = 3
BALL = 4

TILES = {EMPTY: " ", WALL: "#", BLOCK: "=", PADDLE: "_", BALL: "o"}
SCORE_POSITION = (-1, 0)


class ArcadeCabinet(Port):
    """Screen, score display and an auto-playing joystick."""

    def __init__(self):
        self.screen: dict[tuple[int, int], int] = {}
        self.score = 0
        self.ball_x: int | None = None
        self.paddle_x: int | None = None
        self._pending: list[int] = []

    def put(self, value: int) -> None:
        self._pending.append(value)
        if len(self._pending) < 3:
            return
        x, y, tile = self._pending
        self._pending.clear()

        if (x, y) == SCORE_POSITION:
            self.score = tile
            return
        if tile not in TILES:
            raise ValueError(f"unknown tile id {tile} at ({x}, {y})")
        self.screen[(x, y)] = tile
        if tile == BALL:
            self.ball_x = x
        elif tile == PADDLE:
            self.paddle_x = x

    def get(self) -> int:
        """Joystick: move the paddle toward the ball."""
        if self.ball_x is None or self.paddle_x is None:
            return 0
        return int(np.sign(self.ball_x - self.paddle_x))

    def count(self, tile: int) -> int:
        return sum(1 for t in self.screen.values() if t == tile)

    def render(self) -> str:
        if not self.screen:
            return ""
        grid, _ = points_to_array(self.screen, fill=EMPTY)
        return render(grid, TILES)


def count_blocks(program: Sequence[int]) -> int:
    """Block tiles on screen when the program halts."""
    cabinet = ArcadeCabinet()
    Machine(program, cabinet, MachineConfig(name="arcade")).run()
    return cabinet.count(BLOCK)


def play(program: Sequence[int], quarters: int = 2) -> int:
    """Insert quarters (address 0), play until the program halts, return the score."""
    cabinet = ArcadeCabinet()
    machine = Machine(program, cabinet, MachineConfig(name="arcade"))
    machine.memory.write(0, quarters)
    machine.run()
    return cabinet.score
