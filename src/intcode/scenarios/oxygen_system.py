"""
Repair droid and oxygen system.

The droid is a machine running on its own worker. The controller and the
droid talk over a pair of channels:

    controller --(movement command)--> droid
    controller <--(status)------------ droid

Commands: 1 north, 2 south, 3 west, 4 east. Status: 0 the droid hit a wall
and did not move, 1 it moved, 2 it moved and found the oxygen system.

The area is mapped by keeping a wall on the droid's right: after a wall it
turns left, after a move it turns right. Mapping ends when the droid is
about to repeat a (position, heading) it has already tried.
"""

from __future__ import annotations
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Mapping, Sequence

import numpy as np

from intcode.analysis.grid import bfs_distances, points_to_array, render
from intcode.core.errors import ChannelClosed
from intcode.core.machine import Machine, MachineConfig
from intcode.fabric.channels import ChannelPort, Receiver, Sender, channel

logger = logging.getLogger(__name__)

NORTH = 1
SOUTH = 2
WEST = 3
EAST = 4

# Status codes double as cell codes
WALL = 0
OPEN = 1
OXYGEN = 2
UNKNOWN = -1

PALETTE = {UNKNOWN: " ", WALL: "#", OPEN: ".", OXYGEN: "O"}

# Unit steps, y grows downward
STEPS = {NORTH: (0, -1), SOUTH: (0, 1), WEST: (-1, 0), EAST: (1, 0)}
COMMANDS = {step: command for command, step in STEPS.items()}

Area = dict[tuple[int, int], int]


def map_area(move: Callable[[int], int]) -> Area:
    """
    Map the area around the droid by following walls.

    Args:
        move: Sends one movement command and returns the droid's status

    Returns:
        {(x, y): cell} for every cell seen, droid start at (0, 0)

    Raises:
        ValueError: on a status other than 0, 1 or 2
    """
    area: Area = {(0, 0): OPEN}
    position = (0, 0)
    heading = STEPS[EAST]
    tried = set()

    while (position, heading) not in tried:
        tried.add((position, heading))
        status = move(COMMANDS[heading])
        ahead = (position[0] + heading[0], position[1] + heading[1])
        dx, dy = heading

        if status == WALL:
            area[ahead] = WALL
            heading = (dy, -dx)
        elif status in (OPEN, OXYGEN):
            area[ahead] = status
            position = ahead
            heading = (-dy, dx)
        else:
            raise ValueError(f"invalid droid status {status}")

    logger.debug("mapped %d cells in %d moves", len(area), len(tried))
    return area


class RepairDroid:
    """Remote-controlled droid whose program reports movement status."""

    def __init__(self, program: Sequence[int]):
        self.program = list(program)

    def explore(self) -> Area:
        """
        Run the droid program and map the area it can reach.

        The droid is stopped by closing its channels once mapping is done.

        Raises:
            RuntimeError: if the droid halts before mapping is complete
        """
        commands, droid_in = channel("droid.commands")
        droid_out, status = channel("droid.status")
        droid = Machine(
            self.program,
            ChannelPort(droid_in, droid_out),
            MachineConfig(name="repair-droid"),
        )

        with ThreadPoolExecutor(max_workers=1, thread_name_prefix="repair-droid") as pool:
            future = pool.submit(droid.run)
            try:
                area = map_area(lambda command: _move(commands, status, command))
            except ChannelClosed:
                # A fatal droid error takes precedence
                future.result()
                raise RuntimeError("repair droid halted before the area was mapped") from None
            finally:
                commands.close()
                status.close()
            future.result()

        return area


def _move(commands: Sender, status: Receiver, command: int) -> int:
    commands.send(command)
    return status.recv()


def _area_grid(area: Mapping[tuple[int, int], int]) -> tuple[np.ndarray, tuple[int, int]]:
    return points_to_array(area, fill=UNKNOWN)


def _oxygen_cell(grid: np.ndarray) -> tuple[int, int]:
    found = np.argwhere(grid == OXYGEN)
    if len(found) == 0:
        raise ValueError("oxygen system not found")
    y, x = found[0]
    return int(x), int(y)


def steps_to_oxygen(area: Mapping[tuple[int, int], int]) -> int:
    """Fewest moves from the droid start to the oxygen system."""
    grid, origin = _area_grid(area)
    target = _oxygen_cell(grid)
    distances = bfs_distances((grid == OPEN) | (grid == OXYGEN), origin)
    steps = int(distances[target[1], target[0]])
    if steps < 0:
        raise ValueError("oxygen system is not reachable from the start")
    return steps


def oxygen_fill_minutes(area: Mapping[tuple[int, int], int]) -> int:
    """Minutes for oxygen to spread from the system to every open cell, one step per minute."""
    grid, _ = _area_grid(area)
    distances = bfs_distances((grid == OPEN) | (grid == OXYGEN), _oxygen_cell(grid))
    return int(distances.max())


def render_area(area: Mapping[tuple[int, int], int]) -> str:
    grid, _ = _area_grid(area)
    return render(grid, PALETTE)


def fewest_moves(program: Sequence[int]) -> int:
    """Explore with the droid program and count moves to the oxygen system."""
    return steps_to_oxygen(RepairDroid(program).explore())


def fill_time(program: Sequence[int]) -> int:
    """Explore with the droid program and time the oxygen fill."""
    return oxygen_fill_minutes(RepairDroid(program).explore())
