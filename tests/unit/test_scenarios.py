"""Tests for scenarios driven through the machine."""

import pytest

from intcode.core.errors import DecodeError
from intcode.scenarios.amplifiers import max_thruster_signal, run_chain, run_feedback_loop
from intcode.scenarios.arcade import BALL, BLOCK, PADDLE, ArcadeCabinet, count_blocks, play
from intcode.scenarios.diagnostics import diagnostic_code, run_diagnostic
from intcode.scenarios.gravity_assist import find_noun_verb, run_with_noun_verb
from intcode.scenarios.hull_painting import (
    BLACK,
    WHITE,
    HullPaintingRobot,
    count_painted_panels,
    render_registration,
)
from intcode.scenarios.oxygen_system import (
    EAST,
    OPEN,
    OXYGEN,
    SOUTH,
    STEPS,
    WALL,
    RepairDroid,
    fewest_moves,
    fill_time,
    map_area,
    oxygen_fill_minutes,
    render_area,
    steps_to_oxygen,
)
from intcode.scenarios.scaffold import alignment_parameters, calibrate, camera_view

CAMERA_VIEW = """\
..#..........
..#..........
#######...###
#.#...#...#.#
#############
..#...#...#..
..#####...^..
"""


class TestGravityAssist:

    def test_run_with_noun_verb(self):
        assert run_with_noun_verb([1, 0, 0, 0, 99], 4, 4) == 198

    def test_find_noun_verb(self):
        assert find_noun_verb([1, 0, 0, 0, 99], 198) == 404

    def test_not_found(self):
        with pytest.raises(ValueError):
            find_noun_verb([1, 0, 0, 0, 99], 10**6, limit=5)


class TestDiagnostics:

    def test_run_diagnostic(self):
        assert run_diagnostic([3, 0, 4, 0, 99], 17) == [17]

    def test_code_after_passing_checks(self):
        program = [104, 0, 104, 0, 3, 11, 4, 11, 99, 0, 0, 0]
        assert diagnostic_code(program, 5) == 5

    def test_failed_check(self):
        with pytest.raises(ValueError):
            diagnostic_code([104, 3, 104, 1, 99], 1)

    def test_no_output(self):
        with pytest.raises(ValueError):
            diagnostic_code([3, 0, 99], 1)


class TestAmplifiers:

    def test_chain(self, amplifier_program):
        assert run_chain(amplifier_program, [4, 3, 2, 1, 0]) == 43210

    def test_max_chain(self, amplifier_program):
        assert max_thruster_signal(amplifier_program, range(5)) == (43210, (4, 3, 2, 1, 0))

    def test_feedback(self, feedback_amplifier_program):
        assert run_feedback_loop(feedback_amplifier_program, [9, 8, 7, 6, 5]) == 139629729

    def test_max_feedback(self, feedback_amplifier_program):
        signal, phases = max_thruster_signal(feedback_amplifier_program, range(5, 10), feedback=True)
        assert signal == 139629729
        assert phases == (9, 8, 7, 6, 5)

    def test_needs_phases(self, amplifier_program):
        with pytest.raises(ValueError):
            run_chain(amplifier_program, [])


# Paints white + turns left, then paints black + turns right, then halts
ROBOT_PROGRAM = [3, 100, 104, 1, 104, 0, 3, 100, 104, 0, 104, 1, 99]


class TestHullPainting:

    def test_paint(self):
        panels = HullPaintingRobot(ROBOT_PROGRAM).paint()
        assert panels == {(0, 0): WHITE, (-1, 0): BLACK}

    def test_count(self):
        assert count_painted_panels(ROBOT_PROGRAM) == 2

    def test_robot_reports_color_under_it(self):
        # Paint the colour read from the camera, then paint white; turn right both times
        program = [3, 100, 4, 100, 104, 1, 3, 100, 104, 1, 104, 1, 99]
        panels = HullPaintingRobot(program).paint(WHITE)
        assert panels == {(0, 0): WHITE, (1, 0): WHITE}

    def test_render_registration(self):
        assert render_registration(ROBOT_PROGRAM) == ".#"

    def test_invalid_output_stops_robot(self):
        with pytest.raises(ValueError):
            HullPaintingRobot([3, 0, 104, 7, 104, 0, 99]).paint()


class TestArcade:

    def test_count_blocks(self):
        program = [104, 1, 104, 2, 104, 3, 104, 6, 104, 5, 104, 4, 104, 2, 104, 2, 104, 2, 99]
        assert count_blocks(program) == 1

    def test_score(self):
        assert play([1, 0, 0, 0, 104, -1, 104, 0, 104, 12345, 99]) == 12345

    def test_quarters_written(self):
        # Two quarters turn the first instruction into mem[0] = mem[0] * mem[0]
        program = [1, 0, 0, 0, 104, -1, 104, 0, 4, 0, 99]
        assert play(program, quarters=2) == 4

    def test_joystick_follows_ball(self):
        cabinet = ArcadeCabinet()
        assert cabinet.get() == 0
        for value in (2, 20, PADDLE, 5, 10, BALL):
            cabinet.put(value)
        assert cabinet.get() == 1
        for value in (7, 20, PADDLE):
            cabinet.put(value)
        assert cabinet.get() == -1

    def test_screen_overwrites(self):
        cabinet = ArcadeCabinet()
        for value in (1, 1, BLOCK, 1, 1, 0):
            cabinet.put(value)
        assert cabinet.count(BLOCK) == 0
        assert cabinet.render() == "  \n  "

    def test_unknown_tile(self):
        cabinet = ArcadeCabinet()
        with pytest.raises(ValueError):
            for value in (0, 0, 9):
                cabinet.put(value)


class TestScaffold:

    def test_alignment_parameters(self):
        assert alignment_parameters(CAMERA_VIEW) == 76

    def test_camera_view(self, make_print_program):
        program = make_print_program(CAMERA_VIEW + "\n")
        assert camera_view(program) == CAMERA_VIEW.rstrip("\n")

    def test_calibrate(self, make_print_program):
        assert calibrate(make_print_program(CAMERA_VIEW)) == 76

    def test_non_ascii_output(self):
        with pytest.raises(ValueError):
            camera_view([104, -1, 99])


MAZE = """\
#####
#D..#
#.#O#
#####
"""

# Status replies a droid gives while mapping MAZE from D
MAZE_REPLIES = [1, 0, 1, 2, 0, 0, 0, 1, 0, 0, 1, 0, 1, 0, 0, 1, 0, 0, 0, 1]


class MazeDroid:
    """Droid stand-in that moves through a text maze."""

    def __init__(self, text):
        self.cells = {}
        for y, row in enumerate(text.splitlines()):
            for x, ch in enumerate(row):
                if ch == "D":
                    self.position = (x, y)
                    ch = "."
                self.cells[(x, y)] = ch
        self.commands = []

    def move(self, command):
        self.commands.append(command)
        dx, dy = STEPS[command]
        ahead = (self.position[0] + dx, self.position[1] + dy)
        cell = self.cells.get(ahead, "#")
        if cell == "#":
            return WALL
        self.position = ahead
        return OXYGEN if cell == "O" else OPEN


def replay_program(replies):
    # Reads a command, outputs the next reply, forever
    return [3, 100, 204, 9, 109, 1, 1105, 1, 0] + list(replies)


class TestOxygenSystem:

    def test_map_area_follows_walls(self):
        droid = MazeDroid(MAZE)
        area = map_area(droid.move)
        assert droid.commands[:4] == [EAST, SOUTH, EAST, SOUTH]
        assert len(droid.commands) == len(MAZE_REPLIES)
        assert droid.position == (1, 1)
        assert area[(0, 0)] == OPEN
        assert area[(2, 1)] == OXYGEN
        assert render_area(area) == " ### \n#...#\n#.#O#\n # # "

    def test_steps_and_fill(self):
        area = map_area(MazeDroid(MAZE).move)
        assert steps_to_oxygen(area) == 3
        assert oxygen_fill_minutes(area) == 4

    def test_droid_program_over_channels(self):
        program = replay_program(MAZE_REPLIES)
        assert RepairDroid(program).explore() == map_area(MazeDroid(MAZE).move)
        assert fewest_moves(program) == 3
        assert fill_time(program) == 4

    def test_walled_in_droid(self):
        area = RepairDroid([3, 100, 104, 0, 1105, 1, 0]).explore()
        assert render_area(area) == " # \n#.#\n # "
        with pytest.raises(ValueError):
            steps_to_oxygen(area)

    def test_unreachable_oxygen(self):
        area = {(0, 0): OPEN, (1, 0): WALL, (2, 0): OXYGEN}
        with pytest.raises(ValueError):
            steps_to_oxygen(area)

    def test_invalid_status(self):
        with pytest.raises(ValueError):
            map_area(lambda command: 7)

    def test_droid_halting_early(self):
        with pytest.raises(RuntimeError):
            RepairDroid([99]).explore()

    def test_droid_fault_propagates(self):
        with pytest.raises(DecodeError):
            RepairDroid([3, 100, 77]).explore()
