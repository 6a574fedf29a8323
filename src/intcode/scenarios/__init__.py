"""
Scenarios: programs driven through the machine and the fabric.

- gravity_assist: patch memory, read memory (no I/O)
- diagnostics: buffered input, collected output
- amplifiers: chains and feedback loops of machines
- hull_painting: a robot talking to its machine over channels
- arcade: a custom Port that plays the game
- scaffold: ASCII camera output analysed as a grid
- oxygen_system: a droid explored over channels, its map searched by BFS
"""

from intcode.scenarios.gravity_assist import run_with_noun_verb, find_noun_verb
from intcode.scenarios.diagnostics import run_diagnostic, diagnostic_code
from intcode.scenarios.amplifiers import run_chain, run_feedback_loop, max_thruster_signal
from intcode.scenarios.hull_painting import (
    HullPaintingRobot,
    count_painted_panels,
    render_registration,
)
from intcode.scenarios.arcade import ArcadeCabinet, count_blocks, play
from intcode.scenarios.scaffold import camera_view, alignment_parameters, calibrate
from intcode.scenarios.oxygen_system import (
    RepairDroid,
    map_area,
    steps_to_oxygen,
    oxygen_fill_minutes,
    fewest_moves,
    fill_time,
)

__all__ = [
    "run_with_noun_verb",
    "find_noun_verb",
    "run_diagnostic",
    "diagnostic_code",
    "run_chain",
    "run_feedback_loop",
    "max_thruster_signal",
    "HullPaintingRobot",
    "count_painted_panels",
    "render_registration",
    "ArcadeCabinet",
    "count_blocks",
    "play",
    "camera_view",
    "alignment_parameters",
    "calibrate",
    "RepairDroid",
    "map_area",
    "steps_to_oxygen",
    "oxygen_fill_minutes",
    "fewest_moves",
    "fill_time",
]
