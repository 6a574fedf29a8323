"""
intcode: Intcode virtual machine and message-passing fabric

A small stored-program machine that runs a flat array of signed integers
as both code and data, plus the channels and connectors needed to wire
several machines into pipelines, broadcasts and feedback loops.

Layers:
- core: memory, decoder, executor, I/O ports, program text
- fabric: channels, connectors, network orchestration
- scenarios: programs driven through the machine (amplifiers, robots, ...)
- analysis / viz: grid utilities and rendering for scenario output
"""

__version__ = "0.1.0"
