"""
Analysis layer: turns machine output into grids.

- points_to_array / parse_text_grid: sparse points or text -> 2D arrays
- render: 2D array -> text
- find_intersections: neighbourhood analysis with scipy.ndimage
- bfs_distances: shortest step counts over a passable mask
"""

from intcode.analysis.grid import (
    CROSS,
    points_to_array,
    render,
    parse_text_grid,
    find_intersections,
    bfs_distances,
)

__all__ = [
    "CROSS",
    "points_to_array",
    "render",
    "parse_text_grid",
    "find_intersections",
    "bfs_distances",
]
