"""
Grid utilities for scenario output.

Scenarios produce either sparse points ({(x, y): value}, e.g. painted hull
panels or arcade tiles) or text (camera views). Both end up as dense 2D
numpy arrays indexed [y, x] so they can be rendered or analysed.
"""

from __future__ import annotations
from collections import deque
from typing import Mapping

import numpy as np
from scipy import ndimage

# 4-neighbour cross used for intersection detection
CROSS = np.array(
    [
        [0, 1, 0],
        [1, 1, 1],
        [0, 1, 0],
    ],
    dtype=bool,
)


def points_to_array(
    points: Mapping[tuple[int, int], int],
    fill: int = 0,
) -> tuple[np.ndarray, tuple[int, int]]:
    """
    Convert sparse points to a dense array covering their bounding box.

    The bounding box always includes (0, 0).

    Args:
        points: {(x, y): value}
        fill: Value for cells not present in points

    Returns:
        (array, origin): array indexed [y, x]; origin is the (x, y) index
        of point (0, 0) inside the array
    """
    xs = [x for x, _ in points] + [0]
    ys = [y for _, y in points] + [0]
    min_x, max_x = min(xs), max(xs)
    min_y, max_y = min(ys), max(ys)

    grid = np.full((max_y - min_y + 1, max_x - min_x + 1), fill, dtype=np.int64)
    for (x, y), value in points.items():
        grid[y - min_y, x - min_x] = value
    return grid, (-min_x, -min_y)


def render(grid: np.ndarray, palette: Mapping[int, str], default: str = "?") -> str:
    """Render a 2D array as text, one row per line."""
    return "\n".join(
        "".join(palette.get(int(v), default) for v in row)
        for row in grid
    )


def parse_text_grid(text: str, mapping: Mapping[str, int]) -> np.ndarray:
    """
    Parse a block of text into a 2D array using a character mapping.

    Blank lines are skipped; short rows are padded with the value of the
    first mapping entry.

    Raises:
        ValueError: on a character missing from mapping
    """
    rows = [line for line in text.splitlines() if line.strip()]
    if not rows:
        return np.zeros((0, 0), dtype=np.int64)

    pad = next(iter(mapping.values()))
    width = max(len(row) for row in rows)
    grid = np.full((len(rows), width), pad, dtype=np.int64)
    for y, row in enumerate(rows):
        for x, ch in enumerate(row):
            try:
                grid[y, x] = mapping[ch]
            except KeyError:
                raise ValueError(f"unexpected character {ch!r} at ({x}, {y})") from None
    return grid


def find_intersections(mask: np.ndarray) -> list[tuple[int, int]]:
    """
    Cells that are set along with all four neighbours.

    Cells on the border never qualify.

    Returns:
        (x, y) coordinates in row-major order
    """
    mask = np.asarray(mask, dtype=bool)
    if mask.size == 0:
        return []
    core = ndimage.binary_erosion(mask, structure=CROSS, border_value=0)
    ys, xs = np.nonzero(core)
    return [(int(x), int(y)) for y, x in zip(ys, xs)]


def bfs_distances(passable: np.ndarray, start: tuple[int, int]) -> np.ndarray:
    """
    Step counts from start to every reachable cell, moving in four directions.

    Args:
        passable: Boolean mask indexed [y, x]
        start: (x, y) of the first cell; must be passable

    Returns:
        int64 array shaped like passable, -1 where unreachable
    """
    passable = np.asarray(passable, dtype=bool)
    height, width = passable.shape
    x, y = start
    if not (0 <= x < width and 0 <= y < height) or not passable[y, x]:
        raise ValueError(f"start {start} is not a passable cell")

    distances = np.full(passable.shape, -1, dtype=np.int64)
    distances[y, x] = 0
    queue = deque([(x, y)])
    while queue:
        x, y = queue.popleft()
        for dx, dy in ((0, -1), (0, 1), (-1, 0), (1, 0)):
            nx, ny = x + dx, y + dy
            if 0 <= nx < width and 0 <= ny < height and passable[ny, nx] and distances[ny, nx] < 0:
                distances[ny, nx] = distances[y, x] + 1
                queue.append((nx, ny))
    return distances
