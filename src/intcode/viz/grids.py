"""
Grid rendering with matplotlib.

Scenario grids are small integer arrays indexed [y, x] with y growing
downward (screen coordinates), so images use origin="upper".
"""

from __future__ import annotations
from pathlib import Path
from typing import TYPE_CHECKING, Mapping

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from matplotlib.colors import ListedColormap
from matplotlib.figure import Figure

from intcode.analysis.grid import points_to_array

if TYPE_CHECKING:
    from intcode.scenarios.arcade import ArcadeCabinet


# Black/white hull panels
CMAP_HULL = ListedColormap([(0.05, 0.05, 0.08), (0.993, 0.978, 0.925)], name="hull")

# Arcade tiles: empty, wall, block, paddle, ball
CMAP_ARCADE = ListedColormap(
    [
        (0.05, 0.05, 0.08),     # Empty
        (0.45, 0.45, 0.50),     # Wall
        (0.192, 0.407, 0.556),  # Block
        (0.969, 0.588, 0.275),  # Paddle
        (0.993, 0.978, 0.925),  # Ball
    ],
    name="arcade",
)


def plot_grid(
    grid: np.ndarray,
    title: str = "",
    cmap=None,
    ax: Axes | None = None,
    figsize: tuple[float, float] = (8, 4),
) -> tuple[Figure, Axes]:
    """
    Plot a 2D integer grid as an image.

    Args:
        grid: 2D array indexed [y, x]
        title: Plot title
        cmap: Colormap; one colour per cell value
        ax: Existing axes to plot on (creates new figure if None)
        figsize: Figure size if creating new figure

    Returns:
        (fig, ax) tuple
    """
    if cmap is None:
        cmap = CMAP_HULL

    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)
    else:
        fig = ax.figure

    vmax = cmap.N - 1 if isinstance(cmap, ListedColormap) else None
    ax.imshow(
        grid,
        origin="upper",
        cmap=cmap,
        vmin=0,
        vmax=vmax,
        interpolation="nearest",
        aspect="equal",
    )
    ax.set_title(title)
    ax.set_xticks([])
    ax.set_yticks([])

    return fig, ax


def plot_panels(
    panels: Mapping[tuple[int, int], int],
    title: str = "Hull",
    ax: Axes | None = None,
) -> tuple[Figure, Axes]:
    """Plot painted hull panels ({(x, y): colour})."""
    grid, _ = points_to_array(panels, fill=0)
    return plot_grid(grid, title=title, cmap=CMAP_HULL, ax=ax)


def plot_arcade(
    cabinet: "ArcadeCabinet",
    ax: Axes | None = None,
) -> tuple[Figure, Axes]:
    """Plot the arcade screen with the score in the title."""
    grid, _ = points_to_array(cabinet.screen, fill=0)
    return plot_grid(grid, title=f"Score: {cabinet.score}", cmap=CMAP_ARCADE, ax=ax)


def save_figure(fig: Figure, path: str | Path, dpi: int = 150, **kwargs) -> None:
    """Save figure to file."""
    fig.savefig(path, dpi=dpi, bbox_inches="tight", **kwargs)
