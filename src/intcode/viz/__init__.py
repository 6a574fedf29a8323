"""
Visualization utilities.

- Grid images (hull panels, arcade screen)
"""

from intcode.viz.grids import (
    CMAP_HULL,
    CMAP_ARCADE,
    plot_grid,
    plot_panels,
    plot_arcade,
    save_figure,
)

__all__ = [
    "CMAP_HULL",
    "CMAP_ARCADE",
    "plot_grid",
    "plot_panels",
    "plot_arcade",
    "save_figure",
]
