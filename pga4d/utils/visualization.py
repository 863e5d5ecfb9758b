"""
Visualization utilities for PGA4D.

4D paths are drawn by projecting onto three of the four coordinate axes.
"""

import torch
import numpy as np
from typing import Any, Sequence, Tuple, Union
from dataclasses import dataclass


AXIS_NAMES = ('X', 'Y', 'Z', 'W')


@dataclass
class PlotStyle:
    """Global plotting style configuration."""
    figsize: Tuple[int, int] = (10, 8)
    dpi: int = 100
    line_color: str = 'blue'
    line_width: float = 2
    font_size: int = 12


DEFAULT_STYLE = PlotStyle()


def _ensure_matplotlib():
    """Ensure matplotlib is available."""
    try:
        import matplotlib.pyplot as plt
        from mpl_toolkits.mplot3d import Axes3D  # noqa: F401
        return plt
    except ImportError:
        raise ImportError(
            "matplotlib is required for visualization. "
            "Install with: pip install matplotlib"
        )


def _ensure_numpy(tensor: Union[torch.Tensor, np.ndarray]) -> np.ndarray:
    """Convert tensor to numpy array."""
    if isinstance(tensor, torch.Tensor):
        return tensor.detach().cpu().numpy()
    return np.asarray(tensor)


def plot_trajectory(
    positions: Union[torch.Tensor, np.ndarray],
    axes: Sequence[int] = (0, 1, 2),
    ax: Any = None,
    title: str = 'Camera Trajectory',
    style: PlotStyle = None,
):
    """
    Plot a 4D trajectory projected onto three axes.

    Args:
        positions: (T, 4) trajectory positions [x, y, z, w]
        axes: Which three of the four axes to draw
        ax: Existing 3D matplotlib axis
        title: Plot title
        style: PlotStyle configuration

    Returns:
        Tuple of (figure, axis) or axis if ax was provided
    """
    axes = tuple(axes)
    if len(axes) != 3 or len(set(axes)) != 3 or not all(0 <= a < 4 for a in axes):
        raise ValueError(f"Expected three distinct axes in 0..3, got {axes}")

    positions = _ensure_numpy(positions)
    if positions.ndim != 2 or positions.shape[-1] != 4:
        raise ValueError(f"Expected positions of shape (T, 4), got {positions.shape}")

    plt = _ensure_matplotlib()
    style = style or DEFAULT_STYLE

    created_fig = ax is None
    if created_fig:
        fig = plt.figure(figsize=style.figsize, dpi=style.dpi)
        ax = fig.add_subplot(111, projection='3d')
    else:
        fig = ax.get_figure()

    projected = positions[:, list(axes)]

    # Plot trajectory line
    ax.plot(projected[:, 0], projected[:, 1], projected[:, 2],
            c=style.line_color, linewidth=style.line_width, label='Trajectory')

    # Plot start and end points
    ax.scatter([projected[0, 0]], [projected[0, 1]], [projected[0, 2]],
               c='green', s=100, marker='o', label='Start')
    ax.scatter([projected[-1, 0]], [projected[-1, 1]], [projected[-1, 2]],
               c='red', s=100, marker='s', label='End')

    ax.set_xlabel(AXIS_NAMES[axes[0]], fontsize=style.font_size)
    ax.set_ylabel(AXIS_NAMES[axes[1]], fontsize=style.font_size)
    ax.set_zlabel(AXIS_NAMES[axes[2]], fontsize=style.font_size)
    ax.set_title(title, fontsize=style.font_size + 2)
    ax.legend()

    if created_fig:
        return fig, ax
    return ax
