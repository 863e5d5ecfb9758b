"""
Utility functions for PGA4D.

Includes configuration management and visualization helpers.
"""

from .config import CameraConfig, load_config, save_config
from .visualization import PlotStyle, plot_trajectory

__all__ = [
    # Config
    "CameraConfig",
    "load_config",
    "save_config",
    # Visualization
    "PlotStyle",
    "plot_trajectory",
]
