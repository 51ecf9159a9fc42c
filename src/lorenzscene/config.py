"""
Configuration & Constants
=========================
This module serves as the central registry for file paths and global constants.

Why is this file needed?
------------------------
1. Abstraction: The Lorenz parameters, trail length and scene dimensions live
   in one place instead of being scattered through the view and model code.
2. Deployment: Fonts are resolved inside matplotlib's data directory, which
   PyInstaller's matplotlib hook also bundles into a frozen build.

Exports:
    LORENZ_SIGMA, LORENZ_RHO, LORENZ_BETA, LORENZ_DT: Integrator parameters.
    TRAIL_CAPACITY (int): Maximum number of points kept in the trail.
    DISPLAY_SCALE (float): Uniform scale applied to every trail point.
    FONT_PATH (str): Absolute path to the TrueType font used for labels.
"""
import logging
import os
from typing import Tuple

import matplotlib


def get_resource_path(relative_path: str) -> str:
    """Get absolute path to a resource shipped with matplotlib (fonts, styles)."""
    return os.path.join(matplotlib.get_data_path(), relative_path)


# --- Lorenz system ---
LORENZ_SIGMA: float = 10.0
LORENZ_RHO: float = 28.0
LORENZ_BETA: float = 8.0 / 3.0
LORENZ_DT: float = 0.005
INITIAL_STATE: Tuple[float, float, float] = (0.1, 0.0, 0.0)

# --- Trail ---
TRAIL_CAPACITY: int = 5000
DISPLAY_SCALE: float = 0.3
DIAGNOSTIC_INTERVAL: int = 100  # frames between state snapshots in the log

# --- Frame loop ---
FRAME_INTERVAL_MS: int = 16  # ~60 Hz

# --- Scene ---
AXIS_EXTENT: int = 10
AXIS_COLORS = {
    "x": "#ff0000",
    "y": "#00ff00",
    "z": "#0000ff",
}
BACKGROUND_COLOR: str = "black"
CURVE_COLOR: str = "white"
CURVE_WIDTH: float = 2.0

ARROW_RADIUS: float = 0.2
ARROW_HEIGHT: float = 0.5
ARROW_RESOLUTION: int = 32

TICK_HALF_LENGTH: float = 0.2
TICK_LABEL_SIZE: float = 0.3
TICK_LABEL_OFFSET: float = 0.5
AXIS_LABEL_SIZE: float = 0.4
AXIS_LABEL_POSITION: float = 10.5
LABEL_DEPTH: float = 0.01

# --- Camera ---
CAMERA_POSITION: Tuple[float, float, float] = (15.0, 15.0, 15.0)
CAMERA_VIEW_UP: Tuple[float, float, float] = (0.0, 1.0, 0.0)
CAMERA_VIEW_ANGLE: float = 75.0
CAMERA_CLIPPING_RANGE: Tuple[float, float] = (0.1, 1000.0)
ORBIT_DAMPING: float = 0.05

# --- Window ---
WINDOW_TITLE: str = "Lorenzův atraktor"
WINDOW_SIZE: Tuple[int, int] = (1280, 800)

LOG_LEVEL: int = logging.INFO

FONT_PATH: str = get_resource_path(os.path.join("fonts", "ttf", "DejaVuSans.ttf"))
