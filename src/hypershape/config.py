"""
Configuration & Numeric Constants
=================================
This module serves as the central registry for global constants.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (singularity thresholds, sentinel
   points, pruning fractions) from being scattered throughout the code.
2. Tuning: Rendering layers that embed the package can read the same
   defaults the core uses (projection distance, frame delta, ...).

Exports:
    LOG_LEVEL (str): Logging level name, overridable via HYPERSHAPE_LOG_LEVEL.
    PROJECTION_EPSILON (float): Distance to a projection singularity below
        which a fallback value is returned instead of dividing.
    FAR_POINT (tuple): Sentinel 3D point returned at projection poles.
"""
import os
from math import pi


LOG_LEVEL: str = os.environ.get("HYPERSHAPE_LOG_LEVEL", "WARNING")

# Projection
PROJECTION_EPSILON: float = 0.001
FAR_POINT: tuple[float, float, float] = (0.0, 0.0, 1000.0)
DEFAULT_PROJECTION_DISTANCE: float = 5.0
DEFAULT_FOV: float = pi / 4  # Reserved, no projection formula reads it

# Animation
DEFAULT_FRAME_DELTA: float = 0.016  # ~60 fps
DEFAULT_AUTO_ROTATION_SPEED: float = 0.03

# Coloring
COLOR_HUE_RANGE_DEG: float = 240.0
COLOR_SATURATION: float = 0.8
COLOR_LIGHTNESS: float = 0.6
DEPTH_RANGE: tuple[float, float] = (-2.0, 2.0)
W_RANGE: tuple[float, float] = (-2.0, 2.0)
DISTANCE_RANGE: float = 4.0

# Generators
GOLDEN_ANGLE: float = pi * (3 - 5 ** 0.5)
FIBONACCI_TWIST: float = 1.618
CALABI_YAU_EDGE_FRACTION: float = 0.25  # of the size, 4D distance
HOPF_EDGE_FRACTION: float = 0.4  # of the radius, 3D distance
HYPERDIAMOND_NEIGHBORS: int = 6
HYPERDIAMOND_CUTOFF: float = 1.1  # in bond lengths
