"""
Centralized constants for PGA4D.

This module defines the default values and numeric constants used throughout
the library. Using these constants ensures consistency and makes it easy to
adjust defaults globally.

Usage:
    from pga4d.core.constants import DEFAULT_EPS_NORM, DEFAULT_MOVE_SPEED

    def my_function(eps: float = DEFAULT_EPS_NORM):
        ...
"""

import math

# =============================================================================
# Numeric Constants
# =============================================================================

# Smallest magnitude a motor may have and still be normalized
DEFAULT_EPS_NORM: float = 1e-12

# Absolute tolerance for approximate comparisons of float32 results
DEFAULT_ATOL: float = 1e-5


# =============================================================================
# Component Counts
# =============================================================================

# Even subalgebra of Cl(4,0,1): 1 scalar + 10 bivectors + 5 quadvectors
MOTOR_COMPONENTS: int = 16

# Grade-4 point: 4 positional fields + homogeneous weight
POINT_COMPONENTS: int = 5

# Bare point / direction: x, y, z, w
VECTOR_COMPONENTS: int = 4


# =============================================================================
# Camera Defaults
# =============================================================================

# Radians of rotation per pixel of cursor motion
DEFAULT_LOOK_SENSITIVITY: float = 0.001

# Radians of xw-rotation per scroll notch
DEFAULT_SCROLL_SENSITIVITY: float = 0.01

# Units per second while a movement key is held
DEFAULT_MOVE_SPEED: float = 5.0

# Where the camera starts, as [x, y, z, w]
DEFAULT_INITIAL_TRANSLATION = (-4.5, 0.5, -1.5, 0.5)

# Vertical field of view
DEFAULT_VERTICAL_FOV_DEGREES: float = 90.0
DEFAULT_VERTICAL_FOV: float = math.radians(DEFAULT_VERTICAL_FOV_DEGREES)

# Fixed update step (seconds)
DEFAULT_FIXED_TIMESTEP: float = 1.0 / 100.0

# Accumulated motors are renormalized after this many updates
DEFAULT_RENORMALIZE_EVERY: int = 64
