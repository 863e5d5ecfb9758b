"""
Core module for PGA4D.

Contains:
- Constants: Centralized default values and numeric constants
- Types: Type aliases for component tensors
"""

from .constants import (
    # Numeric constants
    DEFAULT_EPS_NORM,
    DEFAULT_ATOL,
    # Component counts
    MOTOR_COMPONENTS,
    POINT_COMPONENTS,
    VECTOR_COMPONENTS,
    # Camera defaults
    DEFAULT_LOOK_SENSITIVITY,
    DEFAULT_SCROLL_SENSITIVITY,
    DEFAULT_MOVE_SPEED,
    DEFAULT_INITIAL_TRANSLATION,
    DEFAULT_VERTICAL_FOV_DEGREES,
    DEFAULT_VERTICAL_FOV,
    DEFAULT_FIXED_TIMESTEP,
    DEFAULT_RENORMALIZE_EVERY,
)

from .types import (
    TensorLike,
    Vector4,
    Blade,
    PlaneSpec,
)

__all__ = [
    # Constants
    "DEFAULT_EPS_NORM",
    "DEFAULT_ATOL",
    "MOTOR_COMPONENTS",
    "POINT_COMPONENTS",
    "VECTOR_COMPONENTS",
    "DEFAULT_LOOK_SENSITIVITY",
    "DEFAULT_SCROLL_SENSITIVITY",
    "DEFAULT_MOVE_SPEED",
    "DEFAULT_INITIAL_TRANSLATION",
    "DEFAULT_VERTICAL_FOV_DEGREES",
    "DEFAULT_VERTICAL_FOV",
    "DEFAULT_FIXED_TIMESTEP",
    "DEFAULT_RENORMALIZE_EVERY",
    # Types
    "TensorLike",
    "Vector4",
    "Blade",
    "PlaneSpec",
]
