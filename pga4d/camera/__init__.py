"""
Camera module.

Owns the accumulated camera motor and folds input events into it.
"""

from .controller import (
    MOVEMENT_ACTIONS,
    MovementState,
    CameraUniform,
    CameraController,
)

__all__ = [
    "MOVEMENT_ACTIONS",
    "MovementState",
    "CameraUniform",
    "CameraController",
]
