"""
Camera state for a 4D fly-through view.

The controller owns the accumulated camera motor. Input handlers fold
motion into it by composing on the right, so every increment is expressed
in the camera's own frame:

    cursor x   ->  transform    *= rotation_xz(dx * look_sensitivity)
    cursor y   ->  vertical_look *= rotation_xy(-dy * look_sensitivity)
    scroll     ->  transform    *= rotation_xw(dy * scroll_sensitivity)
    update(dt) ->  transform    *= movement translation

Vertical look is kept in its own motor and only applied by view_motor();
movement and horizontal turns never see it.
"""

import logging
import math
from dataclasses import dataclass
from typing import Optional

import torch

from ..core.constants import DEFAULT_VERTICAL_FOV
from ..pga.motors import (
    Motor,
    rotation_xw,
    rotation_xy,
    rotation_xz,
    translation,
)
from ..pga.transforms import transform_point
from ..utils.config import CameraConfig

logger = logging.getLogger(__name__)


MOVEMENT_ACTIONS = ('forward', 'backward', 'left', 'right', 'up', 'down')


@dataclass
class MovementState:
    """Held movement keys, each 0 (released) or 1 (pressed)."""
    forward: float = 0.0
    backward: float = 0.0
    left: float = 0.0
    right: float = 0.0
    up: float = 0.0
    down: float = 0.0

    def set_action(self, action: str, pressed: bool) -> None:
        """Record a key press or release for a movement action."""
        if action not in MOVEMENT_ACTIONS:
            raise ValueError(f"Unknown movement action: {action!r}")
        setattr(self, action, 1.0 if pressed else 0.0)

    def velocity(self) -> torch.Tensor:
        """Unit-speed velocity [x, y, z, w]: x forward, y up, z right."""
        return torch.tensor([
            self.forward - self.backward,
            self.up - self.down,
            self.right - self.left,
            0.0,
        ])

    def transform(self, dt: float, speed: float) -> Motor:
        """Translation covered in dt seconds."""
        return translation(self.velocity() * (speed * dt))


@dataclass
class CameraUniform:
    """What the renderer needs from the camera each frame."""
    transform: Motor
    v_fov: float = DEFAULT_VERTICAL_FOV

    def as_tensor(self) -> torch.Tensor:
        """Pack as 17 floats: the 16 motor components, then v_fov."""
        components = self.transform.components
        fov = torch.tensor([self.v_fov], dtype=components.dtype, device=components.device)
        return torch.cat([components, fov])


class CameraController:
    """
    Owner of the per-frame camera motor.

    Args:
        config: Camera configuration (defaults to CameraConfig())
    """

    def __init__(self, config: Optional[CameraConfig] = None):
        self.config = config or CameraConfig()
        self.transform = translation(self.config.initial_translation)
        self.vertical_look = Motor.identity()
        self.movement = MovementState()
        self._compositions = 0

    def _fold(self) -> None:
        self._compositions += 1
        if self._compositions % self.config.renormalize_every == 0:
            drift = float((self.transform.magnitude_squared() - 1.0).abs())
            self.transform = self.transform.normalized()
            self.vertical_look = self.vertical_look.normalized()
            logger.debug(f"Renormalized camera motors after {self._compositions} compositions (drift {drift:.3e})")

    def key(self, action: str, pressed: bool) -> None:
        """Forward a movement key press or release."""
        self.movement.set_action(action, pressed)

    def cursor(self, dx: float, dy: float) -> None:
        """Fold a cursor delta (pixels) into the look motors."""
        look = self.config.look_sensitivity
        self.vertical_look = self.vertical_look * rotation_xy(-dy * look)
        self.transform = self.transform * rotation_xz(dx * look)
        self._fold()

    def scroll(self, dy: float) -> None:
        """Fold a scroll delta into a rotation through the fourth axis."""
        self.transform = self.transform * rotation_xw(dy * self.config.scroll_sensitivity)
        self._fold()

    def update(self, dt: float) -> None:
        """Advance by dt seconds of held movement keys."""
        self.transform = self.transform * self.movement.transform(dt, self.config.move_speed)
        self._fold()

    def view_motor(self) -> Motor:
        """Camera motor with vertical look applied."""
        return self.transform * self.vertical_look

    def uniform(self) -> CameraUniform:
        return CameraUniform(
            transform=self.view_motor(),
            v_fov=math.radians(self.config.vertical_fov_degrees),
        )

    def position(self) -> torch.Tensor:
        """Camera position in world space, shape (4,)."""
        origin = torch.zeros(4, dtype=self.transform.dtype)
        return transform_point(self.view_motor(), origin)
