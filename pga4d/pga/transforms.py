"""
Geometric transformations using 4D PGA motors.

Provides the entry points the render-preparation layer uses to move bare
4-component points and directions by a motor, plus helpers for composing
and inverting transformations.
"""

from __future__ import annotations
import torch

from .algebra import (
    commutator,
    euclidean_part,
    geometric_product,
    reverse,
)
from .motors import Motor, _as_float_tensor
from .points import Point, POSITIONAL_MASK, _check_vector
from ..core.types import TensorLike, Vector4


def _displacement(m: torch.Tensor, x: torch.Tensor) -> torch.Tensor:
    """
    Positional part of 2 [m, x] ~m.

    For a unit motor m, m x ~m = x + 2 [m, x] ~m, so this is exactly what
    the sandwich adds to x.
    """
    correction = geometric_product(commutator(m, x), reverse(m))
    return 2 * correction[..., POSITIONAL_MASK]


def transform_point(motor: Motor, point: TensorLike) -> Vector4:
    """
    Transform bare 4D points with implicit unit weight.

    The result is the input plus the displacement of the sandwich
    product M P ~M. The identity motor returns the input unchanged and a
    pure translation returns point + offset.

    The motor is assumed to be unit (see Motor.normalized). For weighted
    points use Point.transform.

    Args:
        motor: Motor defining the transformation
        point: Points of shape (..., 4) as [x, y, z, w]

    Returns:
        Transformed points of shape (..., 4)
    """
    point = _as_float_tensor(point)
    _check_vector(point)
    p = Point.from_cartesian(point).to_multivector()
    return point + _displacement(motor.components, p)


def transform_direction(motor: Motor, direction: TensorLike) -> Vector4:
    """
    Transform direction vectors (normals) by the rotational part of a motor.

    Translation-bearing components (e01..e04, e0123..e0234) never take part,
    so a pure translation returns the input unchanged. For a pure rotation
    the result matches transform_point.

    Args:
        motor: Motor defining the transformation
        direction: Directions of shape (..., 4)

    Returns:
        Rotated directions of shape (..., 4)
    """
    direction = _as_float_tensor(direction)
    _check_vector(direction)
    d = Point.direction(direction).to_multivector()
    return direction + _displacement(euclidean_part(motor.components), d)


def compose_transforms(*motors: Motor) -> Motor:
    """
    Compose multiple transformations.

    The transformations are applied right-to-left:
    compose_transforms(M1, M2, M3) means apply M3 first, then M2, then M1.

    Args:
        *motors: Motors to compose

    Returns:
        Composed motor
    """
    if len(motors) == 0:
        return Motor.identity()

    result = motors[0]
    for m in motors[1:]:
        result = result.compose(m)

    return result


def invert_transform(motor: Motor) -> Motor:
    """
    Invert a transformation.

    Args:
        motor: Motor to invert

    Returns:
        Inverse motor
    """
    return motor.inverse()


def renormalize(motor: Motor) -> Motor:
    """Remove the magnitude drift accumulated by repeated composition."""
    return motor.normalized()


def world_to_local(
    points: TensorLike,
    motor: Motor
) -> torch.Tensor:
    """
    Transform points from world frame to local frame.

    Args:
        points: World-space points (..., 4)
        motor: Motor defining the local frame

    Returns:
        Local-space points
    """
    return transform_point(motor.inverse(), points)


def local_to_world(
    points: TensorLike,
    motor: Motor
) -> torch.Tensor:
    """
    Transform points from local frame to world frame.

    Args:
        points: Local-space points (..., 4)
        motor: Motor defining the local frame

    Returns:
        World-space points
    """
    return transform_point(motor, points)
