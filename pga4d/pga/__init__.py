"""
PGA (Projective Geometric Algebra) module.

Implements the even subalgebra of G(4,0,1) with 16-component motors,
5-component homogeneous points, and the sandwich-product transforms that
apply rigid motions to points and directions.
"""

from .algebra import (
    FIELDS,
    PRODUCT_TABLE,
    multiply_blades,
    geometric_product,
    commutator,
    reverse,
    sandwich,
    scalar_part,
    grade,
    euclidean_part,
)

from .motors import (
    Motor,
    compose,
    translation,
    rotation_in_plane,
    rotation_xy,
    rotation_xz,
    rotation_xw,
    rotation_yz,
    rotation_yw,
    rotation_zw,
)

from .points import (
    Point,
    POINT_FIELDS,
)

from .transforms import (
    transform_point,
    transform_direction,
    compose_transforms,
    invert_transform,
    renormalize,
    world_to_local,
    local_to_world,
)

__all__ = [
    # Algebra
    "FIELDS",
    "PRODUCT_TABLE",
    "multiply_blades",
    "geometric_product",
    "commutator",
    "reverse",
    "sandwich",
    "scalar_part",
    "grade",
    "euclidean_part",
    # Motors
    "Motor",
    "compose",
    "translation",
    "rotation_in_plane",
    "rotation_xy",
    "rotation_xz",
    "rotation_xw",
    "rotation_yz",
    "rotation_yw",
    "rotation_zw",
    # Points
    "Point",
    "POINT_FIELDS",
    # Transforms
    "transform_point",
    "transform_direction",
    "compose_transforms",
    "invert_transform",
    "renormalize",
    "world_to_local",
    "local_to_world",
]
