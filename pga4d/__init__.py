"""
PGA4D: Rigid motions of 4D space with Projective Geometric Algebra

A PyTorch library for composing rotations and translations of 4-dimensional
Euclidean space as motors of the even subalgebra of G(4,0,1), and for
applying them to points and directions.

Key Features:
- 16-component motors with the full geometric product
- Translation and plane-rotation constructors
- Sandwich-product transforms for points, weighted points and directions
- A camera controller that folds input events into a per-frame motor
- Batched operation over arbitrary leading tensor dimensions

Example:
    >>> import math
    >>> from pga4d.pga import rotation_in_plane, translation, transform_point
    >>> motor = rotation_in_plane("xy", math.pi / 2) * translation([1.0, 0.0, 0.0, 0.0])
    >>> transform_point(motor, [0.0, 0.0, 0.0, 0.0])  # ~ [0, 1, 0, 0]
"""

__version__ = "0.1.0"
__author__ = "PGA4D Contributors"

from . import core
from . import pga
from . import camera
from . import utils

__all__ = [
    "core",
    "pga",
    "camera",
    "utils",
]
