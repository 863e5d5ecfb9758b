"""
Type aliases and shape conventions for PGA4D.

Shape Conventions:
==================

All values store their components in the LAST tensor dimension and allow any
number of leading batch dimensions:

    Motor components:     Tensor[..., 16]
    Point components:     Tensor[..., 5]
    Bare points/normals:  Tensor[..., 4]   as [x, y, z, w]

Component order of a motor:
    [s, e01, e02, e03, e04, e12, e13, e14, e23, e24, e34,
     e0123, e0124, e0134, e0234, e1234]

Component order of a point:
    [e0123, e0124, e0134, e0234, e1234]
"""

from typing import Sequence, Tuple, Union
import torch


# =============================================================================
# Basic Type Aliases
# =============================================================================

# Anything that torch.as_tensor accepts as a list of floats
TensorLike = Union[torch.Tensor, Sequence[float], Sequence[Sequence[float]]]

# Bare 4D point or direction of shape (..., 4)
Vector4 = torch.Tensor

# Basis blade as a sorted tuple of basis-vector indices, e.g. (0, 1, 2, 3)
Blade = Tuple[int, ...]

# Rotation plane given by name ("xy", "34") or by two basis indices
PlaneSpec = Union[str, Tuple[int, int]]
