"""
Homogeneous points in 4D Projective Geometric Algebra (PGA).

In 4D PGA a point is a grade-4 element, dual to the vectors:

    P = x*e0123 + y*e0124 + z*e0134 + w*e0234 + W*e1234

The e1234 coefficient W is the homogeneous weight. Dividing the four
positional fields by W recovers Cartesian coordinates; a point with W = 0
is an ideal point (a direction).

Points are stored as tensors of shape (..., 5):
[e0123, e0124, e0134, e0234, e1234]

Because grade 4 belongs to the even subalgebra, points embed directly into
the 16-component layout and are transformed with the same product used to
compose motors.
"""

from __future__ import annotations
from typing import Tuple
import torch

from .algebra import (
    GRADE_4_MASK,
    commutator,
    geometric_product,
    reverse,
)
from .motors import Motor, _as_float_tensor
from ..core.constants import (
    DEFAULT_EPS_NORM,
    MOTOR_COMPONENTS,
    POINT_COMPONENTS,
    VECTOR_COMPONENTS,
)
from ..core.types import TensorLike


POINT_FIELDS = ('e0123', 'e0124', 'e0134', 'e0234', 'e1234')

# Positional fields inside the 16-component motor layout
POSITIONAL_MASK = GRADE_4_MASK[:VECTOR_COMPONENTS]


def _check_vector(values: torch.Tensor) -> None:
    if values.dim() == 0 or values.shape[-1] != VECTOR_COMPONENTS:
        raise ValueError(f"Expected {VECTOR_COMPONENTS} components, got shape {tuple(values.shape)}")


class Point:
    """
    A weighted homogeneous point in 4D space.

    Like Motor, Point is a value type: transform() and every other
    operation return new instances.
    """

    def __init__(self, components: TensorLike):
        """
        Args:
            components: Tensor of shape (..., 5) as
                        [e0123, e0124, e0134, e0234, e1234]
        """
        components = _as_float_tensor(components)
        if components.dim() == 0 or components.shape[-1] != POINT_COMPONENTS:
            got = components.shape[-1] if components.dim() > 0 else 0
            raise ValueError(f"Expected {POINT_COMPONENTS} components, got {got}")
        self._p = components

    @classmethod
    def identity(
        cls,
        batch_shape: Tuple[int, ...] = (),
        dtype: torch.dtype = None,
        device: torch.device = None
    ) -> 'Point':
        """The origin with unit weight."""
        p = torch.zeros(*batch_shape, POINT_COMPONENTS, device=device,
                        dtype=dtype or torch.get_default_dtype())
        p[..., -1] = 1.0
        return cls(p)

    @classmethod
    def from_cartesian(cls, coords: TensorLike) -> 'Point':
        """
        Create unit-weight points from Cartesian coordinates.

        Args:
            coords: Tensor of shape (..., 4) containing [x, y, z, w]

        Returns:
            Point with fields (x, y, z, w, 1)
        """
        coords = _as_float_tensor(coords)
        _check_vector(coords)
        ones = torch.ones(*coords.shape[:-1], 1, device=coords.device, dtype=coords.dtype)
        return cls(torch.cat([coords, ones], dim=-1))

    @classmethod
    def direction(cls, vector: TensorLike) -> 'Point':
        """
        Create ideal points (weight 0) from direction vectors.

        Ideal points are unaffected by translation.
        """
        vector = _as_float_tensor(vector)
        _check_vector(vector)
        zeros = torch.zeros(*vector.shape[:-1], 1, device=vector.device, dtype=vector.dtype)
        return cls(torch.cat([vector, zeros], dim=-1))

    @classmethod
    def from_multivector(cls, mv: torch.Tensor) -> 'Point':
        """Project a (..., 16) even element onto its grade-4 part."""
        if mv.shape[-1] != MOTOR_COMPONENTS:
            raise ValueError(f"Expected {MOTOR_COMPONENTS} components, got {mv.shape[-1]}")
        return cls(mv[..., GRADE_4_MASK])

    # === Fields ===

    @property
    def components(self) -> torch.Tensor:
        return self._p

    @property
    def e0123(self) -> torch.Tensor:
        return self._p[..., 0]

    @property
    def e0124(self) -> torch.Tensor:
        return self._p[..., 1]

    @property
    def e0134(self) -> torch.Tensor:
        return self._p[..., 2]

    @property
    def e0234(self) -> torch.Tensor:
        return self._p[..., 3]

    @property
    def e1234(self) -> torch.Tensor:
        return self._p[..., 4]

    @property
    def weight(self) -> torch.Tensor:
        """Homogeneous weight (the e1234 field)."""
        return self._p[..., 4]

    @property
    def positional(self) -> torch.Tensor:
        """Unnormalized positional fields of shape (..., 4)."""
        return self._p[..., :VECTOR_COMPONENTS]

    @property
    def shape(self) -> torch.Size:
        """Batch shape (excluding the 5 components)."""
        return self._p.shape[:-1]

    @property
    def dtype(self) -> torch.dtype:
        return self._p.dtype

    @property
    def device(self) -> torch.device:
        return self._p.device

    def is_ideal(self, eps: float = DEFAULT_EPS_NORM) -> torch.Tensor:
        """True where the weight vanishes (points at infinity)."""
        return self.weight.abs() <= eps

    def to_cartesian(self) -> torch.Tensor:
        """
        Divide the positional fields by the weight.

        Returns:
            Tensor of shape (..., 4) containing [x, y, z, w]

        Raises:
            ValueError: If any point is ideal (zero weight).
        """
        if bool(self.is_ideal().any()):
            raise ValueError("Ideal point (zero weight) has no Cartesian coordinates")
        return self.positional / self.weight.unsqueeze(-1)

    def to_multivector(self) -> torch.Tensor:
        """Embed into the (..., 16) even layout."""
        mv = torch.zeros(*self.shape, MOTOR_COMPONENTS, device=self.device, dtype=self.dtype)
        mv[..., GRADE_4_MASK] = self._p
        return mv

    def transform(self, motor: Motor) -> 'Point':
        """
        Apply a motor with the sandwich product M * P * ~M.

        The product is folded as

            M P ~M = P (M ~M) + 2 [M, P] ~M

        where [M, P] = (MP - PM) / 2. The weight of the result is
        recomputed from the sandwich rather than copied; for a unit
        motor it equals the input weight. Only the grade-4 part of the
        product is kept.

        Args:
            motor: Motor to apply

        Returns:
            Transformed point
        """
        if not isinstance(motor, Motor):
            raise TypeError(f"Point.transform expects a Motor, got {type(motor).__name__}")

        m = motor.components
        p = self.to_multivector()
        m_rev = reverse(m)

        weighted = geometric_product(p, geometric_product(m, m_rev))
        displacement = geometric_product(commutator(m, p), m_rev)

        return Point.from_multivector(weighted + 2 * displacement)

    def __getitem__(self, index) -> 'Point':
        """Index into the batch dimensions."""
        return Point(self._p[index])

    def __eq__(self, other) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return torch.equal(self._p, other._p)

    __hash__ = None

    def __repr__(self) -> str:
        if self.shape == torch.Size([]):
            fields = ', '.join(f"{name}={value:g}" for name, value in zip(POINT_FIELDS, self._p.tolist()))
            return f"Point({fields})"
        return f"Point(shape={self.shape}, device={self.device})"
