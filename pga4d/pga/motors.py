"""
Motor operations for 4D Projective Geometric Algebra (PGA).

A Motor represents a rigid body motion (rotation + translation) of 4D
Euclidean space. Motors are elements of the even subalgebra and have 16
components:

    [s, e01, e02, e03, e04, e12, e13, e14, e23, e24, e34,
     e0123, e0124, e0134, e0234, e1234]

The e0* components carry translation; the rest carry rotation. The
fundamental operation is the sandwich product:

    X' = M * X * ~M

Composition is the geometric product: (A * B) applies B first, then A.
Unit motors drift away from unit magnitude under repeated composition, so
long-lived accumulators should be renormalized periodically.
"""

from __future__ import annotations
import operator
from typing import Optional, Tuple, Union
import torch

from .algebra import (
    FIELDS,
    BLADE_INDEX,
    geometric_product,
    reverse,
    scalar_part,
    IDX_S, IDX_E01, IDX_E02, IDX_E03, IDX_E04,
    IDX_E12, IDX_E13, IDX_E14, IDX_E23, IDX_E24, IDX_E34,
    IDX_E0123, IDX_E0124, IDX_E0134, IDX_E0234, IDX_E1234,
)
from ..core.constants import (
    DEFAULT_ATOL,
    DEFAULT_EPS_NORM,
    MOTOR_COMPONENTS,
    VECTOR_COMPONENTS,
)
from ..core.types import PlaneSpec, TensorLike


def _as_float_tensor(
    values: TensorLike,
    dtype: torch.dtype = None,
    device: torch.device = None
) -> torch.Tensor:
    """Convert input to a floating point tensor."""
    tensor = torch.as_tensor(values, device=device)
    if dtype is not None:
        tensor = tensor.to(dtype)
    elif not tensor.dtype.is_floating_point:
        tensor = tensor.to(torch.get_default_dtype())
    return tensor


def _component(idx: int, doc: str) -> property:
    return property(lambda self: self._mv[..., idx], doc=doc)


class Motor:
    """
    A Motor representing a rigid motion of 4D space.

    Components are stored as a tensor of shape (..., 16); leading dimensions
    are batch dimensions. Motors are values: every operation returns a new
    Motor and none of them modify the receiver.
    """

    def __init__(self, components: Optional[TensorLike] = None):
        """
        Initialize a Motor.

        Args:
            components: Tensor or nested sequence of shape (..., 16) in
                        storage order. Defaults to the identity motor.
        """
        if components is None:
            components = torch.zeros(MOTOR_COMPONENTS)
            components[IDX_S] = 1.0
        components = _as_float_tensor(components)
        if components.dim() == 0 or components.shape[-1] != MOTOR_COMPONENTS:
            got = components.shape[-1] if components.dim() > 0 else 0
            raise ValueError(f"Expected {MOTOR_COMPONENTS} components, got {got}")
        self._mv = components

    @classmethod
    def identity(
        cls,
        batch_shape: Tuple[int, ...] = (),
        dtype: torch.dtype = None,
        device: torch.device = None
    ) -> 'Motor':
        """Create identity motor (no transformation)."""
        mv = torch.zeros(*batch_shape, MOTOR_COMPONENTS, device=device,
                         dtype=dtype or torch.get_default_dtype())
        mv[..., IDX_S] = 1.0
        return cls(mv)

    # === Components ===

    s = _component(IDX_S, "Scalar part.")
    e01 = _component(IDX_E01, "Translation-bearing bivector e₀₁.")
    e02 = _component(IDX_E02, "Translation-bearing bivector e₀₂.")
    e03 = _component(IDX_E03, "Translation-bearing bivector e₀₃.")
    e04 = _component(IDX_E04, "Translation-bearing bivector e₀₄.")
    e12 = _component(IDX_E12, "Rotation bivector e₁₂.")
    e13 = _component(IDX_E13, "Rotation bivector e₁₃.")
    e14 = _component(IDX_E14, "Rotation bivector e₁₄.")
    e23 = _component(IDX_E23, "Rotation bivector e₂₃.")
    e24 = _component(IDX_E24, "Rotation bivector e₂₄.")
    e34 = _component(IDX_E34, "Rotation bivector e₃₄.")
    e0123 = _component(IDX_E0123, "Quadvector e₀₁₂₃.")
    e0124 = _component(IDX_E0124, "Quadvector e₀₁₂₄.")
    e0134 = _component(IDX_E0134, "Quadvector e₀₁₃₄.")
    e0234 = _component(IDX_E0234, "Quadvector e₀₂₃₄.")
    e1234 = _component(IDX_E1234, "Quadvector e₁₂₃₄.")

    @property
    def components(self) -> torch.Tensor:
        """Raw component tensor of shape (..., 16)."""
        return self._mv

    @property
    def shape(self) -> torch.Size:
        """Batch shape (excluding the 16 components)."""
        return self._mv.shape[:-1]

    @property
    def device(self) -> torch.device:
        return self._mv.device

    @property
    def dtype(self) -> torch.dtype:
        return self._mv.dtype

    def to(self, device: torch.device = None, dtype: torch.dtype = None) -> 'Motor':
        """Move to specified device and/or dtype."""
        return Motor(self._mv.to(device=device, dtype=dtype))

    def clone(self) -> 'Motor':
        """Create a copy."""
        return Motor(self._mv.clone())

    def detach(self) -> 'Motor':
        """Detach from computation graph."""
        return Motor(self._mv.detach())

    def tolist(self):
        return self._mv.tolist()

    def as_dict(self) -> dict:
        """Field name -> value, for unbatched motors."""
        if self.shape != torch.Size([]):
            raise ValueError(f"as_dict() needs an unbatched motor, got batch shape {tuple(self.shape)}")
        return dict(zip(FIELDS, self._mv.tolist()))

    def __getitem__(self, index) -> 'Motor':
        """Index into the batch dimensions."""
        return Motor(self._mv[index])

    # === Algebra ===

    def compose(self, other: 'Motor') -> 'Motor':
        """
        Compose two motors: M_combined = self * other

        This represents applying 'other' first, then 'self'.
        """
        return Motor(geometric_product(self._mv, other._mv))

    def reverse(self) -> 'Motor':
        """
        Reversion: ~M

        Negates the ten bivector components. For a unit motor this is
        the inverse motion.
        """
        return Motor(reverse(self._mv))

    def magnitude_squared(self) -> torch.Tensor:
        """Compute |M|² = ⟨~M M⟩₀."""
        return scalar_part(geometric_product(reverse(self._mv), self._mv))

    def magnitude(self) -> torch.Tensor:
        """Compute |M| = √⟨~M M⟩₀."""
        return torch.sqrt(self.magnitude_squared())

    def normalized(self) -> 'Motor':
        """
        Return unit motor: M / |M|

        Raises:
            ValueError: If the motor (or any motor in the batch) has zero
                        or non-finite magnitude.
        """
        mag = self.magnitude()
        if bool((~torch.isfinite(mag) | (mag <= DEFAULT_EPS_NORM)).any()):
            raise ValueError("Cannot normalize a zero-magnitude or non-finite motor")
        return Motor(self._mv * (1.0 / mag).unsqueeze(-1))

    def inverse(self) -> 'Motor':
        """
        Multiplicative inverse: M^{-1} = ~M / ⟨~M M⟩₀

        For unit motors this equals reverse().
        """
        norm_sq = self.magnitude_squared()
        if bool((~torch.isfinite(norm_sq) | (norm_sq <= DEFAULT_EPS_NORM)).any()):
            raise ValueError("Cannot invert a zero-magnitude or non-finite motor")
        return Motor(reverse(self._mv) / norm_sq.unsqueeze(-1))

    def allclose(self, other: 'Motor', atol: float = DEFAULT_ATOL, rtol: float = 1e-5) -> bool:
        """Component-wise approximate equality."""
        return torch.allclose(self._mv, other._mv.to(self.dtype), atol=atol, rtol=rtol)

    def __mul__(self, other: Union['Motor', float, torch.Tensor]) -> 'Motor':
        """Motor composition, or scaling by a scalar."""
        if isinstance(other, Motor):
            return self.compose(other)
        if isinstance(other, (int, float)):
            return Motor(self._mv * other)
        if isinstance(other, torch.Tensor):
            return Motor(self._mv * other.unsqueeze(-1))
        return NotImplemented

    def __rmul__(self, other: Union[float, torch.Tensor]) -> 'Motor':
        """Right multiplication by scalar."""
        if isinstance(other, (int, float, torch.Tensor)):
            return self.__mul__(other)
        return NotImplemented

    def __invert__(self) -> 'Motor':
        """Operator ~: reversion."""
        return self.reverse()

    def __eq__(self, other) -> bool:
        """Exact component-wise equality."""
        if not isinstance(other, Motor):
            return NotImplemented
        return torch.equal(self._mv, other._mv)

    __hash__ = None

    def __repr__(self) -> str:
        if self.shape == torch.Size([]):
            fields = ', '.join(f"{name}={value:g}" for name, value in self.as_dict().items() if value != 0.0)
            return f"Motor({fields})"
        return f"Motor(shape={self.shape}, device={self.device})"


def compose(a: Motor, b: Motor) -> Motor:
    """Geometric product a * b (b applied first)."""
    return a.compose(b)


# =============================================================================
# Constructors
# =============================================================================

def translation(offset: TensorLike) -> Motor:
    """
    Create a pure translation motor.

    T = 1 + (w*e01 - z*e02 + y*e03 - x*e04) / 2

    Sandwiching a point with T moves it by [x, y, z, w].

    Args:
        offset: Translation [x, y, z, w] of shape (..., 4)

    Returns:
        Translation motor with batch shape offset.shape[:-1]
    """
    offset = _as_float_tensor(offset)
    if offset.dim() == 0 or offset.shape[-1] != VECTOR_COMPONENTS:
        raise ValueError(f"Expected an offset of {VECTOR_COMPONENTS} components, got shape {tuple(offset.shape)}")

    x, y, z, w = offset.unbind(dim=-1)

    batch_shape = offset.shape[:-1]
    mv = torch.zeros(*batch_shape, MOTOR_COMPONENTS, device=offset.device, dtype=offset.dtype)

    mv[..., IDX_S] = 1.0
    mv[..., IDX_E01] = w / 2
    mv[..., IDX_E02] = -z / 2
    mv[..., IDX_E03] = y / 2
    mv[..., IDX_E04] = -x / 2

    return Motor(mv)


# Rotation bivector and orientation for each named plane. A point's
# coordinate fields e0123, e0124, e0134, e0234 (x, y, z, w) each lack one
# Euclidean basis vector (e4, e3, e2, e1), so the plane of two coordinates is
# the bivector of the two missing vectors. The sign makes a positive angle
# turn the first named axis toward the second.
NAMED_PLANES = {
    'xy': (IDX_E34, -1.0),
    'xz': (IDX_E24, 1.0),
    'xw': (IDX_E14, -1.0),
    'yz': (IDX_E23, -1.0),
    'yw': (IDX_E13, 1.0),
    'zw': (IDX_E12, -1.0),
}
NAMED_PLANES.update({name[::-1]: (idx, -sign) for name, (idx, sign) in list(NAMED_PLANES.items())})


def _resolve_plane(plane: PlaneSpec) -> Tuple[int, float]:
    """Map a plane spec to (bivector index, sign)."""
    if isinstance(plane, str):
        key = plane.lower()
        if key in NAMED_PLANES:
            return NAMED_PLANES[key]
        if len(key) == 2 and key.isdigit():
            plane = (int(key[0]), int(key[1]))
        else:
            raise ValueError(f"Unknown rotation plane: {plane!r}")

    try:
        i, j = (operator.index(v) for v in plane)
    except (TypeError, ValueError):
        raise ValueError(f"Unknown rotation plane: {plane!r}") from None

    if not (1 <= i <= 4 and 1 <= j <= 4) or i == j:
        raise ValueError(f"Rotation plane needs two distinct Euclidean axes in 1..4, got {plane!r}")

    # e_ji = -e_ij
    sign = 1.0 if i < j else -1.0
    return BLADE_INDEX[tuple(sorted((i, j)))], sign


def rotation_in_plane(plane: PlaneSpec, angle: Union[float, torch.Tensor]) -> Motor:
    """
    Create a rotation motor in one coordinate plane.

    R = cos(θ/2) + sin(θ/2) * e_ij

    The half angle makes the sandwich product rotate by the full θ.
    Two rotations in the same plane compose by adding their angles.

    Args:
        plane: Bivector label "12", "13", "14", "23", "24", "34" (or a tuple
               of two axis indices), or a named point-axis plane such as
               "xy", "xz", "xw", "yz", "yw", "zw"
        angle: Rotation angle in radians, float or tensor of shape (...)

    Returns:
        Rotation motor with batch shape angle.shape
    """
    idx, sign = _resolve_plane(plane)

    angle = _as_float_tensor(angle)
    half_angle = angle / 2

    mv = torch.zeros(*angle.shape, MOTOR_COMPONENTS, device=angle.device, dtype=angle.dtype)
    mv[..., IDX_S] = torch.cos(half_angle)
    mv[..., idx] = sign * torch.sin(half_angle)

    return Motor(mv)


def rotation_xy(angle: Union[float, torch.Tensor]) -> Motor:
    """Rotate x toward y (vertical look)."""
    return rotation_in_plane('xy', angle)


def rotation_xz(angle: Union[float, torch.Tensor]) -> Motor:
    """Rotate x toward z (horizontal look)."""
    return rotation_in_plane('xz', angle)


def rotation_xw(angle: Union[float, torch.Tensor]) -> Motor:
    """Rotate x toward w (the fourth dimension)."""
    return rotation_in_plane('xw', angle)


def rotation_yz(angle: Union[float, torch.Tensor]) -> Motor:
    return rotation_in_plane('yz', angle)


def rotation_yw(angle: Union[float, torch.Tensor]) -> Motor:
    return rotation_in_plane('yw', angle)


def rotation_zw(angle: Union[float, torch.Tensor]) -> Motor:
    return rotation_in_plane('zw', angle)
