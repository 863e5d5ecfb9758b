"""
Even subalgebra of the 4D Projective Geometric Algebra G(4,0,1).

The full algebra is generated by five basis vectors with the metric:
- e₀² = 0 (degenerate/ideal direction, encodes translations)
- e₁² = e₂² = e₃² = e₄² = +1 (Euclidean)
- eᵢeⱼ = -eⱼeᵢ for i ≠ j

Rigid motions only ever need the even grades, which close under the
geometric product. That subalgebra has 16 basis blades:
- Grade 0 (scalar): 1
- Grade 2 (bivectors): e₀₁, e₀₂, e₀₃, e₀₄, e₁₂, e₁₃, e₁₄, e₂₃, e₂₄, e₃₄
- Grade 4 (quadvectors): e₀₁₂₃, e₀₁₂₄, e₀₁₃₄, e₀₂₃₄, e₁₂₃₄

Component ordering:
[s, e01, e02, e03, e04, e12, e13, e14, e23, e24, e34, e0123, e0124, e0134, e0234, e1234]
 0   1    2    3    4    5    6    7    8    9    10   11     12     13     14     15

All functions in this module work on raw tensors of shape (..., 16) so that
the value types in motors.py and points.py can share them.
"""

from __future__ import annotations
from typing import Dict, Tuple
import torch

from ..core.constants import MOTOR_COMPONENTS
from ..core.types import Blade


# Field names in storage order
FIELDS = (
    's',
    'e01', 'e02', 'e03', 'e04',
    'e12', 'e13', 'e14', 'e23', 'e24', 'e34',
    'e0123', 'e0124', 'e0134', 'e0234', 'e1234',
)

# Component indices for each basis blade
IDX_S = 0         # Scalar (grade 0)
IDX_E01 = 1       # e₀₁
IDX_E02 = 2       # e₀₂
IDX_E03 = 3       # e₀₃
IDX_E04 = 4       # e₀₄
IDX_E12 = 5       # e₁₂
IDX_E13 = 6       # e₁₃
IDX_E14 = 7       # e₁₄
IDX_E23 = 8       # e₂₃
IDX_E24 = 9       # e₂₄
IDX_E34 = 10      # e₃₄
IDX_E0123 = 11    # e₀₁₂₃
IDX_E0124 = 12    # e₀₁₂₄
IDX_E0134 = 13    # e₀₁₃₄
IDX_E0234 = 14    # e₀₂₃₄
IDX_E1234 = 15    # e₁₂₃₄

# Basis blade of every component, as sorted basis-vector indices
BLADES: Tuple[Blade, ...] = (
    (),
    (0, 1), (0, 2), (0, 3), (0, 4),
    (1, 2), (1, 3), (1, 4), (2, 3), (2, 4), (3, 4),
    (0, 1, 2, 3), (0, 1, 2, 4), (0, 1, 3, 4), (0, 2, 3, 4), (1, 2, 3, 4),
)

BLADE_INDEX: Dict[Blade, int] = {blade: idx for idx, blade in enumerate(BLADES)}

# Grade masks for extraction
GRADE_0_MASK = [IDX_S]
GRADE_2_MASK = [IDX_E01, IDX_E02, IDX_E03, IDX_E04,
                IDX_E12, IDX_E13, IDX_E14, IDX_E23, IDX_E24, IDX_E34]
GRADE_4_MASK = [IDX_E0123, IDX_E0124, IDX_E0134, IDX_E0234, IDX_E1234]

# Blades containing e0 (translation-bearing) and the purely Euclidean rest
IDEAL_MASK = [idx for idx, blade in enumerate(BLADES) if 0 in blade]
EUCLIDEAN_MASK = [idx for idx, blade in enumerate(BLADES) if 0 not in blade]

# The metric: e0^2 = 0, e1^2 = e2^2 = e3^2 = e4^2 = 1
METRIC = {0: 0, 1: 1, 2: 1, 3: 1, 4: 1}

# Reversion sign table: grade k has sign (-1)^(k*(k-1)/2)
# Grade 0: +1, Grade 2: -1, Grade 4: +1
REVERSE_SIGNS = torch.tensor(
    [(-1) ** (len(blade) * (len(blade) - 1) // 2) for blade in BLADES],
    dtype=torch.float32,
)


def multiply_blades(a: Blade, b: Blade) -> Tuple[Blade, int]:
    """
    Multiply two basis blades, returning (result_blade, sign).

    Bubble-sorts the concatenated basis vectors into canonical (ascending)
    order. Each swap of adjacent distinct vectors flips the sign; each
    adjacent equal pair contracts through the metric. A sign of 0 means
    the product vanishes (e0 appeared twice).
    """
    combined = list(a) + list(b)
    sign = 1

    changed = True
    while changed:
        changed = False
        i = 0
        while i < len(combined) - 1:
            if combined[i] == combined[i + 1]:
                m = METRIC[combined[i]]
                if m == 0:
                    return (), 0
                sign *= m
                combined.pop(i + 1)
                combined.pop(i)
                changed = True
            elif combined[i] > combined[i + 1]:
                combined[i], combined[i + 1] = combined[i + 1], combined[i]
                sign *= -1
                changed = True
                i += 1
            else:
                i += 1

    return tuple(combined), sign


def _build_product_table() -> torch.Tensor:
    """
    Build the structure constants of the even subalgebra.

    Returns:
        (16, 16, 16) tensor T with e_i * e_j = sum_k T[i, j, k] e_k
    """
    table = torch.zeros(MOTOR_COMPONENTS, MOTOR_COMPONENTS, MOTOR_COMPONENTS,
                        dtype=torch.float64)

    for i, blade_i in enumerate(BLADES):
        for j, blade_j in enumerate(BLADES):
            blade, sign = multiply_blades(blade_i, blade_j)
            if sign == 0:
                continue
            table[i, j, BLADE_INDEX[blade]] = sign

    return table


# Built once at module load time
PRODUCT_TABLE = _build_product_table()

# Antisymmetric half: [a, b] = (ab - ba) / 2
COMMUTATOR_TABLE = (PRODUCT_TABLE - PRODUCT_TABLE.transpose(0, 1)) / 2

_TABLE_CACHE: Dict[Tuple[str, torch.dtype, torch.device], torch.Tensor] = {}


def _table(name: str, dtype: torch.dtype, device: torch.device) -> torch.Tensor:
    """Get a structure table converted to the requested dtype and device."""
    key = (name, dtype, device)
    if key not in _TABLE_CACHE:
        source = PRODUCT_TABLE if name == 'product' else COMMUTATOR_TABLE
        _TABLE_CACHE[key] = source.to(device=device, dtype=dtype)
    return _TABLE_CACHE[key]


def _check_components(x: torch.Tensor) -> None:
    if x.shape[-1] != MOTOR_COMPONENTS:
        raise ValueError(f"Expected {MOTOR_COMPONENTS} components, got {x.shape[-1]}")


def _bilinear(name: str, a: torch.Tensor, b: torch.Tensor) -> torch.Tensor:
    _check_components(a)
    _check_components(b)

    dtype = torch.promote_types(a.dtype, b.dtype)
    if not dtype.is_floating_point:
        dtype = torch.get_default_dtype()
    a = a.to(dtype)
    b = b.to(dtype)

    # Broadcast batch dimensions: (..., 16) x (..., 16)
    batch_shape = torch.broadcast_shapes(a.shape[:-1], b.shape[:-1])
    a = a.expand(*batch_shape, MOTOR_COMPONENTS)
    b = b.expand(*batch_shape, MOTOR_COMPONENTS)

    table = _table(name, dtype, a.device)
    return torch.einsum('...i,ijk,...j->...k', a, table, b)


def geometric_product(a: torch.Tensor, b: torch.Tensor) -> torch.Tensor:
    """
    Compute the geometric product a * b of two even elements.

    Every output coefficient is a fixed signed sum of products of one
    component of a with one of b; the signs and pairings are the
    structure constants in PRODUCT_TABLE.

    Args:
        a: Left operand of shape (..., 16)
        b: Right operand of shape (..., 16)

    Returns:
        Product of shape (broadcast batch, 16)
    """
    return _bilinear('product', a, b)


def commutator(a: torch.Tensor, b: torch.Tensor) -> torch.Tensor:
    """
    Commutator product: (a * b - b * a) / 2.

    Computed directly from the antisymmetrized structure constants, so
    components that cancel analytically come out as exact zeros.
    """
    return _bilinear('commutator', a, b)


def reverse(a: torch.Tensor) -> torch.Tensor:
    """
    Reversion: ~a

    Negates the ten grade-2 components, keeps grades 0 and 4.
    """
    _check_components(a)
    signs = REVERSE_SIGNS.to(device=a.device, dtype=a.dtype)
    return a * signs


def sandwich(m: torch.Tensor, x: torch.Tensor) -> torch.Tensor:
    """
    Compute the sandwich product: m * x * ~m

    This is the fundamental operation for applying transformations in GA.
    """
    return geometric_product(geometric_product(m, x), reverse(m))


def scalar_part(a: torch.Tensor) -> torch.Tensor:
    """Extract scalar (grade 0) component."""
    _check_components(a)
    return a[..., IDX_S]


def grade(a: torch.Tensor, k: int) -> torch.Tensor:
    """Extract grade-k part, zeroing every other component."""
    _check_components(a)
    masks = {0: GRADE_0_MASK, 2: GRADE_2_MASK, 4: GRADE_4_MASK}
    if k not in masks:
        raise ValueError(f"Even subalgebra has grades 0, 2 and 4, got {k}")
    result = torch.zeros_like(a)
    result[..., masks[k]] = a[..., masks[k]]
    return result


def euclidean_part(a: torch.Tensor) -> torch.Tensor:
    """Zero every translation-bearing (e0) component."""
    _check_components(a)
    result = torch.zeros_like(a)
    result[..., EUCLIDEAN_MASK] = a[..., EUCLIDEAN_MASK]
    return result
