"""
Tests for homogeneous 4D points.

Points are grade-4 elements with 5 components
[e0123, e0124, e0134, e0234, e1234]; the last is the weight.
"""

import math

import pytest
import torch

from pga4d.pga.algebra import GRADE_4_MASK, sandwich
from pga4d.pga.motors import Motor, rotation_in_plane, translation
from pga4d.pga.points import Point, POINT_FIELDS, POSITIONAL_MASK
from pga4d.pga.transforms import transform_point


class TestPointCreation:
    """Tests for Point construction."""

    def test_requires_5_components(self):
        """Points have exactly 5 components."""
        with pytest.raises(ValueError, match="Expected 5 components, got 4"):
            Point(torch.zeros(4))

    def test_identity_is_unit_origin(self):
        """Point.identity() is the origin with weight 1."""
        p = Point.identity()
        assert p.components.tolist() == [0.0, 0.0, 0.0, 0.0, 1.0]

    def test_from_cartesian(self):
        """Cartesian coordinates get weight 1."""
        p = Point.from_cartesian([1.0, 2.0, 3.0, 4.0])
        assert p.components.tolist() == [1.0, 2.0, 3.0, 4.0, 1.0]
        assert p.e0123.item() == 1.0
        assert p.e0234.item() == 4.0
        assert p.weight.item() == 1.0

    def test_from_cartesian_batched(self):
        """Batch dimensions are preserved."""
        p = Point.from_cartesian(torch.zeros(3, 7, 4))
        assert p.shape == (3, 7)
        assert (p.weight == 1.0).all()

    def test_from_cartesian_wrong_length(self):
        """Cartesian input must have 4 components."""
        with pytest.raises(ValueError, match="Expected 4 components"):
            Point.from_cartesian([1.0, 2.0, 3.0])

    def test_direction_has_zero_weight(self):
        """Directions are ideal points."""
        p = Point.direction([0.0, 1.0, 0.0, 0.0])
        assert p.weight.item() == 0.0
        assert bool(p.is_ideal())

    def test_multivector_round_trip(self):
        """Embedding into 16 components and projecting back is lossless."""
        p = Point(torch.tensor([1.0, -2.0, 3.0, -4.0, 0.5]))
        mv = p.to_multivector()
        assert mv.shape == (16,)
        assert torch.equal(mv[GRADE_4_MASK], p.components)
        assert Point.from_multivector(mv) == p

    def test_from_multivector_wrong_length(self):
        """from_multivector needs a 16-component input."""
        with pytest.raises(ValueError, match="Expected 16 components"):
            Point.from_multivector(torch.zeros(5))

    def test_repr(self):
        """Unbatched repr shows every field."""
        text = repr(Point.identity())
        for name in POINT_FIELDS:
            assert name in text

    def test_positional_mask_covers_coordinates(self):
        """The four positional fields precede the weight in grade 4."""
        assert POSITIONAL_MASK == GRADE_4_MASK[:4]


class TestPointCartesian:
    """Tests for Cartesian conversion."""

    def test_divides_by_weight(self):
        """(x, y, z, w, W) -> (x, y, z, w) / W."""
        p = Point([2.0, 4.0, 6.0, 8.0, 2.0])
        assert p.to_cartesian().tolist() == [1.0, 2.0, 3.0, 4.0]

    def test_ideal_point_raises(self):
        """Ideal points have no Cartesian coordinates."""
        with pytest.raises(ValueError, match="Ideal point"):
            Point.direction([1.0, 0.0, 0.0, 0.0]).to_cartesian()

    def test_batch_with_one_ideal_point_raises(self):
        """One ideal point in a batch is enough to raise."""
        p = Point(torch.tensor([[1.0, 0, 0, 0, 1.0], [1.0, 0, 0, 0, 0.0]]))
        with pytest.raises(ValueError):
            p.to_cartesian()


class TestPointTransform:
    """Tests for the weighted sandwich transform."""

    def test_rejects_non_motor(self):
        """transform() only accepts motors."""
        with pytest.raises(TypeError, match="expects a Motor"):
            Point.identity().transform(torch.zeros(16))

    def test_identity(self):
        """The identity motor leaves points unchanged."""
        p = Point([1.0, 2.0, 3.0, 4.0, 2.0])
        assert p.transform(Motor.identity()) == p

    def test_translation_moves_unit_point(self):
        """A translation adds its offset to a unit-weight point."""
        p = Point.from_cartesian([1.0, 2.0, 3.0, 4.0])
        moved = p.transform(translation([0.5, -1.0, 2.0, 10.0]))
        assert moved.to_cartesian().tolist() == [1.5, 1.0, 5.0, 14.0]
        assert moved.weight.item() == 1.0

    def test_translation_leaves_ideal_points(self):
        """Directions are not moved by translations."""
        d = Point.direction([1.0, 2.0, 3.0, 4.0])
        assert d.transform(translation([5.0, 5.0, 5.0, 5.0])) == d

    def test_weight_preserved_by_unit_motor(self, random_unit_motor):
        """A unit motor keeps the weight."""
        p = Point(torch.tensor([1.0, 2.0, -1.0, 0.5, 3.0], dtype=torch.float64))
        moved = p.transform(random_unit_motor())
        assert moved.weight.item() == pytest.approx(3.0, abs=1e-10)

    def test_weighted_point_agrees_with_transform_point(self, random_unit_motor, random_points):
        """Scaling the weight does not change where the point lands."""
        m = random_unit_motor()
        weighted = Point(torch.cat([random_points * 2.5, torch.full((8, 1), 2.5, dtype=torch.float64)], dim=-1))
        expected = transform_point(m, random_points)
        assert torch.allclose(weighted.transform(m).to_cartesian(), expected, atol=1e-10)

    def test_weight_recomputed_for_scaled_motor(self, random_unit_motor, random_points):
        """A scaled motor scales the weight by |M|^2 but not the position."""
        m = random_unit_motor()
        p = Point.from_cartesian(random_points)
        moved = p.transform(m * 2.0)
        assert torch.allclose(moved.weight, torch.full((8,), 4.0, dtype=torch.float64), atol=1e-10)
        assert torch.allclose(moved.to_cartesian(), p.transform(m).to_cartesian(), atol=1e-10)

    def test_matches_full_sandwich(self, random_unit_motor, random_points):
        """The folded product agrees with M * P * ~M."""
        m = random_unit_motor()
        p = Point.from_cartesian(random_points)
        expected = sandwich(m.components, p.to_multivector())[..., GRADE_4_MASK]
        assert torch.allclose(p.transform(m).components, expected, atol=1e-10)

    def test_rotation_quarter_turn(self):
        """A quarter turn in xw carries x onto w."""
        p = Point.from_cartesian(torch.tensor([1.0, 0.0, 0.0, 0.0], dtype=torch.float64))
        moved = p.transform(rotation_in_plane('xw', torch.tensor(math.pi / 2, dtype=torch.float64)))
        expected = torch.tensor([0.0, 0.0, 0.0, 1.0], dtype=torch.float64)
        assert torch.allclose(moved.to_cartesian(), expected, atol=1e-12)

    def test_batched_motor_and_points(self):
        """Batched motors apply element-wise to batched points."""
        offsets = torch.tensor([[1.0, 0, 0, 0], [0, 0, 0, 3.0]])
        p = Point.from_cartesian(torch.zeros(2, 4))
        moved = p.transform(translation(offsets))
        assert torch.allclose(moved.to_cartesian(), offsets)
