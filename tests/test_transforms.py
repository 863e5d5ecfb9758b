"""
Tests for the point and direction transforms.

transform_point and transform_direction are what the renderer calls every
frame, so the identity and pure-translation cases must be exact.
"""

import math

import pytest
import torch

from pga4d.pga.motors import Motor, compose, rotation_in_plane, translation
from pga4d.pga.transforms import (
    transform_point,
    transform_direction,
    compose_transforms,
    invert_transform,
    renormalize,
    world_to_local,
    local_to_world,
)


class TestTransformPoint:
    """Tests for transform_point."""

    def test_identity_is_exact(self, identity_motor, random_points):
        """The identity motor returns the input bit for bit."""
        assert torch.equal(transform_point(identity_motor, random_points), random_points)

    def test_translation_is_exact(self, random_points):
        """A pure translation returns point + offset bit for bit."""
        offset = torch.tensor([1.25, -3.5, 0.75, 2.0], dtype=torch.float64)
        result = transform_point(translation(offset), random_points)
        assert torch.equal(result, random_points + offset)

    def test_reference_fixture(self):
        """Translate by x, then a quarter turn in xy, lands on y."""
        m = compose(rotation_in_plane('xy', math.pi / 2), translation([1.0, 0.0, 0.0, 0.0]))
        result = transform_point(m, [0.0, 0.0, 0.0, 0.0])
        assert torch.allclose(result, torch.tensor([0.0, 1.0, 0.0, 0.0]), atol=1e-6)

    def test_composed_translations_move_origin(self):
        """T(1, 0, 0, 0) * T(0, 2, 0, 0) sends the origin to (1, 2, 0, 0)."""
        m = compose(translation([1.0, 0.0, 0.0, 0.0]), translation([0.0, 2.0, 0.0, 0.0]))
        assert transform_point(m, [0.0, 0.0, 0.0, 0.0]).tolist() == [1.0, 2.0, 0.0, 0.0]

    def test_motor_times_reverse_round_trip(self, random_unit_motor, random_points):
        """transform(A * ~A, p) returns p."""
        a = random_unit_motor()
        result = transform_point(compose(a, a.reverse()), random_points)
        assert torch.allclose(result, random_points, atol=1e-10)

    def test_composition_law(self, random_unit_motor, random_points):
        """transform(A * B, p) = transform(A, transform(B, p))."""
        a, b = random_unit_motor(), random_unit_motor()
        left = transform_point(a * b, random_points)
        right = transform_point(a, transform_point(b, random_points))
        assert torch.allclose(left, right, atol=1e-10)

    def test_preserves_distances(self, random_unit_motor, random_points):
        """Rigid motions keep pairwise distances."""
        m = random_unit_motor()
        moved = transform_point(m, random_points)
        assert torch.allclose(torch.cdist(moved, moved), torch.cdist(random_points, random_points), atol=1e-10)

    def test_rotation_about_origin_keeps_norm(self):
        """Plane rotations keep the distance to the origin."""
        p = torch.tensor([1.0, 2.0, 3.0, 4.0], dtype=torch.float64)
        for plane in ('12', '13', '14', '23', '24', '34'):
            m = rotation_in_plane(plane, torch.tensor(0.9, dtype=torch.float64))
            assert transform_point(m, p).norm().item() == pytest.approx(p.norm().item())

    def test_rotation_leaves_orthogonal_axes(self):
        """A rotation in xy leaves z and w alone."""
        p = torch.tensor([0.0, 0.0, 2.0, -3.0], dtype=torch.float64)
        m = rotation_in_plane('xy', torch.tensor(1.1, dtype=torch.float64))
        assert torch.allclose(transform_point(m, p), p, atol=1e-12)

    def test_accepts_lists(self):
        """Plain sequences are accepted."""
        result = transform_point(translation([1.0, 0.0, 0.0, 0.0]), [0.0, 0.0, 0.0, 0.0])
        assert result.tolist() == [1.0, 0.0, 0.0, 0.0]

    def test_broadcasts_motor_batch(self):
        """A batch of motors applied to one point gives a batch of points."""
        offsets = torch.randn(6, 4)
        result = transform_point(translation(offsets), torch.zeros(4))
        assert result.shape == (6, 4)
        assert torch.allclose(result, offsets)

    def test_wrong_shape(self):
        """Points must have 4 components."""
        with pytest.raises(ValueError, match="Expected 4 components"):
            transform_point(Motor.identity(), torch.zeros(3))


class TestTransformDirection:
    """Tests for transform_direction."""

    def test_identity_is_exact(self, identity_motor, random_points):
        """The identity motor returns the input bit for bit."""
        assert torch.equal(transform_direction(identity_motor, random_points), random_points)

    def test_translation_ignored(self, random_points):
        """Translations do not move directions, exactly."""
        m = translation([10.0, -20.0, 30.0, 40.0]).to(dtype=torch.float64)
        assert torch.equal(transform_direction(m, random_points), random_points)

    def test_matches_point_for_pure_rotation(self, random_points):
        """For a pure rotation, directions and points rotate alike."""
        m = rotation_in_plane('yw', torch.tensor(0.8, dtype=torch.float64)) \
            * rotation_in_plane('xz', torch.tensor(-1.3, dtype=torch.float64))
        assert torch.allclose(transform_direction(m, random_points), transform_point(m, random_points), atol=1e-12)

    def test_ignores_translation_part_of_motor(self, random_points):
        """Only the rotational part of a general motor is applied."""
        r = rotation_in_plane('zw', torch.tensor(0.5, dtype=torch.float64))
        t = translation(torch.tensor([1.0, 2.0, 3.0, 4.0], dtype=torch.float64))
        assert torch.allclose(transform_direction(t * r, random_points), transform_direction(r, random_points), atol=1e-12)

    def test_preserves_length(self, random_unit_motor, random_points):
        """Rotated directions keep their length."""
        result = transform_direction(random_unit_motor(), random_points)
        assert torch.allclose(result.norm(dim=-1), random_points.norm(dim=-1), atol=1e-10)


class TestTransformHelpers:
    """Tests for composition, inversion and frame changes."""

    def test_compose_transforms_empty(self):
        """No motors compose to the identity."""
        assert compose_transforms() == Motor.identity()

    def test_compose_transforms_order(self, random_unit_motor):
        """compose_transforms(A, B, C) = A * B * C."""
        a, b, c = random_unit_motor(), random_unit_motor(), random_unit_motor()
        assert compose_transforms(a, b, c).allclose(a * b * c, atol=1e-12)

    def test_invert_transform_round_trip(self, random_unit_motor, random_points):
        """Applying a motor and then its inverse returns the points."""
        m = random_unit_motor()
        moved = transform_point(m, random_points)
        back = transform_point(invert_transform(m), moved)
        assert torch.allclose(back, random_points, atol=1e-10)

    def test_world_local_round_trip(self, random_unit_motor, random_points):
        """local_to_world undoes world_to_local."""
        m = random_unit_motor()
        local = world_to_local(random_points, m)
        assert torch.allclose(local_to_world(local, m), random_points, atol=1e-10)

    def test_world_to_local_of_frame_origin(self):
        """The frame's own origin is the local origin."""
        m = translation([1.0, 2.0, 3.0, 4.0])
        assert torch.allclose(world_to_local([1.0, 2.0, 3.0, 4.0], m), torch.zeros(4))

    def test_renormalize_restores_unit_magnitude(self, random_unit_motor):
        """Drifted motors are brought back to unit magnitude."""
        m = random_unit_motor() * 1.01
        assert renormalize(m).magnitude().item() == pytest.approx(1.0, abs=1e-12)

    def test_renormalize_after_many_compositions(self):
        """Accumulated float32 drift is removed."""
        step = rotation_in_plane('xz', 0.001) * rotation_in_plane('xy', 0.0013) * translation([0.01, 0.0, 0.0, 0.0])
        m = Motor.identity()
        for _ in range(2000):
            m = m * step
        assert renormalize(m).magnitude().item() == pytest.approx(1.0, abs=1e-6)
