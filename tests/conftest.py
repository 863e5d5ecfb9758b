"""
Pytest configuration and fixtures for PGA4D tests.
"""

import math

import pytest
import torch

from pga4d.pga.motors import Motor, rotation_in_plane, translation


PLANES = ('12', '13', '14', '23', '24', '34')


@pytest.fixture
def cpu_device():
    """Force CPU device for consistent testing."""
    return torch.device('cpu')


@pytest.fixture
def generator():
    """Seeded generator so random fixtures are reproducible."""
    return torch.Generator().manual_seed(1234)


@pytest.fixture
def random_even(generator):
    """Factory for arbitrary (not necessarily unit) even elements in float64."""
    def make(*batch_shape):
        return torch.randn(*batch_shape, 16, generator=generator, dtype=torch.float64)
    return make


@pytest.fixture
def random_unit_motor(generator):
    """Factory for unit motors: a rotation in every plane, then a translation."""
    def make():
        motor = translation(torch.randn(4, generator=generator, dtype=torch.float64))
        for plane in PLANES:
            angle = torch.rand((), generator=generator, dtype=torch.float64) * 2 * math.pi
            motor = motor * rotation_in_plane(plane, angle)
        return motor
    return make


@pytest.fixture
def identity_motor():
    """Identity motor in float64."""
    return Motor.identity(dtype=torch.float64)


@pytest.fixture
def random_points(generator):
    """Random points in [-2, 2]^4."""
    return torch.rand(8, 4, generator=generator, dtype=torch.float64) * 4 - 2
