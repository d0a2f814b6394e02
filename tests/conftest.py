"""Pytest configuration for raysphere tests.

Shared fixtures for the common rays and spheres used across test modules.
"""

import pytest

from raysphere.core.ray import Ray
from raysphere.core.vector import Vector3
from raysphere.geometry.sphere import Sphere


@pytest.fixture
def unit_sphere():
    """Unit sphere centered at the origin."""
    return Sphere(Vector3(0.0, 0.0, 0.0), 1.0)


@pytest.fixture
def ray_toward_origin():
    """Ray starting at z=-5 pointing down +z, through the origin."""
    return Ray(Vector3(0.0, 0.0, -5.0), Vector3(0.0, 0.0, 1.0))


def assert_on_surface(point, sphere, tol=1e-9):
    """Assert that point lies on the sphere surface within a relative tolerance."""
    distance = (point - sphere.center).length()
    assert abs(distance - sphere.radius) <= tol * max(1.0, sphere.radius)
