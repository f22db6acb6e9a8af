"""Pytest configuration for path tracer tests.

This module provides shared fixtures for all test modules. Every test runs
with the calling thread's generator reseeded, so sampled directions and
BVH split axes are reproducible from run to run.
"""

import pytest

from core.utils import seed_rng
from core.vector import Color, Vector3
from geometry.sphere import Sphere
from geometry.world import HittableList
from materials.lambertian import Lambertian


@pytest.fixture(autouse=True)
def seeded_rng():
    """Reseed the thread-local generator before each test."""
    seed_rng(42)
    yield


@pytest.fixture
def gray():
    """A mid-gray diffuse material."""
    return Lambertian(Color(0.5, 0.5, 0.5))


@pytest.fixture
def unit_sphere(gray):
    """A unit sphere at the origin."""
    return Sphere(Vector3(0, 0, 0), 1.0, gray)


@pytest.fixture
def centered_sphere_world(gray):
    """A single diffuse sphere of radius 0.5 in front of the default view."""
    return HittableList([Sphere(Vector3(0, 0, -1), 0.5, gray)])
