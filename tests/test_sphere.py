"""Unit tests for sphere intersection.

Tests cover:
- Ray hitting sphere from outside (front face)
- Ray missing sphere
- Ray starting inside sphere (back face)
- Ray tangent to sphere
- Interval limits and the far root
- Surface (u, v) coordinates
- Moving spheres and their bounding boxes
"""

import math

import pytest

from core.ray import Ray
from core.vector import Vector3
from geometry.sphere import Sphere


class TestSphereIntersection:
    """Tests for ray-sphere intersection."""

    def test_hit_from_outside(self, unit_sphere):
        """Test ray hitting sphere head-on from outside."""
        rec = unit_sphere.hit(Ray(Vector3(0, 0, 5), Vector3(0, 0, -1)), 0.001, math.inf)
        assert rec is not None
        assert math.isclose(rec.t, 4.0)
        assert rec.p == Vector3(0, 0, 1)
        assert rec.normal == Vector3(0, 0, 1)
        assert rec.front_face
        assert rec.material is unit_sphere.material

    def test_distance_scales_with_direction(self, unit_sphere):
        """Test that t is in units of the (unnormalized) direction."""
        rec = unit_sphere.hit(Ray(Vector3(0, 0, 5), Vector3(0, 0, -2)), 0.001, math.inf)
        assert math.isclose(rec.t, 2.0)

    def test_miss(self, unit_sphere):
        """Test ray passing beside the sphere."""
        assert unit_sphere.hit(Ray(Vector3(0, 2, 5), Vector3(0, 0, -1)), 0.001, math.inf) is None

    def test_hit_from_inside(self, unit_sphere):
        """Test that a ray from the center exits through a back face."""
        rec = unit_sphere.hit(Ray(Vector3(0, 0, 0), Vector3(1, 0, 0)), 0.001, math.inf)
        assert math.isclose(rec.t, 1.0)
        assert not rec.front_face
        # Normal is flipped to oppose the ray
        assert rec.normal == Vector3(-1, 0, 0)

    def test_tangent(self, unit_sphere):
        """Test a ray grazing the sphere."""
        rec = unit_sphere.hit(Ray(Vector3(-5, 1, 0), Vector3(1, 0, 0)), 0.001, math.inf)
        assert rec is not None
        assert math.isclose(rec.t, 5.0)
        assert math.isclose(rec.p.y, 1.0)

    def test_far_root_when_near_root_out_of_range(self, unit_sphere):
        """Test falling back to the far root."""
        rec = unit_sphere.hit(Ray(Vector3(0, 0, 5), Vector3(0, 0, -1)), 4.5, math.inf)
        assert math.isclose(rec.t, 6.0)
        assert not rec.front_face

    def test_both_roots_out_of_range(self, unit_sphere):
        """Test that an interval between the roots' complement misses."""
        assert unit_sphere.hit(Ray(Vector3(0, 0, 5), Vector3(0, 0, -1)), 0.001, 3.0) is None


class TestSphereUV:
    """Tests for spherical texture coordinates."""

    @pytest.mark.parametrize("point,expected", [
        (Vector3(1, 0, 0), (0.5, 0.5)),
        (Vector3(0, 1, 0), (0.5, 1.0)),
        (Vector3(0, -1, 0), (0.5, 0.0)),
        (Vector3(-1, 0, 0), (0.0, 0.5)),
        (Vector3(0, 0, 1), (0.25, 0.5)),
        (Vector3(0, 0, -1), (0.75, 0.5)),
    ])
    def test_uv(self, point, expected):
        """Test (u, v) at the poles and around the equator."""
        u, v = Sphere.get_sphere_uv(point)
        assert math.isclose(u, expected[0], abs_tol=1e-12)
        assert math.isclose(v, expected[1], abs_tol=1e-12)


class TestMovingSphere:
    """Tests for spheres moving during the shutter interval."""

    def test_center_interpolates(self, gray):
        """Test center at the start, middle and end of the interval."""
        sphere = Sphere.moving(Vector3(0, 0, 0), Vector3(2, 0, 0), 0.0, 1.0, 0.5, gray)
        assert sphere.is_moving
        assert sphere.center(0.0) == Vector3(0, 0, 0)
        assert sphere.center(0.5) == Vector3(1, 0, 0)
        assert sphere.center(1.0) == Vector3(2, 0, 0)

    def test_hit_uses_ray_time(self, gray):
        """Test that the hit is computed against the center at ray time."""
        sphere = Sphere.moving(Vector3(0, 0, 0), Vector3(0, 4, 0), 0.0, 1.0, 1.0, gray)
        ray_early = Ray(Vector3(0, 4, 5), Vector3(0, 0, -1), time=0.0)
        ray_late = Ray(Vector3(0, 4, 5), Vector3(0, 0, -1), time=1.0)
        assert sphere.hit(ray_early, 0.001, math.inf) is None
        assert sphere.hit(ray_late, 0.001, math.inf) is not None

    def test_bounding_box_covers_motion(self, gray):
        """Test that the box spans both end positions."""
        sphere = Sphere.moving(Vector3(0, 0, 0), Vector3(2, 0, 0), 0.0, 1.0, 0.5, gray)
        box = sphere.bounding_box(0.0, 1.0)
        assert box.minimum == Vector3(-0.5, -0.5, -0.5)
        assert box.maximum == Vector3(2.5, 0.5, 0.5)

    def test_static_bounding_box(self, unit_sphere):
        """Test the box of a static sphere."""
        box = unit_sphere.bounding_box(0.0, 1.0)
        assert box.minimum == Vector3(-1, -1, -1)
        assert box.maximum == Vector3(1, 1, 1)
