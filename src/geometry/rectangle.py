# geometry/rectangle.py
from typing import Optional
from core.aabb import AABB
from core.vector import Vector3
from core.ray import Ray
from geometry.hittable import Hittable, HitRecord

# Half-thickness floor for a rectangle lying in a coordinate plane (k == 0).
MIN_PADDING = 1e-4


class AxisAlignedRectangle(Hittable):
    """
    Rectangle lying in the plane `axis == k`, spanning [a0, a1] along the
    first in-plane axis and [b0, b1] along the second.

    Subclasses only fix which axes play those roles.
    """
    AXES = (0, 1, 2)  # (first in-plane axis, second in-plane axis, plane axis)

    def __init__(self, a0: float, a1: float, b0: float, b1: float, k: float, material):
        self.a0 = a0
        self.a1 = a1
        self.b0 = b0
        self.b1 = b1
        self.k = k
        self.material = material
        a_axis, b_axis, k_axis = self.AXES
        normal = [0.0, 0.0, 0.0]
        normal[k_axis] = 1.0
        self.outward_normal = Vector3(*normal)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        a_axis, b_axis, k_axis = self.AXES
        d_k = ray.direction[k_axis]
        if d_k == 0.0:
            # Parallel to the plane
            return None

        t = (self.k - ray.origin[k_axis]) / d_k
        if t < t_min or t > t_max:
            return None

        a = ray.origin[a_axis] + t * ray.direction[a_axis]
        b = ray.origin[b_axis] + t * ray.direction[b_axis]
        if a < self.a0 or a > self.a1 or b < self.b0 or b > self.b1:
            return None

        u = (a - self.a0) / (self.a1 - self.a0)
        v = (b - self.b0) / (self.b1 - self.b0)
        rec = HitRecord(t, ray.at(t), self.material, u, v)
        rec.set_face_normal(ray, self.outward_normal)
        return rec

    def bounding_box(self, time0: float, time1: float) -> AABB:
        # The box must have non-zero width along the plane axis.
        a_axis, b_axis, k_axis = self.AXES
        pad = max(1e-3 * abs(self.k), MIN_PADDING)
        lo = [0.0, 0.0, 0.0]
        hi = [0.0, 0.0, 0.0]
        lo[a_axis], hi[a_axis] = self.a0, self.a1
        lo[b_axis], hi[b_axis] = self.b0, self.b1
        lo[k_axis], hi[k_axis] = self.k - pad, self.k + pad
        return AABB(Vector3(*lo), Vector3(*hi))

    def __repr__(self) -> str:
        return (f"{type(self).__name__}({self.a0}, {self.a1}, "
                f"{self.b0}, {self.b1}, k={self.k})")


class XYRectangle(AxisAlignedRectangle):
    """Rectangle in the plane z = k: x in [x0, x1], y in [y0, y1]."""
    AXES = (0, 1, 2)

    def __init__(self, x0: float, x1: float, y0: float, y1: float, k: float, material):
        super().__init__(x0, x1, y0, y1, k, material)


class XZRectangle(AxisAlignedRectangle):
    """Rectangle in the plane y = k: x in [x0, x1], z in [z0, z1]."""
    AXES = (0, 2, 1)

    def __init__(self, x0: float, x1: float, z0: float, z1: float, k: float, material):
        super().__init__(x0, x1, z0, z1, k, material)


class YZRectangle(AxisAlignedRectangle):
    """Rectangle in the plane x = k: y in [y0, y1], z in [z0, z1]."""
    AXES = (1, 2, 0)

    def __init__(self, y0: float, y1: float, z0: float, z1: float, k: float, material):
        super().__init__(y0, y1, z0, z1, k, material)
