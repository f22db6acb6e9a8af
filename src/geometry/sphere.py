# geometry/sphere.py
import math
from typing import Optional
from core.aabb import AABB
from core.vector import Vector3
from core.ray import Ray
from geometry.hittable import Hittable, HitRecord


class Sphere(Hittable):
    """
    Represents a sphere defined by its center, radius, and material.

    The center may move linearly from `center` at `time0` to `center1` at
    `time1`; a static sphere simply has both centers equal.
    """
    def __init__(self, center: Vector3, radius: float, material,
                 center1: Optional[Vector3] = None, time0: float = 0.0, time1: float = 1.0):
        self.center0 = center
        self.center1 = center if center1 is None else center1
        self.time0 = time0
        self.time1 = time1
        self.radius = radius
        self.material = material

    @classmethod
    def moving(cls, center0: Vector3, center1: Vector3, time0: float, time1: float,
               radius: float, material) -> "Sphere":
        return cls(center0, radius, material, center1=center1, time0=time0, time1=time1)

    @property
    def is_moving(self) -> bool:
        return self.center0 != self.center1

    def center(self, time: float) -> Vector3:
        if not self.is_moving or self.time1 == self.time0:
            return self.center0
        fraction = (time - self.time0) / (self.time1 - self.time0)
        return self.center0 + (self.center1 - self.center0) * fraction

    @staticmethod
    def get_sphere_uv(p: Vector3):
        """
        Maps a point on the unit sphere to (u, v) in [0, 1]^2.

        u is the angle around the Y axis from X = -1, v the angle from Y = -1
        to Y = +1.
        """
        theta = math.acos(max(-1.0, min(1.0, -p.y)))
        phi = math.atan2(-p.z, p.x) + math.pi
        return phi / (2 * math.pi), theta / math.pi

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        center = self.center(ray.time)
        oc = ray.origin - center
        a = ray.direction.length_squared()
        half_b = oc.dot(ray.direction)
        c = oc.length_squared() - self.radius * self.radius
        discriminant = half_b * half_b - a * c

        if discriminant < 0:
            return None

        sqrt_disc = math.sqrt(discriminant)
        # Find the nearest root that lies in the acceptable range
        root = (-half_b - sqrt_disc) / a
        if root < t_min or root > t_max:
            root = (-half_b + sqrt_disc) / a
            if root < t_min or root > t_max:
                return None

        p = ray.at(root)
        outward_normal = (p - center) / self.radius
        u, v = self.get_sphere_uv(outward_normal)
        rec = HitRecord(root, p, self.material, u, v)
        rec.set_face_normal(ray, outward_normal)
        return rec

    def bounding_box(self, time0: float, time1: float) -> AABB:
        # center ± radius at both ends of the span
        r = abs(self.radius)
        offset = Vector3(r, r, r)
        c0 = self.center(time0)
        box0 = AABB(c0 - offset, c0 + offset)
        if not self.is_moving:
            return box0
        c1 = self.center(time1)
        box1 = AABB(c1 - offset, c1 + offset)
        return AABB.surrounding_box(box0, box1)

    def __repr__(self) -> str:
        if self.is_moving:
            return f"Sphere({self.center0!r} -> {self.center1!r}, r={self.radius})"
        return f"Sphere({self.center0!r}, r={self.radius})"
