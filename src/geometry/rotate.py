# geometry/rotate.py
import math
from typing import Optional
from core.aabb import AABB
from core.vector import Vector3
from core.ray import Ray
from geometry.hittable import Hittable, HitRecord, require_box


class RotateY(Hittable):
    """
    Rotates a child object about the Y axis by `angle` degrees.

    The bounding box is the axis-aligned box around the eight rotated
    corners of the child's box, so it is looser than the rotated box itself.
    """
    def __init__(self, obj: Hittable, angle: float, time0: float = 0.0, time1: float = 1.0):
        self.object = obj
        self.angle = angle
        radians = math.radians(angle)
        self.sin_theta = math.sin(radians)
        self.cos_theta = math.cos(radians)

        box = require_box(obj, time0, time1)
        minimum = [math.inf, math.inf, math.inf]
        maximum = [-math.inf, -math.inf, -math.inf]
        for corner in box.corners():
            rotated = self._to_world(corner)
            for c in range(3):
                minimum[c] = min(minimum[c], rotated[c])
                maximum[c] = max(maximum[c], rotated[c])
        self.box = AABB(Vector3(*minimum), Vector3(*maximum))

    def _to_object(self, v: Vector3) -> Vector3:
        return Vector3(self.cos_theta * v.x - self.sin_theta * v.z,
                       v.y,
                       self.sin_theta * v.x + self.cos_theta * v.z)

    def _to_world(self, v: Vector3) -> Vector3:
        return Vector3(self.cos_theta * v.x + self.sin_theta * v.z,
                       v.y,
                       -self.sin_theta * v.x + self.cos_theta * v.z)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        rotated_ray = Ray(self._to_object(ray.origin), self._to_object(ray.direction), ray.time)
        rec = self.object.hit(rotated_ray, t_min, t_max)
        if rec is None:
            return None
        rec.p = self._to_world(rec.p)
        # The child already oriented the normal against its ray; rotating both
        # keeps that orientation and front_face.
        rec.normal = self._to_world(rec.normal)
        return rec

    def bounding_box(self, time0: float, time1: float) -> AABB:
        return self.box

    def __repr__(self) -> str:
        return f"RotateY({self.object!r}, {self.angle})"
