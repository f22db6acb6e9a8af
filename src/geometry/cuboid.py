# geometry/cuboid.py
from typing import Optional
from core.aabb import AABB
from core.vector import Vector3
from core.ray import Ray
from geometry.hittable import Hittable, HitRecord
from geometry.rectangle import XYRectangle, XZRectangle, YZRectangle
from geometry.world import HittableList


class Cuboid(Hittable):
    """
    Axis-aligned box made of six rectangles sharing one material.
    """
    def __init__(self, minimum: Vector3, maximum: Vector3, material):
        self.minimum = minimum
        self.maximum = maximum
        self.material = material
        self.sides = HittableList([
            XYRectangle(minimum.x, maximum.x, minimum.y, maximum.y, maximum.z, material),
            XYRectangle(minimum.x, maximum.x, minimum.y, maximum.y, minimum.z, material),
            XZRectangle(minimum.x, maximum.x, minimum.z, maximum.z, maximum.y, material),
            XZRectangle(minimum.x, maximum.x, minimum.z, maximum.z, minimum.y, material),
            YZRectangle(minimum.y, maximum.y, minimum.z, maximum.z, maximum.x, material),
            YZRectangle(minimum.y, maximum.y, minimum.z, maximum.z, minimum.x, material),
        ])

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        return self.sides.hit(ray, t_min, t_max)

    def bounding_box(self, time0: float, time1: float) -> AABB:
        return AABB(self.minimum, self.maximum)

    def __repr__(self) -> str:
        return f"Cuboid({self.minimum!r}, {self.maximum!r})"
