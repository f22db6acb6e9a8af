# geometry/translate.py
from typing import Optional
from core.aabb import AABB
from core.vector import Vector3
from core.ray import Ray
from geometry.hittable import Hittable, HitRecord


class Translate(Hittable):
    """
    Moves a child object by a fixed offset.

    The ray is moved into the child's frame instead of moving the child, so
    the child's ray parameter is reported unchanged.
    """
    def __init__(self, obj: Hittable, offset: Vector3):
        self.object = obj
        self.offset = offset

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        moved_ray = Ray(ray.origin - self.offset, ray.direction, ray.time)
        rec = self.object.hit(moved_ray, t_min, t_max)
        if rec is None:
            return None
        # Directions are unchanged by a translation, so the child's normal
        # and face orientation carry over as they are.
        rec.p = rec.p + self.offset
        return rec

    def bounding_box(self, time0: float, time1: float) -> Optional[AABB]:
        box = self.object.bounding_box(time0, time1)
        if box is None:
            return None
        return box.translated(self.offset)

    def __repr__(self) -> str:
        return f"Translate({self.object!r}, {self.offset!r})"
