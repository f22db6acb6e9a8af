# geometry/hittable.py
from abc import ABC, abstractmethod
from typing import Optional
from core.aabb import AABB
from core.vector import Vector3
from core.ray import Ray


class BoundingBoxError(ValueError):
    """
    Raised while assembling a scene when an object that must be bounded
    (a BVH member, a rotated or volumetric child) has no bounding box.
    """


class HitRecord:
    """
    Records details of a ray-object intersection.
    """
    __slots__ = ("t", "u", "v", "p", "normal", "front_face", "material")

    def __init__(self, t: float, p: Vector3, material=None,
                 u: float = 0.0, v: float = 0.0):
        self.t = t                  # Ray parameter at intersection
        self.u = u                  # Surface coordinates
        self.v = v
        self.p = p                  # Intersection point
        self.normal = Vector3(0, 0, 0)
        self.front_face = False
        self.material = material

    def set_face_normal(self, ray: Ray, outward_normal: Vector3):
        """
        Ensures that the normal always points against the ray.
        """
        self.front_face = ray.direction.dot(outward_normal) < 0
        self.normal = outward_normal if self.front_face else -outward_normal

    def __repr__(self) -> str:
        return (f"HitRecord(t={self.t}, p={self.p!r}, normal={self.normal!r}, "
                f"front_face={self.front_face}, u={self.u}, v={self.v})")


class Hittable(ABC):
    """
    Abstract class for objects that can be hit by a ray.
    """
    @abstractmethod
    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        """
        Returns the nearest intersection with parameter in [t_min, t_max],
        or None if the ray misses.
        """

    @abstractmethod
    def bounding_box(self, time0: float, time1: float) -> Optional[AABB]:
        """
        Returns a box enclosing the object over the time span, or None if
        the object is unbounded.
        """


def require_box(obj: Hittable, time0: float, time1: float) -> AABB:
    box = obj.bounding_box(time0, time1)
    if box is None:
        raise BoundingBoxError(f"Cannot construct a bounding box for {obj!r}.")
    return box
