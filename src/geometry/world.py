# src/geometry/world.py
from typing import Iterable, Iterator, List, Optional
from core.aabb import AABB
from core.ray import Ray
from geometry.bvh import BVHNode, build_bvh
from geometry.hittable import Hittable, HitRecord


class HittableList(Hittable):
    """
    An ordered list of Hittable objects. Intersection is a linear scan that
    keeps narrowing the search window to the closest hit found so far.
    """
    def __init__(self, objects: Optional[Iterable[Hittable]] = None):
        self.objects: List[Hittable] = list(objects) if objects is not None else []

    def add(self, obj: Hittable):
        self.objects.append(obj)

    def __len__(self) -> int:
        return len(self.objects)

    def __iter__(self) -> Iterator[Hittable]:
        return iter(self.objects)

    def build_bvh(self, time0: float = 0.0, time1: float = 1.0) -> BVHNode:
        """
        Returns a BVH over a copy of the current objects.
        """
        return build_bvh(self.objects, time0, time1)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        hit_record = None
        closest_so_far = t_max
        for obj in self.objects:
            rec = obj.hit(ray, t_min, closest_so_far)
            if rec is not None:
                closest_so_far = rec.t
                hit_record = rec
        return hit_record

    def bounding_box(self, time0: float, time1: float) -> Optional[AABB]:
        if not self.objects:
            return None
        output_box = None
        for obj in self.objects:
            box = obj.bounding_box(time0, time1)
            if box is None:
                return None
            output_box = box if output_box is None else AABB.surrounding_box(output_box, box)
        return output_box

    def __repr__(self) -> str:
        return f"HittableList({len(self.objects)} objects)"
