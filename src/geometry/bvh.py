# src/geometry/bvh.py
import logging
from typing import Optional, Sequence
from core.aabb import AABB
from core.ray import Ray
from core.utils import rng
from geometry.hittable import Hittable, HitRecord, require_box

logger = logging.getLogger(__name__)


class BVHNode(Hittable):
    """
    Binary bounding volume hierarchy built by randomized-axis median split.

    Every node picks one of the three axes uniformly at random, sorts its
    objects by the minimum of their bounding box along that axis and hands
    each half to a child node. A single object becomes a leaf. The node's
    box is the union of its children's boxes and is fixed at construction.
    """
    def __init__(self, objects: Sequence[Hittable], time0: float = 0.0, time1: float = 1.0):
        if len(objects) == 0:
            raise ValueError("Cannot construct a BVH from an empty object list.")

        if len(objects) == 1:
            self.is_leaf = True
            self.object = objects[0]
            self.left = self.right = None
            self.box = require_box(self.object, time0, time1)
            return

        axis = int(rng().integers(0, 3))
        ordered = sorted(objects,
            key=lambda obj: require_box(obj, time0, time1).minimum[axis])

        mid = len(ordered) // 2
        self.is_leaf = False
        self.object = None
        self.left = BVHNode(ordered[:mid], time0, time1)
        self.right = BVHNode(ordered[mid:], time0, time1)
        self.box = AABB.surrounding_box(self.left.box, self.right.box)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        if self.is_leaf:
            return self.object.hit(ray, t_min, t_max)

        if not self.box.hit(ray, t_min, t_max):
            return None

        hit_left = self.left.hit(ray, t_min, t_max)
        # Only look for right-hand hits strictly nearer than the left one.
        hit_right = self.right.hit(ray, t_min, hit_left.t if hit_left else t_max)
        return hit_right if hit_right is not None else hit_left

    def bounding_box(self, time0: float, time1: float) -> Optional[AABB]:
        return self.box

    def depth(self) -> int:
        if self.is_leaf:
            return 1
        return 1 + max(self.left.depth(), self.right.depth())

    def leaves(self):
        """Yields the wrapped objects in left-to-right order."""
        if self.is_leaf:
            yield self.object
            return
        yield from self.left.leaves()
        yield from self.right.leaves()

    def __repr__(self) -> str:
        if self.is_leaf:
            return f"BVHNode(leaf={self.object!r})"
        return f"BVHNode(box={self.box!r})"


def build_bvh(objects: Sequence[Hittable], time0: float = 0.0, time1: float = 1.0) -> BVHNode:
    root = BVHNode(objects, time0, time1)
    logger.debug("Built BVH over %d objects (depth %d, box %r)", len(objects), root.depth(), root.box)
    return root
