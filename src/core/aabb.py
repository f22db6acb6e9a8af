# src/core/aabb.py
import math
from core.vector import Vector3


def inverse(d: float) -> float:
    """1/d with IEEE-754 semantics: a zero component yields a signed infinity."""
    if d == 0.0:
        return math.copysign(math.inf, d)
    return 1.0 / d


class AABB:
    """Axis-aligned bounding box, ``minimum <= maximum`` componentwise."""
    __slots__ = ("minimum", "maximum")

    def __init__(self, minimum: Vector3, maximum: Vector3):
        self.minimum = minimum
        self.maximum = maximum

    def hit(self, ray, t_min: float, t_max: float) -> bool:
        # Slab method: for each axis, narrow [t_min, t_max] to the slab interval.
        # NaN from 0 * inf never wins a comparison, so it leaves the interval alone.
        origin = ray.origin
        direction = ray.direction
        for a in range(3):
            inv_d = inverse(direction[a])
            t0 = (self.minimum[a] - origin[a]) * inv_d
            t1 = (self.maximum[a] - origin[a]) * inv_d
            if inv_d < 0:
                t0, t1 = t1, t0
            t_min = t0 if t0 > t_min else t_min
            t_max = t1 if t1 < t_max else t_max
            if t_max <= t_min:
                return False
        return True

    def contains(self, other: "AABB") -> bool:
        return all(
            self.minimum[a] <= other.minimum[a] and other.maximum[a] <= self.maximum[a]
            for a in range(3)
        )

    def translated(self, offset: Vector3) -> "AABB":
        return AABB(self.minimum + offset, self.maximum + offset)

    def corners(self):
        """The eight corner points of the box."""
        for i in (0, 1):
            for j in (0, 1):
                for k in (0, 1):
                    yield Vector3(
                        self.maximum.x if i else self.minimum.x,
                        self.maximum.y if j else self.minimum.y,
                        self.maximum.z if k else self.minimum.z,
                    )

    @staticmethod
    def surrounding_box(box0: "AABB", box1: "AABB") -> "AABB":
        small = Vector3(
            min(box0.minimum.x, box1.minimum.x),
            min(box0.minimum.y, box1.minimum.y),
            min(box0.minimum.z, box1.minimum.z)
        )
        big = Vector3(
            max(box0.maximum.x, box1.maximum.x),
            max(box0.maximum.y, box1.maximum.y),
            max(box0.maximum.z, box1.maximum.z)
        )
        return AABB(small, big)

    def __repr__(self) -> str:
        return f"AABB({self.minimum!r}, {self.maximum!r})"
