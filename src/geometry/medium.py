# geometry/medium.py
import math
from typing import Optional, Union
from core.aabb import AABB
from core.vector import Vector3
from core.ray import Ray
from core.utils import rng
from geometry.hittable import Hittable, HitRecord, require_box
from materials.isotropic import Isotropic
from materials.textures import Texture

# Step past the entry point before looking for the exit point.
EXIT_EPSILON = 1e-4


class ConstantMedium(Hittable):
    """
    Homogeneous participating medium (smoke, fog) filling a boundary shape.

    A ray entering the boundary scatters after an exponentially distributed
    distance with mean 1 / density, or passes straight through if that
    distance is longer than its path inside the boundary. The boundary must
    be closed and convex for the entry/exit search to be meaningful.
    """
    def __init__(self, boundary: Hittable, density: float,
                 albedo: Union[Vector3, Texture], time0: float = 0.0, time1: float = 1.0):
        if density <= 0:
            raise ValueError(f"Medium density must be positive, got {density}")
        require_box(boundary, time0, time1)
        self.boundary = boundary
        self.density = density
        self.neg_inv_density = -1.0 / density
        self.phase_function = Isotropic(albedo)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        rec1 = self.boundary.hit(ray, -math.inf, math.inf)
        if rec1 is None:
            return None
        rec2 = self.boundary.hit(ray, rec1.t + EXIT_EPSILON, math.inf)
        if rec2 is None:
            return None

        t_enter = max(rec1.t, t_min)
        t_exit = min(rec2.t, t_max)
        if t_enter >= t_exit:
            return None
        t_enter = max(t_enter, 0.0)

        ray_length = ray.direction.length()
        distance_inside_boundary = (t_exit - t_enter) * ray_length
        # 1 - U lies in (0, 1], which keeps the logarithm finite.
        hit_distance = self.neg_inv_density * math.log(1.0 - rng().random())
        if hit_distance > distance_inside_boundary:
            return None

        t = t_enter + hit_distance / ray_length
        rec = HitRecord(t, ray.at(t), self.phase_function)
        # Arbitrary; isotropic scattering ignores the normal.
        rec.normal = Vector3(1, 0, 0)
        rec.front_face = True
        return rec

    def bounding_box(self, time0: float, time1: float) -> Optional[AABB]:
        return self.boundary.bounding_box(time0, time1)

    def __repr__(self) -> str:
        return f"ConstantMedium({self.boundary!r}, density={self.density})"
