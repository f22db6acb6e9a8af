# src/materials/dielectric.py
import math
from typing import Tuple
from core.ray import Ray
from core.vector import Color
from core.utils import reflect, refract, rng, schlick
from geometry.hittable import HitRecord
from materials.material import Material

class Dielectric(Material):
    """
    Clear dielectric (glass, water) with index of refraction `ir`.

    Each interaction either reflects or refracts; the choice is forced to
    reflection under total internal reflection and otherwise drawn with the
    Schlick reflectance as probability.
    """
    def __init__(self, ir: float):
        super().__init__()
        self.ir = ir

    def refraction_ratio(self, front_face: bool) -> float:
        return 1.0 / self.ir if front_face else self.ir

    def cannot_refract(self, unit_direction, rec: HitRecord) -> bool:
        ratio = self.refraction_ratio(rec.front_face)
        cos_theta = min(-unit_direction.dot(rec.normal), 1.0)
        sin_theta = math.sqrt(max(0.0, 1.0 - cos_theta * cos_theta))
        return ratio * sin_theta > 1.0

    def scatter(self, ray_in: Ray, rec: HitRecord) -> Tuple[Ray, Color]:
        attenuation = Color(1.0, 1.0, 1.0)  # Glass doesn't absorb light

        ratio = self.refraction_ratio(rec.front_face)
        unit_direction = ray_in.direction.normalize()
        cos_theta = min(-unit_direction.dot(rec.normal), 1.0)

        if self.cannot_refract(unit_direction, rec) or schlick(cos_theta, ratio) > rng().random():
            direction = reflect(unit_direction, rec.normal)
        else:
            direction = refract(unit_direction, rec.normal, ratio)

        return Ray(rec.p, direction, ray_in.time), attenuation

    def __repr__(self) -> str:
        return f"Dielectric(ir={self.ir})"
