# materials/metal.py
from typing import Optional, Tuple, Union
from core.ray import Ray
from core.vector import Color, Vector3
from core.utils import reflect, random_in_unit_sphere
from geometry.hittable import HitRecord
from materials.material import Material
from materials.textures import Texture, as_texture


class Metal(Material):
    """
    Metal material with reflective properties and optional texture support.

    `fuzz` (clamped to 1) perturbs the mirror direction by a random point in
    a sphere of that radius; 0 is a perfect mirror.
    """
    def __init__(self, albedo: Union[Vector3, Texture], fuzz: float = 0.0):
        super().__init__(as_texture(albedo))
        self.fuzz = min(fuzz, 1.0)

    def scatter(self, ray_in: Ray, rec: HitRecord) -> Optional[Tuple[Ray, Color]]:
        reflected = reflect(ray_in.direction.normalize(), rec.normal).normalize()
        direction = reflected
        if self.fuzz > 0:
            direction = reflected + random_in_unit_sphere() * self.fuzz
        scattered = Ray(rec.p, direction, ray_in.time)

        if scattered.direction.dot(rec.normal) > 0:
            return scattered, self.texture.color_value(rec.p, rec.u, rec.v)

        return None  # Absorb the ray if it does not scatter forward

    def __repr__(self) -> str:
        return f"Metal({self.texture!r}, fuzz={self.fuzz})"
