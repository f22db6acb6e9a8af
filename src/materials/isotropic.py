# materials/isotropic.py
from typing import Tuple, Union
from core.ray import Ray
from core.vector import Color, Vector3
from core.utils import random_in_unit_sphere
from geometry.hittable import HitRecord
from materials.material import Material
from materials.textures import Texture, as_texture


class Isotropic(Material):
    """
    Phase function of a constant medium: scatters uniformly in all directions.
    """
    def __init__(self, albedo: Union[Vector3, Texture]):
        super().__init__(as_texture(albedo))

    def scatter(self, ray_in: Ray, rec: HitRecord) -> Tuple[Ray, Color]:
        scattered = Ray(rec.p, random_in_unit_sphere(), ray_in.time)
        return scattered, self.texture.color_value(rec.p, rec.u, rec.v)
