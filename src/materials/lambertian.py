# materials/lambertian.py
from typing import Tuple, Union
from core.ray import Ray
from core.vector import Color, Vector3
from core.utils import random_unit_vector
from geometry.hittable import HitRecord
from materials.material import Material
from materials.textures import Texture, as_texture


class Lambertian(Material):
    """
    Ideal diffuse reflector. Scattered directions follow a cosine
    distribution about the normal; the albedo may be a color or a texture.
    """

    def __init__(self, albedo: Union[Vector3, Texture]):
        super().__init__(as_texture(albedo))

    def scatter(self, ray_in: Ray, rec: HitRecord) -> Tuple[Ray, Color]:
        """
        Always scatters. Returns (scattered_ray, attenuation), the ray keeping
        the incoming ray's time.
        """
        # normal + unit vector is cosine-distributed over the hemisphere
        direction = rec.normal + random_unit_vector()
        if direction.near_zero():
            direction = rec.normal

        return (Ray(rec.p, direction, ray_in.time),
                self.texture.color_value(rec.p, rec.u, rec.v))
