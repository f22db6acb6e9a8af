# materials/diffuse_light.py
from typing import Optional, Tuple, Union
from core.ray import Ray
from core.vector import Color, Vector3
from geometry.hittable import HitRecord
from materials.material import Material
from materials.textures import Texture, as_texture

class DiffuseLight(Material):
    """
    Area light: emits its texture's color equally in every direction and
    absorbs whatever arrives, so paths end on it.
    """
    def __init__(self, emit: Union[Vector3, Texture]):
        super().__init__(as_texture(emit))

    def scatter(self, ray_in: Ray, rec: HitRecord) -> Optional[Tuple[Ray, Color]]:
        return None

    def emitted(self, u: float, v: float, p: Vector3) -> Color:
        """
        Radiance leaving the surface at a hit point.

        Args:
            u (float): Surface u coordinate of the hit.
            v (float): Surface v coordinate of the hit.
            p (Vector3): The hit point, for solid textures.

        Returns:
            Color: The texture color at (u, v, p).
        """
        return self.texture.color_value(p, u, v)
