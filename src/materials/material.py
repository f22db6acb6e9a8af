# materials/material.py
from typing import Optional, Tuple
from core.ray import Ray
from core.vector import Color, Vector3
from geometry.hittable import HitRecord
from materials.textures import Texture

BLACK = Color(0.0, 0.0, 0.0)


class Material:
    """
    Abstract material class. Subclasses must implement scatter(); emissive
    materials also override emitted().
    """
    def __init__(self, texture: Optional[Texture] = None):
        self.texture = texture

    def scatter(self, ray_in: Ray, rec: HitRecord) -> Optional[Tuple[Ray, Color]]:
        """
        Computes the scattered ray and attenuation.
        Returns a tuple (scattered_ray, attenuation) or None if the ray is absorbed.
        """
        raise NotImplementedError("scatter() must be implemented by subclasses.")

    def emitted(self, u: float, v: float, p: Vector3) -> Color:
        """
        Radiance emitted at the surface point; black for non-emissive materials.
        """
        return BLACK

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.texture!r})"
