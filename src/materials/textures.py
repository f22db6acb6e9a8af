# materials/textures.py
import logging
import math
from typing import Optional, Union

import numpy as np
from PIL import Image

from core.vector import Color, Vector3
from materials.perlin import Perlin

logger = logging.getLogger(__name__)

# Returned by an image texture whose file could not be loaded.
MISSING_TEXTURE_COLOR = Color(0.0, 1.0, 1.0)


class Texture:
    """Base class for all textures: a pure function of (point, u, v) to color."""
    def color_value(self, p: Vector3, u: float, v: float) -> Color:
        raise NotImplementedError("color_value() must be implemented by texture subclasses.")


class SolidColor(Texture):
    """A solid color texture."""
    def __init__(self, color: Color):
        self.color = color

    def color_value(self, p: Vector3, u: float, v: float) -> Color:
        return self.color

    def __repr__(self) -> str:
        return f"SolidColor({self.color!r})"


def as_texture(value: Union[Color, Texture]) -> Texture:
    """Wraps a plain color in a SolidColor; textures pass through."""
    if isinstance(value, Vector3):
        return SolidColor(value)
    return value


class CheckerTexture(Texture):
    """
    A 3-D checker pattern alternating between two textures, decided by the
    sign of sin(scale x) sin(scale y) sin(scale z) at the hit point.
    """
    def __init__(self, even: Union[Color, Texture], odd: Union[Color, Texture], scale: float = 10.0):
        self.even = as_texture(even)
        self.odd = as_texture(odd)
        self.scale = scale

    def color_value(self, p: Vector3, u: float, v: float) -> Color:
        sines = (math.sin(self.scale * p.x)
                 * math.sin(self.scale * p.y)
                 * math.sin(self.scale * p.z))
        if sines < 0:
            return self.odd.color_value(p, u, v)
        return self.even.color_value(p, u, v)


class NoiseTexture(Texture):
    """A marble-like texture: a sine wave along z phase-shifted by Perlin turbulence."""
    def __init__(self, scale: float = 1.0, noise: Optional[Perlin] = None):
        self.noise = noise if noise is not None else Perlin()
        self.scale = scale

    def color_value(self, p: Vector3, u: float, v: float) -> Color:
        value = 0.5 * (1.0 + math.sin(self.scale * p.z + 10.0 * self.noise.turb(p)))
        return Color(value, value, value)


class ImageTexture(Texture):
    """
    A texture from an image file, addressed by (u, v) with v = 0 at the
    bottom row.

    An unreadable file is not an error: the texture evaluates to solid cyan
    so the problem is visible in the render.
    """
    def __init__(self, image_path: Optional[str] = None, data: Optional[np.ndarray] = None):
        self.image_path = image_path
        self.data = None
        if data is not None:
            self.data = np.asarray(data, dtype=np.float64)
        elif image_path is not None:
            try:
                with Image.open(image_path) as img:
                    # Normalize to [0,1]
                    self.data = np.asarray(img.convert("RGB"), dtype=np.float64) / 255.0
            except OSError as e:
                logger.warning("Could not load texture image %s: %s", image_path, e)
        if self.data is not None:
            self.height, self.width = self.data.shape[:2]
        else:
            self.width = self.height = 0

    @property
    def is_loaded(self) -> bool:
        return self.data is not None and self.width > 0 and self.height > 0

    def color_value(self, p: Vector3, u: float, v: float) -> Color:
        if not self.is_loaded:
            return MISSING_TEXTURE_COLOR

        # Clamp to [0,1], flip v to image row order
        u = min(max(u, 0.0), 1.0)
        v = 1.0 - min(max(v, 0.0), 1.0)

        i = min(int(u * self.width), self.width - 1)
        j = min(int(v * self.height), self.height - 1)

        r, g, b = self.data[j, i, :3]
        return Color(r, g, b)

    def __repr__(self) -> str:
        return f"ImageTexture({self.image_path!r}, {self.width}x{self.height})"
