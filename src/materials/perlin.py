# materials/perlin.py
import math
from typing import Optional

import numpy as np

from core.utils import rng
from core.vector import Vector3

POINT_COUNT = 256


class Perlin:
    """
    Gradient (Perlin) noise over 3-D space.

    Lattice corners get one of POINT_COUNT random unit vectors through three
    hashed permutation tables; the noise value is the Hermite-smoothed
    trilinear blend of the corner gradients dotted with the offsets.
    """
    def __init__(self, seed: Optional[int] = None):
        # Unseeded tables come from the calling thread's generator.
        generator = rng() if seed is None else np.random.default_rng(seed)
        vectors = generator.uniform(-1.0, 1.0, (POINT_COUNT, 3))
        vectors /= np.linalg.norm(vectors, axis=1, keepdims=True)
        self.ranvec = vectors
        self.perm_x = generator.permutation(POINT_COUNT)
        self.perm_y = generator.permutation(POINT_COUNT)
        self.perm_z = generator.permutation(POINT_COUNT)

    def noise(self, p: Vector3) -> float:
        fx, fy, fz = math.floor(p.x), math.floor(p.y), math.floor(p.z)
        u = p.x - fx
        v = p.y - fy
        w = p.z - fz
        i, j, k = int(fx), int(fy), int(fz)

        uu = u * u * (3 - 2 * u)
        vv = v * v * (3 - 2 * v)
        ww = w * w * (3 - 2 * w)

        mask = POINT_COUNT - 1
        accum = 0.0
        for di in (0, 1):
            for dj in (0, 1):
                for dk in (0, 1):
                    index = (self.perm_x[(i + di) & mask]
                             ^ self.perm_y[(j + dj) & mask]
                             ^ self.perm_z[(k + dk) & mask])
                    gx, gy, gz = self.ranvec[index]
                    weight = gx * (u - di) + gy * (v - dj) + gz * (w - dk)
                    accum += ((di * uu + (1 - di) * (1 - uu))
                              * (dj * vv + (1 - dj) * (1 - vv))
                              * (dk * ww + (1 - dk) * (1 - ww))
                              * weight)
        return float(accum)

    def turb(self, p: Vector3, depth: int = 7) -> float:
        """Sum of `depth` octaves of noise, each at double frequency and half weight."""
        accum = 0.0
        temp_p = p
        weight = 1.0
        for _ in range(depth):
            accum += weight * self.noise(temp_p)
            weight *= 0.5
            temp_p = temp_p * 2.0
        return abs(accum)
