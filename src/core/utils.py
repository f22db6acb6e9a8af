# core/utils.py
import math
import threading
from typing import Optional, Union

import numpy as np

from core.vector import Vector3

_local = threading.local()


def rng() -> np.random.Generator:
    """
    Returns the random generator owned by the calling thread.

    A thread that never called seed_rng() lazily gets a generator seeded from
    fresh OS entropy, so no two workers ever share generator state.
    """
    generator = getattr(_local, "generator", None)
    if generator is None:
        generator = np.random.default_rng()
        _local.generator = generator
    return generator


def seed_rng(seed: Optional[Union[int, np.random.SeedSequence]] = None) -> np.random.Generator:
    """
    Replaces the calling thread's generator with one seeded from `seed`.
    """
    _local.generator = np.random.default_rng(seed)
    return _local.generator


def random_double(low: float = 0.0, high: float = 1.0) -> float:
    return low + (high - low) * rng().random()


def random_color(low: float = 0.0, high: float = 1.0) -> Vector3:
    return Vector3(random_double(low, high),
                   random_double(low, high),
                   random_double(low, high))


def random_in_unit_sphere() -> Vector3:
    """
    Returns a random point inside a unit sphere.
    """
    generator = rng()
    while True:
        x, y, z = generator.uniform(-1.0, 1.0, 3)
        p = Vector3(x, y, z)
        if p.length_squared() < 1.0:
            return p


def random_unit_vector() -> Vector3:
    """
    Returns a random unit vector (uniformly distributed over the sphere).
    """
    return random_in_unit_sphere().normalize()


def random_in_unit_disk() -> Vector3:
    """
    Returns a random point inside the unit disk in the xy-plane.
    """
    generator = rng()
    while True:
        x, y = generator.uniform(-1.0, 1.0, 2)
        if x * x + y * y < 1.0:
            return Vector3(x, y, 0.0)


def reflect(v: Vector3, n: Vector3) -> Vector3:
    """
    Reflects vector v about the normal n.
    """
    return v - n * 2 * v.dot(n)


def refract(uv: Vector3, n: Vector3, etai_over_etat: float) -> Vector3:
    """
    Refracts the unit vector uv through a surface with unit normal n.

    The caller is responsible for ruling out total internal reflection.
    """
    cos_theta = min(-uv.dot(n), 1.0)
    r_out_perp = (uv + n * cos_theta) * etai_over_etat
    r_out_parallel = n * (-math.sqrt(abs(1.0 - r_out_perp.length_squared())))
    return r_out_perp + r_out_parallel


def schlick(cosine: float, ref_idx: float) -> float:
    """
    Schlick's approximation of the Fresnel reflectance.
    """
    r0 = (1.0 - ref_idx) / (1.0 + ref_idx)
    r0 = r0 * r0
    return r0 + (1.0 - r0) * math.pow((1.0 - cosine), 5)
