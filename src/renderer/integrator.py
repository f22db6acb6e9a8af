# renderer/integrator.py
import math
from core.ray import Ray
from core.vector import Color
from geometry.hittable import Hittable

# Lower bound of the hit search; keeps a scattered ray from re-hitting the
# surface it leaves (shadow acne).
T_MIN = 0.001

BLACK = Color(0.0, 0.0, 0.0)


def ray_color(ray: Ray, world: Hittable, background: Color, depth: int) -> Color:
    """
    Single-sample Monte Carlo estimate of the radiance arriving along `ray`.

    Args:
        ray: The ray to trace, in world space.
        world: Scene root (a BVHNode or a HittableList).
        background: Radiance returned by rays that escape the scene.
        depth: Remaining bounce budget; no light is gathered once it runs out.

    Returns:
        The emitted radiance at the first hit plus the attenuated radiance
        of the scattered ray, or `background` if nothing is hit.
    """
    if depth <= 0:
        return BLACK

    rec = world.hit(ray, T_MIN, math.inf)
    if rec is None:
        return background

    emitted = rec.material.emitted(rec.u, rec.v, rec.p)
    scatter = rec.material.scatter(ray, rec)
    if scatter is None:
        return emitted

    scattered, attenuation = scatter
    return emitted + attenuation * ray_color(scattered, world, background, depth - 1)
