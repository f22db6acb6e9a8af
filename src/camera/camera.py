# camera/camera.py
import math
from dataclasses import dataclass, field, replace
from core.vector import Vector3
from core.ray import Ray
from core.utils import random_in_unit_disk, rng


@dataclass(frozen=True)
class CameraOptions:
    """Placement and lens parameters; scenes override what they need."""
    lookfrom: Vector3 = field(default_factory=lambda: Vector3(13.0, 2.0, 3.0))
    lookat: Vector3 = field(default_factory=lambda: Vector3(0.0, 0.0, 0.0))
    vup: Vector3 = field(default_factory=lambda: Vector3(0.0, 1.0, 0.0))
    vfov: float = 20.0  # vertical field of view, degrees
    aspect_ratio: float = 16.0 / 9.0
    aperture: float = 0.0
    focus_dist: float = 10.0
    time0: float = 0.0  # shutter open
    time1: float = 1.0  # shutter close

    def with_changes(self, **changes) -> "CameraOptions":
        return replace(self, **changes)


class Camera:
    """
    Look-at camera with a thin lens (defocus blur) and a shutter interval
    (motion blur).
    """
    def __init__(self, options: CameraOptions = CameraOptions()):
        self.options = options
        self.update_camera()

    def update_camera(self):
        """Updates the camera's basis vectors and viewport."""
        o = self.options
        theta = math.radians(o.vfov)
        viewport_height = 2.0 * math.tan(theta / 2)
        viewport_width = o.aspect_ratio * viewport_height

        self.w = (o.lookfrom - o.lookat).normalize()
        self.u = o.vup.cross(self.w).normalize()
        self.v = self.w.cross(self.u)

        self.origin = o.lookfrom
        # Scale by focus distance
        self.horizontal = self.u * (viewport_width * o.focus_dist)
        self.vertical = self.v * (viewport_height * o.focus_dist)
        self.lower_left_corner = (self.origin
                                  - self.horizontal * 0.5
                                  - self.vertical * 0.5
                                  - self.w * o.focus_dist)
        self.lens_radius = o.aperture / 2.0
        self.time0 = o.time0
        self.time1 = o.time1

    def get_ray(self, s: float, t: float) -> Ray:
        """
        Generates the ray through normalized image coordinates (s, t),
        (0, 0) being the lower-left corner, at a random shutter time.
        """
        if self.lens_radius > 0:
            rd = random_in_unit_disk() * self.lens_radius
            offset = self.u * rd.x + self.v * rd.y
        else:
            offset = Vector3(0.0, 0.0, 0.0)

        ray_origin = self.origin + offset
        ray_direction = (self.lower_left_corner
                         + self.horizontal * s
                         + self.vertical * t
                         - ray_origin)
        if self.time1 > self.time0:
            time = rng().uniform(self.time0, self.time1)
        else:
            time = self.time0
        return Ray(ray_origin, ray_direction, time)
