# scenes/library.py
import logging
from dataclasses import dataclass, field
from typing import Callable, Dict

from camera.camera import CameraOptions
from core.utils import random_color, random_double
from core.vector import Color, Vector3
from geometry.bvh import BVHNode
from geometry.cuboid import Cuboid
from geometry.medium import ConstantMedium
from geometry.rectangle import XYRectangle, XZRectangle, YZRectangle
from geometry.rotate import RotateY
from geometry.sphere import Sphere
from geometry.translate import Translate
from geometry.world import HittableList
from materials.dielectric import Dielectric
from materials.diffuse_light import DiffuseLight
from materials.lambertian import Lambertian
from materials.metal import Metal
from materials.perlin import Perlin
from materials.textures import CheckerTexture, ImageTexture, NoiseTexture

logger = logging.getLogger(__name__)

SKY_BLUE = Color(0.70, 0.80, 1.00)
BLACK = Color(0.0, 0.0, 0.0)

EARTH_TEXTURE = "images/earthmap.jpg"


@dataclass
class Scene:
    """A world, where to look at it from, and the radiance of escaping rays."""
    name: str
    world: HittableList
    camera: CameraOptions = field(default_factory=CameraOptions)
    background: Color = SKY_BLUE

    def build_bvh(self) -> BVHNode:
        return self.world.build_bvh(self.camera.time0, self.camera.time1)


def random_spheres() -> Scene:
    """
    The book-cover scene: a checkered ground, three large spheres and a
    22x22 grid of small random ones (the diffuse ones bounce during the
    shutter interval).
    """
    world = HittableList()
    checker = CheckerTexture(Color(0.2, 0.3, 0.1), Color(0.9, 0.9, 0.9))
    world.add(Sphere(Vector3(0, -1000, 0), 1000, Lambertian(checker)))

    for a in range(-11, 12):
        for b in range(-11, 12):
            choose_mat = random_double()
            center = Vector3(a + random_double(0.0, 0.9), 0.2, b + random_double(0.0, 0.9))

            if choose_mat < 0.8:
                # diffuse
                albedo = random_color() * random_color()
                center1 = center + Vector3(0, random_double(0.0, 0.5), 0)
                world.add(Sphere.moving(center, center1, 0.0, 1.0, 0.2, Lambertian(albedo)))
            elif choose_mat < 0.95:
                # metal
                albedo = random_color(0.4, 1.0)
                fuzz = random_double(0.0, 0.5)
                world.add(Sphere(center, 0.2, Metal(albedo, fuzz)))
            else:
                # glass
                world.add(Sphere(center, 0.2, Dielectric(1.5)))

    world.add(Sphere(Vector3(0, 1, 0), 1.0, Dielectric(1.5)))
    world.add(Sphere(Vector3(-4, 1, 0), 1.0, Lambertian(Color(0.4, 0.2, 0.1))))
    world.add(Sphere(Vector3(4, 1, 0), 1.0, Metal(Color(0.7, 0.6, 0.5), 0.0)))

    return Scene("random_spheres", world, CameraOptions(aperture=0.1))


def two_spheres() -> Scene:
    checker = CheckerTexture(Color(0.2, 0.3, 0.1), Color(0.9, 0.9, 0.9))
    world = HittableList([
        Sphere(Vector3(0, -10, 0), 10, Lambertian(checker)),
        Sphere(Vector3(0, 10, 0), 10, Lambertian(checker)),
    ])
    return Scene("two_spheres", world)


def two_perlin_spheres() -> Scene:
    marble = Lambertian(NoiseTexture(4.0, Perlin()))
    world = HittableList([
        Sphere(Vector3(0, -1000, 0), 1000, marble),
        Sphere(Vector3(0, 2, 0), 2, marble),
    ])
    return Scene("two_perlin_spheres", world)


def earth(image_path: str = EARTH_TEXTURE) -> Scene:
    globe = Sphere(Vector3(0, 0, 0), 2, Lambertian(ImageTexture(image_path)))
    return Scene("earth", HittableList([globe]))


def simple_light() -> Scene:
    marble = Lambertian(NoiseTexture(4.0, Perlin()))
    light = DiffuseLight(Color(4, 4, 4))
    world = HittableList([
        Sphere(Vector3(0, -1000, 0), 1000, marble),
        Sphere(Vector3(0, 2, 0), 2, marble),
        XYRectangle(3, 5, 1, 3, -2, light),
    ])
    camera = CameraOptions(lookfrom=Vector3(26, 3, 6), lookat=Vector3(0, 2, 0))
    return Scene("simple_light", world, camera, BLACK)


def _cornell_room(light_intensity: float, light_extent) -> HittableList:
    red = Lambertian(Color(0.65, 0.05, 0.05))
    white = Lambertian(Color(0.73, 0.73, 0.73))
    green = Lambertian(Color(0.12, 0.45, 0.15))
    light = DiffuseLight(Color(light_intensity, light_intensity, light_intensity))

    x0, x1, z0, z1 = light_extent
    return HittableList([
        YZRectangle(0, 555, 0, 555, 555, green),
        YZRectangle(0, 555, 0, 555, 0, red),
        XZRectangle(x0, x1, z0, z1, 554, light),
        XZRectangle(0, 555, 0, 555, 0, white),
        XZRectangle(0, 555, 0, 555, 555, white),
        XYRectangle(0, 555, 0, 555, 555, white),
    ])


def _cornell_boxes():
    white = Lambertian(Color(0.73, 0.73, 0.73))
    tall = Cuboid(Vector3(0, 0, 0), Vector3(165, 330, 165), white)
    tall = Translate(RotateY(tall, 15), Vector3(265, 0, 295))
    short = Cuboid(Vector3(0, 0, 0), Vector3(165, 165, 165), white)
    short = Translate(RotateY(short, -18), Vector3(130, 0, 65))
    return tall, short


CORNELL_CAMERA = CameraOptions(
    lookfrom=Vector3(278, 278, -800),
    lookat=Vector3(278, 278, 0),
    vfov=40.0,
    aspect_ratio=1.0,
)


def cornell_box() -> Scene:
    world = _cornell_room(15.0, (213, 343, 227, 332))
    for box in _cornell_boxes():
        world.add(box)
    return Scene("cornell_box", world, CORNELL_CAMERA, BLACK)


def cornell_smoke() -> Scene:
    world = _cornell_room(7.0, (113, 443, 127, 432))
    tall, short = _cornell_boxes()
    world.add(ConstantMedium(tall, 0.01, Color(0, 0, 0)))
    world.add(ConstantMedium(short, 0.01, Color(1, 1, 1)))
    return Scene("cornell_smoke", world, CORNELL_CAMERA, BLACK)


def final_scene(image_path: str = EARTH_TEXTURE) -> Scene:
    """
    Everything at once: a field of random-height boxes, a moving sphere,
    glass, metal, a subsurface-looking glass ball filled with blue fog, a
    thin global mist, the earth, marble and a rotated cluster of spheres.
    """
    ground = Lambertian(Color(0.48, 0.83, 0.53))
    boxes = []
    boxes_per_side = 20
    w = 100.0
    for i in range(boxes_per_side):
        for j in range(boxes_per_side):
            x0 = -1000.0 + i * w
            z0 = -1000.0 + j * w
            y1 = random_double(1.0, 101.0)
            boxes.append(Cuboid(Vector3(x0, 0.0, z0), Vector3(x0 + w, y1, z0 + w), ground))

    world = HittableList()
    world.add(BVHNode(boxes, 0.0, 1.0))
    world.add(XZRectangle(123, 423, 147, 412, 554, DiffuseLight(Color(7, 7, 7))))

    center0 = Vector3(400, 400, 200)
    center1 = center0 + Vector3(30, 0, 0)
    world.add(Sphere.moving(center0, center1, 0.0, 1.0, 50, Lambertian(Color(0.7, 0.3, 0.1))))

    world.add(Sphere(Vector3(260, 150, 45), 50, Dielectric(1.5)))
    world.add(Sphere(Vector3(0, 150, 145), 50, Metal(Color(0.8, 0.8, 0.9), 1.0)))

    boundary = Sphere(Vector3(360, 150, 145), 70, Dielectric(1.5))
    world.add(boundary)
    world.add(ConstantMedium(boundary, 0.2, Color(0.2, 0.4, 0.9)))
    mist = Sphere(Vector3(0, 0, 0), 5000, Dielectric(1.5))
    world.add(ConstantMedium(mist, 0.0001, Color(1, 1, 1)))

    world.add(Sphere(Vector3(400, 200, 400), 100, Lambertian(ImageTexture(image_path))))
    world.add(Sphere(Vector3(220, 280, 300), 80, Lambertian(NoiseTexture(0.1, Perlin()))))

    white = Lambertian(Color(0.73, 0.73, 0.73))
    cluster = [Sphere(random_color(0.0, 165.0), 10, white) for _ in range(1000)]
    world.add(Translate(RotateY(BVHNode(cluster, 0.0, 1.0), 15), Vector3(-100, 270, 395)))

    camera = CORNELL_CAMERA.with_changes(lookfrom=Vector3(478, 278, -600))
    return Scene("final_scene", world, camera, BLACK)


SCENES: Dict[str, Callable[[], Scene]] = {
    "random_spheres": random_spheres,
    "two_spheres": two_spheres,
    "two_perlin_spheres": two_perlin_spheres,
    "earth": earth,
    "simple_light": simple_light,
    "cornell_box": cornell_box,
    "cornell_smoke": cornell_smoke,
    "final_scene": final_scene,
}


def get_scene(name: str) -> Scene:
    """
    Builds the named scene.

    Raises:
        KeyError: If no scene has that name.
    """
    try:
        builder = SCENES[name]
    except KeyError:
        raise KeyError(f"Unknown scene {name!r}; available: {', '.join(sorted(SCENES))}") from None
    scene = builder()
    logger.info("Built scene %r with %d top-level objects", name, len(scene.world))
    return scene
