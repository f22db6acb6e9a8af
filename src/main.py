# main.py
import argparse
import logging
import sys
import time
from typing import Optional, Sequence

from camera.camera import Camera
from core.utils import seed_rng
from renderer.image_io import save_image
from renderer.raytracer import Renderer
from renderer.settings import BACKENDS, RenderSettings
from scenes.library import SCENES, get_scene

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger("pathtracer")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pathtracer",
        description="Offline Monte Carlo path tracer")
    parser.add_argument("--scene", choices=sorted(SCENES), default="random_spheres",
                        help="built-in scene to render")
    parser.add_argument("--width", "-w", type=int, default=400,
                        help="image width in pixels; height follows the aspect ratio")
    parser.add_argument("--aspect-ratio", type=float, default=None,
                        help="override the scene's aspect ratio")
    parser.add_argument("--samples", "-s", type=int, default=100,
                        help="samples per pixel")
    parser.add_argument("--depth", "-d", type=int, default=50,
                        help="maximum bounces per path")
    parser.add_argument("--workers", "-j", type=int, default=RenderSettings.default_workers(),
                        help="number of parallel workers (1 renders inline)")
    parser.add_argument("--backend", choices=BACKENDS, default="process",
                        help="worker pool type")
    parser.add_argument("--seed", type=int, default=None,
                        help="seed for a reproducible render")
    parser.add_argument("--output", "-o", default="image.ppm",
                        help="output file; .ppm is written as text, other extensions via Pillow")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="logging verbosity")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level), format=LOG_FORMAT)

    # Scene builders draw from the main thread's generator.
    seed_rng(args.seed)
    try:
        scene = get_scene(args.scene)
    except KeyError as e:
        parser.error(str(e.args[0]))

    aspect_ratio = args.aspect_ratio or scene.camera.aspect_ratio
    try:
        settings = RenderSettings(
            width=args.width,
            aspect_ratio=aspect_ratio,
            samples_per_pixel=args.samples,
            max_depth=args.depth,
            workers=args.workers,
            backend=args.backend,
            seed=args.seed,
        )
    except ValueError as e:
        parser.error(str(e))

    camera = Camera(scene.camera.with_changes(aspect_ratio=settings.aspect_ratio))

    start = time.perf_counter()
    world = scene.build_bvh()
    logger.info("BVH built in %.2fs", time.perf_counter() - start)

    pixels = Renderer(settings).render_image(world, camera, scene.background)
    save_image(pixels, args.output)
    logger.info("Done in %.2fs", time.perf_counter() - start)
    return 0


if __name__ == "__main__":
    sys.exit(main())
