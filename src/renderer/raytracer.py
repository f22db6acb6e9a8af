# renderer/raytracer.py
import logging
import time
from concurrent.futures import Executor, ProcessPoolExecutor, ThreadPoolExecutor, as_completed
from typing import Optional

import numpy as np

from camera.camera import Camera
from core.utils import seed_rng
from core.vector import Color
from geometry.hittable import Hittable
from renderer.integrator import ray_color
from renderer.settings import RenderSettings
from renderer.tone_mapping import gamma_correct

logger = logging.getLogger(__name__)

# Per-process scene state installed by the pool initializer.
_worker_scene = None


def render_scanline(world: Hittable, camera: Camera, background: Color,
                    settings: RenderSettings, j: int,
                    seed: Optional[np.random.SeedSequence] = None) -> np.ndarray:
    """
    Sums `samples_per_pixel` radiance samples for every pixel of image row
    `j` (0 is the bottom row). The calling thread's generator is reseeded
    from `seed` first, so a row's noise depends only on its own seed.

    Returns:
        (width, 3) float64 array of radiance sums, left to right.
    """
    generator = seed_rng(seed)
    width, height = settings.width, settings.height
    row = np.zeros((width, 3), dtype=np.float64)
    for i in range(width):
        pixel_color = Color(0.0, 0.0, 0.0)
        for _ in range(settings.samples_per_pixel):
            du, dv = generator.random(2)
            u = (i + du) / (width - 1)
            v = (j + dv) / (height - 1)
            ray = camera.get_ray(u, v)
            pixel_color = pixel_color + ray_color(ray, world, background, settings.max_depth)
        row[i] = (pixel_color.x, pixel_color.y, pixel_color.z)
    return row


def _init_worker(world, camera, background, settings):
    global _worker_scene
    _worker_scene = (world, camera, background, settings)


def _render_scanline_task(j: int, seed: np.random.SeedSequence):
    world, camera, background, settings = _worker_scene
    return j, render_scanline(world, camera, background, settings, j, seed)


class Renderer:
    """
    Renders a scene scanline by scanline, optionally on a pool of worker
    processes or threads.

    The scene and camera are only read during a render, so every worker
    shares (or receives one copy of) them without locking. Each scanline
    gets its own child of a root SeedSequence, which makes a seeded render
    reproducible whatever the backend and worker count.
    """
    def __init__(self, settings: RenderSettings):
        self.settings = settings
        self.width = settings.width
        self.height = settings.height

    def render(self, world: Hittable, camera: Camera, background: Color) -> np.ndarray:
        """
        Returns the (height, width, 3) array of per-pixel radiance sums,
        rows top to bottom.
        """
        settings = self.settings
        seeds = np.random.SeedSequence(settings.seed).spawn(self.height)
        accumulated = np.zeros((self.height, self.width, 3), dtype=np.float64)

        logger.info("Rendering %dx%d, %d samples/pixel, depth %d, %d %s worker(s)",
                    self.width, self.height, settings.samples_per_pixel,
                    settings.max_depth, settings.workers, settings.backend)
        start = time.perf_counter()

        if settings.workers == 1:
            for done, j in enumerate(reversed(range(self.height)), start=1):
                accumulated[self.height - 1 - j] = render_scanline(
                    world, camera, background, settings, j, seeds[j])
                self._report_progress(done)
        else:
            with self._make_executor(world, camera, background) as executor:
                futures = self._submit_all(executor, world, camera, background, seeds)
                for done, future in enumerate(as_completed(futures), start=1):
                    j, row = future.result()
                    accumulated[self.height - 1 - j] = row
                    self._report_progress(done)

        logger.info("Render finished in %.2fs", time.perf_counter() - start)
        return accumulated

    def render_image(self, world: Hittable, camera: Camera, background: Color) -> np.ndarray:
        """Renders and converts to a gamma-corrected (height, width, 3) uint8 image."""
        return gamma_correct(self.render(world, camera, background),
                             self.settings.samples_per_pixel)

    def _make_executor(self, world, camera, background) -> Executor:
        if self.settings.backend == "thread":
            return ThreadPoolExecutor(max_workers=self.settings.workers)
        return ProcessPoolExecutor(max_workers=self.settings.workers,
                                   initializer=_init_worker,
                                   initargs=(world, camera, background, self.settings))

    def _submit_all(self, executor, world, camera, background, seeds):
        rows = reversed(range(self.height))
        if self.settings.backend == "thread":
            return [executor.submit(self._thread_task, world, camera, background, j, seeds[j])
                    for j in rows]
        return [executor.submit(_render_scanline_task, j, seeds[j]) for j in rows]

    def _thread_task(self, world, camera, background, j, seed):
        return j, render_scanline(world, camera, background, self.settings, j, seed)

    def _report_progress(self, done: int):
        logger.debug("Scanlines remaining: %d", self.height - done)
        step = max(1, self.height // 10)
        if done % step == 0 or done == self.height:
            logger.info("Progress: %d/%d scanlines (%.0f%%)",
                        done, self.height, 100.0 * done / self.height)
