# renderer/settings.py
import os
from dataclasses import dataclass
from typing import Optional

BACKENDS = ("process", "thread")


@dataclass(frozen=True)
class RenderSettings:
    width: int = 400
    aspect_ratio: float = 16.0 / 9.0
    samples_per_pixel: int = 100
    max_depth: int = 50
    workers: int = 1
    backend: str = "process"
    seed: Optional[int] = None

    def __post_init__(self):
        if self.width <= 0:
            raise ValueError(f"width must be positive, got {self.width}")
        if self.aspect_ratio <= 0:
            raise ValueError(f"aspect_ratio must be positive, got {self.aspect_ratio}")
        if self.samples_per_pixel <= 0:
            raise ValueError(f"samples_per_pixel must be positive, got {self.samples_per_pixel}")
        if self.max_depth <= 0:
            raise ValueError(f"max_depth must be positive, got {self.max_depth}")
        if self.workers <= 0:
            raise ValueError(f"workers must be positive, got {self.workers}")
        if self.backend not in BACKENDS:
            raise ValueError(f"backend must be one of {BACKENDS}, got {self.backend!r}")
        if self.height <= 1 or self.width <= 1:
            raise ValueError(f"image must be at least 2x2, got {self.width}x{self.height}")

    @property
    def height(self) -> int:
        return int(self.width / self.aspect_ratio)

    @staticmethod
    def default_workers() -> int:
        return os.cpu_count() or 1
