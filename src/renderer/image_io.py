# renderer/image_io.py
import logging
from pathlib import Path
from typing import TextIO, Union

import numpy as np
from PIL import Image

logger = logging.getLogger(__name__)


def write_ppm(stream: TextIO, pixels: np.ndarray):
    """
    Writes an 8-bit (height, width, 3) image as plain-text PPM (P3), rows
    top to bottom and columns left to right.
    """
    height, width = pixels.shape[:2]
    stream.write(f"P3\n{width} {height}\n255\n")
    for row in pixels:
        for r, g, b in row:
            stream.write(f"{r} {g} {b}\n")


def save_image(pixels: np.ndarray, path: Union[str, Path]) -> Path:
    """
    Saves an 8-bit image. `.ppm` files are written as plain-text P3; any other
    extension is handed to Pillow.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    if path.suffix.lower() == ".ppm":
        with path.open("w", encoding="ascii") as f:
            write_ppm(f, pixels)
    else:
        Image.fromarray(np.ascontiguousarray(pixels, dtype=np.uint8)).save(path)
    logger.info("Wrote %dx%d image to %s", pixels.shape[1], pixels.shape[0], path)
    return path
