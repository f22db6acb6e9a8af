# renderer/tone_mapping.py
import numpy as np
from numba import njit


@njit
def _gamma2_quantize(accumulated, samples, output):
    height, width, channels = accumulated.shape
    for j in range(height):
        for i in range(width):
            for c in range(channels):
                value = accumulated[j, i, c] / samples
                # NaN from a degenerate path counts as black
                if not value > 0.0:
                    value = 0.0
                value = np.sqrt(value)
                if value > 0.999:
                    value = 0.999
                output[j, i, c] = np.uint8(256.0 * value)


def gamma_correct(accumulated: np.ndarray, samples_per_pixel: int) -> np.ndarray:
    """
    Converts summed linear radiance to 8-bit channels.

    Each channel is averaged over the samples, gamma-corrected with gamma 2
    (a square root), clamped to [0, 0.999] and scaled by 256, so every value
    in [0, 1) maps onto 0..255 with equal-width buckets.

    Args:
        accumulated: (height, width, 3) float array of per-pixel radiance sums.
        samples_per_pixel: Number of samples summed into each pixel.

    Returns:
        (height, width, 3) uint8 array in the same row order.
    """
    accumulated = np.ascontiguousarray(accumulated, dtype=np.float64)
    output = np.empty(accumulated.shape, dtype=np.uint8)
    _gamma2_quantize(accumulated, float(samples_per_pixel), output)
    return output

