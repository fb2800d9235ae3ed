"""Pixel-remapping filters.

AIDEV-NOTE: The spiral filter rotates every pixel around the image centre
by an angle that grows with its distance from the centre. Sampling reads
from the untouched source so results do not depend on visiting order.
"""

import numpy as np
from PIL import Image

from .utils import image_to_rgba_array


def apply_spiral_filter(image: "Image.Image | np.ndarray") -> Image.Image:
    """Apply the spiral effect.

    Args:
        image: Source image buffer

    Returns:
        New RGBA image of the same size. Pixels whose spiral sample falls
        outside the image keep their color; alpha is never changed.
    """
    source = image_to_rgba_array(image)
    height, width = source.shape[:2]
    result = source.copy()
    if width == 0 or height == 0:
        return Image.fromarray(result)

    center_x = width / 2
    center_y = height / 2

    ys, xs = np.mgrid[0:height, 0:width].astype(np.float64)
    dx = xs - center_x
    dy = ys - center_y
    distance = np.hypot(dx, dy)
    angle = np.arctan2(dy, dx)

    spiral_factor = (distance / max(center_x, center_y)) * 2
    spiral_angle = angle + spiral_factor * np.pi * 2

    sample_x = np.floor(center_x + np.cos(spiral_angle) * distance).astype(np.int64)
    sample_y = np.floor(center_y + np.sin(spiral_angle) * distance).astype(np.int64)

    inside = (
        (sample_x >= 0) & (sample_x < width) & (sample_y >= 0) & (sample_y < height)
    )
    result[inside, :3] = source[sample_y[inside], sample_x[inside], :3]

    return Image.fromarray(result)
