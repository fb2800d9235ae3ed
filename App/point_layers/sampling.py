"""Brightness sampling of an image into point layers.

AIDEV-NOTE: The image is sampled on a fixed pixel grid. Each sample lands
in exactly one of N layers chosen from its luminance, so the layers always
partition the sampled pixels.
"""

import logging
import math

import numpy as np
from PIL import Image

from models import Layer, Point

from .utils import image_to_rgba_array, luminance, pixel_to_mm

logger = logging.getLogger(__name__)


def layer_index_for(brightness: float, num_layers: int) -> int:
    """Layer index for a luminance value.

    Layer k holds brightness in [k/N * 255, (k+1)/N * 255); 255 itself
    belongs to the last layer.
    """
    index = math.floor(brightness * num_layers / 255.0)
    return min(max(index, 0), num_layers - 1)


def layer_band(index: int, num_layers: int) -> "tuple[float, float]":
    """Nominal (min, max) brightness of a layer's band."""
    return index / num_layers * 255.0, (index + 1) / num_layers * 255.0


def sample_layers(
    image: "Image.Image | np.ndarray",
    grid_size: int,
    num_layers: int,
    plot_width: float,
    plot_height: float,
) -> "list[Layer]":
    """Sample an image into brightness layers.

    Args:
        image: Image buffer (PIL image or RGB/RGBA array)
        grid_size: Pixels between samples along each axis (>= 1)
        num_layers: Number of brightness layers (>= 1)
        plot_width: Target sheet width in mm
        plot_height: Target sheet height in mm

    Returns:
        Exactly num_layers layers, points in row-major sampling order

    Raises:
        ValueError: On a non-positive grid size or layer count, or an
            empty image
    """
    if grid_size < 1:
        raise ValueError(f"Grid size must be at least 1, got {grid_size}")
    if num_layers < 1:
        raise ValueError(f"Layer count must be at least 1, got {num_layers}")

    pixels = image_to_rgba_array(image)
    height, width = pixels.shape[:2]
    if width == 0 or height == 0:
        raise ValueError("Image has no pixels")

    # Row-major grid: first sample of every row is x=0
    samples = pixels[::grid_size, ::grid_size]
    brightness = luminance(samples)

    layers = [Layer(index=i) for i in range(num_layers)]

    for row, y in enumerate(range(0, height, grid_size)):
        for col, x in enumerate(range(0, width, grid_size)):
            value = float(brightness[row, col])
            mm_x, mm_y = pixel_to_mm(x, y, width, height, plot_width, plot_height)
            layers[layer_index_for(value, num_layers)].points.append(
                Point(x=mm_x, y=mm_y, brightness=value)
            )

    logger.debug(
        "Sampled %dx%d image on a %d px grid: %s",
        width,
        height,
        grid_size,
        ", ".join(f"layer {layer.number}={len(layer)}" for layer in layers),
    )
    return layers
