"""Utility functions for image loading and coordinate transformations.

AIDEV-NOTE: Helpers shared by the sampler, the filter and the UI. Pixel
buffers are handled as numpy arrays of shape (height, width, 4), RGBA.
"""

from pathlib import Path

import numpy as np
from PIL import Image

from models import PREVIEW_CHAR_LIMIT

# ITU-R BT.601 luma weights
LUMA_WEIGHTS = (0.299, 0.587, 0.114)


def load_image(file_path: "str | Path") -> Image.Image:
    """Load and validate an image file.

    Args:
        file_path: Path to image file (PNG, JPG, etc.)

    Returns:
        PIL Image in RGBA mode

    Raises:
        ValueError: If file cannot be loaded or is invalid
    """
    try:
        with Image.open(file_path) as image:
            # AIDEV-NOTE: Always convert to RGBA for consistent processing
            return image.convert("RGBA")
    except (OSError, ValueError) as e:
        raise ValueError(f"Failed to load image: {e}") from e


def image_to_rgba_array(image: "Image.Image | np.ndarray") -> np.ndarray:
    """Convert an image buffer to an (h, w, 4) uint8 RGBA array.

    Accepts PIL images in any mode, or numpy arrays shaped (h, w),
    (h, w, 3) or (h, w, 4).
    """
    if isinstance(image, Image.Image):
        return np.asarray(image.convert("RGBA"), dtype=np.uint8)

    array = np.asarray(image)
    if array.ndim == 2:
        array = np.stack([array, array, array], axis=-1)
    if array.ndim != 3 or array.shape[2] not in (3, 4):
        raise ValueError(f"Unsupported image buffer shape: {array.shape}")
    if array.shape[2] == 3:
        alpha = np.full(array.shape[:2] + (1,), 255, dtype=array.dtype)
        array = np.concatenate([array, alpha], axis=-1)
    return array.astype(np.uint8, copy=False)


def luminance(rgb: np.ndarray) -> np.ndarray:
    """Luminance (0-255) of the RGB channels of a pixel array.

    Args:
        rgb: Array whose last axis holds at least R, G, B

    Returns:
        Float array with the last axis reduced
    """
    r = rgb[..., 0].astype(np.float64)
    g = rgb[..., 1].astype(np.float64)
    b = rgb[..., 2].astype(np.float64)
    return LUMA_WEIGHTS[0] * r + LUMA_WEIGHTS[1] * g + LUMA_WEIGHTS[2] * b


def pixel_to_mm(
    x: float,
    y: float,
    image_width: int,
    image_height: int,
    plot_width: float,
    plot_height: float,
) -> "tuple[float, float]":
    """Map a pixel coordinate onto the sheet.

    AIDEV-NOTE: Axes are scaled independently. An image whose aspect ratio
    differs from the sheet is stretched to fill it.
    """
    return (x / image_width) * plot_width, (y / image_height) * plot_height


def truncate_preview(content: str, limit: int = PREVIEW_CHAR_LIMIT) -> str:
    """Cut long text for display, marking that it was truncated."""
    if len(content) <= limit:
        return content
    return content[:limit] + "\n... (truncated)"
