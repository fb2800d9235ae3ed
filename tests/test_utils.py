"""Tests for image and text helpers."""

import numpy as np
import pytest
from PIL import Image

from models import GCodeFile
from point_layers.utils import (
    image_to_rgba_array,
    load_image,
    luminance,
    pixel_to_mm,
    truncate_preview,
)


def test_luminance_weights():
    rgb = np.array([[255, 0, 0], [0, 255, 0], [0, 0, 255], [100, 100, 100]])

    assert luminance(rgb) == pytest.approx([76.245, 149.685, 29.07, 100.0])


def test_rgba_array_from_gray_and_rgb_arrays():
    gray = np.array([[0, 128]], dtype=np.uint8)
    rgb = np.zeros((2, 3, 3), dtype=np.uint8)

    gray_rgba = image_to_rgba_array(gray)
    rgb_rgba = image_to_rgba_array(rgb)

    assert gray_rgba.shape == (1, 2, 4)
    assert tuple(gray_rgba[0, 1]) == (128, 128, 128, 255)
    assert rgb_rgba.shape == (2, 3, 4)
    assert (rgb_rgba[..., 3] == 255).all()


def test_rgba_array_from_grayscale_pil_image():
    image = Image.new("L", (3, 2), 40)

    array = image_to_rgba_array(image)

    assert array.shape == (2, 3, 4)
    assert tuple(array[0, 0]) == (40, 40, 40, 255)


def test_rgba_array_rejects_bad_shapes():
    with pytest.raises(ValueError):
        image_to_rgba_array(np.zeros((2, 2, 2), dtype=np.uint8))


def test_load_image_converts_to_rgba(tmp_path):
    path = tmp_path / "photo.png"
    Image.new("RGB", (5, 4), (10, 20, 30)).save(path)

    image = load_image(path)

    assert image.mode == "RGBA"
    assert image.size == (5, 4)
    assert image.getpixel((0, 0)) == (10, 20, 30, 255)


def test_load_image_errors(tmp_path):
    bogus = tmp_path / "notes.png"
    bogus.write_text("not an image")

    with pytest.raises(ValueError, match="Failed to load image"):
        load_image(bogus)
    with pytest.raises(ValueError, match="Failed to load image"):
        load_image(tmp_path / "missing.png")


def test_pixel_to_mm():
    assert pixel_to_mm(50, 25, 100, 100, 210, 297) == pytest.approx((105.0, 74.25))


def test_truncate_preview():
    assert truncate_preview("G28") == "G28"
    assert truncate_preview("x" * 1000) == "x" * 1000

    long_text = "y" * 1500
    assert truncate_preview(long_text) == "y" * 1000 + "\n... (truncated)"


def test_gcode_file_preview():
    short = GCodeFile("layer_1.gcode", "G28\nM30")
    long = GCodeFile("layer_2.gcode", "G0 X1.000 Y1.000 F13000\n" * 100)

    assert short.preview == short.content
    assert long.preview.endswith("\n... (truncated)")
    assert len(long.preview) == 1000 + len("\n... (truncated)")
