"""Tests for placing an image on the page."""

import pytest
from PIL import Image

from point_layers.framing import PlotFrame


@pytest.fixture
def frame():
    # Wide image on an A4 portrait page
    return PlotFrame((100, 50), (210.0, 297.0))


def test_initial_fit_is_centered(frame):
    assert frame.scale == pytest.approx(2.1)
    assert frame.scaled_size == pytest.approx((210.0, 105.0))
    assert frame.offset_x == pytest.approx(0.0)
    assert frame.offset_y == pytest.approx(96.0)


def test_zoom_keeps_page_center(frame):
    frame.zoom(2.0)

    assert frame.scale == pytest.approx(4.2)
    assert frame.offset_x == pytest.approx(-105.0)
    assert frame.offset_y == pytest.approx(43.5)


def test_zoom_is_clamped(frame):
    frame.zoom(1000)
    assert frame.scale == pytest.approx(frame.initial_scale * 10)

    frame.zoom(1e-6)
    assert frame.scale == pytest.approx(frame.initial_scale * 0.1)


def test_pan_and_reset(frame):
    frame.pan(5.0, -3.0)
    assert (frame.offset_x, frame.offset_y) == pytest.approx((5.0, 93.0))

    frame.zoom(1.2)
    frame.reset()
    assert frame.scale == pytest.approx(2.1)
    assert (frame.offset_x, frame.offset_y) == pytest.approx((0.0, 96.0))


def test_set_plot_size_refits(frame):
    frame.set_plot_size((297.0, 210.0))

    assert frame.scale == pytest.approx(2.97)
    assert frame.offset_x == pytest.approx(0.0)
    assert frame.offset_y == pytest.approx(30.75)


def test_render_places_image_on_white_page(frame):
    image = Image.new("RGB", (100, 50), (255, 0, 0))

    page = frame.render(image, px_per_mm=1.0)

    assert page.size == (210, 297)
    assert page.mode == "RGB"
    r, g, b = page.getpixel((100, 150))
    assert r > 250 and g < 5 and b < 5
    assert page.getpixel((100, 10)) == (255, 255, 255)
    assert page.getpixel((100, 290)) == (255, 255, 255)


def test_render_clips_panned_image(frame):
    image = Image.new("RGB", (100, 50), (0, 0, 255))
    frame.pan(-150.0, 0.0)

    page = frame.render(image, px_per_mm=1.0)

    assert page.size == (210, 297)
    r, g, b = page.getpixel((30, 150))
    assert b > 250 and r < 5
    assert page.getpixel((100, 150)) == (255, 255, 255)


def test_invalid_image_size():
    with pytest.raises(ValueError):
        PlotFrame((0, 10), (210.0, 297.0))
