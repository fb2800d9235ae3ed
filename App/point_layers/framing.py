"""Placement of an image on the printable page.

AIDEV-NOTE: All geometry is kept in page millimetres. The UI maps mm to
screen pixels itself, so zoom and pan behave the same at any window size.
"""

from PIL import Image

from models import MM_TO_PX

MIN_ZOOM = 0.1  # relative to the initial fit
MAX_ZOOM = 10.0


class PlotFrame:
    """Tracks scale and offset of an image placed on a page."""

    def __init__(
        self,
        image_size: "tuple[int, int]",
        plot_size: "tuple[float, float]",
    ):
        """Fit the image onto the page.

        Args:
            image_size: (width, height) in pixels
            plot_size: (width, height) of the page in mm
        """
        self.image_width, self.image_height = image_size
        self.plot_width, self.plot_height = plot_size
        if self.image_width <= 0 or self.image_height <= 0:
            raise ValueError(f"Invalid image size: {image_size}")

        self.initial_scale = 1.0
        self.initial_offset_x = 0.0
        self.initial_offset_y = 0.0
        self._fit()
        self.reset()

    def _fit(self):
        # Scale to fit within the page (maintain aspect ratio), centered
        scale_x = self.plot_width / self.image_width
        scale_y = self.plot_height / self.image_height
        self.initial_scale = min(scale_x, scale_y)

        self.initial_offset_x = (self.plot_width - self.image_width * self.initial_scale) / 2
        self.initial_offset_y = (self.plot_height - self.image_height * self.initial_scale) / 2

    @property
    def scaled_size(self) -> "tuple[float, float]":
        """Current image size on the page in mm."""
        return self.image_width * self.scale, self.image_height * self.scale

    def set_plot_size(self, plot_size: "tuple[float, float]"):
        """Change the page and refit the image."""
        self.plot_width, self.plot_height = plot_size
        self._fit()
        self.reset()

    def zoom(self, factor: float):
        """Zoom around the page centre, clamped relative to the initial fit."""
        center_x = self.plot_width / 2
        center_y = self.plot_height / 2

        old_scale = self.scale
        self.scale = min(
            max(self.scale * factor, self.initial_scale * MIN_ZOOM),
            self.initial_scale * MAX_ZOOM,
        )

        change = self.scale / old_scale
        self.offset_x = center_x - (center_x - self.offset_x) * change
        self.offset_y = center_y - (center_y - self.offset_y) * change

    def pan(self, dx: float, dy: float):
        """Shift the image by (dx, dy) mm."""
        self.offset_x += dx
        self.offset_y += dy

    def reset(self):
        """Restore the initial fit."""
        self.scale = self.initial_scale
        self.offset_x = self.initial_offset_x
        self.offset_y = self.initial_offset_y

    def render(self, image: Image.Image, px_per_mm: float = MM_TO_PX) -> Image.Image:
        """Render the framed page.

        Args:
            image: The framed image (same size as given at construction)
            px_per_mm: Output resolution

        Returns:
            RGB page image on white, clipped to the page
        """
        page_width = max(1, round(self.plot_width * px_per_mm))
        page_height = max(1, round(self.plot_height * px_per_mm))
        page = Image.new("RGB", (page_width, page_height), (255, 255, 255))

        scaled_w, scaled_h = self.scaled_size
        target_w = max(1, round(scaled_w * px_per_mm))
        target_h = max(1, round(scaled_h * px_per_mm))
        resized = image.convert("RGBA").resize(
            (target_w, target_h), Image.Resampling.LANCZOS
        )

        # paste() clips to the page; alpha composites over white
        position = (round(self.offset_x * px_per_mm), round(self.offset_y * px_per_mm))
        page.paste(resized, position, resized)
        return page
