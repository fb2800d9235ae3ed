"""Page canvas showing the framed image and generated points."""

from typing import List, Optional, Tuple

from PIL import Image
from PyQt6 import QtWidgets
from PyQt6.QtCore import QRectF, Qt
from PyQt6.QtGui import QBrush, QImage, QPainter, QPen, QPixmap

from models import Layer
from point_layers import PlotFrame
from ui.styles import COLORS, FONTS, SIZES, layer_color


def pil_to_qimage(image: Image.Image) -> QImage:
    """Convert a PIL image to a QImage (copied, RGBA)."""
    rgba = image.convert("RGBA")
    data = rgba.tobytes("raw", "RGBA")
    qimage = QImage(
        data, rgba.width, rgba.height, rgba.width * 4, QImage.Format.Format_RGBA8888
    )
    # AIDEV-NOTE: copy() detaches the QImage from the Python bytes buffer
    return qimage.copy()


class PlotCanvas(QtWidgets.QWidget):
    """Custom widget rendering the page, the framed image and point layers."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setMinimumSize(*SIZES.CANVAS_MIN_SIZE)

        self.plot_size: Tuple[float, float] = (210.0, 297.0)
        self.frame: Optional[PlotFrame] = None
        self.pixmap: Optional[QPixmap] = None
        self.layers: List[Layer] = []
        self.show_points = True

    def set_plot_size(self, plot_size: Tuple[float, float]):
        self.plot_size = plot_size
        self.update()

    def set_image(self, image: Optional[Image.Image], frame: Optional[PlotFrame]):
        """Show a new image placed by the given frame."""
        self.frame = frame
        self.pixmap = QPixmap.fromImage(pil_to_qimage(image)) if image is not None else None
        self.update()

    def set_layers(self, layers: List[Layer]):
        """Overlay generated point layers."""
        self.layers = list(layers)
        self.update()

    def clear_layers(self):
        self.layers = []
        self.update()

    def _page_scale(self) -> float:
        padding = SIZES.CANVAS_PADDING
        available_width = max(1, self.width() - 2 * padding)
        available_height = max(1, self.height() - 2 * padding)
        return min(
            available_width / self.plot_size[0], available_height / self.plot_size[1]
        )

    def _page_to_screen(self, x: float, y: float) -> Tuple[float, float]:
        """Convert page coordinates (mm) to screen coordinates (pixels).

        AIDEV-NOTE: Keeps the page aspect ratio and centers it in the widget.
        """
        scale = self._page_scale()
        offset_x = (self.width() - self.plot_size[0] * scale) / 2
        offset_y = (self.height() - self.plot_size[1] * scale) / 2
        return offset_x + x * scale, offset_y + y * scale

    def paintEvent(self, event):
        """Render the page, image and overlay."""
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        painter.setRenderHint(QPainter.RenderHint.SmoothPixmapTransform)

        painter.fillRect(self.rect(), COLORS.BACKGROUND_CANVAS)

        if self.pixmap is None or self.frame is None:
            painter.setPen(COLORS.PLACEHOLDER_TEXT)
            painter.setFont(FONTS.PLACEHOLDER)
            painter.drawText(
                self.rect(), Qt.AlignmentFlag.AlignCenter, "Load an image to begin"
            )
            painter.end()
            return

        scale = self._page_scale()
        page_x, page_y = self._page_to_screen(0, 0)
        page_rect = QRectF(
            page_x, page_y, self.plot_size[0] * scale, self.plot_size[1] * scale
        )
        painter.fillRect(page_rect, COLORS.PAGE_FILL)

        # Image is clipped to the page
        painter.save()
        painter.setClipRect(page_rect)
        image_x, image_y = self._page_to_screen(self.frame.offset_x, self.frame.offset_y)
        scaled_w, scaled_h = self.frame.scaled_size
        painter.drawPixmap(
            QRectF(image_x, image_y, scaled_w * scale, scaled_h * scale),
            self.pixmap,
            QRectF(self.pixmap.rect()),
        )
        painter.restore()

        if self.show_points and self.layers:
            self._draw_points(painter)

        painter.setPen(QPen(COLORS.PAGE_BORDER, 2))
        painter.setBrush(Qt.BrushStyle.NoBrush)
        painter.drawRect(page_rect)
        painter.end()

    def _draw_points(self, painter: QPainter):
        radius = SIZES.OVERLAY_POINT_RADIUS
        painter.setPen(Qt.PenStyle.NoPen)
        for layer in self.layers:
            painter.setBrush(QBrush(layer_color(layer.index, len(self.layers))))
            for point in layer.points:
                sx, sy = self._page_to_screen(point.x, point.y)
                painter.drawEllipse(QRectF(sx - radius, sy - radius, radius * 2, radius * 2))
