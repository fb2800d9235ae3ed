"""Image import, filter and page framing panel."""

from __future__ import annotations

import logging
from pathlib import Path

from PIL import Image
from PyQt6.QtCore import pyqtSignal
from PyQt6.QtWidgets import (
    QFileDialog,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QMessageBox,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from point_layers import PlotFrame, apply_spiral_filter, load_image
from ui.plot_canvas import PlotCanvas
from ui.styles import SIZES

logger = logging.getLogger(__name__)

IMAGE_FILTER = "Images (*.png *.jpg *.jpeg *.bmp *.gif *.webp)"


class ImagePanel(QGroupBox):
    """Panel holding the current image and its placement on the page."""

    # Emitted with the new current image (or None)
    image_changed = pyqtSignal(object)

    def __init__(self, parent: QWidget | None = None):
        super().__init__("Image", parent)
        self.original_image: Image.Image | None = None
        self.current_image: Image.Image | None = None
        self.frame: PlotFrame | None = None
        self.plot_size: tuple[float, float] = (210.0, 297.0)

        self._setup_ui()
        self._connect_signals()
        self._update_buttons()

    def _setup_ui(self):
        """Initialize the UI components."""
        layout = QVBoxLayout()

        # --- File selection ---
        file_layout = QHBoxLayout()
        self.file_path_label = QLabel("No image selected")
        self.file_path_label.setWordWrap(True)
        file_layout.addWidget(self.file_path_label, stretch=1)

        self.browse_btn = QPushButton("Browse...")
        self.browse_btn.setToolTip("Select an image file (PNG, JPG, etc.)")
        file_layout.addWidget(self.browse_btn)
        layout.addLayout(file_layout)

        # --- Canvas ---
        self.canvas = PlotCanvas()
        layout.addWidget(self.canvas, stretch=1)

        # --- Framing controls ---
        view_layout = QHBoxLayout()
        self.zoom_in_btn = QPushButton("Zoom +")
        self.zoom_out_btn = QPushButton("Zoom -")
        self.pan_left_btn = QPushButton("←")
        self.pan_right_btn = QPushButton("→")
        self.pan_up_btn = QPushButton("↑")
        self.pan_down_btn = QPushButton("↓")
        self.reset_btn = QPushButton("↺ Reset")
        for btn in (
            self.zoom_in_btn,
            self.zoom_out_btn,
            self.pan_left_btn,
            self.pan_right_btn,
            self.pan_up_btn,
            self.pan_down_btn,
            self.reset_btn,
        ):
            view_layout.addWidget(btn)
        layout.addLayout(view_layout)

        # --- Image actions ---
        action_layout = QHBoxLayout()
        self.filter_btn = QPushButton("Apply Spiral Filter")
        self.filter_btn.setToolTip("Remap pixels in a spiral around the centre")
        action_layout.addWidget(self.filter_btn)

        self.restore_btn = QPushButton("Restore Original")
        action_layout.addWidget(self.restore_btn)

        self.export_btn = QPushButton("Export Page PNG...")
        self.export_btn.setToolTip("Save the framed page as an image")
        action_layout.addWidget(self.export_btn)
        layout.addLayout(action_layout)

        self.setLayout(layout)

    def _connect_signals(self):
        step = SIZES.PAN_STEP
        self.browse_btn.clicked.connect(self._browse_image)
        self.zoom_in_btn.clicked.connect(lambda: self._zoom(1.2))
        self.zoom_out_btn.clicked.connect(lambda: self._zoom(0.8))
        self.pan_left_btn.clicked.connect(lambda: self._pan(-step, 0))
        self.pan_right_btn.clicked.connect(lambda: self._pan(step, 0))
        self.pan_up_btn.clicked.connect(lambda: self._pan(0, -step))
        self.pan_down_btn.clicked.connect(lambda: self._pan(0, step))
        self.reset_btn.clicked.connect(self._reset_frame)
        self.filter_btn.clicked.connect(self._apply_filter)
        self.restore_btn.clicked.connect(self._restore_original)
        self.export_btn.clicked.connect(self._export_page)

    def _update_buttons(self):
        has_image = self.current_image is not None
        for btn in (
            self.zoom_in_btn,
            self.zoom_out_btn,
            self.pan_left_btn,
            self.pan_right_btn,
            self.pan_up_btn,
            self.pan_down_btn,
            self.reset_btn,
            self.filter_btn,
            self.restore_btn,
            self.export_btn,
        ):
            btn.setEnabled(has_image)

    def set_plot_size(self, plot_size: tuple[float, float]):
        """Change the page size and refit the image."""
        self.plot_size = plot_size
        self.canvas.set_plot_size(plot_size)
        if self.frame is not None:
            self.frame.set_plot_size(plot_size)
            self.canvas.update()

    def _browse_image(self):
        file_path, _ = QFileDialog.getOpenFileName(self, "Open Image", "", IMAGE_FILTER)
        if file_path:
            self.open_image(file_path)

    def open_image(self, file_path: str | Path):
        """Load an image file and fit it on the page."""
        try:
            image = load_image(file_path)
        except ValueError as e:
            logger.error("%s", e)
            QMessageBox.critical(self, "Image Error", str(e))
            return

        logger.info("Loaded %s (%dx%d)", file_path, image.width, image.height)
        self.file_path_label.setText(str(file_path))
        self.original_image = image
        self._set_current_image(image, refit=True)

    def _set_current_image(self, image: Image.Image, refit: bool):
        self.current_image = image
        if refit or self.frame is None:
            self.frame = PlotFrame(image.size, self.plot_size)
        self.canvas.clear_layers()
        self.canvas.set_image(image, self.frame)
        self._update_buttons()
        self.image_changed.emit(image)

    def _zoom(self, factor: float):
        if self.frame is None:
            return
        self.frame.zoom(factor)
        self.canvas.update()

    def _pan(self, dx: float, dy: float):
        if self.frame is None:
            return
        self.frame.pan(dx, dy)
        self.canvas.update()

    def _reset_frame(self):
        if self.frame is None:
            return
        self.frame.reset()
        self.canvas.update()

    def _apply_filter(self):
        if self.original_image is None:
            QMessageBox.warning(self, "No Image", "Please load an image first.")
            return
        # Filter always starts from the original so repeated clicks don't stack
        logger.info("Applying spiral filter")
        self._set_current_image(apply_spiral_filter(self.original_image), refit=False)

    def _restore_original(self):
        if self.original_image is not None:
            self._set_current_image(self.original_image, refit=False)

    def _export_page(self):
        if self.current_image is None or self.frame is None:
            QMessageBox.warning(self, "No Image", "Please load an image first.")
            return

        file_path, _ = QFileDialog.getSaveFileName(
            self, "Export Page", "plot_page.png", "PNG Image (*.png)"
        )
        if not file_path:
            return

        try:
            self.frame.render(self.current_image).save(file_path, "PNG")
        except OSError as e:
            logger.error("Failed to export page: %s", e)
            QMessageBox.critical(self, "Export Error", str(e))
            return
        logger.info("Exported page to %s", file_path)
