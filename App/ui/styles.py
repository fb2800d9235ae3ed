"""Centralized styling constants for the PointPlot UI.

This module consolidates colors, fonts, and sizes used throughout the application
to ensure consistency and easier maintenance.
"""

from PyQt6.QtGui import QColor, QFont


class ThemeColors:
    """Application theme colors for the page canvas and panels."""

    # Background colors
    BACKGROUND_CANVAS = QColor(245, 245, 245)
    BACKGROUND_PANEL = "#2a2a2a"
    PREVIEW_BACKGROUND = "#1a1a1a"
    PREVIEW_TEXT = "#00ff00"
    ACCENT = "#ff6b35"

    # Page
    PAGE_FILL = QColor(255, 255, 255)
    PAGE_BORDER = QColor(0, 0, 0)

    # Placeholder text
    PLACEHOLDER_TEXT = QColor(153, 153, 153)

    # Point overlay alpha (0-255)
    OVERLAY_ALPHA = 150


def layer_color(layer_index: int, num_layers: int) -> QColor:
    """Overlay color for a layer: dark layers bright red, light layers dark."""
    brightness = (layer_index + 1) / num_layers
    return QColor(int(255 * (1 - brightness)), 0, 0, ThemeColors.OVERLAY_ALPHA)


class Fonts:
    """Standard application fonts."""

    CONSOLE = QFont("Courier", 9)
    PREVIEW = QFont("Courier", 9)
    PLACEHOLDER = QFont("Arial", 18)


class Sizes:
    """Standard widget sizes and constraints."""

    # Console panel
    CONSOLE_MIN_HEIGHT = 100

    # Page canvas
    CANVAS_MIN_SIZE = (400, 300)
    CANVAS_PADDING = 40  # pixels
    OVERLAY_POINT_RADIUS = 1.5  # pixels

    # G-code preview
    PREVIEW_MAX_HEIGHT = 200

    # Pan step in mm
    PAN_STEP = 5.0


COLORS = ThemeColors
FONTS = Fonts
SIZES = Sizes


def preview_stylesheet() -> str:
    """Stylesheet for the G-code preview box."""
    return (
        f"background-color: {ThemeColors.PREVIEW_BACKGROUND}; "
        f"color: {ThemeColors.PREVIEW_TEXT}; "
        "border-radius: 4px; padding: 6px;"
    )


def file_title_stylesheet() -> str:
    return f"color: {ThemeColors.ACCENT}; font-weight: bold;"
