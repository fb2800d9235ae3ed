"""PointPlot G-Code Generator - Main entry point."""

import logging
import sys

from PyQt6.QtWidgets import QApplication

from ui.main_window import PointPlotWindow

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def setup_logging(level: int = logging.INFO):
    """Configure console logging for the application."""
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)
    # Pillow logs every decoded chunk at DEBUG
    logging.getLogger("PIL").setLevel(logging.WARNING)


def main():
    """Launch the PointPlot G-code generator."""
    setup_logging()

    app = QApplication(sys.argv)

    app.setApplicationDisplayName("PointPlot G-Code Generator")
    app.setApplicationName("PointPlot")

    window = PointPlotWindow()
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
