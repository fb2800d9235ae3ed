"""Console output panel."""

import logging

from PyQt6.QtCore import QObject, pyqtSignal
from PyQt6.QtWidgets import QGroupBox, QPushButton, QTextEdit, QVBoxLayout

from ui.styles import FONTS, SIZES


class _LogEmitter(QObject):
    message = pyqtSignal(str)


class ConsoleLogHandler(logging.Handler):
    """Logging handler forwarding formatted records to a ConsolePanel.

    AIDEV-NOTE: Records go through a Qt signal so the widget is only touched
    on the GUI thread.
    """

    def __init__(self, console: "ConsolePanel"):
        super().__init__()
        self.emitter = _LogEmitter()
        self.emitter.message.connect(console.append)
        self.setFormatter(logging.Formatter("%(levelname)s | %(message)s"))

    def emit(self, record: logging.LogRecord):
        try:
            self.emitter.message.emit(self.format(record))
        except RuntimeError:
            # Console widget already destroyed
            pass


class ConsolePanel(QGroupBox):
    """Panel for displaying application log output."""

    def __init__(self, parent=None):
        super().__init__(None, parent)
        self._setup_ui()

    def _setup_ui(self):
        """Initialize the UI components."""
        layout = QVBoxLayout()

        self.console = QTextEdit()
        self.console.setReadOnly(True)
        # AIDEV-NOTE: Use minimum height only - let dock widget handle sizing
        self.console.setMinimumHeight(SIZES.CONSOLE_MIN_HEIGHT)
        self.console.setFont(FONTS.CONSOLE)
        layout.addWidget(self.console)

        clear_console_btn = QPushButton("Clear Console")
        clear_console_btn.clicked.connect(self.clear)
        layout.addWidget(clear_console_btn)

        self.setLayout(layout)

    def append(self, message: str):
        """Add a message to the console."""
        self.console.append(message)
        # Auto-scroll to bottom
        scrollbar = self.console.verticalScrollBar()
        if scrollbar:
            scrollbar.setValue(scrollbar.maximum())

    def clear(self):
        """Clear all console output."""
        self.console.clear()
