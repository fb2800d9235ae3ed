"""Main application window for the G-code generator."""

import logging
from typing import Optional

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QDockWidget,
    QFileDialog,
    QHBoxLayout,
    QMainWindow,
    QMessageBox,
    QVBoxLayout,
    QWidget,
)

from config_manager import ConfigManager
from models import (
    CUSTOM_PLOT_SIZE,
    GenerationConfig,
    GenerationResult,
    match_plot_size,
)
from point_layers import LayerProcessor
from ui.config_panel import ConfigPanel
from ui.console_panel import ConsoleLogHandler, ConsolePanel
from ui.gcode_panel import GCodePanel
from ui.image_panel import ImagePanel

logger = logging.getLogger(__name__)


class PointPlotWindow(QMainWindow):
    """Main application window: image on the left, settings and output right."""

    def __init__(self):
        super().__init__()
        self.setWindowTitle("PointPlot G-Code Generator v0.1.0")
        self.setMinimumSize(1100, 750)

        # Application state
        self.config_manager = ConfigManager()
        self.config = GenerationConfig()
        self.result: Optional[GenerationResult] = None

        # UI component references (created in _setup_ui)
        self.image_panel: ImagePanel
        self.config_panel: ConfigPanel
        self.gcode_panel: GCodePanel
        self.console_panel: ConsolePanel
        self.console_dock: QDockWidget
        self.log_handler: ConsoleLogHandler

        self._setup_ui()
        self._connect_signals()
        self._apply_plot_size()

    def _setup_ui(self):
        """Initialize the user interface."""
        self._create_menu_bar()

        central = QWidget()
        layout = QHBoxLayout(central)

        self.image_panel = ImagePanel()
        layout.addWidget(self.image_panel, stretch=3)

        right_layout = QVBoxLayout()
        self.config_panel = ConfigPanel(self.config)
        right_layout.addWidget(self.config_panel)
        self.gcode_panel = GCodePanel()
        right_layout.addWidget(self.gcode_panel, stretch=1)
        layout.addLayout(right_layout, stretch=2)

        self.setCentralWidget(central)
        self._create_console_dock()

    def _create_menu_bar(self):
        """Create the File and View menus."""
        menubar = self.menuBar()
        if menubar is None:
            return

        file_menu = menubar.addMenu("&File")
        if file_menu is not None:
            open_action = file_menu.addAction("Open Image...")
            if open_action is not None:
                open_action.triggered.connect(self._open_image)
            load_action = file_menu.addAction("Load Settings...")
            if load_action is not None:
                load_action.triggered.connect(self._load_settings)

        self.view_menu = menubar.addMenu("&View")

    def _create_console_dock(self):
        """Create the console as a dockable widget fed by the logging system."""
        self.console_panel = ConsolePanel()
        self.console_dock = QDockWidget("Console", self)
        self.console_dock.setWidget(self.console_panel)
        self.addDockWidget(Qt.DockWidgetArea.BottomDockWidgetArea, self.console_dock)

        if self.view_menu is not None:
            action = self.console_dock.toggleViewAction()
            if action is not None:
                action.setText("Show Console")
                self.view_menu.addAction(action)

        self.log_handler = ConsoleLogHandler(self.console_panel)
        logging.getLogger().addHandler(self.log_handler)

    def _connect_signals(self):
        self.config_panel.plot_size_changed.connect(self._apply_plot_size)
        self.config_panel.generate_requested.connect(self._generate)
        self.image_panel.image_changed.connect(self._on_image_changed)

    def _read_config(self) -> GenerationConfig:
        self.config = self.config_manager.parse(self.config_panel.get_values())
        return self.config

    def _apply_plot_size(self):
        machine = self._read_config().machine
        self.image_panel.set_plot_size((machine.plot_width, machine.plot_height))

    def _open_image(self):
        self.image_panel.browse_btn.click()

    def _load_settings(self):
        file_path, _ = QFileDialog.getOpenFileName(
            self, "Load Settings", "", "JSON (*.json)"
        )
        if not file_path:
            return
        # AIDEV-NOTE: The loaded preset only pre-fills the form; the form
        # values are what generation uses
        config = self.config_manager.load(file_path)
        panel = self.config_panel
        panel.grid_size_input.setValue(config.grid_size)
        panel.num_layers_input.setValue(config.num_layers)
        panel.point_diameter_input.setValue(config.machine.point_diameter)
        panel.z_point_input.setValue(config.machine.z_point)
        panel.z_travel_input.setValue(config.machine.z_travel)
        panel.feed_xy_input.setValue(config.machine.feed_rate_xy)
        panel.feed_z_input.setValue(config.machine.feed_rate_z)
        width, height = config.machine.plot_width, config.machine.plot_height
        preset = match_plot_size(width, height)
        if preset is None:
            panel.plot_size_combo.setCurrentText(CUSTOM_PLOT_SIZE)
        else:
            size_name, orientation = preset
            panel.plot_size_combo.setCurrentText(size_name)
            panel.orientation_combo.setCurrentIndex(
                panel.orientation_combo.findData(orientation.value)
            )
        panel.custom_width_input.setText(f"{width:g}")
        panel.custom_height_input.setText(f"{height:g}")
        self._apply_plot_size()

    def _on_image_changed(self, _image):
        # Points from a previous image no longer apply
        self.result = None
        self.gcode_panel.clear()

    # === G-Code Generation ===

    def _generate(self):
        """Run the layer pipeline on the current image."""
        image = self.image_panel.current_image
        if image is None:
            QMessageBox.warning(self, "No Image", "Please upload an image first!")
            return

        try:
            result = LayerProcessor(self._read_config()).process(image)
        except Exception as e:
            logger.exception("Generation failed")
            QMessageBox.critical(self, "Generation Error", str(e))
            return

        self.result = result
        self.gcode_panel.set_result(result)
        self.image_panel.canvas.set_layers(result.layers)

    # === Application Lifecycle ===

    def closeEvent(self, a0):
        """Detach the console log handler when the window closes."""
        logging.getLogger().removeHandler(self.log_handler)
        if a0:
            a0.accept()
