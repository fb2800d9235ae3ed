"""Generation settings panel."""

from typing import Any, Dict

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtWidgets import (
    QComboBox,
    QFormLayout,
    QGroupBox,
    QLineEdit,
    QPushButton,
    QVBoxLayout,
)

from models import (
    CUSTOM_PLOT_SIZE,
    DEFAULT_PLOT_SIZE,
    PLOT_SIZES,
    GenerationConfig,
    PlotOrientation,
)
from ui.widgets import WidgetFactory


class ConfigPanel(QGroupBox):
    """Panel for sheet size, sampling and machine settings."""

    plot_size_changed = pyqtSignal()
    generate_requested = pyqtSignal()

    def __init__(self, config: GenerationConfig, parent=None):
        super().__init__("G-Code Settings", parent)
        self.config = config
        self._setup_ui()
        self._connect_signals()
        self._update_custom_visibility()

    def _setup_ui(self):
        """Initialize the UI components."""
        main_layout = QVBoxLayout()
        machine = self.config.machine

        # --- Sheet Group ---
        sheet_group = QGroupBox("Sheet")
        sheet_layout = QFormLayout()

        self.plot_size_combo = QComboBox()
        self.plot_size_combo.addItems(list(PLOT_SIZES) + [CUSTOM_PLOT_SIZE])
        self.plot_size_combo.setCurrentText(DEFAULT_PLOT_SIZE)
        sheet_layout.addRow("Size:", self.plot_size_combo)

        self.orientation_combo = QComboBox()
        for orientation in PlotOrientation:
            self.orientation_combo.addItem(orientation.value.title(), orientation.value)
        sheet_layout.addRow("Orientation:", self.orientation_combo)

        # AIDEV-NOTE: Free text on purpose; unparsable input falls back to
        # defaults in ConfigManager instead of being rejected here
        self.custom_width_input = QLineEdit(f"{machine.plot_width:g}")
        self.custom_width_input.setPlaceholderText("mm")
        sheet_layout.addRow("Custom width (mm):", self.custom_width_input)

        self.custom_height_input = QLineEdit(f"{machine.plot_height:g}")
        self.custom_height_input.setPlaceholderText("mm")
        sheet_layout.addRow("Custom height (mm):", self.custom_height_input)

        sheet_group.setLayout(sheet_layout)
        main_layout.addWidget(sheet_group)
        self.sheet_layout = sheet_layout

        # --- Sampling Group ---
        sampling_group = QGroupBox("Sampling")
        sampling_layout = QFormLayout()
        self.grid_size_input = WidgetFactory.create_int_spinbox(
            1, 100, self.config.grid_size, " px",
            tooltip="Pixels between sampled points",
        )
        sampling_layout.addRow("Grid size:", self.grid_size_input)

        self.num_layers_input = WidgetFactory.create_int_spinbox(
            1, 32, self.config.num_layers,
            tooltip="Number of brightness layers (one G-code file each)",
        )
        sampling_layout.addRow("Layers:", self.num_layers_input)
        sampling_group.setLayout(sampling_layout)
        main_layout.addWidget(sampling_group)

        # --- Machine Group ---
        machine_group = QGroupBox("Machine")
        machine_layout = QFormLayout()
        self.point_diameter_input = WidgetFactory.create_double_spinbox(
            0.1, 50, machine.point_diameter, " mm", decimals=1, step=0.5
        )
        machine_layout.addRow("Point diameter:", self.point_diameter_input)

        self.z_point_input = WidgetFactory.create_double_spinbox(
            -100, 100, machine.z_point, " mm", decimals=2, step=0.5
        )
        machine_layout.addRow("Z point:", self.z_point_input)

        self.z_travel_input = WidgetFactory.create_double_spinbox(
            -100, 200, machine.z_travel, " mm", decimals=2, step=0.5
        )
        machine_layout.addRow("Z travel:", self.z_travel_input)

        self.feed_xy_input = WidgetFactory.create_double_spinbox(
            1, 100000, machine.feed_rate_xy, " mm/min", decimals=0, step=500
        )
        machine_layout.addRow("Feed XY:", self.feed_xy_input)

        self.feed_z_input = WidgetFactory.create_double_spinbox(
            1, 100000, machine.feed_rate_z, " mm/min", decimals=0, step=100
        )
        machine_layout.addRow("Feed Z:", self.feed_z_input)
        machine_group.setLayout(machine_layout)
        main_layout.addWidget(machine_group)

        # --- Generate Button ---
        self.generate_btn = QPushButton("Generate G-Code")
        self.generate_btn.setMinimumHeight(35)
        main_layout.addWidget(self.generate_btn)

        main_layout.addStretch()
        self.setLayout(main_layout)

    def _connect_signals(self):
        self.plot_size_combo.currentTextChanged.connect(self._on_plot_size_changed)
        self.orientation_combo.currentIndexChanged.connect(
            lambda _: self.plot_size_changed.emit()
        )
        self.custom_width_input.editingFinished.connect(self.plot_size_changed.emit)
        self.custom_height_input.editingFinished.connect(self.plot_size_changed.emit)
        self.generate_btn.clicked.connect(self.generate_requested.emit)

    def _on_plot_size_changed(self, _text: str):
        self._update_custom_visibility()
        self.plot_size_changed.emit()

    def _update_custom_visibility(self):
        is_custom = self.plot_size_combo.currentText() == CUSTOM_PLOT_SIZE
        for widget in (self.custom_width_input, self.custom_height_input):
            self.sheet_layout.setRowVisible(widget, is_custom)
        self.sheet_layout.setRowVisible(self.orientation_combo, not is_custom)

    def get_values(self) -> Dict[str, Any]:
        """Raw settings for ConfigManager.parse()."""
        return {
            "plot_size": self.plot_size_combo.currentText(),
            "orientation": self.orientation_combo.currentData(),
            "plot_width": self.custom_width_input.text(),
            "plot_height": self.custom_height_input.text(),
            "grid_size": self.grid_size_input.value(),
            "num_layers": self.num_layers_input.value(),
            "point_diameter": self.point_diameter_input.value(),
            "z_point": self.z_point_input.value(),
            "z_travel": self.z_travel_input.value(),
            "feed_rate_xy": self.feed_xy_input.value(),
            "feed_rate_z": self.feed_z_input.value(),
        }
