"""Generated G-code files panel."""

import logging
from pathlib import Path
from typing import List

from PyQt6.QtWidgets import (
    QFileDialog,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QListWidget,
    QMessageBox,
    QPlainTextEdit,
    QPushButton,
    QVBoxLayout,
)

from models import GCodeFile, GenerationResult
from point_layers import LayerProcessor
from ui.styles import FONTS, SIZES, file_title_stylesheet, preview_stylesheet

logger = logging.getLogger(__name__)


class GCodePanel(QGroupBox):
    """Lists generated layer files with a preview and save actions."""

    def __init__(self, parent=None):
        super().__init__("Generated G-Code Files", parent)
        self.files: List[GCodeFile] = []
        self._setup_ui()
        self._connect_signals()
        self._update_buttons()

    def _setup_ui(self):
        """Initialize the UI components."""
        layout = QVBoxLayout()

        self.file_list = QListWidget()
        self.file_list.setMaximumHeight(120)
        layout.addWidget(self.file_list)

        self.file_title = QLabel("")
        self.file_title.setStyleSheet(file_title_stylesheet())
        layout.addWidget(self.file_title)

        self.preview = QPlainTextEdit()
        self.preview.setReadOnly(True)
        self.preview.setFont(FONTS.PREVIEW)
        self.preview.setStyleSheet(preview_stylesheet())
        self.preview.setMaximumHeight(SIZES.PREVIEW_MAX_HEIGHT)
        layout.addWidget(self.preview)

        self.summary_label = QLabel("No files generated")
        self.summary_label.setStyleSheet("color: #aaa;")
        layout.addWidget(self.summary_label)

        button_layout = QHBoxLayout()
        self.save_btn = QPushButton("Save Selected...")
        button_layout.addWidget(self.save_btn)
        self.save_all_btn = QPushButton("Save All...")
        button_layout.addWidget(self.save_all_btn)
        layout.addLayout(button_layout)

        self.setLayout(layout)

    def _connect_signals(self):
        self.file_list.currentRowChanged.connect(self._show_file)
        self.save_btn.clicked.connect(self._save_selected)
        self.save_all_btn.clicked.connect(self._save_all)

    def _update_buttons(self):
        self.save_btn.setEnabled(self.file_list.currentRow() >= 0)
        self.save_all_btn.setEnabled(bool(self.files))

    def set_result(self, result: GenerationResult):
        """Show the files of a generation run."""
        self.files = list(result.files)
        self.file_list.clear()
        for gcode_file, layer in zip(self.files, result.layers):
            self.file_list.addItem(f"{gcode_file.name}  ({len(layer)} points)")

        self.summary_label.setText(self._format_summary(result))
        if self.files:
            self.file_list.setCurrentRow(0)
        self._update_buttons()

    def clear(self):
        """Drop the files of the previous run."""
        self.files = []
        self.file_list.clear()
        self.file_title.setText("")
        self.preview.clear()
        self.summary_label.setText("No files generated")
        self._update_buttons()

    @staticmethod
    def _format_summary(result: GenerationResult) -> str:
        seconds = result.estimated_time
        if seconds <= 0:
            time_text = "--"
        elif seconds < 60:
            time_text = f"{seconds:.0f}s"
        else:
            time_text = f"{seconds / 60:.1f}min"
        return (
            f"Points: {result.total_points} | "
            f"Travel: {result.total_path_length:.0f} mm | "
            f"Est. Time: {time_text}"
        )

    def _show_file(self, row: int):
        if 0 <= row < len(self.files):
            gcode_file = self.files[row]
            self.file_title.setText(gcode_file.name)
            self.preview.setPlainText(gcode_file.preview)
        else:
            self.file_title.setText("")
            self.preview.clear()
        self._update_buttons()

    def _save_selected(self):
        row = self.file_list.currentRow()
        if not 0 <= row < len(self.files):
            return
        gcode_file = self.files[row]

        file_path, _ = QFileDialog.getSaveFileName(
            self, "Save G-Code", gcode_file.name, "G-Code (*.gcode)"
        )
        if not file_path:
            return

        path = Path(file_path)
        self._write(path.parent, [GCodeFile(name=path.name, content=gcode_file.content)])

    def _save_all(self):
        if not self.files:
            QMessageBox.warning(self, "No Files", "Please generate G-Code first.")
            return
        directory = QFileDialog.getExistingDirectory(self, "Save All G-Code Files")
        if directory:
            self._write(Path(directory), self.files)

    def _write(self, directory: Path, files: List[GCodeFile]):
        try:
            LayerProcessor.save_files(files, directory)
        except OSError as e:
            logger.error("Failed to save G-code: %s", e)
            QMessageBox.critical(self, "Save Error", str(e))
