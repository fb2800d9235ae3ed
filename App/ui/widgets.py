"""Spinbox factory for the numeric fields of the settings panel."""

from PyQt6.QtWidgets import QDoubleSpinBox, QSpinBox


class WidgetFactory:
    """Factory class for creating commonly used widget patterns."""

    @staticmethod
    def create_double_spinbox(
        range_min: float,
        range_max: float,
        value: float,
        suffix: str = "",
        decimals: int = 1,
        step: float = 1.0,
        tooltip: str = "",
    ) -> QDoubleSpinBox:
        """Create a configured QDoubleSpinBox.

        Args:
            range_min: Minimum value
            range_max: Maximum value
            value: Initial value
            suffix: Suffix text (e.g., " mm", " mm/min")
            decimals: Number of decimal places
            step: Single step increment
            tooltip: Tooltip text

        Returns:
            Configured QDoubleSpinBox
        """
        spinbox = QDoubleSpinBox()
        spinbox.setRange(range_min, range_max)
        spinbox.setDecimals(decimals)
        spinbox.setValue(value)
        spinbox.setSuffix(suffix)
        spinbox.setSingleStep(step)
        if tooltip:
            spinbox.setToolTip(tooltip)
        return spinbox

    @staticmethod
    def create_int_spinbox(
        range_min: int,
        range_max: int,
        value: int,
        suffix: str = "",
        step: int = 1,
        tooltip: str = "",
    ) -> QSpinBox:
        """Create a configured QSpinBox."""
        spinbox = QSpinBox()
        spinbox.setRange(range_min, range_max)
        spinbox.setValue(value)
        spinbox.setSuffix(suffix)
        spinbox.setSingleStep(step)
        if tooltip:
            spinbox.setToolTip(tooltip)
        return spinbox
