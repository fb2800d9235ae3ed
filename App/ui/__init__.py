"""UI components for the PointPlot G-code generator.

This package contains modular UI panels that can be easily rearranged
in the application layout.
"""

from ui.config_panel import ConfigPanel
from ui.console_panel import ConsolePanel
from ui.gcode_panel import GCodePanel
from ui.image_panel import ImagePanel
from ui.main_window import PointPlotWindow
from ui.plot_canvas import PlotCanvas

__all__ = [
    "PointPlotWindow",
    "ConfigPanel",
    "ConsolePanel",
    "GCodePanel",
    "ImagePanel",
    "PlotCanvas",
]
