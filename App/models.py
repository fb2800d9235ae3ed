"""Data models and constants for the PointPlot G-code generator."""

from dataclasses import dataclass, field
from enum import Enum

# --- Generation defaults ---

DEFAULT_GRID_SIZE = 4  # pixels between samples
DEFAULT_NUM_LAYERS = 4

DEFAULT_POINT_DIAMETER = 4.0  # mm
DEFAULT_Z_POINT = 0.0  # mm, pen down
DEFAULT_Z_TRAVEL = 10.0  # mm
DEFAULT_FEED_RATE_XY = 13000.0  # mm/min
DEFAULT_FEED_RATE_Z = 2500.0  # mm/min

# Preview of generated files is cut after this many characters
PREVIEW_CHAR_LIMIT = 1000

# Screen resolution used when rendering a page to pixels (96 DPI)
MM_TO_PX = 3.7795


class PlotOrientation(Enum):
    """Page orientation."""

    PORTRAIT = "portrait"
    LANDSCAPE = "landscape"


# Page sizes in portrait orientation (width, height) in mm
PLOT_SIZES: "dict[str, tuple[float, float]]" = {
    "A4": (210.0, 297.0),
    "A3": (297.0, 420.0),
    "A2": (420.0, 594.0),
}

CUSTOM_PLOT_SIZE = "Custom"
DEFAULT_PLOT_SIZE = "A4"


def plot_dimensions(
    size_name: str,
    orientation: PlotOrientation = PlotOrientation.PORTRAIT,
) -> "tuple[float, float]":
    """Look up a preset page size.

    Args:
        size_name: Preset name ("A4", "A3", "A2")
        orientation: Landscape swaps width and height

    Returns:
        (width, height) in mm

    Raises:
        KeyError: If the preset does not exist
    """
    width, height = PLOT_SIZES[size_name]
    if orientation is PlotOrientation.LANDSCAPE:
        return height, width
    return width, height


def match_plot_size(
    width: float, height: float
) -> "tuple[str, PlotOrientation] | None":
    """Find the preset and orientation with exactly these dimensions, if any."""
    for size_name in PLOT_SIZES:
        for orientation in PlotOrientation:
            if plot_dimensions(size_name, orientation) == (width, height):
                return size_name, orientation
    return None



@dataclass(frozen=True)
class Point:
    """A sampled point in machine space.

    AIDEV-NOTE: x/y are in mm. brightness keeps the raw luminance (0-255)
    of the source pixel so overlays can color points by layer.
    """

    x: float
    y: float
    brightness: float


@dataclass
class Layer:
    """All points whose brightness falls in one band."""

    index: int  # 0-based
    points: "list[Point]" = field(default_factory=list)

    @property
    def number(self) -> int:
        """1-based layer number used for file names and comments."""
        return self.index + 1

    def __len__(self) -> int:
        return len(self.points)


@dataclass(frozen=True)
class MachineParameters:
    """Plotter motion settings and target sheet size."""

    point_diameter: float = DEFAULT_POINT_DIAMETER  # mm
    z_point: float = DEFAULT_Z_POINT  # mm
    z_travel: float = DEFAULT_Z_TRAVEL  # mm
    feed_rate_xy: float = DEFAULT_FEED_RATE_XY  # mm/min
    feed_rate_z: float = DEFAULT_FEED_RATE_Z  # mm/min

    # Target sheet size in mm
    plot_width: float = PLOT_SIZES[DEFAULT_PLOT_SIZE][0]
    plot_height: float = PLOT_SIZES[DEFAULT_PLOT_SIZE][1]


@dataclass(frozen=True)
class GenerationConfig:
    """Complete configuration for one generation run."""

    grid_size: int = DEFAULT_GRID_SIZE
    num_layers: int = DEFAULT_NUM_LAYERS
    machine: MachineParameters = field(default_factory=MachineParameters)


@dataclass(frozen=True)
class GCodeFile:
    """A named G-code document ready for saving."""

    name: str
    content: str

    @property
    def preview(self) -> str:
        """Content truncated for on-screen display."""
        from point_layers.utils import truncate_preview

        return truncate_preview(self.content)


@dataclass
class GenerationResult:
    """Result of the point layer pipeline."""

    layers: "list[Layer]"
    files: "list[GCodeFile]"

    # Source image dimensions (pixels)
    image_width: int = 0
    image_height: int = 0

    # Statistics
    total_path_length: float = 0.0  # XY travel over all layers in mm
    estimated_time: float = 0.0  # seconds

    @property
    def total_points(self) -> int:
        return sum(len(layer) for layer in self.layers)
