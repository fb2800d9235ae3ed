"""Image to point-layer G-code pipeline.

AIDEV-NOTE: This package handles the pipeline from image to per-layer
plotter programs. Organized into modular components:
- processor: LayerProcessor orchestrator
- sampling: Brightness sampling into layers
- ordering: Nearest-neighbor point ordering
- filters: Pixel-remapping filters
- framing: Image placement on the page
- utils: Loading, luminance and coordinate helpers
"""

from .filters import apply_spiral_filter
from .framing import PlotFrame
from .ordering import order_nearest_neighbor
from .processor import LayerProcessor
from .sampling import sample_layers
from .utils import load_image

__all__ = [
    "LayerProcessor",
    "PlotFrame",
    "apply_spiral_filter",
    "load_image",
    "order_nearest_neighbor",
    "sample_layers",
]
