"""Layer processor orchestrating the complete point pipeline.

AIDEV-NOTE: Image buffer + GenerationConfig in, one G-code document per
brightness layer out. Sampling runs once; ordering and emission run per
layer. Any error aborts the whole run, so callers get all layers or none.
"""

import logging
from pathlib import Path

import numpy as np
from PIL import Image

from config_manager import sanitize_config
from models import GCodeFile, GenerationConfig, GenerationResult
from points_to_gcode import PointsToGCodeConverter

from .ordering import order_nearest_neighbor, path_length
from .sampling import sample_layers
from .utils import image_to_rgba_array

logger = logging.getLogger(__name__)


def layer_file_name(layer_number: int) -> str:
    """File name for a 1-based layer number."""
    return f"layer_{layer_number}.gcode"


class LayerProcessor:
    """Processes images into per-layer G-code programs."""

    def __init__(self, config: "GenerationConfig | None" = None):
        self.config = sanitize_config(config or GenerationConfig())
        self.converter = PointsToGCodeConverter(self.config.machine)

    def process(self, image: "Image.Image | np.ndarray | None") -> GenerationResult:
        """Execute the complete generation pipeline.

        Args:
            image: Decoded image buffer

        Returns:
            GenerationResult with the ordered layers and their G-code files

        Raises:
            ValueError: If no image is given or it cannot be sampled
        """
        if image is None:
            raise ValueError("No image loaded")

        config = self.config
        machine = config.machine
        pixels = image_to_rgba_array(image)
        height, width = pixels.shape[:2]

        logger.info(
            "Generating %d layers from %dx%d image (grid %d px, sheet %gx%g mm)",
            config.num_layers,
            width,
            height,
            config.grid_size,
            machine.plot_width,
            machine.plot_height,
        )

        layers = sample_layers(
            pixels,
            config.grid_size,
            config.num_layers,
            machine.plot_width,
            machine.plot_height,
        )

        files = []
        total_length = 0.0
        total_time = 0.0
        for layer in layers:
            layer.points = order_nearest_neighbor(layer.points)
            content = self.converter.layer_to_gcode(layer.points, layer.number)
            files.append(GCodeFile(name=layer_file_name(layer.number), content=content))

            length = path_length(layer.points)
            total_length += length
            total_time += self.converter.estimate_execution_time(layer.points)
            logger.info(
                "Layer %d: %d points, %.1f mm travel", layer.number, len(layer), length
            )

        result = GenerationResult(
            layers=layers,
            files=files,
            image_width=width,
            image_height=height,
            total_path_length=total_length,
            estimated_time=total_time,
        )
        logger.info(
            "Generation complete: %d points in %d files", result.total_points, len(files)
        )
        return result

    @staticmethod
    def save_files(files: "list[GCodeFile]", directory: "str | Path") -> "list[Path]":
        """Write G-code files into a directory.

        Args:
            files: Documents to write
            directory: Target directory (created if missing)

        Returns:
            Paths of the written files, in input order
        """
        directory = Path(directory)
        directory.mkdir(parents=True, exist_ok=True)

        written = []
        for gcode_file in files:
            path = directory / gcode_file.name
            path.write_text(gcode_file.content, encoding="utf-8")
            written.append(path)
            logger.info("Saved %s", path)
        return written
