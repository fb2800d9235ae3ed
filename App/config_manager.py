"""Configuration parsing for the PointPlot generator.

This module turns raw setting values (form field text, JSON presets) into a
GenerationConfig. Each field is parsed on its own and falls back to its
default when it is missing or malformed, so a bad value never blocks a run.
"""

import json
import logging
import math
from dataclasses import replace
from pathlib import Path
from typing import Any, Callable, Mapping, Optional

from models import (
    CUSTOM_PLOT_SIZE,
    DEFAULT_GRID_SIZE,
    DEFAULT_NUM_LAYERS,
    DEFAULT_PLOT_SIZE,
    GenerationConfig,
    MachineParameters,
    PLOT_SIZES,
    PlotOrientation,
    plot_dimensions,
)

logger = logging.getLogger(__name__)


def _to_float(value: Any) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return number


def _to_int(value: Any) -> Optional[int]:
    number = _to_float(value)
    if number is None:
        return None
    return int(number)


def _positive(number: Optional[float]) -> Optional[float]:
    if number is None or number <= 0:
        return None
    return number


class ConfigManager:
    """Builds validated GenerationConfig objects from raw values."""

    def parse(self, data: Mapping[str, Any]) -> GenerationConfig:
        """Parse a mapping of raw values into a GenerationConfig.

        Recognized keys: grid_size, num_layers, point_diameter, z_point,
        z_travel, feed_rate_xy, feed_rate_z, plot_size, orientation,
        plot_width, plot_height. Values may be strings.

        Args:
            data: Raw settings (missing keys use defaults)

        Returns:
            GenerationConfig with every invalid field replaced by its default
        """
        defaults = MachineParameters()

        plot_width, plot_height = self._parse_plot_size(data, defaults)

        machine = MachineParameters(
            point_diameter=self._field(
                data, "point_diameter", defaults.point_diameter,
                lambda v: _positive(_to_float(v)),
            ),
            z_point=self._field(data, "z_point", defaults.z_point, _to_float),
            z_travel=self._field(data, "z_travel", defaults.z_travel, _to_float),
            feed_rate_xy=self._field(
                data, "feed_rate_xy", defaults.feed_rate_xy,
                lambda v: _positive(_to_float(v)),
            ),
            feed_rate_z=self._field(
                data, "feed_rate_z", defaults.feed_rate_z,
                lambda v: _positive(_to_float(v)),
            ),
            plot_width=plot_width,
            plot_height=plot_height,
        )

        return GenerationConfig(
            grid_size=self._field(
                data, "grid_size", DEFAULT_GRID_SIZE, self._parse_count
            ),
            num_layers=self._field(
                data, "num_layers", DEFAULT_NUM_LAYERS, self._parse_count
            ),
            machine=machine,
        )

    def load(self, config_path: Path) -> GenerationConfig:
        """Load a JSON settings preset, returning defaults if unreadable.

        Args:
            config_path: Path to a JSON object with the keys accepted by parse()

        Returns:
            GenerationConfig with loaded or default values
        """
        try:
            with open(config_path, "r") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("Could not load settings from %s: %s", config_path, e)
            return GenerationConfig()

        if not isinstance(data, dict):
            logger.warning("Settings file %s is not a JSON object", config_path)
            return GenerationConfig()

        logger.info("Loaded settings from %s", config_path)
        return self.parse(data)

    @staticmethod
    def _parse_count(value: Any) -> Optional[int]:
        number = _to_int(value)
        if number is None or number < 1:
            return None
        return number

    @staticmethod
    def _field(
        data: Mapping[str, Any],
        key: str,
        default: Any,
        parser: Callable[[Any], Any],
    ) -> Any:
        if key not in data or data[key] in (None, ""):
            return default
        value = parser(data[key])
        if value is None:
            logger.warning(
                "Invalid value %r for %s, using default %r", data[key], key, default
            )
            return default
        return value

    def _parse_plot_size(
        self, data: Mapping[str, Any], defaults: MachineParameters
    ) -> "tuple[float, float]":
        size_name = str(data.get("plot_size") or DEFAULT_PLOT_SIZE)

        try:
            orientation = PlotOrientation(
                str(data.get("orientation") or PlotOrientation.PORTRAIT.value).lower()
            )
        except ValueError:
            logger.warning(
                "Unknown orientation %r, using portrait", data.get("orientation")
            )
            orientation = PlotOrientation.PORTRAIT

        if size_name == CUSTOM_PLOT_SIZE:
            width = self._field(
                data, "plot_width", defaults.plot_width,
                lambda v: _positive(_to_float(v)),
            )
            height = self._field(
                data, "plot_height", defaults.plot_height,
                lambda v: _positive(_to_float(v)),
            )
            return width, height

        if size_name not in PLOT_SIZES:
            logger.warning("Unknown plot size %r, using %s", size_name, DEFAULT_PLOT_SIZE)
            size_name = DEFAULT_PLOT_SIZE
        return plot_dimensions(size_name, orientation)


def sanitize_config(config: GenerationConfig) -> GenerationConfig:
    """Replace out-of-range values of an already-built config with defaults.

    Numeric strings and ints are converted to floats so the emitter can
    format them.

    AIDEV-NOTE: Configs built in code bypass ConfigManager.parse, so the
    processor runs them through here before sampling.
    """
    defaults = MachineParameters()
    machine = config.machine

    fixes = {}
    for name in ("point_diameter", "feed_rate_xy", "feed_rate_z", "plot_width", "plot_height"):
        value = getattr(machine, name)
        number = _positive(_to_float(value))
        if number is None:
            logger.warning(
                "Invalid %s %r, using default %r", name, value, getattr(defaults, name)
            )
            fixes[name] = getattr(defaults, name)
        elif type(value) is not float:
            fixes[name] = number
    for name in ("z_point", "z_travel"):
        value = getattr(machine, name)
        number = _to_float(value)
        if number is None:
            logger.warning("Invalid %s %r, using default", name, value)
            fixes[name] = getattr(defaults, name)
        elif type(value) is not float:
            fixes[name] = number
    if fixes:
        machine = replace(machine, **fixes)

    grid_size = ConfigManager._parse_count(config.grid_size)
    if grid_size is None:
        logger.warning("Invalid grid size %r, using default", config.grid_size)
        grid_size = DEFAULT_GRID_SIZE
    num_layers = ConfigManager._parse_count(config.num_layers)
    if num_layers is None:
        logger.warning("Invalid layer count %r, using default", config.num_layers)
        num_layers = DEFAULT_NUM_LAYERS

    return GenerationConfig(grid_size=grid_size, num_layers=num_layers, machine=machine)
