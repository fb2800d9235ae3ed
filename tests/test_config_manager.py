"""Tests for configuration parsing and fallback to defaults."""

import json

import pytest

from config_manager import ConfigManager, sanitize_config
from models import (
    GenerationConfig,
    MachineParameters,
    PlotOrientation,
    match_plot_size,
    plot_dimensions,
)


@pytest.fixture
def manager():
    return ConfigManager()


def test_empty_mapping_gives_defaults(manager):
    config = manager.parse({})

    assert config == GenerationConfig()
    assert config.grid_size == 4
    assert config.num_layers == 4
    assert config.machine == MachineParameters(
        point_diameter=4.0,
        z_point=0.0,
        z_travel=10.0,
        feed_rate_xy=13000.0,
        feed_rate_z=2500.0,
        plot_width=210.0,
        plot_height=297.0,
    )


def test_string_values_are_parsed(manager):
    config = manager.parse(
        {
            "grid_size": "8",
            "num_layers": "3",
            "point_diameter": "2.5",
            "z_point": "-1.5",
            "z_travel": "5",
            "feed_rate_xy": "9000",
            "feed_rate_z": "1200",
        }
    )

    assert config.grid_size == 8
    assert config.num_layers == 3
    assert config.machine.point_diameter == 2.5
    assert config.machine.z_point == -1.5
    assert config.machine.z_travel == 5.0
    assert config.machine.feed_rate_xy == 9000.0
    assert config.machine.feed_rate_z == 1200.0


@pytest.mark.parametrize(
    "key,value,expected",
    [
        ("feed_rate_xy", "abc", 13000.0),
        ("feed_rate_xy", "0", 13000.0),
        ("feed_rate_z", "-10", 2500.0),
        ("point_diameter", "nan", 4.0),
        ("point_diameter", None, 4.0),
        ("z_travel", "", 10.0),
        ("z_travel", "high", 10.0),
    ],
)
def test_malformed_machine_values_use_defaults(manager, key, value, expected):
    config = manager.parse({key: value})

    assert getattr(config.machine, key) == expected


@pytest.mark.parametrize("value", ["0", "-3", "four", "", None, "inf"])
def test_malformed_counts_use_defaults(manager, value):
    config = manager.parse({"grid_size": value, "num_layers": value})

    assert config.grid_size == 4
    assert config.num_layers == 4


def test_zero_pen_down_height_is_kept(manager):
    config = manager.parse({"z_point": 0, "z_travel": "0"})

    assert config.machine.z_point == 0.0
    assert config.machine.z_travel == 0.0


@pytest.mark.parametrize(
    "size,orientation,expected",
    [
        ("A4", "portrait", (210.0, 297.0)),
        ("A4", "landscape", (297.0, 210.0)),
        ("A3", "portrait", (297.0, 420.0)),
        ("A3", "landscape", (420.0, 297.0)),
        ("A2", "portrait", (420.0, 594.0)),
        ("A2", "LANDSCAPE", (594.0, 420.0)),
    ],
)
def test_preset_plot_sizes(manager, size, orientation, expected):
    machine = manager.parse({"plot_size": size, "orientation": orientation}).machine

    assert (machine.plot_width, machine.plot_height) == expected


def test_custom_plot_size(manager):
    machine = manager.parse(
        {"plot_size": "Custom", "plot_width": "300", "plot_height": "bad"}
    ).machine

    assert (machine.plot_width, machine.plot_height) == (300.0, 297.0)


def test_unknown_plot_size_and_orientation(manager):
    machine = manager.parse({"plot_size": "Letter", "orientation": "diagonal"}).machine

    assert (machine.plot_width, machine.plot_height) == (210.0, 297.0)


def test_plot_dimensions_lookup():
    assert plot_dimensions("A3", PlotOrientation.LANDSCAPE) == (420.0, 297.0)
    with pytest.raises(KeyError):
        plot_dimensions("B5")


def test_load_json_preset(manager, tmp_path):
    path = tmp_path / "preset.json"
    path.write_text(json.dumps({"grid_size": 2, "num_layers": 6, "feed_rate_z": "oops"}))

    config = manager.load(path)

    assert config.grid_size == 2
    assert config.num_layers == 6
    assert config.machine.feed_rate_z == 2500.0


def test_load_missing_file_returns_defaults(manager, tmp_path):
    assert manager.load(tmp_path / "missing.json") == GenerationConfig()


@pytest.mark.parametrize("text", ["not json", "[1, 2, 3]"])
def test_load_invalid_file_returns_defaults(manager, tmp_path, text):
    path = tmp_path / "bad.json"
    path.write_text(text)

    assert manager.load(path) == GenerationConfig()


def test_sanitize_keeps_valid_config():
    config = GenerationConfig(
        grid_size=2,
        num_layers=8,
        machine=MachineParameters(point_diameter=1.0, z_point=-2.0, z_travel=3.0),
    )

    assert sanitize_config(config) == config


def test_sanitize_replaces_invalid_fields():
    config = GenerationConfig(
        grid_size=0,
        num_layers=3,
        machine=MachineParameters(feed_rate_z=-1.0, z_travel=float("nan")),
    )

    sanitized = sanitize_config(config)

    assert sanitized.grid_size == 4
    assert sanitized.num_layers == 3
    assert sanitized.machine.feed_rate_z == 2500.0
    assert sanitized.machine.z_travel == 10.0


def test_sanitize_converts_numeric_strings():
    config = GenerationConfig(
        grid_size="3",
        machine=MachineParameters(z_travel="10", feed_rate_xy="13000", plot_width=300),
    )

    sanitized = sanitize_config(config)
    machine = sanitized.machine

    assert sanitized.grid_size == 3
    assert machine.z_travel == 10.0 and type(machine.z_travel) is float
    assert machine.feed_rate_xy == 13000.0 and type(machine.feed_rate_xy) is float
    assert machine.plot_width == 300.0 and type(machine.plot_width) is float


def test_match_plot_size():
    assert match_plot_size(210.0, 297.0) == ("A4", PlotOrientation.PORTRAIT)
    assert match_plot_size(420, 297) == ("A3", PlotOrientation.LANDSCAPE)
    assert match_plot_size(594.0, 420.0) == ("A2", PlotOrientation.LANDSCAPE)
    assert match_plot_size(300.0, 200.0) is None
