"""End-to-end tests for the layer processor."""

import numpy as np
import pytest
from PIL import Image

from models import GCodeFile, GenerationConfig, MachineParameters
from point_layers import LayerProcessor
from point_layers.ordering import order_nearest_neighbor
from point_layers.sampling import sample_layers
from points_to_gcode import count_point_blocks


@pytest.fixture
def gradient_image():
    """64x32 horizontal gradient from black to white."""
    row = np.linspace(0, 255, 64).astype(np.uint8)
    gray = np.tile(row, (32, 1))
    return Image.fromarray(np.stack([gray, gray, gray], axis=-1))


def test_one_file_per_layer(gradient_image):
    result = LayerProcessor(GenerationConfig(grid_size=4, num_layers=4)).process(
        gradient_image
    )

    assert [f.name for f in result.files] == [
        "layer_1.gcode", "layer_2.gcode", "layer_3.gcode", "layer_4.gcode",
    ]
    assert len(result.layers) == 4
    for gcode_file, layer in zip(result.files, result.layers):
        assert count_point_blocks(gcode_file.content) == len(layer)
        assert f"Layer {layer.number}" in gcode_file.content


def test_all_samples_are_emitted(gradient_image):
    result = LayerProcessor(GenerationConfig(grid_size=4, num_layers=3)).process(
        gradient_image
    )

    assert result.total_points == 16 * 8
    assert sum(count_point_blocks(f.content) for f in result.files) == 16 * 8
    assert (result.image_width, result.image_height) == (64, 32)


def test_layers_are_nearest_neighbor_ordered(gradient_image):
    config = GenerationConfig(grid_size=8, num_layers=2)

    result = LayerProcessor(config).process(gradient_image)

    sampled = sample_layers(
        gradient_image, 8, 2, config.machine.plot_width, config.machine.plot_height
    )
    for layer, raw in zip(result.layers, sampled):
        assert layer.points == order_nearest_neighbor(raw.points)


def test_empty_layers_still_produce_documents():
    white = Image.new("RGB", (10, 10), (255, 255, 255))

    result = LayerProcessor(GenerationConfig(grid_size=2, num_layers=3)).process(white)

    assert [count_point_blocks(f.content) for f in result.files] == [0, 0, 25]
    for gcode_file in result.files[:2]:
        assert "; Number of points: 0" in gcode_file.content
        assert gcode_file.content.endswith("M30 ; Program end")


def test_missing_image_raises():
    with pytest.raises(ValueError, match="No image loaded"):
        LayerProcessor().process(None)


def test_invalid_config_falls_back_to_defaults():
    config = GenerationConfig(
        grid_size=0,
        num_layers=-2,
        machine=MachineParameters(point_diameter=-1, feed_rate_xy=0, plot_width=-5),
    )

    processor = LayerProcessor(config)

    assert processor.config.grid_size == 4
    assert processor.config.num_layers == 4
    assert processor.config.machine.point_diameter == 4.0
    assert processor.config.machine.feed_rate_xy == 13000.0
    assert processor.config.machine.plot_width == 210.0


def test_deterministic(gradient_image):
    config = GenerationConfig(grid_size=3, num_layers=5)

    first = LayerProcessor(config).process(gradient_image)
    second = LayerProcessor(config).process(gradient_image)

    assert first.files == second.files


def test_statistics(gradient_image):
    result = LayerProcessor(GenerationConfig(grid_size=8, num_layers=2)).process(
        gradient_image
    )

    assert result.total_path_length > 0
    assert result.estimated_time > 0


def test_save_files(tmp_path):
    files = [GCodeFile("layer_1.gcode", "G28\nM30"), GCodeFile("layer_2.gcode", "")]

    written = LayerProcessor.save_files(files, tmp_path / "out")

    assert written == [tmp_path / "out" / "layer_1.gcode", tmp_path / "out" / "layer_2.gcode"]
    assert written[0].read_text() == "G28\nM30"
    assert written[1].read_text() == ""


def test_numeric_strings_in_machine_config():
    config = GenerationConfig(
        machine=MachineParameters(z_travel="10", feed_rate_xy="13000", plot_width="210")
    )

    processor = LayerProcessor(config)
    result = processor.process(Image.new("RGB", (4, 4)))

    assert processor.config.machine.z_travel == 10.0
    assert processor.config.machine.feed_rate_xy == 13000.0
    assert processor.config.machine.plot_width == 210.0
    assert "G0 Z10.000 F2500 ; Move to travel height" in result.files[0].content
    assert "G0 X0.000 Y0.000 F13000" in result.files[0].content
