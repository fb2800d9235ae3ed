"""Convert ordered point layers to plotter G-code.

AIDEV-NOTE: Every point becomes one "dot" block: move to XY at travel
height, drop to the pen-down Z, lift back to travel height. The converter
keeps the order it is given; ordering happens before it is called.
"""

import math

from models import MachineParameters, Point

# Header and footer commands
UNITS_MM = "G21 ; Set units to millimeters"
ABSOLUTE_POSITIONING = "G90 ; Set to absolute positioning"
HOME_ALL = "G28 ; Home all axes"
PROGRAM_END = "M30 ; Program end"


def format_number(value: float) -> str:
    """Shortest plain rendering of a feed or size ("13000", "0.5")."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return f"{value:.3f}".rstrip("0").rstrip(".")


class PointsToGCodeConverter:
    """Converts ordered points to a G-code program for one layer."""

    def __init__(self, machine: MachineParameters):
        self.machine = machine

    def header_lines(self, layer_number: int, point_count: int) -> "list[str]":
        """Descriptive comments, machine setup and the initial lift."""
        m = self.machine
        return [
            f"; G-Code generated for Layer {layer_number}",
            f"; Point Diameter: {format_number(m.point_diameter)} mm",
            f"; Number of points: {point_count}",
            "",
            UNITS_MM,
            ABSOLUTE_POSITIONING,
            HOME_ALL,
            f"G0 Z{m.z_travel:.3f} F{format_number(m.feed_rate_z)} ; Move to travel height",
            "",
        ]

    def footer_lines(self) -> "list[str]":
        return ["", HOME_ALL, PROGRAM_END]

    def point_to_commands(self, point: Point) -> "list[str]":
        """Commands to mark a single point.

        Args:
            point: Target point in mm

        Returns:
            XY move, pen down, pen up (e.g. "G0 X5.000 Y5.000 F13000")
        """
        m = self.machine
        feed_z = format_number(m.feed_rate_z)
        return [
            f"G0 X{point.x:.3f} Y{point.y:.3f} F{format_number(m.feed_rate_xy)}",
            f"G0 Z{m.z_point:.3f} F{feed_z}",
            f"G0 Z{m.z_travel:.3f} F{feed_z}",
        ]

    def layer_to_gcode(self, points: "list[Point]", layer_number: int) -> str:
        """Build the complete program for one layer.

        Args:
            points: Points in visiting order (may be empty)
            layer_number: 1-based layer number for the header comment

        Returns:
            Newline-joined G-code text
        """
        lines = self.header_lines(layer_number, len(points))
        for point in points:
            lines.extend(self.point_to_commands(point))
        lines.extend(self.footer_lines())
        return "\n".join(lines)

    def estimate_execution_time(self, points: "list[Point]") -> float:
        """Estimate the run time of a layer in seconds.

        AIDEV-NOTE: Straight-line XY travel at the XY feed plus a down and up
        stroke per point at the Z feed. Ignores homing and acceleration.
        """
        m = self.machine
        if m.feed_rate_xy <= 0 or m.feed_rate_z <= 0:
            return 0.0

        xy_distance = 0.0
        prev = None
        for point in points:
            if prev is not None:
                xy_distance += math.hypot(point.x - prev.x, point.y - prev.y)
            prev = point

        z_distance = 2 * abs(m.z_travel - m.z_point) * len(points)

        # Feeds are mm/min
        return (xy_distance / m.feed_rate_xy + z_distance / m.feed_rate_z) * 60.0


def count_point_blocks(content: str) -> int:
    """Count XY moves (one per marked point) in a G-code document."""
    return sum(
        1
        for line in content.splitlines()
        if line.startswith("G0 X") and " Y" in line
    )
