"""Visiting order for the points of a layer.

AIDEV-NOTE: Greedy nearest-neighbor, O(n^2). The start point is the first
input point and ties go to the earliest remaining point, so the output is
fully determined by the input order.
"""

import math

import numpy as np

from models import Point


def order_nearest_neighbor(points: "list[Point]") -> "list[Point]":
    """Reorder points so each one is followed by its nearest unvisited point.

    Args:
        points: Unordered points (may be empty)

    Returns:
        A new list holding a permutation of the input
    """
    if not points:
        return []

    coords = np.array([(p.x, p.y) for p in points], dtype=np.float64)

    # Indices of unvisited points, kept in input order
    remaining = np.arange(1, len(points))
    current = 0
    order = [current]

    while remaining.size:
        dists = np.hypot(
            coords[remaining, 0] - coords[current, 0],
            coords[remaining, 1] - coords[current, 1],
        )
        # argmin returns the first occurrence of the minimum
        best = int(np.argmin(dists))
        current = int(remaining[best])
        order.append(current)
        remaining = np.delete(remaining, best)

    return [points[i] for i in order]


def path_length(points: "list[Point]") -> float:
    """Total XY travel between consecutive points in mm."""
    total = 0.0
    for i in range(1, len(points)):
        total += math.hypot(points[i].x - points[i - 1].x, points[i].y - points[i - 1].y)
    return total
