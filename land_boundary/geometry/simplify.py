"""Douglas-Peucker boundary simplification.

Reduces the vertex count of a walked or tapped boundary before it is
stored or transmitted.  Distances are measured in raw (lat, lon) degree
space, which is adequate for the roughly one-metre tolerances used on
field boundaries and meaningless for large extents.

The classic formulation recurses on list slices and concatenates the
halves.  Here the same splits are driven by an explicit stack of index
ranges over the caller's sequence, marking which vertices survive, so
long GPS walks neither copy sub-lists nor hit the recursion limit.  The
result is identical: a range is split at its farthest vertex (lowest
index on ties) when that vertex lies strictly beyond the tolerance,
otherwise only its endpoints survive.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from land_boundary.core.constants import DEFAULT_SIMPLIFY_TOLERANCE_DEG

if TYPE_CHECKING:
    from collections.abc import Sequence

    from land_boundary.models.point import GeoPoint


def simplify(
    points: Sequence[GeoPoint],
    tolerance_degrees: float = DEFAULT_SIMPLIFY_TOLERANCE_DEG,
) -> list[GeoPoint]:
    """Simplify a point sequence with the Douglas-Peucker algorithm.

    Args:
        points: Ordered boundary vertices.
        tolerance_degrees: Maximum perpendicular deviation, in degrees,
            for a vertex to be dropped.

    Returns:
        A new list containing the surviving vertices in their original
        order.  The first and last input points are always kept;
        sequences of two or fewer points are returned unchanged.
    """
    count = len(points)
    if count <= 2:
        return list(points)

    keep = [False] * count
    keep[0] = keep[count - 1] = True
    ranges = [(0, count - 1)]

    while ranges:
        start, end = ranges.pop()
        split_index, max_distance = _farthest_vertex(points, start, end)
        if split_index > start and max_distance > tolerance_degrees:
            keep[split_index] = True
            ranges.append((split_index, end))
            ranges.append((start, split_index))

    return [point for point, kept in zip(points, keep, strict=True) if kept]


def _farthest_vertex(points: Sequence[GeoPoint], start: int, end: int) -> tuple[int, float]:
    """Index and distance of the interior vertex farthest from the chord.

    Returns ``(start, 0.0)`` when the range has no interior vertex or
    every interior vertex lies on the chord.
    """
    max_distance = 0.0
    max_index = start
    chord_start = points[start]
    chord_end = points[end]
    for i in range(start + 1, end):
        d = perpendicular_distance(points[i], chord_start, chord_end)
        if d > max_distance:
            max_distance = d
            max_index = i
    return max_index, max_distance


def perpendicular_distance(point: GeoPoint, line_start: GeoPoint, line_end: GeoPoint) -> float:
    """Euclidean distance in degrees from *point* to the chord segment.

    The foot of the perpendicular is clamped to the segment, so points
    beyond either end measure to the nearer endpoint.  A zero-length
    chord (a closed ring's first and last vertex) measures to its start.
    """
    a = point.latitude - line_start.latitude
    b = point.longitude - line_start.longitude
    c = line_end.latitude - line_start.latitude
    d = line_end.longitude - line_start.longitude

    length_sq = c * c + d * d
    param = (a * c + b * d) / length_sq if length_sq != 0 else -1.0

    if param < 0:
        nearest_lat, nearest_lon = line_start.latitude, line_start.longitude
    elif param > 1:
        nearest_lat, nearest_lon = line_end.latitude, line_end.longitude
    else:
        nearest_lat = line_start.latitude + param * c
        nearest_lon = line_start.longitude + param * d

    return math.hypot(point.latitude - nearest_lat, point.longitude - nearest_lon)
