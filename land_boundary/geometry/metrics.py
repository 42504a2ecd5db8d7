"""Polygon measurements: area, perimeter and centroid.

All functions are permissive: fewer points than a polygon needs gives
zero rather than an error, so a boundary editor can display a live
"0.0 acres" while the user is still placing points.  Rejection happens
only in ``validate_polygon``.

The ring is always treated as closed; callers never repeat the first
point at the end.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from land_boundary.core.constants import ACRES_PER_SQ_METRE, MIN_POLYGON_POINTS
from land_boundary.geometry.primitives import centroid, distance, equirectangular_project
from land_boundary.models.results import PolygonMetrics

if TYPE_CHECKING:
    from collections.abc import Sequence

    from land_boundary.models.point import GeoPoint


def area_acres(points: Sequence[GeoPoint]) -> float:
    """Planar area of the closed ring in acres.

    Projects every vertex around the vertex mean with an equirectangular
    projection, then applies the shoelace formula.  The absolute value
    makes the result independent of winding direction; the closed-ring
    sum makes it independent of the starting vertex.

    Returns:
        Area in acres, ``0.0`` for fewer than three points.
    """
    if len(points) < MIN_POLYGON_POINTS:
        return 0.0

    center = centroid(points)
    projected = [equirectangular_project(p, center) for p in points]

    twice_area = 0.0
    count = len(projected)
    for i in range(count):
        x_i, y_i = projected[i]
        x_j, y_j = projected[(i + 1) % count]
        twice_area += x_i * y_j - x_j * y_i

    return abs(twice_area) / 2 * ACRES_PER_SQ_METRE


def perimeter_meters(points: Sequence[GeoPoint]) -> float:
    """Length of the closed ring in metres, closing edge included.

    Returns:
        Perimeter in metres, ``0.0`` for fewer than two points.
    """
    if len(points) < 2:
        return 0.0
    count = len(points)
    return sum(distance(points[i], points[(i + 1) % count]) for i in range(count))


def compute_metrics(points: Sequence[GeoPoint]) -> PolygonMetrics:
    """Measure a boundary: area, perimeter and vertex-mean centroid."""
    return PolygonMetrics(
        area_acres=area_acres(points),
        perimeter_meters=perimeter_meters(points),
        centroid=centroid(points),
    )
