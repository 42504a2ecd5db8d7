"""Boundary polygon validation.

``validate_polygon`` is the single authority on whether a boundary may
be persisted.  It never raises: every check runs, every failure is
collected in check order, and the caller decides what to block.

Checks:
1. At least three vertices
2. Area not below the minimum (default 0.1 acres)
3. Area not above the maximum (default 10 000 acres)
4. No two non-adjacent edges cross

Self-intersection uses the counter-clockwise orientation test on
(lon, lat) treated as planar coordinates, pairwise over all edges of
the closed ring.  The quadratic cost is fine for boundaries of a few
hundred vertices.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from land_boundary.core.constants import (
    DEFAULT_MAX_AREA_ACRES,
    DEFAULT_MIN_AREA_ACRES,
    MIN_POLYGON_POINTS,
)
from land_boundary.geometry.metrics import area_acres
from land_boundary.models.results import ErrorKind, ValidationResult

if TYPE_CHECKING:
    from collections.abc import Sequence

    from land_boundary.models.point import GeoPoint


def validate_polygon(
    points: Sequence[GeoPoint],
    *,
    min_area_acres: float = DEFAULT_MIN_AREA_ACRES,
    max_area_acres: float = DEFAULT_MAX_AREA_ACRES,
) -> ValidationResult:
    """Validate a boundary polygon, accumulating every failing check.

    Args:
        points: Boundary vertices; the closing edge is implicit.
        min_area_acres: Smallest acceptable area.
        max_area_acres: Largest acceptable area.

    Returns:
        A ``ValidationResult`` whose ``errors`` list every failure in
        check order.
    """
    errors: list[ErrorKind] = []

    if len(points) < MIN_POLYGON_POINTS:
        errors.append(ErrorKind.TOO_FEW_POINTS)

    area = area_acres(points)
    if area < min_area_acres:
        errors.append(ErrorKind.AREA_TOO_SMALL)
    if area > max_area_acres:
        errors.append(ErrorKind.AREA_TOO_LARGE)

    if has_self_intersection(points):
        errors.append(ErrorKind.SELF_INTERSECTING)

    return ValidationResult.from_errors(errors)


def has_self_intersection(points: Sequence[GeoPoint]) -> bool:
    """Whether any two non-adjacent edges of the closed ring cross.

    Edge ``i`` joins vertex ``i`` to vertex ``(i + 1) % n``.  Pairs of
    consecutive edges share a vertex and are skipped, including the
    first edge and the closing edge, which meet at vertex 0.
    """
    count = len(points)
    if count < 4:
        return False

    for i in range(count - 2):
        for j in range(i + 2, count):
            if i == 0 and j == count - 1:
                continue
            if segments_intersect(
                points[i],
                points[i + 1],
                points[j],
                points[(j + 1) % count],
            ):
                return True
    return False


def segments_intersect(p1: GeoPoint, p2: GeoPoint, p3: GeoPoint, p4: GeoPoint) -> bool:
    """Whether segment ``p1-p2`` properly crosses segment ``p3-p4``.

    Each segment's endpoints must lie on opposite sides of the other,
    judged by the sign of the orientation cross product.  Collinear or
    touching segments fall on whichever side the strict comparison
    puts them, so a repeated vertex can register as a crossing.
    """
    return _ccw(p1, p3, p4) != _ccw(p2, p3, p4) and _ccw(p1, p2, p3) != _ccw(p1, p2, p4)


def _ccw(a: GeoPoint, b: GeoPoint, c: GeoPoint) -> bool:
    return (c.longitude - a.longitude) * (b.latitude - a.latitude) > (
        b.longitude - a.longitude
    ) * (c.latitude - a.latitude)
