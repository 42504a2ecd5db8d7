"""Geographic primitives shared by every geometry module.

- Haversine great-circle distance on a spherical Earth
- Local equirectangular projection to planar metres
- Arithmetic-mean centroid

Accuracy is survey-grade for fields up to tens of kilometres across.
There is no ellipsoid or datum correction, and the projection is only
meaningful over a few kilometres around its reference centre.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from land_boundary.core.constants import EARTH_RADIUS_M
from land_boundary.models.point import GeoPoint

if TYPE_CHECKING:
    from collections.abc import Sequence


def distance(a: GeoPoint, b: GeoPoint) -> float:
    """Great-circle distance between two points in metres (haversine)."""
    lat1 = math.radians(a.latitude)
    lat2 = math.radians(b.latitude)
    d_lat = math.radians(b.latitude - a.latitude)
    d_lon = math.radians(b.longitude - a.longitude)

    h = math.sin(d_lat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(d_lon / 2) ** 2
    return EARTH_RADIUS_M * 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))


def equirectangular_project(point: GeoPoint, reference_center: GeoPoint) -> tuple[float, float]:
    """Project *point* to planar ``(x, y)`` metres around *reference_center*.

    ``x`` grows east and is scaled by the cosine of the reference
    latitude; ``y`` grows north.  Not valid for polygons spanning a
    large latitude range.
    """
    x = (
        EARTH_RADIUS_M
        * math.radians(point.longitude - reference_center.longitude)
        * math.cos(math.radians(reference_center.latitude))
    )
    y = EARTH_RADIUS_M * math.radians(point.latitude - reference_center.latitude)
    return (x, y)


def centroid(points: Sequence[GeoPoint]) -> GeoPoint:
    """Arithmetic mean of latitudes and longitudes.

    This is a vertex average, not an area-weighted centroid: it is close
    for near-convex fields and biased toward densely sampled stretches
    of concave ones.  An empty sequence yields ``GeoPoint(0.0, 0.0)``.
    """
    if not points:
        return GeoPoint(latitude=0.0, longitude=0.0)
    count = len(points)
    return GeoPoint(
        latitude=sum(p.latitude for p in points) / count,
        longitude=sum(p.longitude for p in points) / count,
    )
