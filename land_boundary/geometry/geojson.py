"""GeoJSON conversion at the persistence boundary.

Internally a boundary is an unclosed list of ``GeoPoint``; RFC 7946
requires a Polygon ring to repeat its first position at the end.
``to_geojson`` adds that closing position.  ``from_geojson`` keeps every
position it is given, closing duplicate included, because a genuine
zero-length edge and a closing duplicate are the same input; use
``open_ring`` to drop it explicitly.

Parsing never raises.  Anything that is not a well-formed single-ring
Polygon (or Point) yields an empty result, so callers that must tell
"no boundary" from "bad input" need their own check.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, Any

from land_boundary.core.constants import (
    MAX_LATITUDE,
    MAX_LONGITUDE,
    MIN_LATITUDE,
    MIN_LONGITUDE,
)
from land_boundary.models.point import GeoPoint

if TYPE_CHECKING:
    from collections.abc import Sequence

    from land_boundary.models.contracts import GeoJSONPoint, GeoJSONPolygon

logger = logging.getLogger("land_boundary.geometry.geojson")


# ---------------------------------------------------------------------------
# Polygon
# ---------------------------------------------------------------------------


def to_geojson(points: Sequence[GeoPoint]) -> GeoJSONPolygon:
    """Encode a boundary as a GeoJSON Polygon with an explicitly closed ring."""
    ring = [[p.longitude, p.latitude] for p in points]
    if ring:
        ring.append(list(ring[0]))
    return {"type": "Polygon", "coordinates": [ring]}


def from_geojson(geojson: Any) -> list[GeoPoint]:
    """Decode the outer ring of a GeoJSON Polygon.

    Only ``coordinates[0]`` is read.  Positions are ``[lon, lat]``;
    any altitude is ignored.

    Returns:
        Every position of the outer ring, in order, or an empty list if
        *geojson* is not a Polygon or any position is malformed.
    """
    if not isinstance(geojson, dict) or geojson.get("type") != "Polygon":
        return []

    rings = geojson.get("coordinates")
    if not isinstance(rings, list) or not rings or not isinstance(rings[0], list):
        return []

    if len(rings) > 1:
        logger.warning(
            "Ignoring interior rings in GeoJSON Polygon | rings=%d",
            len(rings),
        )

    points: list[GeoPoint] = []
    for position in rings[0]:
        point = _position_to_point(position)
        if point is None:
            return []
        points.append(point)
    return points


def open_ring(points: Sequence[GeoPoint]) -> list[GeoPoint]:
    """Drop a trailing point that repeats the first one."""
    if len(points) > 1 and points[-1] == points[0]:
        return list(points[:-1])
    return list(points)


# ---------------------------------------------------------------------------
# Point
# ---------------------------------------------------------------------------


def point_to_geojson(point: GeoPoint) -> GeoJSONPoint:
    """Encode a parcel centre as a GeoJSON Point."""
    return {"type": "Point", "coordinates": [point.longitude, point.latitude]}


def point_from_geojson(geojson: Any) -> GeoPoint | None:
    """Decode a GeoJSON Point; ``None`` for anything else."""
    if not isinstance(geojson, dict) or geojson.get("type") != "Point":
        return None
    return _position_to_point(geojson.get("coordinates"))


def _position_to_point(position: object) -> GeoPoint | None:
    if not isinstance(position, list | tuple) or len(position) < 2:
        return None
    lon, lat = position[0], position[1]
    for value in (lon, lat):
        if isinstance(value, bool) or not isinstance(value, int | float):
            return None
        if not math.isfinite(value):
            return None
    if not (MIN_LONGITUDE <= lon <= MAX_LONGITUDE and MIN_LATITUDE <= lat <= MAX_LATITUDE):
        return None
    return GeoPoint(latitude=float(lat), longitude=float(lon))
