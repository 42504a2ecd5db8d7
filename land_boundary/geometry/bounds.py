"""Axis-aligned bounding boxes for boundaries.

Used to frame a parcel on the map and to ask whether one region (say,
an area the app has already fetched tiles for) covers another.  Boxes
do not wrap across the antimeridian.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from land_boundary.models.point import GeoPoint


@dataclass(frozen=True, slots=True)
class BoundingBox:
    """Latitude/longitude extent in decimal degrees.

    Attributes:
        north: Maximum latitude.
        south: Minimum latitude.
        east: Maximum longitude.
        west: Minimum longitude.
    """

    north: float
    south: float
    east: float
    west: float

    def contains(self, other: BoundingBox) -> bool:
        """Whether *other* lies entirely within this box (edges inclusive)."""
        return (
            other.north <= self.north
            and other.south >= self.south
            and other.east <= self.east
            and other.west >= self.west
        )

    def contains_point(self, point: GeoPoint) -> bool:
        return (
            self.south <= point.latitude <= self.north
            and self.west <= point.longitude <= self.east
        )

    def to_list(self) -> list[float]:
        """``[min_lon, min_lat, max_lon, max_lat]``, the GeoJSON bbox order."""
        return [self.west, self.south, self.east, self.north]


def compute_bbox(points: Sequence[GeoPoint]) -> BoundingBox | None:
    """Tight bounding box of *points*, or ``None`` when there are none."""
    if not points:
        return None
    lats = [p.latitude for p in points]
    lons = [p.longitude for p in points]
    return BoundingBox(north=max(lats), south=min(lats), east=max(lons), west=min(lons))
