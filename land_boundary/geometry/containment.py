"""Point-in-polygon containment by ray casting (even-odd rule).

Used to tell which parcel a tapped map location or a live GPS fix falls
in.  Longitude is the x axis and latitude the y axis; the ring is
closed implicitly.  Points exactly on an edge or vertex may come out
either way, as with any ray-casting test.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from land_boundary.models.point import GeoPoint


def point_in_polygon(point: GeoPoint, polygon: Sequence[GeoPoint]) -> bool:
    """Whether *point* lies inside *polygon*.

    Casts a ray in the +longitude direction and toggles on every edge
    it crosses.  An empty polygon contains nothing.
    """
    x, y = point.longitude, point.latitude
    inside = False

    j = len(polygon) - 1
    for i in range(len(polygon)):
        xi, yi = polygon[i].longitude, polygon[i].latitude
        xj, yj = polygon[j].longitude, polygon[j].latitude
        if (yi > y) != (yj > y) and x < (xj - xi) * (y - yi) / (yj - yi) + xi:
            inside = not inside
        j = i

    return inside
