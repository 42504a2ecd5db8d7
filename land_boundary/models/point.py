"""Data model for a single geographic point.

A GeoPoint is one vertex of a boundary polygon, one GPS fix, or one
parcel centroid.  Coordinates are decimal degrees on a WGS 84-like
sphere; no datum correction is applied anywhere in the engine.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from land_boundary.models.contracts import GeoPointPayload


@dataclass(frozen=True, slots=True)
class GeoPoint:
    """An immutable latitude/longitude pair in decimal degrees.

    Attributes:
        latitude: Degrees north (negative south).
        longitude: Degrees east (negative west).
    """

    latitude: float
    longitude: float

    def to_dict(self) -> GeoPointPayload:
        """Serialise to a plain dict for transport."""
        return {"latitude": self.latitude, "longitude": self.longitude}

    @classmethod
    def from_dict(cls, data: dict[str, object]) -> GeoPoint:
        """Deserialise from a ``{"latitude": ..., "longitude": ...}`` dict.

        Raises:
            TypeError: If a coordinate is missing or not a real number.
        """
        return cls(
            latitude=_coordinate(data, "latitude"),
            longitude=_coordinate(data, "longitude"),
        )

    def to_lon_lat(self) -> tuple[float, float]:
        """Return ``(lon, lat)``, the axis order used by GeoJSON."""
        return (self.longitude, self.latitude)


def _coordinate(data: dict[str, object], key: str) -> float:
    value = data.get(key)
    if isinstance(value, bool) or not isinstance(value, int | float):
        msg = f"{key} must be a number, got {type(value).__name__}"
        raise TypeError(msg)
    return float(value)
