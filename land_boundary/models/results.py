"""Result models returned by the geometry engine.

- ``ErrorKind``: Why a boundary polygon was rejected
- ``ValidationResult``: Accumulated outcome of ``validate_polygon``
- ``PolygonMetrics``: Area, perimeter and centroid of a boundary

All results are frozen values, recomputed on every call and never
cached on the points they describe.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from land_boundary.models.contracts import (
        PolygonMetricsPayload,
        ValidationResultPayload,
    )
    from land_boundary.models.point import GeoPoint


class ErrorKind(enum.Enum):
    """Reasons a boundary fails validation, in check order.

    Values:
        TOO_FEW_POINTS:    Fewer than three vertices.
        AREA_TOO_SMALL:    Below the minimum parcel area.
        AREA_TOO_LARGE:    Above the maximum parcel area.
        SELF_INTERSECTING: Two non-adjacent edges cross.
    """

    TOO_FEW_POINTS = "too_few_points"
    AREA_TOO_SMALL = "area_too_small"
    AREA_TOO_LARGE = "area_too_large"
    SELF_INTERSECTING = "self_intersecting"

    @property
    def message(self) -> str:
        """User-facing description shown next to the boundary editor."""
        return _ERROR_MESSAGES[self]


_ERROR_MESSAGES: dict[ErrorKind, str] = {
    ErrorKind.TOO_FEW_POINTS: "Polygon must have at least 3 points",
    ErrorKind.AREA_TOO_SMALL: "Land area must be at least 0.1 acres",
    ErrorKind.AREA_TOO_LARGE: "Land area exceeds maximum limit of 10000 acres",
    ErrorKind.SELF_INTERSECTING: "Polygon boundaries cannot cross each other",
}


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Outcome of validating a boundary polygon.

    ``errors`` is empty if and only if ``valid`` is ``True``; every
    failing check is present, in the order the checks run.
    """

    valid: bool
    errors: tuple[ErrorKind, ...] = ()

    @classmethod
    def from_errors(cls, errors: list[ErrorKind]) -> ValidationResult:
        return cls(valid=not errors, errors=tuple(errors))

    def to_dict(self) -> ValidationResultPayload:
        return {
            "valid": self.valid,
            "errors": [kind.value for kind in self.errors],
            "messages": [kind.message for kind in self.errors],
        }


@dataclass(frozen=True, slots=True)
class PolygonMetrics:
    """Measured properties of a boundary polygon.

    Attributes:
        area_acres: Planar (equirectangular) area in acres.
        perimeter_meters: Haversine length of the closed ring in metres.
        centroid: Arithmetic mean of the vertices (not area-weighted).
    """

    area_acres: float
    perimeter_meters: float
    centroid: GeoPoint

    def to_dict(self) -> PolygonMetricsPayload:
        return {
            "area_acres": self.area_acres,
            "perimeter_meters": self.perimeter_meters,
            "centroid": self.centroid.to_dict(),
        }
