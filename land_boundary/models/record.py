"""Pydantic model for the boundary record handed to persistence.

After a boundary passes validation the engine produces one
``LandBoundaryRecord``: the measured area, the (simplified) boundary as
a GeoJSON Polygon and the centre point as a GeoJSON Point.  The
persistence collaborator stores it; the engine itself never writes.

Units are explicit in every field name: acres, metres, degrees.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, Field, field_validator

from land_boundary.core.constants import BOUNDARY_METHODS

# Schema version for forward compatibility
SCHEMA_VERSION = "land-boundary-v1"


def _utc_now_iso() -> str:
    return datetime.now(UTC).isoformat()


class LandBoundaryRecord(BaseModel):
    """A validated land boundary, ready for the persistence layer.

    Attributes:
        schema_version: Schema identifier for forward compatibility.
        area_acres: Area of the captured (unsimplified) boundary in acres.
        perimeter_meters: Perimeter of the captured boundary in metres.
        boundary_geojson: GeoJSON Polygon of the stored boundary,
            ring explicitly closed.
        center_point_geojson: GeoJSON Point of the boundary centroid.
        point_count: Vertices captured by the user or the GPS walk.
        stored_point_count: Vertices kept after simplification.
        boundary_method: ``"manual"`` (tapped) or ``"gps_walk"``.
        gps_accuracy_m: Reported GPS accuracy for walked boundaries.
        created_at: Record creation timestamp (ISO 8601, UTC).
    """

    schema_version: str = Field(default=SCHEMA_VERSION, alias="$schema")
    area_acres: float = Field(ge=0.0)
    perimeter_meters: float = Field(default=0.0, ge=0.0)
    boundary_geojson: dict[str, Any]
    center_point_geojson: dict[str, Any]
    point_count: int = Field(default=0, ge=0)
    stored_point_count: int = Field(default=0, ge=0)
    boundary_method: str = "manual"
    gps_accuracy_m: float | None = None
    created_at: str = Field(default_factory=_utc_now_iso)

    model_config = {"populate_by_name": True}

    @field_validator("boundary_method")
    @classmethod
    def _known_method(cls, value: str) -> str:
        if value not in BOUNDARY_METHODS:
            msg = f"boundary_method must be one of {sorted(BOUNDARY_METHODS)}, got {value!r}"
            raise ValueError(msg)
        return value

    @field_validator("boundary_geojson")
    @classmethod
    def _polygon_geometry(cls, value: dict[str, Any]) -> dict[str, Any]:
        if value.get("type") != "Polygon":
            msg = f"boundary_geojson must be a Polygon, got {value.get('type')!r}"
            raise ValueError(msg)
        return value

    @field_validator("center_point_geojson")
    @classmethod
    def _point_geometry(cls, value: dict[str, Any]) -> dict[str, Any]:
        if value.get("type") != "Point":
            msg = f"center_point_geojson must be a Point, got {value.get('type')!r}"
            raise ValueError(msg)
        return value

    def to_json(self, *, indent: int = 2) -> str:
        """Serialise to a JSON string.

        Uses the ``$schema`` alias for the schema version field.
        """
        return self.model_dump_json(indent=indent, by_alias=True)

    def to_dict(self) -> dict[str, Any]:
        """Serialise to a plain dict for the persistence layer."""
        return self.model_dump(by_alias=True)
