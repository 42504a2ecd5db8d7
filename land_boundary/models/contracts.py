"""Canonical payload contracts for the engine boundary.

Every dict the engine accepts or emits is defined here as a
``TypedDict``.  This module is the single source of truth for field
names shared with the persistence and rendering collaborators.

Design notes:
- ``TypedDict`` rather than ``dataclass`` because these shapes are
  JSON on the wire and need no conversion.
- GeoJSON positions are ``[lon, lat]`` (RFC 7946 axis order).
"""

from __future__ import annotations

from typing import Literal, TypedDict

# ---------------------------------------------------------------------------
# Points
# ---------------------------------------------------------------------------


class GeoPointPayload(TypedDict):
    """Serialised ``GeoPoint``."""

    latitude: float
    longitude: float


# ---------------------------------------------------------------------------
# GeoJSON (RFC 7946, single outer ring only)
# ---------------------------------------------------------------------------


class GeoJSONPolygon(TypedDict):
    """GeoJSON Polygon geometry with one explicitly closed outer ring."""

    type: Literal["Polygon"]
    coordinates: list[list[list[float]]]


class GeoJSONPoint(TypedDict):
    """GeoJSON Point geometry, used for a parcel's centre point."""

    type: Literal["Point"]
    coordinates: list[float]


# ---------------------------------------------------------------------------
# Derived geometry results
# ---------------------------------------------------------------------------


class PolygonMetricsPayload(TypedDict):
    """Serialised ``PolygonMetrics``."""

    area_acres: float
    perimeter_meters: float
    centroid: GeoPointPayload


class ValidationResultPayload(TypedDict):
    """Serialised ``ValidationResult``; ``errors`` holds ``ErrorKind`` values."""

    valid: bool
    errors: list[str]
    messages: list[str]


class ClusterPayload(TypedDict):
    """Serialised ``Cluster`` for the map rendering layer."""

    centroid: GeoPointPayload
    count: int
    member_ids: list[str]
