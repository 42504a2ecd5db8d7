"""Boundary preparation: from captured points to a persistable record.

Runs the capture-to-storage flow in one call:

    points → validate → measure → simplify → GeoJSON → LandBoundaryRecord

Validation and measurement use the points exactly as captured; only
the stored GeoJSON ring is simplified.  A boundary that fails
validation still gets its metrics (the editor shows them) but no
record, and the caller decides what to tell the user.

Geometry problems never raise here; they are reported through
``BoundaryResult.validation``.

``cluster_parcels`` and ``elevation_profile`` apply the configured
cluster base radius and elevation provider to the map and terrain views.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from land_boundary.core.config import EngineConfig
from land_boundary.core.constants import (
    BOUNDARY_METHOD_MANUAL,
    BOUNDARY_METHODS,
    MIN_POLYGON_POINTS,
)
from land_boundary.core.exceptions import ValidationError
from land_boundary.geometry.clustering import cluster
from land_boundary.geometry.geojson import point_to_geojson, to_geojson
from land_boundary.geometry.metrics import compute_metrics
from land_boundary.geometry.simplify import simplify
from land_boundary.geometry.validation import validate_polygon
from land_boundary.models.record import LandBoundaryRecord
from land_boundary.providers.factory import get_provider

if TYPE_CHECKING:
    from collections.abc import Sequence

    from land_boundary.models.cluster import Cluster, ClusterInput
    from land_boundary.models.point import GeoPoint
    from land_boundary.models.results import PolygonMetrics, ValidationResult
    from land_boundary.providers.base import ElevationSample

logger = logging.getLogger("land_boundary.pipeline")


@dataclass(frozen=True, slots=True)
class BoundaryResult:
    """Everything derived from one captured boundary.

    Attributes:
        validation: Accumulated validation outcome.
        metrics: Area, perimeter and centroid of the captured points.
        simplified_points: Vertices that the stored ring keeps.
        record: Persistable record, ``None`` when validation failed.
    """

    validation: ValidationResult
    metrics: PolygonMetrics
    simplified_points: tuple[GeoPoint, ...]
    record: LandBoundaryRecord | None = None

    @property
    def valid(self) -> bool:
        return self.validation.valid


def prepare_boundary(
    points: Sequence[GeoPoint],
    *,
    config: EngineConfig | None = None,
    boundary_method: str = BOUNDARY_METHOD_MANUAL,
    gps_accuracy_m: float | None = None,
) -> BoundaryResult:
    """Validate, measure and simplify a captured boundary.

    Args:
        points: Boundary vertices as tapped or walked, ring left open.
        config: Thresholds and tolerance; defaults to ``EngineConfig()``.
        boundary_method: ``"manual"`` or ``"gps_walk"``.
        gps_accuracy_m: Reported GPS accuracy for walked boundaries.

    Returns:
        A ``BoundaryResult``; ``record`` is set only for valid boundaries.

    Raises:
        ValidationError: If *boundary_method* is not a known method.
    """
    if boundary_method not in BOUNDARY_METHODS:
        msg = f"Unknown boundary method {boundary_method!r}"
        raise ValidationError(msg, stage="prepare_boundary", code="INVALID_BOUNDARY_METHOD")

    config = config or EngineConfig()

    validation = validate_polygon(
        points,
        min_area_acres=config.min_area_acres,
        max_area_acres=config.max_area_acres,
    )
    metrics = compute_metrics(points)

    simplified = simplify(points, config.simplify_tolerance_deg)
    if len(simplified) < MIN_POLYGON_POINTS <= len(points):
        # A sliver can collapse to its chord; store the ring as captured.
        simplified = list(points)

    if not validation.valid:
        logger.warning(
            "Boundary rejected | points=%d | area=%.2f acres | errors=%s",
            len(points),
            metrics.area_acres,
            ",".join(kind.value for kind in validation.errors),
        )
        return BoundaryResult(
            validation=validation,
            metrics=metrics,
            simplified_points=tuple(simplified),
        )

    record = LandBoundaryRecord(
        area_acres=metrics.area_acres,
        perimeter_meters=metrics.perimeter_meters,
        boundary_geojson=dict(to_geojson(simplified)),
        center_point_geojson=dict(point_to_geojson(metrics.centroid)),
        point_count=len(points),
        stored_point_count=len(simplified),
        boundary_method=boundary_method,
        gps_accuracy_m=gps_accuracy_m,
    )

    logger.info(
        "Boundary prepared | method=%s | points=%d | stored=%d | area=%.2f acres | "
        "perimeter=%.1f m | centroid=(%.6f, %.6f)",
        boundary_method,
        len(points),
        len(simplified),
        metrics.area_acres,
        metrics.perimeter_meters,
        metrics.centroid.latitude,
        metrics.centroid.longitude,
    )

    return BoundaryResult(
        validation=validation,
        metrics=metrics,
        simplified_points=tuple(simplified),
        record=record,
    )


def cluster_parcels(
    inputs: Sequence[ClusterInput],
    zoom_level: int,
    *,
    config: EngineConfig | None = None,
) -> list[Cluster]:
    """Cluster parcels for a map overview using the configured base radius."""
    config = config or EngineConfig()
    return cluster(inputs, zoom_level, base_radius_m=config.cluster_base_radius_m)


def elevation_profile(
    points: Sequence[GeoPoint],
    *,
    config: EngineConfig | None = None,
) -> list[ElevationSample]:
    """Sample terrain height along a boundary with the configured provider.

    Raises:
        ProviderError: If the configured provider is unknown or the
            lookup fails.
    """
    config = config or EngineConfig()
    provider = get_provider(config.elevation_provider)
    samples = provider.profile(points)
    logger.debug(
        "Elevation profile | provider=%s | points=%d",
        provider.name,
        len(samples),
    )
    return samples
