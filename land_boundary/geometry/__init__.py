"""Pure boundary geometry.

Every function here is stateless and free of I/O: it takes immutable
points and returns new values, so it may be called concurrently
without locking.

- primitives: haversine distance, local projection, vertex centroid
- metrics: area in acres, perimeter in metres
- simplify: Douglas-Peucker vertex reduction
- validation: vertex count, area bounds, self-intersection
- containment: ray-casting point-in-polygon
- clustering: zoom-dependent greedy grouping of parcel centroids
- geojson: RFC 7946 Polygon/Point encoding
- bounds: bounding boxes
"""

from land_boundary.geometry.bounds import BoundingBox, compute_bbox
from land_boundary.geometry.clustering import cluster, cluster_radius_m
from land_boundary.geometry.containment import point_in_polygon
from land_boundary.geometry.geojson import (
    from_geojson,
    open_ring,
    point_from_geojson,
    point_to_geojson,
    to_geojson,
)
from land_boundary.geometry.metrics import area_acres, compute_metrics, perimeter_meters
from land_boundary.geometry.primitives import centroid, distance, equirectangular_project
from land_boundary.geometry.simplify import simplify
from land_boundary.geometry.validation import (
    has_self_intersection,
    segments_intersect,
    validate_polygon,
)

__all__ = [
    "BoundingBox",
    "area_acres",
    "centroid",
    "cluster",
    "cluster_radius_m",
    "compute_bbox",
    "compute_metrics",
    "distance",
    "equirectangular_project",
    "from_geojson",
    "has_self_intersection",
    "open_ring",
    "perimeter_meters",
    "point_from_geojson",
    "point_in_polygon",
    "point_to_geojson",
    "segments_intersect",
    "simplify",
    "to_geojson",
    "validate_polygon",
]
