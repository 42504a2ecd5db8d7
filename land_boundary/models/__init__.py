"""Data models and schemas.

Defines the values exchanged with the engine:
- GeoPoint: A latitude/longitude vertex, fix or centroid
- PolygonMetrics, ValidationResult, ErrorKind: Geometry results
- ClusterInput, Cluster: Map-overview grouping
- LandBoundaryRecord: Validated boundary handed to persistence
"""

from land_boundary.models.cluster import Cluster, ClusterInput
from land_boundary.models.point import GeoPoint
from land_boundary.models.record import LandBoundaryRecord
from land_boundary.models.results import ErrorKind, PolygonMetrics, ValidationResult

__all__ = [
    "Cluster",
    "ClusterInput",
    "ErrorKind",
    "GeoPoint",
    "LandBoundaryRecord",
    "PolygonMetrics",
    "ValidationResult",
]
