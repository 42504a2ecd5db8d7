"""Shared engine constants — single source of truth.

Centralises the physical constants, unit conversion factors and
default thresholds used by the geometry modules, the walk filter and
the configuration layer.  Units are part of every name.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Physical constants and unit conversions
# ---------------------------------------------------------------------------

EARTH_RADIUS_M: float = 6_371_000.0
"""Mean Earth radius used by haversine distance and local projection."""

ACRES_PER_SQ_METRE: float = 0.000247105
"""Square metres to acres."""

# WGS 84 coordinate bounds
MIN_LONGITUDE: float = -180.0
MAX_LONGITUDE: float = 180.0
MIN_LATITUDE: float = -90.0
MAX_LATITUDE: float = 90.0

# ---------------------------------------------------------------------------
# Polygon validation bounds
# ---------------------------------------------------------------------------

MIN_POLYGON_POINTS: int = 3
"""A ring needs three vertices; the closing edge is implicit."""

DEFAULT_MIN_AREA_ACRES: float = 0.1
DEFAULT_MAX_AREA_ACRES: float = 10_000.0

# ---------------------------------------------------------------------------
# Simplification
# ---------------------------------------------------------------------------

DEFAULT_SIMPLIFY_TOLERANCE_DEG: float = 0.00001
"""Douglas-Peucker tolerance in degrees (roughly one metre)."""

# ---------------------------------------------------------------------------
# GPS walk filter
# ---------------------------------------------------------------------------

DEFAULT_WALK_MIN_DISTANCE_M: float = 5.0
DEFAULT_WALK_MAX_ACCURACY_M: float = 20.0

# ---------------------------------------------------------------------------
# Map-overview clustering
# ---------------------------------------------------------------------------

DEFAULT_CLUSTER_BASE_RADIUS_M: float = 500.0
"""Cluster radius at ``CLUSTER_REFERENCE_ZOOM``; doubles per zoom level out."""

CLUSTER_REFERENCE_ZOOM: int = 15

# ---------------------------------------------------------------------------
# Boundary capture methods
# ---------------------------------------------------------------------------

BOUNDARY_METHOD_MANUAL: str = "manual"
BOUNDARY_METHOD_GPS_WALK: str = "gps_walk"
BOUNDARY_METHODS: frozenset[str] = frozenset({BOUNDARY_METHOD_MANUAL, BOUNDARY_METHOD_GPS_WALK})
