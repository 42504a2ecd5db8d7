"""Greedy radius clustering of parcel centroids for map overviews.

Zoomed out, hundreds of parcels collapse into a handful of markers.
The cluster radius halves with every zoom level in: 500 m at zoom 15,
1 km at zoom 14, 250 m at zoom 16.

The algorithm is a single greedy pass in input order.  Each unclaimed
parcel seeds a cluster and claims every later unclaimed parcel within
the radius of the seed's own centroid.  Results near the radius edge
depend on input order; this is a display heuristic, not a partition.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from land_boundary.core.constants import CLUSTER_REFERENCE_ZOOM, DEFAULT_CLUSTER_BASE_RADIUS_M
from land_boundary.geometry.primitives import centroid, distance
from land_boundary.models.cluster import Cluster

if TYPE_CHECKING:
    from collections.abc import Sequence

    from land_boundary.models.cluster import ClusterInput

logger = logging.getLogger("land_boundary.geometry.clustering")


def cluster_radius_m(
    zoom_level: int,
    *,
    base_radius_m: float = DEFAULT_CLUSTER_BASE_RADIUS_M,
) -> float:
    """Cluster radius in metres for a map zoom level.

    Zoom levels far enough out to overflow a float give an infinite
    radius, so every parcel falls into one cluster.
    """
    try:
        return base_radius_m * 2.0 ** (CLUSTER_REFERENCE_ZOOM - zoom_level)
    except OverflowError:
        return math.inf


def cluster(
    inputs: Sequence[ClusterInput],
    zoom_level: int,
    *,
    base_radius_m: float = DEFAULT_CLUSTER_BASE_RADIUS_M,
) -> list[Cluster]:
    """Group parcels whose centroids lie within the zoom radius of a seed.

    Args:
        inputs: Parcels in display order; order decides seeding.
        zoom_level: Map zoom level; higher means smaller radius.
        base_radius_m: Radius at zoom level 15.

    Returns:
        One ``Cluster`` per seed, in seed order.  Multi-member clusters
        are centred on the planar mean of their members' centroids.
    """
    radius = cluster_radius_m(zoom_level, base_radius_m=base_radius_m)
    processed = [False] * len(inputs)
    clusters: list[Cluster] = []

    for seed_index, seed in enumerate(inputs):
        if processed[seed_index]:
            continue
        processed[seed_index] = True
        members = [seed]

        for other_index in range(seed_index + 1, len(inputs)):
            if processed[other_index]:
                continue
            other = inputs[other_index]
            if distance(seed.centroid, other.centroid) <= radius:
                members.append(other)
                processed[other_index] = True

        center = centroid([m.centroid for m in members]) if len(members) > 1 else seed.centroid
        clusters.append(Cluster(centroid=center, member_ids=frozenset(m.id for m in members)))

    logger.debug(
        "Clustered parcels | inputs=%d | clusters=%d | zoom=%d | radius=%.1f m",
        len(inputs),
        len(clusters),
        zoom_level,
        radius,
    )
    return clusters
