"""Data models for map-overview clustering.

``ClusterInput`` is one already-persisted parcel (its centroid and
area); ``Cluster`` is one pin or blob drawn by the rendering layer.
Clusters are recomputed from scratch on every call.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from land_boundary.models.point import GeoPoint

if TYPE_CHECKING:
    from land_boundary.models.contracts import ClusterPayload


@dataclass(frozen=True, slots=True)
class ClusterInput:
    """A parcel to be grouped on the overview map.

    Attributes:
        id: Parcel identifier.
        centroid: Parcel centre point.
        area_acres: Parcel area in acres (carried through, not weighted).
    """

    id: str
    centroid: GeoPoint
    area_acres: float = 0.0

    @classmethod
    def from_dict(cls, data: dict[str, object]) -> ClusterInput:
        """Deserialise from ``{"id", "centroid", "area_acres"}``.

        Raises:
            TypeError: If field values have unexpected types.
        """
        centroid_raw = data.get("centroid")
        if not isinstance(centroid_raw, dict):
            msg = f"centroid must be a dict, got {type(centroid_raw).__name__}"
            raise TypeError(msg)
        return cls(
            id=str(data.get("id", "")),
            centroid=GeoPoint.from_dict(centroid_raw),
            area_acres=float(data.get("area_acres", 0.0)),  # type: ignore[arg-type]
        )


@dataclass(frozen=True, slots=True)
class Cluster:
    """A group of nearby parcels rendered as a single map marker.

    Attributes:
        centroid: Seed centroid for singletons, otherwise the planar mean
            of all member centroids.
        member_ids: Identifiers of the grouped parcels (at least one).
    """

    centroid: GeoPoint
    member_ids: frozenset[str]

    @property
    def count(self) -> int:
        return len(self.member_ids)

    def to_dict(self) -> ClusterPayload:
        return {
            "centroid": self.centroid.to_dict(),
            "count": self.count,
            "member_ids": sorted(self.member_ids),
        }
