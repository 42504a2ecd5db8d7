"""Unit tests for zoom-based parcel clustering."""

from __future__ import annotations

import logging
import math

import pytest

from land_boundary.geometry.clustering import cluster, cluster_radius_m
from land_boundary.models.cluster import Cluster, ClusterInput
from land_boundary.models.point import GeoPoint

# A and B are ~222 m apart; C is ~11 km north.
PARCEL_A = ClusterInput("A", GeoPoint(12.970, 77.59), 2.5)
PARCEL_B = ClusterInput("B", GeoPoint(12.972, 77.59), 4.0)
PARCEL_C = ClusterInput("C", GeoPoint(13.070, 77.59), 1.0)


def _ids(clusters: list[Cluster]) -> list[set[str]]:
    return [set(c.member_ids) for c in clusters]


class TestClusterRadius:
    """Radius doubles per zoom level out from 15."""

    @pytest.mark.parametrize(
        ("zoom", "expected"),
        [(15, 500.0), (14, 1000.0), (16, 250.0), (10, 16_000.0)],
    )
    def test_default_base(self, zoom: int, expected: float) -> None:
        assert cluster_radius_m(zoom) == pytest.approx(expected)

    def test_custom_base(self) -> None:
        assert cluster_radius_m(14, base_radius_m=100.0) == pytest.approx(200.0)

    def test_extreme_zoom_out_is_infinite(self) -> None:
        assert cluster_radius_m(-2000) == math.inf

    def test_extreme_zoom_in_is_zero(self) -> None:
        assert cluster_radius_m(2000) == 0.0


class TestCluster:
    """Greedy seed-and-claim clustering."""

    def test_nearby_parcels_group(self) -> None:
        clusters = cluster([PARCEL_A, PARCEL_B, PARCEL_C], 15)
        assert _ids(clusters) == [{"A", "B"}, {"C"}]

    def test_group_is_centred_on_member_mean(self) -> None:
        grouped = cluster([PARCEL_A, PARCEL_B, PARCEL_C], 15)[0]
        assert grouped.count == 2
        assert grouped.centroid.latitude == pytest.approx(12.971)
        assert grouped.centroid.longitude == pytest.approx(77.59)

    def test_singleton_keeps_own_centroid(self) -> None:
        single = cluster([PARCEL_A, PARCEL_B, PARCEL_C], 15)[1]
        assert single.centroid == PARCEL_C.centroid
        assert single.count == 1

    def test_high_zoom_gives_singletons(self) -> None:
        clusters = cluster([PARCEL_A, PARCEL_B, PARCEL_C], 40)
        assert _ids(clusters) == [{"A"}, {"B"}, {"C"}]

    def test_low_zoom_gives_one_cluster(self) -> None:
        clusters = cluster([PARCEL_A, PARCEL_B, PARCEL_C], 5)
        assert _ids(clusters) == [{"A", "B", "C"}]

    def test_extreme_zoom_out_gives_one_cluster(self) -> None:
        clusters = cluster([PARCEL_A, PARCEL_B, PARCEL_C], -2000)
        assert _ids(clusters) == [{"A", "B", "C"}]

    def test_empty_input(self) -> None:
        assert cluster([], 15) == []

    def test_seed_order_decides_membership(self) -> None:
        """Chain of parcels ~445 m apart: the seed only reaches its neighbour."""
        a = ClusterInput("A", GeoPoint(0.0, 0.0))
        b = ClusterInput("B", GeoPoint(0.004, 0.0))
        d = ClusterInput("D", GeoPoint(0.008, 0.0))
        assert _ids(cluster([a, b, d], 15)) == [{"A", "B"}, {"D"}]
        assert _ids(cluster([b, a, d], 15)) == [{"A", "B", "D"}]

    def test_distance_is_from_seed_not_cluster_mean(self) -> None:
        """D is within reach of B but the seed A decides."""
        a = ClusterInput("A", GeoPoint(0.0, 0.0))
        b = ClusterInput("B", GeoPoint(0.004, 0.0))
        d = ClusterInput("D", GeoPoint(0.0049, 0.0))
        assert _ids(cluster([a, b, d], 15)) == [{"A", "B"}, {"D"}]

    def test_every_parcel_in_exactly_one_cluster(self) -> None:
        parcels = [
            ClusterInput(f"p{i}", GeoPoint(12.97 + (i % 7) * 0.003, 77.59 + (i // 7) * 0.003))
            for i in range(35)
        ]
        for zoom in (10, 13, 15, 17):
            clusters = cluster(parcels, zoom)
            seen = [pid for c in clusters for pid in c.member_ids]
            assert sorted(seen) == sorted(p.id for p in parcels)
            assert all(c.count >= 1 for c in clusters)

    def test_input_not_mutated(self) -> None:
        parcels = [PARCEL_A, PARCEL_B, PARCEL_C]
        cluster(parcels, 15)
        assert parcels == [PARCEL_A, PARCEL_B, PARCEL_C]

    def test_logs_summary(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="land_boundary.geometry.clustering"):
            cluster([PARCEL_A, PARCEL_B, PARCEL_C], 15)
        assert "inputs=3 | clusters=2" in caplog.text


class TestClusterModels:
    """Serialisation of cluster inputs and outputs."""

    def test_to_dict_sorts_members(self) -> None:
        payload = cluster([PARCEL_B, PARCEL_A], 15)[0].to_dict()
        assert payload["count"] == 2
        assert payload["member_ids"] == ["A", "B"]
        assert set(payload["centroid"]) == {"latitude", "longitude"}

    def test_input_from_dict(self) -> None:
        parsed = ClusterInput.from_dict(
            {"id": "plot-7", "centroid": {"latitude": 12.97, "longitude": 77.59}, "area_acres": 3}
        )
        assert parsed == ClusterInput("plot-7", GeoPoint(12.97, 77.59), 3.0)

    def test_input_from_dict_requires_centroid(self) -> None:
        with pytest.raises(TypeError, match="centroid"):
            ClusterInput.from_dict({"id": "plot-7"})
