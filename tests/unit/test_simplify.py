"""Unit tests for Douglas-Peucker simplification."""

from __future__ import annotations

import math

import pytest

from land_boundary.geometry.simplify import perpendicular_distance, simplify
from land_boundary.models.point import GeoPoint

# Zigzag whose two peaks (indices 1 and 3) are exactly equidistant from
# the first-last chord.
ZIGZAG = [
    GeoPoint(0.0, 0.0),
    GeoPoint(0.5, 1.0),
    GeoPoint(0.0, 2.0),
    GeoPoint(0.5, 3.0),
    GeoPoint(0.0, 4.0),
]


def _gps_walk() -> list[GeoPoint]:
    """A wobbly walk along a field edge, ~1 m lateral noise every ~5 m."""
    points = []
    for i in range(60):
        wobble = 0.000008 * math.sin(i * 1.7)
        points.append(GeoPoint(30.7333 + wobble, 76.7794 + i * 0.00005))
    return points


class TestPerpendicularDistance:
    """Point-to-chord distance in degree space."""

    def test_point_on_chord(self) -> None:
        assert perpendicular_distance(
            GeoPoint(0.0, 0.5), GeoPoint(0.0, 0.0), GeoPoint(0.0, 1.0)
        ) == pytest.approx(0.0)

    def test_perpendicular_offset(self) -> None:
        assert perpendicular_distance(
            GeoPoint(0.3, 0.5), GeoPoint(0.0, 0.0), GeoPoint(0.0, 1.0)
        ) == pytest.approx(0.3)

    def test_beyond_end_measures_to_endpoint(self) -> None:
        d = perpendicular_distance(GeoPoint(0.0, 2.0), GeoPoint(0.0, 0.0), GeoPoint(0.0, 1.0))
        assert d == pytest.approx(1.0)

    def test_zero_length_chord_measures_to_start(self) -> None:
        start = GeoPoint(0.0, 0.0)
        assert perpendicular_distance(GeoPoint(3.0, 4.0), start, start) == pytest.approx(5.0)


class TestSimplify:
    """Douglas-Peucker vertex reduction."""

    @pytest.mark.parametrize("count", [0, 1, 2])
    def test_short_inputs_unchanged(self, count: int) -> None:
        points = ZIGZAG[:count]
        result = simplify(points, 0.1)
        assert result == points
        assert result is not points

    def test_collinear_collapses_to_endpoints(self) -> None:
        line = [GeoPoint(0.0, float(i)) for i in range(6)]
        assert simplify(line, 0.1) == [line[0], line[-1]]

    def test_small_tolerance_keeps_everything(self) -> None:
        assert simplify(ZIGZAG, 0.1) == ZIGZAG

    def test_large_tolerance_keeps_endpoints_only(self) -> None:
        assert simplify(ZIGZAG, 0.6) == [ZIGZAG[0], ZIGZAG[-1]]

    def test_tie_resolves_to_lowest_index(self) -> None:
        """Both peaks are 0.5 from the chord; the first one is the split."""
        assert simplify(ZIGZAG, 0.4) == [ZIGZAG[0], ZIGZAG[1], ZIGZAG[4]]

    def test_distance_equal_to_tolerance_is_dropped(self) -> None:
        assert simplify(ZIGZAG, 0.5) == [ZIGZAG[0], ZIGZAG[-1]]

    def test_keeps_field_corners(self, equator_square: list[GeoPoint]) -> None:
        a, b, c, d = equator_square
        densified = [
            a,
            GeoPoint(0.0, 0.0005),
            b,
            GeoPoint(0.0005, 0.001),
            c,
            GeoPoint(0.001, 0.0005),
            d,
        ]
        assert simplify(densified, 0.00001) == [a, b, c, d]

    def test_closed_ring_keeps_corners(self, equator_square: list[GeoPoint]) -> None:
        ring = [*equator_square, equator_square[0]]
        assert simplify(ring, 0.00001) == ring

    def test_reduces_noisy_walk(self) -> None:
        walk = _gps_walk()
        simplified = simplify(walk, 0.00001)
        assert 2 <= len(simplified) < len(walk)

    def test_preserves_order(self) -> None:
        walk = _gps_walk()
        simplified = simplify(walk, 0.000005)
        indices = [walk.index(p) for p in simplified]
        assert indices == sorted(indices)

    @pytest.mark.parametrize("tolerance", [0.0, 0.000001, 0.000005, 0.00001, 0.001])
    def test_endpoints_preserved(self, tolerance: float) -> None:
        walk = _gps_walk()
        simplified = simplify(walk, tolerance)
        assert simplified[0] == walk[0]
        assert simplified[-1] == walk[-1]

    @pytest.mark.parametrize("tolerance", [0.0, 0.000001, 0.000005, 0.00001, 0.4])
    def test_idempotent(self, tolerance: float) -> None:
        for points in (_gps_walk(), ZIGZAG):
            once = simplify(points, tolerance)
            assert simplify(once, tolerance) == once

    def test_long_walk_does_not_recurse(self) -> None:
        """Thousands of strictly convex vertices survive without hitting recursion limits."""
        arc = [
            GeoPoint(math.sin(i / 5000 * math.pi), math.cos(i / 5000 * math.pi))
            for i in range(5001)
        ]
        assert len(simplify(arc, 0.0)) == len(arc)

    def test_input_not_mutated(self) -> None:
        walk = _gps_walk()
        snapshot = list(walk)
        simplify(walk, 0.00001)
        assert walk == snapshot
