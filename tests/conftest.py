"""Shared pytest fixtures for the land boundary engine test suite."""

from __future__ import annotations

import pytest

from land_boundary.models.point import GeoPoint

# ---------------------------------------------------------------------------
# Reference polygons
# ---------------------------------------------------------------------------


@pytest.fixture()
def equator_square() -> list[GeoPoint]:
    """0.001° square at the equator, ~111 m per side, ~3.05 acres."""
    return [
        GeoPoint(0.0, 0.0),
        GeoPoint(0.0, 0.001),
        GeoPoint(0.001, 0.001),
        GeoPoint(0.001, 0.0),
    ]


@pytest.fixture()
def bangalore_field() -> list[GeoPoint]:
    """Irregular five-vertex farm plot near Bengaluru, a few acres."""
    return [
        GeoPoint(12.97160, 77.59460),
        GeoPoint(12.97175, 77.59560),
        GeoPoint(12.97110, 77.59610),
        GeoPoint(12.97050, 77.59545),
        GeoPoint(12.97070, 77.59450),
    ]


@pytest.fixture()
def unit_square() -> list[GeoPoint]:
    """Illustrative 1° square used for planar tests."""
    return [
        GeoPoint(0.0, 0.0),
        GeoPoint(0.0, 1.0),
        GeoPoint(1.0, 1.0),
        GeoPoint(1.0, 0.0),
    ]


@pytest.fixture()
def bowtie() -> list[GeoPoint]:
    """Self-intersecting quadrilateral: edges 0 and 2 cross at (0.5, 0.5)."""
    return [
        GeoPoint(0.0, 0.0),
        GeoPoint(1.0, 1.0),
        GeoPoint(1.0, 0.0),
        GeoPoint(0.0, 1.0),
    ]
