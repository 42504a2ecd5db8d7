"""Tests for the ingress boundary helpers.

Validates:
- ``deserialize_points`` handles JSON strings, lists, key aliases and bad shapes
- ``deserialize_fix`` extracts a point and its accuracy
"""

from __future__ import annotations

import json

import pytest

from land_boundary.core.exceptions import ContractError
from land_boundary.core.ingress import deserialize_fix, deserialize_points
from land_boundary.models.point import GeoPoint

# ---------------------------------------------------------------------------
# deserialize_points
# ---------------------------------------------------------------------------


class TestDeserializePoints:
    """Normalise a raw boundary payload to GeoPoints."""

    def test_json_string_parsed(self) -> None:
        raw = json.dumps([{"latitude": 12.97, "longitude": 77.59}])
        assert deserialize_points(raw) == [GeoPoint(12.97, 77.59)]

    def test_list_passthrough(self) -> None:
        raw = [{"latitude": 1, "longitude": 2}, {"latitude": 3.5, "longitude": 4.5}]
        assert deserialize_points(raw) == [GeoPoint(1.0, 2.0), GeoPoint(3.5, 4.5)]

    def test_lat_lng_aliases(self) -> None:
        """Map widgets and the offline cache use lat/lng."""
        raw = '[{"lat": 30.7333, "lng": 76.7794}]'
        assert deserialize_points(raw) == [GeoPoint(30.7333, 76.7794)]

    def test_empty_list(self) -> None:
        assert deserialize_points("[]") == []

    def test_invalid_json_raises_contract_error(self) -> None:
        with pytest.raises(ContractError, match="not valid JSON") as exc_info:
            deserialize_points("[{not-json")
        assert exc_info.value.code == "INVALID_JSON"
        assert exc_info.value.stage == "ingress"

    def test_json_object_raises_contract_error(self) -> None:
        with pytest.raises(ContractError, match="must be a list") as exc_info:
            deserialize_points('{"latitude": 1, "longitude": 2}')
        assert exc_info.value.code == "INVALID_INPUT_TYPE"

    def test_unexpected_type_raises_contract_error(self) -> None:
        with pytest.raises(ContractError) as exc_info:
            deserialize_points(42)
        assert exc_info.value.code == "INVALID_INPUT_TYPE"

    def test_non_object_point(self) -> None:
        with pytest.raises(ContractError, match="Point 1") as exc_info:
            deserialize_points([{"latitude": 1, "longitude": 2}, [3, 4]])
        assert exc_info.value.code == "INVALID_POINT"

    def test_missing_coordinates(self) -> None:
        with pytest.raises(ContractError) as exc_info:
            deserialize_points([{"latitude": 1}])
        assert exc_info.value.code == "MISSING_COORDINATES"

    @pytest.mark.parametrize(
        "point",
        [
            {"latitude": "12.97", "longitude": 77.59},
            {"latitude": None, "longitude": 77.59},
            {"latitude": True, "longitude": 77.59},
            {"latitude": float("nan"), "longitude": 77.59},
            {"latitude": 12.97, "longitude": float("inf")},
        ],
    )
    def test_bad_coordinate_values(self, point: dict[str, object]) -> None:
        with pytest.raises(ContractError) as exc_info:
            deserialize_points([point])
        assert exc_info.value.code == "INVALID_POINT"
        assert exc_info.value.retryable is False


# ---------------------------------------------------------------------------
# deserialize_fix
# ---------------------------------------------------------------------------


class TestDeserializeFix:
    """Normalise one location-provider fix."""

    def test_dict_with_accuracy(self) -> None:
        point, accuracy = deserialize_fix({"latitude": 12.97, "longitude": 77.59, "accuracy": 8})
        assert point == GeoPoint(12.97, 77.59)
        assert accuracy == 8.0

    def test_json_string_with_accuracy_m(self) -> None:
        raw = '{"lat": 12.97, "lng": 77.59, "accuracy_m": 4.5}'
        assert deserialize_fix(raw) == (GeoPoint(12.97, 77.59), 4.5)

    def test_missing_accuracy(self) -> None:
        with pytest.raises(ContractError) as exc_info:
            deserialize_fix({"latitude": 12.97, "longitude": 77.59})
        assert exc_info.value.code == "INVALID_ACCURACY"

    def test_array_payload_rejected(self) -> None:
        with pytest.raises(ContractError, match="must be an object") as exc_info:
            deserialize_fix("[]")
        assert exc_info.value.code == "INVALID_INPUT_TYPE"

    def test_invalid_json(self) -> None:
        with pytest.raises(ContractError) as exc_info:
            deserialize_fix("{")
        assert exc_info.value.code == "INVALID_JSON"
