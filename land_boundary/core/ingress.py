"""Ingress boundary helpers for payloads entering the engine.

Host applications hand the engine JSON that came from a mobile client
or an offline cache.  These helpers turn it into typed values and fail
loudly with a ``ContractError`` when the shape is wrong, so geometry
code only ever sees well-formed ``GeoPoint`` values.

- **deserialize_points** — a boundary as a JSON string or a list of
  point mappings.
- **deserialize_fix** — one location-provider fix with its accuracy.

Both accept the engine's ``latitude``/``longitude`` keys and the
``lat``/``lng`` keys used by map widgets and the offline boundary cache.
"""

from __future__ import annotations

import json
import logging
import math
from typing import Any

from land_boundary.core.exceptions import ContractError
from land_boundary.models.point import GeoPoint

logger = logging.getLogger("land_boundary.core.ingress")

_KEY_ALIASES: tuple[tuple[str, str], ...] = (("latitude", "longitude"), ("lat", "lng"))


# ---------------------------------------------------------------------------
# Boundary points
# ---------------------------------------------------------------------------


def deserialize_points(raw: str | list[Any] | object) -> list[GeoPoint]:
    """Normalise a boundary payload to a list of ``GeoPoint``.

    Args:
        raw: A JSON array string, or an already-parsed list of mappings.

    Returns:
        Points in payload order.

    Raises:
        ContractError: If *raw* is not a list of point mappings.
    """
    if isinstance(raw, str):
        try:
            raw = json.loads(raw)
        except (json.JSONDecodeError, ValueError) as exc:
            msg = f"Boundary payload is not valid JSON: {exc}"
            raise ContractError(msg, stage="ingress", code="INVALID_JSON") from exc

    if not isinstance(raw, list):
        msg = f"Boundary payload must be a list of points, got {type(raw).__name__}"
        raise ContractError(msg, stage="ingress", code="INVALID_INPUT_TYPE")

    points = [_to_point(item, index) for index, item in enumerate(raw)]
    logger.debug("Deserialised boundary payload | points=%d", len(points))
    return points


# ---------------------------------------------------------------------------
# Location provider fixes
# ---------------------------------------------------------------------------


def deserialize_fix(raw: str | dict[str, Any] | object) -> tuple[GeoPoint, float]:
    """Normalise one location-provider fix to ``(point, accuracy_m)``.

    The accuracy is read from ``accuracy`` or ``accuracy_m``.

    Raises:
        ContractError: If the fix is malformed or has no accuracy.
    """
    if isinstance(raw, str):
        try:
            raw = json.loads(raw)
        except (json.JSONDecodeError, ValueError) as exc:
            msg = f"GPS fix is not valid JSON: {exc}"
            raise ContractError(msg, stage="ingress", code="INVALID_JSON") from exc

    if not isinstance(raw, dict):
        msg = f"GPS fix must be an object, got {type(raw).__name__}"
        raise ContractError(msg, stage="ingress", code="INVALID_INPUT_TYPE")

    point = _to_point(raw, 0)
    accuracy = raw.get("accuracy", raw.get("accuracy_m"))
    if isinstance(accuracy, bool) or not isinstance(accuracy, int | float):
        msg = f"GPS fix accuracy must be a number, got {type(accuracy).__name__}"
        raise ContractError(msg, stage="ingress", code="INVALID_ACCURACY")
    return point, float(accuracy)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _to_point(item: object, index: int) -> GeoPoint:
    if not isinstance(item, dict):
        msg = f"Point {index} must be an object, got {type(item).__name__}"
        raise ContractError(msg, stage="ingress", code="INVALID_POINT")

    for lat_key, lon_key in _KEY_ALIASES:
        if lat_key in item and lon_key in item:
            try:
                point = GeoPoint.from_dict(
                    {"latitude": item[lat_key], "longitude": item[lon_key]}
                )
            except TypeError as exc:
                msg = f"Point {index}: {exc}"
                raise ContractError(msg, stage="ingress", code="INVALID_POINT") from exc
            if not (math.isfinite(point.latitude) and math.isfinite(point.longitude)):
                msg = f"Point {index} has a non-finite coordinate"
                raise ContractError(msg, stage="ingress", code="INVALID_POINT")
            return point

    msg = f"Point {index} has no latitude/longitude (or lat/lng) keys"
    raise ContractError(msg, stage="ingress", code="MISSING_COORDINATES")
