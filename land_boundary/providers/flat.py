"""Flat-terrain elevation stub.

Reports the same height for every point.  Stands in for a real
elevation service in development and tests; it never performs I/O.

Parameters (``ProviderConfig.params``):
    ``elevation_m``  — constant height, default ``100``.
    ``resolution_m`` — reported data resolution, default ``30``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from land_boundary.providers.base import (
    ElevationProvider,
    ElevationSample,
    ProviderConfig,
    ProviderConfigError,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

    from land_boundary.models.point import GeoPoint

DEFAULT_ELEVATION_M = 100.0
DEFAULT_RESOLUTION_M = 30.0


class FlatElevationProvider(ElevationProvider):
    """Elevation adapter that assumes perfectly flat terrain."""

    def __init__(self, config: ProviderConfig) -> None:
        super().__init__(config)
        self._elevation_m = self._float_param("elevation_m", DEFAULT_ELEVATION_M)
        self._resolution_m = self._float_param("resolution_m", DEFAULT_RESOLUTION_M)

    def profile(self, points: Sequence[GeoPoint]) -> list[ElevationSample]:
        return [
            ElevationSample(point=p, elevation_m=self._elevation_m, resolution_m=self._resolution_m)
            for p in points
        ]

    def _float_param(self, key: str, default: float) -> float:
        raw = self.config.params.get(key)
        if raw is None:
            return default
        try:
            return float(raw)
        except ValueError as exc:
            msg = f"Parameter {key}={raw!r} is not a number"
            raise ProviderConfigError(provider=self.name, message=msg) from exc
