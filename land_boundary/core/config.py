"""Engine configuration loaded from environment variables.

All values default to the thresholds the boundary capture flow has
always used (0.1-10 000 acres, 5 m walk spacing, 20 m GPS accuracy).
Host applications override them through the environment.

Fail-fast validation:
    ``from_env()`` raises ``ConfigValidationError`` if any numeric
    value is out of its valid range, so bad configuration surfaces at
    startup instead of as silently wrong geometry.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from land_boundary.core.constants import (
    DEFAULT_CLUSTER_BASE_RADIUS_M,
    DEFAULT_MAX_AREA_ACRES,
    DEFAULT_MIN_AREA_ACRES,
    DEFAULT_SIMPLIFY_TOLERANCE_DEG,
    DEFAULT_WALK_MAX_ACCURACY_M,
    DEFAULT_WALK_MIN_DISTANCE_M,
)
from land_boundary.core.exceptions import BoundaryError


class ConfigValidationError(BoundaryError):
    """Raised when configuration values are out of valid range.

    Attributes:
        key: The configuration key that failed validation.
        value: The invalid value.
        reason: Human-readable description of the valid range.
    """

    default_stage = "config"
    default_code = "CONFIG_VALIDATION_FAILED"

    def __init__(self, key: str, value: object, message: str) -> None:
        self.key = key
        self.value = value
        self.reason = message
        super().__init__(f"Invalid configuration {key}={value!r}: {message}")


@dataclass(frozen=True, slots=True)
class EngineConfig:
    """Immutable engine configuration.

    Attributes:
        min_area_acres: Smallest acceptable parcel area in acres.
        max_area_acres: Largest acceptable parcel area in acres.
        walk_min_distance_m: Minimum spacing between accepted GPS walk fixes.
        walk_max_accuracy_m: Worst acceptable GPS fix accuracy in metres.
        simplify_tolerance_deg: Douglas-Peucker tolerance in degrees.
        cluster_base_radius_m: Cluster radius in metres at zoom level 15.
        elevation_provider: Registered elevation provider name.
    """

    min_area_acres: float = DEFAULT_MIN_AREA_ACRES
    max_area_acres: float = DEFAULT_MAX_AREA_ACRES
    walk_min_distance_m: float = DEFAULT_WALK_MIN_DISTANCE_M
    walk_max_accuracy_m: float = DEFAULT_WALK_MAX_ACCURACY_M
    simplify_tolerance_deg: float = DEFAULT_SIMPLIFY_TOLERANCE_DEG
    cluster_base_radius_m: float = DEFAULT_CLUSTER_BASE_RADIUS_M
    elevation_provider: str = "flat"

    @classmethod
    def from_env(cls) -> EngineConfig:
        """Load and validate configuration from environment variables.

        Raises:
            ConfigValidationError: If a numeric value is out of range
                or a required string value is empty.
            ValueError: If a numeric environment variable cannot be
                parsed (e.g. ``WALK_MIN_DISTANCE_M=abc``).
        """
        config = cls(
            min_area_acres=float(os.getenv("LAND_MIN_AREA_ACRES", str(DEFAULT_MIN_AREA_ACRES))),
            max_area_acres=float(os.getenv("LAND_MAX_AREA_ACRES", str(DEFAULT_MAX_AREA_ACRES))),
            walk_min_distance_m=float(
                os.getenv("WALK_MIN_DISTANCE_M", str(DEFAULT_WALK_MIN_DISTANCE_M))
            ),
            walk_max_accuracy_m=float(
                os.getenv("WALK_MAX_ACCURACY_M", str(DEFAULT_WALK_MAX_ACCURACY_M))
            ),
            simplify_tolerance_deg=float(
                os.getenv("SIMPLIFY_TOLERANCE_DEG", str(DEFAULT_SIMPLIFY_TOLERANCE_DEG))
            ),
            cluster_base_radius_m=float(
                os.getenv("CLUSTER_BASE_RADIUS_M", str(DEFAULT_CLUSTER_BASE_RADIUS_M))
            ),
            elevation_provider=os.getenv("ELEVATION_PROVIDER", "flat"),
        )
        validate_config(config)
        return config


def validate_config(config: EngineConfig) -> None:
    """Validate configuration ranges.  Raises ``ConfigValidationError``."""
    if config.min_area_acres < 0:
        raise ConfigValidationError(
            "LAND_MIN_AREA_ACRES",
            config.min_area_acres,
            "must be >= 0 (acres)",
        )

    if config.max_area_acres <= config.min_area_acres:
        raise ConfigValidationError(
            "LAND_MAX_AREA_ACRES",
            config.max_area_acres,
            f"must be > LAND_MIN_AREA_ACRES ({config.min_area_acres})",
        )

    if config.walk_min_distance_m < 0:
        raise ConfigValidationError(
            "WALK_MIN_DISTANCE_M",
            config.walk_min_distance_m,
            "must be >= 0 (metres)",
        )

    if config.walk_max_accuracy_m <= 0:
        raise ConfigValidationError(
            "WALK_MAX_ACCURACY_M",
            config.walk_max_accuracy_m,
            "must be > 0 (metres)",
        )

    if config.simplify_tolerance_deg < 0:
        raise ConfigValidationError(
            "SIMPLIFY_TOLERANCE_DEG",
            config.simplify_tolerance_deg,
            "must be >= 0 (degrees)",
        )

    if config.cluster_base_radius_m <= 0:
        raise ConfigValidationError(
            "CLUSTER_BASE_RADIUS_M",
            config.cluster_base_radius_m,
            "must be > 0 (metres)",
        )

    if not config.elevation_provider:
        raise ConfigValidationError(
            "ELEVATION_PROVIDER",
            config.elevation_provider,
            "must not be empty",
        )
