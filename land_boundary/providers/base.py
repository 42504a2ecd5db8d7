"""ElevationProvider abstract base class.

The engine has no elevation data of its own.  Terrain profiles along a
boundary come from an external collaborator behind this interface; the
engine ships only a flat stub so that callers and tests have something
to bind to.

Lifecycle:
    1. ``get_provider(name, config)`` — select an adapter by name.
    2. ``profile(points)``            — one ``ElevationSample`` per point.
"""

from __future__ import annotations

import abc
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from land_boundary.core.exceptions import BoundaryError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from land_boundary.models.point import GeoPoint


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class ProviderConfig:
    """Configuration for a specific elevation provider.

    Attributes:
        name: Registered provider name (e.g. ``"flat"``).
        params: Provider-specific string parameters.
    """

    name: str
    params: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class ElevationSample:
    """Terrain height at one boundary point.

    Attributes:
        point: Where the sample was taken.
        elevation_m: Height above mean sea level in metres.
        resolution_m: Ground resolution of the source data in metres.
    """

    point: GeoPoint
    elevation_m: float
    resolution_m: float


# ---------------------------------------------------------------------------
# Provider interface
# ---------------------------------------------------------------------------


class ElevationProvider(abc.ABC):
    """Abstract base class for elevation provider adapters.

    Example usage::

        provider = get_provider("flat")
        samples = provider.profile(boundary_points)
    """

    def __init__(self, config: ProviderConfig) -> None:
        self._config = config

    @property
    def name(self) -> str:
        """Return the provider name from configuration."""
        return self._config.name

    @property
    def config(self) -> ProviderConfig:
        """Return the provider configuration (read-only)."""
        return self._config

    @abc.abstractmethod
    def profile(self, points: Sequence[GeoPoint]) -> list[ElevationSample]:
        """Sample terrain height at every point, in order.

        Raises:
            ProviderError: On transient or permanent lookup errors.
        """


# ---------------------------------------------------------------------------
# Provider exceptions
# ---------------------------------------------------------------------------


class ProviderError(BoundaryError):
    """Base exception for provider adapter errors.

    Attributes:
        provider: Name of the provider that raised the error.
        message: Human-readable error description.
        retryable: Whether the caller should retry the operation.
    """

    default_stage = "provider"
    default_code = "PROVIDER_ERROR"

    def __init__(
        self,
        provider: str,
        message: str,
        *,
        retryable: bool = False,
    ) -> None:
        self.provider = provider
        super().__init__(
            message,
            retryable=retryable,
            code=self.default_code,
            stage=self.default_stage,
        )

    def __str__(self) -> str:
        return f"[{self.provider}] {self.message}"


class ProviderConfigError(ProviderError):
    """A provider parameter could not be interpreted."""

    default_code = "PROVIDER_CONFIG_INVALID"
