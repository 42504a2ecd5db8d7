"""Elevation provider adapters.

Real elevation data is an external collaborator; this package defines
its contract and a flat stub:
- ElevationProvider: Abstract base class defining the interface
- FlatElevationProvider: Constant-height stub for development and tests

The active provider is selected by name via configuration.
"""

from land_boundary.providers.base import (
    ElevationProvider,
    ElevationSample,
    ProviderConfig,
    ProviderConfigError,
    ProviderError,
)
from land_boundary.providers.factory import (
    FLAT,
    get_provider,
    list_providers,
    register_provider,
)

__all__ = [
    "FLAT",
    "ElevationProvider",
    "ElevationSample",
    "ProviderConfig",
    "ProviderConfigError",
    "ProviderError",
    "get_provider",
    "list_providers",
    "register_provider",
]
