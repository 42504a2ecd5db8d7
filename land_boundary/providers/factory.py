"""Provider factory — selects the active elevation provider by name.

The factory maintains a registry of known adapters.  Host applications
plug in a real elevation service with ``register_provider`` and select
it through ``EngineConfig.elevation_provider``.

Usage::

    from land_boundary.providers.factory import get_provider

    provider = get_provider("flat")
    samples = provider.profile(points)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from land_boundary.providers.base import ElevationProvider, ProviderConfig, ProviderError

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger("land_boundary.providers.factory")

# ---------------------------------------------------------------------------
# Provider name constants
# ---------------------------------------------------------------------------

FLAT = "flat"

# ---------------------------------------------------------------------------
# Lazy-import adapter registry
# ---------------------------------------------------------------------------

# Each entry maps a provider name to a callable that returns the adapter
# *class*, so an adapter's dependencies load only when it is selected.

_ADAPTER_REGISTRY: dict[str, Callable[[], type[ElevationProvider]]] = {}


def _register_builtin_adapters() -> None:
    """Register the built-in provider adapters."""

    def _flat() -> type[ElevationProvider]:
        from land_boundary.providers.flat import FlatElevationProvider

        return FlatElevationProvider

    _ADAPTER_REGISTRY[FLAT] = _flat


def _ensure_registry() -> None:
    """Initialise the adapter registry once (idempotent)."""
    if not _ADAPTER_REGISTRY:
        _register_builtin_adapters()


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def register_provider(
    name: str,
    loader: Callable[[], type[ElevationProvider]],
) -> None:
    """Register a custom provider adapter.

    Args:
        name: Provider name (e.g. ``"srtm"``).
        loader: A zero-argument callable that returns the adapter class.

    Raises:
        ValueError: If the name is empty.
    """
    if not name:
        msg = "Provider name must be non-empty"
        raise ValueError(msg)
    _ensure_registry()
    _ADAPTER_REGISTRY[name] = loader
    logger.debug("Registered elevation provider: %s", name)


def get_provider(
    name: str,
    config: ProviderConfig | None = None,
) -> ElevationProvider:
    """Create and return an elevation provider instance.

    Args:
        name: Provider identifier (e.g. ``"flat"``).
        config: Optional ``ProviderConfig``. If ``None``, a default config
                with just the provider name is used.

    Returns:
        A configured ``ElevationProvider`` instance.

    Raises:
        ProviderError: If the named provider is not registered or the
            config names a different provider.
    """
    _ensure_registry()

    loader = _ADAPTER_REGISTRY.get(name)
    if loader is None:
        available = ", ".join(sorted(_ADAPTER_REGISTRY))
        msg = f"Unknown elevation provider: {name!r}. Available: {available}"
        raise ProviderError(provider=name, message=msg)

    adapter_cls = loader()

    if config is None:
        config = ProviderConfig(name=name)
    elif config.name != name:
        msg = f"ProviderConfig.name {config.name!r} does not match requested provider {name!r}"
        raise ProviderError(provider=name, message=msg)

    logger.info("Creating elevation provider: %s", name)
    return adapter_cls(config)


def list_providers() -> list[str]:
    """Return the names of all registered provider adapters."""
    _ensure_registry()
    return sorted(_ADAPTER_REGISTRY)
