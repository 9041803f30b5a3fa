"""Dependency injection wiring.

``PROVIDERS`` lists every provider the container is built from. Entries with
subclasses are swappable components (config, persistence, tiktok); the
concrete subclass is chosen by its ``__is_mock__`` flag.
"""

from typing import Type

from adgate.util.di.application import ProdApplicationProvider
from adgate.util.di.base import Component, ProviderBase
from adgate.util.di.core import (
    ConfigProvider,
    ProdConfigProvider,
    SettingsSectionProvider,
)
from adgate.util.di.domain import ProdDomainProvider
from adgate.util.di.infrastructure import (
    PersistenceProvider,
    ProdPersistenceProvider,
    ProdTikTokProvider,
    TikTokProvider,
)

PROVIDERS: list[Type[ProviderBase]] = [
    ConfigProvider,
    SettingsSectionProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    TikTokProvider,
    PersistenceProvider,
]


def is_swappable(base: Type[ProviderBase]) -> bool:
    return bool(base.__subclasses__())


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Resolve a ``PROVIDERS`` entry to the class to instantiate.

    Raises:
        ValueError: If a swappable component has no matching implementation
    """
    if not is_swappable(base):
        return base

    for candidate in base.__subclasses__():
        if getattr(candidate, "__is_mock__", False) == use_mock:
            return candidate

    kind = "mock" if use_mock else "production"
    raise ValueError(
        f"No {kind} provider for component {base.__mock_component__!r}"
    )


__all__ = [
    "Component",
    "ConfigProvider",
    "PROVIDERS",
    "PersistenceProvider",
    "ProdApplicationProvider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdPersistenceProvider",
    "ProdTikTokProvider",
    "ProviderBase",
    "SettingsSectionProvider",
    "TikTokProvider",
    "get_provider",
    "is_swappable",
]
