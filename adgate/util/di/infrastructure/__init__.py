"""Swappable infrastructure providers.

The production subclasses are imported here so ``__subclasses__()`` sees them.
"""

from .persistence import PersistenceProvider, ProdPersistenceProvider
from .tiktok import ProdTikTokProvider, TikTokProvider

__all__ = [
    "PersistenceProvider",
    "ProdPersistenceProvider",
    "ProdTikTokProvider",
    "TikTokProvider",
]
