"""Mock providers and the test container builder.

Importing the mock modules registers them as subclasses of the swappable
component providers.
"""

from .config import MockConfigProvider
from .container import build_test_container
from .persistence import MockPersistenceProvider
from .tiktok import MockTikTokProvider

__all__ = [
    "MockConfigProvider",
    "MockPersistenceProvider",
    "MockTikTokProvider",
    "build_test_container",
]
