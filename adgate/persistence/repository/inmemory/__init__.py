"""In-memory repository implementations.

Backs both production (process-lifetime state) and tests.
"""

from .account_link import InMemoryAccountLinkRepository
from .api_key import InMemoryApiKeyRepository
from .identity import InMemoryIdentityRepository

__all__ = [
    "InMemoryAccountLinkRepository",
    "InMemoryApiKeyRepository",
    "InMemoryIdentityRepository",
]
