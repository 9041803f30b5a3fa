"""Repository interfaces for the gateway domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from adgate.domain.repository.account_link import AccountLinkRepository
from adgate.domain.repository.api_key import ApiKeyRepository
from adgate.domain.repository.identity import IdentityRepository

__all__ = [
    "IdentityRepository",
    "ApiKeyRepository",
    "AccountLinkRepository",
]
