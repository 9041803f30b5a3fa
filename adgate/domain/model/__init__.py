"""Domain model entities for the gateway."""

from adgate.domain.model.account_link import AccountLink
from adgate.domain.model.api_key import ApiKey
from adgate.domain.model.identity import Identity

__all__ = [
    "Identity",
    "ApiKey",
    "AccountLink",
]
