"""API key entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from adgate.domain.model.common import DomainModel
from adgate.domain.value import ApiKeyId, IdentityId

API_KEY_PREFIX = "ak_"


def redact_key(key: str) -> str:
    """Scheme prefix plus four characters; the rest of the secret is hidden."""
    return key[: len(API_KEY_PREFIX) + 4] + "..."


class ApiKey(DomainModel):
    """Issued API key.

    Business rules:
    - Bound to exactly one identity at issuance, never rebound
    - Once revoked (active=False) it never authenticates again
    """

    id: ApiKeyId
    key: str  # Opaque secret presented by the client
    identity_id: IdentityId
    active: bool = True
    created_at: datetime = Field(default_factory=datetime.now)
    revoked_at: Optional[datetime] = None

    @property
    def prefix(self) -> str:
        """Redacted form of the key, safe to log."""
        return redact_key(self.key)
