"""Strongly typed identifiers for gateway domain entities."""

from typing import NewType
from uuid import UUID

IdentityId = NewType("IdentityId", UUID)
ApiKeyId = NewType("ApiKeyId", UUID)

# Well-known identity shared by every holder of a valid PIN
SHARED_IDENTITY_ID = IdentityId(UUID("00000000-0000-0000-0000-000000000001"))
