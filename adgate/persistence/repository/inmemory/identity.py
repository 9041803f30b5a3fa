"""In-memory identity repository."""

from typing import Iterable, Optional

from adgate.domain.model.identity import Identity
from adgate.domain.repository.identity import IdentityRepository
from adgate.domain.value import IdentityId


class InMemoryIdentityRepository(IdentityRepository):
    """In-memory implementation of IdentityRepository.

    State lives for the lifetime of the instance; nothing is persisted.
    """

    def __init__(self, seed: Iterable[Identity] = ()) -> None:
        self._identities: dict[IdentityId, Identity] = {
            identity.id: identity for identity in seed
        }

    async def find_by_id(self, identity_id: IdentityId) -> Optional[Identity]:
        """Find an identity by ID."""
        return self._identities.get(identity_id)

    async def save(self, identity: Identity) -> Identity:
        """Save or update an identity."""
        self._identities[identity.id] = identity
        return identity
