"""Identity repository interface."""

from abc import ABC, abstractmethod

from adgate.domain.model.identity import Identity
from adgate.domain.value import IdentityId


class IdentityRepository(ABC):
    """Repository for Identity aggregate.

    Defines the contract for identity storage operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, identity_id: IdentityId) -> Identity | None:
        """Find an identity by ID.

        Args:
            identity_id: The identity's unique identifier

        Returns:
            The identity if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, identity: Identity) -> Identity:
        """Save an identity (create or update).

        Args:
            identity: The identity to save

        Returns:
            The saved identity
        """
        pass
