"""API key repository interface."""

from abc import ABC, abstractmethod

from adgate.domain.model.api_key import ApiKey


class ApiKeyRepository(ABC):
    """Repository for ApiKey entity."""

    @abstractmethod
    async def find_by_key(self, key: str) -> ApiKey | None:
        """Find an API key record by its secret value.

        Args:
            key: The presented key

        Returns:
            The key record if found (active or not), None otherwise
        """
        pass

    @abstractmethod
    async def save(self, api_key: ApiKey) -> ApiKey:
        """Save an API key (create or update).

        Args:
            api_key: The key record to save

        Returns:
            The saved key record
        """
        pass
