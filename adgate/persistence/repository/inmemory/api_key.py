"""In-memory API key repository."""

from typing import Optional

from adgate.domain.model.api_key import ApiKey
from adgate.domain.repository.api_key import ApiKeyRepository


class InMemoryApiKeyRepository(ApiKeyRepository):
    """In-memory implementation of ApiKeyRepository."""

    def __init__(self) -> None:
        self._keys: dict[str, ApiKey] = {}

    async def find_by_key(self, key: str) -> Optional[ApiKey]:
        """Find a key record by its secret value."""
        return self._keys.get(key)

    async def save(self, api_key: ApiKey) -> ApiKey:
        """Save or update a key record."""
        self._keys[api_key.key] = api_key
        return api_key
