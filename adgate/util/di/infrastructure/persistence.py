"""Persistence infrastructure providers."""

from dishka import Scope, provide
import logfire

from adgate.config import LinkSettings
from adgate.domain.model import Identity
from adgate.domain.repository import (
    AccountLinkRepository,
    ApiKeyRepository,
    IdentityRepository,
)
from adgate.persistence.repository.inmemory import (
    InMemoryAccountLinkRepository,
    InMemoryApiKeyRepository,
    InMemoryIdentityRepository,
)
from adgate.util.di.base import ProviderBase


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider.

    State lives in process memory for the lifetime of the container, so every
    request sees the same identities, keys and links.
    """

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    def get_identity_repository(
        self, link_settings: LinkSettings
    ) -> IdentityRepository:
        """Provide Identity repository seeded with the shared PIN identity."""
        logfire.info(
            "Seeding shared identity", link_limit=link_settings.default_limit
        )
        return InMemoryIdentityRepository(
            seed=[Identity.shared(link_settings.default_limit)]
        )

    @provide(scope=Scope.APP)
    def get_api_key_repository(self) -> ApiKeyRepository:
        """Provide ApiKey repository."""
        return InMemoryApiKeyRepository()

    @provide(scope=Scope.APP)
    def get_account_link_repository(self) -> AccountLinkRepository:
        """Provide AccountLink repository."""
        return InMemoryAccountLinkRepository()
