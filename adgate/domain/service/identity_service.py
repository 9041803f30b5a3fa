"""Identity domain service."""

import secrets
from datetime import datetime
from uuid import uuid4

import logfire

from adgate.config import LinkSettings
from adgate.domain.error import NotAuthorizedError, NotFoundError
from adgate.domain.model import ApiKey, Identity
from adgate.domain.model.api_key import API_KEY_PREFIX, redact_key
from adgate.domain.repository import ApiKeyRepository, IdentityRepository
from adgate.domain.value import ApiKeyId, IdentityId

from .base import Service


def generate_api_key() -> str:
    """Generate an opaque, URL-safe API key."""
    return API_KEY_PREFIX + secrets.token_urlsafe(32)


class IdentityService(Service):
    """Domain service for identities and their issued API keys."""

    def __init__(
        self,
        identity_repository: IdentityRepository,
        api_key_repository: ApiKeyRepository,
        link_settings: LinkSettings,
    ) -> None:
        """Initialize identity service.

        Args:
            identity_repository: Identity repository
            api_key_repository: API key repository
            link_settings: Link quota settings
        """
        self.identity_repository = identity_repository
        self.api_key_repository = api_key_repository
        self.link_settings = link_settings

    async def register(self, name: str, link_limit: int | None = None) -> Identity:
        """Register a new identity.

        Args:
            name: Display name
            link_limit: Link quota (defaults to the configured limit)

        Returns:
            Created identity
        """
        with logfire.span("identity_service.register", name=name):
            identity = Identity(
                id=IdentityId(uuid4()),
                name=name,
                link_limit=link_limit or self.link_settings.default_limit,
            )
            saved = await self.identity_repository.save(identity)
            logfire.info(
                "Identity registered",
                identity_id=str(saved.id),
                link_limit=saved.link_limit,
            )
            return saved

    async def get_by_id(self, identity_id: IdentityId) -> Identity:
        """Get identity by ID.

        Args:
            identity_id: Identity ID

        Returns:
            Identity entity

        Raises:
            NotFoundError: If identity not found
        """
        with logfire.span("identity_service.get_by_id", identity_id=str(identity_id)):
            identity = await self.identity_repository.find_by_id(identity_id)
            if not identity:
                logfire.warn("Identity not found", identity_id=str(identity_id))
                raise NotFoundError("Identity", str(identity_id))
            return identity

    async def issue_api_key(self, identity_id: IdentityId) -> ApiKey:
        """Issue a new API key bound to an identity.

        Args:
            identity_id: Identity that will own the key

        Returns:
            The issued key record (its ``key`` is shown to the caller once)

        Raises:
            NotFoundError: If identity not found
        """
        with logfire.span(
            "identity_service.issue_api_key", identity_id=str(identity_id)
        ):
            # Keys are only ever bound to identities that exist
            await self.get_by_id(identity_id)

            api_key = ApiKey(
                id=ApiKeyId(uuid4()),
                key=generate_api_key(),
                identity_id=identity_id,
            )
            saved = await self.api_key_repository.save(api_key)
            logfire.info(
                "API key issued",
                identity_id=str(identity_id),
                key_prefix=saved.prefix,
            )
            return saved

    async def revoke_api_key(self, identity_id: IdentityId, key: str) -> ApiKey:
        """Revoke one of an identity's API keys.

        Revoking an already revoked key is a no-op.

        Args:
            identity_id: Identity requesting the revocation
            key: The key to revoke

        Returns:
            The revoked key record

        Raises:
            NotFoundError: If the key does not exist
            NotAuthorizedError: If the key belongs to another identity
        """
        with logfire.span(
            "identity_service.revoke_api_key", identity_id=str(identity_id)
        ):
            api_key = await self.api_key_repository.find_by_key(key)
            if not api_key:
                logfire.warn("API key not found for revocation")
                raise NotFoundError("ApiKey", redact_key(key))

            if api_key.identity_id != identity_id:
                logfire.warn(
                    "API key revocation by non-owner",
                    identity_id=str(identity_id),
                    key_prefix=api_key.prefix,
                )
                raise NotAuthorizedError("ApiKey", api_key.prefix, str(identity_id))

            if not api_key.active:
                return api_key

            revoked = api_key.updated(active=False, revoked_at=datetime.now())
            saved = await self.api_key_repository.save(revoked)
            logfire.info(
                "API key revoked",
                identity_id=str(identity_id),
                key_prefix=saved.prefix,
            )
            return saved

