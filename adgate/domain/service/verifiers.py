"""Credential verifiers, one per scheme."""

from uuid import UUID

import logfire

from adgate.domain.error import ConsistencyError, InvalidCredentialError
from adgate.domain.model import Identity
from adgate.domain.repository import ApiKeyRepository, IdentityRepository
from adgate.domain.value import (
    SHARED_IDENTITY_ID,
    ApiKeyCredential,
    CredentialScheme,
    IdentityId,
    PinCredential,
    SessionTokenCredential,
)
from adgate.util.jwt import JWTError

from .credential_service import CredentialVerifier
from .jwt_service import JWTService


class PinVerifier(CredentialVerifier):
    """Accepts any PIN from the configured allow-set as the shared identity."""

    scheme = CredentialScheme.PIN

    def __init__(
        self, allowed_pins: tuple[str, ...], identity_repository: IdentityRepository
    ) -> None:
        """Initialize PIN verifier.

        Args:
            allowed_pins: Configured PINs (already trimmed)
            identity_repository: Identity repository holding the shared identity
        """
        self.allowed_pins = frozenset(allowed_pins)
        self.identity_repository = identity_repository

    async def verify(self, credential: PinCredential) -> Identity:
        """Check PIN membership and resolve the shared identity."""
        pin = credential.pin.strip()
        if not pin or pin not in self.allowed_pins:
            logfire.info("PIN rejected")
            raise InvalidCredentialError()

        identity = await self.identity_repository.find_by_id(SHARED_IDENTITY_ID)
        if not identity:
            logfire.error("Shared identity missing from store")
            raise ConsistencyError("Shared identity is missing")
        return identity


class ApiKeyVerifier(CredentialVerifier):
    """Resolves an active issued API key to its bound identity."""

    scheme = CredentialScheme.API_KEY

    def __init__(
        self,
        api_key_repository: ApiKeyRepository,
        identity_repository: IdentityRepository,
    ) -> None:
        """Initialize API key verifier.

        Args:
            api_key_repository: API key repository
            identity_repository: Identity repository
        """
        self.api_key_repository = api_key_repository
        self.identity_repository = identity_repository

    async def verify(self, credential: ApiKeyCredential) -> Identity:
        """Look up the key, reject revoked keys and resolve the owner."""
        api_key = await self.api_key_repository.find_by_key(credential.key.strip())
        if not api_key:
            logfire.info("API key unknown")
            raise InvalidCredentialError()

        if not api_key.active:
            logfire.info("API key revoked", key_prefix=api_key.prefix)
            raise InvalidCredentialError()

        identity = await self.identity_repository.find_by_id(api_key.identity_id)
        if not identity:
            logfire.error(
                "API key bound to missing identity",
                key_prefix=api_key.prefix,
                identity_id=str(api_key.identity_id),
            )
            raise ConsistencyError(
                f"API key {api_key.id} is bound to a missing identity"
            )
        return identity


class SessionTokenVerifier(CredentialVerifier):
    """Resolves a signed, unexpired session token to its identity."""

    scheme = CredentialScheme.SESSION

    def __init__(
        self, jwt_service: JWTService, identity_repository: IdentityRepository
    ) -> None:
        """Initialize session token verifier.

        Args:
            jwt_service: JWT service holding the signing secret
            identity_repository: Identity repository
        """
        self.jwt_service = jwt_service
        self.identity_repository = identity_repository

    async def verify(self, credential: SessionTokenCredential) -> Identity:
        """Check signature and expiry, then resolve the asserted identity."""
        token = credential.token.strip()
        if not token:
            raise InvalidCredentialError()

        try:
            payload = self.jwt_service.verify_token(token)
            identity_id = IdentityId(UUID(payload.identity_id))
        except (JWTError, ValueError):
            raise InvalidCredentialError()

        identity = await self.identity_repository.find_by_id(identity_id)
        if not identity:
            logfire.info(
                "Session token for unknown identity", identity_id=str(identity_id)
            )
            raise InvalidCredentialError("Identity not found")
        return identity
