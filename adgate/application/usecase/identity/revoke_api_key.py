"""Revoke API key use case."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel

from adgate.application.usecase.base import BaseUseCase
from adgate.application.usecase.params import text_param
from adgate.domain.error import MalformedInputError, SharedIdentityError
from adgate.domain.service import CredentialService, IdentityService
from adgate.domain.value import Credential


class RevokeApiKeyRequest(BaseModel):
    """Revoke API key request."""

    credential: Credential | None = None
    key: Any = None  # Key to revoke (may be the presented one)


class RevokeApiKeyResponse(BaseModel):
    """Revoke API key response."""

    revoked: bool
    revoked_at: datetime | None


class RevokeApiKeyUseCase(BaseUseCase[RevokeApiKeyRequest, RevokeApiKeyResponse]):
    """Use case for revoking one of the caller's API keys.

    A revoked key never authenticates again, including for this identity's
    future requests.
    """

    def __init__(
        self,
        credential_service: CredentialService,
        identity_service: IdentityService,
    ) -> None:
        """Initialize revoke API key use case.

        Args:
            credential_service: Credential domain service
            identity_service: Identity domain service
        """
        self.credential_service = credential_service
        self.identity_service = identity_service

    async def execute(self, request: RevokeApiKeyRequest) -> RevokeApiKeyResponse:
        """Execute key revocation.

        Raises:
            InvalidCredentialError: If the credential is not acceptable
            SharedIdentityError: If presented with a shared PIN
            MalformedInputError: If no key to revoke is given
            NotFoundError: If the key does not exist
            NotAuthorizedError: If the key belongs to another identity
        """
        identity = await self.credential_service.verify(request.credential)
        if identity.is_shared:
            raise SharedIdentityError()

        key = text_param(request.key)
        if key is None:
            raise MalformedInputError()

        api_key = await self.identity_service.revoke_api_key(identity.id, key.strip())
        return RevokeApiKeyResponse(
            revoked=not api_key.active, revoked_at=api_key.revoked_at
        )
