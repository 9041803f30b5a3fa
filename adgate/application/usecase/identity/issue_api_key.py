"""Issue API key use case."""

from pydantic import BaseModel

from adgate.application.usecase.base import BaseUseCase
from adgate.domain.error import SharedIdentityError
from adgate.domain.service import CredentialService, IdentityService
from adgate.domain.value import Credential


class IssueApiKeyRequest(BaseModel):
    """Issue API key request."""

    credential: Credential | None = None


class IssueApiKeyResponse(BaseModel):
    """Issue API key response."""

    identity_id: str
    api_key: str


class IssueApiKeyUseCase(BaseUseCase[IssueApiKeyRequest, IssueApiKeyResponse]):
    """Use case for issuing an additional API key to the caller's identity."""

    def __init__(
        self,
        credential_service: CredentialService,
        identity_service: IdentityService,
    ) -> None:
        """Initialize issue API key use case.

        Args:
            credential_service: Credential domain service
            identity_service: Identity domain service
        """
        self.credential_service = credential_service
        self.identity_service = identity_service

    async def execute(self, request: IssueApiKeyRequest) -> IssueApiKeyResponse:
        """Execute key issuance.

        Raises:
            InvalidCredentialError: If the credential is not acceptable
            SharedIdentityError: If presented with a shared PIN
        """
        identity = await self.credential_service.verify(request.credential)
        if identity.is_shared:
            raise SharedIdentityError()

        api_key = await self.identity_service.issue_api_key(identity.id)
        return IssueApiKeyResponse(identity_id=str(identity.id), api_key=api_key.key)
