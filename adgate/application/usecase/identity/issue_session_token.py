"""Issue session token use case."""

from pydantic import BaseModel

from adgate.application.usecase.base import BaseUseCase
from adgate.domain.error import SharedIdentityError
from adgate.domain.service import CredentialService, JWTService
from adgate.domain.value import Credential


class IssueSessionTokenRequest(BaseModel):
    """Issue session token request."""

    credential: Credential | None = None


class IssueSessionTokenResponse(BaseModel):
    """Issue session token response."""

    identity_id: str
    token: str


class IssueSessionTokenUseCase(
    BaseUseCase[IssueSessionTokenRequest, IssueSessionTokenResponse]
):
    """Use case for exchanging an API key (or a live session) for a new token."""

    def __init__(
        self, credential_service: CredentialService, jwt_service: JWTService
    ) -> None:
        """Initialize issue session token use case.

        Args:
            credential_service: Credential domain service
            jwt_service: Session token domain service
        """
        self.credential_service = credential_service
        self.jwt_service = jwt_service

    async def execute(
        self, request: IssueSessionTokenRequest
    ) -> IssueSessionTokenResponse:
        """Execute token exchange.

        Raises:
            InvalidCredentialError: If the credential is not acceptable
            SharedIdentityError: If presented with a shared PIN
        """
        identity = await self.credential_service.verify(request.credential)
        if identity.is_shared:
            raise SharedIdentityError()

        token = self.jwt_service.create_token(str(identity.id), identity.name)
        return IssueSessionTokenResponse(identity_id=str(identity.id), token=token)
