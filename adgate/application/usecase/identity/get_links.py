"""Get linked accounts use case."""

from datetime import datetime

from pydantic import BaseModel

from adgate.application.usecase.base import BaseUseCase
from adgate.domain.service import AccountLinkService, CredentialService
from adgate.domain.value import Credential


class GetLinksRequest(BaseModel):
    """Get linked accounts request."""

    credential: Credential | None = None


class LinkedAccountInfo(BaseModel):
    """Linked account information for response."""

    ads_id: str
    linked_at: datetime


class GetLinksResponse(BaseModel):
    """Get linked accounts response."""

    identity_id: str
    linked_accounts: list[LinkedAccountInfo]
    linked_account_count: int
    link_limit: int


class GetLinksUseCase(BaseUseCase[GetLinksRequest, GetLinksResponse]):
    """Use case for listing the caller's linked ads accounts and quota."""

    def __init__(
        self,
        credential_service: CredentialService,
        link_service: AccountLinkService,
    ) -> None:
        """Initialize get links use case.

        Args:
            credential_service: Credential domain service
            link_service: Account link domain service
        """
        self.credential_service = credential_service
        self.link_service = link_service

    async def execute(self, request: GetLinksRequest) -> GetLinksResponse:
        """Execute link listing.

        Raises:
            InvalidCredentialError: If the credential is not acceptable
        """
        identity = await self.credential_service.verify(request.credential)
        links = await self.link_service.list_links(identity.id)

        return GetLinksResponse(
            identity_id=str(identity.id),
            linked_accounts=[
                LinkedAccountInfo(
                    ads_id=link.external_account_id.root,
                    linked_at=link.created_at,
                )
                for link in links
            ],
            linked_account_count=identity.linked_account_count,
            link_limit=identity.link_limit,
        )
