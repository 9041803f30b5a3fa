"""Verify access use case."""

from typing import Any

import logfire
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from adgate.application.usecase.base import BaseUseCase
from adgate.application.usecase.params import account_id_param
from adgate.domain.error import LimitReachedError, MalformedInputError
from adgate.domain.service import AccountLinkService, CredentialService
from adgate.domain.value import Credential, ExternalAccountId, LinkOutcome


class VerifyAccessRequest(BaseModel):
    """Verify access request."""

    credential: Credential | None = None
    ads_id: Any = None  # Blank or missing skips linking


class VerifyAccessResponse(BaseModel):
    """Verify access response."""

    identity_id: str
    link_outcome: LinkOutcome | None = None
    linked_account_count: int
    link_limit: int


class VerifyAccessUseCase(BaseUseCase[VerifyAccessRequest, VerifyAccessResponse]):
    """Use case for the extension's access check.

    Verifies the credential and, when an ads account is given, ensures it is
    linked within the identity's quota.
    """

    def __init__(
        self,
        credential_service: CredentialService,
        link_service: AccountLinkService,
    ) -> None:
        """Initialize verify access use case.

        Args:
            credential_service: Credential domain service
            link_service: Account link domain service
        """
        self.credential_service = credential_service
        self.link_service = link_service

    async def execute(self, request: VerifyAccessRequest) -> VerifyAccessResponse:
        """Execute verify access flow.

        Args:
            request: Request with credential and optional ads account

        Returns:
            Verification result with link state

        Raises:
            InvalidCredentialError: If the credential is not acceptable
            MalformedInputError: If the ads account id is mistyped or too long
            LimitReachedError: If a new account would exceed the quota
            ConsistencyError: If stored state is corrupt
        """
        with logfire.span("verify_access.execute"):
            identity = await self.credential_service.verify(request.credential)

            ads_id = account_id_param(request.ads_id)
            if ads_id is None:
                return VerifyAccessResponse(
                    identity_id=str(identity.id),
                    linked_account_count=identity.linked_account_count,
                    link_limit=identity.link_limit,
                )

            try:
                external_account_id = ExternalAccountId(ads_id)
            except PydanticValidationError:
                raise MalformedInputError()

            result = await self.link_service.ensure_linked(
                identity, external_account_id
            )
            if not result.succeeded:
                raise LimitReachedError(result.limit)

            return VerifyAccessResponse(
                identity_id=str(identity.id),
                link_outcome=result.outcome,
                linked_account_count=result.linked_account_count,
                link_limit=result.limit,
            )
