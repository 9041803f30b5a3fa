"""Register identity use case."""

from typing import Annotated

import logfire
from pydantic import BaseModel, StringConstraints

from adgate.application.usecase.base import BaseUseCase
from adgate.domain.service import IdentityService, JWTService


class RegisterIdentityRequest(BaseModel):
    """Register identity request."""

    name: Annotated[
        str, StringConstraints(strip_whitespace=True, min_length=1, max_length=100)
    ]


class RegisterIdentityResponse(BaseModel):
    """Register identity response.

    The session token and API key are only ever returned here.
    """

    identity_id: str
    name: str
    link_limit: int
    token: str
    api_key: str


class RegisterIdentityUseCase(
    BaseUseCase[RegisterIdentityRequest, RegisterIdentityResponse]
):
    """Use case for registering a new identity.

    Creates the identity with the configured link quota, issues its first API
    key and a session token.
    """

    def __init__(
        self, identity_service: IdentityService, jwt_service: JWTService
    ) -> None:
        """Initialize register identity use case.

        Args:
            identity_service: Identity domain service
            jwt_service: Session token domain service
        """
        self.identity_service = identity_service
        self.jwt_service = jwt_service

    async def execute(
        self, request: RegisterIdentityRequest
    ) -> RegisterIdentityResponse:
        """Execute registration flow.

        Args:
            request: Registration request

        Returns:
            New identity with its credentials
        """
        with logfire.span("register_identity.execute"):
            identity = await self.identity_service.register(request.name)
            api_key = await self.identity_service.issue_api_key(identity.id)
            token = self.jwt_service.create_token(str(identity.id), identity.name)

            return RegisterIdentityResponse(
                identity_id=str(identity.id),
                name=identity.name,
                link_limit=identity.link_limit,
                token=token,
                api_key=api_key.key,
            )
