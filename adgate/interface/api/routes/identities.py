"""Identity and API key routes."""

import logging
from typing import Annotated, Any

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header
from pydantic import BaseModel, StringConstraints

from adgate.application.usecase.identity import (
    GetLinksRequest,
    GetLinksResponse,
    GetLinksUseCase,
    IssueApiKeyRequest,
    IssueApiKeyResponse,
    IssueApiKeyUseCase,
    IssueSessionTokenRequest,
    IssueSessionTokenResponse,
    IssueSessionTokenUseCase,
    RegisterIdentityRequest,
    RegisterIdentityResponse,
    RegisterIdentityUseCase,
    RevokeApiKeyRequest,
    RevokeApiKeyResponse,
    RevokeApiKeyUseCase,
)
from adgate.interface.api.credentials import CredentialFields, extract_credential

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["identities"], route_class=DishkaRoute)


class RegisterBody(BaseModel):
    """Register request body."""

    name: Annotated[
        str, StringConstraints(strip_whitespace=True, min_length=1, max_length=100)
    ]


class RevokeBody(CredentialFields):
    """Revoke request body; ``key`` names the key to revoke."""

    key: Any = None


@router.post("/register", response_model=RegisterIdentityResponse)
async def register(
    body: RegisterBody,
    use_case: FromDishka[RegisterIdentityUseCase],
) -> RegisterIdentityResponse:
    """Register a new identity.

    The API key and session token in the response are not retrievable later.
    """
    result = await use_case.execute(RegisterIdentityRequest(name=body.name))
    logger.info(f"Registered identity {result.identity_id}")
    return result


@router.post("/token", response_model=IssueSessionTokenResponse)
async def issue_token(
    use_case: FromDishka[IssueSessionTokenUseCase],
    body: CredentialFields | None = None,
    authorization: str | None = Header(default=None),
) -> IssueSessionTokenResponse:
    """Exchange an API key (or a live session) for a fresh session token."""
    return await use_case.execute(
        IssueSessionTokenRequest(credential=extract_credential(body, authorization))
    )


@router.post("/keys", response_model=IssueApiKeyResponse)
async def issue_key(
    use_case: FromDishka[IssueApiKeyUseCase],
    body: CredentialFields | None = None,
    authorization: str | None = Header(default=None),
) -> IssueApiKeyResponse:
    """Issue an additional API key for the caller's identity."""
    result = await use_case.execute(
        IssueApiKeyRequest(credential=extract_credential(body, authorization))
    )
    logger.info(f"Issued API key for identity {result.identity_id}")
    return result


@router.post("/keys/revoke", response_model=RevokeApiKeyResponse)
async def revoke_key(
    use_case: FromDishka[RevokeApiKeyUseCase],
    body: RevokeBody | None = None,
    authorization: str | None = Header(default=None),
) -> RevokeApiKeyResponse:
    """Revoke one of the caller's API keys."""
    body = body or RevokeBody()
    return await use_case.execute(
        RevokeApiKeyRequest(
            credential=extract_credential(body, authorization), key=body.key
        )
    )


@router.post("/links", response_model=GetLinksResponse)
async def list_links(
    use_case: FromDishka[GetLinksUseCase],
    body: CredentialFields | None = None,
    authorization: str | None = Header(default=None),
) -> GetLinksResponse:
    """List the caller's linked ads accounts and remaining quota."""
    return await use_case.execute(
        GetLinksRequest(credential=extract_credential(body, authorization))
    )
