"""Identity use cases."""

from adgate.application.usecase.identity.get_links import (
    GetLinksRequest,
    GetLinksResponse,
    GetLinksUseCase,
)
from adgate.application.usecase.identity.issue_api_key import (
    IssueApiKeyRequest,
    IssueApiKeyResponse,
    IssueApiKeyUseCase,
)
from adgate.application.usecase.identity.issue_session_token import (
    IssueSessionTokenRequest,
    IssueSessionTokenResponse,
    IssueSessionTokenUseCase,
)
from adgate.application.usecase.identity.register_identity import (
    RegisterIdentityRequest,
    RegisterIdentityResponse,
    RegisterIdentityUseCase,
)
from adgate.application.usecase.identity.revoke_api_key import (
    RevokeApiKeyRequest,
    RevokeApiKeyResponse,
    RevokeApiKeyUseCase,
)

__all__ = [
    "GetLinksRequest",
    "GetLinksResponse",
    "GetLinksUseCase",
    "IssueApiKeyRequest",
    "IssueApiKeyResponse",
    "IssueApiKeyUseCase",
    "IssueSessionTokenRequest",
    "IssueSessionTokenResponse",
    "IssueSessionTokenUseCase",
    "RegisterIdentityRequest",
    "RegisterIdentityResponse",
    "RegisterIdentityUseCase",
    "RevokeApiKeyRequest",
    "RevokeApiKeyResponse",
    "RevokeApiKeyUseCase",
]
