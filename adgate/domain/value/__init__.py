"""Domain value objects for the gateway."""

from adgate.domain.value.identifiers import SHARED_IDENTITY_ID, ApiKeyId, IdentityId
from adgate.domain.value.types import (
    ApiKeyCredential,
    Credential,
    CredentialScheme,
    ExternalAccountId,
    LinkOutcome,
    LinkResult,
    PaymentRequest,
    PinCredential,
    RedirectTarget,
    RequestStage,
    SessionTokenCredential,
    UpstreamTokens,
)

__all__ = [
    # Identifiers
    "IdentityId",
    "ApiKeyId",
    "SHARED_IDENTITY_ID",
    # Types
    "CredentialScheme",
    "Credential",
    "PinCredential",
    "ApiKeyCredential",
    "SessionTokenCredential",
    "ExternalAccountId",
    "LinkOutcome",
    "LinkResult",
    "UpstreamTokens",
    "PaymentRequest",
    "RedirectTarget",
    "RequestStage",
]
