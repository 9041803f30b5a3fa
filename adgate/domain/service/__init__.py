"""Domain services."""

from .base import Service
from .credential_service import CredentialService, CredentialVerifier
from .identity_service import IdentityService
from .jwt_service import JWTService
from .link_service import AccountLinkService, IdentityLocks
from .payment_service import PaymentGateway, PaymentService
from .verifiers import ApiKeyVerifier, PinVerifier, SessionTokenVerifier

__all__ = [
    "AccountLinkService",
    "ApiKeyVerifier",
    "CredentialService",
    "CredentialVerifier",
    "IdentityLocks",
    "IdentityService",
    "JWTService",
    "PaymentGateway",
    "PaymentService",
    "PinVerifier",
    "Service",
    "SessionTokenVerifier",
]
