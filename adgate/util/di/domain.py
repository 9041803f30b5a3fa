"""Domain layer DI providers."""

import logfire
from dishka import Scope, provide

from adgate.adapter.tiktok import TikTokPaymentClient
from adgate.config import AuthSettings, LinkSettings
from adgate.domain.repository import (
    AccountLinkRepository,
    ApiKeyRepository,
    IdentityRepository,
)
from adgate.domain.service import (
    AccountLinkService,
    ApiKeyVerifier,
    CredentialService,
    CredentialVerifier,
    IdentityLocks,
    IdentityService,
    JWTService,
    PaymentService,
    PinVerifier,
    SessionTokenVerifier,
)
from adgate.domain.value import CredentialScheme
from adgate.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with the repository lifecycle.
    The per-identity lock registry is process-wide.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide session token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_identity_service(
        self,
        identity_repository: IdentityRepository,
        api_key_repository: ApiKeyRepository,
        link_settings: LinkSettings,
    ) -> IdentityService:
        """Provide identity domain service."""
        return IdentityService(
            identity_repository=identity_repository,
            api_key_repository=api_key_repository,
            link_settings=link_settings,
        )

    @provide
    def get_credential_verifiers(
        self,
        auth_settings: AuthSettings,
        identity_repository: IdentityRepository,
        api_key_repository: ApiKeyRepository,
        jwt_service: JWTService,
    ) -> dict[CredentialScheme, CredentialVerifier]:
        """Provide verifiers for the enabled credential schemes.

        Args:
            auth_settings: Auth settings listing enabled schemes
            identity_repository: Identity repository
            api_key_repository: API key repository
            jwt_service: Session token service

        Returns:
            Dictionary mapping CredentialScheme to its verifier
        """
        available: dict[CredentialScheme, CredentialVerifier] = {
            CredentialScheme.PIN: PinVerifier(
                allowed_pins=auth_settings.pin_allowlist,
                identity_repository=identity_repository,
            ),
            CredentialScheme.API_KEY: ApiKeyVerifier(
                api_key_repository=api_key_repository,
                identity_repository=identity_repository,
            ),
            CredentialScheme.SESSION: SessionTokenVerifier(
                jwt_service=jwt_service,
                identity_repository=identity_repository,
            ),
        }
        enabled = {CredentialScheme(name) for name in auth_settings.enabled_schemes}
        return {
            scheme: verifier
            for scheme, verifier in available.items()
            if scheme in enabled
        }

    @provide
    def get_credential_service(
        self, verifiers: dict[CredentialScheme, CredentialVerifier]
    ) -> CredentialService:
        """Provide credential verification domain service."""
        return CredentialService(verifiers=verifiers)

    @provide(scope=Scope.APP)
    def get_identity_locks(self) -> IdentityLocks:
        """Provide the process-wide per-identity lock registry."""
        logfire.info("Identity lock registry created")
        return IdentityLocks()

    @provide
    def get_account_link_service(
        self,
        account_link_repository: AccountLinkRepository,
        identity_repository: IdentityRepository,
        identity_locks: IdentityLocks,
    ) -> AccountLinkService:
        """Provide account link domain service."""
        return AccountLinkService(
            account_link_repository=account_link_repository,
            identity_repository=identity_repository,
            identity_locks=identity_locks,
        )

    @provide
    def get_payment_service(
        self, payment_client: TikTokPaymentClient
    ) -> PaymentService:
        """Provide payment proxy domain service."""
        return PaymentService(payment_gateway=payment_client)
