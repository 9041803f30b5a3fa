"""Application layer DI providers."""

from dishka import Scope, provide

from adgate.application.usecase.access import (
    ProcessBalanceUseCase,
    VerifyAccessUseCase,
)
from adgate.application.usecase.identity import (
    GetLinksUseCase,
    IssueApiKeyUseCase,
    IssueSessionTokenUseCase,
    RegisterIdentityUseCase,
    RevokeApiKeyUseCase,
)
from adgate.domain.service import (
    AccountLinkService,
    CredentialService,
    IdentityService,
    JWTService,
    PaymentService,
)
from adgate.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Access use cases
    @provide(scope=Scope.REQUEST)
    def get_verify_access_use_case(
        self,
        credential_service: CredentialService,
        link_service: AccountLinkService,
    ) -> VerifyAccessUseCase:
        """Provide verify access use case."""
        return VerifyAccessUseCase(
            credential_service=credential_service,
            link_service=link_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_process_balance_use_case(
        self,
        credential_service: CredentialService,
        link_service: AccountLinkService,
        payment_service: PaymentService,
    ) -> ProcessBalanceUseCase:
        """Provide process balance use case."""
        return ProcessBalanceUseCase(
            credential_service=credential_service,
            link_service=link_service,
            payment_service=payment_service,
        )

    # Identity use cases
    @provide(scope=Scope.REQUEST)
    def get_register_identity_use_case(
        self, identity_service: IdentityService, jwt_service: JWTService
    ) -> RegisterIdentityUseCase:
        """Provide register identity use case."""
        return RegisterIdentityUseCase(
            identity_service=identity_service, jwt_service=jwt_service
        )

    @provide(scope=Scope.REQUEST)
    def get_issue_session_token_use_case(
        self, credential_service: CredentialService, jwt_service: JWTService
    ) -> IssueSessionTokenUseCase:
        """Provide issue session token use case."""
        return IssueSessionTokenUseCase(
            credential_service=credential_service, jwt_service=jwt_service
        )

    @provide(scope=Scope.REQUEST)
    def get_issue_api_key_use_case(
        self,
        credential_service: CredentialService,
        identity_service: IdentityService,
    ) -> IssueApiKeyUseCase:
        """Provide issue API key use case."""
        return IssueApiKeyUseCase(
            credential_service=credential_service,
            identity_service=identity_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_revoke_api_key_use_case(
        self,
        credential_service: CredentialService,
        identity_service: IdentityService,
    ) -> RevokeApiKeyUseCase:
        """Provide revoke API key use case."""
        return RevokeApiKeyUseCase(
            credential_service=credential_service,
            identity_service=identity_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_links_use_case(
        self,
        credential_service: CredentialService,
        link_service: AccountLinkService,
    ) -> GetLinksUseCase:
        """Provide get links use case."""
        return GetLinksUseCase(
            credential_service=credential_service, link_service=link_service
        )
