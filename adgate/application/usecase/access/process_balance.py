"""Process balance use case."""

from typing import Any

import logfire
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from adgate.application.usecase.base import BaseUseCase
from adgate.application.usecase.params import (
    account_id_param,
    amount_param,
    text_param,
)
from adgate.domain.error import LimitReachedError, MalformedInputError
from adgate.domain.service import (
    AccountLinkService,
    CredentialService,
    PaymentService,
)
from adgate.domain.value import (
    Credential,
    ExternalAccountId,
    LinkOutcome,
    PaymentRequest,
    RequestStage,
    UpstreamTokens,
)


class ProcessBalanceRequest(BaseModel):
    """Process balance request.

    Payment fields are the raw JSON values. They are validated after the
    credential check, and every malformed value yields the same error.
    """

    credential: Credential | None = None
    ads_id: Any = None
    amount: Any = None
    csrftoken: Any = None
    mstoken: Any = None
    cookies: Any = None


class ProcessBalanceResponse(BaseModel):
    """Process balance response."""

    redirect_url: str
    link_outcome: LinkOutcome
    stage: RequestStage = RequestStage.RESPONDED


class ProcessBalanceUseCase(
    BaseUseCase[ProcessBalanceRequest, ProcessBalanceResponse]
):
    """Use case for topping up an ads account balance through the payment API.

    One pass through: Received -> CredentialChecked -> LinkEnsured ->
    ProxyCompleted -> Responded. Any stage may fail straight to Responded. The link is
    recorded before the upstream call and stays recorded if the call fails.
    """

    def __init__(
        self,
        credential_service: CredentialService,
        link_service: AccountLinkService,
        payment_service: PaymentService,
    ) -> None:
        """Initialize process balance use case.

        Args:
            credential_service: Credential domain service
            link_service: Account link domain service
            payment_service: Payment proxy domain service
        """
        self.credential_service = credential_service
        self.link_service = link_service
        self.payment_service = payment_service

    async def execute(self, request: ProcessBalanceRequest) -> ProcessBalanceResponse:
        """Execute process balance flow.

        Steps:
        1. Verify credential
        2. Validate payment parameters
        3. Ensure the ads account is linked within quota
        4. Forward the payment to the upstream API

        Args:
            request: Payment request with credential and upstream tokens

        Returns:
            Redirect URL for the client

        Raises:
            InvalidCredentialError: If the credential is not acceptable
            MalformedInputError: If payment parameters are missing or invalid
            LimitReachedError: If a new account would exceed the quota
            ConsistencyError: If stored state is corrupt
            UpstreamUnreachableError: If the payment API could not be reached
            UpstreamRejectedError: If the payment API declined
        """
        stage = RequestStage.RECEIVED
        with logfire.span("process_balance.execute") as span:
            try:
                identity = await self.credential_service.verify(request.credential)
                stage = RequestStage.CREDENTIAL_CHECKED

                payment_request = self._build_payment_request(request)

                result = await self.link_service.ensure_linked(
                    identity, payment_request.external_account_id
                )
                if not result.succeeded:
                    raise LimitReachedError(result.limit)
                stage = RequestStage.LINK_ENSURED

                target = await self.payment_service.initiate(identity, payment_request)
                stage = RequestStage.PROXY_COMPLETED
            except Exception as e:
                logfire.info(
                    "Process balance failed",
                    stage=stage.value,
                    error_type=type(e).__name__,
                )
                raise
            finally:
                span.set_attribute("stage_reached", stage.value)
                stage = RequestStage.RESPONDED
                span.set_attribute("stage", stage.value)

            return ProcessBalanceResponse(
                redirect_url=target.url, link_outcome=result.outcome
            )

    @staticmethod
    def _build_payment_request(request: ProcessBalanceRequest) -> PaymentRequest:
        """Validate raw parameters into a payment request.

        Raises:
            MalformedInputError: If any parameter is missing or invalid
        """
        ads_id = account_id_param(request.ads_id)
        amount = amount_param(request.amount)
        csrftoken = text_param(request.csrftoken)
        mstoken = text_param(request.mstoken)
        cookies = text_param(request.cookies)
        if not ads_id or amount is None or not csrftoken or not mstoken:
            raise MalformedInputError()

        try:
            return PaymentRequest(
                external_account_id=ExternalAccountId(ads_id),
                amount=amount,
                upstream_tokens=UpstreamTokens(
                    csrftoken=csrftoken, mstoken=mstoken, cookies=cookies
                ),
            )
        except (PydanticValidationError, ArithmeticError):
            raise MalformedInputError()
