"""Payment proxy domain service."""

import logfire

from adgate.domain.model import Identity
from adgate.domain.value import PaymentRequest, RedirectTarget

from .base import Service


class PaymentGateway:
    """Generic interface to the external payment API."""

    async def initiate_payment(self, request: PaymentRequest) -> RedirectTarget:
        """Send one payment-initiation request upstream.

        Args:
            request: Shaped payment request

        Returns:
            Redirect target returned by the upstream

        Raises:
            UpstreamUnreachableError: On transport failure or error status
            UpstreamRejectedError: If the upstream declined the request
        """
        raise NotImplementedError


class PaymentService(Service):
    """Domain service forwarding payment initiations to the external API.

    Each call is a single fresh attempt: no retries, no caching and no
    idempotency key. Callers re-invoking after an ambiguous failure accept
    a possible double submission upstream.
    """

    def __init__(self, payment_gateway: PaymentGateway) -> None:
        """Initialize payment service.

        Args:
            payment_gateway: External payment API client
        """
        self.payment_gateway = payment_gateway

    async def initiate(
        self, identity: Identity, request: PaymentRequest
    ) -> RedirectTarget:
        """Initiate a payment for an authorized, linked identity.

        Args:
            identity: Identity the account is linked to
            request: Payment request

        Returns:
            Redirect target for the client

        Raises:
            UpstreamUnreachableError: On transport failure or error status
            UpstreamRejectedError: If the upstream declined the request
        """
        with logfire.span(
            "payment_service.initiate",
            identity_id=str(identity.id),
            external_account_id=request.external_account_id.root,
            amount=request.formatted_amount,
        ):
            try:
                target = await self.payment_gateway.initiate_payment(request)
            except Exception as e:
                logfire.warn(
                    "Payment initiation failed",
                    identity_id=str(identity.id),
                    error_type=type(e).__name__,
                    error=str(e),
                )
                raise
            logfire.info(
                "Payment initiated",
                identity_id=str(identity.id),
                external_account_id=request.external_account_id.root,
            )
            return target
